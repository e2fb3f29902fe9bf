"""Session state schemas"""

from typing import List, Optional

from pydantic import BaseModel

from friendsplit.schemas.forms import AddFriendFormState, SplitBillFormState
from friendsplit.schemas.friend import FriendResponse
from friendsplit.services.session_service import SplitterSession


class SessionStateResponse(BaseModel):
    """Everything the UI needs to render"""

    friends: List[FriendResponse]
    selected_friend: Optional[FriendResponse] = None
    show_add_friend_panel: bool
    add_friend_form: AddFriendFormState
    split_bill_form: Optional[SplitBillFormState] = None

    @classmethod
    def from_session(cls, session: SplitterSession) -> "SessionStateResponse":
        selected = session.selected_friend
        selected_id = selected.id if selected else None
        split_form = session.split_bill_form

        return cls(
            friends=[FriendResponse.from_friend(f, selected_id) for f in session.friends],
            selected_friend=FriendResponse.from_friend(selected, selected_id) if selected else None,
            show_add_friend_panel=session.show_add_friend_panel,
            add_friend_form=AddFriendFormState.model_validate(session.add_friend_form),
            split_bill_form=SplitBillFormState.model_validate(split_form) if split_form else None,
        )
