"""Add-friend panel endpoints"""

from fastapi import APIRouter, Depends

from friendsplit.api.deps import get_session
from friendsplit.schemas.forms import AddFriendFormState, AddFriendFormUpdate
from friendsplit.schemas.session import SessionStateResponse
from friendsplit.services.session_service import SplitterSession

router = APIRouter(prefix="/add-friend", tags=["Add friend"])


@router.post("/toggle", response_model=SessionStateResponse)
async def toggle_add_friend_panel(session: SplitterSession = Depends(get_session)):
    """
    Open or close the add-friend panel.

    Opening the panel clears the selected friend, which closes the
    split-bill form.
    """
    session.toggle_add_friend_panel()
    return SessionStateResponse.from_session(session)


@router.patch("/form", response_model=AddFriendFormState)
async def update_add_friend_form(
    form_data: AddFriendFormUpdate, session: SplitterSession = Depends(get_session)
):
    """Edit the add-friend draft"""
    form = session.add_friend_form
    if form_data.name is not None:
        form.set_name(form_data.name)
    if form_data.image is not None:
        form.set_image(form_data.image)

    return AddFriendFormState.model_validate(form)


@router.post("/submit", response_model=SessionStateResponse)
async def submit_add_friend(session: SplitterSession = Depends(get_session)):
    """
    Submit the add-friend draft.

    On success the new friend is appended with a zero balance, the draft is
    reset and the panel closes. An empty name or image is ignored and the
    unchanged state is returned.
    """
    session.submit_add_friend()
    return SessionStateResponse.from_session(session)
