"""Session state endpoint"""

from fastapi import APIRouter, Depends

from friendsplit.api.deps import get_session
from friendsplit.schemas.session import SessionStateResponse
from friendsplit.services.session_service import SplitterSession

router = APIRouter(prefix="/state", tags=["State"])


@router.get("", response_model=SessionStateResponse)
async def get_state(session: SplitterSession = Depends(get_session)):
    """
    Get the full session state.

    Includes the friend list, the selected friend, whether the add-friend
    panel is open, and both form drafts (the split-bill draft only while a
    friend is selected).
    """
    return SessionStateResponse.from_session(session)
