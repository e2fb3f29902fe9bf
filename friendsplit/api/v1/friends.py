"""Friend endpoints"""

from fastapi import APIRouter, Depends, HTTPException, status

from friendsplit.api.deps import get_session
from friendsplit.core.exceptions import NotFoundError
from friendsplit.schemas.balance import BalanceSummary
from friendsplit.schemas.friend import FriendListResponse, FriendResponse
from friendsplit.schemas.session import SessionStateResponse
from friendsplit.services.balance_service import BalanceService
from friendsplit.services.session_service import SplitterSession

router = APIRouter(prefix="/friends", tags=["Friends"])


@router.get("", response_model=FriendListResponse)
async def list_friends(session: SplitterSession = Depends(get_session)):
    """
    Get all friends in display order.

    Seed friends come first, then friends added during the session.
    """
    selected_id = session.selection.selected_id
    items = [FriendResponse.from_friend(f, selected_id) for f in session.friends]
    return FriendListResponse(items=items, total_items=len(items))


@router.get("/summary", response_model=BalanceSummary)
async def get_balance_summary(session: SplitterSession = Depends(get_session)):
    """
    Get balance summary across all friends.

    Provides:
    - Overall balance (positive = owed money, negative = owes money)
    - Total amount owed to the user
    - Total amount the user owes
    - Number of friends in each direction
    """
    return BalanceService.get_balance_summary(session.friends)


@router.get("/{friend_id}", response_model=FriendResponse)
async def get_friend(friend_id: str, session: SplitterSession = Depends(get_session)):
    """
    Get friend details by ID.

    Raises:
        404: If friend not found
    """
    try:
        friend = session.get_friend(friend_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

    return FriendResponse.from_friend(friend, session.selection.selected_id)


@router.post("/{friend_id}/select", response_model=SessionStateResponse)
async def select_friend(friend_id: str, session: SplitterSession = Depends(get_session)):
    """
    Select a friend to split a bill with.

    Selecting the friend that is already selected deselects it. Selecting
    also closes the add-friend panel.

    Raises:
        404: If friend not found
    """
    try:
        friend = session.get_friend(friend_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

    session.select_friend(friend)
    return SessionStateResponse.from_session(session)
