"""Friend schemas"""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from friendsplit.models.friend import BalanceStatus, Friend
from friendsplit.services.balance_service import BalanceService


class FriendResponse(BaseModel):
    """Schema for a friend in the list"""

    id: str
    name: str
    image: str
    balance: Decimal
    status: BalanceStatus
    description: str
    is_selected: bool = False

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_friend(cls, friend: Friend, selected_id: Optional[str] = None) -> "FriendResponse":
        return cls(
            id=friend.id,
            name=friend.name,
            image=friend.image,
            balance=friend.balance,
            status=BalanceService.balance_status(friend.balance),
            description=BalanceService.describe_balance(friend),
            is_selected=friend.id == selected_id,
        )


class FriendListResponse(BaseModel):
    """Response schema for the friend list"""

    items: List[FriendResponse]
    total_items: int = Field(..., ge=0)
