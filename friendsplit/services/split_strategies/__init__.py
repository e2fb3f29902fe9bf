"""Bill split strategies"""

from friendsplit.core.exceptions import ValidationError
from friendsplit.models.payer import Payer
from friendsplit.services.split_strategies.base import (BaseSplitStrategy,
                                                        paid_by_friend)
from friendsplit.services.split_strategies.friend_paid import \
    FriendPaidStrategy
from friendsplit.services.split_strategies.user_paid import UserPaidStrategy


def get_split_strategy(payer: Payer) -> BaseSplitStrategy:
    """
    Get appropriate split strategy based on who pays the bill.

    Args:
        payer: Who is paying (USER or FRIEND)

    Returns:
        Instance of appropriate strategy

    Raises:
        ValidationError: If payer is not recognized
    """
    strategies = {
        Payer.USER: UserPaidStrategy(),
        Payer.FRIEND: FriendPaidStrategy(),
    }

    strategy = strategies.get(payer)
    if strategy is None:
        raise ValidationError(f"Unknown payer: {payer}")

    return strategy


__all__ = [
    "BaseSplitStrategy",
    "UserPaidStrategy",
    "FriendPaidStrategy",
    "get_split_strategy",
    "paid_by_friend",
]
