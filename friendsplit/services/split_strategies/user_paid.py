"""User pays the bill"""

from decimal import Decimal

from friendsplit.services.split_strategies.base import (BaseSplitStrategy,
                                                        paid_by_friend)
from friendsplit.utils.decimal_utils import round_decimal


class UserPaidStrategy(BaseSplitStrategy):
    """The user covered the whole bill, so the friend owes their share"""

    def calculate_delta(self, bill: Decimal, paid_by_user: Decimal) -> Decimal:
        return round_decimal(paid_by_friend(bill, paid_by_user))
