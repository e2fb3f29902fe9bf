"""Friend pays the bill"""

from decimal import Decimal

from friendsplit.services.split_strategies.base import BaseSplitStrategy
from friendsplit.utils.decimal_utils import round_decimal


class FriendPaidStrategy(BaseSplitStrategy):
    """The friend covered the whole bill, so the user owes their own share"""

    def calculate_delta(self, bill: Decimal, paid_by_user: Decimal) -> Decimal:
        return round_decimal(-paid_by_user)
