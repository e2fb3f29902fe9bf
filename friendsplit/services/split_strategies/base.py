"""Base strategy interface"""

from abc import ABC, abstractmethod
from decimal import Decimal


def paid_by_friend(bill: Decimal, paid_by_user: Decimal) -> Decimal:
    """Friend's share of the bill; zero until the user's share is filled in"""
    return bill - paid_by_user if paid_by_user != 0 else Decimal("0")


class BaseSplitStrategy(ABC):
    """Base class for split strategies"""

    @abstractmethod
    def calculate_delta(self, bill: Decimal, paid_by_user: Decimal) -> Decimal:
        """
        Calculate the signed change to the friend's balance.

        Args:
            bill: Total bill value
            paid_by_user: The user's own expense

        Returns:
            Amount to add to the friend's balance
            (positive = friend now owes the user more)
        """
        pass
