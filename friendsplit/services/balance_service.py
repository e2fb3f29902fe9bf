"""Balance presentation logic"""

from decimal import Decimal
from typing import Iterable

from friendsplit.models.friend import BalanceStatus, Friend
from friendsplit.schemas.balance import BalanceSummary
from friendsplit.utils.decimal_utils import (format_amount, round_decimal,
                                             sum_decimals)


class BalanceService:
    """Service for reading friend balances"""

    @staticmethod
    def balance_status(balance: Decimal) -> BalanceStatus:
        """
        Classify a balance.

        Args:
            balance: Signed friend balance

        Returns:
            YOU_OWE if negative, OWES_YOU if positive, EVEN if zero
        """
        if balance < 0:
            return BalanceStatus.YOU_OWE
        if balance > 0:
            return BalanceStatus.OWES_YOU
        return BalanceStatus.EVEN

    @staticmethod
    def describe_balance(friend: Friend) -> str:
        """Human readable sentence for a friend's balance"""
        status = BalanceService.balance_status(friend.balance)
        amount = format_amount(abs(friend.balance))

        if status == BalanceStatus.YOU_OWE:
            return f"You owe {friend.name} ${amount}"
        if status == BalanceStatus.OWES_YOU:
            return f"{friend.name} owes you ${amount}"
        return f"You and {friend.name} are even"

    @staticmethod
    def get_balance_summary(friends: Iterable[Friend]) -> BalanceSummary:
        """
        Get balance summary across all friends.

        Args:
            friends: Friends to summarize

        Returns:
            BalanceSummary object
        """
        owed_to_you = []
        you_owe = []

        for friend in friends:
            status = BalanceService.balance_status(friend.balance)
            if status == BalanceStatus.OWES_YOU:
                owed_to_you.append(friend.balance)
            elif status == BalanceStatus.YOU_OWE:
                you_owe.append(abs(friend.balance))

        total_owed_to_you = sum_decimals(owed_to_you)
        total_you_owe = sum_decimals(you_owe)

        return BalanceSummary(
            overall_balance=round_decimal(total_owed_to_you - total_you_owe),
            total_you_owe=round_decimal(total_you_owe),
            total_owed_to_you=round_decimal(total_owed_to_you),
            num_people_you_owe=len(you_owe),
            num_people_owe_you=len(owed_to_you),
        )
