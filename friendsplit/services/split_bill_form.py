"""Split-bill form draft"""
import logging
from decimal import Decimal
from typing import Optional, Union

from friendsplit.models.friend import Friend
from friendsplit.models.payer import Payer
from friendsplit.repositories.friend_repository import FriendRepository
from friendsplit.services.selection_service import SelectionTracker
from friendsplit.services.split_strategies import (get_split_strategy,
                                                   paid_by_friend)
from friendsplit.utils.decimal_utils import to_decimal

logger = logging.getLogger(__name__)

Amount = Union[Decimal, int, float, str]


class SplitBillForm:
    """
    Draft state of the split-bill form for one friend.

    A form belongs to the friend it was opened for; the session builds a
    fresh one whenever the selected friend changes.
    """

    def __init__(self, friend_id: str):
        self.friend_id = friend_id
        self.bill = Decimal("0")
        self.paid_by_user = Decimal("0")
        self.payer = Payer.USER

    @property
    def paid_by_friend(self) -> Decimal:
        return paid_by_friend(self.bill, self.paid_by_user)

    def set_bill(self, bill: Amount) -> None:
        self.bill = to_decimal(bill)

    def set_paid_by_user(self, amount: Amount) -> bool:
        """
        Set the user's expense.

        A value larger than the bill is rejected and the previous value kept.

        Args:
            amount: The user's own expense

        Returns:
            True if the value was accepted
        """
        value = to_decimal(amount)
        if value > self.bill:
            logger.debug(
                "Rejected user expense %s larger than bill %s", value, self.bill
            )
            return False
        self.paid_by_user = value
        return True

    def set_payer(self, payer: Union[Payer, str]) -> None:
        self.payer = Payer(payer)

    def is_submittable(self) -> bool:
        return self.bill != 0 and self.paid_by_user != 0

    def compute_delta(self) -> Decimal:
        """Signed amount the split adds to the friend's balance"""
        strategy = get_split_strategy(self.payer)
        return strategy.calculate_delta(self.bill, self.paid_by_user)

    def submit(
        self, repository: FriendRepository, selection: SelectionTracker
    ) -> Optional[Friend]:
        """
        Apply the split to the selected friend and clear the selection.

        A zero bill or zero user expense discards the submission: the
        registry and the selection are left alone.

        Args:
            repository: Friend registry holding the balance
            selection: Selection tracker to clear afterwards

        Returns:
            The updated friend, or None if the submission was discarded
        """
        if not self.is_submittable():
            logger.debug("Split-bill submission discarded: bill or user expense is zero")
            return None

        friend_id = selection.selected_id or self.friend_id
        delta = self.compute_delta()
        updated = repository.apply_balance_delta(friend_id, delta)
        selection.clear()

        logger.info(
            "Split bill %s with friend %s (payer=%s): balance delta %s",
            self.bill, friend_id, self.payer.value, delta,
        )
        return updated
