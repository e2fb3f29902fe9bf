"""Test split calculations"""

from decimal import Decimal

import pytest

from friendsplit.core.exceptions import ValidationError
from friendsplit.models.payer import Payer
from friendsplit.services.split_strategies import (FriendPaidStrategy,
                                                   UserPaidStrategy,
                                                   get_split_strategy,
                                                   paid_by_friend)


class TestGetSplitStrategy:
    """Test get_split_strategy factory function"""

    def test_get_user_paid_strategy(self):
        """Test getting the user-paid strategy"""
        assert isinstance(get_split_strategy(Payer.USER), UserPaidStrategy)

    def test_get_friend_paid_strategy(self):
        """Test getting the friend-paid strategy"""
        assert isinstance(get_split_strategy(Payer.FRIEND), FriendPaidStrategy)

    def test_unknown_payer(self):
        """Test unknown payer raises"""
        with pytest.raises(ValidationError):
            get_split_strategy("NOBODY")


class TestPaidByFriend:
    """Test the friend's share"""

    def test_rest_of_bill(self):
        assert paid_by_friend(Decimal("100"), Decimal("40")) == Decimal("60")

    def test_zero_user_expense(self):
        """No user expense means no friend share yet"""
        assert paid_by_friend(Decimal("100"), Decimal("0")) == Decimal("0")


class TestUserPaidStrategy:
    """Test user-paid strategy"""

    def test_friend_owes_their_share(self):
        delta = UserPaidStrategy().calculate_delta(Decimal("100"), Decimal("40"))

        assert delta == Decimal("60.00")

    def test_user_covers_only_own_share(self):
        """User expense equal to the bill leaves the friend owing nothing"""
        delta = UserPaidStrategy().calculate_delta(Decimal("50"), Decimal("50"))

        assert delta == Decimal("0")

    def test_rounding(self):
        """Deltas are rounded half-up to cents"""
        delta = UserPaidStrategy().calculate_delta(Decimal("10.005"), Decimal("5"))

        assert delta == Decimal("5.01")


class TestFriendPaidStrategy:
    """Test friend-paid strategy"""

    def test_user_owes_own_share(self):
        delta = FriendPaidStrategy().calculate_delta(Decimal("100"), Decimal("40"))

        assert delta == Decimal("-40.00")
