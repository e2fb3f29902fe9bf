"""Unit tests for the bill-splitting session"""

from decimal import Decimal

import pytest

from friendsplit.config import Settings
from friendsplit.core.exceptions import ConflictError, NotFoundError
from friendsplit.models.friend import Friend
from friendsplit.models.payer import Payer
from friendsplit.services.session_service import create_session

CLARK_ID = "118836"
SARAH_ID = "933372"


class TestCreateSession:
    """Test session construction"""

    def test_seeded(self, session):
        """Default session holds the three seed friends"""
        assert [f.name for f in session.friends] == ["Clark", "Sarah", "Anthony"]
        assert session.selected_friend is None
        assert session.show_add_friend_panel is False
        assert session.split_bill_form is None

    def test_without_seed(self):
        """Seeding can be switched off"""
        session = create_session(Settings(_env_file=None, load_seed_friends=False))

        assert session.friends == ()

    def test_avatar_base_url_used_for_form(self):
        """Add-friend draft starts from the configured avatar URL"""
        settings = Settings(_env_file=None, avatar_base_url="https://avatars.test/64")

        session = create_session(settings)

        assert session.add_friend_form.image == "https://avatars.test/64"
        assert session.friends[0].image == "https://avatars.test/64?u=118836"


class TestSelectFriend:
    """Test selecting friends through the session"""

    def test_select_and_deselect(self, session):
        """Selecting twice clears the selection"""
        clark = session.get_friend(CLARK_ID)

        assert session.select_friend(clark) == clark
        assert session.select_friend(clark) is None

    def test_select_closes_add_friend_panel(self, session):
        """Selecting a friend closes the add-friend panel"""
        session.toggle_add_friend_panel()

        session.select_friend(session.get_friend(CLARK_ID))

        assert session.show_add_friend_panel is False

    def test_get_unknown_friend(self, session):
        with pytest.raises(NotFoundError):
            session.get_friend("missing")


class TestAddFriendPanel:
    """Test the add-friend panel"""

    def test_opening_panel_clears_selection(self, session):
        """Opening the panel closes the split-bill form"""
        session.select_friend(session.get_friend(CLARK_ID))

        assert session.toggle_add_friend_panel() is True
        assert session.selected_friend is None
        assert session.split_bill_form is None

    def test_closing_panel(self, session):
        session.toggle_add_friend_panel()

        assert session.toggle_add_friend_panel() is False

    def test_submit_closes_panel(self, session):
        """A successful submit appends the friend and closes the panel"""
        session.toggle_add_friend_panel()
        session.add_friend_form.set_name("Bob")

        friend = session.submit_add_friend()

        assert friend.id == "new-1"
        assert session.friends[-1] == friend
        assert session.show_add_friend_panel is False

    def test_discarded_submit_keeps_panel_open(self, session):
        """Empty name leaves the panel open and the list unchanged"""
        session.toggle_add_friend_panel()

        assert session.submit_add_friend() is None
        assert session.show_add_friend_panel is True
        assert len(session.friends) == 3

    def test_add_friend_directly(self, session):
        """add_friend appends a ready-made friend"""
        session.toggle_add_friend_panel()
        bob = Friend(id="bob", name="Bob", image="http://x?u=bob")

        session.add_friend(bob)

        assert session.friends[-1] == bob
        assert session.show_add_friend_panel is False


class TestSplitBill:
    """Test splitting bills through the session"""

    def test_form_only_while_selected(self, session):
        """Split-bill form needs a selected friend"""
        with pytest.raises(ConflictError):
            session.require_split_bill_form()

        session.select_friend(session.get_friend(SARAH_ID))

        assert session.require_split_bill_form().friend_id == SARAH_ID

    def test_form_resets_when_friend_changes(self, session):
        """Switching friends starts a blank draft"""
        session.select_friend(session.get_friend(SARAH_ID))
        session.split_bill_form.set_bill(100)

        session.select_friend(session.get_friend(CLARK_ID))

        form = session.split_bill_form
        assert form.friend_id == CLARK_ID
        assert form.bill == Decimal("0")

    def test_form_resets_after_deselect_and_reselect(self, session):
        """Closing and reopening the form for the same friend starts blank"""
        sarah = session.get_friend(SARAH_ID)
        session.select_friend(sarah)
        session.split_bill_form.set_bill(100)

        session.select_friend(sarah)
        session.select_friend(sarah)

        assert session.split_bill_form.bill == Decimal("0")

    def test_form_resets_after_submit_and_reselect(self, session):
        """Reselecting after a split does not bring the old draft back"""
        sarah = session.get_friend(SARAH_ID)
        session.select_friend(sarah)
        form = session.split_bill_form
        form.set_bill(100)
        form.set_paid_by_user(40)
        session.submit_split_bill()

        session.select_friend(sarah)
        reopened = session.split_bill_form

        assert reopened is not form
        assert reopened.bill == Decimal("0")
        assert reopened.paid_by_user == Decimal("0")
        assert session.submit_split_bill() is None
        assert session.get_friend(SARAH_ID).balance == Decimal("80")

    def test_form_resets_after_opening_add_friend_panel(self, session):
        """Opening the add-friend panel throws the draft away"""
        sarah = session.get_friend(SARAH_ID)
        session.select_friend(sarah)
        session.split_bill_form.set_bill(100)

        session.toggle_add_friend_panel()
        session.select_friend(sarah)

        assert session.split_bill_form.bill == Decimal("0")

    def test_form_kept_for_same_friend(self, session):
        """Reading the form again keeps the draft"""
        session.select_friend(session.get_friend(SARAH_ID))
        session.split_bill_form.set_bill(100)

        assert session.split_bill_form.bill == Decimal("100")

    def test_submit_split_bill(self, session):
        """Submit updates the balance and clears the selection"""
        session.select_friend(session.get_friend(SARAH_ID))
        form = session.split_bill_form
        form.set_bill(100)
        form.set_paid_by_user(40)
        form.set_payer(Payer.FRIEND)

        updated = session.submit_split_bill()

        assert updated.balance == Decimal("-20")
        assert session.selected_friend is None
        assert session.split_bill_form is None

    def test_submit_without_selection(self, session):
        assert session.submit_split_bill() is None

    def test_split_bill_delta(self, session):
        """split_bill applies a delta to the selected friend"""
        session.select_friend(session.get_friend(CLARK_ID))

        updated = session.split_bill(Decimal("7"))

        assert updated.balance == Decimal("0")
        assert session.selected_friend is None

    def test_split_bill_without_selection_is_noop(self, session):
        before = session.friends

        assert session.split_bill(Decimal("7")) is None
        assert session.friends == before
