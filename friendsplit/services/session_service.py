"""Bill-splitting session: the state the UI reads and the actions it calls"""
import logging
from decimal import Decimal
from typing import Callable, Optional, Tuple

from friendsplit.config import Settings
from friendsplit.core.exceptions import ConflictError, NotFoundError
from friendsplit.data.seed import initial_friends
from friendsplit.models.friend import Friend
from friendsplit.models.selection import Selection
from friendsplit.repositories.friend_repository import FriendRepository
from friendsplit.services.add_friend_form import (AddFriendForm,
                                                  generate_friend_id)
from friendsplit.services.selection_service import SelectionTracker
from friendsplit.services.split_bill_form import SplitBillForm

logger = logging.getLogger(__name__)


class SplitterSession:
    """
    One user's friends, selection, panels and form drafts.

    All actions run to completion synchronously; there is no shared state
    outside the session.
    """

    def __init__(
        self,
        repository: FriendRepository,
        add_friend_form: Optional[AddFriendForm] = None,
    ):
        self.repository = repository
        self.selection = SelectionTracker()
        self.add_friend_form = add_friend_form or AddFriendForm()
        self.show_add_friend_panel = False
        self._split_bill_form: Optional[SplitBillForm] = None
        self._split_bill_selection: Optional[Selection] = None

    @property
    def friends(self) -> Tuple[Friend, ...]:
        return self.repository.list()

    @property
    def selected_friend(self) -> Optional[Friend]:
        return self.selection.resolve(self.repository)

    @property
    def split_bill_form(self) -> Optional[SplitBillForm]:
        """
        Draft for the selected friend, or None when nobody is selected.

        The draft is tied to the selection it was opened for. Every new
        selection starts a blank draft, including reselecting the same
        friend after a deselect, a submit or opening the add-friend panel.
        """
        friend = self.selected_friend
        if friend is None:
            self._split_bill_form = None
            self._split_bill_selection = None
            return None

        selection = self.selection.selection
        if self._split_bill_form is None or self._split_bill_selection is not selection:
            self._split_bill_form = SplitBillForm(friend.id)
            self._split_bill_selection = selection
        return self._split_bill_form

    def get_friend(self, friend_id: str) -> Friend:
        """
        Get friend by ID.

        Raises:
            NotFoundError: If friend not found
        """
        friend = self.repository.get_by_id(friend_id)
        if friend is None:
            raise NotFoundError(f"Friend with ID {friend_id} not found")
        return friend

    def require_split_bill_form(self) -> SplitBillForm:
        """
        Get the split-bill draft, failing when no friend is selected.

        Raises:
            ConflictError: If no friend is selected
        """
        form = self.split_bill_form
        if form is None:
            raise ConflictError("No friend selected to split a bill with")
        return form

    def toggle_add_friend_panel(self) -> bool:
        """Open or close the add-friend panel; opening it drops the selection"""
        self.show_add_friend_panel = not self.show_add_friend_panel
        if self.show_add_friend_panel:
            self.selection.clear()
        return self.show_add_friend_panel

    def add_friend(self, friend: Friend) -> Friend:
        """Append a friend and close the add-friend panel"""
        self.repository.add(friend)
        self.show_add_friend_panel = False
        return friend

    def submit_add_friend(self) -> Optional[Friend]:
        """Submit the add-friend draft; closes the panel on success"""
        friend = self.add_friend_form.submit(self.repository)
        if friend is not None:
            self.show_add_friend_panel = False
        return friend

    def select_friend(self, friend: Friend) -> Optional[Friend]:
        """Toggle selection of a friend; also closes the add-friend panel"""
        self.selection.select(friend)
        self.show_add_friend_panel = False
        return self.selected_friend

    def split_bill(self, delta: Decimal) -> Optional[Friend]:
        """
        Apply a balance delta to the selected friend and clear the selection.

        Args:
            delta: Signed amount to add to the selected friend's balance

        Returns:
            The updated friend, or None when no friend is selected
        """
        friend = self.selected_friend
        if friend is None:
            logger.debug("Split of %s ignored: no friend selected", delta)
            return None

        updated = self.repository.apply_balance_delta(friend.id, delta)
        self.selection.clear()
        return updated

    def submit_split_bill(self) -> Optional[Friend]:
        """Submit the split-bill draft for the selected friend"""
        form = self.split_bill_form
        if form is None:
            return None
        return form.submit(self.repository, self.selection)


def create_session(
    settings: Settings,
    id_generator: Callable[[], str] = generate_friend_id,
) -> SplitterSession:
    """
    Build a session from settings.

    Args:
        settings: Application settings
        id_generator: Source of ids for friends added through the form

    Returns:
        New session, seeded with the reference friends if enabled
    """
    seed = initial_friends(settings.avatar_base_url) if settings.load_seed_friends else []
    repository = FriendRepository(seed)
    form = AddFriendForm(default_image=settings.avatar_base_url, id_generator=id_generator)

    logger.info("Created session with %d friends", repository.count())
    return SplitterSession(repository, add_friend_form=form)
