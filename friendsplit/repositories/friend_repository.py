"""Friend data access"""
import logging
from decimal import Decimal
from typing import Iterable, List, Optional, Tuple

from friendsplit.core.exceptions import ConflictError
from friendsplit.models.friend import Friend

logger = logging.getLogger(__name__)


class FriendRepository:
    """In-memory ordered registry of friends"""

    def __init__(self, initial: Optional[Iterable[Friend]] = None):
        """
        Create a registry.

        Args:
            initial: Friends to seed the registry with, in display order

        Raises:
            ConflictError: If the seed contains duplicate ids
        """
        self._friends: List[Friend] = []
        for friend in initial or ():
            self.add(friend)

    def add(self, friend: Friend) -> Friend:
        """
        Append a friend to the end of the list.

        Args:
            friend: Friend to add

        Returns:
            The added friend

        Raises:
            ConflictError: If a friend with the same id already exists
        """
        if self.get_by_id(friend.id) is not None:
            raise ConflictError(f"Friend with ID {friend.id} already exists")
        self._friends.append(friend)
        return friend

    def get_by_id(self, friend_id: str) -> Optional[Friend]:
        """
        Get friend by ID.

        Args:
            friend_id: Friend id

        Returns:
            Friend if found, None otherwise
        """
        return next((f for f in self._friends if f.id == friend_id), None)

    def apply_balance_delta(self, friend_id: str, delta: Decimal) -> Optional[Friend]:
        """
        Add delta to a friend's balance.

        This is the only place a balance changes.

        Args:
            friend_id: Friend id
            delta: Signed amount to add

        Returns:
            The updated friend, or None if no friend has that id
        """
        for index, friend in enumerate(self._friends):
            if friend.id == friend_id:
                updated = friend.model_copy(update={"balance": friend.balance + delta})
                self._friends[index] = updated
                return updated

        logger.debug("Balance delta %s ignored: no friend %s", delta, friend_id)
        return None

    def list(self) -> Tuple[Friend, ...]:
        """All friends in insertion order"""
        return tuple(self._friends)

    def count(self) -> int:
        return len(self._friends)
