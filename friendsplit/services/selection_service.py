"""Friend selection tracking"""
from typing import Optional

from friendsplit.models.friend import Friend
from friendsplit.models.selection import Selection, SelectionState
from friendsplit.repositories.friend_repository import FriendRepository


def toggle_selection(selection: Selection, friend_id: str) -> Selection:
    """
    Transition for a click on a friend.

    Clicking the friend that is already selected deselects it; clicking any
    other friend selects that one.

    Args:
        selection: Current selection
        friend_id: Id of the friend that was clicked

    Returns:
        The next selection
    """
    if selection.state == SelectionState.SELECTED and selection.friend_id == friend_id:
        return Selection.none()
    return Selection.of(friend_id)


class SelectionTracker:
    """Holds the currently selected friend, by id"""

    def __init__(self):
        self._selection = Selection.none()

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def selected_id(self) -> Optional[str]:
        return self._selection.friend_id

    def select(self, friend: Friend) -> Selection:
        """Toggle selection of a friend and return the new selection"""
        self._selection = toggle_selection(self._selection, friend.id)
        return self._selection

    def clear(self) -> None:
        self._selection = Selection.none()

    def resolve(self, repository: FriendRepository) -> Optional[Friend]:
        """
        Look up the selected friend.

        A selected id that is no longer in the registry counts as no selection.

        Args:
            repository: Friend registry to look the id up in

        Returns:
            Selected friend if any, None otherwise
        """
        if self._selection.state == SelectionState.NO_SELECTION:
            return None
        return repository.get_by_id(self._selection.friend_id)
