"""Add-friend form draft"""
import logging
from decimal import Decimal
from typing import Callable, Optional
from uuid import uuid4

from friendsplit.data.seed import avatar_url
from friendsplit.models.friend import Friend
from friendsplit.repositories.friend_repository import FriendRepository

logger = logging.getLogger(__name__)

DEFAULT_IMAGE = "https://i.pravatar.cc/48"


def generate_friend_id() -> str:
    """Fresh collision-resistant friend id"""
    return str(uuid4())


class AddFriendForm:
    """
    Draft state of the add-friend form.

    Edits only touch the draft; `submit` is the one transition that
    creates a friend in the registry.
    """

    def __init__(
        self,
        default_image: str = DEFAULT_IMAGE,
        id_generator: Callable[[], str] = generate_friend_id,
    ):
        self.default_image = default_image
        self._id_generator = id_generator
        self.name = ""
        self.image = default_image

    def set_name(self, name: str) -> None:
        self.name = name

    def set_image(self, image: str) -> None:
        self.image = image

    def reset(self) -> None:
        self.name = ""
        self.image = self.default_image

    def submit(self, repository: FriendRepository) -> Optional[Friend]:
        """
        Create a friend from the draft and add it to the registry.

        An empty name or image discards the submission without touching
        the registry or the draft.

        Args:
            repository: Friend registry to add the new friend to

        Returns:
            The new friend, or None if the submission was discarded
        """
        name = self.name.strip()
        image = self.image.strip()
        if not name or not image:
            logger.debug("Add-friend submission discarded: name or image empty")
            return None

        friend_id = self._id_generator()
        friend = Friend(
            id=friend_id,
            name=name,
            image=avatar_url(image, friend_id),
            balance=Decimal("0"),
        )
        repository.add(friend)
        self.reset()

        logger.info("Added friend %s (%s)", friend.name, friend.id)
        return friend
