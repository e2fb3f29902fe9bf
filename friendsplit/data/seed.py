"""Seed friends loaded at startup"""
from decimal import Decimal
from typing import List

from friendsplit.models.friend import Friend

SEED_FRIENDS = (
    {"id": "118836", "name": "Clark", "balance": Decimal("-7")},
    {"id": "933372", "name": "Sarah", "balance": Decimal("20")},
    {"id": "499476", "name": "Anthony", "balance": Decimal("0")},
)


def avatar_url(base_url: str, friend_id: str) -> str:
    """Append the friend id to an avatar URL so every friend gets its own picture"""
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}u={friend_id}"


def initial_friends(avatar_base_url: str = "https://i.pravatar.cc/48") -> List[Friend]:
    """
    Build the reference friends.

    Returns a new list on every call so registries never share state.

    Args:
        avatar_base_url: Placeholder avatar service URL

    Returns:
        List of seed friends in display order
    """
    return [
        Friend(image=avatar_url(avatar_base_url, data["id"]), **data)
        for data in SEED_FRIENDS
    ]
