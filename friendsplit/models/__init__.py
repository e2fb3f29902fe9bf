"""Domain models"""
from friendsplit.models.friend import BalanceStatus, Friend
from friendsplit.models.payer import Payer
from friendsplit.models.selection import Selection, SelectionState

__all__ = ["Friend", "BalanceStatus", "Payer", "Selection", "SelectionState"]
