"""Friend model"""
import enum
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class BalanceStatus(str, enum.Enum):
    """Which way a friend's balance points"""
    YOU_OWE = "you_owe"
    OWES_YOU = "owes_you"
    EVEN = "even"


class Friend(BaseModel):
    """
    A person the user splits bills with.

    Negative balance means the user owes this friend, positive means the
    friend owes the user. Records are immutable; the registry replaces a
    friend's record when its balance changes.
    """

    id: str = Field(..., min_length=1)
    name: str
    image: str
    balance: Decimal = Decimal("0")

    model_config = ConfigDict(frozen=True)

    def __repr__(self) -> str:
        return f"<Friend(id={self.id}, name={self.name}, balance={self.balance})>"
