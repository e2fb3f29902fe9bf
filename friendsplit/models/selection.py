"""Selection model"""
import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator


class SelectionState(str, enum.Enum):
    """States of the friend selection"""
    NO_SELECTION = "NO_SELECTION"
    SELECTED = "SELECTED"


class Selection(BaseModel):
    """At most one selected friend, referenced by id"""

    state: SelectionState = SelectionState.NO_SELECTION
    friend_id: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_friend_id_matches_state(self) -> "Selection":
        """SELECTED carries a friend id, NO_SELECTION never does"""
        if self.state == SelectionState.SELECTED and not self.friend_id:
            raise ValueError("SELECTED requires a friend_id")
        if self.state == SelectionState.NO_SELECTION and self.friend_id is not None:
            raise ValueError("NO_SELECTION must not carry a friend_id")
        return self

    @classmethod
    def none(cls) -> "Selection":
        return cls()

    @classmethod
    def of(cls, friend_id: str) -> "Selection":
        return cls(state=SelectionState.SELECTED, friend_id=friend_id)
