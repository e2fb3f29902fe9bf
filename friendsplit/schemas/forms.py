"""Form draft schemas"""

from decimal import Decimal, InvalidOperation
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from friendsplit.models.payer import Payer


class AddFriendFormUpdate(BaseModel):
    """Edits to the add-friend draft; omitted fields stay as they are"""

    name: Optional[str] = None
    image: Optional[str] = None


class AddFriendFormState(BaseModel):
    """Current add-friend draft"""

    name: str
    image: str

    model_config = ConfigDict(from_attributes=True)


class SplitBillFormUpdate(BaseModel):
    """Edits to the split-bill draft; omitted fields stay as they are"""

    bill: Optional[Decimal] = None
    paid_by_user: Optional[Decimal] = None
    payer: Optional[Payer] = None

    @field_validator("bill", "paid_by_user", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        """Convert numeric values to Decimal; text that is not a finite number is rejected"""
        if v is None:
            return v
        try:
            value = Decimal(str(v))
        except InvalidOperation:
            raise ValueError(f"{v!r} is not a number")
        if not value.is_finite():
            raise ValueError(f"{v!r} is not a finite number")
        return value


class SplitBillFormState(BaseModel):
    """Current split-bill draft"""

    friend_id: str
    bill: Decimal
    paid_by_user: Decimal
    paid_by_friend: Decimal
    payer: Payer

    model_config = ConfigDict(from_attributes=True)
