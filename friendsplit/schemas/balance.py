"""Balance schemas"""
from decimal import Decimal

from pydantic import BaseModel


class BalanceSummary(BaseModel):
    """Summary of the user's overall balance situation"""
    overall_balance: Decimal
    total_you_owe: Decimal
    total_owed_to_you: Decimal
    num_people_you_owe: int
    num_people_owe_you: int
