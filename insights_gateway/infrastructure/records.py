"""Upstream transaction records and their normalization to canonical transactions"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from insights_gateway.domain.models import Direction, Transaction


class TransactionRecord(BaseModel):
    """
    Transaction as supplied by the categorization and persistence services.

    Direction is resolved from the first shape present:
    - direction + amount
    - is_income + amount
    - money_in / money_out magnitudes
    - signed amount (negative = expense)
    """

    date: date
    amount: Optional[float] = Field(None, allow_inf_nan=False)
    direction: Optional[Direction] = None
    is_income: Optional[bool] = None
    money_in: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    money_out: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    currency: str = "USD"
    primary_category: Optional[str] = None
    detailed_category: Optional[str] = None
    merchant: Optional[str] = None
    raw_description: str = ""

    @field_validator("primary_category", "detailed_category", "merchant")
    @classmethod
    def blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        return value or None

    @model_validator(mode="after")
    def check_direction_resolvable(self) -> "TransactionRecord":
        self._resolve()
        return self

    def _resolve(self) -> tuple[Direction, float]:
        if self.direction is not None or self.is_income is not None:
            if self.amount is None:
                raise ValueError("amount is required with direction or is_income")
            if self.direction is not None:
                return self.direction, abs(self.amount)
            return (Direction.INCOME if self.is_income else Direction.EXPENSE), abs(self.amount)

        if self.money_in is not None or self.money_out is not None:
            money_in = self.money_in or 0.0
            money_out = self.money_out or 0.0
            if money_in > 0 and money_out > 0:
                raise ValueError("money_in and money_out cannot both be positive")
            if money_in > 0:
                return Direction.INCOME, money_in
            return Direction.EXPENSE, money_out

        if self.amount is not None:
            if self.amount < 0:
                return Direction.EXPENSE, -self.amount
            return Direction.INCOME, self.amount

        raise ValueError("cannot determine transaction direction: no amount fields supplied")

    def to_domain(self) -> Transaction:
        """Convert to the canonical direction + magnitude transaction"""
        direction, magnitude = self._resolve()
        return Transaction(
            date=self.date,
            direction=direction,
            amount=magnitude,
            currency=self.currency,
            primary_category=self.primary_category,
            detailed_category=self.detailed_category,
            merchant=self.merchant,
            description=self.raw_description,
        )


