"""
Expense model - one amount fronted by one member.

Design principles:
- amount is a plain positive float (currency units, e.g. euro)
- custom_split maps member id -> percentage and, when non-empty,
  replaces the members' default shares for this expense only
- references to members are NOT checked here; the balance engine
  ignores ids it cannot find
"""

import datetime
from typing import Dict, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator


class Expense(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    amount: float = Field(gt=0, allow_inf_nan=False)
    paid_by_id: str = Field(validation_alias="paidById", serialization_alias="paidById")
    custom_split: Optional[Dict[str, float]] = Field(
        default=None,
        validation_alias="customSplit",
        serialization_alias="customSplit",
    )

    # Descriptive fields, only read by statistics
    description: str = ""
    date: Optional[datetime.date] = None
    category_id: Optional[str] = Field(
        default=None,
        validation_alias="categoryId",
        serialization_alias="categoryId",
    )
    location: Optional[str] = None

    @field_validator("custom_split")
    @classmethod
    def check_split_percentages(cls, value: Optional[Dict[str, float]]):
        if value is None:
            return value
        for member_id, percentage in value.items():
            if not 0 <= percentage <= 100:
                raise ValueError(
                    f"Split percentage for member '{member_id}' must be between 0 and 100, got {percentage}"
                )
        return value

    def has_custom_split(self) -> bool:
        """True when this expense overrides the default shares."""
        return bool(self.custom_split)
