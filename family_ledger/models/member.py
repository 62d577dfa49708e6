"""
Member model - one person in a family roster.

share_percentage is the member's default part of every expense that does
not carry a custom split. Rosters are expected to sum to 100 but nothing
here enforces it (see utils.split_validation for the strict checks).
"""

from typing import List
from pydantic import BaseModel, Field, ConfigDict


class Member(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    name: str
    share_percentage: float = Field(
        ge=0,
        le=100,
        allow_inf_nan=False,
        validation_alias="sharePercentage",
        serialization_alias="sharePercentage",
    )
    is_active: bool = Field(
        default=True,
        validation_alias="isActive",
        serialization_alias="isActive",
    )


def active_members(members: List[Member]) -> List[Member]:
    """Roster members still flagged active, in roster order."""
    return [m for m in members if m.is_active]
