"""Split and roster validation utilities.

The balance engine is permissive: it ignores dangling member references and
never checks that percentages add up to 100. Callers wanting the strict
behaviour run these checks first.
"""
from typing import Dict, List, Optional

from family_ledger.core.config import settings
from family_ledger.models.expense import Expense
from family_ledger.models.member import Member


class SplitValidationError(Exception):
    """Custom exception for split and roster validation errors."""
    pass


def validate_references(members: List[Member], expenses: List[Expense]) -> None:
    """
    Validate that expenses only point at roster members.

    Rules:
    - paid_by_id must be a member id
    - every custom_split key must be a member id
    """
    member_ids = {member.id for member in members}

    for expense in expenses:
        if expense.paid_by_id not in member_ids:
            raise SplitValidationError(
                f"Expense '{expense.id}' is paid by unknown member '{expense.paid_by_id}'"
            )

        for member_id in (expense.custom_split or {}):
            if member_id not in member_ids:
                raise SplitValidationError(
                    f"Expense '{expense.id}' splits to unknown member '{member_id}'"
                )


def validate_share_total(members: List[Member], tolerance: Optional[float] = None) -> None:
    """Default shares across the roster must add up to 100%."""
    if not members:
        return

    tolerance = settings.BALANCE_TOLERANCE if tolerance is None else tolerance
    total = sum(member.share_percentage for member in members)
    if abs(total - 100) > tolerance:
        raise SplitValidationError(
            f"Member shares sum to {total}, expected 100"
        )


def validate_custom_split(custom_split: Optional[Dict[str, float]], tolerance: Optional[float] = None) -> None:
    """A custom split, when given, must add up to 100%."""
    if not custom_split:
        return

    tolerance = settings.BALANCE_TOLERANCE if tolerance is None else tolerance
    total = sum(custom_split.values())
    if abs(total - 100) > tolerance:
        raise SplitValidationError(
            f"Custom split sums to {total}, expected 100"
        )


def validate_expenses(members: List[Member], expenses: List[Expense], tolerance: Optional[float] = None) -> None:
    """Run every per-expense check: references and custom split totals."""
    validate_references(members, expenses)
    for expense in expenses:
        try:
            validate_custom_split(expense.custom_split, tolerance)
        except SplitValidationError as exc:
            raise SplitValidationError(f"Expense '{expense.id}': {exc}") from exc
