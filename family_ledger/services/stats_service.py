import datetime
from typing import Dict, List

from family_ledger.models.expense import Expense
from family_ledger.models.member import Member
from family_ledger.schemas.stats import FamilyStats

UNCATEGORIZED = "uncategorized"


class StatsService:
    @staticmethod
    def compute_stats(
        members: List[Member],
        expenses: List[Expense],
        today: datetime.date,
    ) -> FamilyStats:
        """
        Totals for the dashboard.

        monthly_expenses only counts dated expenses falling in today's
        month. Payers missing from the roster are reported under their id.
        """
        names = {member.id: member.name for member in members}

        total = 0.0
        monthly = 0.0
        by_category: Dict[str, float] = {}
        by_member: Dict[str, float] = {}

        for expense in expenses:
            total += expense.amount

            if expense.date is not None and (
                expense.date.year == today.year and expense.date.month == today.month
            ):
                monthly += expense.amount

            category = expense.category_id or UNCATEGORIZED
            by_category[category] = by_category.get(category, 0.0) + expense.amount

            payer = names.get(expense.paid_by_id, expense.paid_by_id)
            by_member[payer] = by_member.get(payer, 0.0) + expense.amount

        average = total / len(expenses) if expenses else 0.0

        return FamilyStats(
            total_expenses=total,
            monthly_expenses=monthly,
            average_expense=average,
            expenses_by_category=by_category,
            expenses_by_member=by_member,
        )
