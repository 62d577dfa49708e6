from typing import Dict
from pydantic import BaseModel, Field, ConfigDict


class FamilyStats(BaseModel):
    """Headline numbers for a family's expense history."""
    total_expenses: float = Field(default=0.0, serialization_alias="totalExpenses")
    monthly_expenses: float = Field(default=0.0, serialization_alias="monthlyExpenses")
    average_expense: float = Field(default=0.0, serialization_alias="averageExpense")
    expenses_by_category: Dict[str, float] = Field(
        default_factory=dict, serialization_alias="expensesByCategory"
    )
    expenses_by_member: Dict[str, float] = Field(
        default_factory=dict, serialization_alias="expensesByMember"
    )

    model_config = ConfigDict(populate_by_name=True)
