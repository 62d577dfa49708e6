"""Balance engine output schemas."""
from enum import Enum
from typing import List
from pydantic import BaseModel, Field, ConfigDict


class BalanceStatus(str, Enum):
    CREDITOR = "creditor"  # is owed money
    DEBTOR = "debtor"      # owes money
    SETTLED = "settled"


class MemberBalance(BaseModel):
    """Net position of one member: positive means the member is owed money."""
    id: str
    name: str
    total_paid: float = Field(default=0.0, serialization_alias="totalPaid")
    should_pay: float = Field(default=0.0, serialization_alias="shouldPay")
    balance: float = 0.0

    model_config = ConfigDict(populate_by_name=True)


class DebtRelation(BaseModel):
    """One suggested transfer from a debtor to a creditor."""
    from_id: str = Field(serialization_alias="fromId")
    from_name: str = Field(serialization_alias="from")
    to_id: str = Field(serialization_alias="toId")
    to_name: str = Field(serialization_alias="to")
    amount: float = Field(gt=0)

    model_config = ConfigDict(populate_by_name=True)


class BalanceSummary(BaseModel):
    balances: List[MemberBalance]
    settlements: List[DebtRelation]
