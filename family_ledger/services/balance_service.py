import logging
import math
from typing import Dict, List, Optional

from family_ledger.core.config import settings
from family_ledger.models.expense import Expense
from family_ledger.models.member import Member
from family_ledger.schemas.balance import BalanceSummary, DebtRelation, MemberBalance
from family_ledger.utils.split_validation import validate_references

logger = logging.getLogger(__name__)


class BalanceService:
    @staticmethod
    def compute_balances(
        members: List[Member],
        expenses: List[Expense],
        strict: bool = False,
    ) -> List[MemberBalance]:
        """
        Computes paid / owed / net per member from a snapshot of expenses.

        Expenses pointing at ids outside the roster are ignored unless
        strict is set, in which case SplitValidationError is raised.
        Percentages are applied as given, without normalisation.
        """
        if strict:
            validate_references(members, expenses)

        # 1. One accumulator per member, roster order
        balances: Dict[str, MemberBalance] = {}
        for member in members:
            balances[member.id] = MemberBalance(id=member.id, name=member.name)

        for expense in expenses:
            # 2. Credit the payer
            payer = balances.get(expense.paid_by_id)
            if payer is not None:
                payer.total_paid += expense.amount
            else:
                logger.debug(
                    "Expense %s paid by unknown member %s, payment ignored",
                    expense.id, expense.paid_by_id,
                )

            # 3. Charge each member's share
            if expense.has_custom_split():
                for member_id, percentage in expense.custom_split.items():
                    owner = balances.get(member_id)
                    if owner is None:
                        logger.debug(
                            "Expense %s splits to unknown member %s, share ignored",
                            expense.id, member_id,
                        )
                        continue
                    owner.should_pay += expense.amount * percentage / 100
            else:
                for member in members:
                    balances[member.id].should_pay += expense.amount * member.share_percentage / 100

        # 4. Net position (positive = owed money, negative = owes money)
        for balance in balances.values():
            balance.balance = balance.total_paid - balance.should_pay

        return list(balances.values())

    @staticmethod
    def compute_settlements(
        balances: List[MemberBalance],
        tolerance: Optional[float] = None,
    ) -> List[DebtRelation]:
        """
        Greedy largest-first matching of debtors to creditors.

        Works on copies of the amounts, the given balances are left as is.
        Ties keep roster order (sorted() is stable, also with reverse=True).
        """
        if tolerance is None:
            tolerance = settings.BALANCE_TOLERANCE
        if not (math.isfinite(tolerance) and tolerance >= 0):
            raise ValueError(f"Tolerance must be a finite non-negative number, got {tolerance}")

        creditors = []
        debtors = []

        for member in balances:
            if member.balance > tolerance:
                creditors.append({"member": member, "amount": member.balance})
            elif member.balance < -tolerance:
                debtors.append({"member": member, "amount": member.balance})

        creditors.sort(key=lambda x: x["amount"], reverse=True)
        debtors.sort(key=lambda x: x["amount"])

        relations: List[DebtRelation] = []

        i = 0
        j = 0

        while i < len(creditors) and j < len(debtors):
            creditor = creditors[i]
            debtor = debtors[j]

            amount = min(creditor["amount"], abs(debtor["amount"]))

            # Skip floating point residue and overflowed totals
            if not math.isfinite(amount):
                logger.warning(
                    "Non-finite transfer from %s to %s skipped",
                    debtor["member"].id, creditor["member"].id,
                )
            elif amount > tolerance:
                relations.append(DebtRelation(
                    from_id=debtor["member"].id,
                    from_name=debtor["member"].name,
                    to_id=creditor["member"].id,
                    to_name=creditor["member"].name,
                    amount=amount,
                ))

            creditor["amount"] -= amount
            debtor["amount"] += amount

            # not-greater also moves past nan remainders
            if not creditor["amount"] > tolerance:
                i += 1
            if not abs(debtor["amount"]) > tolerance:
                j += 1

        logger.debug(
            "Settled %d creditors and %d debtors with %d transfers",
            len(creditors), len(debtors), len(relations),
        )
        return relations

    @staticmethod
    def summarize(
        members: List[Member],
        expenses: List[Expense],
        tolerance: Optional[float] = None,
        strict: bool = False,
    ) -> BalanceSummary:
        """Balances and the transfers settling them, in one call."""
        balances = BalanceService.compute_balances(members, expenses, strict=strict)
        settlements = BalanceService.compute_settlements(balances, tolerance)
        return BalanceSummary(balances=balances, settlements=settlements)


compute_balances = BalanceService.compute_balances
compute_settlements = BalanceService.compute_settlements
