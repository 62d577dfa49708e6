from typing import Dict, List

from family_ledger.models.member import Member


class ShareService:
    """
    Default share bookkeeping for a family roster.

    Every helper returns new Member copies; rosters handed in are never
    modified.
    """

    @staticmethod
    def equal_shares(member_ids: List[str]) -> Dict[str, float]:
        if not member_ids:
            return {}
        share = 100 / len(member_ids)
        return {member_id: share for member_id in member_ids}

    @staticmethod
    def apply_shares(members: List[Member], shares: Dict[str, float]) -> List[Member]:
        """Copies of the roster with shares taken from the mapping (missing ids get 0)."""
        return [
            member.model_copy(update={"share_percentage": shares.get(member.id, 0.0)})
            for member in members
        ]

    @staticmethod
    def rebalance_on_add(members: List[Member], new_member: Member) -> List[Member]:
        """Roster with the newcomer appended and everybody on an equal share."""
        roster = list(members) + [new_member]
        shares = ShareService.equal_shares([member.id for member in roster])
        return ShareService.apply_shares(roster, shares)

    @staticmethod
    def rebalance_on_remove(members: List[Member], member_id: str) -> List[Member]:
        """Roster without member_id, remaining members on an equal share."""
        if not any(member.id == member_id for member in members):
            return [member.model_copy() for member in members]

        roster = [member for member in members if member.id != member_id]
        shares = ShareService.equal_shares([member.id for member in roster])
        return ShareService.apply_shares(roster, shares)

    @staticmethod
    def share_total(members: List[Member]) -> float:
        return sum(member.share_percentage for member in members)
