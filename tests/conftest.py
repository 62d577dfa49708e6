import pytest
from family_ledger.models.member import Member
from family_ledger.models.expense import Expense


@pytest.fixture
def two_members():
    """Alice and Bob, half each."""
    return [
        Member(id="alice", name="Alice", share_percentage=50),
        Member(id="bob", name="Bob", share_percentage=50),
    ]


@pytest.fixture
def three_members():
    """Three members on an equal third."""
    share = 100 / 3
    return [
        Member(id="alice", name="Alice", share_percentage=share),
        Member(id="bob", name="Bob", share_percentage=share),
        Member(id="carol", name="Carol", share_percentage=share),
    ]


@pytest.fixture
def family():
    """Four members with uneven shares and a mixed expense history."""
    members = [
        Member(id="mario", name="Mario", share_percentage=40),
        Member(id="giulia", name="Giulia", share_percentage=30),
        Member(id="luca", name="Luca", share_percentage=20),
        Member(id="sofia", name="Sofia", share_percentage=10),
    ]
    expenses = [
        Expense(id="e1", amount=120.0, paid_by_id="mario"),
        Expense(id="e2", amount=75.5, paid_by_id="giulia"),
        Expense(id="e3", amount=42.3, paid_by_id="luca",
                custom_split={"luca": 50, "sofia": 50}),
        Expense(id="e4", amount=19.99, paid_by_id="sofia"),
        Expense(id="e5", amount=300.0, paid_by_id="giulia",
                custom_split={"mario": 25, "giulia": 25, "luca": 25, "sofia": 25}),
    ]
    return members, expenses
