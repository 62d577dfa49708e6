"""Balance presentation helpers."""
from typing import Optional

from family_ledger.core.config import settings
from family_ledger.schemas.balance import BalanceStatus

CURRENCY_SYMBOLS = {
    "EUR": "€",
    "USD": "$",
    "GBP": "£",
}

BALANCE_TEXT = {
    BalanceStatus.CREDITOR: "is owed",
    BalanceStatus.DEBTOR: "owes",
    BalanceStatus.SETTLED: "settled",
}


def classify_balance(balance: float, tolerance: Optional[float] = None) -> BalanceStatus:
    """
    Three-way split of a net balance.

    Shares its tolerance with the settlement matcher so a member shown as
    settled never shows up in a transfer.
    """
    if tolerance is None:
        tolerance = settings.BALANCE_TOLERANCE

    if balance > tolerance:
        return BalanceStatus.CREDITOR
    if balance < -tolerance:
        return BalanceStatus.DEBTOR
    return BalanceStatus.SETTLED


def describe_balance(balance: float, tolerance: Optional[float] = None) -> str:
    return BALANCE_TEXT[classify_balance(balance, tolerance)]


def format_currency(amount: float, currency: Optional[str] = None, locale: Optional[str] = None) -> str:
    """
    Format an amount with two decimals.

    it-IT (the default) writes "1.234,56 €", en-US writes "€1,234.56".
    Only Italian and English locales are supported, anything else raises
    ValueError.
    """
    currency = currency or settings.CURRENCY
    locale = locale or settings.LOCALE
    symbol = CURRENCY_SYMBOLS.get(currency, currency)

    sign = "-" if round(amount, 2) < 0 else ""
    digits = f"{abs(amount):,.2f}"

    if locale.lower().startswith("it"):
        # swap the separators: 1,234.56 -> 1.234,56
        digits = digits.replace(",", "_").replace(".", ",").replace("_", ".")
        return f"{sign}{digits} {symbol}"

    if locale.lower().startswith("en"):
        return f"{sign}{symbol}{digits}"

    raise ValueError(f"Unsupported locale: {locale}")
