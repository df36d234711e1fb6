"""Display formatting for engine outputs (currency, large numbers, areas)."""

from __future__ import annotations


CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "KES": "KSh",
    "NGN": "₦",
    "GHS": "GH₵",
    "ZAR": "R",
    "INR": "₹",
}


def format_currency(amount: float, currency: str = "USD") -> str:
    """Whole-unit currency with thousands separators: ``$1,250,000``.

    Currencies without a known symbol are prefixed with their ISO code.
    """
    symbol = CURRENCY_SYMBOLS.get(currency.upper())
    sign = "-" if amount < 0 else ""
    body = f"{abs(amount):,.0f}"
    if symbol is None:
        return f"{sign}{currency.upper()} {body}"
    return f"{sign}{symbol}{body}"


def format_number(num: float) -> str:
    """Abbreviate large counts: 1.2M, 3.4K, otherwise a whole number."""
    if num >= 1_000_000:
        return f"{num / 1_000_000:.1f}M"
    if num >= 1_000:
        return f"{num / 1_000:.1f}K"
    return f"{num:.0f}"


def format_area(sqm: float) -> str:
    return f"{sqm:,.0f} m²"
