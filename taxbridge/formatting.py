"""Naira amount helpers shared by the engines, reports and CLI."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from taxbridge.exceptions import DataValidationError

NAIRA = "₦"
KOBO = Decimal("0.01")


def to_decimal(value: Decimal | int | float | str, field: str = "amount") -> Decimal:
    """Coerce a numeric value to Decimal without binary float artefacts."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise DataValidationError(field, f"expected a number, got {value!r}")
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise DataValidationError(field, f"expected a number, got {value!r}") from exc


def format_grouped(amount: Decimal | int | float) -> str:
    """Thousands-grouped amount, no trailing zeros, at most three decimals.

    >>> format_grouped(Decimal("20000000.00"))
    '20,000,000'
    """
    value = to_decimal(amount)
    if not value.is_finite():
        raise DataValidationError("amount", f"cannot format non-finite amount {value}")
    text = f"{value.quantize(Decimal('0.001'), rounding=ROUND_HALF_UP):,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_naira(amount: Decimal | int | float) -> str:
    """Render an amount as Naira with thousands grouping and two decimals.

    >>> format_naira(Decimal("1234567.5"))
    '₦1,234,567.50'
    """
    value = to_decimal(amount)
    if not value.is_finite():
        raise DataValidationError("amount", f"cannot format non-finite amount {value}")
    value = value.quantize(KOBO, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}{NAIRA}{abs(value):,.2f}"
