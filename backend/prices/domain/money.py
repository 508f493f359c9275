from __future__ import annotations

from decimal import Decimal, InvalidOperation


def parse_amount(value: str) -> Decimal:
    """
    Parse robuste depuis string, sans arrondi.
    Autorise "12.34", "12", et optionnellement "12,34".
    """
    if not isinstance(value, str):
        raise TypeError("Amount must be provided as a string")

    raw = value.strip()
    if raw == "":
        raise ValueError("Amount cannot be empty")

    # tolérance minimale pour les virgules décimales
    raw = raw.replace(",", ".")

    try:
        amount = Decimal(raw)
    except InvalidOperation as exc:
        raise ValueError(f"Invalid decimal amount: {value!r}") from exc

    if not amount.is_finite():
        raise ValueError(f"Invalid decimal amount: {value!r}")
    return amount
