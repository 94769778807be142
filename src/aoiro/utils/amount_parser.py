"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def parse_yen(amount_str: str) -> int:
    """Parse an amount string into whole yen.

    Handles various formats:
    - "12345"
    - "¥12,345" / "￥12,345"
    - "12,345円"
    - "-500"
    - "(500)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        Integer amount in yen

    Raises:
        ValueError: If amount string cannot be parsed or has a fractional part
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove currency symbols and separators
    amount_str = re.sub(r"[¥￥円,\s]", "", amount_str)

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")

    if not amount.is_finite() or amount != amount.to_integral_value():
        raise ValueError(f"Amount must be whole yen, got '{amount_str}'")

    value = int(amount)
    return -value if is_negative else value


def is_whole_number(value) -> bool:
    """Whether value is an int; bool is rejected."""
    return isinstance(value, int) and not isinstance(value, bool)
