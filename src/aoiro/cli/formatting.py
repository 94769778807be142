"""Text formatting helpers for CLI output."""


def format_yen(amount: int) -> str:
    """Format whole yen with thousands separators, e.g. ¥1,234 or -¥500."""
    if amount < 0:
        return f"-¥{-amount:,}"
    return f"¥{amount:,}"


def format_rate(rate: int) -> str:
    """Format a rate scaled by 10000 as a decimal, e.g. 2000 -> 0.2000."""
    return f"{rate // 10000}.{rate % 10000:04d}"
