def format_cents(cents: int) -> str:
    """599 -> "$5.99"."""
    return f"${cents / 100:.2f}"


def to_cents(amount) -> int:
    """Convert a decimal amount (5.99, "5.99") to integer cents."""
    return int(round(float(amount) * 100))
