"""Human-readable number formatting with thousands separators."""


def format_int(n: int) -> str:
    """Format a non-negative integer with ',' between groups of three digits."""
    if n < 0:
        raise ValueError("format_int expects a non-negative integer")
    return f"{n:,}"


def format_float(v: float, decimals: int) -> str:
    """Format ``v`` with thousands separators and exactly ``decimals`` truncated digits.

    The decimal point is always present, even for zero decimals.
    """
    sign = ""
    if v < 0:
        sign = "-"
        v = -v
    digits = []
    remaining = v
    for _ in range(max(decimals, 0)):
        remaining *= 10
        digits.append(str(int(remaining) % 10))
    return f"{sign}{format_int(int(v))}.{''.join(digits)}"