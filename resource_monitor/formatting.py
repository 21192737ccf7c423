"""Human-readable rendering of byte counts and large counters."""

BYTE_UNIT = 1024
BYTE_PREFIXES = "KMGTPE"


def format_bytes(size: int) -> str:
    """
    Format a byte count with binary scaling, e.g. 1536 -> '1.50 KB'.

    Values below 1024 are printed as-is ('1023 B'). Above that the value is
    divided by the largest power of 1024 that keeps the integer quotient
    under 1024 at each step.
    """
    if size < BYTE_UNIT:
        return f"{size} B"
    div, exp = BYTE_UNIT, 0
    n = size // BYTE_UNIT
    while n >= BYTE_UNIT and exp < len(BYTE_PREFIXES) - 1:
        div *= BYTE_UNIT
        exp += 1
        n //= BYTE_UNIT
    return f"{size / div:.2f} {BYTE_PREFIXES[exp]}B"


def format_number(n: int) -> str:
    """Group digits in thousands: 1234567 -> '1,234,567'."""
    return f"{n:,}"
