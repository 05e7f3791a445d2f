"""Human-readable instruction counts."""

_UNITS = (
    (1_000_000_000_000, "T"),
    (1_000_000_000, "B"),
    (1_000_000, "M"),
    (1_000, "K"),
)


def format_instructions(n: int) -> str:
    """Format ``n`` with two decimals and a K/M/B/T suffix when large."""
    for scale, suffix in _UNITS:
        if n >= scale:
            return f"{n / float(scale):.2f}{suffix}"
    return str(n)