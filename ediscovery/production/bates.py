BATES_PADDING = 6


def format_bates(prefix: str, number: int) -> str:
    """``prefix`` followed by *number* zero-padded to six digits.

    Numbers wider than the padding are kept whole, never truncated.
    """
    return f"{prefix}{str(number).zfill(BATES_PADDING)}"


def bates_numbers(prefix: str, start: int, count: int) -> list[str]:
    """Consecutive bates numbers ``start .. start + count - 1``."""
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if start < 0:
        raise ValueError(f"start must be >= 0, got {start}")
    return [format_bates(prefix, start + offset) for offset in range(count)]
