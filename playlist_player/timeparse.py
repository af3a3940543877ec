"""Parse human time strings ('ss', 'mm:ss', 'hh:mm:ss') into seconds."""

import re

# Plain decimal only: no inf/nan, no underscores, no exponents.
_NUMBER = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)$')


def _number(part: str) -> float | int:
    part = part.strip()
    if not part:
        return 0
    if not _NUMBER.match(part):
        raise ValueError(part)
    try:
        return int(part)
    except ValueError:
        return float(part)


def parse_time(text: str | None) -> float | int:
    """Return seconds for 'ss', 'mm:ss' or 'hh:mm:ss'. Anything else (or garbage) gives 0."""
    if not text:
        return 0
    try:
        parts = [_number(p) for p in str(text).split(':')]
    except ValueError:
        return 0
    if len(parts) == 1:
        return parts[0]
    if len(parts) == 2:
        return parts[0] * 60 + parts[1]
    if len(parts) == 3:
        return parts[0] * 3600 + parts[1] * 60 + parts[2]
    return 0
