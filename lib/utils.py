# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

import re

# Signed 64-bit bounds for INTEGER primary keys
MAX_ID = 2**63 - 1
MIN_ID = -(2**63)

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


# =============================================================================
# Id Utilities
# =============================================================================

def parse_customer_id(value: str) -> int | None:
    """
    Parse a path id into an integer.

    Reads the leading integer of the string and ignores anything after it,
    so "12abc" parses to 12. Returns None (the "not-a-number" sentinel) when
    no leading digits are present or the value does not fit in a 64-bit key.

    Args:
        value: Raw path segment

    Returns:
        Parsed id, or None if the value is not a usable id

    Example:
        parse_customer_id("42")     # 42
        parse_customer_id(" 7 ")    # 7
        parse_customer_id("abc")    # None
    """
    match = _LEADING_INT.match(value)
    if not match:
        return None

    parsed = int(match.group(1))
    if parsed < MIN_ID or parsed > MAX_ID:
        return None

    return parsed
