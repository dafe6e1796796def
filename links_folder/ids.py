"""Identifier generation for tree items."""

import random
import string
import time

_ALPHABET = string.digits + string.ascii_lowercase


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_ALPHABET[rem])
    return "".join(reversed(digits))


def generate_id() -> str:
    """
    Generate a practically-unique item id.
    
    Returns:
        Base-36 millisecond timestamp and six random base-36 characters,
        joined by a dash (e.g. "lz3k9q1a-4f0x2b")
    """
    timestamp = _to_base36(int(time.time() * 1000))
    suffix = "".join(random.choice(_ALPHABET) for _ in range(6))
    return f"{timestamp}-{suffix}"
