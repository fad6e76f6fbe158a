# flowplanr/utils/text.py
import math
import re
from typing import List, Optional

_NON_WORD = re.compile(r"\W+")


def parse_lines(text: Optional[str]) -> List[str]:
    """Split a multi-line field into its trimmed, non-empty lines."""
    return [line.strip() for line in (text or "").split("\n") if line.strip()]


def count_lines(text: Optional[str]) -> int:
    return len(parse_lines(text))


def tokenize(text: str, min_length: int) -> List[str]:
    """Split on non-word characters, keeping tokens longer than ``min_length``."""
    return [word for word in _NON_WORD.split(text) if len(word) > min_length]


def round_half_up(value: float) -> int:
    # round() would send 2.5 to 2
    return int(math.floor(value + 0.5))


def clean_field(value: Optional[str]) -> Optional[str]:
    """Trim user input; blank becomes None."""
    if value is None:
        return None
    value = value.strip()
    return value or None
