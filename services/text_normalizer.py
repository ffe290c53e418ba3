import math
import re
from typing import Optional

_WHITESPACE = re.compile(r'\s+')


def normalize(text: Optional[str]) -> str:
    """
    Collapse whitespace runs (line breaks included) to a single space and trim.
    Case is left untouched.
    """
    if not text:
        return ""
    return _WHITESPACE.sub(' ', text).strip()


def word_count(text: str) -> int:
    """Number of whitespace-separated tokens"""
    return len(text.split())


def is_blank(text: Optional[str]) -> bool:
    return not text or not text.strip()


def clamp(value: int, lower: int = 0, upper: int = 100) -> int:
    return max(lower, min(upper, value))


def round_half_up(value: float) -> int:
    # round() would use banker's rounding, scores round .5 upwards
    return int(math.floor(value + 0.5))
