from __future__ import annotations

import math
import re
from typing import List

EDGE_PUNCT_RE = re.compile(r"^[\W_]+|[\W_]+$", re.UNICODE)


def split_words(text: str) -> List[str]:
    """Split text into whitespace-delimited, non-empty tokens."""
    return text.split()


def normalize_token(token: str) -> str:
    """Lowercase a token and strip punctuation hugging either edge."""
    return EDGE_PUNCT_RE.sub("", token.lower())


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round halves toward positive infinity.

    Every count and display value in a report goes through this helper so the
    editor and the server produce the same numbers; Python's built-in round()
    uses banker's rounding and would disagree on exact halves.
    """
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    """Round half up to an int."""
    return int(math.floor(value + 0.5))
