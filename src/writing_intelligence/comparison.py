from __future__ import annotations

from .models import Improvement, ReadabilityResult
from .readability import score_text
from .textutils import split_words


def readability_delta(before: ReadabilityResult, after: ReadabilityResult) -> int:
    return after.score - before.score


def compare_texts(before: str, after: str, technique: str) -> Improvement:
    """Score both texts independently and report how the rewrite moved them."""
    before_result = score_text(before)
    after_result = score_text(after)
    return Improvement(
        readability_delta=readability_delta(before_result, after_result),
        word_count_delta=len(split_words(after)) - len(split_words(before)),
        technique=technique,
    )
