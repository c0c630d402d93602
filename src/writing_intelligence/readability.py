"""
Flesch reading ease and Flesch-Kincaid grade scoring.

This module is the single implementation shared by the live editor report and
the server-side rewrite comparison. It depends only on the lexical counter so
both callers get identical numbers for identical text.
"""

from __future__ import annotations

from typing import Tuple

from .lexical import count
from .models import LexicalCounts, ReadabilityResult
from .textutils import round_half_up, round_int

MIN_WORDS = 3
NOT_AVAILABLE = "N/A"

# Inclusive lower bounds, checked from easiest to hardest.
LEVEL_BANDS: Tuple[Tuple[int, str], ...] = (
    (90, "Very Easy"),
    (70, "Easy"),
    (60, "Standard"),
    (50, "Fairly Hard"),
    (30, "Difficult"),
)
HARDEST_LEVEL = "Very Hard"

COLLEGE_GRADE = 13

DEGENERATE_RESULT = ReadabilityResult(
    score=100,
    grade=NOT_AVAILABLE,
    level=NOT_AVAILABLE,
    avg_words_per_sentence=0.0,
    avg_syllables_per_word=0.0,
)


def flesch_reading_ease(avg_words: float, avg_syllables: float) -> float:
    return 206.835 - 1.015 * avg_words - 84.6 * avg_syllables


def flesch_kincaid_grade(avg_words: float, avg_syllables: float) -> float:
    return 0.39 * avg_words + 11.8 * avg_syllables - 15.59


def reading_level(score: int) -> str:
    """Map a 0-100 reading-ease score to its descriptive band."""
    for lower_bound, label in LEVEL_BANDS:
        if score >= lower_bound:
            return label
    return HARDEST_LEVEL


def grade_number(avg_words: float, avg_syllables: float) -> int:
    """Whole school grade, never below 1."""
    return max(1, round_int(flesch_kincaid_grade(avg_words, avg_syllables)))


def grade_label(grade: int) -> str:
    if grade >= COLLEGE_GRADE:
        return "College+"
    return f"Grade {grade}"


def score(counts: LexicalCounts) -> ReadabilityResult:
    """Score lexical counts; texts under three words get the degenerate result."""
    if counts.word_count < MIN_WORDS or counts.sentence_count == 0:
        return DEGENERATE_RESULT

    avg_words = counts.word_count / counts.sentence_count
    avg_syllables = counts.syllable_count / counts.word_count
    raw = flesch_reading_ease(avg_words, avg_syllables)
    clamped = min(100.0, max(0.0, raw))
    ease = round_int(clamped)

    return ReadabilityResult(
        score=ease,
        grade=grade_label(grade_number(avg_words, avg_syllables)),
        level=reading_level(ease),
        avg_words_per_sentence=round_half_up(avg_words, 1),
        avg_syllables_per_word=round_half_up(avg_syllables, 2),
    )


def score_text(text: str) -> ReadabilityResult:
    """Count and score raw text in one call."""
    return score(count(text))
