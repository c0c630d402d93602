from __future__ import annotations

import re

from .models import LexicalCounts
from .textutils import split_words

SENTENCE_RE = re.compile(r"[^.!?]*[.!?]+")
NON_LETTER_RE = re.compile(r"[^a-z]")
SILENT_ENDING_RE = re.compile(r"(?:[^laeiouy]es|ed|[^laeiouy]e)$")
LEADING_Y_RE = re.compile(r"^y")
VOWEL_GROUP_RE = re.compile(r"[aeiouy]{1,2}")


def count_syllables(word: str) -> int:
    """Estimate the syllables in a single word."""
    cleaned = NON_LETTER_RE.sub("", word.lower())
    if not cleaned:
        return 0
    if len(cleaned) <= 3:
        return 1
    cleaned = SILENT_ENDING_RE.sub("", cleaned, count=1)
    cleaned = LEADING_Y_RE.sub("", cleaned, count=1)
    groups = VOWEL_GROUP_RE.findall(cleaned)
    return max(1, len(groups))


def count_sentences(text: str) -> int:
    """
    Count terminated sentences.

    A sentence is a run of non-terminators followed by one or more of ``.!?``.
    Text without any terminator counts as a single sentence, blank text as none.
    """
    sentences = SENTENCE_RE.findall(text) or [text]
    return sum(1 for sentence in sentences if sentence.strip())


def count(text: str) -> LexicalCounts:
    """Compute the lexical totals every other analysis step builds on."""
    words = split_words(text)
    return LexicalCounts(
        word_count=len(words),
        sentence_count=count_sentences(text),
        syllable_count=sum(count_syllables(word) for word in words),
        char_count=len(text),
    )
