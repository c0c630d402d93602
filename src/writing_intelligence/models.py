from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Tone(str, Enum):
    """Closed set of tone categories."""

    CASUAL = "Casual"
    FORMAL = "Formal"
    PASSIONATE = "Passionate"
    ENGAGING = "Engaging"
    NEUTRAL = "Neutral"


class Severity(str, Enum):
    """Issue severities, declared from most to least urgent."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True, slots=True)
class LexicalCounts:
    """Word, sentence, syllable and character totals for a text sample."""

    word_count: int
    sentence_count: int
    syllable_count: int
    char_count: int


@dataclass(frozen=True, slots=True)
class ReadabilityResult:
    """Flesch reading ease plus a Flesch-Kincaid grade label."""

    score: int
    grade: str
    level: str
    avg_words_per_sentence: float
    avg_syllables_per_word: float


@dataclass(frozen=True, slots=True)
class ToneResult:
    """Selected tone and the display tokens the editor renders with it."""

    tone: Tone
    color: str
    emoji: str


@dataclass(frozen=True, slots=True)
class Issue:
    """A flagged writing issue and the action that addresses it."""

    kind: str
    label: str
    detail: str
    recommended_action: str
    severity: Severity


@dataclass(frozen=True, slots=True)
class IntelligenceReport:
    """Full analysis of one text sample."""

    word_count: int
    char_count: int
    sentence_count: int
    readability: ReadabilityResult
    tone: ToneResult
    issues: tuple[Issue, ...]
    suggested_actions: tuple[str, ...]
    power_word_count: int
    estimated_read_seconds: int
    has_content: bool


@dataclass(frozen=True, slots=True)
class Improvement:
    """Before/after comparison attached to a rewrite response."""

    readability_delta: int
    word_count_delta: int
    technique: str


@dataclass(frozen=True, slots=True)
class RewriteResult:
    """Response envelope of the rewrite-and-compare service."""

    original: str
    action: str
    alternates: tuple[str, ...]
    batch_index: int = 0
    analysis: ReadabilityResult | None = None
    improvement: Improvement | None = None
