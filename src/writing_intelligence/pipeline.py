from __future__ import annotations

from typing import Iterable

from .actions import rank_issues, suggest
from .config import EngineConfig
from .issues import detect
from .lexical import count
from .lexicons import POWER_WORDS
from .models import IntelligenceReport
from .readability import MIN_WORDS, score
from .textutils import round_int, split_words
from .tone import classify

_DEFAULT_CONFIG = EngineConfig()


def has_enough_text(text: str, config: EngineConfig | None = None) -> bool:
    """Return True when ``text`` clears the minimum length for a report."""
    cfg = config or _DEFAULT_CONFIG
    return len(text.strip()) >= cfg.min_report_chars


def count_power_words(words: Iterable[str]) -> int:
    return sum(1 for word in words if word.lower() in POWER_WORDS)


def estimate_read_seconds(word_count: int, config: EngineConfig | None = None) -> int:
    """Reading time at an average pace, never below the configured floor."""
    cfg = config or _DEFAULT_CONFIG
    seconds = round_int(word_count / cfg.words_per_minute * 60)
    return max(cfg.min_read_seconds, seconds)


def build_report(
    text: str, config: EngineConfig | None = None
) -> IntelligenceReport | None:
    """
    Run the full analysis for ``text``.

    Returns None when the trimmed text is too short for the heuristics to mean
    anything; callers treat that as "not enough signal yet".
    """
    cfg = config or _DEFAULT_CONFIG
    if not has_enough_text(text, cfg):
        return None

    counts = count(text)
    issues = rank_issues(detect(text))
    suggested = suggest(
        issues,
        counts.word_count,
        long_text_words=cfg.long_text_words,
        max_actions=cfg.max_actions,
    )
    return IntelligenceReport(
        word_count=counts.word_count,
        char_count=counts.char_count,
        sentence_count=counts.sentence_count,
        readability=score(counts),
        tone=classify(text),
        issues=tuple(issues),
        suggested_actions=tuple(suggested),
        power_word_count=count_power_words(split_words(text)),
        estimated_read_seconds=estimate_read_seconds(counts.word_count, cfg),
        has_content=counts.word_count >= MIN_WORDS,
    )
