from __future__ import annotations

from typing import Iterable, List

from .models import Issue, Severity

ACTIONS = (
    "grammar",
    "shorten",
    "enhance",
    "rewrite",
    "friendly",
    "formal",
    "hook",
    "engage",
    "punch",
    "story",
)

FALLBACK_ACTION = "enhance"
LENGTH_ACTION = "shorten"
LONG_TEXT_WORDS = 80
TOP_ISSUES = 2
MAX_ACTIONS = 3

# Total order, most urgent first.
SEVERITY_ORDER = (Severity.HIGH, Severity.MEDIUM, Severity.LOW)


class UnknownSeverityError(ValueError):
    """Raised when an issue carries a severity outside the known order."""


def severity_rank(severity: Severity | str) -> int:
    """Return the sort position of ``severity`` (0 is most urgent)."""
    try:
        return SEVERITY_ORDER.index(Severity(severity))
    except ValueError as exc:
        raise UnknownSeverityError(f"Unknown severity '{severity}'.") from exc


def rank_issues(issues: Iterable[Issue]) -> List[Issue]:
    """Stable sort by severity; issues of equal severity keep detection order."""
    return sorted(issues, key=lambda issue: severity_rank(issue.severity))


def is_valid_action(action: str) -> bool:
    return action in ACTIONS


def suggest(
    issues: Iterable[Issue],
    word_count: int,
    *,
    long_text_words: int = LONG_TEXT_WORDS,
    max_actions: int = MAX_ACTIONS,
) -> List[str]:
    """
    Recommend up to ``max_actions`` next actions for the detected issues.

    The two most severe issues contribute their actions (ties keep detection
    order), long texts always get "shorten", and an empty result falls back
    to "enhance".
    """
    ranked = rank_issues(issues)
    suggestions: List[str] = []
    for issue in ranked[:TOP_ISSUES]:
        if issue.recommended_action not in suggestions:
            suggestions.append(issue.recommended_action)

    if word_count > long_text_words and LENGTH_ACTION not in suggestions:
        suggestions.append(LENGTH_ACTION)

    if not suggestions:
        suggestions.append(FALLBACK_ACTION)

    return suggestions[:max_actions]
