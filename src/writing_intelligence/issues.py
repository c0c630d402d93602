"""
Rule-based writing issue detection.

Each rule is an independent ``(predicate, factory)`` pair. Rules are evaluated
in declaration order and each fires at most once per text, so the detection
order of the returned issues is the order of ``DEFAULT_RULES``. New heuristics
are added by appending a rule; severity ordering is applied later by the
action suggester.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, List, Sequence, Tuple

from .lexicons import CTA_RE, FILLER_WORDS, PASSIVE_VOICE_PATTERNS, WEAK_OPENERS
from .models import Issue, Severity
from .textutils import normalize_token, split_words

FILLER_MIN = 2
FILLER_HIGH = 4
PASSIVE_MIN = 2
LONG_SENTENCE_WORDS = 30
SENTENCE_FRAGMENT_MIN_CHARS = 10
CTA_MIN_WORDS = 30

SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")

FILLER_PHRASES: Tuple[Tuple[str, ...], ...] = tuple(
    sorted(tuple(entry.split()) for entry in FILLER_WORDS)
)


@dataclass(frozen=True, slots=True)
class IssueContext:
    """Text under inspection plus the token views shared across rules."""

    text: str
    words: Tuple[str, ...] = field(init=False)
    tokens: Tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        words = tuple(split_words(self.text))
        object.__setattr__(self, "words", words)
        object.__setattr__(self, "tokens", tuple(normalize_token(w) for w in words))


@dataclass(frozen=True, slots=True)
class IssueRule:
    kind: str
    predicate: Callable[[IssueContext], bool]
    factory: Callable[[IssueContext], Issue]


def count_filler_words(tokens: Sequence[str]) -> int:
    """Count filler entries, including multi-word ones, in normalized tokens."""
    total = 0
    for idx in range(len(tokens)):
        for phrase in FILLER_PHRASES:
            if tuple(tokens[idx : idx + len(phrase)]) == phrase:
                total += 1
    return total


def count_passive_constructions(text: str) -> int:
    return sum(len(pattern.findall(text)) for pattern in PASSIVE_VOICE_PATTERNS)


def has_weak_opener(text: str) -> bool:
    return any(pattern.search(text) for pattern in WEAK_OPENERS)


def count_long_sentences(text: str) -> int:
    fragments = [
        fragment.strip()
        for fragment in SENTENCE_SPLIT_RE.split(text)
        if len(fragment.strip()) > SENTENCE_FRAGMENT_MIN_CHARS
    ]
    return sum(1 for fragment in fragments if len(fragment.split()) > LONG_SENTENCE_WORDS)


def lacks_engagement_hook(ctx: IssueContext) -> bool:
    return len(ctx.words) > CTA_MIN_WORDS and CTA_RE.search(ctx.text) is None


def _filler_issue(ctx: IssueContext) -> Issue:
    fillers = count_filler_words(ctx.tokens)
    return Issue(
        kind="filler",
        label=f"{fillers} filler words",
        detail="Words like 'really', 'just', 'basically' weaken your message",
        recommended_action="shorten",
        severity=Severity.HIGH if fillers >= FILLER_HIGH else Severity.MEDIUM,
    )


def _passive_issue(ctx: IssueContext) -> Issue:
    return Issue(
        kind="passive",
        label=f"{count_passive_constructions(ctx.text)} passive constructions",
        detail="Active voice is stronger and more direct",
        recommended_action="punch",
        severity=Severity.MEDIUM,
    )


def _opener_issue(ctx: IssueContext) -> Issue:
    return Issue(
        kind="opener",
        label="Weak opening line",
        detail="Your first line should grab attention immediately",
        recommended_action="hook",
        severity=Severity.HIGH,
    )


def _length_issue(ctx: IssueContext) -> Issue:
    long_count = count_long_sentences(ctx.text)
    plural = "s" if long_count > 1 else ""
    return Issue(
        kind="length",
        label=f"{long_count} very long sentence{plural}",
        detail="Long sentences lose readers on mobile; break them up",
        recommended_action="shorten",
        severity=Severity.MEDIUM,
    )


def _cta_issue(ctx: IssueContext) -> Issue:
    return Issue(
        kind="cta",
        label="No engagement hook",
        detail="Posts with a question or CTA get 2x more comments",
        recommended_action="engage",
        severity=Severity.LOW,
    )


DEFAULT_RULES: Tuple[IssueRule, ...] = (
    IssueRule(
        "filler",
        lambda ctx: count_filler_words(ctx.tokens) >= FILLER_MIN,
        _filler_issue,
    ),
    IssueRule(
        "passive",
        lambda ctx: count_passive_constructions(ctx.text) >= PASSIVE_MIN,
        _passive_issue,
    ),
    IssueRule("opener", lambda ctx: has_weak_opener(ctx.text), _opener_issue),
    IssueRule("length", lambda ctx: count_long_sentences(ctx.text) >= 1, _length_issue),
    IssueRule("cta", lacks_engagement_hook, _cta_issue),
)


def detect(text: str, rules: Sequence[IssueRule] = DEFAULT_RULES) -> List[Issue]:
    """Run every rule against ``text`` and collect the issues that fire."""
    ctx = IssueContext(text)
    return [rule.factory(ctx) for rule in rules if rule.predicate(ctx)]
