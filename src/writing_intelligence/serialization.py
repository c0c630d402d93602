from __future__ import annotations

from typing import List, Optional, TypedDict

from .models import (
    Improvement,
    IntelligenceReport,
    Issue,
    ReadabilityResult,
    RewriteResult,
    ToneResult,
)


class ReadabilityPayload(TypedDict):
    score: int
    grade: str
    level: str
    avgWordsPerSentence: float
    avgSyllablesPerWord: float


class TonePayload(TypedDict):
    tone: str
    color: str
    emoji: str


class IssuePayload(TypedDict):
    kind: str
    label: str
    detail: str
    recommendedAction: str
    severity: str


class ReportPayload(TypedDict):
    wordCount: int
    charCount: int
    sentenceCount: int
    readability: ReadabilityPayload
    tone: TonePayload
    issues: List[IssuePayload]
    suggestedActions: List[str]
    powerWordCount: int
    estimatedReadSeconds: int
    hasContent: bool


class ImprovementPayload(TypedDict):
    readabilityDelta: int
    wordCountDelta: int
    technique: str


class RewritePayload(TypedDict):
    original: str
    action: str
    alternates: List[str]
    analysis: Optional[ReadabilityPayload]
    improvement: Optional[ImprovementPayload]
    batchIndex: int


def readability_to_dict(result: ReadabilityResult) -> ReadabilityPayload:
    return {
        "score": result.score,
        "grade": result.grade,
        "level": result.level,
        "avgWordsPerSentence": result.avg_words_per_sentence,
        "avgSyllablesPerWord": result.avg_syllables_per_word,
    }


def tone_to_dict(result: ToneResult) -> TonePayload:
    return {"tone": result.tone.value, "color": result.color, "emoji": result.emoji}


def issue_to_dict(issue: Issue) -> IssuePayload:
    return {
        "kind": issue.kind,
        "label": issue.label,
        "detail": issue.detail,
        "recommendedAction": issue.recommended_action,
        "severity": issue.severity.value,
    }


def report_to_dict(report: IntelligenceReport | None) -> ReportPayload | None:
    """Serialize a report for JSON output; the no-report sentinel stays None."""
    if report is None:
        return None
    return {
        "wordCount": report.word_count,
        "charCount": report.char_count,
        "sentenceCount": report.sentence_count,
        "readability": readability_to_dict(report.readability),
        "tone": tone_to_dict(report.tone),
        "issues": [issue_to_dict(issue) for issue in report.issues],
        "suggestedActions": list(report.suggested_actions),
        "powerWordCount": report.power_word_count,
        "estimatedReadSeconds": report.estimated_read_seconds,
        "hasContent": report.has_content,
    }


def improvement_to_dict(improvement: Improvement) -> ImprovementPayload:
    return {
        "readabilityDelta": improvement.readability_delta,
        "wordCountDelta": improvement.word_count_delta,
        "technique": improvement.technique,
    }


def rewrite_result_to_dict(result: RewriteResult) -> RewritePayload:
    return {
        "original": result.original,
        "action": result.action,
        "alternates": list(result.alternates),
        "analysis": (
            readability_to_dict(result.analysis) if result.analysis else None
        ),
        "improvement": (
            improvement_to_dict(result.improvement) if result.improvement else None
        ),
        "batchIndex": result.batch_index,
    }
