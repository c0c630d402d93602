from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Tuple

from .lexicons import CASUAL_WORDS, CONTRACTION_RE, FORMAL_WORDS, POWER_WORDS
from .models import Tone, ToneResult

TONE_DISPLAY = {
    Tone.CASUAL: ("#38bdf8", "😊"),
    Tone.FORMAL: ("#94a3b8", "🎩"),
    Tone.PASSIONATE: ("#f97316", "🔥"),
    Tone.ENGAGING: ("#a855f7", "💬"),
    Tone.NEUTRAL: ("#84cc16", "📝"),
}


@dataclass(frozen=True, slots=True)
class ToneScores:
    """Raw signal totals accumulated before a tone is chosen."""

    casual: int
    formal: int
    passionate: int
    questions: int


# Evaluated in order; the first matching rule decides the tone.
TONE_RULES: List[Tuple[Callable[[ToneScores], bool], Tone]] = [
    (lambda s: s.casual > s.formal + 2 and s.casual > s.passionate, Tone.CASUAL),
    (lambda s: s.formal > s.casual + 2, Tone.FORMAL),
    (lambda s: s.passionate > 3, Tone.PASSIONATE),
    (lambda s: s.questions > 1, Tone.ENGAGING),
]


def tone_scores(text: str) -> ToneScores:
    """Accumulate casual, formal and passionate signals for ``text``."""
    casual = formal = passionate = 0
    # Tokens keep attached punctuation: "fire," is not the lexicon entry "fire".
    for token in text.lower().split():
        if token in CASUAL_WORDS:
            casual += 2
        if token in FORMAL_WORDS:
            formal += 2
        if token in POWER_WORDS:
            passionate += 1

    passionate += text.count("!")
    casual += len(CONTRACTION_RE.findall(text))
    return ToneScores(
        casual=casual,
        formal=formal,
        passionate=passionate,
        questions=text.count("?"),
    )


def tone_for_scores(scores: ToneScores) -> Tone:
    for matches, tone in TONE_RULES:
        if matches(scores):
            return tone
    return Tone.NEUTRAL


def classify(text: str) -> ToneResult:
    """Pick exactly one tone for ``text``."""
    tone = tone_for_scores(tone_scores(text))
    color, emoji = TONE_DISPLAY[tone]
    return ToneResult(tone=tone, color=color, emoji=emoji)
