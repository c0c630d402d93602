"""
Fixed lexicons and patterns behind the writing heuristics.

The engine is a set of calibrated rules rather than a model, so these lists
are part of its contract: tone thresholds and issue counts were tuned against
exactly these entries.
"""

from __future__ import annotations

import re

FILLER_WORDS = frozenset(
    {
        "basically",
        "literally",
        "honestly",
        "actually",
        "simply",
        "just",
        "really",
        "very",
        "quite",
        "rather",
        "somewhat",
        "kind of",
        "sort of",
        "you know",
        "i mean",
        "i guess",
        "needless to say",
        "at the end of the day",
        "pretty much",
        "a little bit",
    }
)

POWER_WORDS = frozenset(
    {
        "transform",
        "breakthrough",
        "ignite",
        "master",
        "unlock",
        "shatter",
        "forge",
        "conquer",
        "dominate",
        "crush",
        "skyrocket",
        "surge",
        "explode",
        "revolutionary",
        "unstoppable",
        "game-changer",
        "game changer",
        "remarkable",
        "extraordinary",
        "unprecedented",
        "proven",
        "guaranteed",
        "instantly",
        "immediately",
        "now",
        "discover",
        "reveal",
        "secret",
        "hidden",
        "exclusive",
        "urgent",
        "critical",
        "essential",
        "vital",
        "powerful",
        "elite",
        "ultimate",
    }
)

CASUAL_WORDS = frozenset(
    {
        "fire",
        "lit",
        "sick",
        "dope",
        "elite",
        "solid",
        "goated",
        "lowkey",
        "highkey",
        "banger",
        "no cap",
        "fr",
        "pumped",
        "stoked",
        "hyped",
        "grind",
        "hustle",
        "vibe",
        "vibes",
        "ngl",
        "tbh",
        "imo",
        "lol",
        "lmao",
        "haha",
        "omg",
        "yeah",
        "yep",
        "nope",
        "gonna",
        "wanna",
        "gotta",
    }
)

FORMAL_WORDS = frozenset(
    {
        "therefore",
        "furthermore",
        "consequently",
        "nevertheless",
        "notwithstanding",
        "pursuant",
        "herein",
        "aforementioned",
        "exemplary",
        "paramount",
        "substantiate",
        "corroborate",
        "commendable",
        "meritorious",
        "indispensable",
        "endeavour",
        "utilise",
        "facilitate",
        "necessitate",
        "formulate",
        "procure",
        "augment",
        "elucidate",
    }
)

# Word boundaries and \w are ASCII-only so every runtime agrees on matches.
_FLAGS = re.IGNORECASE | re.ASCII

CONTRACTION_RE = re.compile(
    r"\b(don't|I'm|won't|can't|it's|you're|we're|they're)\b", _FLAGS
)

PASSIVE_VOICE_PATTERNS = (
    re.compile(r"\b(is|are|was|were|be|been|being)\s+(being\s+)?\w+ed\b", _FLAGS),
    re.compile(r"\b(is|are|was|were)\s+\w+en\b", _FLAGS),
)

WEAK_OPENERS = (
    re.compile(r"^(so,?\s+)?I (just |really )?(wanted|felt|thought|needed) to", _FLAGS),
    re.compile(r"^(honestly|basically|frankly|genuinely),", _FLAGS),
    re.compile(r"^(as you (may|might|probably|already) know)", _FLAGS),
    re.compile(r"^(let me (start|begin) by)", _FLAGS),
    re.compile(r"^(in this (post|article|thread),? I)", _FLAGS),
    re.compile(r"^today I (want|would like|am going) to", _FLAGS),
)

CTA_RE = re.compile(
    r"\?|comment|share|tell me|let me know|tag|drop|what do you|have you", _FLAGS
)
