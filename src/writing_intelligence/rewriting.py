from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, List

from .actions import ACTIONS, FALLBACK_ACTION, is_valid_action
from .comparison import compare_texts
from .llm.openai_client import CompletionMetadata, OpenAIRewriteClient
from .models import RewriteResult
from .readability import score_text

logger = logging.getLogger(__name__)

MAX_TEXT_CHARS = 10_000
ALTERNATES_COUNT = 3

VERSION_SPLIT_RE = re.compile(r"VERSION_\d+:")

ACTION_INSTRUCTIONS = {
    "grammar": (
        "You are a meticulous copy editor.\n"
        "Fix every grammar, spelling, punctuation and capitalization error while "
        "keeping the author's exact voice, meaning and structure. Do not rephrase "
        "correct sentences."
    ),
    "shorten": (
        "You are a ruthless editor.\n"
        "Make the text 25-40% shorter without losing important meaning: drop filler "
        "adverbs, replace verbose phrases, remove padding openers and prefer active "
        "voice. Version 1 trims lightly, version 2 cuts harder, version 3 keeps only "
        "the core."
    ),
    "enhance": (
        "You are an experienced copywriter.\n"
        "Make the text more vivid and compelling. Version 1 leads with emotion, "
        "version 2 with a clear value promise, version 3 with intrigue. Use strong "
        "verbs, specific words and a memorable ending."
    ),
    "rewrite": (
        "You are a creative writer.\n"
        "Rewrite the text with the same core meaning but different words, sentence "
        "structure, opening and framing. Each version should read as if a different "
        "writer produced it."
    ),
    "friendly": (
        "You are a warm communicator.\n"
        "Rewrite the text to sound human and friendly: speak to the reader directly, "
        "use contractions and natural phrasing, and stay intelligent."
    ),
    "formal": (
        "You are a senior communications professional.\n"
        "Rewrite the text in a polished, formal register with precise vocabulary, no "
        "slang or contractions and no hedging."
    ),
    "hook": (
        "You write opening lines that stop readers scrolling.\n"
        "Rewrite the whole post behind an irresistible first line, choosing a "
        "different hook formula for each version, then let the body flow from it."
    ),
    "engage": (
        "You understand why people comment, share and save posts.\n"
        "Rewrite the text to maximize engagement. Version 1 ends with a genuine "
        "question, version 2 invites sharing, version 3 is structured as a short, "
        "save-worthy guide."
    ),
    "punch": (
        "You write tight, punchy prose.\n"
        "Cut everything soft, replace passive constructions with strong active verbs, "
        "lead with the strongest point and end on a line that lands."
    ),
    "story": (
        "You are a storyteller.\n"
        "Turn the text into a micro-story: scene, tension, turn, resolution and a "
        "universal takeaway. Use first person, second person and third person "
        "across the three versions."
    ),
}

OUTPUT_FORMAT = (
    "Format your response EXACTLY like this (no other text before VERSION_1):\n"
    "VERSION_1:\n[complete version 1]\n\n"
    "VERSION_2:\n[complete version 2]\n\n"
    "VERSION_3:\n[complete version 3]"
)


class RewriteError(RuntimeError):
    """Raised when a rewrite produced no usable alternates."""


class RewriteValidationError(ValueError):
    """Raised when a rewrite request is malformed."""


@dataclass(slots=True)
class RewriteRequest:
    """Text to rewrite and the action to apply."""

    text: str
    action: str
    user_style: str = "neutral"
    batch_index: int = 0


def validate_request(request: RewriteRequest) -> None:
    if not isinstance(request.text, str) or not request.text.strip():
        raise RewriteValidationError("text is required and must be non-empty")
    if len(request.text) > MAX_TEXT_CHARS:
        raise RewriteValidationError(
            f"text too long (max {MAX_TEXT_CHARS:,} chars)"
        )
    if not is_valid_action(request.action):
        raise RewriteValidationError(
            f"action must be one of: {' | '.join(ACTIONS)}"
        )


def _diversity_note(batch_index: int) -> str:
    if batch_index <= 0:
        return ""
    if batch_index == 1:
        return (
            "\n\nIMPORTANT: These must be completely different from any earlier "
            "batch: different sentence structures, openers and vocabulary."
        )
    return (
        f"\n\nIMPORTANT: Batch {batch_index + 1}. Take bold creative risks with "
        "unexpected angles, formats or emotional registers."
    )


def build_prompt(
    action: str, text: str, user_style: str = "neutral", batch_index: int = 0
) -> str:
    """Assemble the model prompt for ``action``; unknown actions fall back to enhance."""
    instructions = ACTION_INSTRUCTIONS.get(action, ACTION_INSTRUCTIONS[FALLBACK_ACTION])
    style_note = ""
    if user_style and user_style != "neutral":
        style_note = (
            f"\nAuthor's preferred style: {user_style}. Honour this in all versions.\n"
        )
    return (
        f"{instructions}\n\nTEXT:\n{text}\n"
        f"{style_note}{_diversity_note(batch_index)}\n{OUTPUT_FORMAT}"
    )


def parse_versions(
    raw: str, original: str, limit: int = ALTERNATES_COUNT
) -> List[str]:
    """Pull ``VERSION_n:`` blocks out of model output, skipping blanks and echoes."""
    original_clean = original.strip()
    blocks = VERSION_SPLIT_RE.split(raw)
    versions = [
        block.strip()
        for block in blocks[1:]
        if block.strip() and block.strip() != original_clean
    ]
    if not versions:
        fallback = raw.strip()
        if fallback and fallback != original_clean:
            return [fallback]
    return versions[:limit]


class Rewriter(ABC):
    """Abstract backend that produces raw multi-version rewrite output."""

    @abstractmethod
    def rewrite(self, request: RewriteRequest) -> str:
        """Return raw model output for ``request``."""
        raise NotImplementedError


class NoOpRewriter(Rewriter):
    """Returns the original text unchanged."""

    def rewrite(self, request: RewriteRequest) -> str:
        return request.text


class CallableRewriter(Rewriter):
    """Adapt an arbitrary callable into the Rewriter interface."""

    def __init__(self, func: Callable[[RewriteRequest], str]) -> None:
        self._func = func

    def rewrite(self, request: RewriteRequest) -> str:
        return self._func(request)


class OpenAIRewriter(Rewriter):
    """Rewriter implementation backed by the OpenAI Responses API."""

    def __init__(self, client: OpenAIRewriteClient) -> None:
        self._client = client

    def rewrite(self, request: RewriteRequest) -> str:
        prompt = build_prompt(
            request.action, request.text, request.user_style, request.batch_index
        )
        metadata = CompletionMetadata(
            action=request.action,
            batch_index=request.batch_index,
            char_count=len(request.text),
        )
        return self._client.complete(prompt=prompt, metadata=metadata)


class RewriteService:
    """Rewrite text and score the first alternate against the original."""

    def __init__(self, rewriter: Rewriter) -> None:
        self._rewriter = rewriter

    def run(self, request: RewriteRequest) -> RewriteResult:
        validate_request(request)
        logger.info(
            "Rewriting action=%s batch=%s chars=%s",
            request.action,
            request.batch_index,
            len(request.text),
        )
        raw = self._rewriter.rewrite(request)
        alternates = parse_versions(raw, request.text)
        if not alternates:
            raise RewriteError("No valid alternates generated; try different text.")

        improvement = compare_texts(request.text, alternates[0], request.action)
        logger.info(
            "Rewrite action=%s produced %s alternates, readability delta %+d",
            request.action,
            len(alternates),
            improvement.readability_delta,
        )
        return RewriteResult(
            original=request.text,
            action=request.action,
            alternates=tuple(alternates),
            batch_index=request.batch_index,
            analysis=score_text(request.text),
            improvement=improvement,
        )
