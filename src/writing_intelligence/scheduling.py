"""
Debounced report evaluation for live text sources.

``ReportDebouncer`` recomputes an ``IntelligenceReport`` only after the text
has been quiet for ``EngineConfig.debounce_ms``. Timers are reached through a
small ``Scheduler`` protocol so the same state machine runs on plain threads,
on an asyncio loop, or on a manual clock in tests.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from enum import Enum
from typing import Callable, Optional, Protocol

from .config import EngineConfig
from .models import IntelligenceReport
from .pipeline import build_report, has_enough_text

logger = logging.getLogger(__name__)

Cancel = Callable[[], None]
ReportCallback = Callable[[Optional[IntelligenceReport]], None]


class Scheduler(Protocol):
    """Runs a callback once after ``delay`` seconds unless cancelled."""

    def schedule(self, delay: float, callback: Callable[[], None]) -> Cancel:
        ...


class ThreadingScheduler:
    """Scheduler backed by ``threading.Timer``."""

    def schedule(self, delay: float, callback: Callable[[], None]) -> Cancel:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer.cancel


class AsyncioScheduler:
    """Scheduler backed by ``loop.call_later``; must be used from the loop thread."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def schedule(self, delay: float, callback: Callable[[], None]) -> Cancel:
        loop = self._loop or asyncio.get_running_loop()
        handle = loop.call_later(delay, callback)
        return handle.cancel


class DebounceState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    EVALUATED = "evaluated"


class ReportDebouncer:
    """
    Idle -> Pending -> Evaluated state machine around ``build_report``.

    Every ``update`` supersedes the previous one: the outstanding timer is
    cancelled and a generation counter guards against a timer that already
    started firing, so at most one evaluation is published per quiet period
    and an older text never overwrites a newer report.
    """

    def __init__(
        self,
        on_report: ReportCallback,
        *,
        scheduler: Scheduler | None = None,
        config: EngineConfig | None = None,
        analyze: Callable[..., Optional[IntelligenceReport]] = build_report,
    ) -> None:
        self._on_report = on_report
        self._scheduler: Scheduler = scheduler or ThreadingScheduler()
        self._config = config or EngineConfig()
        self._analyze = analyze
        self._lock = threading.RLock()
        self._cancel: Cancel | None = None
        self._generation = 0
        self._state = DebounceState.IDLE
        self._report: IntelligenceReport | None = None
        self._closed = False

    @property
    def state(self) -> DebounceState:
        return self._state

    @property
    def report(self) -> IntelligenceReport | None:
        """Most recently published report."""
        return self._report

    @property
    def closed(self) -> bool:
        return self._closed

    def update(self, text: str) -> None:
        """Register a text change and restart the quiet period."""
        with self._lock:
            if self._closed:
                raise RuntimeError("Cannot update a closed ReportDebouncer.")
            self._cancel_pending()
            self._generation += 1

            if not has_enough_text(text, self._config):
                self._state = DebounceState.IDLE
                cleared = self._report is not None
                self._report = None
            else:
                cleared = False
                generation = self._generation
                delay = self._config.debounce_ms / 1000.0
                self._cancel = self._scheduler.schedule(
                    delay, lambda: self._evaluate(generation, text)
                )
                self._state = DebounceState.PENDING
                logger.debug("Scheduled evaluation #%s in %.3fs", generation, delay)
        if cleared:
            self._on_report(None)

    def close(self) -> None:
        """Cancel any outstanding evaluation; nothing is published afterwards."""
        with self._lock:
            self._cancel_pending()
            self._generation += 1
            self._closed = True
            self._state = DebounceState.IDLE

    def __enter__(self) -> "ReportDebouncer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _evaluate(self, generation: int, text: str) -> None:
        # Analysis and the callback run without the lock held; the generation is
        # checked again before the result is committed.
        with self._lock:
            if not self._is_current(generation):
                logger.debug("Dropped superseded evaluation #%s", generation)
                return
            self._cancel = None
        report = self._analyze(text, self._config)
        with self._lock:
            if not self._is_current(generation):
                logger.debug("Discarded stale report from evaluation #%s", generation)
                return
            self._report = report
            self._state = DebounceState.EVALUATED
        self._on_report(report)

    def _is_current(self, generation: int) -> bool:
        return not self._closed and generation == self._generation

    def _cancel_pending(self) -> None:
        if self._cancel is not None:
            logger.debug("Cancelled pending evaluation #%s", self._generation)
            self._cancel()
            self._cancel = None
