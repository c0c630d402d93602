"""
writing_intelligence package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import EngineConfig, config_from_dict, config_from_yaml, load_config
from .lexical import count
from .pipeline import build_report
from .readability import score, score_text
from .scheduling import ReportDebouncer

__all__ = [
    "EngineConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "count",
    "score",
    "score_text",
    "build_report",
    "ReportDebouncer",
]

__version__ = "0.1.0"
