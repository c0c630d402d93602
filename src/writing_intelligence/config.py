from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml


@dataclass(slots=True)
class OpenAISettings:
    """Configuration block for the OpenAI-backed rewrite service."""

    model: str = "gpt-4.1-mini"
    api_key: str | None = None
    api_key_env: str = "OPENAI_API_KEY"
    base_url: str | None = None
    organization: str | None = None
    temperature: float = 0.7
    max_output_tokens: int = 2000
    top_p: float = 0.95
    request_timeout: float = 60.0
    parallel_requests: int = 1
    max_attempts: int = 3


@dataclass(slots=True)
class EngineConfig:
    """Runtime options for report assembly, live scheduling and rewriting."""

    debounce_ms: int = 600
    min_report_chars: int = 10
    words_per_minute: int = 238
    min_read_seconds: int = 10
    max_actions: int = 3
    long_text_words: int = 80
    openai: OpenAISettings = field(default_factory=OpenAISettings)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(EngineConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "openai" in data:
        openai_value = data["openai"]
        if isinstance(openai_value, OpenAISettings):
            kwargs["openai"] = openai_value
        elif isinstance(openai_value, Mapping):
            kwargs["openai"] = _build_openai_settings(openai_value)
        else:
            raise ValueError("The 'openai' configuration block must be a mapping.")
    return kwargs


def _build_openai_settings(data: Mapping[str, Any]) -> OpenAISettings:
    openai_allowed = {field.name for field in fields(OpenAISettings)}
    filtered = {key: data[key] for key in data if key in openai_allowed}
    return OpenAISettings(**filtered)


def config_from_dict(data: Mapping[str, Any] | None) -> EngineConfig:
    """Build an EngineConfig from a dictionary-like input."""
    if data is None:
        return EngineConfig()
    return EngineConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> EngineConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> EngineConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return EngineConfig()
    return config_from_yaml(path)
