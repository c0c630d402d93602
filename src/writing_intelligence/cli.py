from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import typer
import yaml

from .comparison import compare_texts
from .config import EngineConfig, OpenAISettings, load_config
from .llm import OpenAIRewriteClient
from .pipeline import build_report
from .readability import score_text
from .rewriting import (
    OpenAIRewriter,
    RewriteError,
    RewriteRequest,
    RewriteService,
    RewriteValidationError,
    validate_request,
)
from .serialization import (
    improvement_to_dict,
    readability_to_dict,
    report_to_dict,
    rewrite_result_to_dict,
)

app = typer.Typer(help="Writing Intelligence CLI.", no_args_is_help=True)


@app.callback()
def configure(
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)."
    ),
) -> None:
    """Score drafts for readability, tone and common writing issues."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def analyze(
    input_path: Path | None = typer.Option(
        None, exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    text: str | None = typer.Option(None, "--text", "-t", help="Inline text to analyze."),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Print the full intelligence report as JSON (null when the text is too short)."""
    cfg = load_config(config)
    report = build_report(_read_input(input_path, text), cfg)
    _echo_json(report_to_dict(report))


@app.command()
def readability(
    input_path: Path | None = typer.Option(
        None, exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    text: str | None = typer.Option(None, "--text", "-t", help="Inline text to score."),
) -> None:
    """Print only the readability result as JSON."""
    _echo_json(readability_to_dict(score_text(_read_input(input_path, text))))


@app.command()
def compare(
    before: Path = typer.Option(..., exists=True, readable=True, dir_okay=False),
    after: Path = typer.Option(..., exists=True, readable=True, dir_okay=False),
    technique: str = typer.Option("rewrite", help="Label recorded with the delta."),
) -> None:
    """Compare two versions of a text and print the improvement deltas."""
    improvement = compare_texts(
        before.read_text(encoding="utf-8"),
        after.read_text(encoding="utf-8"),
        technique,
    )
    _echo_json(improvement_to_dict(improvement))


@app.command()
def enhance(
    action: str = typer.Option(..., "--action", "-a", help="Rewrite action to apply."),
    input_path: Path | None = typer.Option(
        None, exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    text: str | None = typer.Option(None, "--text", "-t", help="Inline text to rewrite."),
    user_style: str = typer.Option("neutral", "--user-style"),
    batch_index: int = typer.Option(0, "--batch-index", min=0),
    config: Path | None = typer.Option(None, "--config", "-c"),
    openai_model: str | None = typer.Option(
        None, "--openai-model", help="OpenAI model identifier (e.g., gpt-4.1-mini)."
    ),
    openai_api_key: str | None = typer.Option(
        None, "--openai-api-key", help="Explicit OpenAI API key (prefer env vars)."
    ),
    openai_api_key_env: str | None = typer.Option(
        None,
        "--openai-api-key-env",
        help="Environment variable to read the OpenAI API key from.",
    ),
    openai_base_url: str | None = typer.Option(
        None, "--openai-base-url", help="Custom OpenAI base URL (Azure, proxy, etc.)."
    ),
    openai_temperature: float | None = typer.Option(
        None, "--openai-temperature", help="Sampling temperature for rewrites."
    ),
    openai_max_output_tokens: int | None = typer.Option(
        None, "--openai-max-output-tokens", help="Max tokens the rewrite can emit."
    ),
) -> None:
    """Rewrite text with OpenAI and report the readability change."""
    cfg = load_config(config)
    _apply_openai_overrides(
        cfg,
        openai_model,
        openai_api_key,
        openai_api_key_env,
        openai_base_url,
        openai_temperature,
        openai_max_output_tokens,
    )
    request = RewriteRequest(
        text=_read_input(input_path, text),
        action=action,
        user_style=user_style,
        batch_index=batch_index,
    )
    try:
        validate_request(request)
    except RewriteValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc
    api_key = _resolve_openai_api_key(cfg.openai)
    client = OpenAIRewriteClient(cfg.openai, api_key=api_key)
    service = RewriteService(OpenAIRewriter(client))
    try:
        result = service.run(request)
    except RewriteError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    _echo_json(rewrite_result_to_dict(result))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = EngineConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _read_input(input_path: Path | None, text: str | None) -> str:
    """Resolve the text to analyze from exactly one of --input-path / --text."""
    if (input_path is None) == (text is None):
        raise typer.BadParameter("Provide exactly one of --input-path or --text.")
    if input_path is not None:
        return input_path.read_text(encoding="utf-8")
    return text or ""


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _apply_openai_overrides(
    config: EngineConfig,
    openai_model: str | None,
    openai_api_key: str | None,
    openai_api_key_env: str | None,
    openai_base_url: str | None,
    openai_temperature: float | None,
    openai_max_output_tokens: int | None,
) -> None:
    """Override OpenAI settings from CLI flags."""
    settings = config.openai
    if openai_model:
        settings.model = openai_model
    if openai_api_key:
        settings.api_key = openai_api_key
    if openai_api_key_env:
        settings.api_key_env = openai_api_key_env
    if openai_base_url:
        settings.base_url = openai_base_url
    if openai_temperature is not None:
        settings.temperature = openai_temperature
    if openai_max_output_tokens is not None:
        settings.max_output_tokens = openai_max_output_tokens


def _resolve_openai_api_key(settings: OpenAISettings) -> str:
    """Resolve the API key from explicit config or the configured environment variable."""
    if settings.api_key:
        return settings.api_key
    env_name = settings.api_key_env or "OPENAI_API_KEY"
    if env_name in os.environ and os.environ[env_name]:
        return os.environ[env_name]
    raise RuntimeError(
        "OpenAI API key not provided. Use --openai-api-key or set the configured environment variable."
    )


if __name__ == "__main__":
    main()
