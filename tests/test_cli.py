import json
from pathlib import Path
from typing import Any

from pytest import MonkeyPatch
from typer.testing import CliRunner

from writing_intelligence.cli import app

runner = CliRunner()

RAW_OUTPUT = "VERSION_1:\nWe fixed it fast.\n\nVERSION_2:\nFixed, fast."


def test_cli_analyze_inline_text():
    """analyze prints the full report as JSON."""
    result = runner.invoke(app, ["analyze", "--text", "The cat sat on the mat."])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["wordCount"] == 6
    assert payload["readability"]["score"] == 100
    assert payload["suggestedActions"] == ["enhance"]


def test_cli_analyze_file(tmp_path: Path):
    """analyze accepts a text file."""
    draft = tmp_path / "draft.txt"
    draft.write_text("ngl this is fire, I'm so stoked", encoding="utf-8")
    result = runner.invoke(app, ["analyze", "--input-path", str(draft)])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["tone"]["tone"] == "Casual"


def test_cli_analyze_short_text_prints_null():
    result = runner.invoke(app, ["analyze", "--text", "tiny"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) is None


def test_cli_requires_exactly_one_input(tmp_path: Path):
    draft = tmp_path / "draft.txt"
    draft.write_text("Some words to read here.", encoding="utf-8")
    assert runner.invoke(app, ["analyze"]).exit_code != 0
    both = runner.invoke(
        app, ["analyze", "--input-path", str(draft), "--text", "inline words here"]
    )
    assert both.exit_code != 0


def test_cli_readability():
    result = runner.invoke(app, ["readability", "--text", "The cat sat on the mat."])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["grade"] == "Grade 1"
    assert payload["avgWordsPerSentence"] == 6.0


def test_cli_compare(tmp_path: Path):
    before = tmp_path / "before.txt"
    after = tmp_path / "after.txt"
    before.write_text(
        "Institutional administrators systematically reevaluated "
        "organizational responsibilities.",
        encoding="utf-8",
    )
    after.write_text("We fixed it fast.", encoding="utf-8")
    result = runner.invoke(
        app,
        ["compare", "--before", str(before), "--after", str(after), "--technique", "shorten"],
    )
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "readabilityDelta": 100,
        "wordCountDelta": -2,
        "technique": "shorten",
    }


def test_cli_print_config():
    """print-config dumps the current configuration values."""
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "debounce_ms" in result.stdout


def test_cli_enhance_with_openai_options(monkeypatch: MonkeyPatch):
    """enhance wires OpenAI settings into the client and reports deltas."""
    calls: dict[str, Any] = {}

    class DummyClient:
        def __init__(self, settings: Any, api_key: str) -> None:
            calls["settings"] = settings
            calls["api_key"] = api_key

        def complete(self, *, prompt: str, metadata: Any) -> str:
            calls["prompt"] = prompt
            return RAW_OUTPUT

    monkeypatch.setattr("writing_intelligence.cli.OpenAIRewriteClient", DummyClient)

    result = runner.invoke(
        app,
        [
            "enhance",
            "--action",
            "shorten",
            "--text",
            "Institutional administrators systematically reevaluated "
            "organizational responsibilities.",
            "--openai-model",
            "gpt-4.1-mini",
        ],
        env={"OPENAI_API_KEY": "dummy-key"},
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["alternates"] == ["We fixed it fast.", "Fixed, fast."]
    assert payload["improvement"]["readabilityDelta"] == 100
    assert payload["batchIndex"] == 0
    assert calls["settings"].model == "gpt-4.1-mini"
    assert calls["api_key"] == "dummy-key"


def test_cli_enhance_rejects_unknown_action():
    result = runner.invoke(
        app,
        ["enhance", "--action", "summarize", "--text", "Some text to rewrite."],
        env={"OPENAI_API_KEY": "dummy-key"},
    )
    assert result.exit_code != 0
