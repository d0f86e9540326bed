from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from emojindex.ui.cli import app


PHOENIX = "\U0001f426\u200d\U0001f525"


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("EMOJINDEX_HOME", str(tmp_path / "home"))
    monkeypatch.delenv("EMOJINDEX_LANGUAGE", raising=False)
    monkeypatch.delenv("EMOJINDEX_PLATFORM_VERSION", raising=False)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _flat(output: str) -> str:
    return " ".join(output.split())


def test_resolve_reports_identifier_and_tones(runner: CliRunner) -> None:
    result = runner.invoke(app, ["resolve", "\U0001f44d\U0001f3fd"])

    assert result.exit_code == 0, result.output
    assert "thumbs_up" in result.stdout
    assert "medium" in result.stdout
    assert "U+1F44D U+1F3FD" in result.stdout


def test_resolve_reports_platform_support(runner: CliRunner) -> None:
    result = runner.invoke(app, ["resolve", PHOENIX, "--platform", "17.3"])

    assert result.exit_code == 0, result.output
    assert "phoenix" in result.stdout
    assert "no" in result.stdout.split()


def test_resolve_unknown_text_fails(runner: CliRunner) -> None:
    result = runner.invoke(app, ["resolve", "abc"])

    assert result.exit_code == 1
    assert "No emoji matches" in _flat(result.output)


def test_resolve_names_emoji_missing_from_catalog(runner: CliRunner) -> None:
    result = runner.invoke(app, ["resolve", "\U0001fabe"])

    assert result.exit_code == 1
    assert "leafless tree is not in the catalog" in _flat(result.output)


def test_variants_lists_every_tone(runner: CliRunner) -> None:
    result = runner.invoke(app, ["variants", "handshake"])

    assert result.exit_code == 0, result.output
    assert "handshake" in result.stdout
    assert "U+1FAF1" in result.stdout
    assert "medium-dark" in result.stdout


def test_variants_accepts_an_emoji(runner: CliRunner) -> None:
    result = runner.invoke(app, ["variants", "\U0001f44d\U0001f3ff"])

    assert result.exit_code == 0, result.output
    assert "thumbs_up" in result.stdout


def test_variants_unknown_name_fails(runner: CliRunner) -> None:
    result = runner.invoke(app, ["variants", "no_such_emoji"])

    assert result.exit_code == 1
    assert "Unknown emoji" in _flat(result.output)


def test_search_uses_requested_language(runner: CliRunner) -> None:
    result = runner.invoke(app, ["search", "daumen", "--language", "de-CH"])

    assert result.exit_code == 0, result.output
    assert "thumbs_up" in result.stdout
    assert "thumbs_down" in result.stdout


def test_search_honours_platform_gate(runner: CliRunner) -> None:
    visible = runner.invoke(app, ["search", "phoenix"])
    hidden = runner.invoke(app, ["search", "phoenix", "--platform", "17.3"])

    assert visible.exit_code == 0, visible.output
    assert "phoenix" in visible.stdout
    assert hidden.exit_code == 0, hidden.output
    assert "No emoji match" in _flat(hidden.output)


def test_search_limit(runner: CliRunner) -> None:
    result = runner.invoke(app, ["search", "heart", "--limit", "1"])

    assert result.exit_code == 0, result.output
    assert "red_heart" in result.stdout
    assert "pink_heart" not in result.stdout


def test_search_rejects_invalid_platform(runner: CliRunner) -> None:
    result = runner.invoke(app, ["search", "heart", "--platform", "latest"])

    assert result.exit_code == 1
    assert "Invalid platform version" in _flat(result.output)


def test_search_reads_configured_resources(runner: CliRunner, tmp_path: Path) -> None:
    resources = tmp_path / "keywords"
    resources.mkdir()
    (resources / "en.json").write_text(
        json.dumps({"\U0001f355": ["flatbread"]}), encoding="utf-8"
    )
    config = tmp_path / "emojindex.yml"
    config.write_text(f"translations_dir: {resources}\n", encoding="utf-8")

    found = runner.invoke(app, ["--config", str(config), "search", "flat"])
    missing = runner.invoke(app, ["--config", str(config), "search", "flat", "-l", "fr"])

    assert found.exit_code == 0, found.output
    assert "pizza" in found.stdout
    assert missing.exit_code == 1
    assert "No emoji keywords available for 'fr'" in _flat(missing.output)


def test_search_verbose_reports_index_summary(runner: CliRunner) -> None:
    result = runner.invoke(app, ["-v", "search", "pizza", "-l", "it"])

    assert result.exit_code == 0, result.output
    assert "Search index for 'it'" in _flat(result.output)


def test_invalid_config_file_fails(runner: CliRunner, tmp_path: Path) -> None:
    config = tmp_path / "broken.yml"
    config.write_text("platform_version: [\n", encoding="utf-8")

    result = runner.invoke(app, ["--config", str(config), "resolve", "\U0001f44d"])

    assert result.exit_code == 1
    assert "not valid YAML" in _flat(result.output)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("\U0001f44d", "positive"),
        ("\U0001f44e\U0001f3ff", "negative"),
        ("\u2764\ufe0f", "unmapped"),
    ],
)
def test_classify(runner: CliRunner, text: str, expected: str) -> None:
    result = runner.invoke(app, ["classify", text])

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == expected


def test_prefer_then_reactions(runner: CliRunner, tmp_path: Path) -> None:
    stored = runner.invoke(app, ["prefer", "thumbs_up", "dark"])
    shown = runner.invoke(app, ["reactions"])

    assert stored.exit_code == 0, stored.output
    assert "thumbs_up: dark" in stored.stdout
    preferences = json.loads((tmp_path / "home" / "preferences.json").read_text("utf-8"))
    assert preferences["tones"] == {"thumbs_up": "dark"}
    assert shown.exit_code == 0, shown.output
    assert "\U0001f44d\U0001f3ff" in shown.stdout
    assert "folded_hands" in shown.stdout


def test_prefer_rejects_bad_input(runner: CliRunner) -> None:
    no_tones = runner.invoke(app, ["prefer", "red_heart", "dark"])
    bad_tone = runner.invoke(app, ["prefer", "thumbs_up", "purple"])

    assert no_tones.exit_code == 1
    assert "does not take skin tones" in _flat(no_tones.output)
    assert bad_tone.exit_code == 1
    assert "Unknown skin tone" in _flat(bad_tone.output)


def test_use_records_recent_emoji(runner: CliRunner) -> None:
    runner.invoke(app, ["use", "\U0001f355"])
    recorded = runner.invoke(app, ["use", "\u2764"])
    shown = runner.invoke(app, ["reactions"])

    assert recorded.exit_code == 0, recorded.output
    assert "red_heart: recorded" in recorded.stdout
    assert "recent: \u2764\ufe0f \U0001f355" in shown.stdout
