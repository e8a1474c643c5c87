"""Test CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from typer.testing import CliRunner

from cineprompt import __version__
from cineprompt.cli import app

if TYPE_CHECKING:
    from pathlib import Path

runner = CliRunner()


def _flat(output: str) -> str:
    """Collapse console line wrapping."""
    return " ".join(output.split())


@pytest.fixture
def scene_file(tmp_path: Path) -> Path:
    path = tmp_path / "scene.yaml"
    path.write_text(
        "subject: a fox in a forest\n"
        "lens: ''\n"
        "shot: ''\n"
        "creativity: 80\n"
        "variation: 30\n"
        "uniqueness: 60\n"
    )
    return path


def test_version_command() -> None:
    """Test cineprompt version command."""
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert f"v{__version__}" in _flat(result.stdout)


def test_no_args_shows_help() -> None:
    """Test that no arguments shows help."""
    result = runner.invoke(app, [])
    # no_args_is_help=True returns exit code 2 (not 0 like --help)
    assert result.exit_code == 2
    assert "CinePrompt" in _flat(result.stdout)


def test_models_lists_backends() -> None:
    result = runner.invoke(app, ["models"])

    assert result.exit_code == 0
    for model_id in ("midjourney", "stable-diffusion", "firefly", "chatgpt"):
        assert model_id in _flat(result.stdout)


# --- Compile Command Tests ---


def test_compile_default_model(scene_file: Path) -> None:
    result = runner.invoke(app, ["compile", str(scene_file)])

    assert result.exit_code == 0
    assert result.stdout.strip() == "generate this: a fox in a forest"


def test_compile_with_model_and_sliders(scene_file: Path) -> None:
    result = runner.invoke(
        app, ["compile", str(scene_file), "--model", "midjourney", "--enable-sliders"]
    )

    assert result.exit_code == 0
    assert result.stdout.strip() == "a fox in a forest --s 800 --chaos 30 --q 2"


def test_compile_keeps_bracketed_parameters(scene_file: Path) -> None:
    """Bracket blocks are printed literally, not read as console markup."""
    result = runner.invoke(app, ["compile", str(scene_file), "-m", "flux", "--enable-sliders"])

    assert result.exit_code == 0
    assert "[guidance: 16.0, seed_variation: 30]" in _flat(result.stdout)


def test_compile_unsupported_model(scene_file: Path) -> None:
    result = runner.invoke(app, ["compile", str(scene_file), "--model", "midjurney"])

    assert result.exit_code == 1
    assert "Unsupported AI model" in _flat(result.stdout)
    assert "midjourney" in _flat(result.stdout)


def test_compile_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["compile", str(tmp_path / "nope.yaml")])

    assert result.exit_code == 1
    assert "File not found" in _flat(result.stdout)


def test_compile_invalid_scene(tmp_path: Path) -> None:
    path = tmp_path / "scene.yaml"
    path.write_text("subject: a fox\ncreativity: 400\n")

    result = runner.invoke(app, ["compile", str(path)])

    assert result.exit_code == 1
    assert "Error" in _flat(result.stdout)


def test_compile_uses_config_defaults(scene_file: Path, tmp_path: Path) -> None:
    config = tmp_path / "cineprompt.yaml"
    config.write_text("default_model: midjourney\ncreative_controls_enabled: true\n")

    result = runner.invoke(app, ["--config", str(config), "compile", str(scene_file)])

    assert result.exit_code == 0
    assert result.stdout.strip() == "a fox in a forest --s 800 --chaos 30 --q 2"


def test_bad_config_exits(scene_file: Path, tmp_path: Path) -> None:
    result = runner.invoke(
        app, ["--config", str(tmp_path / "missing.yaml"), "compile", str(scene_file)]
    )

    assert result.exit_code == 1
    assert "File not found" in _flat(result.stdout)


def test_log_file_option(scene_file: Path, tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "run.jsonl"

    result = runner.invoke(app, ["--log-file", str(log_file), "compile", str(scene_file)])

    assert result.exit_code == 0
    assert log_file.parent.exists()


# --- Conflicts Command Tests ---


def test_conflicts_shows_camera_rules(tmp_path: Path) -> None:
    path = tmp_path / "scene.yaml"
    path.write_text("camera: Overhead Drone Shot\nsubject: a city at dusk\n")

    result = runner.invoke(app, ["conflicts", str(path)])

    assert result.exit_code == 0
    assert "noir" in _flat(result.stdout)
    assert "Aerial shots are framed from altitude" in _flat(result.stdout)


def test_conflicts_shows_redundancy(tmp_path: Path) -> None:
    path = tmp_path / "scene.yaml"
    path.write_text("atmosphere: cyberpunk\nlighting: neon\n")

    result = runner.invoke(app, ["conflicts", str(path)])

    assert result.exit_code == 0
    assert "Cyberpunk atmosphere already includes neon aesthetic" in _flat(result.stdout)


# --- Randomize Command Tests ---


def test_randomize_is_reproducible() -> None:
    first = runner.invoke(app, ["randomize", "--seed", "42"])
    second = runner.invoke(app, ["randomize", "--seed", "42"])

    assert first.exit_code == 0
    assert first.stdout.strip()
    assert first.stdout == second.stdout


def test_randomize_keeps_locked_subject(scene_file: Path) -> None:
    result = runner.invoke(
        app, ["randomize", str(scene_file), "--seed", "3", "--lock", "subject"]
    )

    assert result.exit_code == 0
    assert "a fox in a forest" in _flat(result.stdout)


def test_randomize_rejects_unknown_section() -> None:
    result = runner.invoke(app, ["randomize", "--lock", "soundtrack"])

    assert result.exit_code == 1
    assert "Unknown section 'soundtrack'" in _flat(result.stdout)
