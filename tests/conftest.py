"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from cineprompt.models.scene import SceneState


@pytest.fixture(autouse=True)
def clear_default_model_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's CINEPROMPT_* environment out of test runs."""
    monkeypatch.delenv("CINEPROMPT_DEFAULT_MODEL", raising=False)
    monkeypatch.delenv("CINEPROMPT_CONFIG", raising=False)


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def bare_scene() -> SceneState:
    """Scene whose base prompt is exactly its subject once one is set.

    Lens and shot are cleared so their default keywords stay out of the
    assembled prompt.
    """
    return SceneState(lens="", shot="")


@pytest.fixture
def fox_scene(bare_scene: SceneState) -> SceneState:
    """Bare scene with a subject and non-default sliders."""
    return bare_scene.model_copy(
        update={
            "subject": "a fox in a forest",
            "creativity": 80,
            "variation": 30,
            "uniqueness": 60,
        }
    )
