"""Tests for the compile facade."""

from __future__ import annotations

import pytest

from cineprompt import compile_prompt
from cineprompt.errors import UnsupportedModelError
from cineprompt.models import SceneState
from cineprompt.prompt import EMPTY_PROMPT_PLACEHOLDER, assemble_base, build_context
from cineprompt.prompt.strategies import get_strategy, list_supported_models
from cineprompt.resolver import apply_camera_change


class TestCompilePrompt:
    """compile_prompt end to end."""

    def test_midjourney_scenario(self, fox_scene: SceneState) -> None:
        state = fox_scene.model_copy(
            update={"target_model": "midjourney", "creative_controls_enabled": True}
        )
        assert compile_prompt(state) == "a fox in a forest --s 800 --chaos 30 --q 2"

    def test_default_model_is_chatgpt(self, fox_scene: SceneState) -> None:
        assert compile_prompt(fox_scene) == "generate this: a fox in a forest"

    @pytest.mark.parametrize("model_id", list_supported_models())
    def test_empty_scene_gives_placeholder(self, bare_scene: SceneState, model_id: str) -> None:
        state = bare_scene.model_copy(update={"target_model": model_id})
        assert compile_prompt(state) == EMPTY_PROMPT_PLACEHOLDER

    def test_unsupported_model_raises_even_when_empty(self, bare_scene: SceneState) -> None:
        state = bare_scene.model_copy(update={"target_model": "craiyon"})
        with pytest.raises(UnsupportedModelError):
            compile_prompt(state)

    @pytest.mark.parametrize("model_id", ["flux", "firefly", "dalle3"])
    def test_negative_prompt_never_leaks(self, fox_scene: SceneState, model_id: str) -> None:
        state = fox_scene.model_copy(
            update={
                "target_model": model_id,
                "negative_prompt": "blurry",
                "creative_controls_enabled": True,
            }
        )
        assert "blurry" not in compile_prompt(state)

    def test_negative_prompt_emitted_where_supported(self, fox_scene: SceneState) -> None:
        state = fox_scene.model_copy(
            update={"target_model": "stable-diffusion", "negative_prompt": "blurry"}
        )
        assert compile_prompt(state) == "a fox in a forest\n\nNegative prompt: blurry"

    def test_film_ratio_is_rendered(self, fox_scene: SceneState) -> None:
        state = apply_camera_change(fox_scene, "35mm Film")
        state = state.model_copy(update={"aspect_ratio": "2.39:1", "target_model": "midjourney"})
        assert compile_prompt(state).endswith("--ar 2.39:1")

    @pytest.mark.parametrize("model_id", list_supported_models())
    def test_deterministic(self, fox_scene: SceneState, model_id: str) -> None:
        state = fox_scene.model_copy(
            update={
                "target_model": model_id,
                "negative_prompt": "text",
                "aspect_ratio": "21:9",
                "creative_controls_enabled": True,
            }
        )
        assert compile_prompt(state) == compile_prompt(state)

    def test_full_scene_starts_with_base(self) -> None:
        state = SceneState(subject="a diner at night", atmosphere="noir", target_model="flux")
        assert compile_prompt(state).startswith(assemble_base(state))


def test_build_context(fox_scene: SceneState) -> None:
    state = fox_scene.model_copy(update={"aspect_ratio": "none", "negative_prompt": "fog"})
    strategy = get_strategy("midjourney")

    context = build_context(state, strategy, "base")

    assert context.base_prompt == "base"
    assert context.aspect_ratio_display is None
    assert context.negative_prompt == "fog"
    assert context.creative_controls_enabled is False
    assert context.slider_params == strategy.translate_sliders(80, 30, 60)
