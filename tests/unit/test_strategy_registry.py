"""Tests for the closed backend registry."""

from __future__ import annotations

import pytest

from cineprompt.errors import CinePromptError, UnsupportedModelError
from cineprompt.prompt.strategies import (
    TargetModel,
    get_strategy,
    is_supported,
    list_supported_models,
)


def test_supported_models_in_display_order() -> None:
    assert list_supported_models() == [
        "midjourney",
        "flux",
        "stable-diffusion",
        "dalle3",
        "chatgpt",
        "imagen",
        "ideogram",
        "leonardo",
        "firefly",
    ]


def test_every_target_model_has_strategy() -> None:
    for model in TargetModel:
        assert get_strategy(model.value).model_id == model.value


def test_lookup_returns_shared_instance() -> None:
    assert get_strategy("flux") is get_strategy("flux")


def test_target_model_accepts_enum_member() -> None:
    """StrEnum members are plain strings."""
    assert get_strategy(TargetModel.IDEOGRAM).model_id == "ideogram"


@pytest.mark.parametrize("model_id", ["", "Midjourney", "sdxl", "dall-e-3"])
def test_is_supported_rejects(model_id: str) -> None:
    assert not is_supported(model_id)


class TestUnsupportedModel:
    """UnsupportedModelError details."""

    def test_raises(self) -> None:
        with pytest.raises(UnsupportedModelError) as exc_info:
            get_strategy("craiyon")

        assert exc_info.value.model_id == "craiyon"
        assert exc_info.value.available == list_supported_models()
        assert str(exc_info.value).startswith("Unsupported AI model: craiyon")

    def test_is_cineprompt_error(self) -> None:
        with pytest.raises(CinePromptError):
            get_strategy("craiyon")

    def test_suggests_close_match(self) -> None:
        with pytest.raises(UnsupportedModelError, match="did you mean midjourney"):
            get_strategy("midjurney")

    def test_suggestions_ignore_case(self) -> None:
        error = UnsupportedModelError("FLUX", list_supported_models())
        assert error.suggestions() == ["flux"]

    def test_no_suggestion_for_unrelated_id(self) -> None:
        error = UnsupportedModelError("zzz", list_supported_models())
        assert error.suggestions() == []
        assert str(error) == "Unsupported AI model: zzz"
