"""Generator configuration and scene file loading."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path  # noqa: TC003 - used at runtime
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML

from cineprompt.errors import ConfigError
from cineprompt.models.scene import DEFAULT_MODEL, DEFAULT_SLIDER, SceneState
from cineprompt.observability.logging import get_logger
from cineprompt.resolver import apply_camera_change, apply_director_change

log = get_logger(__name__)

ENV_DEFAULT_MODEL = "CINEPROMPT_DEFAULT_MODEL"


@dataclass
class GeneratorConfig:
    """Defaults applied to new scenes.

    Resolution order for ``default_model``:
    1. Environment variable CINEPROMPT_DEFAULT_MODEL
    2. Config file value
    3. Built-in default ("chatgpt")

    Attributes:
        default_model: Target model id for new scenes.
        creative_controls_enabled: Whether slider tokens are emitted by default.
        creativity: Starting creativity slider.
        variation: Starting variation slider.
        uniqueness: Starting uniqueness slider.
    """

    default_model: str = DEFAULT_MODEL
    creative_controls_enabled: bool = False
    creativity: int = DEFAULT_SLIDER
    variation: int = DEFAULT_SLIDER
    uniqueness: int = DEFAULT_SLIDER

    def get_default_model(self) -> str:
        """Effective default model, honouring the environment override."""
        return os.getenv(ENV_DEFAULT_MODEL) or self.default_model

    def new_scene(self) -> SceneState:
        """Empty scene carrying these defaults."""
        return SceneState(
            target_model=self.get_default_model(),
            creative_controls_enabled=self.creative_controls_enabled,
            creativity=self.creativity,
            variation=self.variation,
            uniqueness=self.uniqueness,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GeneratorConfig:
        """Create config from dictionary.

        Args:
            data: Mapping with optional ``default_model``,
                ``creative_controls_enabled`` and a ``sliders`` mapping of
                ``creativity``/``variation``/``uniqueness``.

        Returns:
            GeneratorConfig instance.
        """
        sliders = data.get("sliders") or {}
        return cls(
            default_model=data.get("default_model", DEFAULT_MODEL),
            creative_controls_enabled=bool(data.get("creative_controls_enabled", False)),
            creativity=int(sliders.get("creativity", DEFAULT_SLIDER)),
            variation=int(sliders.get("variation", DEFAULT_SLIDER)),
            uniqueness=int(sliders.get("uniqueness", DEFAULT_SLIDER)),
        )


def _load_mapping(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigError(path, "File not found")

    yaml = YAML(typ="safe")
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.load(f)
    except Exception as e:
        raise ConfigError(path, str(e)) from e

    if data is None:
        raise ConfigError(path, "Empty file")
    if not isinstance(data, dict):
        raise ConfigError(path, "Expected a mapping at the top level")
    return dict(data)


def load_config(path: Path) -> GeneratorConfig:
    """Load generator configuration from a YAML file.

    Raises:
        ConfigError: If the file is missing, empty or malformed.
    """
    data = _load_mapping(path)
    try:
        return GeneratorConfig.from_dict(data)
    except (TypeError, ValueError, AttributeError) as e:
        raise ConfigError(path, str(e)) from e


def _pop_text(path: Path, data: dict[str, Any], key: str) -> str | None:
    """Pop a text field from a scene mapping.

    Returns None when the key is absent. An explicit null reads as "".
    """
    if key not in data:
        return None
    value = data.pop(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ConfigError(path, f"{key} must be a string, got {type(value).__name__}")
    return value


def load_scene(path: Path, config: GeneratorConfig | None = None) -> SceneState:
    """Load a scene from a YAML or JSON file.

    Fields missing from the file take the config's defaults. Camera and
    director are applied through the resolver, so values they block are
    cleared as if the user had picked them in order.

    Args:
        path: Scene file; a mapping of ``SceneState`` fields.
        config: Defaults for new scenes. Uses built-in defaults when omitted.

    Returns:
        Sanitized scene.

    Raises:
        ConfigError: If the file cannot be read or fails validation.
    """
    data = _load_mapping(path)
    base = (config or GeneratorConfig()).new_scene()
    camera = _pop_text(path, data, "camera")
    director = _pop_text(path, data, "director")
    custom_camera = _pop_text(path, data, "custom_camera")

    try:
        state = SceneState.model_validate({**base.model_dump(), **data})
    except ValidationError as e:
        raise ConfigError(path, str(e)) from e

    state = apply_camera_change(state, base.camera if camera is None else camera)
    # Camera changes clear any custom camera; keep the one from the file.
    if custom_camera is not None:
        state = state.model_copy(update={"custom_camera": custom_camera})
    state = apply_director_change(state, base.director if director is None else director)
    log.info("scene_loaded", path=str(path), model=state.target_model)
    return state
