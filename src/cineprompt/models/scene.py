"""Pydantic models for the scene a prompt is compiled from.

``SceneState`` is immutable: every transition in :mod:`cineprompt.resolver`
returns a new instance via ``model_copy``. Free-text length limits are
applied when the prompt is assembled, so long input is truncated rather
than rejected.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_MODEL = "chatgpt"
DEFAULT_LENS = "50mm"
DEFAULT_SHOT = "Medium Shot (MS)"
DEFAULT_DOF = "normal"
DEFAULT_ASPECT_RATIO = "none"
DEFAULT_SLIDER = 50
CUSTOM_COLOR_SLOTS = 6
MAX_CHARACTERS = 15

INPUT_LIMITS = MappingProxyType(
    {
        "subject": 2000,
        "location": 500,
        "character": 500,
        "custom_camera": 200,
        "custom_lens": 100,
        "custom_shot": 200,
    }
)

SliderValue = Annotated[int, Field(ge=0, le=100)]


class CharacterItem(BaseModel):
    """A character entry. ``id`` is opaque and unique within one scene."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    content: str = Field(min_length=1)


class LockedSections(BaseModel):
    """Per-section locks honoured by :func:`cineprompt.resolver.reset_scene`."""

    model_config = ConfigDict(frozen=True)

    subject: bool = False
    director: bool = False
    atmosphere: bool = False
    visual: bool = False
    color: bool = False
    camera: bool = False
    lighting: bool = False
    advanced: bool = False


# Fields restored to defaults when their section is reset.
SECTION_FIELDS = MappingProxyType(
    {
        "subject": ("subject", "characters", "location"),
        "director": ("director",),
        "atmosphere": ("atmosphere",),
        "visual": ("visual_preset",),
        "color": ("color_palette", "custom_colors"),
        "camera": (
            "camera",
            "custom_camera",
            "lens",
            "custom_lens",
            "shot",
            "custom_shot",
            "depth_of_field",
            "aspect_ratio",
        ),
        "lighting": ("lighting",),
        "advanced": (
            "negative_prompt",
            "creativity",
            "variation",
            "uniqueness",
            "creative_controls_enabled",
        ),
    }
)


class SceneState(BaseModel):
    """Every user selection that feeds prompt compilation.

    Enumerated selections are plain strings: values missing from the
    vocabularies are tolerated and treated as unrestricted.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    subject: str = ""
    characters: tuple[CharacterItem, ...] = Field(default=(), max_length=MAX_CHARACTERS)
    location: str = ""
    negative_prompt: str = ""

    camera: str = ""
    custom_camera: str = ""
    lens: str = DEFAULT_LENS
    custom_lens: str = ""
    shot: str = DEFAULT_SHOT
    custom_shot: str = ""
    depth_of_field: str = DEFAULT_DOF
    aspect_ratio: str = DEFAULT_ASPECT_RATIO

    atmosphere: str | None = None
    visual_preset: str | None = None
    lighting: str | None = None
    color_palette: str | None = None
    custom_colors: tuple[str, ...] = Field(
        default=("",) * CUSTOM_COLOR_SLOTS, max_length=CUSTOM_COLOR_SLOTS
    )

    director: str = ""
    target_model: str = DEFAULT_MODEL

    creativity: SliderValue = DEFAULT_SLIDER
    variation: SliderValue = DEFAULT_SLIDER
    uniqueness: SliderValue = DEFAULT_SLIDER
    creative_controls_enabled: bool = False

    @field_validator("characters")
    @classmethod
    def _unique_character_ids(
        cls, value: tuple[CharacterItem, ...]
    ) -> tuple[CharacterItem, ...]:
        ids = [item.id for item in value]
        if len(ids) != len(set(ids)):
            raise ValueError("character ids must be unique")
        return value

    @property
    def character_ids(self) -> frozenset[str]:
        return frozenset(item.id for item in self.characters)
