"""Backend-agnostic base prompt assembly.

The base prompt is a comma-joined list of scene fragments in a fixed order:
subject, characters, location, visual preset, color palette, atmosphere,
lighting, director, camera, lens, shot, depth of field. Every backend
strategy starts from this string.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from cineprompt.models.scene import INPUT_LIMITS, SceneState
from cineprompt.vocabulary.camera import (
    CAMERAS,
    DEPTHS_OF_FIELD,
    SHOTS,
    camera_category,
    category_rules,
    fixed_lens_for,
)
from cineprompt.vocabulary.directors import director_style
from cineprompt.vocabulary.locations import find_location_preset
from cineprompt.vocabulary.visual import (
    ATMOSPHERES,
    COLOR_PALETTES,
    LIGHTING_OPTIONS,
    VISUAL_PRESETS,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

# Locations starting with one of these already read as a place phrase.
LOCATION_PREPOSITIONS: tuple[str, ...] = (
    "in ",
    "on ",
    "at ",
    "by ",
    "near ",
    "beside ",
    "behind ",
    "above ",
    "below ",
    "under ",
    "over ",
    "inside ",
    "outside ",
    "within ",
    "around ",
    "through ",
    "across ",
    "along ",
    "between ",
    "among ",
    "beneath ",
    "upon ",
    "against ",
)

_HEX_COLOR = re.compile(r"#?[0-9A-Fa-f]{6}")


def normalize_text(text: str, limit: int | None = None) -> str:
    """Trim, truncate to ``limit`` characters and collapse inner whitespace."""
    text = text.strip()
    if limit is not None:
        text = text[:limit]
    return " ".join(text.split())


def is_valid_hex_color(color: str) -> bool:
    """Whether ``color`` is a six-digit hex code, with or without ``#``."""
    return _HEX_COLOR.fullmatch(color.strip()) is not None


def format_hex_color(color: str) -> str:
    trimmed = color.strip()
    return trimmed if trimmed.startswith("#") else f"#{trimmed}"


def valid_custom_colors(colors: Iterable[str]) -> list[str]:
    """Valid custom colors, ``#``-prefixed, in slot order. Invalid slots are skipped."""
    return [format_hex_color(color) for color in colors if is_valid_hex_color(color)]


def location_phrase(location: str) -> str:
    """Render a location as a place phrase.

    A preset label, or a fragment of a preset's keywords, expands to
    ``in <keywords>``. Other text gets a leading "in" unless it already
    starts with a preposition.
    """
    text = normalize_text(location, INPUT_LIMITS["location"])
    if not text:
        return ""
    preset = find_location_preset(text)
    if preset is not None:
        return f"in {preset.keywords}"
    if text.lower().startswith(LOCATION_PREPOSITIONS):
        return text
    return f"in {text}"


def color_phrase(state: SceneState) -> str:
    """Color palette fragment. Custom colors take precedence over a named palette."""
    colors = valid_custom_colors(state.custom_colors)
    if not colors and state.color_palette in COLOR_PALETTES:
        colors = list(COLOR_PALETTES[state.color_palette].colors)
    if not colors:
        return ""
    return f"color palette: {', '.join(colors)}"


def camera_phrase(state: SceneState) -> str:
    custom = normalize_text(state.custom_camera, INPUT_LIMITS["custom_camera"])
    if custom:
        return custom
    option = CAMERAS.get(state.camera)
    return option.keywords if option else normalize_text(state.camera)


def lens_phrase(state: SceneState) -> str:
    """Lens fragment, omitted for cameras with a fixed lens."""
    if fixed_lens_for(state.camera):
        return ""
    lens = normalize_text(state.custom_lens, INPUT_LIMITS["custom_lens"]) or normalize_text(
        state.lens
    )
    return f"{lens} lens" if lens else ""


def shot_phrase(state: SceneState) -> str:
    custom = normalize_text(state.custom_shot, INPUT_LIMITS["custom_shot"])
    if custom:
        return custom
    option = SHOTS.get(state.shot)
    return option.keywords if option else normalize_text(state.shot)


def depth_of_field_phrase(state: SceneState) -> str:
    """Depth-of-field keywords unless the camera category rules them out."""
    option = DEPTHS_OF_FIELD.get(state.depth_of_field)
    if option is None:
        return ""
    if state.depth_of_field in category_rules(camera_category(state.camera)).blocked_dof:
        return ""
    return option.keywords


def _keywords(table: Mapping[str, Any], key: str | None) -> str:
    if not key:
        return ""
    entry = table.get(key)
    return entry.keywords if entry else ""


def assemble_base(state: SceneState) -> str:
    """Build the backend-independent base prompt.

    Empty or unknown selections contribute nothing; fragments are joined
    with ", " so no separator is left dangling.

    Args:
        state: Scene to render.

    Returns:
        Base prompt, or an empty string when the scene has no content.
    """
    limit = INPUT_LIMITS["character"]
    characters = ", ".join(
        text for text in (normalize_text(item.content, limit) for item in state.characters) if text
    )
    style = director_style(state.director)

    fragments = [
        normalize_text(state.subject, INPUT_LIMITS["subject"]),
        characters,
        location_phrase(state.location),
        _keywords(VISUAL_PRESETS, state.visual_preset),
        color_phrase(state),
        _keywords(ATMOSPHERES, state.atmosphere),
        _keywords(LIGHTING_OPTIONS, state.lighting),
        style.keywords if style else "",
        camera_phrase(state),
        lens_phrase(state),
        shot_phrase(state),
        depth_of_field_phrase(state),
    ]
    return ", ".join(fragment for fragment in fragments if fragment)
