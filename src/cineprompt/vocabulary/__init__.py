"""Closed, immutable option vocabularies and their conflict tables."""

from cineprompt.vocabulary.camera import (
    ASPECT_RATIO_OPTIONS,
    ASPECT_RATIOS,
    CAMERA_ASPECT_RATIOS,
    CAMERA_CATEGORIES,
    CAMERA_FIXED_LENS,
    CAMERA_OPTIONS,
    CAMERA_ZOOM_RANGES,
    CAMERAS,
    CATEGORY_RULES,
    DEPTHS_OF_FIELD,
    DOF_OPTIONS,
    LENS_OPTIONS,
    NO_CATEGORY,
    SHOT_OPTIONS,
    SHOTS,
    aspect_ratio_display,
    camera_category,
    category_rules,
    fixed_lens_for,
)
from cineprompt.vocabulary.directors import DIRECTOR_STYLES, DIRECTORS, director_style
from cineprompt.vocabulary.locations import LOCATION_PRESETS, LOCATIONS, find_location_preset
from cineprompt.vocabulary.subjects import MAGIC_SUBJECTS
from cineprompt.vocabulary.visual import (
    ATMOSPHERE_BLOCKS_CATEGORIES,
    ATMOSPHERES,
    COLOR_PALETTES,
    LIGHTING_OPTIONS,
    PRESET_BLOCKS_CATEGORIES,
    VISUAL_PRESETS,
)

__all__ = [
    "ASPECT_RATIOS",
    "ASPECT_RATIO_OPTIONS",
    "ATMOSPHERES",
    "ATMOSPHERE_BLOCKS_CATEGORIES",
    "CAMERAS",
    "CAMERA_ASPECT_RATIOS",
    "CAMERA_CATEGORIES",
    "CAMERA_FIXED_LENS",
    "CAMERA_OPTIONS",
    "CAMERA_ZOOM_RANGES",
    "CATEGORY_RULES",
    "COLOR_PALETTES",
    "DEPTHS_OF_FIELD",
    "DIRECTORS",
    "DIRECTOR_STYLES",
    "DOF_OPTIONS",
    "LENS_OPTIONS",
    "LIGHTING_OPTIONS",
    "LOCATIONS",
    "LOCATION_PRESETS",
    "MAGIC_SUBJECTS",
    "NO_CATEGORY",
    "PRESET_BLOCKS_CATEGORIES",
    "SHOTS",
    "SHOT_OPTIONS",
    "VISUAL_PRESETS",
    "aspect_ratio_display",
    "camera_category",
    "category_rules",
    "director_style",
    "find_location_preset",
    "fixed_lens_for",
]
