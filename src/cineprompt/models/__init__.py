"""Scene state and conflict value types."""

from cineprompt.models.conflict import (
    UNRESTRICTED,
    ConflictResult,
    ConflictRules,
    DirectorStyle,
    StyleStacking,
    ZoomRange,
)
from cineprompt.models.scene import (
    DEFAULT_ASPECT_RATIO,
    DEFAULT_DOF,
    DEFAULT_LENS,
    DEFAULT_MODEL,
    DEFAULT_SHOT,
    DEFAULT_SLIDER,
    INPUT_LIMITS,
    MAX_CHARACTERS,
    SECTION_FIELDS,
    CharacterItem,
    LockedSections,
    SceneState,
)

__all__ = [
    "DEFAULT_ASPECT_RATIO",
    "DEFAULT_DOF",
    "DEFAULT_LENS",
    "DEFAULT_MODEL",
    "DEFAULT_SHOT",
    "DEFAULT_SLIDER",
    "INPUT_LIMITS",
    "MAX_CHARACTERS",
    "SECTION_FIELDS",
    "UNRESTRICTED",
    "CharacterItem",
    "ConflictResult",
    "ConflictRules",
    "DirectorStyle",
    "LockedSections",
    "SceneState",
    "StyleStacking",
    "ZoomRange",
]
