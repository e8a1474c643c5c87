"""Value types for the constraint resolver.

``ConflictRules`` and ``DirectorStyle`` are static configuration records held
by the vocabulary tables. ``ConflictResult`` is the derived view recomputed
from a scene's camera and director selections.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ConflictRules:
    """Options a camera category cannot be combined with.

    Attributes:
        blocked_atmospheres: Atmosphere keys unavailable for the category.
        blocked_presets: Visual preset keys unavailable for the category.
        blocked_dof: Depth-of-field values unavailable for the category.
        fixed_lens: Lens description when the category has no interchangeable lens.
        warning_message: Advisory shown while a camera of this category is selected.
    """

    blocked_atmospheres: frozenset[str] = frozenset()
    blocked_presets: frozenset[str] = frozenset()
    blocked_dof: frozenset[str] = frozenset()
    fixed_lens: str | None = None
    warning_message: str | None = None


UNRESTRICTED = ConflictRules()


@dataclass(frozen=True)
class ZoomRange:
    """Built-in zoom lens of a camcorder-style camera."""

    range: str
    options: tuple[str, ...] = ()


@dataclass(frozen=True)
class DirectorStyle:
    """A director whose visual signature can be applied to a scene."""

    name: str
    description: str
    keywords: str
    blocked_atmospheres: frozenset[str] = frozenset()
    blocked_presets: frozenset[str] = frozenset()
    blocked_cameras: frozenset[str] = frozenset()


@dataclass(frozen=True)
class ConflictResult:
    """Blocked-value view for the current camera and director.

    Attributes:
        blocked_atmospheres: Union of camera-category and director blocks.
        blocked_presets: Union of camera-category and director blocks.
        blocked_dof: Depth-of-field values blocked by the camera category.
        allowed_aspect_ratios: Ratios the camera supports, or None when unrestricted.
        blocked_cameras: Cameras incompatible with the held atmosphere, preset
            or director.
        active_conflicts: Messages for held values that are currently blocked.
        warning_message: Camera-category advisory, if any.
        fixed_lens: Fixed lens description when the camera has no lens choice.
        zoom_range: Built-in zoom lens of the camera, if any.
    """

    blocked_atmospheres: frozenset[str] = frozenset()
    blocked_presets: frozenset[str] = frozenset()
    blocked_dof: frozenset[str] = frozenset()
    allowed_aspect_ratios: tuple[str, ...] | None = None
    blocked_cameras: frozenset[str] = frozenset()
    active_conflicts: tuple[str, ...] = field(default=())
    warning_message: str | None = None
    fixed_lens: str | None = None
    zoom_range: ZoomRange | None = None

    def allows_aspect_ratio(self, aspect_ratio: str) -> bool:
        """Whether ``aspect_ratio`` may be held with the current camera.

        The "none" ratio is always allowed.
        """
        if aspect_ratio == "none" or self.allowed_aspect_ratios is None:
            return True
        return aspect_ratio in self.allowed_aspect_ratios


@dataclass(frozen=True)
class StyleStacking:
    """How many style assertions a combination of selections makes.

    Attributes:
        category_counts: Assertions per style family, in family order.
        overloaded_categories: Families asserted more often than their limit.
        total_assertions: Sum over all families.
        warning_message: Advisory when the combination is overloaded.
    """

    category_counts: tuple[tuple[str, int], ...]
    overloaded_categories: tuple[str, ...] = ()
    total_assertions: int = 0
    warning_message: str | None = None

    @property
    def has_overload(self) -> bool:
        return self.warning_message is not None
