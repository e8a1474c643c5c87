"""Constraint resolver: conflict view and lock-guarded scene transitions.

Every transition is a pure function from one ``SceneState`` to the next. A
held atmosphere, visual preset, depth of field or aspect ratio that the new
camera or director rules out is cleared in the same step, so a state
returned from here never holds a value its own conflict view blocks.

Mutating functions take a keyword-only ``locked`` guard. When it is set the
input state is returned as-is.
"""

from __future__ import annotations

import uuid
from functools import lru_cache
from typing import Any

from cineprompt.errors import UnknownSceneFieldError
from cineprompt.models.conflict import ConflictResult, StyleStacking
from cineprompt.models.scene import (
    DEFAULT_ASPECT_RATIO,
    DEFAULT_DOF,
    INPUT_LIMITS,
    MAX_CHARACTERS,
    SECTION_FIELDS,
    CharacterItem,
    LockedSections,
    SceneState,
)
from cineprompt.observability.logging import get_logger
from cineprompt.vocabulary.camera import (
    CAMERA_ASPECT_RATIOS,
    CAMERA_CATEGORIES,
    CAMERA_ZOOM_RANGES,
    DEPTHS_OF_FIELD,
    camera_category,
    category_rules,
    fixed_lens_for,
)
from cineprompt.vocabulary.directors import (
    DIRECTOR_ATMOSPHERE_REDUNDANCY,
    DIRECTOR_IMPLIED_STYLES,
    DIRECTOR_LIGHTING_REDUNDANCY,
    DIRECTOR_PRESET_REDUNDANCY,
    director_style,
)
from cineprompt.vocabulary.visual import (
    ATMOSPHERE_BLOCKS_CATEGORIES,
    ATMOSPHERE_IMPLIED_STYLES,
    ATMOSPHERE_LIGHTING_REDUNDANCY,
    ATMOSPHERES,
    LIGHTING_IMPLIED_STYLES,
    LIGHTING_OPTIONS,
    MAX_STYLE_ASSERTIONS,
    PRESET_BLOCKS_CATEGORIES,
    PRESET_IMPLIED_STYLES,
    STYLE_CATEGORY_LIMITS,
    VISUAL_PRESETS,
)

log = get_logger(__name__)

_CHARACTER_ID_LENGTH = 9


def compute_conflicts(state: SceneState) -> ConflictResult:
    """Blocked-value view for the scene's camera and director.

    Equal governing selections always return the same ``ConflictResult``
    object. The tables behind it never change, so the memo cannot go stale.

    Args:
        state: Scene to inspect.

    Returns:
        Union of camera-category and director blocks plus camera details.
    """
    return _conflicts_for(
        state.camera,
        state.director,
        state.atmosphere,
        state.visual_preset,
        state.depth_of_field,
    )


@lru_cache(maxsize=512)
def _conflicts_for(
    camera: str,
    director: str,
    atmosphere: str | None,
    visual_preset: str | None,
    depth_of_field: str,
) -> ConflictResult:
    rules = category_rules(camera_category(camera))
    style = director_style(director)

    blocked_atmospheres = set(rules.blocked_atmospheres)
    blocked_presets = set(rules.blocked_presets)
    blocked_cameras: set[str] = set()
    if style is not None:
        blocked_atmospheres |= style.blocked_atmospheres
        blocked_presets |= style.blocked_presets
        blocked_cameras |= style.blocked_cameras

    # A held atmosphere or preset rules out whole camera categories.
    blocked_categories: set[str] = set()
    if atmosphere:
        blocked_categories |= ATMOSPHERE_BLOCKS_CATEGORIES.get(atmosphere, frozenset())
    if visual_preset:
        blocked_categories |= PRESET_BLOCKS_CATEGORIES.get(visual_preset, frozenset())
    blocked_cameras |= {
        name for name, category in CAMERA_CATEGORIES.items() if category in blocked_categories
    }

    def source(in_rules: bool) -> str:
        if in_rules or style is None:
            return camera
        return style.name

    active: list[str] = []
    if atmosphere and atmosphere in blocked_atmospheres:
        name = ATMOSPHERES[atmosphere].name if atmosphere in ATMOSPHERES else atmosphere
        in_rules = atmosphere in rules.blocked_atmospheres
        active.append(f'"{name}" atmosphere conflicts with {source(in_rules)}')
    if visual_preset and visual_preset in blocked_presets:
        preset = VISUAL_PRESETS.get(visual_preset)
        name = preset.name if preset else visual_preset
        in_rules = visual_preset in rules.blocked_presets
        active.append(f'"{name}" preset conflicts with {source(in_rules)}')
    if depth_of_field != DEFAULT_DOF and depth_of_field in rules.blocked_dof:
        dof = DEPTHS_OF_FIELD.get(depth_of_field)
        label = dof.label if dof else depth_of_field
        active.append(f'"{label}" DOF conflicts with {camera}')

    allowed = CAMERA_ASPECT_RATIOS.get(camera) if camera else None
    return ConflictResult(
        blocked_atmospheres=frozenset(blocked_atmospheres),
        blocked_presets=frozenset(blocked_presets),
        blocked_dof=rules.blocked_dof,
        allowed_aspect_ratios=allowed,
        blocked_cameras=frozenset(blocked_cameras),
        active_conflicts=tuple(active),
        warning_message=rules.warning_message,
        fixed_lens=fixed_lens_for(camera),
        zoom_range=CAMERA_ZOOM_RANGES.get(camera) if camera else None,
    )


def _sanitize(state: SceneState, reason: str) -> SceneState:
    """Clear every held value the scene's own conflict view blocks."""
    conflicts = compute_conflicts(state)
    updates: dict[str, Any] = {}

    if state.atmosphere and state.atmosphere in conflicts.blocked_atmospheres:
        updates["atmosphere"] = None
    if state.visual_preset and state.visual_preset in conflicts.blocked_presets:
        updates["visual_preset"] = None
    if state.depth_of_field in conflicts.blocked_dof:
        updates["depth_of_field"] = DEFAULT_DOF
    if not conflicts.allows_aspect_ratio(state.aspect_ratio):
        updates["aspect_ratio"] = DEFAULT_ASPECT_RATIO

    if not updates:
        return state
    for field_name in updates:
        log.debug(
            "scene_field_cleared",
            field=field_name,
            value=getattr(state, field_name),
            reason=reason,
        )
    return state.model_copy(update=updates)


def _ignore_locked(operation: str) -> None:
    log.debug("scene_change_locked", operation=operation)


def apply_camera_change(state: SceneState, camera: str, *, locked: bool = False) -> SceneState:
    """Select a camera and clear whatever it rules out.

    The custom camera override is cleared. A held atmosphere or preset the
    camera (or the current director) blocks becomes None, a blocked depth of
    field returns to "normal" and an aspect ratio outside the camera's list
    returns to "none". Unknown cameras block nothing.

    Args:
        state: Current scene.
        camera: Camera label; empty string deselects.
        locked: Settings lock. When set, ``state`` is returned unchanged.

    Returns:
        Sanitized scene.
    """
    if locked:
        _ignore_locked("camera")
        return state
    next_state = state.model_copy(update={"camera": camera, "custom_camera": ""})
    return _sanitize(next_state, reason=f"camera:{camera or 'none'}")


def apply_director_change(
    state: SceneState, director: str, *, locked: bool = False
) -> SceneState:
    """Select a director style and clear the atmosphere or preset it blocks.

    Camera-category rules keep applying; either source is enough to clear a
    value. Unknown directors block nothing.
    """
    if locked:
        _ignore_locked("director")
        return state
    next_state = state.model_copy(update={"director": director})
    return _sanitize(next_state, reason=f"director:{director or 'none'}")


def select_atmosphere(
    state: SceneState, atmosphere: str | None, *, locked: bool = False
) -> SceneState:
    """Hold an atmosphere unless the camera or director blocks it."""
    return _select(state, "atmosphere", atmosphere, locked=locked)


def select_visual_preset(
    state: SceneState, preset: str | None, *, locked: bool = False
) -> SceneState:
    """Hold a visual preset unless the camera or director blocks it."""
    return _select(state, "visual_preset", preset, locked=locked)


def select_depth_of_field(state: SceneState, dof: str, *, locked: bool = False) -> SceneState:
    """Hold a depth of field unless the camera category blocks it."""
    return _select(state, "depth_of_field", dof, locked=locked)


def select_aspect_ratio(state: SceneState, ratio: str, *, locked: bool = False) -> SceneState:
    """Hold an aspect ratio if the camera allows it ("none" always is)."""
    return _select(state, "aspect_ratio", ratio, locked=locked)


def _select(state: SceneState, field_name: str, value: str | None, *, locked: bool) -> SceneState:
    if locked:
        _ignore_locked(field_name)
        return state
    if value and _is_blocked(compute_conflicts(state), field_name, value):
        log.debug("scene_selection_blocked", field=field_name, value=value)
        return state
    return state.model_copy(update={field_name: value})


def _is_blocked(conflicts: ConflictResult, field_name: str, value: str) -> bool:
    if field_name == "atmosphere":
        return value in conflicts.blocked_atmospheres
    if field_name == "visual_preset":
        return value in conflicts.blocked_presets
    if field_name == "depth_of_field":
        return value in conflicts.blocked_dof
    return not conflicts.allows_aspect_ratio(value)


_GUARDED_SELECTIONS = {
    "atmosphere": select_atmosphere,
    "visual_preset": select_visual_preset,
    "depth_of_field": select_depth_of_field,
    "aspect_ratio": select_aspect_ratio,
}


def apply_change(
    state: SceneState, field_name: str, value: Any, *, locked: bool = False
) -> tuple[SceneState, ConflictResult]:
    """Apply one field change through the resolver.

    The value is validated against the field first, whatever the field.
    Camera and director changes then sanitize dependent fields, and
    selections that the current camera or director block are ignored.

    Args:
        state: Current scene.
        field_name: ``SceneState`` field to change.
        value: New value.
        locked: Settings lock.

    Returns:
        Tuple of (sanitized scene, its conflict view).

    Raises:
        UnknownSceneFieldError: If ``field_name`` is not a scene field.
        pydantic.ValidationError: If the value fails validation.
    """
    fields = list(SceneState.model_fields)
    if field_name not in fields:
        raise UnknownSceneFieldError(field_name, fields)

    data = state.model_dump()
    data[field_name] = value
    validated = SceneState.model_validate(data)
    value = getattr(validated, field_name)

    if field_name == "camera":
        next_state = apply_camera_change(state, value, locked=locked)
    elif field_name == "director":
        next_state = apply_director_change(state, value, locked=locked)
    elif field_name in _GUARDED_SELECTIONS:
        next_state = _GUARDED_SELECTIONS[field_name](state, value, locked=locked)
    elif locked:
        _ignore_locked(field_name)
        next_state = state
    else:
        next_state = validated
    return next_state, compute_conflicts(next_state)


def _new_character_id(taken: frozenset[str]) -> str:
    while True:
        candidate = uuid.uuid4().hex[:_CHARACTER_ID_LENGTH]
        if candidate not in taken:
            return candidate


def add_character(state: SceneState, content: str, *, locked: bool = False) -> SceneState:
    """Append a character entry.

    Input is trimmed and truncated to the character limit. Blank input and
    additions beyond the character cap are ignored.
    """
    if locked:
        _ignore_locked("add_character")
        return state
    text = content.strip()[: INPUT_LIMITS["character"]].strip()
    if not text:
        return state
    if len(state.characters) >= MAX_CHARACTERS:
        log.debug("character_limit_reached", limit=MAX_CHARACTERS)
        return state
    item = CharacterItem(id=_new_character_id(state.character_ids), content=text)
    return state.model_copy(update={"characters": (*state.characters, item)})


def remove_character(state: SceneState, character_id: str, *, locked: bool = False) -> SceneState:
    """Remove the character with ``character_id``. Unknown ids are ignored."""
    if locked:
        _ignore_locked("remove_character")
        return state
    if character_id not in state.character_ids:
        return state
    remaining = tuple(item for item in state.characters if item.id != character_id)
    return state.model_copy(update={"characters": remaining})


def reset_scene(
    state: SceneState,
    *,
    locked: bool = False,
    locked_sections: LockedSections | None = None,
) -> SceneState:
    """Restore defaults, keeping the target model and any locked section.

    Args:
        state: Current scene.
        locked: Global settings lock. When set nothing is reset.
        locked_sections: Sections whose fields keep their current values.

    Returns:
        The reset scene, sanitized against the fields that were kept.
    """
    if locked:
        _ignore_locked("reset")
        return state
    sections = locked_sections or LockedSections()
    defaults = SceneState(target_model=state.target_model)

    updates: dict[str, Any] = {}
    for section, field_names in SECTION_FIELDS.items():
        if getattr(sections, section):
            continue
        for field_name in field_names:
            updates[field_name] = getattr(defaults, field_name)

    log.debug("scene_reset", kept=[s for s in SECTION_FIELDS if getattr(sections, s)])
    return _sanitize(state.model_copy(update=updates), reason="reset")


def style_warnings(state: SceneState) -> tuple[str, ...]:
    """Advisories for selections that repeat what another already implies.

    These never change the scene.
    """
    warnings: list[str] = []
    director = state.director
    if state.lighting and state.lighting in DIRECTOR_LIGHTING_REDUNDANCY.get(
        director, frozenset()
    ):
        name = LIGHTING_OPTIONS[state.lighting].name
        warnings.append(f"{director} style already implies {name} lighting")
    if state.visual_preset and state.visual_preset in DIRECTOR_PRESET_REDUNDANCY.get(
        director, frozenset()
    ):
        name = VISUAL_PRESETS[state.visual_preset].name
        warnings.append(f"{director} style already implies the {name} preset")
    if state.atmosphere and state.atmosphere in DIRECTOR_ATMOSPHERE_REDUNDANCY.get(
        director, frozenset()
    ):
        name = ATMOSPHERES[state.atmosphere].name
        warnings.append(f"{director} style already implies a {name} atmosphere")
    if state.atmosphere and state.lighting:
        message = ATMOSPHERE_LIGHTING_REDUNDANCY.get((state.atmosphere, state.lighting))
        if message:
            warnings.append(message)
    return tuple(warnings)


def analyze_style_stacking(
    director: str | None,
    atmosphere: str | None,
    preset: str | None,
    lighting: str | None,
) -> StyleStacking:
    """Count the style assertions a director, atmosphere, preset and lighting make.

    Each selection asserts a few style families (realism, film, color and so
    on). A family asserted more often than its limit, or more than
    ``MAX_STYLE_ASSERTIONS`` assertions overall, is reported as overload.
    Unknown or empty selections assert nothing.
    """
    counts = dict.fromkeys(STYLE_CATEGORY_LIMITS, 0)
    sources = (
        DIRECTOR_IMPLIED_STYLES.get(director or "", ()),
        ATMOSPHERE_IMPLIED_STYLES.get(atmosphere or "", ()),
        PRESET_IMPLIED_STYLES.get(preset or "", ()),
        LIGHTING_IMPLIED_STYLES.get(lighting or "", ()),
    )
    for categories in sources:
        for category in categories:
            counts[category] += 1

    overloaded = tuple(
        category for category, count in counts.items() if count > STYLE_CATEGORY_LIMITS[category]
    )
    total = sum(counts.values())
    message = None
    if overloaded:
        names = ", ".join(category.capitalize() for category in overloaded)
        message = f"Style stacking detected: {names} assertions may conflict"
    elif total > MAX_STYLE_ASSERTIONS:
        message = f"{total} style assertions may overwhelm the model. Consider simplifying."
    return StyleStacking(
        category_counts=tuple(counts.items()),
        overloaded_categories=overloaded,
        total_assertions=total,
        warning_message=message,
    )
