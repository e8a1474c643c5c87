"""Coherent random scenes.

``randomize_scene`` fills every unlocked section with a random pick. Picks
are made in dependency order (subject, location, director, camera and
aspect ratio, atmosphere, lighting, shot, lens, visual preset, depth of
field, color palette), and each pick only draws from values the earlier
picks leave open. Locked sections keep their values, and no pick is
allowed to clear them.
"""

from __future__ import annotations

from random import Random
from typing import TYPE_CHECKING, TypeVar

from cineprompt.models.scene import CUSTOM_COLOR_SLOTS, LockedSections, SceneState
from cineprompt.observability.logging import get_logger
from cineprompt.resolver import (
    analyze_style_stacking,
    apply_camera_change,
    apply_director_change,
    compute_conflicts,
    select_aspect_ratio,
    select_atmosphere,
    select_depth_of_field,
    select_visual_preset,
)
from cineprompt.vocabulary.camera import (
    ASPECT_RATIO_OPTIONS,
    CAMERA_OPTIONS,
    CAMERA_ZOOM_RANGES,
    DOF_OPTIONS,
    LENS_CATEGORIES,
    LENS_OPTIONS,
    SHOT_DOF_CONFLICTS,
    SHOT_LENS_CONFLICTS,
    SHOT_OPTIONS,
    camera_category,
    category_rules,
    fixed_lens_for,
)
from cineprompt.vocabulary.directors import (
    DIRECTOR_ATMOSPHERE_REDUNDANCY,
    DIRECTOR_BLOCKED_LENSES,
    DIRECTOR_LIGHTING_REDUNDANCY,
    DIRECTOR_PRESET_REDUNDANCY,
    DIRECTOR_STYLES,
    director_style,
)
from cineprompt.vocabulary.locations import (
    LOCATION_PRESETS,
    atmosphere_blocked_by_location,
    compatible_locations,
    lighting_blocked_by_location,
)
from cineprompt.vocabulary.subjects import MAGIC_SUBJECTS
from cineprompt.vocabulary.visual import (
    ATMOSPHERE_BLOCKS_CATEGORIES,
    ATMOSPHERE_BLOCKS_DOF,
    ATMOSPHERE_IMPLIED_STYLES,
    ATMOSPHERE_LIGHTING_REDUNDANCY,
    ATMOSPHERE_SHOT_CONFLICTS,
    ATMOSPHERES,
    COLOR_PALETTES,
    LIGHTING_OPTIONS,
    PRESET_BLOCKS_CATEGORIES,
    VISUAL_PRESETS,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cineprompt.models.conflict import DirectorStyle

log = get_logger(__name__)

T = TypeVar("T")

# Presets that assert little style of their own.
NEUTRAL_PRESETS: tuple[str, ...] = ("raw", "filmlook")

# Above this many style assertions from director, atmosphere and lighting,
# only neutral presets are picked.
PRESET_STACKING_THRESHOLD = 5

# A shot from the subject's own eyes cannot show a third-person subject.
FIRST_PERSON_SHOT = "POV"


def _pick(rng: Random, preferred: Sequence[T], fallback: Sequence[T] = ()) -> T | None:
    """Random item of ``preferred``, else of ``fallback``, else None."""
    pool = preferred or fallback
    if not pool:
        return None
    return rng.choice(list(pool))


def _director_keeps_locks(
    style: DirectorStyle, state: SceneState, sections: LockedSections
) -> bool:
    if sections.camera and state.camera in style.blocked_cameras:
        return False
    if sections.atmosphere and state.atmosphere in style.blocked_atmospheres:
        return False
    return not (sections.visual and state.visual_preset in style.blocked_presets)


def _camera_keeps_locks(camera: str, state: SceneState, sections: LockedSections) -> bool:
    category = camera_category(camera)
    rules = category_rules(category)
    if sections.atmosphere and state.atmosphere:
        if state.atmosphere in rules.blocked_atmospheres:
            return False
        if category in ATMOSPHERE_BLOCKS_CATEGORIES.get(state.atmosphere, frozenset()):
            return False
    if sections.visual and state.visual_preset:
        if state.visual_preset in rules.blocked_presets:
            return False
        if category in PRESET_BLOCKS_CATEGORIES.get(state.visual_preset, frozenset()):
            return False
    return True


def _director_style_families(director: str) -> set[str]:
    """Style families a director's keywords obviously assert."""
    style = director_style(director)
    if style is None:
        return set()
    keywords = style.keywords.lower()
    families: set[str] = set()
    if "contrast" in keywords:
        families.add("contrast")
    if "desaturated" in keywords or "muted" in keywords:
        families.add("color")
    return families


def _randomize_subject(state: SceneState, rng: Random) -> SceneState:
    subject = rng.choice(MAGIC_SUBJECTS)
    location = rng.choice(compatible_locations(subject.text) or LOCATION_PRESETS)
    return state.model_copy(update={"subject": subject.text, "location": location.label})


def _randomize_director(state: SceneState, rng: Random, sections: LockedSections) -> SceneState:
    candidates = [s for s in DIRECTOR_STYLES if _director_keeps_locks(s, state, sections)]
    style = _pick(rng, candidates)
    if style is None:
        return state
    return apply_director_change(state, style.name)


def _randomize_camera(state: SceneState, rng: Random, sections: LockedSections) -> SceneState:
    style = director_style(state.director)
    blocked = style.blocked_cameras if style else frozenset()
    keeps_locks = [
        o.label for o in CAMERA_OPTIONS if _camera_keeps_locks(o.label, state, sections)
    ]
    camera = _pick(rng, [label for label in keeps_locks if label not in blocked], keeps_locks)
    if camera is None:
        return state
    state = apply_camera_change(state, camera)

    allowed = compute_conflicts(state).allowed_aspect_ratios
    ratios = allowed or [o.value for o in ASPECT_RATIO_OPTIONS if o.value != "none"]
    return select_aspect_ratio(state, rng.choice(list(ratios)))


def _randomize_atmosphere(
    state: SceneState, rng: Random, sections: LockedSections
) -> SceneState:
    blocked = set(compute_conflicts(state).blocked_atmospheres)
    blocked |= DIRECTOR_ATMOSPHERE_REDUNDANCY.get(state.director, frozenset())
    category = camera_category(state.camera)
    candidates = [
        key
        for key in ATMOSPHERES
        if key not in blocked
        and category not in ATMOSPHERE_BLOCKS_CATEGORIES.get(key, frozenset())
        and not atmosphere_blocked_by_location(key, state.location)
    ]
    if state.lighting:
        # Lighting may be locked; an atmosphere that repeats it is stacking.
        candidates = [
            key
            for key in candidates
            if (key, state.lighting) not in ATMOSPHERE_LIGHTING_REDUNDANCY
        ] or candidates
    if sections.camera:
        # Shot and depth of field stay as they are; keep the atmosphere compatible.
        candidates = [
            key
            for key in candidates
            if state.shot not in ATMOSPHERE_SHOT_CONFLICTS.get(key, frozenset())
            and state.depth_of_field not in ATMOSPHERE_BLOCKS_DOF.get(key, frozenset())
        ]

    families = _director_style_families(state.director)
    if families:
        not_stacking = [
            key
            for key in candidates
            if len(families.intersection(ATMOSPHERE_IMPLIED_STYLES.get(key, ()))) < 2
        ]
        candidates = not_stacking or candidates

    atmosphere = _pick(rng, candidates)
    if atmosphere is None:
        return state
    return select_atmosphere(state, atmosphere)


def _randomize_lighting(state: SceneState, rng: Random) -> SceneState:
    redundant = {
        lighting
        for atmosphere, lighting in ATMOSPHERE_LIGHTING_REDUNDANCY
        if atmosphere == state.atmosphere
    }
    redundant |= DIRECTOR_LIGHTING_REDUNDANCY.get(state.director, frozenset())
    candidates = [
        key
        for key in LIGHTING_OPTIONS
        if key not in redundant and not lighting_blocked_by_location(key, state.location)
    ]
    lighting = _pick(rng, candidates, list(LIGHTING_OPTIONS))
    return state.model_copy(update={"lighting": lighting})


def _randomize_shot(state: SceneState, rng: Random) -> SceneState:
    blocked = set(ATMOSPHERE_SHOT_CONFLICTS.get(state.atmosphere or "", frozenset()))
    if state.subject.strip():
        blocked.add(FIRST_PERSON_SHOT)
    labels = [o.label for o in SHOT_OPTIONS]
    shot = _pick(rng, [label for label in labels if label not in blocked], labels)
    return state.model_copy(update={"shot": shot, "custom_shot": ""})


def _randomize_lens(state: SceneState, rng: Random) -> SceneState:
    if fixed_lens_for(state.camera) or state.camera in CAMERA_ZOOM_RANGES:
        # The body decides the optics; a lens pick would contradict it.
        return state.model_copy(update={"lens": "", "custom_lens": ""})
    blocked = SHOT_LENS_CONFLICTS.get(state.shot, frozenset()) | DIRECTOR_BLOCKED_LENSES.get(
        state.director, frozenset()
    )
    lens = _pick(
        rng, [lens for lens in LENS_OPTIONS if LENS_CATEGORIES[lens] not in blocked], LENS_OPTIONS
    )
    return state.model_copy(update={"lens": lens, "custom_lens": ""})


def _randomize_preset(state: SceneState, rng: Random) -> SceneState:
    blocked = set(compute_conflicts(state).blocked_presets)
    blocked |= DIRECTOR_PRESET_REDUNDANCY.get(state.director, frozenset())
    category = camera_category(state.camera)
    candidates = [
        key
        for key in VISUAL_PRESETS
        if key not in blocked
        and category not in PRESET_BLOCKS_CATEGORIES.get(key, frozenset())
    ]

    if state.director and state.atmosphere:
        stacking = analyze_style_stacking(state.director, state.atmosphere, None, state.lighting)
        if stacking.total_assertions >= PRESET_STACKING_THRESHOLD:
            candidates = [key for key in candidates if key in NEUTRAL_PRESETS] or candidates

    preset = _pick(rng, candidates)
    if preset is None:
        return state
    return select_visual_preset(state, preset)


def _randomize_depth_of_field(state: SceneState, rng: Random) -> SceneState:
    blocked = set(compute_conflicts(state).blocked_dof)
    blocked |= ATMOSPHERE_BLOCKS_DOF.get(state.atmosphere or "", frozenset())
    blocked |= SHOT_DOF_CONFLICTS.get(state.shot, frozenset())
    dof = _pick(rng, [o.value for o in DOF_OPTIONS if o.value not in blocked])
    if dof is None:
        return state
    return select_depth_of_field(state, dof)


def randomize_scene(
    state: SceneState,
    *,
    rng: Random | None = None,
    locked: bool = False,
    locked_sections: LockedSections | None = None,
) -> SceneState:
    """Fill every unlocked section with a random, mutually compatible pick.

    The target model, negative prompt, sliders and characters are never
    touched. Camera, director and guarded selections go through the
    resolver, so the result never holds a value its own conflict view
    blocks. A picked subject comes with a location it can plausibly occupy.

    Args:
        state: Current scene.
        rng: Random instance for reproducibility. A fresh one is used if None.
        locked: Global settings lock. When set, ``state`` is returned unchanged.
        locked_sections: Sections whose fields keep their current values.

    Returns:
        The randomized scene.
    """
    if locked:
        log.debug("scene_change_locked", operation="randomize")
        return state
    if rng is None:
        rng = Random()
    sections = locked_sections or LockedSections()

    if not sections.subject:
        state = _randomize_subject(state, rng)
    if not sections.director:
        state = _randomize_director(state, rng, sections)
    if not sections.camera:
        state = _randomize_camera(state, rng, sections)
    if not sections.atmosphere:
        state = _randomize_atmosphere(state, rng, sections)
    if not sections.lighting:
        state = _randomize_lighting(state, rng)
    if not sections.camera:
        state = _randomize_shot(state, rng)
        state = _randomize_lens(state, rng)
    if not sections.visual:
        state = _randomize_preset(state, rng)
    if not sections.camera:
        state = _randomize_depth_of_field(state, rng)
    if not sections.color:
        palette = rng.choice(list(COLOR_PALETTES))
        state = state.model_copy(
            update={"color_palette": palette, "custom_colors": ("",) * CUSTOM_COLOR_SLOTS}
        )

    log.debug(
        "scene_randomized",
        director=state.director,
        camera=state.camera,
        atmosphere=state.atmosphere,
    )
    return state
