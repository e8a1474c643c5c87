"""Tests for coherent random scenes."""

from __future__ import annotations

from random import Random

import pytest

from cineprompt.models import LockedSections, SceneState
from cineprompt.randomize import FIRST_PERSON_SHOT, randomize_scene
from cineprompt.resolver import apply_camera_change, compute_conflicts, style_warnings
from cineprompt.vocabulary import COLOR_PALETTES, DIRECTORS, director_style
from cineprompt.vocabulary.camera import (
    CAMERA_ZOOM_RANGES,
    LENS_CATEGORIES,
    SHOT_DOF_CONFLICTS,
    SHOT_LENS_CONFLICTS,
    fixed_lens_for,
)
from cineprompt.vocabulary.directors import DIRECTOR_BLOCKED_LENSES
from cineprompt.vocabulary.locations import (
    LOCATIONS,
    atmosphere_blocked_by_location,
    compatible_locations,
    lighting_blocked_by_location,
)
from cineprompt.vocabulary.subjects import MAGIC_SUBJECTS
from cineprompt.vocabulary.visual import ATMOSPHERE_BLOCKS_DOF, ATMOSPHERE_SHOT_CONFLICTS

SEEDS = range(30)


@pytest.fixture
def base_state() -> SceneState:
    return SceneState(
        target_model="midjourney",
        negative_prompt="blurry, watermark",
        creativity=80,
        creative_controls_enabled=True,
    )


def _assert_coherent(state: SceneState) -> None:
    conflicts = compute_conflicts(state)
    assert conflicts.active_conflicts == ()
    assert state.camera not in conflicts.blocked_cameras
    assert conflicts.allows_aspect_ratio(state.aspect_ratio)


class TestReproducibility:
    def test_same_seed_same_scene(self, base_state: SceneState) -> None:
        first = randomize_scene(base_state, rng=Random(7))
        second = randomize_scene(base_state, rng=Random(7))
        assert first == second

    def test_without_rng(self, base_state: SceneState) -> None:
        result = randomize_scene(base_state)
        _assert_coherent(result)

    def test_global_lock_returns_state(self, base_state: SceneState) -> None:
        assert randomize_scene(base_state, rng=Random(1), locked=True) is base_state

    def test_all_sections_locked(self, base_state: SceneState) -> None:
        sections = LockedSections(
            subject=True,
            director=True,
            atmosphere=True,
            visual=True,
            color=True,
            camera=True,
            lighting=True,
        )
        result = randomize_scene(base_state, rng=Random(3), locked_sections=sections)
        assert result == base_state


class TestUnlockedScene:
    """Every section is picked and the picks agree with each other."""

    @pytest.mark.parametrize("seed", SEEDS)
    def test_no_conflicts_or_redundancy(self, base_state: SceneState, seed: int) -> None:
        result = randomize_scene(base_state, rng=Random(seed))
        _assert_coherent(result)
        assert style_warnings(result) == ()

    @pytest.mark.parametrize("seed", SEEDS)
    def test_subject_and_location(self, base_state: SceneState, seed: int) -> None:
        result = randomize_scene(base_state, rng=Random(seed))
        assert result.subject in {subject.text for subject in MAGIC_SUBJECTS}
        assert result.location in LOCATIONS
        assert result.location in {p.label for p in compatible_locations(result.subject)}

    @pytest.mark.parametrize("seed", SEEDS)
    def test_camera_section(self, base_state: SceneState, seed: int) -> None:
        result = randomize_scene(base_state, rng=Random(seed))
        assert result.director in DIRECTORS
        assert result.aspect_ratio != "none"
        assert result.shot != FIRST_PERSON_SHOT
        assert result.custom_shot == ""
        assert result.custom_lens == ""

        atmosphere = result.atmosphere or ""
        assert result.shot not in ATMOSPHERE_SHOT_CONFLICTS.get(atmosphere, frozenset())
        assert result.depth_of_field not in ATMOSPHERE_BLOCKS_DOF.get(atmosphere, frozenset())
        assert result.depth_of_field not in SHOT_DOF_CONFLICTS.get(result.shot, frozenset())

    @pytest.mark.parametrize("seed", SEEDS)
    def test_lens_follows_body_and_framing(self, base_state: SceneState, seed: int) -> None:
        result = randomize_scene(base_state, rng=Random(seed))
        if fixed_lens_for(result.camera) or result.camera in CAMERA_ZOOM_RANGES:
            assert result.lens == ""
            return
        category = LENS_CATEGORIES[result.lens]
        assert category not in SHOT_LENS_CONFLICTS.get(result.shot, frozenset())
        assert category not in DIRECTOR_BLOCKED_LENSES.get(result.director, frozenset())

    @pytest.mark.parametrize("seed", SEEDS)
    def test_location_fits_atmosphere_and_lighting(
        self, base_state: SceneState, seed: int
    ) -> None:
        result = randomize_scene(base_state, rng=Random(seed))
        if result.atmosphere:
            assert not atmosphere_blocked_by_location(result.atmosphere, result.location)
        assert result.lighting is not None
        assert not lighting_blocked_by_location(result.lighting, result.location)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_untouched_fields(self, base_state: SceneState, seed: int) -> None:
        result = randomize_scene(base_state, rng=Random(seed))
        assert result.target_model == "midjourney"
        assert result.negative_prompt == "blurry, watermark"
        assert result.creativity == 80
        assert result.creative_controls_enabled is True
        assert result.characters == ()

    def test_color_palette_clears_custom_colors(self) -> None:
        state = SceneState(custom_colors=("#ff0000", "", "", "", "", ""))
        result = randomize_scene(state, rng=Random(11))
        assert result.color_palette in COLOR_PALETTES
        assert all(color == "" for color in result.custom_colors)


class TestLockedSections:
    """Locked sections keep their values and no other pick clears them."""

    @pytest.mark.parametrize("seed", SEEDS)
    def test_locked_camera(self, seed: int) -> None:
        state = apply_camera_change(SceneState(), "VHS Camcorder").model_copy(
            update={"aspect_ratio": "4:3", "lens": "", "shot": "Close-Up (CU)"}
        )
        result = randomize_scene(
            state, rng=Random(seed), locked_sections=LockedSections(camera=True)
        )
        assert result.camera == "VHS Camcorder"
        assert result.aspect_ratio == "4:3"
        assert result.lens == ""
        assert result.shot == "Close-Up (CU)"
        assert result.depth_of_field == state.depth_of_field
        style = director_style(result.director)
        assert style is not None
        assert "VHS Camcorder" not in style.blocked_cameras
        _assert_coherent(result)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_locked_atmosphere(self, seed: int) -> None:
        state = SceneState(atmosphere="cyberpunk")
        result = randomize_scene(
            state, rng=Random(seed), locked_sections=LockedSections(atmosphere=True)
        )
        assert result.atmosphere == "cyberpunk"
        assert result.director != "Wes Anderson"
        _assert_coherent(result)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_locked_preset(self, seed: int) -> None:
        state = SceneState(visual_preset="highcontrast")
        result = randomize_scene(
            state, rng=Random(seed), locked_sections=LockedSections(visual=True)
        )
        assert result.visual_preset == "highcontrast"
        assert result.director != "Wes Anderson"
        _assert_coherent(result)

    def test_locked_subject(self) -> None:
        state = SceneState(subject="a lighthouse keeper", location="on a rocky island")
        result = randomize_scene(
            state, rng=Random(5), locked_sections=LockedSections(subject=True)
        )
        assert result.subject == "a lighthouse keeper"
        assert result.location == "on a rocky island"

    def test_locked_color(self) -> None:
        state = SceneState(color_palette=next(iter(COLOR_PALETTES)))
        result = randomize_scene(
            state, rng=Random(5), locked_sections=LockedSections(color=True)
        )
        assert result.color_palette == state.color_palette
        assert result.custom_colors == state.custom_colors
