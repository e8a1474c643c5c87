"""Tests for backend-agnostic base prompt assembly."""

from __future__ import annotations

import pytest

from cineprompt.models import CharacterItem, SceneState
from cineprompt.prompt.assembler import (
    assemble_base,
    camera_phrase,
    color_phrase,
    depth_of_field_phrase,
    format_hex_color,
    is_valid_hex_color,
    lens_phrase,
    location_phrase,
    normalize_text,
    shot_phrase,
    valid_custom_colors,
)
from cineprompt.vocabulary import (
    ATMOSPHERES,
    CAMERAS,
    DEPTHS_OF_FIELD,
    LIGHTING_OPTIONS,
    SHOTS,
    VISUAL_PRESETS,
    director_style,
)


class TestTextHelpers:
    """normalize_text and hex color helpers."""

    def test_normalize_collapses_whitespace(self) -> None:
        assert normalize_text("  a   fox\n in\tthe snow ") == "a fox in the snow"

    def test_normalize_truncates(self) -> None:
        assert normalize_text("abcdef", 3) == "abc"

    @pytest.mark.parametrize("color", ["#1A535C", "1a535c", "  #ffffff "])
    def test_valid_hex(self, color: str) -> None:
        assert is_valid_hex_color(color)

    @pytest.mark.parametrize("color", ["", "#fff", "#GGGGGG", "1A535C0", "red"])
    def test_invalid_hex(self, color: str) -> None:
        assert not is_valid_hex_color(color)

    def test_format_adds_hash(self) -> None:
        assert format_hex_color("1a535c") == "#1a535c"
        assert format_hex_color("#1a535c") == "#1a535c"

    def test_valid_custom_colors_skips_bad_slots(self) -> None:
        assert valid_custom_colors(["", "ff0000", "oops", "#00ff00", "", ""]) == [
            "#ff0000",
            "#00ff00",
        ]


class TestLocation:
    """location_phrase."""

    def test_adds_preposition(self) -> None:
        assert location_phrase("a misty forest") == "in a misty forest"

    @pytest.mark.parametrize("location", ["on a rooftop", "Beneath the pier", "near the docks"])
    def test_keeps_existing_preposition(self, location: str) -> None:
        assert location_phrase(location) == location

    def test_blank(self) -> None:
        assert location_phrase("   ") == ""

    def test_truncated(self) -> None:
        assert location_phrase("x" * 600) == "in " + "x" * 500

    def test_preset_label_expands(self) -> None:
        assert location_phrase("Neon Bar") == (
            "in neon-lit bar interior, moody atmosphere, colorful lights, nightlife"
        )

    def test_preset_label_is_normalized_first(self) -> None:
        assert location_phrase("  Crystal   Cave ") == (
            "in crystal cave interior, glowing gemstones, underground wonder, magical light"
        )

    def test_keyword_fragment_expands(self) -> None:
        assert location_phrase("sandy beach") == (
            "in sandy beach, ocean waves, coastal setting, shoreline"
        )

    def test_preset_match_beats_preposition(self) -> None:
        """A preset with its own phrasing never gets a second preposition."""
        assert location_phrase("floating islands in the sky").startswith("in floating islands")

    def test_label_match_is_case_sensitive(self) -> None:
        assert location_phrase("neon bar") == "in neon bar"


class TestColorPhrase:
    """color_phrase precedence."""

    def test_named_palette(self) -> None:
        state = SceneState(color_palette="teal-orange")
        assert color_phrase(state) == (
            "color palette: #1A535C, #4ECDC4, #FF6B6B, #FFE66D, #2E4057, #F4A261"
        )

    def test_custom_colors_win_over_palette(self) -> None:
        state = SceneState(
            color_palette="teal-orange",
            custom_colors=("ff0000", "", "#00FF00", "", "", ""),
        )
        assert color_phrase(state) == "color palette: #ff0000, #00FF00"

    def test_invalid_custom_colors_fall_back_to_palette(self) -> None:
        state = SceneState(color_palette="noir", custom_colors=("nope", "", "", "", "", ""))
        assert color_phrase(state).startswith("color palette: #0D0D0D")

    def test_unknown_palette(self) -> None:
        assert color_phrase(SceneState(color_palette="mauve")) == ""


class TestCameraFragments:
    """Camera, lens, shot and depth-of-field fragments."""

    def test_camera_keywords(self) -> None:
        state = SceneState(camera="35mm Film")
        assert camera_phrase(state) == CAMERAS["35mm Film"].keywords

    def test_custom_camera_wins(self) -> None:
        state = SceneState(camera="35mm Film", custom_camera="  shot on a Bolex  ")
        assert camera_phrase(state) == "shot on a Bolex"

    def test_unknown_camera_uses_label(self) -> None:
        assert camera_phrase(SceneState(camera="Kodak Brownie")) == "Kodak Brownie"

    def test_lens(self) -> None:
        assert lens_phrase(SceneState(lens="85mm")) == "85mm lens"

    def test_custom_lens_wins(self) -> None:
        assert lens_phrase(SceneState(custom_lens="Helios 44-2")) == "Helios 44-2 lens"

    def test_fixed_lens_camera_omits_lens(self) -> None:
        assert lens_phrase(SceneState(camera="GoPro", lens="85mm")) == ""

    def test_zoom_camera_keeps_lens(self) -> None:
        assert lens_phrase(SceneState(camera="VHS Camcorder", lens="24mm")) == "24mm lens"

    def test_shot_keywords(self) -> None:
        assert shot_phrase(SceneState()) == SHOTS["Medium Shot (MS)"].keywords

    def test_custom_shot_wins(self) -> None:
        assert shot_phrase(SceneState(custom_shot="rack focus")) == "rack focus"

    def test_normal_depth_of_field_is_silent(self) -> None:
        assert depth_of_field_phrase(SceneState()) == ""

    def test_depth_of_field_keywords(self) -> None:
        state = SceneState(depth_of_field="deep")
        assert depth_of_field_phrase(state) == DEPTHS_OF_FIELD["deep"].keywords

    def test_blocked_depth_of_field_is_suppressed(self) -> None:
        state = SceneState(camera="Super 8", depth_of_field="shallow")
        assert depth_of_field_phrase(state) == ""


class TestAssembleBase:
    """assemble_base ordering and joining."""

    def test_empty_scene(self, bare_scene: SceneState) -> None:
        assert assemble_base(bare_scene) == ""

    def test_defaults_contribute_lens_and_shot(self) -> None:
        assert assemble_base(SceneState()) == (
            f"50mm lens, {SHOTS['Medium Shot (MS)'].keywords}"
        )

    def test_subject_only(self, bare_scene: SceneState) -> None:
        state = bare_scene.model_copy(update={"subject": "  a fox   in a forest "})
        assert assemble_base(state) == "a fox in a forest"

    def test_subject_truncated(self, bare_scene: SceneState) -> None:
        state = bare_scene.model_copy(update={"subject": "y" * 2500})
        assert assemble_base(state) == "y" * 2000

    def test_fragment_order(self) -> None:
        state = SceneState(
            subject="a lighthouse keeper",
            characters=(
                CharacterItem(id="a", content="a black cat"),
                CharacterItem(id="b", content="an old dog"),
            ),
            location="a storm-battered island",
            visual_preset="filmlook",
            color_palette="noir",
            atmosphere="epic",
            lighting="goldenhour",
            director="Ridley Scott",
            camera="35mm Film",
            lens="35mm",
            shot="Wide Shot (WS)",
            depth_of_field="deep",
        )
        style = director_style("Ridley Scott")
        assert style is not None

        expected = ", ".join(
            [
                "a lighthouse keeper",
                "a black cat, an old dog",
                "in a storm-battered island",
                VISUAL_PRESETS["filmlook"].keywords,
                "color palette: #0D0D0D, #2C2C2C, #4A4A4A, #FFFFFF, #1A1A2E, #B8B8B8",
                ATMOSPHERES["epic"].keywords,
                LIGHTING_OPTIONS["goldenhour"].keywords,
                style.keywords,
                CAMERAS["35mm Film"].keywords,
                "35mm lens",
                SHOTS["Wide Shot (WS)"].keywords,
                DEPTHS_OF_FIELD["deep"].keywords,
            ]
        )
        assert assemble_base(state) == expected

    def test_unknown_selections_contribute_nothing(self, bare_scene: SceneState) -> None:
        state = bare_scene.model_copy(
            update={
                "subject": "a fox",
                "atmosphere": "eerie",
                "visual_preset": "sepia",
                "lighting": "strobe",
                "director": "Orson Welles",
                "depth_of_field": "infinite",
            }
        )
        assert assemble_base(state) == "a fox"

    def test_no_dangling_separators(self, bare_scene: SceneState) -> None:
        state = bare_scene.model_copy(update={"location": "on a rooftop"})
        prompt = assemble_base(state)

        assert prompt == "on a rooftop"
        assert not prompt.startswith(",")
        assert not prompt.endswith(",")
