"""Natural-language backends that take ``[key: value]`` parameter blocks.

Flux, Imagen, Leonardo and Adobe Firefly read prose prompts; settings follow
on their own lines in square brackets.
"""

from __future__ import annotations

from cineprompt.prompt.strategies.base import (
    ModelContext,
    PromptStyle,
    SliderParams,
    clamp_slider,
    negative_text,
    rescale,
    round_half_up,
    slider_tokens,
)


def _bracket(tokens: list[str]) -> str:
    return f"[{', '.join(tokens)}]"


class FluxStrategy:
    """Flux: guidance 0-20, no negative prompt support."""

    model_id = "flux"
    display_name = "Flux"
    prompt_style = PromptStyle.NATURAL
    supports_negative_prompt = False

    def translate_sliders(self, creativity: int, variation: int, uniqueness: int) -> SliderParams:
        return SliderParams(
            creativity=f"guidance: {rescale(clamp_slider(creativity), 20)}",
            variation=f"seed_variation: {round_half_up(clamp_slider(variation))}",
        )

    def finalize_prompt(self, context: ModelContext) -> str:
        prompt = context.base_prompt
        tokens = slider_tokens(context, "creativity", "variation")
        if tokens:
            prompt += f"\n\n{_bracket(tokens)}"
        if context.aspect_ratio_display:
            prompt += f"\n[aspect_ratio: {context.aspect_ratio_display}]"
        return prompt


class ImagenStrategy:
    """Imagen: descriptive creativity and quality labels."""

    model_id = "imagen"
    display_name = "Imagen 3"
    prompt_style = PromptStyle.NATURAL
    supports_negative_prompt = True

    def translate_sliders(self, creativity: int, variation: int, uniqueness: int) -> SliderParams:
        return SliderParams(
            creativity=(
                "high creativity" if clamp_slider(creativity) > 70 else "balanced creativity"
            ),
            variation=f"seed variation: {round_half_up(clamp_slider(variation))}",
            quality="high quality" if clamp_slider(uniqueness) > 50 else "standard quality",
        )

    def finalize_prompt(self, context: ModelContext) -> str:
        prompt = context.base_prompt
        if context.aspect_ratio_display:
            prompt += f"\n\n[aspect_ratio: {context.aspect_ratio_display}]"
        negative = negative_text(self, context)
        if negative:
            prompt += f"\n[negative_prompt: {negative}]"
        tokens = slider_tokens(context, "creativity", "quality")
        if tokens:
            prompt += f"\n{_bracket(tokens)}"
        return prompt


class LeonardoStrategy:
    """Leonardo.ai: guidance scale 0-20 and a preset style switch."""

    model_id = "leonardo"
    display_name = "Leonardo.ai"
    prompt_style = PromptStyle.NATURAL
    supports_negative_prompt = True

    def translate_sliders(self, creativity: int, variation: int, uniqueness: int) -> SliderParams:
        preset = "dynamic" if clamp_slider(variation) > 50 else "cinematic"
        return SliderParams(
            creativity=f"guidance_scale: {rescale(clamp_slider(creativity), 20)}",
            variation=f"preset_style: {preset}",
            quality="high_resolution: true" if clamp_slider(uniqueness) > 50 else "",
        )

    def finalize_prompt(self, context: ModelContext) -> str:
        prompt = context.base_prompt
        if context.aspect_ratio_display:
            prompt += f"\n\n[dimensions: {context.aspect_ratio_display}]"
        negative = negative_text(self, context)
        if negative:
            prompt += f"\n[negative_prompt: {negative}]"
        tokens = slider_tokens(context, "creativity", "variation")
        if tokens:
            prompt += f"\n{_bracket(tokens)}"
        return prompt


class FireflyStrategy:
    """Adobe Firefly: inline aspect ratio, style strength and quality block."""

    model_id = "firefly"
    display_name = "Adobe Firefly"
    prompt_style = PromptStyle.NATURAL
    supports_negative_prompt = False

    def translate_sliders(self, creativity: int, variation: int, uniqueness: int) -> SliderParams:
        strength = "high" if clamp_slider(creativity) > 70 else "medium"
        quality = "high" if clamp_slider(uniqueness) > 50 else "standard"
        return SliderParams(
            creativity=f"style_strength: {strength}",
            quality=f"quality: {quality}",
        )

    def finalize_prompt(self, context: ModelContext) -> str:
        prompt = context.base_prompt
        if context.aspect_ratio_display:
            prompt += f", {context.aspect_ratio_display} aspect ratio"
        tokens = slider_tokens(context, "creativity", "quality")
        if tokens:
            prompt += f"\n\n{_bracket(tokens)}"
        return prompt
