"""Tag-style backends: Midjourney, Stable Diffusion and Ideogram."""

from __future__ import annotations

from cineprompt.prompt.strategies.base import (
    ModelContext,
    PromptStyle,
    SliderParams,
    append_flags,
    clamp_slider,
    negative_text,
    rescale,
    round_half_up,
    slider_tokens,
)


class MidjourneyStrategy:
    """Midjourney: trailing ``--flag`` parameters.

    Stylize spans 0-1000 and chaos 0-100. Creativity above 70 adds
    ``--q 2``.
    """

    model_id = "midjourney"
    display_name = "Midjourney"
    prompt_style = PromptStyle.TAGS
    supports_negative_prompt = True

    def translate_sliders(self, creativity: int, variation: int, uniqueness: int) -> SliderParams:
        stylize = clamp_slider(creativity)
        return SliderParams(
            creativity=f"--s {round_half_up(stylize * 10)}",
            variation=f"--chaos {round_half_up(clamp_slider(variation))}",
            quality="--q 2" if stylize > 70 else "",
        )

    def finalize_prompt(self, context: ModelContext) -> str:
        flags: list[str] = []
        if context.aspect_ratio_display:
            flags.append(f"--ar {context.aspect_ratio_display}")
        flags.extend(slider_tokens(context, "creativity", "variation", "quality"))
        negative = negative_text(self, context)
        if negative:
            flags.append(f"--no {negative}")
        return append_flags(context.base_prompt, flags)


class StableDiffusionStrategy:
    """Stable Diffusion: inline ratio, a "Negative prompt:" block and generation settings.

    CFG scale spans 0-30. Uniqueness picks 50 or 30 sampling steps.
    """

    model_id = "stable-diffusion"
    display_name = "Stable Diffusion"
    prompt_style = PromptStyle.TAGS
    supports_negative_prompt = True

    def translate_sliders(self, creativity: int, variation: int, uniqueness: int) -> SliderParams:
        return SliderParams(
            creativity=f"CFG Scale: {rescale(clamp_slider(creativity), 30)}",
            variation=f"Denoising: {round_half_up(clamp_slider(variation))}%",
            quality="Steps: 50" if clamp_slider(uniqueness) > 50 else "Steps: 30",
        )

    def finalize_prompt(self, context: ModelContext) -> str:
        prompt = context.base_prompt
        if context.aspect_ratio_display:
            prompt += f", {context.aspect_ratio_display} aspect ratio"
        negative = negative_text(self, context)
        if negative:
            prompt += f"\n\nNegative prompt: {negative}"
        tokens = slider_tokens(context, "creativity", "quality")
        if tokens:
            prompt += f"\n\n{', '.join(tokens)}"
        return prompt


class IdeogramStrategy:
    """Ideogram: ``--aspect``, ``--negative`` and style flags after the prompt."""

    model_id = "ideogram"
    display_name = "Ideogram"
    prompt_style = PromptStyle.TAGS
    supports_negative_prompt = True

    def translate_sliders(self, creativity: int, variation: int, uniqueness: int) -> SliderParams:
        style = "artistic" if clamp_slider(creativity) > 70 else "realistic"
        return SliderParams(
            creativity=f"--style {style}",
            variation=f"--variation {round_half_up(clamp_slider(variation))}",
        )

    def finalize_prompt(self, context: ModelContext) -> str:
        flags: list[str] = []
        if context.aspect_ratio_display:
            flags.append(f"--aspect {context.aspect_ratio_display}")
        negative = negative_text(self, context)
        if negative:
            flags.append(f"--negative {negative}")
        flags.extend(slider_tokens(context, "creativity", "variation"))
        return append_flags(context.base_prompt, flags)
