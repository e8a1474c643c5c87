"""Conversational backends: DALL-E 3 and ChatGPT.

Both take plain prose. Slider settings are API parameters for these
backends, so they never appear in the prompt text.
"""

from __future__ import annotations

from cineprompt.prompt.strategies.base import (
    EMPTY_SLIDER_PARAMS,
    ModelContext,
    PromptStyle,
    SliderParams,
    clamp_slider,
    negative_text,
)


class DallE3Strategy:
    """DALL-E 3.

    The contract advertises negative prompts, but ``finalize_prompt`` never
    emits them: DALL-E 3 tends to draw what an exclusion names. Keep the
    override. ``translate_sliders`` yields the ``style``/``quality`` API
    parameters for callers that submit them out of band.
    """

    model_id = "dalle3"
    display_name = "DALL-E 3"
    prompt_style = PromptStyle.NATURAL
    supports_negative_prompt = True

    def translate_sliders(self, creativity: int, variation: int, uniqueness: int) -> SliderParams:
        return SliderParams(
            creativity="style: vivid" if clamp_slider(creativity) > 70 else "style: natural",
            variation="quality: hd" if clamp_slider(uniqueness) > 50 else "quality: standard",
        )

    def finalize_prompt(self, context: ModelContext) -> str:
        prompt = context.base_prompt
        if context.aspect_ratio_display:
            prompt += f", {context.aspect_ratio_display} aspect ratio"
        return prompt


class ChatGPTStrategy:
    """ChatGPT image generation: an instruction sentence, no tunable parameters."""

    model_id = "chatgpt"
    display_name = "ChatGPT"
    prompt_style = PromptStyle.NATURAL
    supports_negative_prompt = True

    instruction_prefix = "generate this: "

    def translate_sliders(self, creativity: int, variation: int, uniqueness: int) -> SliderParams:
        return EMPTY_SLIDER_PARAMS

    def finalize_prompt(self, context: ModelContext) -> str:
        prompt = context.base_prompt
        if context.aspect_ratio_display:
            prompt += f", in {context.aspect_ratio_display} aspect ratio"
        negative = negative_text(self, context)
        if negative:
            prompt += f", without {negative}"
        return f"{self.instruction_prefix}{prompt}"
