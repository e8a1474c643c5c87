"""Prompt compiler facade: scene in, backend-specific prompt out."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cineprompt.observability.logging import get_logger
from cineprompt.prompt.assembler import assemble_base
from cineprompt.prompt.strategies.base import ModelContext
from cineprompt.prompt.strategies.registry import get_strategy
from cineprompt.vocabulary.camera import aspect_ratio_display

if TYPE_CHECKING:
    from cineprompt.models.scene import SceneState
    from cineprompt.prompt.strategies.base import ModelStrategy

log = get_logger(__name__)

EMPTY_PROMPT_PLACEHOLDER = "Start by adding a subject..."


def build_context(state: SceneState, strategy: ModelStrategy, base_prompt: str) -> ModelContext:
    """Build the handoff object ``strategy`` finalizes."""
    return ModelContext(
        base_prompt=base_prompt,
        aspect_ratio_display=aspect_ratio_display(state.aspect_ratio),
        negative_prompt=state.negative_prompt,
        creative_controls_enabled=state.creative_controls_enabled,
        slider_params=strategy.translate_sliders(
            state.creativity, state.variation, state.uniqueness
        ),
    )


def compile_prompt(state: SceneState) -> str:
    """Compile a scene into the prompt for its target model.

    Nothing is cached; equal scenes always compile to identical strings.

    Args:
        state: Scene to compile.

    Returns:
        Final prompt, or a placeholder when the scene has no content yet.

    Raises:
        UnsupportedModelError: If ``state.target_model`` is not supported.
    """
    strategy = get_strategy(state.target_model)
    base_prompt = assemble_base(state)
    if not base_prompt:
        return EMPTY_PROMPT_PLACEHOLDER

    prompt = strategy.finalize_prompt(build_context(state, strategy, base_prompt))
    log.debug("prompt_compiled", model=strategy.model_id, length=len(prompt))
    return prompt
