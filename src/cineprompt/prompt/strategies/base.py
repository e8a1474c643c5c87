"""Backend strategy protocol and the values strategies exchange.

A strategy turns the shared base prompt into one backend's syntax in two
steps: ``translate_sliders`` maps the 0-100 creative sliders to that
backend's parameter tokens, and ``finalize_prompt`` appends aspect ratio,
negative prompt and slider tokens in the backend's own layout.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import StrEnum
from typing import Protocol, runtime_checkable

SLIDER_MIN = 0
SLIDER_MAX = 100


class PromptStyle(StrEnum):
    """How a backend reads prompts. Informational; the compiler does not branch on it."""

    TAGS = "tags"
    NATURAL = "natural"


@dataclass(frozen=True)
class SliderParams:
    """Backend-specific slider tokens. An empty string means no token."""

    creativity: str = ""
    variation: str = ""
    quality: str = ""


EMPTY_SLIDER_PARAMS = SliderParams()


@dataclass(frozen=True)
class ModelContext:
    """Everything a strategy needs to finalize one compile.

    Attributes:
        base_prompt: Backend-agnostic prompt from the assembler.
        aspect_ratio_display: Ratio text such as ``16:9``, or None for backend default.
        negative_prompt: Raw negative prompt text; may be blank.
        creative_controls_enabled: Whether slider tokens are emitted at all.
        slider_params: Tokens from this strategy's ``translate_sliders``.
    """

    base_prompt: str
    aspect_ratio_display: str | None
    negative_prompt: str
    creative_controls_enabled: bool
    slider_params: SliderParams = EMPTY_SLIDER_PARAMS


@runtime_checkable
class ModelStrategy(Protocol):
    """Prompt formatting for one image-generation backend."""

    model_id: str
    display_name: str
    prompt_style: PromptStyle
    supports_negative_prompt: bool

    def translate_sliders(self, creativity: int, variation: int, uniqueness: int) -> SliderParams:
        """Map the three 0-100 sliders to this backend's tokens. Never raises."""
        ...

    def finalize_prompt(self, context: ModelContext) -> str:
        """Render the final prompt for this backend."""
        ...


def clamp_slider(value: float) -> float:
    return max(SLIDER_MIN, min(SLIDER_MAX, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def rescale(value: float, native_max: int) -> str:
    """Rescale a 0-100 slider to ``0..native_max`` with one decimal place."""
    scaled = Decimal(str(value)) * native_max / 100
    return str(scaled.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def negative_text(strategy: ModelStrategy, context: ModelContext) -> str:
    """Negative prompt to emit, or "" when unsupported or blank."""
    if not strategy.supports_negative_prompt:
        return ""
    return context.negative_prompt.strip()


def slider_tokens(context: ModelContext, *names: str) -> list[str]:
    """Non-empty slider tokens by name, or none while creative controls are off."""
    if not context.creative_controls_enabled:
        return []
    tokens = (getattr(context.slider_params, name) for name in names)
    return [token for token in tokens if token]


def append_flags(base_prompt: str, flags: list[str]) -> str:
    """Append ``--flag value`` tokens after the prompt, space separated."""
    if not flags:
        return base_prompt
    return f"{base_prompt} {' '.join(flags)}"
