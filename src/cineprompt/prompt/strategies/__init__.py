"""Per-backend prompt strategies and their registry."""

from cineprompt.prompt.strategies.base import (
    EMPTY_SLIDER_PARAMS,
    ModelContext,
    ModelStrategy,
    PromptStyle,
    SliderParams,
)
from cineprompt.prompt.strategies.registry import (
    TargetModel,
    get_strategy,
    is_supported,
    list_supported_models,
)

__all__ = [
    "EMPTY_SLIDER_PARAMS",
    "ModelContext",
    "ModelStrategy",
    "PromptStyle",
    "SliderParams",
    "TargetModel",
    "get_strategy",
    "is_supported",
    "list_supported_models",
]
