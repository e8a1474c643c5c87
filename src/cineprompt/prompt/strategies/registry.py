"""Closed registry of backend strategies.

``TargetModel`` enumerates every supported backend. The dispatch table must
cover each member exactly once; a missing entry fails at import time.
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType

from cineprompt.errors import UnsupportedModelError
from cineprompt.observability.logging import get_logger
from cineprompt.prompt.strategies.base import ModelStrategy
from cineprompt.prompt.strategies.conversational import ChatGPTStrategy, DallE3Strategy
from cineprompt.prompt.strategies.natural import (
    FireflyStrategy,
    FluxStrategy,
    ImagenStrategy,
    LeonardoStrategy,
)
from cineprompt.prompt.strategies.tags import (
    IdeogramStrategy,
    MidjourneyStrategy,
    StableDiffusionStrategy,
)

log = get_logger(__name__)


class TargetModel(StrEnum):
    """Supported backends, in display order."""

    MIDJOURNEY = "midjourney"
    FLUX = "flux"
    STABLE_DIFFUSION = "stable-diffusion"
    DALLE3 = "dalle3"
    CHATGPT = "chatgpt"
    IMAGEN = "imagen"
    IDEOGRAM = "ideogram"
    LEONARDO = "leonardo"
    FIREFLY = "firefly"


_STRATEGIES: MappingProxyType[TargetModel, ModelStrategy] = MappingProxyType(
    {
        TargetModel.MIDJOURNEY: MidjourneyStrategy(),
        TargetModel.FLUX: FluxStrategy(),
        TargetModel.STABLE_DIFFUSION: StableDiffusionStrategy(),
        TargetModel.DALLE3: DallE3Strategy(),
        TargetModel.CHATGPT: ChatGPTStrategy(),
        TargetModel.IMAGEN: ImagenStrategy(),
        TargetModel.IDEOGRAM: IdeogramStrategy(),
        TargetModel.LEONARDO: LeonardoStrategy(),
        TargetModel.FIREFLY: FireflyStrategy(),
    }
)

_missing = set(TargetModel) - set(_STRATEGIES)
if _missing:
    raise RuntimeError(f"No strategy registered for: {sorted(_missing)}")
for _model, _strategy in _STRATEGIES.items():
    if _strategy.model_id != _model.value:
        raise RuntimeError(f"Strategy {_strategy.model_id!r} registered under {_model.value!r}")


def list_supported_models() -> list[str]:
    """Supported model ids in display order."""
    return [model.value for model in TargetModel]


def is_supported(model_id: str) -> bool:
    return model_id in TargetModel._value2member_map_


def get_strategy(model_id: str) -> ModelStrategy:
    """Look up the strategy for a model id.

    Args:
        model_id: Backend id such as ``midjourney``.

    Returns:
        The backend's strategy.

    Raises:
        UnsupportedModelError: If the id is not one of the supported backends.
    """
    if not is_supported(model_id):
        log.warning("unsupported_model", model=model_id)
        raise UnsupportedModelError(model_id, list_supported_models())
    return _STRATEGIES[TargetModel(model_id)]
