"""Error types raised by the prompt compiler and scene transitions.

Only configuration faults are errors. Unknown cameras, directors and option
keys are permissive and never raise, and changes attempted while settings
are locked are silently ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from difflib import get_close_matches
from pathlib import Path  # noqa: TC003 - used at runtime


class CinePromptError(Exception):
    """Base class for cineprompt errors."""


@dataclass
class UnsupportedModelError(CinePromptError):
    """Raised when no strategy exists for a target model id.

    Attributes:
        model_id: The id that was requested.
        available: Supported ids, in registry order.
    """

    model_id: str
    available: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"Unsupported AI model: {self.model_id}"
        suggestions = self.suggestions()
        if suggestions:
            msg += f" (did you mean {', '.join(suggestions)}?)"
        return msg

    def suggestions(self) -> list[str]:
        """Find supported ids that look like typos of ``model_id``."""
        return get_close_matches(self.model_id.lower(), self.available, n=3, cutoff=0.6)


@dataclass
class UnknownSceneFieldError(CinePromptError):
    """Raised when a change names a field ``SceneState`` does not have."""

    field_name: str
    available: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        msg = f"Unknown scene field: {self.field_name}"
        matches = get_close_matches(self.field_name, self.available, n=1, cutoff=0.6)
        if matches:
            msg += f" (did you mean {matches[0]}?)"
        super().__init__(msg)


class ConfigError(CinePromptError):
    """Raised when a configuration or scene file cannot be loaded."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load {path}: {reason}")
