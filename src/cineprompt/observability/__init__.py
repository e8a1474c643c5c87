"""Observability module for CinePrompt: structured logging."""

from cineprompt.observability.logging import close_file_logging, configure_logging, get_logger

__all__ = [
    "close_file_logging",
    "configure_logging",
    "get_logger",
]
