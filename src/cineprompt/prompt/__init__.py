"""Prompt assembly, backend strategies and the compile facade."""

from cineprompt.prompt.assembler import assemble_base
from cineprompt.prompt.compiler import EMPTY_PROMPT_PLACEHOLDER, build_context, compile_prompt

__all__ = [
    "EMPTY_PROMPT_PLACEHOLDER",
    "assemble_base",
    "build_context",
    "compile_prompt",
]
