"""Prompt construction for the remote models."""

from .prompt_builder import LookPromptBuilder, SYSTEM_PROMPT

__all__ = [
    "LookPromptBuilder",
    "SYSTEM_PROMPT",
]
