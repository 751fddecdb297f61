"""Look generation pipeline."""

from .look_generator import GenerationOutcome, LookGenerator, LookSource
from .fallback_looks import SAMPLE_LOOK, fallback_look, find_template

__all__ = [
    "GenerationOutcome",
    "LookGenerator",
    "LookSource",
    "SAMPLE_LOOK",
    "fallback_look",
    "find_template",
]
