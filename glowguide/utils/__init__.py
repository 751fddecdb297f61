"""Shared helpers."""

from .json_extractor import extract_json_span, parse_embedded_json
from .logger import setup_logger

__all__ = [
    "extract_json_span",
    "parse_embedded_json",
    "setup_logger",
]
