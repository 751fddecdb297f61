"""GlowGuide: occasion and mood based makeup look recommendations."""

from .app_state import AppState, PaywallTrigger
from .config import GlowGuideConfig, load_config
from .pipeline import LookGenerator

__version__ = "1.0.0"

__all__ = [
    "AppState",
    "PaywallTrigger",
    "GlowGuideConfig",
    "load_config",
    "LookGenerator",
]
