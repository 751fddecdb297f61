# Test fixtures and configuration
import json

import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from glowguide.config import GlowGuideConfig
from glowguide.models import (
    ColorPalette,
    ColorSpec,
    LookRequest,
    MakeupLook,
    MakeupStep,
    Mood,
    Occasion,
    SkinTone,
    StylePreference,
)
from glowguide.services import EntitlementGate, InMemoryStore, LocalStore, StaticSubscriptionOracle


def make_config(**overrides) -> GlowGuideConfig:
    """Config isolated from the developer's environment and .env file."""
    values = {
        "openai_api_key": None,
        "gemini_api_key": None,
        "fallback_delay_seconds": 0.0,
        "_env_file": None,
    }
    values.update(overrides)
    return GlowGuideConfig(**values)


def make_look(name: str = "Test Look", **overrides) -> MakeupLook:
    color = ColorSpec(hex_color="AABBCC", name="Test", detail="matte")
    values = {
        "look_name": name,
        "vibe": "Calm & Clear",
        "occasion": Occasion.CASUAL,
        "mood": Mood.FRESH,
        "color_palette": ColorPalette(eyeshadow=color, eyeliner=color, lips=color, blush=color, brows=color),
        "steps": [MakeupStep(area="Base", instruction="Prep skin.", tip=None)],
    }
    values.update(overrides)
    return MakeupLook(**values)


@pytest.fixture
def config():
    return make_config()


@pytest.fixture
def look_request():
    return LookRequest(
        skin_tone=SkinTone.TAN,
        style_preference=StylePreference.NATURAL,
        occasion=Occasion.BUSINESS,
        mood=Mood.CONFIDENT,
    )


@pytest.fixture
def look_payload():
    """A complete look as a text model would return it."""
    color = lambda hex_color, name, detail: {"hexColor": hex_color, "name": name, "detail": detail}
    return {
        "lookName": "Velvet Boardroom",
        "vibe": "Sharp & Warm",
        "colorPalette": {
            "eyeshadow": color("A67B5B", "Cafe au Lait", "matte"),
            "eyeliner": color("3B2F2F", "Espresso", "tightlined"),
            "lips": color("9E4244", "Brick Rose", "satin"),
            "blush": color("D8957E", "Terracotta", "apples"),
            "brows": color("4B3621", "Cocoa", "brushed up"),
        },
        "steps": [
            {"area": "Base", "instruction": "Even out with a satin foundation.", "tip": "Thin layers"},
            {"area": "Eyes", "instruction": "Wash lid with cafe au lait.", "tip": "Blend the crease"},
            {"area": "Eyeliner", "instruction": "Tightline the upper waterline.", "tip": "Use a pencil"},
            {"area": "Lips", "instruction": "Press in brick rose.", "tip": "Blot once"},
            {"area": "Blush", "instruction": "Sweep terracotta on the apples.", "tip": "Go light"},
            {"area": "Highlight", "instruction": "Touch the cheekbones.", "tip": "Skip glitter"},
        ],
    }


@pytest.fixture
def chat_envelope(look_payload):
    """OpenAI chat envelope wrapping the payload in prose."""
    def build(content: str | None = None) -> dict:
        if content is None:
            content = "Here is your look:\n```json\n" + json.dumps(look_payload) + "\n```\nEnjoy!"
        return {
            "id": "chatcmpl-1",
            "choices": [{"message": {"role": "assistant", "content": content}, "finish_reason": "stop"}],
        }
    return build


@pytest.fixture
def kv():
    return InMemoryStore()


@pytest.fixture
def store(kv):
    return LocalStore(kv)


@pytest.fixture
def oracle():
    return StaticSubscriptionOracle()


@pytest.fixture
def gate(store, oracle):
    gate = EntitlementGate(store, oracle).open()
    yield gate
    gate.close()
