"""Makeup look models."""

import re
import uuid
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import Mood, Occasion


HEX_COLOR = re.compile(r"^[0-9A-Fa-f]{6}$")


class ColorSpec(BaseModel):
    """A single product color in a palette."""
    
    model_config = ConfigDict(frozen=True)
    
    hex_color: str = Field(description="6 hex digits without a leading '#'")
    name: str
    detail: str | None = Field(default=None, description="e.g. 'winged', 'matte', 'natural'")
    
    @field_validator("hex_color")
    @classmethod
    def _check_hex(cls, value: str) -> str:
        if not HEX_COLOR.match(value):
            raise ValueError(f"hex_color must be 6 hex digits, got {value!r}")
        return value.upper()
    
    @property
    def rgb(self) -> tuple[int, int, int]:
        r, g, b = (int(self.hex_color[i:i + 2], 16) for i in (0, 2, 4))
        return r, g, b


class ColorPalette(BaseModel):
    """The five fixed palette slots. All are required."""
    
    model_config = ConfigDict(frozen=True)
    
    eyeshadow: ColorSpec
    eyeliner: ColorSpec
    lips: ColorSpec
    blush: ColorSpec
    brows: ColorSpec


_STEP_ICONS = {
    "base": "drop.fill",
    "foundation": "drop.fill",
    "eyes": "eye.fill",
    "eyeshadow": "eye.fill",
    "eyeliner": "pencil.tip",
    "lips": "mouth.fill",
    "blush": "heart.fill",
    "cheeks": "heart.fill",
    "brows": "eyebrow",
    "eyebrows": "eyebrow",
    "highlight": "sparkles",
    "contour": "triangle.fill",
}


class MakeupStep(BaseModel):
    """One application step. The area doubles as the step identifier."""
    
    model_config = ConfigDict(frozen=True)
    
    area: str
    instruction: str
    tip: str | None = None
    
    @property
    def id(self) -> str:
        return self.area
    
    @property
    def icon(self) -> str:
        return _STEP_ICONS.get(self.area.lower(), "paintbrush.fill")


class MakeupLook(BaseModel):
    """A complete recommendation: name, vibe, palette and ordered steps.
    
    Looks are immutable and compare equal when their ids match.
    """
    
    model_config = ConfigDict(frozen=True)
    
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    look_name: str
    vibe: str
    occasion: Occasion
    mood: Mood
    color_palette: ColorPalette
    steps: tuple[MakeupStep, ...]
    image_url: str | None = None
    created_at: datetime = Field(default_factory=datetime.now)
    
    @field_validator("steps")
    @classmethod
    def _check_steps(cls, steps: tuple[MakeupStep, ...]) -> tuple[MakeupStep, ...]:
        if not steps:
            raise ValueError("a look needs at least one step")
        areas = [step.area for step in steps]
        if len(set(areas)) != len(areas):
            raise ValueError(f"step areas must be unique, got {areas}")
        return steps
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MakeupLook):
            return NotImplemented
        return self.id == other.id
    
    def __hash__(self) -> int:
        return hash(self.id)
    
    def with_image(self, image_url: str) -> "MakeupLook":
        """Return a copy of this look carrying a reference image."""
        return self.model_copy(update={"image_url": image_url})
