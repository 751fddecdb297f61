"""User profile and look request models."""

import uuid
from pydantic import BaseModel, Field

from .enums import FaceShape, Mood, Occasion, SkinTone, StylePreference


class UserProfile(BaseModel):
    """Stored user preferences. Persisted whole on every change."""
    
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    skin_tone: SkinTone = SkinTone.MEDIUM
    face_shape: FaceShape | None = None
    style_preference: StylePreference = StylePreference.NATURAL
    saved_look_ids: list[str] = Field(default_factory=list)
    has_completed_onboarding: bool = False


class LookRequest(BaseModel):
    """Everything a generator needs for one look. Never persisted."""
    
    skin_tone: SkinTone
    face_shape: FaceShape | None = None
    style_preference: StylePreference
    occasion: Occasion
    mood: Mood
    
    @classmethod
    def from_profile(cls, profile: UserProfile, occasion: Occasion, mood: Mood) -> "LookRequest":
        """Combine stored preferences with the occasion and mood picked now."""
        return cls(
            skin_tone=profile.skin_tone,
            face_shape=profile.face_shape,
            style_preference=profile.style_preference,
            occasion=occasion,
            mood=mood,
        )
