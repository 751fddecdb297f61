"""Data models for the GlowGuide look service."""

from .enums import SkinTone, FaceShape, StylePreference, Occasion, Mood
from .look import ColorSpec, ColorPalette, MakeupStep, MakeupLook
from .profile import UserProfile, LookRequest
from .subscription import SubscriptionStatus, Product, DEFAULT_PRODUCTS

__all__ = [
    "SkinTone",
    "FaceShape",
    "StylePreference",
    "Occasion",
    "Mood",
    "ColorSpec",
    "ColorPalette",
    "MakeupStep",
    "MakeupLook",
    "UserProfile",
    "LookRequest",
    "SubscriptionStatus",
    "Product",
    "DEFAULT_PRODUCTS",
]
