"""Enumerations describing the user and the look they ask for."""

from enum import Enum


class SkinTone(str, Enum):
    FAIR = "fair"
    LIGHT = "light"
    MEDIUM = "medium"
    TAN = "tan"
    DEEP = "deep"
    RICH = "rich"
    
    @property
    def display_name(self) -> str:
        return self.value.capitalize()
    
    @property
    def swatch_hex(self) -> str:
        return _SKIN_TONE_SWATCHES[self]


_SKIN_TONE_SWATCHES = {
    SkinTone.FAIR: "FFE4C4",
    SkinTone.LIGHT: "DEB887",
    SkinTone.MEDIUM: "C19A6B",
    SkinTone.TAN: "A0785A",
    SkinTone.DEEP: "8B5A2B",
    SkinTone.RICH: "5D4037",
}


class FaceShape(str, Enum):
    OVAL = "oval"
    ROUND = "round"
    SQUARE = "square"
    HEART = "heart"
    OBLONG = "oblong"
    
    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class StylePreference(str, Enum):
    NATURAL = "Natural"
    BOLD = "Bold"
    GLAMOROUS = "Glamorous"
    MINIMAL = "Minimal"
    
    @property
    def display_name(self) -> str:
        return self.value


class Occasion(str, Enum):
    """Where the look will be worn. Values are the display names."""
    BUSINESS = "Business Meeting"
    DATE_NIGHT = "Date Night"
    EVENT = "Special Event"
    CASUAL = "Everyday Casual"
    WEDDING = "Wedding Guest"
    PARTY = "Night Out"
    
    @property
    def display_name(self) -> str:
        return self.value
    
    @property
    def icon(self) -> str:
        return _OCCASION_ICONS[self]


_OCCASION_ICONS = {
    Occasion.BUSINESS: "briefcase.fill",
    Occasion.DATE_NIGHT: "heart.fill",
    Occasion.EVENT: "star.fill",
    Occasion.CASUAL: "sun.max.fill",
    Occasion.WEDDING: "gift.fill",
    Occasion.PARTY: "moon.stars.fill",
}


class Mood(str, Enum):
    """The emotional tone the user wants the look to carry."""
    CONFIDENT = "Confident"
    FRESH = "Fresh & Natural"
    MYSTERIOUS = "Mysterious"
    PLAYFUL = "Playful"
    ELEGANT = "Elegant"
    BOLD = "Bold"
    
    @property
    def display_name(self) -> str:
        return self.value
    
    @property
    def icon(self) -> str:
        return _MOOD_ICONS[self]


_MOOD_ICONS = {
    Mood.CONFIDENT: "bolt.fill",
    Mood.FRESH: "leaf.fill",
    Mood.MYSTERIOUS: "moon.fill",
    Mood.PLAYFUL: "face.smiling.fill",
    Mood.ELEGANT: "crown.fill",
    Mood.BOLD: "flame.fill",
}
