"""Hand-authored looks used when remote generation is off or fails.

Rules are checked in order and the first match wins; the last rule matches
everything.
"""

from dataclasses import dataclass
from typing import Callable

from ..models import ColorPalette, ColorSpec, LookRequest, MakeupLook, MakeupStep, Mood, Occasion


@dataclass(frozen=True)
class LookTemplate:
    """Static look content without identity, occasion or mood."""
    name: str
    vibe: str
    palette: ColorPalette
    steps: tuple[MakeupStep, ...]
    
    def to_look(self, occasion: Occasion, mood: Mood) -> MakeupLook:
        return MakeupLook(
            look_name=self.name,
            vibe=self.vibe,
            occasion=occasion,
            mood=mood,
            color_palette=self.palette,
            steps=self.steps,
        )


@dataclass(frozen=True)
class FallbackRule:
    matches: Callable[[Occasion, Mood], bool]
    template: LookTemplate


def _palette(eyeshadow, eyeliner, lips, blush, brows) -> ColorPalette:
    return ColorPalette(
        eyeshadow=ColorSpec(hex_color=eyeshadow[0], name=eyeshadow[1], detail=eyeshadow[2]),
        eyeliner=ColorSpec(hex_color=eyeliner[0], name=eyeliner[1], detail=eyeliner[2]),
        lips=ColorSpec(hex_color=lips[0], name=lips[1], detail=lips[2]),
        blush=ColorSpec(hex_color=blush[0], name=blush[1], detail=blush[2]),
        brows=ColorSpec(hex_color=brows[0], name=brows[1], detail=brows[2]),
    )


def _steps(*rows: tuple[str, str, str]) -> tuple[MakeupStep, ...]:
    return tuple(MakeupStep(area=area, instruction=instruction, tip=tip) for area, instruction, tip in rows)


SULTRY_SIREN = LookTemplate(
    name="Sultry Siren",
    vibe="Bold & Seductive",
    palette=_palette(
        ("8B4513", "Smoky Bronze", "shimmer"),
        ("000000", "Jet Black", "dramatic wing"),
        ("8B0000", "Deep Red", "matte"),
        ("DC143C", "Berry Flush", "contour"),
        ("3D2B1F", "Dark Brown", "defined"),
    ),
    steps=_steps(
        ("Base", "Apply medium-coverage foundation for a flawless canvas. Contour cheekbones and jawline.", "Set with powder to ensure longevity"),
        ("Eyes", "Apply bronze shimmer on lid, blend dark brown into crease. Build smoky effect at outer corner.", "Use tape for sharp outer edge"),
        ("Eyeliner", "Create a dramatic winged liner, extending past outer corner.", "Draw wing first, then fill in"),
        ("Lips", "Line lips with deep red liner, fill with matte lipstick. Blot and reapply.", "Use concealer around lips for crisp edges"),
        ("Blush", "Apply berry blush below cheekbones in a draping technique.", "Blend upward toward temples"),
        ("Highlight", "Apply highlight to high points: cheekbones, nose tip, cupid's bow.", "Use sparingly for sophistication"),
    ),
)

POLISHED_PROFESSIONAL = LookTemplate(
    name="Polished Professional",
    vibe="Clean & Confident",
    palette=_palette(
        ("D2B48C", "Soft Taupe", "matte"),
        ("4A3728", "Espresso", "subtle"),
        ("BC8F8F", "Rosy Mauve", "satin"),
        ("FFB6C1", "Soft Pink", "apples"),
        ("5D4E37", "Taupe Brown", "natural"),
    ),
    steps=_steps(
        ("Base", "Apply light foundation or tinted moisturizer. Conceal under eyes and any blemishes.", "Keep it natural-looking"),
        ("Eyes", "Apply soft taupe across lid, slightly darker shade in crease for definition.", "Blend well for seamless transition"),
        ("Eyeliner", "Tightline upper waterline with espresso pencil. Optional: thin line on upper lid.", "Keep it subtle and professional"),
        ("Lips", "Apply rosy mauve lipstick for a polished, put-together look.", "Blot for natural finish"),
        ("Blush", "Apply soft pink blush to apples of cheeks.", "Smile and apply to the roundest part"),
        ("Brows", "Fill in sparse areas with light strokes. Set with clear gel.", "Follow natural brow shape"),
    ),
)

GLAMOUR_NIGHT = LookTemplate(
    name="Glamour Night",
    vibe="Sparkling & Festive",
    palette=_palette(
        ("FFD700", "Gold Glitter", "shimmer"),
        ("000000", "Black", "winged"),
        ("FF69B4", "Hot Pink", "gloss"),
        ("FF6B6B", "Coral Pop", "apples"),
        ("3D2B1F", "Dark Brown", "defined"),
    ),
    steps=_steps(
        ("Base", "Apply illuminating primer, then full-coverage foundation. Set with setting spray.", "Mix in liquid highlighter for all-over glow"),
        ("Eyes", "Pack gold glitter onto center of lid. Blend darker shade into crease and outer corner.", "Use glitter glue for maximum payoff"),
        ("Eyeliner", "Create bold winged liner. Add rhinestones at outer corner for extra glam.", "Waterproof formula is key for lasting wear"),
        ("Lips", "Apply hot pink lip color topped with clear gloss for dimension.", "Apply lip plumper first for fuller look"),
        ("Blush", "Apply coral blush to apples and blend up to temples.", "Layer for buildable color"),
        ("Highlight", "Apply intense highlight to all high points. Add body shimmer to shoulders.", "Go bold - it's a party!"),
    ),
)

EFFORTLESS_GLOW = LookTemplate(
    name="Effortless Glow",
    vibe="Fresh & Dewy",
    palette=_palette(
        ("F5DEB3", "Champagne", "shimmer"),
        ("6B4423", "Brown", "smudged"),
        ("E8B4B8", "Nude Pink", "balm"),
        ("FFDAB9", "Peachy Nude", "cream"),
        ("8B7355", "Soft Brown", "feathered"),
    ),
    steps=_steps(
        ("Base", "Apply tinted moisturizer or skin tint. Spot conceal only where needed.", "Less is more for everyday freshness"),
        ("Eyes", "Sweep champagne shimmer across lid. Add touch of brown to outer corner.", "Use fingers for quick application"),
        ("Eyeliner", "Smudge brown pencil along upper lash line. Skip if you prefer minimal.", "Blend with finger for soft effect"),
        ("Lips", "Apply tinted lip balm in nude pink for healthy, hydrated lips.", "Reapply throughout the day"),
        ("Blush", "Dab cream blush on cheeks and blend with fingers.", "Tap onto apples for natural flush"),
        ("Brows", "Brush brows up with clear gel. Fill lightly if needed.", "Keep brows fluffy and natural"),
    ),
)

ROMANTIC_ELEGANCE = LookTemplate(
    name="Romantic Elegance",
    vibe="Soft & Timeless",
    palette=_palette(
        ("DEB887", "Rose Gold", "shimmer"),
        ("4A3728", "Soft Brown", "subtle wing"),
        ("CD5C5C", "Dusty Rose", "satin"),
        ("FFB6C1", "Soft Rose", "draping"),
        ("6B4423", "Warm Brown", "defined"),
    ),
    steps=_steps(
        ("Base", "Apply long-wear foundation for all-day coverage. Set with fine setting powder.", "Use waterproof formulas for emotional moments"),
        ("Eyes", "Apply rose gold shimmer on lid, soft brown in crease. Highlight inner corner and brow bone.", "Blend for soft, romantic effect"),
        ("Eyeliner", "Create subtle wing with brown liner. Add individual false lashes for photos.", "Individual lashes look more natural"),
        ("Lips", "Apply dusty rose lipstick. Blot and layer for lasting color.", "Bring lipstick for touch-ups"),
        ("Blush", "Apply soft rose blush in draping technique for lifted look.", "Build gradually for photography"),
        ("Highlight", "Apply subtle highlight to cheekbones and cupid's bow.", "Avoid glitter - opt for satin finish"),
    ),
)

GOLDEN_HOUR_GLOW = LookTemplate(
    name="Golden Hour Glow",
    vibe="Warm & Radiant",
    palette=_palette(
        ("C4956A", "Warm Bronze", "shimmer"),
        ("4A3728", "Deep Brown", "subtle wing"),
        ("B85C5C", "Dusty Rose", "satin"),
        ("E8A090", "Peach Glow", "apples"),
        ("5D4037", "Soft Brown", "feathered"),
    ),
    steps=_steps(
        ("Base", "Apply light-coverage foundation, focusing on evening out skin tone.", "Use a damp beauty sponge"),
        ("Eyes", "Apply warm bronze on lid, blend darker shade into crease.", "Build color gradually"),
        ("Eyeliner", "Line upper lash line with brown liner, subtle wing.", "Keep wing short and angled up"),
        ("Lips", "Apply dusty rose lipstick, blot and reapply.", "Use lip liner to prevent bleeding"),
        ("Blush", "Apply peach blush to apples of cheeks.", "Start light, build up"),
        ("Highlight", "Dab highlighter on cheekbones, brow bone, cupid's bow.", "Use fingers for natural placement"),
    ),
)


FALLBACK_RULES: tuple[FallbackRule, ...] = (
    FallbackRule(
        lambda occasion, mood: occasion == Occasion.DATE_NIGHT and mood in (Mood.CONFIDENT, Mood.BOLD),
        SULTRY_SIREN,
    ),
    FallbackRule(lambda occasion, mood: occasion == Occasion.BUSINESS, POLISHED_PROFESSIONAL),
    FallbackRule(
        lambda occasion, mood: occasion == Occasion.PARTY or (occasion == Occasion.EVENT and mood == Mood.BOLD),
        GLAMOUR_NIGHT,
    ),
    FallbackRule(
        lambda occasion, mood: occasion == Occasion.CASUAL and mood in (Mood.FRESH, Mood.PLAYFUL),
        EFFORTLESS_GLOW,
    ),
    FallbackRule(lambda occasion, mood: occasion == Occasion.WEDDING, ROMANTIC_ELEGANCE),
    FallbackRule(lambda occasion, mood: True, GOLDEN_HOUR_GLOW),
)


def find_template(occasion: Occasion, mood: Mood) -> LookTemplate:
    """Return the first template whose rule matches."""
    for rule in FALLBACK_RULES:
        if rule.matches(occasion, mood):
            return rule.template
    return GOLDEN_HOUR_GLOW


def fallback_look(request: LookRequest) -> MakeupLook:
    """Build a fresh static look for ``request``.
    
    Skin tone, face shape and style do not change the static content.
    """
    return find_template(request.occasion, request.mood).to_look(request.occasion, request.mood)


SAMPLE_LOOK = GOLDEN_HOUR_GLOW.to_look(Occasion.DATE_NIGHT, Mood.CONFIDENT)
