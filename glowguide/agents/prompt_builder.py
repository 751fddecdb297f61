"""Prompt templates for look recommendations and reference images."""

from ..models import LookRequest, MakeupLook


SYSTEM_PROMPT = "You are an expert makeup artist. Always respond with valid JSON only, no markdown or explanation."


LOOK_PROMPT_TEMPLATE = """Create a personalized makeup look recommendation.

User Profile:
- Skin Tone: {skin_tone}
- Face Shape: {face_shape}
- Style Preference: {style_preference}
- Occasion: {occasion}
- Mood: {mood}

Generate a complete makeup look that:
1. Complements the user's skin tone
2. Is appropriate for the occasion
3. Reflects the desired mood
4. Matches their style preference

Respond with ONLY a valid JSON object (no markdown, no explanation) in this exact format:
{{
    "lookName": "Creative name for this look",
    "vibe": "2-3 word vibe description",
    "colorPalette": {{
        "eyeshadow": {{"hexColor": "XXXXXX", "name": "Color Name", "detail": "finish/technique"}},
        "eyeliner": {{"hexColor": "XXXXXX", "name": "Color Name", "detail": "style"}},
        "lips": {{"hexColor": "XXXXXX", "name": "Color Name", "detail": "finish"}},
        "blush": {{"hexColor": "XXXXXX", "name": "Color Name", "detail": "placement"}},
        "brows": {{"hexColor": "XXXXXX", "name": "Color Name", "detail": "style"}}
    }},
    "steps": [
        {{"area": "Base", "instruction": "Detailed instruction", "tip": "Pro tip"}},
        {{"area": "Eyes", "instruction": "Detailed instruction", "tip": "Pro tip"}},
        {{"area": "Eyeliner", "instruction": "Detailed instruction", "tip": "Pro tip"}},
        {{"area": "Lips", "instruction": "Detailed instruction", "tip": "Pro tip"}},
        {{"area": "Blush", "instruction": "Detailed instruction", "tip": "Pro tip"}},
        {{"area": "Highlight", "instruction": "Detailed instruction", "tip": "Pro tip"}}
    ]
}}

Important:
- Use 6-character hex codes WITHOUT the # symbol
- Choose colors that complement {skin_tone} skin tones
- Make instructions specific and actionable
- Include 6 steps: Base, Eyes, Eyeliner, Lips, Blush, Highlight"""


class LookPromptBuilder:
    """Builds the natural-language prompts sent to text and image models."""
    
    system_prompt = SYSTEM_PROMPT
    
    def build_look_prompt(self, request: LookRequest) -> str:
        """Prompt asking a text model for one look as JSON."""
        return LOOK_PROMPT_TEMPLATE.format(
            skin_tone=request.skin_tone.value,
            face_shape=request.face_shape.value if request.face_shape else "not specified",
            style_preference=request.style_preference.value,
            occasion=request.occasion.value,
            mood=request.mood.value,
        )
    
    def build_dalle_prompt(self, look: MakeupLook) -> str:
        """Detailed editorial prompt for DALL-E."""
        palette = look.color_palette
        lips = " ".join(part for part in (palette.lips.name, palette.lips.detail) if part)
        return (
            f"Professional beauty photography portrait of a woman with {look.vibe.lower()} makeup look.\n"
            "\n"
            "Makeup details:\n"
            f"- Eyeshadow: {palette.eyeshadow.name} with {palette.eyeshadow.detail or 'soft'} finish\n"
            f"- Lips: {lips} lipstick\n"
            f"- Blush: {palette.blush.name} on cheeks\n"
            f"- Well-defined {palette.brows.detail or 'natural'} brows\n"
            "\n"
            "Style: High-end beauty editorial, soft studio lighting, clean background, focus on face and makeup.\n"
            f"The look is perfect for {look.occasion.value} occasion.\n"
            "Professional makeup application, photorealistic, 4K quality."
        )
    
    def build_gemini_image_prompt(self, look: MakeupLook) -> str:
        """Shorter prompt for Gemini image generation."""
        palette = look.color_palette
        return (
            f"Professional beauty photography portrait of a woman with {look.look_name} makeup look.\n"
            f"Style: {look.vibe}, perfect for {look.occasion.value}.\n"
            f"Makeup: {palette.eyeshadow.name} eyeshadow, {palette.lips.name} lips, {palette.blush.name} blush.\n"
            "High-end beauty editorial, studio lighting, clean background, photorealistic."
        )
