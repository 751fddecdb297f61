"""Unit tests for LookPromptBuilder - prompt generation."""

import pytest

from glowguide.agents import LookPromptBuilder
from glowguide.models import ColorPalette, ColorSpec, FaceShape
from conftest import make_look


@pytest.fixture
def builder():
    return LookPromptBuilder()


class TestLookPrompt:
    
    def test_includes_profile(self, builder, look_request):
        prompt = builder.build_look_prompt(look_request)
        
        assert "Skin Tone: tan" in prompt
        assert "Occasion: Business Meeting" in prompt
        assert "Mood: Confident" in prompt
        assert "complement tan skin tones" in prompt
    
    def test_face_shape(self, builder, look_request):
        assert "Face Shape: not specified" in builder.build_look_prompt(look_request)
        
        shaped = look_request.model_copy(update={"face_shape": FaceShape.OVAL})
        assert f"Face Shape: {FaceShape.OVAL.value}" in builder.build_look_prompt(shaped)
    
    def test_asks_for_json_schema(self, builder, look_request):
        prompt = builder.build_look_prompt(look_request)
        
        assert '"lookName"' in prompt
        assert '"hexColor": "XXXXXX"' in prompt
        assert "WITHOUT the # symbol" in prompt


class TestImagePrompts:
    
    def test_dalle_prompt(self, builder):
        prompt = builder.build_dalle_prompt(make_look())
        
        assert "calm & clear makeup look" in prompt
        assert "- Lips: Test matte lipstick" in prompt
        assert "Everyday Casual occasion" in prompt
    
    def test_dalle_prompt_without_details(self, builder):
        plain = ColorSpec(hex_color="112233", name="Plain")
        look = make_look(color_palette=ColorPalette(
            eyeshadow=plain, eyeliner=plain, lips=plain, blush=plain, brows=plain,
        ))
        
        prompt = builder.build_dalle_prompt(look)
        
        assert "- Lips: Plain lipstick" in prompt
        assert "Plain with soft finish" in prompt
        assert "natural brows" in prompt
    
    def test_gemini_prompt(self, builder):
        prompt = builder.build_gemini_image_prompt(make_look("Dewy Dawn"))
        
        assert "Dewy Dawn makeup look" in prompt
        assert "Test eyeshadow, Test lips, Test blush" in prompt
