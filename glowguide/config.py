"""Configuration management for the GlowGuide look service."""

from pathlib import Path
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings


class OpenAIConfig(BaseModel):
    """OpenAI chat completion and DALL-E settings."""
    chat_url: str = "https://api.openai.com/v1/chat/completions"
    images_url: str = "https://api.openai.com/v1/images/generations"
    model: str = "gpt-4o"
    image_model: str = "dall-e-3"
    image_size: str = "1024x1024"
    image_quality: str = "standard"
    max_tokens: int = 2048
    temperature: float = 0.7
    text_timeout: float = 30.0
    image_timeout: float = 60.0  # DALL-E is slower than chat


class GeminiConfig(BaseModel):
    """Google Gemini generateContent settings."""
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    text_model: str = "gemini-2.0-flash"
    image_model: str = "gemini-2.0-flash-exp-image-generation"
    text_timeout: float = 30.0
    image_timeout: float = 90.0
    
    def generate_url(self, model: str) -> str:
        return f"{self.base_url}/models/{model}:generateContent"


class UsageLimits(BaseModel):
    """Free tier limits (lifetime totals, not daily)."""
    free_look_limit: int = 3
    free_saved_look_limit: int = 3


class GlowGuideConfig(BaseSettings):
    """Main service configuration.
    
    API keys are resolved in order: values passed explicitly (embedded
    secrets), then process environment, then the bundled ``.env`` file.
    Empty values count as absent.
    """
    
    # Credentials
    openai_api_key: str | None = None
    gemini_api_key: str | None = None
    
    # Sub-configs
    openai: OpenAIConfig = Field(default_factory=OpenAIConfig)
    gemini: GeminiConfig = Field(default_factory=GeminiConfig)
    limits: UsageLimits = Field(default_factory=UsageLimits)
    
    # Behaviour
    fallback_delay_seconds: float = 1.5  # keeps the loading screen consistent
    history_limit: int = 20
    
    # Paths
    storage_dir: Path = Path(".glowguide")
    
    # Logging
    log_level: str = "INFO"
    
    class Config:
        env_file = ".env"
        env_prefix = ""
        env_nested_delimiter = "__"
        env_ignore_empty = True
        extra = "ignore"
    
    @field_validator("openai_api_key", "gemini_api_key", mode="before")
    @classmethod
    def _blank_key_is_absent(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value
    
    @property
    def use_ai_generation(self) -> bool:
        """Whether looks are generated remotely (needs a text provider key)."""
        return self.text_provider is not None
    
    @property
    def use_image_generation(self) -> bool:
        return self.image_provider is not None
    
    @property
    def text_provider(self) -> str | None:
        """Text provider name: "openai" preferred, then "gemini"."""
        if self.openai_api_key:
            return "openai"
        if self.gemini_api_key:
            return "gemini"
        return None
    
    @property
    def image_provider(self) -> str | None:
        """Image provider name: "gemini" preferred, then "dalle"."""
        if self.gemini_api_key:
            return "gemini"
        if self.openai_api_key:
            return "dalle"
        return None


def load_config(**overrides) -> GlowGuideConfig:
    """Load configuration from explicit values, environment and defaults.
    
    Blank API keys are dropped so that they do not shadow a key found in
    the environment or the ``.env`` file.
    """
    for key in ("openai_api_key", "gemini_api_key"):
        value = overrides.get(key)
        if value is None or (isinstance(value, str) and not value.strip()):
            overrides.pop(key, None)
    return GlowGuideConfig(**overrides)
