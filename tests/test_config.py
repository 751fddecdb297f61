"""Tests for configuration and API key resolution."""

from glowguide.config import GlowGuideConfig, load_config


def write_env(tmp_path, **values):
    path = tmp_path / ".env"
    path.write_text("".join(f"{key}={value}\n" for key, value in values.items()))
    return path


class TestKeyResolution:
    """Explicit value, then environment, then .env file; blanks are absent."""
    
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        
        config = GlowGuideConfig(_env_file=None)
        
        assert config.openai_api_key is None
        assert not config.use_ai_generation
        assert config.image_provider is None
        assert config.limits.free_look_limit == 3
        assert config.fallback_delay_seconds == 1.5
        assert config.openai.text_timeout == 30
        assert config.gemini.image_timeout == 90
    
    def test_env_file_used_last(self, monkeypatch, tmp_path):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        env_file = write_env(tmp_path, OPENAI_API_KEY="from-file")
        
        assert GlowGuideConfig(_env_file=env_file).openai_api_key == "from-file"
    
    def test_environment_beats_env_file(self, monkeypatch, tmp_path):
        monkeypatch.setenv("OPENAI_API_KEY", "from-env")
        env_file = write_env(tmp_path, OPENAI_API_KEY="from-file")
        
        assert GlowGuideConfig(_env_file=env_file).openai_api_key == "from-env"
    
    def test_blank_environment_falls_through(self, monkeypatch, tmp_path):
        monkeypatch.setenv("OPENAI_API_KEY", "")
        env_file = write_env(tmp_path, OPENAI_API_KEY="from-file")
        
        assert GlowGuideConfig(_env_file=env_file).openai_api_key == "from-file"
    
    def test_explicit_value_wins(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "from-env")
        
        assert load_config(openai_api_key="embedded", _env_file=None).openai_api_key == "embedded"
    
    def test_blank_explicit_value_ignored(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "from-env")
        
        assert load_config(openai_api_key="  ", _env_file=None).openai_api_key == "from-env"


class TestProviders:
    
    def test_openai_only(self):
        config = GlowGuideConfig(openai_api_key="sk", gemini_api_key=None, _env_file=None)
        
        assert config.text_provider == "openai"
        assert config.image_provider == "dalle"
        assert config.use_image_generation
    
    def test_gemini_preferred_for_images(self):
        config = GlowGuideConfig(openai_api_key="sk", gemini_api_key="g", _env_file=None)
        
        assert config.text_provider == "openai"
        assert config.image_provider == "gemini"
    
    def test_nested_override_from_env(self, monkeypatch):
        monkeypatch.setenv("LIMITS__FREE_LOOK_LIMIT", "5")
        
        assert GlowGuideConfig(_env_file=None).limits.free_look_limit == 5
