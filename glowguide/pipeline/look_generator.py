"""Look generation: remote model first, static looks as the safety net."""

import asyncio
import logging
from enum import Enum
from typing import Awaitable, Callable, Protocol

from pydantic import BaseModel

from ..config import GlowGuideConfig
from ..errors import GlowGuideError, MissingCredentialError
from ..models import LookRequest, MakeupLook
from ..services import GeminiClient, OpenAIClient
from .fallback_looks import fallback_look


logger = logging.getLogger(__name__)


class LookClient(Protocol):
    """What the generator needs from a remote provider."""
    
    async def generate_look_recommendation(self, request: LookRequest) -> MakeupLook: ...
    
    async def generate_look_image(self, look: MakeupLook) -> str: ...
    
    async def close(self) -> None: ...


class LookSource(str, Enum):
    REMOTE = "remote"
    FALLBACK = "fallback"


class GenerationOutcome(BaseModel):
    """Result of one generation, including why the fallback was used."""
    
    look: MakeupLook
    source: LookSource
    fallback_reason: str | None = None
    
    @property
    def is_fallback(self) -> bool:
        return self.source == LookSource.FALLBACK


AI_DISABLED = "ai_disabled"


class LookGenerator:
    """Produces a look for every request.
    
    Flow:
    1. AI enabled: ask the text provider, keep occasion/mood from the request
    2. Remote failure of any kind: log it and use the static table
    3. AI disabled: wait the fixed loading delay, then use the static table
    
    Image generation has no fallback and lets errors through.
    """
    
    def __init__(
        self,
        config: GlowGuideConfig,
        text_client: LookClient | None = None,
        image_client: LookClient | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.config = config
        self._sleep = sleep
        
        openai = OpenAIClient(config.openai_api_key, config.openai) if config.openai_api_key else None
        gemini = GeminiClient(config.gemini_api_key, config.gemini) if config.gemini_api_key else None
        
        providers = {"openai": openai, "gemini": gemini, "dalle": openai}
        self.text_client = text_client or providers.get(config.text_provider or "")
        self.image_client = image_client or providers.get(config.image_provider or "")
    
    @property
    def ai_enabled(self) -> bool:
        return self.text_client is not None
    
    async def generate(self, request: LookRequest) -> GenerationOutcome:
        """Generate a look and report where it came from. Never raises."""
        if not self.ai_enabled:
            logger.info("No text provider configured, using static looks")
            await self._sleep(self.config.fallback_delay_seconds)
            return self._fallback(request, AI_DISABLED)
        
        try:
            look = await self.text_client.generate_look_recommendation(request)
        except GlowGuideError as e:
            logger.warning("AI generation failed, falling back to static looks: %s", e)
            return self._fallback(request, str(e))
        except Exception as e:
            logger.exception("Unexpected error during AI generation")
            return self._fallback(request, f"{type(e).__name__}: {e}")
        
        if look.occasion != request.occasion or look.mood != request.mood:
            look = look.model_copy(update={"occasion": request.occasion, "mood": request.mood})
        return GenerationOutcome(look=look, source=LookSource.REMOTE)
    
    async def generate_look(self, request: LookRequest) -> MakeupLook:
        """Generate a look. Always returns one, remote or static."""
        outcome = await self.generate(request)
        return outcome.look
    
    async def generate_look_image(self, look: MakeupLook) -> str:
        """Generate a reference image for ``look``.
        
        Returns:
            A hosted URL or a ``data:`` URL, depending on the provider.
        
        Raises:
            MissingCredentialError: no image provider is configured
            GlowGuideError: any client failure, unchanged
        """
        if self.image_client is None:
            raise MissingCredentialError("image provider")
        return await self.image_client.generate_look_image(look)
    
    def _fallback(self, request: LookRequest, reason: str) -> GenerationOutcome:
        look = fallback_look(request)
        logger.info("Static look selected: %s (reason: %s)", look.look_name, reason)
        return GenerationOutcome(look=look, source=LookSource.FALLBACK, fallback_reason=reason)
    
    async def close(self):
        """Close any remote clients."""
        for client in {id(c): c for c in (self.text_client, self.image_client) if c is not None}.values():
            await client.close()
