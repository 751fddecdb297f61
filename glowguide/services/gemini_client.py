"""Google Gemini client for look text and inline reference images."""

import logging
from typing import Any

import httpx

from ..agents import LookPromptBuilder
from ..config import GeminiConfig
from ..errors import MalformedResponseError, MissingCredentialError, NoResultProducedError
from ..models import LookRequest, MakeupLook
from .base_client import BaseAPIClient
from .look_schema import parse_look_response


logger = logging.getLogger(__name__)


class GeminiClient(BaseAPIClient):
    """Same contract as :class:`OpenAIClient`, Gemini wire format.
    
    Images come back inline, so ``generate_look_image`` returns a
    ``data:<mime>;base64,...`` URL rather than a hosted one.
    """
    
    provider = "Gemini"
    
    def __init__(
        self,
        api_key: str | None,
        config: GeminiConfig | None = None,
        prompt_builder: LookPromptBuilder | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(transport=transport)
        self.api_key = api_key
        self.config = config or GeminiConfig()
        self.prompts = prompt_builder or LookPromptBuilder()
    
    def _auth_headers(self) -> dict[str, str]:
        if not self.api_key:
            raise MissingCredentialError(self.provider)
        return {"x-goog-api-key": self.api_key}
    
    async def generate_look_recommendation(self, request: LookRequest) -> MakeupLook:
        headers = self._auth_headers()
        payload = {
            "systemInstruction": {"parts": [{"text": self.prompts.system_prompt}]},
            "contents": [{"parts": [{"text": self.prompts.build_look_prompt(request)}]}],
        }
        
        logger.info("Requesting look from %s (%s, %s)", self.config.text_model, request.occasion.value, request.mood.value)
        envelope = await self._post_json(
            self.config.generate_url(self.config.text_model),
            payload,
            headers,
            timeout=self.config.text_timeout,
        )
        
        text = "".join(
            part["text"] for part in self._parts(envelope)
            if isinstance(part.get("text"), str)
        )
        look = parse_look_response(text, request)
        logger.info("AI look generated: %s", look.look_name)
        return look
    
    async def generate_look_image(self, look: MakeupLook) -> str:
        headers = self._auth_headers()
        payload = {
            "contents": [
                {"parts": [{"text": f"Generate an image: {self.prompts.build_gemini_image_prompt(look)}"}]}
            ],
            "generationConfig": {"responseModalities": ["TEXT", "IMAGE"]},
        }
        
        logger.info("Requesting reference image from %s for %s", self.config.image_model, look.look_name)
        envelope = await self._post_json(
            self.config.generate_url(self.config.image_model),
            payload,
            headers,
            timeout=self.config.image_timeout,
        )
        
        try:
            parts = self._parts(envelope)
        except MalformedResponseError as e:
            raise NoResultProducedError(self.provider) from e
        
        for part in parts:
            inline = part.get("inlineData")
            if isinstance(inline, dict) and inline.get("data"):
                mime_type = inline.get("mimeType", "image/png")
                return f"data:{mime_type};base64,{inline['data']}"
        
        raise NoResultProducedError(self.provider)
    
    @staticmethod
    def _parts(envelope: dict[str, Any]) -> list[dict[str, Any]]:
        """``candidates[0].content.parts`` of a generateContent envelope."""
        try:
            parts = envelope["candidates"][0]["content"]["parts"]
        except (KeyError, IndexError, TypeError) as e:
            raise MalformedResponseError("response has no candidates[0].content.parts") from e
        if not isinstance(parts, list):
            raise MalformedResponseError("content parts is not a list")
        return [part for part in parts if isinstance(part, dict)]
