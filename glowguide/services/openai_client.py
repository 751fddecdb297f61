"""OpenAI client: GPT chat completions for looks, DALL-E for images."""

import logging
from typing import Any

import httpx

from ..agents import LookPromptBuilder
from ..config import OpenAIConfig
from ..errors import MalformedResponseError, MissingCredentialError, NoResultProducedError
from ..models import LookRequest, MakeupLook
from .base_client import BaseAPIClient
from .look_schema import parse_look_response


logger = logging.getLogger(__name__)


class OpenAIClient(BaseAPIClient):
    """Generates look recommendations and reference images with OpenAI."""
    
    provider = "OpenAI"
    
    def __init__(
        self,
        api_key: str | None,
        config: OpenAIConfig | None = None,
        prompt_builder: LookPromptBuilder | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(transport=transport)
        self.api_key = api_key
        self.config = config or OpenAIConfig()
        self.prompts = prompt_builder or LookPromptBuilder()
    
    def _auth_headers(self) -> dict[str, str]:
        if not self.api_key:
            raise MissingCredentialError(self.provider)
        return {"Authorization": f"Bearer {self.api_key}"}
    
    async def generate_look_recommendation(self, request: LookRequest) -> MakeupLook:
        """Ask the chat model for a look and parse the JSON it returns."""
        headers = self._auth_headers()
        payload = {
            "model": self.config.model,
            "messages": [
                {"role": "system", "content": self.prompts.system_prompt},
                {"role": "user", "content": self.prompts.build_look_prompt(request)},
            ],
            "max_tokens": self.config.max_tokens,
            "temperature": self.config.temperature,
        }
        
        logger.info("Requesting look from %s (%s, %s)", self.config.model, request.occasion.value, request.mood.value)
        envelope = await self._post_json(
            self.config.chat_url, payload, headers, timeout=self.config.text_timeout,
        )
        
        content = self._message_content(envelope)
        look = parse_look_response(content, request)
        logger.info("AI look generated: %s", look.look_name)
        return look
    
    async def generate_look_image(self, look: MakeupLook) -> str:
        """Generate a reference photo with DALL-E.
        
        Returns:
            The hosted image URL, or a ``data:`` URL when the API answers
            with inline base64 instead.
        """
        headers = self._auth_headers()
        payload = {
            "model": self.config.image_model,
            "prompt": self.prompts.build_dalle_prompt(look),
            "n": 1,
            "size": self.config.image_size,
            "quality": self.config.image_quality,
        }
        
        logger.info("Requesting reference image from %s for %s", self.config.image_model, look.look_name)
        envelope = await self._post_json(
            self.config.images_url, payload, headers, timeout=self.config.image_timeout,
        )
        
        items = envelope.get("data")
        if not isinstance(items, list):
            raise MalformedResponseError("images response has no 'data' list")
        if not items or not isinstance(items[0], dict):
            raise NoResultProducedError(self.provider)
        
        first = items[0]
        if first.get("url"):
            return first["url"]
        if first.get("b64_json"):
            return f"data:image/png;base64,{first['b64_json']}"
        raise NoResultProducedError(self.provider)
    
    @staticmethod
    def _message_content(envelope: dict[str, Any]) -> str:
        """Pull ``choices[0].message.content`` out of a chat envelope."""
        try:
            content = envelope["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise MalformedResponseError("chat response has no choices[0].message.content") from e
        if not isinstance(content, str):
            raise MalformedResponseError("chat message content is not text")
        return content
