# infohub/infrastructure/gemini_client/client.py

"""
Gemini Client Implementation

This module provides the concrete implementation of IContentGenerator on top
of the Gemini ``generateContent`` REST endpoint. It handles authentication,
request serialization, error responses and extraction of the reply text.
"""

import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from infohub.exceptions import ConfigurationError, ContentGenerationError

from .interfaces import IContentGenerator
from .models import GenerateContentRequest, GenerateContentResponse

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


class GeminiClient(IContentGenerator):
    """Concrete implementation of the generative-content client.

    Attributes:
        base_url (str): Base URL of the Gemini API.
        api_key (str): Credential sent as ``x-goog-api-key``.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the client.

        Args:
            api_key (str): The API key. Required.
            base_url (str): The base URL of the API.
            http_client (Optional[httpx.AsyncClient]): Shared HTTP client; one
                without a timeout is created when omitted.

        Raises:
            ConfigurationError: If the API key is empty.
        """
        if not api_key:
            raise ConfigurationError("API_KEY environment variable is not set.")
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self._owns_http_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(timeout=None)

    async def generate_content(self, model: str, prompt: str, schema: Dict[str, Any]) -> str:
        url = f"{self.base_url}/models/{model}:generateContent"
        payload = GenerateContentRequest.for_prompt(prompt, schema).to_payload()
        headers = {
            "x-goog-api-key": self.api_key,
            "Content-Type": "application/json",
        }

        try:
            response = await self.http_client.post(url, headers=headers, json=payload)
        except httpx.HTTPError as e:
            raise ContentGenerationError(f"Request to {model} failed: {type(e).__name__}: {e}") from e

        if response.status_code != 200:
            raise ContentGenerationError(
                f"{model} returned HTTP {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )

        try:
            envelope = GenerateContentResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise ContentGenerationError(f"Invalid response envelope from {model}: {e}") from e

        text = envelope.text
        if text is None:
            finish = envelope.candidates[0].finish_reason if envelope.candidates else None
            raise ContentGenerationError(f"{model} returned no text (finishReason={finish})")

        logger.debug(f"{model} replied with {len(text)} characters")
        return text

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client:
            await self.http_client.aclose()
