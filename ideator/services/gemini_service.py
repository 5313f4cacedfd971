"""
Gemini service implementation for Ideator.
Issues generation calls against Google's Gemini models through the async client.
"""

from typing import Any
from google import genai
from google.genai import types

from ideator.errors import GatewayFailure
from ideator.models.pipeline import GenerationRequest
from ideator.services.ai_service import AIService
from ideator.utils.logger import logger

class GeminiService(AIService):
    """Gemini service implementation."""

    def __init__(self, api_key: str):
        """
        Initialize the Gemini service.

        Args:
            api_key: Gemini API key
        """
        self.gemini_client = genai.Client(api_key=api_key)

    def build_config(self, request: GenerationRequest) -> types.GenerateContentConfig:
        """Translate a request descriptor into a Gemini generation config."""
        image_config = None
        if request.aspect_ratio:
            image_config = types.ImageConfig(aspect_ratio=request.aspect_ratio)

        return types.GenerateContentConfig(
            system_instruction=request.system_instruction,
            response_mime_type=request.response_mime_type,
            response_schema=request.response_schema,
            image_config=image_config,
        )

    async def generate(self, request: GenerationRequest) -> Any:
        logger.info(f"Calling Gemini model: {request.model}")
        try:
            return await self.gemini_client.aio.models.generate_content(
                model=request.model,
                contents=request.contents,
                config=self.build_config(request),
            )
        except Exception as e:
            logger.error(f"Gemini call to {request.model} failed: {e}")
            raise GatewayFailure(str(e) or type(e).__name__) from e
