"""
Abstract base class for the AI gateway used by Ideator.
This provides a common interface for different generative backends.
"""

from abc import ABC, abstractmethod
from typing import Any

from ideator.models.pipeline import GenerationRequest

class AIService(ABC):
    """Abstract base class for AI services."""

    @abstractmethod
    async def generate(self, request: GenerationRequest) -> Any:
        """
        Issue a single generation call.

        Args:
            request: Descriptor of the call to make

        Returns:
            The provider response; exposes `text` for structured output and
            `candidates[0].content.parts` for inline image data

        Raises:
            GatewayFailure: If the provider rejects the call
        """
        pass
