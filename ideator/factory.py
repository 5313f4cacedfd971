"""
Factory for creating service instances and the orchestrator.
"""

from ideator.orchestrator import EvaluationOrchestrator
from ideator.services.gemini_service import GeminiService
from ideator.utils.config import config

def create_orchestrator(cfg=config) -> EvaluationOrchestrator:
    """
    Wire the Gemini service and the orchestrator from configuration.

    Args:
        cfg: Configuration to read settings from

    Returns:
        EvaluationOrchestrator instance in the IDLE state
    """
    ai_service = GeminiService(cfg.gemini_api_key)

    return EvaluationOrchestrator(
        ai_service=ai_service,
        evaluation_model=cfg.evaluation_model,
        image_model=cfg.image_model,
        aspect_ratio=cfg.image_aspect_ratio,
        request_timeout=cfg.request_timeout,
    )
