"""
Decodes gateway responses into evaluation results and prototype images.
"""

import json
from typing import Any, Optional
from pydantic import ValidationError

from ideator.constants import (
    DEFAULT_IMAGE_MIME_TYPE,
    RISK_CATEGORIES,
    RISK_SCORE_MAX,
    RISK_SCORE_MIN,
    SUCCESS_RATE_MAX,
    SUCCESS_RATE_MIN,
)
from ideator.errors import MalformedResponse, SchemaViolation
from ideator.models.evaluation import EvaluationResult, PrototypeImage
from ideator.schema import EVALUATION_CONTRACT, describe_violations
from ideator.utils.logger import logger


def parse_evaluation(text: Optional[str]) -> EvaluationResult:
    """
    Parse the stage-one payload into an EvaluationResult.

    Validation is strict: every required field must be present with the right
    primitive kind, and nothing is coerced or filled with defaults.

    Args:
        text: Serialized JSON returned by the gateway

    Returns:
        The populated evaluation

    Raises:
        MalformedResponse: If the text is empty or not valid JSON
        SchemaViolation: If the JSON does not match the evaluation contract
    """
    if not text or not text.strip():
        raise MalformedResponse("empty response")

    try:
        decoded = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedResponse(str(e)) from e

    if not isinstance(decoded, dict):
        raise SchemaViolation([f"<root>: expected a JSON object, got {type(decoded).__name__}"])

    try:
        result = EVALUATION_CONTRACT.model_validate_json(text, strict=True)
    except ValidationError as e:
        raise SchemaViolation(describe_violations(e)) from e

    _warn_out_of_range(result)
    return result


def _warn_out_of_range(result: EvaluationResult):
    # Scores are generator-supplied; out-of-range values are kept as-is.
    if not SUCCESS_RATE_MIN <= result.successRate <= SUCCESS_RATE_MAX:
        logger.warning(f"Success rate outside {SUCCESS_RATE_MIN}-{SUCCESS_RATE_MAX}: {result.successRate}")
    for category in RISK_CATEGORIES:
        score = getattr(result.risks, category).score
        if not RISK_SCORE_MIN <= score <= RISK_SCORE_MAX:
            logger.warning(f"{category} risk score outside {RISK_SCORE_MIN}-{RISK_SCORE_MAX}: {score}")


def extract_prototype_image(response: Any) -> Optional[PrototypeImage]:
    """
    Find the first inline image in a stage-two response.

    Args:
        response: Gateway response exposing candidates with content parts

    Returns:
        The image, or None when no part carries inline data
    """
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return None

    content = candidates[0].content
    parts = (content.parts if content is not None else None) or []
    for part in parts:
        inline_data = part.inline_data
        if inline_data is not None and inline_data.data:
            return PrototypeImage(
                data=inline_data.data,
                mime_type=inline_data.mime_type or DEFAULT_IMAGE_MIME_TYPE,
            )
    return None
