"""
Builds the two generation requests: the structured evaluation and the prototype image.
"""

from typing import Union

from ideator.constants import DEFAULT_ASPECT_RATIO, JSON_MIME_TYPE
from ideator.errors import EmptyInput
from ideator.models.evaluation import EvaluationResult
from ideator.models.pipeline import GenerationRequest
from ideator.schema import EVALUATION_CONTRACT

SYSTEM_INSTRUCTION = """You are an expert Startup Consultant and Venture Capitalist.
Analyze the provided business idea and provide a comprehensive evaluation in JSON format.
Be critical but constructive.
The success rate should be a percentage (0-100).
Risk scores should be whole numbers from 1 (low risk) to 10 (high risk).
Psychological aspects should cover both the founder's mental challenges and the consumer's behavior/motivation.
The prototypePrompt should be a detailed description for an AI image generator to create a "3D product render" or "app interface prototype" for this business."""

EVALUATION_TEMPLATE = "Evaluate this startup idea: {idea}"

PROTOTYPE_TEMPLATE = (
    "A high-quality 3D product render or sleek app UI prototype for: {prompt}. "
    "Cinematic lighting, professional studio setup, 4k, minimalist aesthetic."
)


def build_evaluation_request(idea: str, model: str) -> GenerationRequest:
    """
    Build the stage-one request asking for a structured evaluation.

    Args:
        idea: Idea text as typed by the user, passed on verbatim
        model: Model identifier to address

    Returns:
        Request descriptor demanding a single payload matching the evaluation contract

    Raises:
        EmptyInput: If the idea is blank
    """
    if not idea or not idea.strip():
        raise EmptyInput("idea text")

    return GenerationRequest(
        model=model,
        contents=EVALUATION_TEMPLATE.format(idea=idea),
        system_instruction=SYSTEM_INSTRUCTION,
        response_mime_type=JSON_MIME_TYPE,
        response_schema=EVALUATION_CONTRACT,
    )


def build_prototype_request(
    source: Union[EvaluationResult, str],
    model: str,
    aspect_ratio: str = DEFAULT_ASPECT_RATIO,
) -> GenerationRequest:
    """
    Build the stage-two request asking for a prototype image.

    Args:
        source: A completed evaluation, or its prototypePrompt directly
        model: Image model identifier
        aspect_ratio: Aspect ratio hint for the generated image

    Returns:
        Request descriptor for the image call

    Raises:
        EmptyInput: If the prototype prompt is blank
    """
    prompt = source.prototypePrompt if isinstance(source, EvaluationResult) else source
    if not prompt or not prompt.strip():
        raise EmptyInput("prototype prompt")

    return GenerationRequest(
        model=model,
        contents=PROTOTYPE_TEMPLATE.format(prompt=prompt),
        aspect_ratio=aspect_ratio,
    )
