"""
Evaluation orchestrator: drives an idea through both generation stages.
"""

import asyncio
from typing import Optional

from ideator.constants import DEFAULT_ASPECT_RATIO
from ideator.errors import EmptyInput, GatewayFailure
from ideator.models.evaluation import EvaluationResult, PrototypeImage
from ideator.models.pipeline import EvaluationRequest, EvaluationView, GenerationRequest, PipelineState
from ideator.parser import extract_prototype_image, parse_evaluation
from ideator.prompts import build_evaluation_request, build_prototype_request
from ideator.services.ai_service import AIService
from ideator.utils.logger import logger

DEFAULT_ERROR_MESSAGE = "An error occurred during evaluation."
CANCELLED_MESSAGE = "Evaluation was cancelled."


class EvaluationOrchestrator:
    """Single-flight, two-stage evaluation pipeline with an explicit state machine."""

    def __init__(
        self,
        ai_service: AIService,
        evaluation_model: str,
        image_model: str,
        aspect_ratio: str = DEFAULT_ASPECT_RATIO,
        request_timeout: Optional[float] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            ai_service: Gateway used for both stages
            evaluation_model: Model producing the structured evaluation
            image_model: Model producing the prototype image
            aspect_ratio: Aspect ratio requested for the prototype image
            request_timeout: Seconds to wait for each call, or None to wait indefinitely
        """
        self.ai_service = ai_service
        self.evaluation_model = evaluation_model
        self.image_model = image_model
        self.aspect_ratio = aspect_ratio
        self.request_timeout = request_timeout

        self._state = PipelineState.IDLE
        self._request: Optional[EvaluationRequest] = None
        self._result: Optional[EvaluationResult] = None
        self._prototype_image: Optional[PrototypeImage] = None
        self._error: Optional[str] = None

    @property
    def state(self) -> PipelineState:
        return self._state

    @property
    def request(self) -> Optional[EvaluationRequest]:
        return self._request

    @property
    def result(self) -> Optional[EvaluationResult]:
        return self._result

    @property
    def prototype_image(self) -> Optional[PrototypeImage]:
        return self._prototype_image

    @property
    def error(self) -> Optional[str]:
        return self._error

    def snapshot(self) -> EvaluationView:
        """Capture the current state for rendering."""
        return EvaluationView(
            state=self._state,
            result=self._result,
            prototype_image=self._prototype_image,
            error=self._error,
        )

    async def submit(self, idea: str) -> PipelineState:
        """
        Evaluate an idea, running stage one and then, on success, stage two.

        Blank ideas and submits while a run is active or finished are ignored.
        A cancelled run ends in FAILED before the cancellation is re-raised.

        Args:
            idea: Idea text as typed by the user

        Returns:
            The state after the call
        """
        if self._state is not PipelineState.IDLE:
            logger.warning(f"Ignoring submit while pipeline is {self._state.value}")
            return self._state

        try:
            evaluation_request = build_evaluation_request(idea, self.evaluation_model)
        except EmptyInput:
            logger.debug("Ignoring submit with blank idea text")
            return self._state

        # Claimed before the first await so concurrent submits see RUNNING.
        self._state = PipelineState.RUNNING
        self._request = EvaluationRequest(idea=idea)
        try:
            return await self._run(evaluation_request)
        except asyncio.CancelledError:
            logger.warning("Evaluation was cancelled")
            self._fail(CANCELLED_MESSAGE)
            raise

    def reset(self) -> PipelineState:
        """Discard the last run and return to IDLE. Only valid from a terminal state."""
        if not self._state.is_terminal:
            logger.debug(f"Ignoring reset while pipeline is {self._state.value}")
            return self._state

        self._request = None
        self._result = None
        self._prototype_image = None
        self._error = None
        self._state = PipelineState.IDLE
        return self._state

    def _fail(self, message: str) -> PipelineState:
        self._request = None
        self._result = None
        self._prototype_image = None
        self._error = message
        self._state = PipelineState.FAILED
        return self._state

    async def _run(self, evaluation_request: GenerationRequest) -> PipelineState:
        logger.info("Stage 1: requesting evaluation")
        try:
            response = await self._call(evaluation_request)
            result = parse_evaluation(response.text)
        except Exception as e:
            logger.error(f"Evaluation failed: {e}")
            return self._fail(str(e) or DEFAULT_ERROR_MESSAGE)

        self._request = None
        logger.info(f"Stage 1 complete: {result.businessName}")

        prototype_image = await self._generate_prototype(result)

        self._result = result
        self._prototype_image = prototype_image
        self._state = PipelineState.SUCCEEDED
        logger.info("Evaluation succeeded")
        return self._state

    async def _generate_prototype(self, result: EvaluationResult) -> Optional[PrototypeImage]:
        # Best effort: any failure here leaves the image absent.
        logger.info("Stage 2: requesting prototype image")
        try:
            image_request = build_prototype_request(result, self.image_model, self.aspect_ratio)
            response = await self._call(image_request)
            image = extract_prototype_image(response)
        except Exception as e:
            logger.warning(f"Prototype generation failed, continuing without image: {e}")
            return None

        if image is None:
            logger.info("Prototype response contained no image")
        return image

    async def _call(self, request: GenerationRequest):
        if self.request_timeout is None:
            return await self.ai_service.generate(request)
        try:
            return await asyncio.wait_for(self.ai_service.generate(request), timeout=self.request_timeout)
        except asyncio.TimeoutError as e:
            raise GatewayFailure(f"{request.model} did not respond within {self.request_timeout} seconds") from e
