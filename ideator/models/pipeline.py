"""
Models describing pipeline state, requests, and the view handed to the presentation layer.
"""

from enum import Enum
from typing import Optional, Type
from pydantic import BaseModel, ConfigDict

from ideator.models.evaluation import EvaluationResult, PrototypeImage

class PipelineState(str, Enum):
    """Lifecycle of a single evaluation."""

    IDLE = "idle"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (PipelineState.SUCCEEDED, PipelineState.FAILED)

class EvaluationRequest(BaseModel):
    """The idea submitted for one pipeline run."""

    model_config = ConfigDict(frozen=True)

    idea: str

class GenerationRequest(BaseModel):
    """Descriptor for a single call to the AI gateway."""

    model_config = ConfigDict(frozen=True)

    model: str
    contents: str
    system_instruction: Optional[str] = None
    response_mime_type: Optional[str] = None
    response_schema: Optional[Type[BaseModel]] = None
    aspect_ratio: Optional[str] = None

class EvaluationView(BaseModel):
    """Read-only snapshot of the orchestrator for rendering."""

    model_config = ConfigDict(frozen=True)

    state: PipelineState
    result: Optional[EvaluationResult] = None
    prototype_image: Optional[PrototypeImage] = None
    error: Optional[str] = None
