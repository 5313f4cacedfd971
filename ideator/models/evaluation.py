"""
Data models for the business evaluation and the prototype image.
"""

import base64
from pydantic import BaseModel, ConfigDict, Field
from typing import List

from ideator.constants import DEFAULT_IMAGE_MIME_TYPE

class Swot(BaseModel):
    """SWOT analysis, each quadrant an ordered list of points."""

    strengths: List[str] = Field(..., description="Internal advantages of the business")
    weaknesses: List[str] = Field(..., description="Internal shortcomings of the business")
    opportunities: List[str] = Field(..., description="External factors the business could exploit")
    threats: List[str] = Field(..., description="External factors that could harm the business")

class Risk(BaseModel):
    """A single scored risk."""

    score: int = Field(..., description="Risk score from 1 (low risk) to 10 (high risk)")
    description: str = Field(..., description="Why the risk has this score")

class Risks(BaseModel):
    """Risk assessment across the four fixed categories."""

    market: Risk
    financial: Risk
    operational: Risk
    competitive: Risk

class PsychologicalAspects(BaseModel):
    """Founder and consumer psychology."""

    founderMindset: str = Field(..., description="Mental challenges the founder will face")
    consumerPsychology: str = Field(..., description="Consumer behavior and motivation")

class EvaluationResult(BaseModel):
    """Structured evaluation of a startup idea returned by the first generation stage."""

    businessName: str = Field(..., description="A catchy name for the business")
    elevatorPitch: str = Field(..., description="A one or two sentence pitch")
    swot: Swot
    risks: Risks
    successRate: float = Field(..., description="Probability of success as a percentage (0-100)")
    strategicSuggestions: List[str] = Field(..., description="Ordered, actionable strategic suggestions")
    psychologicalAspects: PsychologicalAspects
    prototypePrompt: str = Field(
        ...,
        description="Detailed description for an AI image generator to create a 3D product render or app interface prototype",
    )

class PrototypeImage(BaseModel):
    """Image produced by the second generation stage."""

    model_config = ConfigDict(ser_json_bytes="base64", val_json_bytes="base64")

    data: bytes
    mime_type: str = DEFAULT_IMAGE_MIME_TYPE

    @property
    def data_uri(self) -> str:
        """Data URI suitable for embedding the image directly."""
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"
