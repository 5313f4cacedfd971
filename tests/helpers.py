"""
Builders for gateway payloads and responses used across the tests.
"""

import json
from unittest.mock import MagicMock
from google.genai import types

PNG_BYTES = b"\x89PNG\r\n\x1a\n fake image payload"


def make_payload():
    """A stage-one payload matching the evaluation contract."""
    return {
        "businessName": "Rare Roots",
        "elevatorPitch": "A monthly subscription box delivering rare houseplants to collectors.",
        "swot": {
            "strengths": ["Passionate niche audience", "Recurring revenue"],
            "weaknesses": ["Fragile inventory"],
            "opportunities": ["Corporate gifting"],
            "threats": ["Shipping regulations", "Copycat boxes"],
        },
        "risks": {
            "market": {"score": 4, "description": "Niche but growing demand"},
            "financial": {"score": 6, "description": "High cost of rare stock"},
            "operational": {"score": 8, "description": "Live plants die in transit"},
            "competitive": {"score": 5, "description": "Several generic plant boxes exist"},
        },
        "successRate": 62,
        "strategicSuggestions": ["Partner with specialist growers", "Offer a replacement guarantee"],
        "psychologicalAspects": {
            "founderMindset": "Needs patience with slow-growing inventory.",
            "consumerPsychology": "Collectors are driven by scarcity and status.",
        },
        "prototypePrompt": "succulent subscription box, 3D render",
    }


def text_response(payload):
    """A stage-one response whose text is the serialized payload."""
    response = MagicMock()
    response.text = payload if isinstance(payload, str) else json.dumps(payload)
    return response


def image_response(data=PNG_BYTES, mime_type="image/png"):
    """A stage-two response with a text part followed by an inline image part."""
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(
                content=types.Content(
                    role="model",
                    parts=[
                        types.Part.from_text(text="Here is your prototype."),
                        types.Part.from_bytes(data=data, mime_type=mime_type),
                    ],
                )
            )
        ]
    )


def text_only_response():
    """A stage-two response that carries no image."""
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(
                content=types.Content(role="model", parts=[types.Part.from_text(text="I cannot draw that.")])
            )
        ]
    )
