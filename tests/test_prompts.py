"""
Tests for building the generation requests.
"""

import pytest

from ideator.errors import EmptyInput
from ideator.models.evaluation import EvaluationResult
from ideator.prompts import (
    SYSTEM_INSTRUCTION,
    build_evaluation_request,
    build_prototype_request,
)


class TestBuildEvaluationRequest:
    """Tests for the stage-one request."""

    @pytest.mark.parametrize("idea", ["", "   ", "\n\t "])
    def test_blank_idea_rejected(self, idea):
        with pytest.raises(EmptyInput):
            build_evaluation_request(idea, "gemini-test")

    def test_idea_passed_verbatim(self):
        idea = "  A subscription box for rare houseplants  "
        request = build_evaluation_request(idea, "gemini-test")

        assert request.model == "gemini-test"
        assert request.contents == f"Evaluate this startup idea: {idea}"

    def test_requests_json_matching_contract(self):
        request = build_evaluation_request("An idea", "gemini-test")

        assert request.response_mime_type == "application/json"
        assert request.response_schema is EvaluationResult
        assert request.system_instruction == SYSTEM_INSTRUCTION
        assert request.aspect_ratio is None

    def test_instruction_states_scoring_conventions(self):
        assert "(0-100)" in SYSTEM_INSTRUCTION
        assert "1 (low risk) to 10 (high risk)" in SYSTEM_INSTRUCTION


class TestBuildPrototypeRequest:
    """Tests for the stage-two request."""

    def test_prompt_embedded_in_render_instruction(self):
        request = build_prototype_request("succulent subscription box, 3D render", "image-test")

        assert request.model == "image-test"
        assert "succulent subscription box, 3D render" in request.contents
        assert request.contents.startswith("A high-quality 3D product render or sleek app UI prototype for:")
        assert request.aspect_ratio == "16:9"
        assert request.response_schema is None

    def test_same_result_gives_same_request(self, evaluation_payload):
        result = EvaluationResult(**evaluation_payload)

        first = build_prototype_request(result, "image-test")
        second = build_prototype_request(result, "image-test")
        from_prompt = build_prototype_request(result.prototypePrompt, "image-test")

        assert first == second == from_prompt

    def test_custom_aspect_ratio(self):
        request = build_prototype_request("a mobile app", "image-test", aspect_ratio="1:1")
        assert request.aspect_ratio == "1:1"

    def test_blank_prototype_prompt_rejected(self):
        with pytest.raises(EmptyInput):
            build_prototype_request("  ", "image-test")
