"""
Derived view data for rendering an evaluation.
"""

from typing import Dict, List, Union

from ideator.constants import HIGH_RISK_THRESHOLD, MEDIUM_RISK_THRESHOLD, RISK_CATEGORIES, RISK_SCORE_MAX
from ideator.models.evaluation import EvaluationResult
from ideator.models.pipeline import EvaluationView, PipelineState


def risk_chart_data(result: EvaluationResult) -> List[Dict[str, Union[str, float]]]:
    """Radar chart rows, one per risk category in fixed order."""
    return [
        {
            "subject": category.capitalize(),
            "A": getattr(result.risks, category).score,
            "fullMark": RISK_SCORE_MAX,
        }
        for category in RISK_CATEGORIES
    ]


def risk_level(score: float) -> str:
    if score > HIGH_RISK_THRESHOLD:
        return "high"
    if score > MEDIUM_RISK_THRESHOLD:
        return "medium"
    return "low"


def format_success_rate(rate: float) -> str:
    return f"{rate:g}%"


def render_report(view: EvaluationView) -> str:
    """
    Render a snapshot as plain text.

    Args:
        view: Snapshot taken from the orchestrator

    Returns:
        Multi-line report; an error notice when the run failed
    """
    if view.state is PipelineState.FAILED:
        return f"Evaluation failed: {view.error}"
    if view.state is PipelineState.RUNNING:
        return "Analyzing market dynamics..."
    if view.result is None:
        return "No evaluation yet."

    result = view.result
    lines = [
        result.businessName,
        f'"{result.elevatorPitch}"',
        "",
        f"Success probability: {format_success_rate(result.successRate)}",
        "",
        "Risk profile:",
    ]
    for category in RISK_CATEGORIES:
        risk = getattr(result.risks, category)
        lines.append(
            f"  {category.capitalize():<12} {risk.score}/{RISK_SCORE_MAX} ({risk_level(risk.score)}) - {risk.description}"
        )

    for title, items in (
        ("Strengths", result.swot.strengths),
        ("Weaknesses", result.swot.weaknesses),
        ("Opportunities", result.swot.opportunities),
        ("Threats", result.swot.threats),
    ):
        lines.extend(["", f"{title}:"])
        lines.extend(f"  - {item}" for item in items)

    lines.extend([
        "",
        "Founder mindset:",
        f"  {result.psychologicalAspects.founderMindset}",
        "Consumer psychology:",
        f"  {result.psychologicalAspects.consumerPsychology}",
        "",
        "Strategic roadmap:",
    ])
    lines.extend(f"  {index:02d}. {suggestion}" for index, suggestion in enumerate(result.strategicSuggestions, start=1))

    lines.append("")
    if view.prototype_image is not None:
        lines.append(f"Prototype image: {view.prototype_image.mime_type}, {len(view.prototype_image.data)} bytes")
    else:
        lines.append("Prototype image: not available")
    lines.append(f"Prototype prompt: {result.prototypePrompt}")
    return "\n".join(lines)
