"""
The evaluation contract shared by the prompt builder and the result parser.

The generator is instructed with EVALUATION_CONTRACT as its response schema and
the parser validates against the same class, so the two cannot drift apart.
"""

from typing import List, Type
from pydantic import BaseModel, ValidationError

from ideator.models.evaluation import EvaluationResult

EVALUATION_CONTRACT: Type[BaseModel] = EvaluationResult


def required_fields(model: Type[BaseModel] = EVALUATION_CONTRACT, prefix: str = "") -> List[str]:
    """
    List the dotted paths of every required field in a contract.

    Args:
        model: Contract (or nested part of it) to walk
        prefix: Path of the enclosing field

    Returns:
        Paths in declaration order, parents before their children
    """
    paths = []
    for name, field in model.model_fields.items():
        if not field.is_required():
            continue
        path = f"{prefix}{name}"
        paths.append(path)
        annotation = field.annotation
        if isinstance(annotation, type) and issubclass(annotation, BaseModel):
            paths.extend(required_fields(annotation, prefix=f"{path}."))
    return paths


def describe_violations(error: ValidationError) -> List[str]:
    """Turn a pydantic validation error into one readable line per problem."""
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "<root>"
        problems.append(f"{location}: {item['msg']}")
    return problems
