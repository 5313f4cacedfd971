"""
Error types raised while evaluating an idea.
"""


class IdeatorError(Exception):
    """Base class for all pipeline errors."""


class EmptyInput(IdeatorError):
    """Raised when the idea (or prototype prompt) is blank after trimming."""

    def __init__(self, what: str = "idea text"):
        super().__init__(f"The {what} must not be empty")


class GatewayFailure(IdeatorError):
    """Raised when a call to the AI gateway rejects. Carries the provider's message verbatim."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MalformedResponse(IdeatorError):
    """Raised when the evaluation payload cannot be decoded as JSON."""

    def __init__(self, reason: str):
        super().__init__(f"The evaluation response could not be decoded: {reason}")


class SchemaViolation(IdeatorError):
    """Raised when a decoded evaluation payload does not match the contract."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__(
            "The evaluation response does not match the expected shape: " + "; ".join(problems)
        )
