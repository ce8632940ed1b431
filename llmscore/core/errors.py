"""Error types reported by scorers.

Scorers never raise these across their ``score()`` boundary. Instead the
instance is stored on ``Score.error`` next to a score of 0.0 so callers can
tell "the output is bad" apart from "the output could not be evaluated".
"""

from __future__ import annotations


class ScoringError(Exception):
    """Base exception for scoring failures."""

    pass


class MissingExpectedValueError(ScoringError):
    """Raised when a scorer needs a reference value and none was given."""

    def __init__(self, message: str = "expected value is required for this scorer") -> None:
        """Initialize with a default message."""
        super().__init__(message)


class DependencyUnavailableError(ScoringError):
    """Raised when the collaborator a scorer needs is not configured."""

    def __init__(self, dependency: str) -> None:
        """Initialize the error.

        Args:
            dependency: Human-readable name of the missing collaborator.

        """
        self.dependency = dependency
        super().__init__(f"{dependency} is required")


class DependencyFailureError(ScoringError):
    """Raised when a collaborator call fails (network, auth, quota, ...).

    The original exception is chained as ``__cause__``.
    """

    pass


class ResponseValidationError(ScoringError):
    """Raised when a judge response is missing or has a malformed field.

    Attributes:
        field: Name of the first field that failed validation.
        reason: What was wrong with it.

    """

    def __init__(self, field: str, reason: str) -> None:
        """Initialize the error.

        Args:
            field: Name of the field that failed.
            reason: Description of the failure.

        """
        self.field = field
        self.reason = reason
        super().__init__(f"invalid judge response field '{field}': {reason}")


class UnknownGradeError(ScoringError, KeyError):
    """Raised when a letter outside the grade scale is looked up."""

    def __init__(self, grade: str, allowed: tuple[str, ...]) -> None:
        """Initialize the error.

        Args:
            grade: The letter that was looked up.
            allowed: The letters of the scale.

        """
        self.grade = grade
        self.allowed = allowed
        super().__init__(f"unknown grade {grade!r}, expected one of {', '.join(allowed)}")

    def __str__(self) -> str:
        """Return the message without KeyError's repr quoting."""
        return str(self.args[0])
