"""
Error types raised by the validation pipeline.

Only two conditions ever escape the pipeline as exceptions:

- ``ClassificationError``: the business DNA could not be determined
  with enough confidence (or a strategy could not proceed). The
  orchestrator converts it into a fallback result.
- ``ConsistencyViolation``: consensus weights do not sum to 1.0. This is
  a configuration defect and is allowed to propagate.
"""

from typing import Optional


class ClassificationError(Exception):
    """Raised when a validation strategy cannot classify or score an idea."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.cause = cause

    def __str__(self) -> str:
        return self.message


class ConsistencyViolation(ValueError):
    """Raised by the consensus engine on an invalid weight configuration."""
