"""
Exception hierarchy for trustflow.

Every failure the core can report is an InvalidInput, raised before any
computation starts. Catch TrustFlowError to handle all of them at once.
"""

from __future__ import annotations


class TrustFlowError(Exception):
    """Base exception for all trustflow errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidInput(TrustFlowError, ValueError):
    """
    A call argument violates a precondition.

    Attributes:
        field: Name of the offending argument
        message: "<field>: <reason>"
    """

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        super().__init__(f"{field}: {reason}")
