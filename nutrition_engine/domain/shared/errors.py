"""
Domain exceptions.

Typed exceptions for explicit error handling.
Every engine failure is either one of these or a silent degrade
(skipped food reference, clamped macro value).
"""

from __future__ import annotations


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain-specific exceptions inherit from this.
    Allows catching all domain errors with single except clause.
    """

    pass


# ═══════════════════════════════════════════════════════════
# VALIDATION EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class InvalidInputError(DomainError):
    """
    Calculation precondition violated.

    Raised when:
    - Activity level, sex or goal is not one of the enumerated values
    - Body weight is not positive
    - Meals per day is not positive

    Callers treat this as "inputs incomplete" and skip the computation
    rather than surfacing a user-facing error.

    Example:
        >>> raise InvalidInputError("Weight must be positive, got 0")
    """

    pass


# Short name used by callers that think in terms of the engine contract.
InvalidInput = InvalidInputError
