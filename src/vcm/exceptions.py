"""
Error taxonomy for the Version Constraint Model.

Every rejection is terminal: the offending input is reported back to the
caller and nothing is partially built.
"""

from enum import Enum
from typing import Any, Optional


class VersionError(Exception):
    """Base class for all VCM errors."""
    pass


class InvalidVersionString(VersionError, ValueError):
    """Raised when a version string or version part is not valid SemVer."""

    def __init__(self, message: str, version_string: Any = None):
        super().__init__(message)
        self.version_string = version_string

    @classmethod
    def for_version_string(cls, version_string: Any) -> "InvalidVersionString":
        return cls(f"Version string '{version_string}' is not valid", version_string)


class InvalidConstraint(VersionError, ValueError):
    """Raised when a constraint operator is not one of the six symbols."""

    def __init__(self, message: str, operator: Any = None):
        super().__init__(message)
        self.operator = operator

    @classmethod
    def for_operator(cls, operator: Any) -> "InvalidConstraint":
        return cls(f"Unsupported constraint operator: '{operator}'", operator)


class ConstraintStringReason(Enum):
    """Why a constraint string was rejected."""

    INVALID_TYPE = "invalid type"
    EMPTY = "empty"
    UNPARSABLE = "unparsable constraint string"


class InvalidConstraintString(VersionError, ValueError):
    """
    Raised when text cannot be turned into a Constraint.

    Properties:
        reason: ConstraintStringReason
        constraint_string: The rejected input (None for empty input)
    """

    def __init__(
        self,
        message: str,
        reason: ConstraintStringReason,
        constraint_string: Optional[Any] = None,
    ):
        super().__init__(message)
        self.reason = reason
        self.constraint_string = constraint_string

    @classmethod
    def for_invalid_type(cls, value: Any) -> "InvalidConstraintString":
        return cls(
            f"Constraint string must be of type str; {type(value).__name__} given",
            ConstraintStringReason.INVALID_TYPE,
            value,
        )

    @classmethod
    def for_empty(cls) -> "InvalidConstraintString":
        return cls("Constraint string must not be empty", ConstraintStringReason.EMPTY)

    @classmethod
    def for_constraint_string(cls, constraint_string: str) -> "InvalidConstraintString":
        return cls(
            f"Constraint string '{constraint_string}' could not be parsed",
            ConstraintStringReason.UNPARSABLE,
            constraint_string,
        )


class ConstraintDocumentError(VersionError):
    """Raised when a constraint document has the wrong shape or format."""
    pass


__all__ = [
    "VersionError",
    "InvalidVersionString",
    "InvalidConstraint",
    "ConstraintStringReason",
    "InvalidConstraintString",
    "ConstraintDocumentError",
]
