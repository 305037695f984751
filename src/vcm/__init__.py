"""
Version Constraint Model (VCM) Package

A constraint is one relational operator paired with a target version:

    >=1.2.3
    !=2.0.0-rc.1

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Version ranges or constraint sets
    - Caret / tilde operators
    - Logical AND / OR between constraints

This package defines SINGLE-OPERATOR CONSTRAINTS only.
"""

from vcm.constraint import Constraint
from vcm.exceptions import (
    ConstraintDocumentError,
    ConstraintStringReason,
    InvalidConstraint,
    InvalidConstraintString,
    InvalidVersionString,
    VersionError,
)
from vcm.operators import Operator
from vcm.version import Version

__version__ = "0.1.0"

__all__ = [
    "Constraint",
    "Operator",
    "Version",
    "VersionError",
    "InvalidVersionString",
    "InvalidConstraint",
    "ConstraintStringReason",
    "InvalidConstraintString",
    "ConstraintDocumentError",
]
