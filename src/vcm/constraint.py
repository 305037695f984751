"""
Version Constraint

A Constraint pairs an Operator with a target Version (the operand) and
tests whether a candidate version satisfies that relation.

Example:
    >=1.2.3

Becomes:
    Constraint(operator=Operator.GTE, operand=Version(1, 2, 3))

ARCHITECTURAL RULE:
    No Constraint exists that was not validated.
    The operator is checked once, at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Union

from vcm.exceptions import InvalidConstraint
from vcm.operators import Operator, to_operator
from vcm.parser import split_constraint_string
from vcm.version import Version


_PREDICATES: Dict[Operator, Callable[[Version, Version], bool]] = {
    Operator.EQ: lambda version, operand: version.is_equal_to(operand),
    Operator.NEQ: lambda version, operand: not version.is_equal_to(operand),
    Operator.GT: lambda version, operand: version.is_greater_than(operand),
    Operator.GTE: lambda version, operand: version.is_greater_or_equal_to(operand),
    Operator.LT: lambda version, operand: version.is_less_than(operand),
    Operator.LTE: lambda version, operand: version.is_less_or_equal_to(operand),
}


@dataclass(frozen=True)
class Constraint:
    """
    An operator plus the version it compares against.

    Properties:
        operator: Operator enum (a symbol string is coerced on construction)
        operand: Version the candidate is compared against

    IMPORTANT:
        This object is immutable (frozen=True).
        Prefer the named factories create() and from_string().
    """

    operator: Operator
    operand: Version

    def __post_init__(self) -> None:
        object.__setattr__(self, "operator", to_operator(self.operator))
        if not isinstance(self.operand, Version):
            raise TypeError(
                f"Constraint operand must be a Version; {type(self.operand).__name__} given"
            )

    @classmethod
    def create(cls, operator: Union[Operator, str, Any], operand: Version) -> Constraint:
        """
        Build a validated constraint.

        Args:
            operator: Operator member or one of "=", "!=", ">", ">=", "<", "<="
            operand: Version to compare against

        Returns:
            Constraint

        Raises:
            InvalidConstraint: If operator is not one of the six symbols
        """
        return cls(operator=operator, operand=operand)

    @classmethod
    def from_string(cls, constraint_string: Any) -> Constraint:
        """
        Parse a constraint from text such as ">=1.2.3" or "1.0.0".

        A missing operator means "=".

        Raises:
            InvalidConstraintString: If the input is not a str, is empty
                after trimming, or cannot be parsed
        """
        operator, operand = split_constraint_string(constraint_string)
        return cls(operator=operator, operand=operand)

    def get_operator(self) -> Operator:
        return self.operator

    def get_operand(self) -> Version:
        return self.operand

    def assert_version(self, version: Version) -> bool:
        """
        Test whether version satisfies this constraint.

        Args:
            version: Candidate version

        Returns:
            True if `version <operator> operand` holds
        """
        if not isinstance(version, Version):
            raise TypeError(f"Expected a Version; {type(version).__name__} given")

        predicate = _PREDICATES.get(self.operator)
        if predicate is None:
            raise InvalidConstraint.for_operator(self.operator)
        return predicate(version, self.operand)

    def __str__(self) -> str:
        return f"{self.operator.value}{self.operand}"


__all__ = ["Constraint"]
