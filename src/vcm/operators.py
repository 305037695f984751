"""
Constraint operators.

The operator set is closed. Anything that is not one of these six
symbols is rejected when a Constraint is built, never when it is evaluated.
"""

from enum import Enum
from typing import Any, FrozenSet

from vcm.exceptions import InvalidConstraint


class Operator(Enum):
    """
    Relational operators a constraint can apply to its operand.

    The value of each member is the symbol used in constraint strings.
    """

    EQ = "="
    NEQ = "!="
    GT = ">"
    GTE = ">="
    LT = "<"
    LTE = "<="

    def __str__(self) -> str:
        return self.value


VALID_OPERATORS: FrozenSet[str] = frozenset(op.value for op in Operator)

# Longest symbols first so ">=" is never read as ">" followed by "=".
OPERATOR_SYMBOLS = tuple(sorted(VALID_OPERATORS, key=len, reverse=True))


def to_operator(token: Any) -> Operator:
    """
    Coerce an operator token into an Operator member.

    Args:
        token: Operator member or symbol string

    Returns:
        The matching Operator

    Raises:
        InvalidConstraint: If token is not one of the six symbols
    """
    if isinstance(token, Operator):
        return token
    try:
        return Operator(token)
    except (ValueError, TypeError) as e:
        raise InvalidConstraint.for_operator(token) from e


__all__ = ["Operator", "VALID_OPERATORS", "OPERATOR_SYMBOLS", "to_operator"]
