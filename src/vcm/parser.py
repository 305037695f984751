"""
Constraint string parser.

Grammar:
    constraint := [operator] whitespace* version
    operator   := "!=" | ">=" | "<=" | "=" | ">" | "<"
    version    := SemVer 2.0.0, optional leading "v"

A missing operator means "=".

Examples:
    ">=1.2.3"       -> (Operator.GTE, 1.2.3)
    "!= 2.0.0-rc.1" -> (Operator.NEQ, 2.0.0-rc.1)
    "v1.0.0"        -> (Operator.EQ, 1.0.0)
"""

import logging
import re
from typing import Any, Tuple

from vcm.exceptions import InvalidConstraintString, InvalidVersionString
from vcm.operators import OPERATOR_SYMBOLS, Operator
from vcm.version import Version


logger = logging.getLogger(__name__)

_CONSTRAINT_RE = re.compile(
    r'^(?P<operator>' + '|'.join(re.escape(symbol) for symbol in OPERATOR_SYMBOLS) + r')?'
    r'\s*(?P<version>\S+)$'
)


def split_constraint_string(constraint_string: Any) -> Tuple[Operator, Version]:
    """
    Split constraint text into its operator and operand.

    Args:
        constraint_string: Text to parse

    Returns:
        (Operator, Version)

    Raises:
        InvalidConstraintString: reason INVALID_TYPE, EMPTY or UNPARSABLE
    """
    if not isinstance(constraint_string, str):
        raise InvalidConstraintString.for_invalid_type(constraint_string)

    constraint_string = constraint_string.strip()

    if constraint_string == "":
        raise InvalidConstraintString.for_empty()

    match = _CONSTRAINT_RE.match(constraint_string)
    if match is None:
        raise InvalidConstraintString.for_constraint_string(constraint_string)

    operator = Operator(match.group("operator") or Operator.EQ.value)

    try:
        operand = Version.from_string(match.group("version"))
    except InvalidVersionString as e:
        raise InvalidConstraintString.for_constraint_string(constraint_string) from e

    logger.debug("Parsed constraint %r as %s %s", constraint_string, operator.value, operand)
    return operator, operand


__all__ = ["split_constraint_string"]
