"""
Example constraints and versions for the demo and the tests.

Covers every operator once, plus pre-release and build-metadata versions
so the precedence rules show up in the output.
"""
from typing import Dict, List

from vcm.constraint import Constraint
from vcm.operators import Operator
from vcm.version import Version


EXAMPLE_VERSIONS: List[Version] = [
    Version.from_string(text)
    for text in (
        "0.9.0",
        "1.0.0-alpha",
        "1.0.0-rc.1",
        "1.0.0",
        "1.0.0+build.7",
        "1.4.2",
        "2.0.0",
    )
]


def build_example_constraints(target: str = "1.0.0") -> Dict[str, Constraint]:
    operand = Version.from_string(target)
    return {
        "exact": Constraint.create(Operator.EQ, operand),
        "not_exact": Constraint.create(Operator.NEQ, operand),
        "newer": Constraint.create(Operator.GT, operand),
        "at_least": Constraint.create(Operator.GTE, operand),
        "older": Constraint.create(Operator.LT, operand),
        "at_most": Constraint.create(Operator.LTE, operand),
    }
