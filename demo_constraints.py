#!/usr/bin/env python3
"""
Demo: Evaluate the example constraints against the example versions.

Shows the full workflow:
1. Build constraints (typed and parsed from text)
2. Evaluate every constraint against every example version
3. Round-trip the constraints through a YAML document
"""

from vcm.constraint import Constraint
from vcm.examples import build_example_constraints, EXAMPLE_VERSIONS
from vcm.serialization import constraints_to_yaml, constraints_from_yaml


def print_table(constraints, versions):
    """Print a satisfaction table: one row per version, one column per constraint."""
    headers = [str(c) for c in constraints.values()]
    width = max(len(str(v)) for v in versions) + 2
    print(" " * width + "".join(h.ljust(10) for h in headers))
    for version in versions:
        cells = ["yes" if c.assert_version(version) else "-" for c in constraints.values()]
        print(str(version).ljust(width) + "".join(cell.ljust(10) for cell in cells))


def main():
    print("=" * 80)
    print("CONSTRAINT DEMO")
    print("=" * 80)

    print("\n1. BUILDING CONSTRAINTS...")
    constraints = build_example_constraints("1.0.0")
    constraints["parsed"] = Constraint.from_string(">= 1.0.0-rc.1")
    for name, constraint in constraints.items():
        print(f"   ✓ {name}: {constraint}")

    print("\n2. EVALUATING...")
    print("-" * 80)
    print_table(constraints, EXAMPLE_VERSIONS)

    print("\n3. YAML DOCUMENT:")
    print("-" * 80)
    document = constraints_to_yaml(constraints)
    print(document)
    restored = constraints_from_yaml(document)
    print(f"   ✓ Restored {len(restored)} constraint(s)")

    print("=" * 80)


if __name__ == "__main__":
    main()
