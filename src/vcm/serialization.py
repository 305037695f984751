"""
Serialization helpers for VCM objects (Version, Constraint).

Provides explicit dict conversion plus JSON/YAML constraint documents.
A constraint document maps names to constraint strings:

    requests: ">=2.31.0"
    urllib3: "<3.0.0"

This module intentionally keeps serialization structure stable and explicit.
"""
from __future__ import annotations

from collections import abc
import json
import logging
import os
from typing import Any, Dict, Mapping

import yaml

from vcm.constraint import Constraint
from vcm.exceptions import ConstraintDocumentError
from vcm.operators import to_operator
from vcm.version import Version


logger = logging.getLogger(__name__)


def version_to_dict(v: Version) -> Dict[str, Any]:
    return {
        "major": v.major,
        "minor": v.minor,
        "patch": v.patch,
        "pre_release": list(v.pre_release),
        "build": list(v.build),
    }


def version_from_dict(d: Dict[str, Any]) -> Version:
    return Version(
        major=d["major"],
        minor=d["minor"],
        patch=d["patch"],
        pre_release=tuple(d.get("pre_release", ())),
        build=tuple(d.get("build", ())),
    )


def constraint_to_dict(c: Constraint) -> Dict[str, Any]:
    return {"operator": c.operator.value, "operand": version_to_dict(c.operand)}


def constraint_from_dict(d: Dict[str, Any]) -> Constraint:
    return Constraint.create(to_operator(d["operator"]), version_from_dict(d["operand"]))


def constraints_from_mapping(mapping: Any) -> Dict[str, Constraint]:
    """
    Build constraints from a name -> constraint string mapping.

    Raises:
        ConstraintDocumentError: If the document is not a mapping
        InvalidConstraintString: If an entry is not a valid constraint string
    """
    if not isinstance(mapping, abc.Mapping):
        raise ConstraintDocumentError(
            f"Constraint document must be a mapping; {type(mapping).__name__} given"
        )

    constraints = {}
    for name, text in mapping.items():
        key = str(name)
        if key in constraints:
            raise ConstraintDocumentError(f"Duplicate constraint name: '{key}'")
        constraints[key] = Constraint.from_string(text)
    return constraints


def constraints_to_mapping(constraints: Mapping[str, Constraint]) -> Dict[str, str]:
    return {name: str(c) for name, c in constraints.items()}


def constraints_to_json(constraints: Mapping[str, Constraint]) -> str:
    return json.dumps(constraints_to_mapping(constraints), sort_keys=True)


def constraints_from_json(s: str) -> Dict[str, Constraint]:
    try:
        d = json.loads(s)
    except json.JSONDecodeError as e:
        raise ConstraintDocumentError(f"Invalid JSON constraint document: {e}") from e
    return constraints_from_mapping(d)


def constraints_to_yaml(constraints: Mapping[str, Constraint]) -> str:
    return yaml.safe_dump(constraints_to_mapping(constraints))


def constraints_from_yaml(s: str) -> Dict[str, Constraint]:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise ConstraintDocumentError(f"Invalid YAML constraint document: {e}") from e
    return constraints_from_mapping(d)


def load_constraints_file(filepath: str) -> Dict[str, Constraint]:
    """
    Load a constraint document from disk.

    The format is chosen by suffix: .json, .yaml or .yml.

    Args:
        filepath: Path to the constraint document

    Returns:
        Mapping of name -> Constraint

    Raises:
        FileNotFoundError: If file doesn't exist
        ConstraintDocumentError: If the suffix or document shape is unsupported
        InvalidConstraintString: If an entry cannot be parsed
    """
    suffix = os.path.splitext(filepath)[1].lower()
    if suffix == ".json":
        loader = constraints_from_json
    elif suffix in (".yaml", ".yml"):
        loader = constraints_from_yaml
    else:
        raise ConstraintDocumentError(f"Unsupported constraint document type: '{suffix}'")

    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Constraint file not found: {filepath}")

    constraints = loader(content)
    logger.debug("Loaded %d constraint(s) from %s", len(constraints), filepath)
    return constraints


__all__ = [
    "version_to_dict",
    "version_from_dict",
    "constraint_to_dict",
    "constraint_from_dict",
    "constraints_from_mapping",
    "constraints_to_mapping",
    "constraints_to_json",
    "constraints_from_json",
    "constraints_to_yaml",
    "constraints_from_yaml",
    "load_constraints_file",
]
