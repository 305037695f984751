"""
Tests for serialization and loading of constraint documents.

These tests ensure lossless dict/JSON/YAML round-trip using the explicit
serialization functions in `vcm.serialization`, and that documents coming
from untyped sources are rejected with the right reason.
"""

import pytest
from vcm.constraint import Constraint
from vcm.exceptions import (
    ConstraintDocumentError,
    ConstraintStringReason,
    InvalidConstraint,
    InvalidConstraintString,
)
from vcm.examples import build_example_constraints
from vcm.operators import Operator
from vcm.serialization import (
    constraint_from_dict,
    constraint_to_dict,
    constraints_from_json,
    constraints_from_mapping,
    constraints_from_yaml,
    constraints_to_json,
    constraints_to_yaml,
    load_constraints_file,
    version_from_dict,
    version_to_dict,
)
from vcm.version import Version


def test_version_dict_roundtrip():
    version = Version.from_string("1.0.0-rc.1+build.7")
    d = version_to_dict(version)
    assert d == {"major": 1, "minor": 0, "patch": 0, "pre_release": ["rc", "1"], "build": ["build", "7"]}
    restored = version_from_dict(d)
    assert restored == version
    assert restored.build == version.build


def test_constraint_dict_roundtrip():
    constraint = Constraint.from_string("!=2.1.0-beta")
    d = constraint_to_dict(constraint)
    assert d["operator"] == "!="
    assert constraint_from_dict(d) == constraint


def test_constraint_from_dict_rejects_operator():
    d = {"operator": "~>", "operand": {"major": 1, "minor": 0, "patch": 0}}
    with pytest.raises(InvalidConstraint):
        constraint_from_dict(d)


def test_json_roundtrip():
    constraints = build_example_constraints()
    json_str = constraints_to_json(constraints)
    restored = constraints_from_json(json_str)
    assert restored == constraints


def test_yaml_roundtrip():
    constraints = build_example_constraints("2.0.0-rc.1")
    yaml_str = constraints_to_yaml(constraints)
    restored = constraints_from_yaml(yaml_str)
    assert restored == constraints


def test_yaml_document():
    doc = 'requests: ">=2.31.0"\nurllib3: "<3.0.0"\npinned: 1.4.2\n'
    constraints = constraints_from_yaml(doc)
    assert constraints["requests"].get_operator() is Operator.GTE
    assert constraints["urllib3"].get_operand() == Version(3, 0, 0)
    assert constraints["pinned"] == Constraint.create("=", Version(1, 4, 2))


@pytest.mark.parametrize("doc", ["broken: 1\n", "broken: 1.5\n", "broken:\n", "broken: [1, 2]\n"])
def test_yaml_wrong_type(doc):
    """Unquoted numbers, nulls and lists are not constraint strings."""
    with pytest.raises(InvalidConstraintString) as exc_info:
        constraints_from_yaml(doc)
    assert exc_info.value.reason is ConstraintStringReason.INVALID_TYPE


def test_yaml_empty_entry():
    with pytest.raises(InvalidConstraintString) as exc_info:
        constraints_from_yaml('blank: "  "\n')
    assert exc_info.value.reason is ConstraintStringReason.EMPTY


def test_document_must_be_mapping():
    with pytest.raises(ConstraintDocumentError):
        constraints_from_mapping([">=1.0.0"])
    with pytest.raises(ConstraintDocumentError):
        constraints_from_yaml("- '>=1.0.0'\n")


def test_malformed_documents():
    with pytest.raises(ConstraintDocumentError):
        constraints_from_json("{not json")
    with pytest.raises(ConstraintDocumentError):
        constraints_from_yaml("a: [unclosed\n")


class TestLoadConstraintsFile:
    """Test loading constraint documents from disk."""

    def test_load_yaml(self, tmp_path):
        """Should load a .yaml document."""
        path = tmp_path / "constraints.yaml"
        path.write_text('core: ">=1.0.0"\nplugin: "!=0.3.1"\n', encoding="utf-8")
        constraints = load_constraints_file(str(path))
        assert set(constraints) == {"core", "plugin"}
        assert constraints["plugin"].assert_version(Version(0, 3, 2))

    def test_load_yml_suffix(self, tmp_path):
        """.yml is treated as YAML."""
        path = tmp_path / "constraints.yml"
        path.write_text('core: "<2.0.0"\n', encoding="utf-8")
        assert load_constraints_file(str(path))["core"].get_operator() is Operator.LT

    def test_load_json(self, tmp_path):
        """Should load a .json document."""
        path = tmp_path / "constraints.json"
        path.write_text('{"core": "<=1.9.9"}', encoding="utf-8")
        constraints = load_constraints_file(str(path))
        assert constraints["core"] == Constraint.from_string("<=1.9.9")

    def test_json_wrong_type(self, tmp_path):
        """A JSON number is not a constraint string."""
        path = tmp_path / "constraints.json"
        path.write_text('{"core": 1}', encoding="utf-8")
        with pytest.raises(InvalidConstraintString) as exc_info:
            load_constraints_file(str(path))
        assert exc_info.value.reason is ConstraintStringReason.INVALID_TYPE

    def test_unsupported_suffix(self, tmp_path):
        """Only JSON and YAML documents are supported."""
        path = tmp_path / "constraints.toml"
        path.write_text('core = ">=1.0.0"\n', encoding="utf-8")
        with pytest.raises(ConstraintDocumentError):
            load_constraints_file(str(path))

    def test_missing_file(self, tmp_path):
        """Missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_constraints_file(str(tmp_path / "missing.yaml"))


def test_duplicate_names_rejected():
    """Keys that stringify to the same name are not silently merged."""
    with pytest.raises(ConstraintDocumentError):
        constraints_from_yaml("1: '>=1.0.0'\n'1': '<2.0.0'\n")


def test_json_roundtrip_keeps_pre_release():
    constraint = Constraint.create(">=", Version(1, 0, 0, pre_release=("alpha",)))
    restored = constraints_from_json(constraints_to_json({"x": constraint}))["x"]
    assert restored == constraint
    assert restored.get_operand().pre_release == ("alpha",)
