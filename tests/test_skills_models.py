from __future__ import annotations

import dataclasses
from datetime import date
from pathlib import Path

import pytest

from skills_ref import SkillError, SkillErrorKind, SkillParseError, SkillValidationError
from skills_ref.models import SkillProperties, stringify_value
from skills_ref.parser import read_properties


def test_to_dict_minimal() -> None:
    props = SkillProperties(name="my-skill", description="A test skill")
    assert props.to_dict() == {"name": "my-skill", "description": "A test skill"}


def test_to_dict_full_uses_hyphenated_allowed_tools() -> None:
    props = SkillProperties(
        name="my-skill",
        description="A test skill",
        license="MIT",
        compatibility="Python 3.10+",
        allowed_tools="Bash(jq:*) Bash(git:*)",
        metadata={"author": "Test Author"},
    )
    assert props.to_dict() == {
        "name": "my-skill",
        "description": "A test skill",
        "license": "MIT",
        "compatibility": "Python 3.10+",
        "allowed-tools": "Bash(jq:*) Bash(git:*)",
        "metadata": {"author": "Test Author"},
    }


def test_to_dict_returns_metadata_copy() -> None:
    props = SkillProperties(name="a", description="b", metadata={"k": "v"})
    payload = props.to_dict()
    payload["metadata"]["k"] = "changed"  # type: ignore[index]
    assert props.metadata == {"k": "v"}


def test_metadata_is_read_only_snapshot() -> None:
    source = {"a": "b"}
    props = SkillProperties(name="a", description="b", metadata=source)
    source["a"] = "changed"

    assert props.metadata == {"a": "b"}
    with pytest.raises(TypeError):
        props.metadata["a"] = "changed"  # type: ignore[index]


def test_read_properties_metadata_is_read_only(tmp_path: Path) -> None:
    skill_dir = tmp_path / "my-skill"
    skill_dir.mkdir()
    (skill_dir / "SKILL.md").write_text(
        "---\nname: my-skill\ndescription: d\nmetadata:\n  a: b\n---\n",
        encoding="utf-8",
    )

    props = read_properties(skill_dir)
    with pytest.raises(TypeError):
        props.metadata["a"] = "changed"  # type: ignore[index]
    assert props.metadata == {"a": "b"}


def test_properties_are_immutable() -> None:
    props = SkillProperties(name="a", description="b")
    with pytest.raises(dataclasses.FrozenInstanceError):
        props.name = "c"  # type: ignore[misc]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("text", "text"),
        (True, "true"),
        (False, "false"),
        (None, "null"),
        (3, "3"),
        (1.5, "1.5"),
        (date(2024, 1, 2), "2024-01-02"),
    ],
)
def test_stringify_value(value: object, expected: str) -> None:
    assert stringify_value(value) == expected


def test_error_kinds() -> None:
    parse_error = SkillParseError("broken")
    validation_error = SkillValidationError("bad", ["bad", "worse"])

    assert isinstance(parse_error, SkillError)
    assert isinstance(validation_error, SkillError)
    assert parse_error.kind is SkillErrorKind.PARSE
    assert validation_error.kind is SkillErrorKind.VALIDATION
    assert validation_error.errors == ["bad", "worse"]
    assert SkillValidationError("only").errors == ["only"]
    assert str(parse_error) == parse_error.message == "broken"


def test_base_error_accepts_kind() -> None:
    error = SkillError("generic", kind=SkillErrorKind.VALIDATION)
    assert error.kind is SkillErrorKind.VALIDATION


def test_base_error_requires_kind() -> None:
    with pytest.raises(TypeError):
        SkillError("generic")  # type: ignore[call-arg]
