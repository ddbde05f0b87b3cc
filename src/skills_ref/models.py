from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from types import MappingProxyType
from typing import Any, Union

# Shapes yaml.safe_load produces for a header. The reader and validator
# narrow these; only the nested `metadata` mapping is coerced to str values.
FrontmatterScalar = Union[str, int, float, bool, date, None]
FrontmatterValue = Union[FrontmatterScalar, list[Any], dict[str, Any]]
Frontmatter = dict[str, FrontmatterValue]


def stringify_value(value: Any) -> str:
    """Render a YAML scalar the way it is spelled in the header."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


@dataclass(frozen=True, slots=True)
class SkillProperties:
    """Metadata fields defined by the Agent Skills specification."""

    name: str
    description: str
    license: str | None = None
    compatibility: str | None = None
    allowed_tools: str | None = None
    metadata: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only snapshot; later changes to the caller's dict are not seen.
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "name": self.name,
            "description": self.description,
        }
        if self.license is not None:
            payload["license"] = self.license
        if self.compatibility is not None:
            payload["compatibility"] = self.compatibility
        if self.allowed_tools is not None:
            payload["allowed-tools"] = self.allowed_tools
        if self.metadata:
            payload["metadata"] = dict(self.metadata)
        return payload


@dataclass(frozen=True, slots=True)
class LoadedSkill:
    """Validated skill together with its manifest location and body."""

    properties: SkillProperties
    skill_md_path: Path
    instructions: str

    @property
    def name(self) -> str:
        return self.properties.name
