from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from skills_ref.errors import SkillParseError, SkillValidationError
from skills_ref.models import Frontmatter, LoadedSkill, SkillProperties, stringify_value

logger = logging.getLogger(__name__)

SKILL_MD_NAMES = ("SKILL.md", "skill.md")


def find_skill_md(skill_dir: Path) -> Path | None:
    """Find SKILL.md in a skill directory.

    Uppercase `SKILL.md` is preferred; lowercase `skill.md` is accepted.
    """
    skill_dir = Path(skill_dir)
    for name in SKILL_MD_NAMES:
        path = skill_dir / name
        if path.is_file():
            return path
    logger.debug("No SKILL.md found in %s", skill_dir)
    return None


def parse_frontmatter(content: str) -> tuple[Frontmatter, str]:
    """Parse YAML frontmatter and markdown body from SKILL.md content."""
    if not content.startswith("---"):
        raise SkillParseError("SKILL.md must start with YAML frontmatter (---)")

    parts = content.split("---", 2)
    if len(parts) < 3:
        raise SkillParseError("SKILL.md frontmatter not properly closed with ---")

    frontmatter_str = parts[1]
    body = parts[2].strip()
    try:
        parsed = yaml.safe_load(frontmatter_str)
    except yaml.YAMLError as exc:
        raise SkillParseError(f"Invalid YAML in frontmatter: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, dict):
        raise SkillParseError("SKILL.md frontmatter must be a YAML mapping")

    metadata: Frontmatter = {str(key): value for key, value in parsed.items()}
    raw_metadata = metadata.get("metadata")
    if isinstance(raw_metadata, dict):
        metadata["metadata"] = {str(key): stringify_value(value) for key, value in raw_metadata.items()}

    return metadata, body


def _read_manifest(skill_dir: Path) -> tuple[Path, Frontmatter, str]:
    skill_md = find_skill_md(skill_dir)
    if skill_md is None:
        raise SkillParseError(f"SKILL.md not found in {skill_dir}")

    content = skill_md.read_text(encoding="utf-8", errors="replace")
    metadata, body = parse_frontmatter(content)
    return skill_md, metadata, body


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return stringify_value(value)


def _build_properties(metadata: Frontmatter) -> SkillProperties:
    if "name" not in metadata:
        raise SkillValidationError("Missing required field in frontmatter: name")
    if "description" not in metadata:
        raise SkillValidationError("Missing required field in frontmatter: description")

    name = metadata["name"]
    description = metadata["description"]

    if not isinstance(name, str) or not name.strip():
        raise SkillValidationError("Field 'name' must be a non-empty string")
    if not isinstance(description, str) or not description.strip():
        raise SkillValidationError("Field 'description' must be a non-empty string")

    raw_meta = metadata.get("metadata")

    return SkillProperties(
        name=name.strip(),
        description=description.strip(),
        license=_optional_text(metadata.get("license")),
        compatibility=_optional_text(metadata.get("compatibility")),
        allowed_tools=_optional_text(metadata.get("allowed-tools")),
        metadata=dict(raw_meta) if isinstance(raw_meta, dict) else {},
    )


def read_properties(skill_dir: Path) -> SkillProperties:
    """Read frontmatter metadata from a skill directory.

    Only the presence and non-blankness of `name` and `description` are
    checked. Naming rules, length limits and the directory-name match are
    left to :func:`skills_ref.validator.validate`.

    Raises:
        SkillParseError: If SKILL.md is missing or its frontmatter is malformed.
        SkillValidationError: If `name` or `description` is missing or blank.
    """
    skill_dir = Path(skill_dir)
    _, metadata, _ = _read_manifest(skill_dir)
    return _build_properties(metadata)


def read_skill(skill_dir: Path) -> LoadedSkill:
    """Read full skill content and validate against Agent Skills constraints."""
    from skills_ref.validator import validate_metadata

    skill_dir = Path(skill_dir).resolve()
    skill_md, metadata, body = _read_manifest(skill_dir)

    errors = validate_metadata(metadata, skill_dir=skill_dir)
    if errors:
        raise SkillValidationError("; ".join(errors), errors)

    properties = _build_properties(metadata)
    return LoadedSkill(properties=properties, skill_md_path=skill_md.resolve(), instructions=body)
