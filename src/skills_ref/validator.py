from __future__ import annotations

import logging
import unicodedata
from pathlib import Path
from typing import Any

from skills_ref.config import DEFAULT_LIMITS, ValidationLimits
from skills_ref.errors import SkillParseError
from skills_ref.models import Frontmatter, stringify_value
from skills_ref.parser import find_skill_md, parse_frontmatter

logger = logging.getLogger(__name__)

ALLOWED_FIELDS = frozenset(
    {
        "name",
        "description",
        "license",
        "allowed-tools",
        "metadata",
        "compatibility",
    }
)

# Code point ranges accepted as "letters" in skill names. This is a fixed
# approximation: scripts outside these blocks (Hangul, Arabic, Devanagari...)
# are rejected even though unicodedata would call them letters.
_NAME_LETTER_RANGES = (
    (0x0030, 0x0039),  # digits
    (0x0041, 0x005A),  # Basic Latin uppercase
    (0x0061, 0x007A),  # Basic Latin lowercase
    (0x00C0, 0x024F),  # Latin-1 Supplement letters, Latin Extended-A/B
    (0x0300, 0x036F),  # combining diacritical marks
    (0x0400, 0x04FF),  # Cyrillic
    (0x3400, 0x4DBF),  # CJK Extension A
    (0x4E00, 0x9FFF),  # CJK Unified Ideographs
)


def _normalize(text: str) -> str:
    return unicodedata.normalize("NFKC", text)


def _is_name_char(ch: str) -> bool:
    if ch == "-":
        return True
    code = ord(ch)
    return any(low <= code <= high for low, high in _NAME_LETTER_RANGES)


def _validate_fields(metadata: Frontmatter) -> list[str]:
    extra_fields = set(metadata.keys()) - ALLOWED_FIELDS
    if not extra_fields:
        return []
    return [
        f"Unexpected fields in frontmatter: {', '.join(sorted(extra_fields))}. "
        f"Only {', '.join(sorted(ALLOWED_FIELDS))} are allowed."
    ]


def _validate_name(name: str, *, skill_dir: Path | None, max_length: int) -> list[str]:
    if not name.strip():
        return ["Field 'name' must be a non-empty string"]

    errors: list[str] = []
    normalized = _normalize(name.strip())
    if len(normalized) > max_length:
        errors.append(f"Skill name '{normalized}' exceeds {max_length} character limit ({len(normalized)} chars)")
    if normalized != normalized.lower():
        errors.append(f"Skill name '{normalized}' must be lowercase")
    if normalized.startswith("-") or normalized.endswith("-"):
        errors.append("Skill name cannot start or end with a hyphen")
    if "--" in normalized:
        errors.append("Skill name cannot contain consecutive hyphens")
    if not all(_is_name_char(ch) for ch in normalized):
        errors.append(
            f"Skill name '{normalized}' contains invalid characters. Only letters, digits, and hyphens are allowed."
        )

    if skill_dir is not None:
        dir_name = _normalize(skill_dir.name)
        if dir_name != normalized:
            errors.append(f"Directory name '{skill_dir.name}' must match skill name '{normalized}'")
    return errors


def _validate_description(description: str, *, max_length: int) -> list[str]:
    if not description.strip():
        return ["Field 'description' must be a non-empty string"]
    if len(description) > max_length:
        return [f"Description exceeds {max_length} character limit ({len(description)} chars)"]
    return []


def _validate_compatibility(compatibility: Any, *, max_length: int) -> list[str]:
    if not isinstance(compatibility, str):
        return ["Field 'compatibility' must be a string"]
    if len(compatibility) > max_length:
        return [f"Compatibility exceeds {max_length} character limit ({len(compatibility)} chars)"]
    return []


def validate_metadata(
    metadata: Frontmatter,
    skill_dir: Path | None = None,
    *,
    limits: ValidationLimits | None = None,
) -> list[str]:
    """Validate already-parsed frontmatter.

    Every rule runs regardless of earlier failures, so the returned list holds
    all violations in rule order: allowed fields, name, description,
    compatibility. An empty list means the metadata is valid.

    Non-string `name` and `description` values are checked in their text form
    (`name: 123` is the name "123").

    Args:
        metadata: Mapping returned by :func:`skills_ref.parser.parse_frontmatter`.
        skill_dir: Directory the manifest came from. When given, its base name
            must match the skill name after NFKC normalization.
        limits: Length limits; defaults to the Agent Skills limits.
    """
    limits = limits or DEFAULT_LIMITS
    skill_dir = Path(skill_dir) if skill_dir is not None else None

    errors = _validate_fields(metadata)

    if "name" not in metadata:
        errors.append("Missing required field in frontmatter: name")
    else:
        errors.extend(
            _validate_name(stringify_value(metadata["name"]), skill_dir=skill_dir, max_length=limits.max_name_length)
        )

    if "description" not in metadata:
        errors.append("Missing required field in frontmatter: description")
    else:
        errors.extend(
            _validate_description(
                stringify_value(metadata["description"]), max_length=limits.max_description_length
            )
        )

    if "compatibility" in metadata:
        errors.extend(
            _validate_compatibility(metadata["compatibility"], max_length=limits.max_compatibility_length)
        )
    return errors


def validate(skill_dir: Path, *, limits: ValidationLimits | None = None) -> list[str]:
    """Validate a skill directory path and return all validation errors.

    Never raises: missing paths, unreadable manifests and malformed
    frontmatter all come back as a single-element list.
    """
    try:
        skill_dir = Path(skill_dir).resolve()
        if not skill_dir.exists():
            return [f"Path does not exist: {skill_dir}"]
        if not skill_dir.is_dir():
            return [f"Not a directory: {skill_dir}"]

        skill_md = find_skill_md(skill_dir)
        if skill_md is None:
            return ["Missing required file: SKILL.md"]

        content = skill_md.read_text(encoding="utf-8", errors="replace")
        metadata, _ = parse_frontmatter(content)
    except SkillParseError as exc:
        logger.debug("Frontmatter parse failed in %s: %s", skill_dir, exc)
        return [str(exc)]
    except Exception as exc:
        logger.debug("Failed to load skill from %s", skill_dir, exc_info=True)
        return [str(exc)]

    errors = validate_metadata(metadata, skill_dir=skill_dir, limits=limits)
    logger.debug("Validated %s: %d error(s)", skill_dir, len(errors))
    return errors
