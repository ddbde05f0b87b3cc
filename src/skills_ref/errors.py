from __future__ import annotations

from enum import StrEnum


class SkillErrorKind(StrEnum):
    PARSE = "parse"
    VALIDATION = "validation"


class SkillError(Exception):
    """Base error for skill parsing/validation.

    ``kind`` tags the failure, so a single ``except SkillError`` can branch
    on it instead of on the concrete class.
    """

    def __init__(self, message: str, *, kind: SkillErrorKind) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind


class SkillParseError(SkillError):
    """Raised when SKILL.md is missing or its frontmatter is malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(message, kind=SkillErrorKind.PARSE)


class SkillValidationError(SkillError):
    """Raised when required skill metadata is missing or invalid."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message, kind=SkillErrorKind.VALIDATION)
        self.errors: list[str] = list(errors) if errors else [message]
