from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

MAX_SKILL_NAME_LENGTH = 64
MAX_DESCRIPTION_LENGTH = 1024
MAX_COMPATIBILITY_LENGTH = 500

ENV_MAX_NAME_LENGTH = "SKILLS_REF_MAX_NAME_LENGTH"
ENV_MAX_DESCRIPTION_LENGTH = "SKILLS_REF_MAX_DESCRIPTION_LENGTH"
ENV_MAX_COMPATIBILITY_LENGTH = "SKILLS_REF_MAX_COMPATIBILITY_LENGTH"


class ConfigError(RuntimeError):
    pass


@dataclass(frozen=True, slots=True)
class ValidationLimits:
    max_name_length: int = MAX_SKILL_NAME_LENGTH
    max_description_length: int = MAX_DESCRIPTION_LENGTH
    max_compatibility_length: int = MAX_COMPATIBILITY_LENGTH


DEFAULT_LIMITS = ValidationLimits()


def load_validation_limits(environ: Mapping[str, str] | None = None) -> ValidationLimits:
    """Build validation limits from ``SKILLS_REF_*`` environment variables.

    Unset or blank variables keep the default limit. Nothing in the package
    calls this implicitly: `validate` and `validate_metadata` apply the fixed
    Agent Skills limits (64 / 1024 / 500) unless a ``ValidationLimits`` is
    passed in.
    """
    env = os.environ if environ is None else environ
    return ValidationLimits(
        max_name_length=_read_limit(env, ENV_MAX_NAME_LENGTH, MAX_SKILL_NAME_LENGTH),
        max_description_length=_read_limit(env, ENV_MAX_DESCRIPTION_LENGTH, MAX_DESCRIPTION_LENGTH),
        max_compatibility_length=_read_limit(env, ENV_MAX_COMPATIBILITY_LENGTH, MAX_COMPATIBILITY_LENGTH),
    )


def _read_limit(env: Mapping[str, str], key: str, default: int) -> int:
    raw = str(env.get(key, "")).strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigError(f"{key} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ConfigError(f"{key} must be positive, got {value}")
    return value
