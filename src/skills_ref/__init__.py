from skills_ref.config import ConfigError, ValidationLimits, load_validation_limits
from skills_ref.errors import SkillError, SkillErrorKind, SkillParseError, SkillValidationError
from skills_ref.models import LoadedSkill, SkillProperties
from skills_ref.parser import find_skill_md, parse_frontmatter, read_properties, read_skill
from skills_ref.prompt import escape_xml, skill_to_prompt_entry, to_prompt
from skills_ref.validator import validate, validate_metadata

__version__ = "0.1.5"

__all__ = [
    "ConfigError",
    "LoadedSkill",
    "SkillError",
    "SkillErrorKind",
    "SkillParseError",
    "SkillProperties",
    "SkillValidationError",
    "ValidationLimits",
    "__version__",
    "escape_xml",
    "find_skill_md",
    "load_validation_limits",
    "parse_frontmatter",
    "read_properties",
    "read_skill",
    "skill_to_prompt_entry",
    "to_prompt",
    "validate",
    "validate_metadata",
]
