"""Render the ``<available_skills>`` block injected into agent system prompts."""

from __future__ import annotations

import html
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from skills_ref.models import SkillProperties
from skills_ref.parser import find_skill_md, read_properties

EMPTY_PROMPT = "<available_skills>\n</available_skills>"


def escape_xml(text: str) -> str:
    """Escape ``& < > " '`` as ``&amp; &lt; &gt; &quot; &#39;``."""
    return html.escape(text, quote=True).replace("&#x27;", "&#39;")


def skill_to_prompt_entry(*, properties: SkillProperties, location: str) -> str:
    lines = [
        "<skill>",
        "<name>",
        escape_xml(properties.name),
        "</name>",
        "<description>",
        escape_xml(properties.description),
        "</description>",
        "<location>",
        escape_xml(location),
        "</location>",
        "</skill>",
    ]
    return "\n".join(lines)


def _render_skill(skill_dir: Path) -> str:
    normalized_dir = Path(skill_dir).resolve()
    properties = read_properties(normalized_dir)
    skill_md_path = find_skill_md(normalized_dir)
    location = str(skill_md_path) if skill_md_path else ""
    return skill_to_prompt_entry(properties=properties, location=location)


def to_prompt(skill_dirs: Sequence[Path | str], *, max_workers: int | None = None) -> str:
    """Generate the ``<available_skills>`` XML block for the given skill directories.

    Entries appear in the order of *skill_dirs*. Any skill that cannot be read
    aborts the whole render with its :class:`~skills_ref.errors.SkillError`.

    Args:
        skill_dirs: Skill directories to include.
        max_workers: When greater than 1, manifests are read on a thread pool
            of that size. Output order is unaffected.
    """
    if not skill_dirs:
        return EMPTY_PROMPT

    paths = [Path(skill_dir) for skill_dir in skill_dirs]
    if max_workers is not None and max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            entries = list(pool.map(_render_skill, paths))
    else:
        entries = [_render_skill(path) for path in paths]

    return "\n".join(["<available_skills>", *entries, "</available_skills>"])
