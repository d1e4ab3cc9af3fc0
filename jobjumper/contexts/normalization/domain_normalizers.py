"""
Domain normalizers for resume-like payloads.

Run after sanitize() and before validation: they reshape fields the model
tends to return as lists into the single strings the records expect.
"""

from typing import Any, List

from jobjumper.contexts.normalization.coercion import ensure_string
from jobjumper.contexts.normalization.json_types import JSONValue
from jobjumper.contexts.normalization.patterns import BULLET

DESCRIPTION_KEY = "description"
SKILLS_KEY = "skills"
SKILLS_SEPARATOR = ", "


def join_bullet_lines(lines: List[Any]) -> str:
    """
    Join lines into one '• '-prefixed block, one bullet per line.

    Lines already starting with the bullet (after trimming) are not prefixed
    again. Empty lines are dropped.

    Example:
        >>> join_bullet_lines(["did X", "• did Y", ""])
        '• did X\\n• did Y'
    """
    out = []
    for line in lines:
        text = ensure_string(line).strip()
        if not text:
            continue
        out.append(text if text.startswith(BULLET) else f"{BULLET} {text}")
    return "\n".join(out)


def normalize_descriptions(value: JSONValue) -> JSONValue:
    """
    Collapse every list-valued "description" field into a bullet block.

    Applies at any depth (experience[].description, projects[].description).
    Non-list descriptions are left as they are. Returns a new value.

    Example:
        >>> normalize_descriptions({"experience": [{"description": ["did X", "• did Y"]}]})
        {'experience': [{'description': '• did X\\n• did Y'}]}
    """
    root: List[Any] = [value]
    stack = [(root, 0, value)]

    while stack:
        parent, key, node = stack.pop()
        if isinstance(node, list):
            copy = list(node)
            parent[key] = copy
            stack.extend((copy, index, item) for index, item in enumerate(copy))
        elif isinstance(node, dict):
            copy = dict(node)
            parent[key] = copy
            for child_key, item in copy.items():
                if child_key == DESCRIPTION_KEY and isinstance(item, list):
                    copy[child_key] = join_bullet_lines(item)
                else:
                    stack.append((copy, child_key, item))

    return root[0]


def normalize_skills(value: JSONValue) -> JSONValue:
    """
    Join a top-level list-valued "skills" field into a comma-separated line.

    Example:
        >>> normalize_skills({"skills": ["Python", "SQL"]})
        {'skills': 'Python, SQL'}
    """
    if not isinstance(value, dict) or not isinstance(value.get(SKILLS_KEY), list):
        return value
    skills = [ensure_string(item).strip() for item in value[SKILLS_KEY]]
    return {**value, SKILLS_KEY: SKILLS_SEPARATOR.join(s for s in skills if s)}
