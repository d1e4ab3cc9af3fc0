"""
Recursive text sanitizer for parsed JSON payloads.

Applies the fence stripper's cleanup rules (preamble, bullets, emphasis) to
every string leaf while leaving the tree's shape and non-string scalars alone.
"""

from typing import Any, List, Tuple, Union

from jobjumper.contexts.normalization.fence_stripper import clean_text
from jobjumper.contexts.normalization.json_types import JSONValue


def sanitize(value: JSONValue) -> JSONValue:
    """
    Return a copy of value with every string leaf cleaned.

    Lists and dicts are rebuilt (the input is not mutated) with the same keys
    and lengths; None, bools and numbers pass through unchanged. The walk uses
    an explicit stack, so nesting depth is not limited by recursion.
    Idempotent: sanitize(sanitize(v)) == sanitize(v).

    Example:
        >>> sanitize({"summary": "**Strong** fit", "score": 80, "tags": ["- a"]})
        {'summary': 'Strong fit', 'score': 80, 'tags': ['• a']}
    """
    root: List[Any] = [value]
    stack: List[Tuple[Union[list, dict], Any, Any]] = [(root, 0, value)]

    while stack:
        parent, key, node = stack.pop()
        if isinstance(node, str):
            parent[key] = clean_text(node)
        elif isinstance(node, list):
            copy = list(node)
            parent[key] = copy
            stack.extend((copy, index, item) for index, item in enumerate(copy))
        elif isinstance(node, dict):
            copy = dict(node)
            parent[key] = copy
            stack.extend((copy, child_key, item) for child_key, item in copy.items())

    return root[0]
