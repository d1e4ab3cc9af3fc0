"""
Regex patterns for cleaning model output.

Pattern classes follow the convention from the other contexts:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
"""

import re
from dataclasses import dataclass

BULLET = "•"

# Conversational openers the model puts before the actual content
PREAMBLE_OPENERS = (
    r"here is",
    r"here's the",
    r"sure,",
    r"i have rewritten",
    r"the improved version",
    r"below is",
)


@dataclass(frozen=True)
class FencePatterns:
    """Markdown code-fence markers (```json, ```python, ```)."""

    CODE_FENCE: re.Pattern = re.compile(r"```[A-Za-z0-9_+-]*")


@dataclass(frozen=True)
class PreamblePatterns:
    """
    Leading conversational sentence up through the first colon on its line.

    "Sure, here's the result:\\n..." loses everything up to and including ":".
    """

    LEADING_OPENER: re.Pattern = re.compile(
        r"\A\s*(?:" + "|".join(PREAMBLE_OPENERS) + r")[^:\n]*:[ \t]*\n?",
        re.IGNORECASE,
    )


@dataclass(frozen=True)
class EmphasisPatterns:
    """
    Markdown emphasis markers. Each pattern captures the enclosed text in group 1.

    The single-star rule refuses a '*' that touches another '*', so '**bold**'
    is left for BOLD_STARS instead of being split into two italics.
    Underscore rules require non-word characters around the markers so
    snake_case identifiers survive.
    """

    BOLD_STARS: re.Pattern = re.compile(r"\*\*(?=\S)(.+?)(?<=\S)\*\*")
    BOLD_UNDERSCORES: re.Pattern = re.compile(r"(?<!\w)__(?=\S)(.+?)(?<=\S)__(?!\w)")
    ITALIC_STAR: re.Pattern = re.compile(r"(?<!\*)\*(?![\s*])(.+?)(?<![\s*])\*(?!\*)")
    ITALIC_UNDERSCORE: re.Pattern = re.compile(r"(?<![\w_])_(?![\s_])(.+?)(?<![\s_])_(?![\w_])")


@dataclass(frozen=True)
class BulletPatterns:
    """List items written with '-' or '*' markers (indentation kept in group 1)."""

    DASH_OR_STAR_ITEM: re.Pattern = re.compile(r"^([ \t]*)[-*][ \t]+", re.MULTILINE)
