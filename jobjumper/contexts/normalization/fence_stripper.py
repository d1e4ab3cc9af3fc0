"""
Fence stripper for model text output.

Removes code fences, conversational preamble and markdown emphasis, and
normalizes list markers to a single bullet character. Used directly on
free-text responses and (without fence removal) on every string leaf of a
parsed JSON payload.

Design principle: every rule only ever removes characters or turns '-'/'*'
into '•', so reapplying the rule set until nothing changes always terminates
and makes the cleanup idempotent.
"""

from typing import Any, Callable, List

from jobjumper.contexts.normalization.patterns import (
    BULLET,
    BulletPatterns,
    EmphasisPatterns,
    FencePatterns,
    PreamblePatterns,
)

Rule = Callable[[str], str]


def remove_code_fences(text: str) -> str:
    """Remove ```lang and ``` markers, keeping the fenced content."""
    return FencePatterns.CODE_FENCE.sub("", text)


def remove_preamble(text: str) -> str:
    """
    Remove a leading conversational opener up through its colon.

    Example:
        >>> remove_preamble("Here is the improved summary: Led a team of 5")
        'Led a team of 5'
    """
    return PreamblePatterns.LEADING_OPENER.sub("", text, count=1)


def normalize_bullets(text: str) -> str:
    """
    Turn '- item' and '* item' lines into '• item' lines.

    Example:
        >>> normalize_bullets("- one\\n  * two")
        '• one\\n  • two'
    """
    return BulletPatterns.DASH_OR_STAR_ITEM.sub(rf"\1{BULLET} ", text)


def remove_emphasis(text: str) -> str:
    """
    Remove **bold**, __bold__, *italic* and _italic_ markers, keeping the text.

    Bold is removed before italics so '**x**' never degrades into '*x*' pairs.
    """
    text = EmphasisPatterns.BOLD_STARS.sub(r"\1", text)
    text = EmphasisPatterns.BOLD_UNDERSCORES.sub(r"\1", text)
    text = EmphasisPatterns.ITALIC_STAR.sub(r"\1", text)
    text = EmphasisPatterns.ITALIC_UNDERSCORE.sub(r"\1", text)
    return text


# Leaf cleanup applied to every string value
CLEANUP_RULES: List[Rule] = [remove_preamble, normalize_bullets, remove_emphasis]

# Full stripping for raw free-text responses
STRIP_RULES: List[Rule] = [remove_code_fences, *CLEANUP_RULES]


def _apply_until_stable(text: str, rules: List[Rule]) -> str:
    """Apply rules in order, repeating the pass until the text stops changing."""
    while True:
        result = text
        for rule in rules:
            result = rule(result)
        result = result.strip()
        if result == text:
            return result
        text = result


def clean_text(text: Any) -> str:
    """
    Clean a single string value: preamble, bullets, emphasis.

    Non-string and empty input returns "". Never raises.
    """
    if not isinstance(text, str) or not text:
        return ""
    return _apply_until_stable(text, CLEANUP_RULES)


def strip(text: Any) -> str:
    """
    Strip a raw model response down to its content.

    Removes code fences, leading conversational preamble ("Sure, here's the
    result:"), markdown emphasis, and normalizes list markers to '• '.
    Idempotent: strip(strip(x)) == strip(x). Non-string and empty input
    returns "". Never raises.

    Example:
        >>> strip("Sure, here is your bullet list:\\n- **Led** migration\\n- Cut costs")
        '• Led migration\\n• Cut costs'
    """
    if not isinstance(text, str) or not text:
        return ""
    return _apply_until_stable(text, STRIP_RULES)
