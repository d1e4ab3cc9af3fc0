"""
Text processing utilities shared across contexts.

Balanced-delimiter scanning and display helpers used when pulling structured
payloads out of free-form model output.
"""

from typing import Iterator, Optional, Tuple


def iter_balanced_spans(
    text: str,
    open_char: str = "{",
    close_char: str = "}",
    quote_char: str = '"',
    escape_char: str = "\\",
) -> Iterator[Tuple[int, int]]:
    """
    Yield (start, end) for each top-level balanced span, left to right.

    Single pass with a depth counter. Inside a span, delimiters within quoted
    string literals are ignored and escape sequences in those literals are
    skipped, so a value such as "a } b" or "say \\"}\\"" does not end the span
    early. Outside any span, quotes and stray closing delimiters are prose.

    An opening delimiter that never closes swallows the rest of the text:
    everything after it is nested inside it, so nothing more is yielded.
    Truncated output therefore never yields one of its inner spans as if it
    were the whole payload.

    Example:
        >>> list(iter_balanced_spans("a {b} c {d {e}} f"))
        [(2, 5), (8, 15)]
        >>> list(iter_balanced_spans('{"a": {"b": 1}, "c": '))
        []
    """
    depth = 0
    start = 0
    in_string = False
    escaped = False

    for pos, char in enumerate(text):
        if depth == 0:
            if char == open_char:
                start = pos
                depth = 1
            continue
        if in_string:
            if escaped:
                escaped = False
            elif char == escape_char:
                escaped = True
            elif char == quote_char:
                in_string = False
        elif char == quote_char:
            in_string = True
        elif char == open_char:
            depth += 1
        elif char == close_char:
            depth -= 1
            if depth == 0:
                yield start, pos + 1


def outermost_span(
    text: str, open_char: str = "{", close_char: str = "}"
) -> Optional[Tuple[int, int]]:
    """
    Return (start, end) from the first open_char to the last close_char.

    This is the naive heuristic (no string awareness); callers use it only as
    a last resort after balanced scanning.
    """
    start = text.find(open_char)
    end = text.rfind(close_char)
    if start == -1 or end == -1 or end < start:
        return None
    return start, end + 1


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Example:
        >>> truncate_display("short", 10)
        'short'
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."
