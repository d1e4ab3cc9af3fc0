"""
JSON locator for model output.

Generative models wrap JSON in prose, code fences, or both. The locator
recovers the object without requiring the prompt to be obeyed exactly:

1. Remove code-fence markers.
2. Scan for top-level balanced {...} spans, ignoring braces inside string
   literals, and parse each in order. The first non-empty object wins; an
   empty "{}" is used only when nothing else parses. A "{" that never closes
   ends the scan, so truncated output is not mistaken for one of its inner
   objects.
3. As a last resort, parse the span from the first '{' to the last '}'.

Failure is reported as a value (LocateResult), not an exception, so callers
choose their own policy.
"""

import json
from dataclasses import dataclass
from typing import Any, Optional

from jobjumper.contexts.normalization import logger
from jobjumper.contexts.normalization.exceptions import ParseFailure, StructuralParseError
from jobjumper.contexts.normalization.fence_stripper import remove_code_fences
from jobjumper.contexts.normalization.json_types import JSONValue
from jobjumper.utils.text_processing import iter_balanced_spans, outermost_span


@dataclass(frozen=True)
class LocateResult:
    """
    Outcome of locating JSON in model output.

    Exactly one of value/failure is meaningful: when failure is None the
    located value is in value (which may itself be any JSON value).
    """

    value: JSONValue = None
    failure: Optional[ParseFailure] = None
    source_text: str = ""

    @property
    def ok(self) -> bool:
        return self.failure is None

    def unwrap(self) -> JSONValue:
        """Return the value or raise StructuralParseError."""
        if self.failure is not None:
            raise StructuralParseError(
                "Could not find a JSON object in the model output.",
                reason=self.failure,
                snippet=self.source_text,
            )
        return self.value


def _reject_constant(name: str) -> Any:
    # NaN / Infinity / -Infinity are not JSON
    raise ValueError(f"Non-finite JSON constant: {name}")


def _try_parse(candidate: str) -> Optional[JSONValue]:
    """Parse candidate text, returning None on any parse failure."""
    try:
        return json.loads(candidate, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        # json.JSONDecodeError is a ValueError subclass
        return None


def locate(text: Optional[str]) -> LocateResult:
    """
    Find and parse the JSON object embedded in model output.

    Args:
        text: Raw model text (None when the model returned nothing)

    Returns:
        LocateResult with the parsed value, or with failure set to
        EMPTY_RESPONSE, NO_OBJECT, or INVALID_JSON. Never raises.

    Example:
        >>> locate('Sure! ```json\\n{"score": 72}\\n```').value
        {'score': 72}
        >>> locate("no braces here").failure
        <ParseFailure.NO_OBJECT: 'no_object'>
    """
    if not isinstance(text, str) or not text.strip():
        logger.log_structural_failure(ParseFailure.EMPTY_RESPONSE.value, "")
        return LocateResult(failure=ParseFailure.EMPTY_RESPONSE, source_text="")

    cleaned = remove_code_fences(text)
    empty_match = None

    for start, end in iter_balanced_spans(cleaned):
        # A parsed object is never None, so None means the span was not JSON
        value = _try_parse(cleaned[start:end])
        if value is None:
            continue
        if not value:
            # "{}" in prose before the payload; keep looking
            empty_match = empty_match or (start, end, value)
            continue
        logger.log_located(start, end, len(cleaned))
        return LocateResult(value=value, source_text=text)

    if empty_match is not None:
        start, end, value = empty_match
        logger.log_located(start, end, len(cleaned))
        return LocateResult(value=value, source_text=text)

    span = outermost_span(cleaned)
    if span is not None:
        start, end = span
        value = _try_parse(cleaned[start:end])
        if value is not None:
            logger.log_located(start, end, len(cleaned), fallback=True)
            return LocateResult(value=value, source_text=text)

    # Any opening brace means something object-like was there but unusable
    failure = ParseFailure.INVALID_JSON if "{" in cleaned else ParseFailure.NO_OBJECT
    logger.log_structural_failure(failure.value, text)
    return LocateResult(failure=failure, source_text=text)
