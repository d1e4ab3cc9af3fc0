"""
Record shape registry and pipeline runner.

Ties the normalization stages to a record shape:

    raw text -> locate -> sanitize -> shape normalizers -> shape validator -> record

What happens when no JSON object can be located is an explicit argument
(OnStructuralFailure) rather than a convention of each call site.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

from jobjumper.contexts.features import logger
from jobjumper.contexts.normalization.domain_normalizers import (
    normalize_descriptions,
    normalize_skills,
)
from jobjumper.contexts.normalization.exceptions import (
    ParseFailure,
    StructuralParseError,
    UnknownShapeError,
)
from jobjumper.contexts.normalization.fence_stripper import strip
from jobjumper.contexts.normalization.json_locator import locate
from jobjumper.contexts.normalization.json_types import JSONValue
from jobjumper.contexts.normalization.sanitizer import sanitize
from jobjumper.contexts.validation.defaults import DEFAULT_PLACEHOLDER_TEXT, PLACEHOLDER_BUILDERS
from jobjumper.contexts.validation.records import FreeTextDocument, Record
from jobjumper.contexts.validation.validators import (
    validate_company_research,
    validate_document,
    validate_interview_prep,
    validate_job_fit,
    validate_match_score,
    validate_resume,
)

Normalizer = Callable[[JSONValue], JSONValue]


class OnStructuralFailure(str, Enum):
    """What to do when the model output contains no usable JSON object."""

    # Raise StructuralParseError; the UI shows "operation failed, try again"
    PROPAGATE = "propagate"
    # Return an all-defaults record carrying placeholder text
    SUBSTITUTE_DEFAULT = "substitute_default"


@dataclass(frozen=True)
class RecordShape:
    """
    A record shape the pipeline can produce.

    Attributes:
        name: Registry key (e.g., "job_fit")
        validator: Generic JSON value -> record
        normalizers: Applied in order after sanitizing, before validation
    """

    name: str
    validator: Callable[[JSONValue], Record]
    normalizers: List[Normalizer] = field(default_factory=list)

    def placeholder(self, text: Optional[str] = None) -> Record:
        """All-defaults record whose headline field carries text."""
        return PLACEHOLDER_BUILDERS[self.name](text or DEFAULT_PLACEHOLDER_TEXT)


SHAPES: Dict[str, RecordShape] = {
    shape.name: shape
    for shape in (
        RecordShape("match_score", validate_match_score),
        RecordShape("job_fit", validate_job_fit),
        RecordShape("company_research", validate_company_research),
        RecordShape("interview_prep", validate_interview_prep),
        RecordShape("resume", validate_resume, [normalize_descriptions, normalize_skills]),
        RecordShape("document", validate_document),
    )
}


def get_shape(name: str) -> RecordShape:
    """
    Look up a registered record shape.

    Raises:
        UnknownShapeError: If name is not registered
    """
    try:
        return SHAPES[name]
    except KeyError:
        available = ", ".join(sorted(SHAPES))
        raise UnknownShapeError(f"Unknown record shape '{name}'. Available: {available}") from None


def run_pipeline(
    raw_text: Optional[str],
    shape: Union[str, RecordShape],
    on_failure: Union[str, OnStructuralFailure] = OnStructuralFailure.PROPAGATE,
    placeholder_text: Optional[str] = None,
    feature: Optional[str] = None,
) -> Record:
    """
    Normalize raw model text into a typed record.

    Args:
        raw_text: Model output (None when the model returned nothing)
        shape: RecordShape or registered shape name
        on_failure: Policy when no JSON object can be located
        placeholder_text: Text for the substituted record (SUBSTITUTE_DEFAULT only)
        feature: Name used in log messages (defaults to the shape name)

    Returns:
        Fully-populated record of the shape's type

    Raises:
        StructuralParseError: If nothing parseable was found and on_failure is PROPAGATE
        UnknownShapeError: If shape is an unregistered name
    """
    if isinstance(shape, str):
        shape = get_shape(shape)
    policy = OnStructuralFailure(on_failure)
    feature = feature or shape.name

    logger.log_pipeline_start(feature, shape.name, policy.value, len(raw_text or ""))

    located = locate(raw_text)
    if not located.ok:
        if policy is OnStructuralFailure.PROPAGATE:
            logger.log_propagated(feature, located.failure.value)
            located.unwrap()  # raises StructuralParseError
        logger.log_substituted(feature, located.failure.value)
        return shape.placeholder(placeholder_text)

    value = sanitize(located.value)
    for normalize in shape.normalizers:
        value = normalize(value)

    record = shape.validator(value)
    logger.log_pipeline_result(feature, record)
    return record


def normalize_text_response(
    raw_text: Optional[str],
    on_failure: Union[str, OnStructuralFailure] = OnStructuralFailure.PROPAGATE,
    fallback: Optional[str] = None,
    feature: str = "document",
) -> FreeTextDocument:
    """
    Normalize a free-text response (cover letter, rewritten summary, ...).

    The text is stripped of fences, preamble and markdown emphasis. A response
    that is empty after stripping is a structural failure.

    Args:
        raw_text: Model output (None when the model returned nothing)
        on_failure: Policy when the stripped text is empty
        fallback: Content of the substituted document (SUBSTITUTE_DEFAULT only;
                  defaults to the placeholder text)
        feature: Name used in log messages

    Raises:
        StructuralParseError: If the text is empty and on_failure is PROPAGATE
    """
    policy = OnStructuralFailure(on_failure)
    logger.log_pipeline_start(feature, "document", policy.value, len(raw_text or ""))

    content = strip(raw_text)
    if content:
        document = FreeTextDocument(content=content)
        logger.log_pipeline_result(feature, document)
        return document

    reason = ParseFailure.EMPTY_RESPONSE
    if policy is OnStructuralFailure.PROPAGATE:
        logger.log_propagated(feature, reason.value)
        raise StructuralParseError("The model returned no text.", reason=reason, snippet=raw_text)

    logger.log_substituted(feature, reason.value)
    return FreeTextDocument(content=fallback if fallback is not None else DEFAULT_PLACEHOLDER_TEXT)
