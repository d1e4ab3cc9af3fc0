"""
Soft enums for presentation labels.

Priority, risk level, sentiment and similar fields are free-form strings from
the model that the UI styles by comparing against a few known literals. A
SoftLabel keeps the literal text for display and classifies it into a closed
enum with an OTHER member, so renderers can match on the kind exhaustively.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Type, TypeVar

from jobjumper.contexts.normalization.coercion import ensure_string


class Level(Enum):
    """High/Medium/Low scale (competition, risk, apply priority)."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    OTHER = "Other"


class RecommendationStatus(Enum):
    STRONG_APPLY = "Strong Apply"
    CONDITIONAL_APPLY = "Conditional Apply"
    DO_NOT_APPLY = "Do Not Apply"
    OTHER = "Other"


class Sentiment(Enum):
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"
    OTHER = "Other"


class SkillStatus(str, Enum):
    """Closed enum: anything that is not 'matched' counts as 'missing'."""

    MATCHED = "matched"
    MISSING = "missing"

    @classmethod
    def parse(cls, value: Any) -> "SkillStatus":
        if isinstance(value, str) and value.strip().lower() == cls.MATCHED.value:
            return cls.MATCHED
        return cls.MISSING


E = TypeVar("E", bound=Enum)


@dataclass(frozen=True)
class SoftLabel(Generic[E]):
    """
    A display label classified against a closed enum.

    Attributes:
        kind: Matching enum member, or the enum's OTHER member
        text: Original label text (what the UI renders)
    """

    kind: E
    text: str = ""

    @classmethod
    def parse(cls, enum_cls: Type[E], value: Any) -> "SoftLabel[E]":
        """
        Classify value against enum_cls.

        Matching is exact on the trimmed text (the UI compares literals), and
        the OTHER member never matches by text. Never raises.

        Example:
            >>> SoftLabel.parse(Level, "High").kind
            <Level.HIGH: 'High'>
            >>> label = SoftLabel.parse(Level, "Very High")
            >>> label.kind, label.text
            (<Level.OTHER: 'Other'>, 'Very High')
        """
        text = ensure_string(value)
        trimmed = text.strip()
        for member in enum_cls:
            if member.name != "OTHER" and member.value == trimmed:
                return cls(kind=member, text=text)
        return cls(kind=enum_cls["OTHER"], text=text)

    @classmethod
    def empty(cls, enum_cls: Type[E]) -> "SoftLabel[E]":
        """Default label for a missing field."""
        return cls(kind=enum_cls["OTHER"], text="")

    def __str__(self) -> str:
        return self.text
