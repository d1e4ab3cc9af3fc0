"""
Tests for soft enum classification of display labels.
"""

import pytest

from jobjumper.contexts.validation.soft_enums import (
    Level,
    RecommendationStatus,
    Sentiment,
    SkillStatus,
    SoftLabel,
)


@pytest.mark.unit
class TestSoftLabel:
    """Test SoftLabel.parse classification."""

    @pytest.mark.parametrize(
        "enum_cls, text, kind",
        [
            (Level, "High", Level.HIGH),
            (Level, "Low", Level.LOW),
            (RecommendationStatus, "Strong Apply", RecommendationStatus.STRONG_APPLY),
            (RecommendationStatus, "Do Not Apply", RecommendationStatus.DO_NOT_APPLY),
            (Sentiment, "Neutral", Sentiment.NEUTRAL),
        ],
    )
    def test_known_literal(self, enum_cls, text, kind):
        label = SoftLabel.parse(enum_cls, text)
        assert label.kind is kind
        assert label.text == text

    def test_surrounding_whitespace_ignored_for_kind(self):
        label = SoftLabel.parse(Level, " Medium ")
        assert label.kind is Level.MEDIUM
        assert label.text == " Medium "

    def test_unknown_literal_keeps_text(self):
        label = SoftLabel.parse(Level, "Very High")
        assert label.kind is Level.OTHER
        assert label.text == "Very High"

    def test_case_sensitive(self):
        assert SoftLabel.parse(Level, "high").kind is Level.OTHER

    def test_other_never_matches_by_text(self):
        label = SoftLabel.parse(Sentiment, "Other")
        assert label.kind is Sentiment.OTHER
        assert label.text == "Other"

    @pytest.mark.parametrize("value, text", [(None, ""), (5, "5"), (["High"], "High")])
    def test_non_string_values_coerced(self, value, text):
        label = SoftLabel.parse(Level, value)
        assert label.text == text

    def test_list_value_classified_after_coercion(self):
        assert SoftLabel.parse(Level, ["High"]).kind is Level.HIGH

    def test_empty_matches_missing_field(self):
        assert SoftLabel.empty(Level) == SoftLabel.parse(Level, None)

    def test_str_is_text(self):
        assert str(SoftLabel.parse(Level, "Medium-High")) == "Medium-High"


@pytest.mark.unit
class TestSkillStatus:
    """Skill status is closed: only 'matched' is matched."""

    @pytest.mark.parametrize("value", ["matched", "Matched", " MATCHED "])
    def test_matched(self, value):
        assert SkillStatus.parse(value) is SkillStatus.MATCHED

    @pytest.mark.parametrize("value", ["missing", "unsure", "", None, True, 1, ["matched"]])
    def test_everything_else_missing(self, value):
        assert SkillStatus.parse(value) is SkillStatus.MISSING
