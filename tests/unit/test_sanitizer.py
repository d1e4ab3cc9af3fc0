"""
Tests for the recursive text sanitizer.
"""

import copy

import pytest

from jobjumper.contexts.normalization.sanitizer import sanitize


@pytest.mark.unit
class TestSanitize:
    """Test string-leaf cleanup over JSON trees."""

    def test_string_leaves_cleaned(self):
        value = {"summary": "**Strong** fit", "score": 80, "tags": ["- a"]}
        assert sanitize(value) == {"summary": "Strong fit", "score": 80, "tags": ["• a"]}

    def test_non_string_scalars_unchanged(self):
        value = {"a": None, "b": True, "c": 1.5, "d": [0, False]}
        assert sanitize(value) == value

    def test_top_level_string(self):
        assert sanitize("Here is the summary: _done_") == "done"

    def test_top_level_scalar(self):
        assert sanitize(None) is None
        assert sanitize(7) == 7

    def test_keys_untouched(self):
        assert sanitize({"**key**": "x"}) == {"**key**": "x"}

    def test_input_not_mutated(self):
        value = {"items": [{"text": "**x**"}], "note": "*y*"}
        original = copy.deepcopy(value)
        sanitize(value)
        assert value == original

    def test_shape_preserved(self):
        value = {"a": [[], {}, ["*b*", {"c": ["- d"]}]]}
        assert sanitize(value) == {"a": [[], {}, ["b", {"c": ["• d"]}]]}

    def test_idempotent(self):
        value = {"a": ["- **x**", {"b": "Sure, here it is:\n_y_"}], "n": 3}
        once = sanitize(value)
        assert sanitize(once) == once

    def test_idempotent_on_generated_values(self, json_corpus):
        for value in json_corpus:
            once = sanitize(value)
            assert sanitize(once) == once, repr(value)

    def test_deep_nesting(self):
        value = "**x**"
        for _ in range(50000):
            value = [value]
        result = sanitize(value)
        for _ in range(50000):
            assert isinstance(result, list) and len(result) == 1
            result = result[0]
        assert result == "x"
