"""
Tests for resume-shaped field normalizers.
"""

import pytest

from jobjumper.contexts.normalization.domain_normalizers import (
    join_bullet_lines,
    normalize_descriptions,
    normalize_skills,
)


@pytest.mark.unit
class TestJoinBulletLines:
    """Test bullet block construction."""

    def test_prefix_added_once(self):
        assert join_bullet_lines(["did X", "• did Y"]) == "• did X\n• did Y"

    def test_lines_trimmed_and_empty_dropped(self):
        assert join_bullet_lines(["  did X  ", "", "   ", None]) == "• did X"

    def test_non_string_lines_coerced(self):
        assert join_bullet_lines([{"text": "did Z"}, 3]) == "• did Z\n• 3"

    def test_empty(self):
        assert join_bullet_lines([]) == ""


@pytest.mark.unit
class TestNormalizeDescriptions:
    """Test list-valued description collapsing."""

    def test_nested_descriptions(self):
        value = {
            "experience": [{"role": "Engineer", "description": ["did X", "• did Y"]}],
            "projects": [{"name": "P", "description": ["built it"]}],
        }
        assert normalize_descriptions(value) == {
            "experience": [{"role": "Engineer", "description": "• did X\n• did Y"}],
            "projects": [{"name": "P", "description": "• built it"}],
        }

    def test_string_description_untouched(self):
        value = {"experience": [{"description": "Led the team"}]}
        assert normalize_descriptions(value) == value

    def test_top_level_description(self):
        assert normalize_descriptions({"description": ["a"]}) == {"description": "• a"}

    def test_input_not_mutated(self):
        value = {"experience": [{"description": ["a"]}]}
        normalize_descriptions(value)
        assert value == {"experience": [{"description": ["a"]}]}

    @pytest.mark.parametrize("value", [None, "text", 3, ["description"]])
    def test_non_mapping_passthrough(self, value):
        assert normalize_descriptions(value) == value


@pytest.mark.unit
class TestNormalizeSkills:
    """Test skills list joining."""

    def test_list_joined(self):
        assert normalize_skills({"skills": ["Python", "SQL"]}) == {"skills": "Python, SQL"}

    def test_blank_entries_dropped(self):
        assert normalize_skills({"skills": [" Python ", "", None, "Go"]}) == {"skills": "Python, Go"}

    def test_string_skills_untouched(self):
        assert normalize_skills({"skills": "Python, SQL"}) == {"skills": "Python, SQL"}

    def test_other_fields_kept(self):
        result = normalize_skills({"skills": ["Go"], "summary": "s"})
        assert result == {"skills": "Go", "summary": "s"}

    @pytest.mark.parametrize("value", [None, ["Python"], "skills"])
    def test_non_mapping_passthrough(self, value):
        assert normalize_skills(value) == value
