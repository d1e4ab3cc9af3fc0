"""
Integration tests for feature handlers and the normalize_response CLI.

Handlers read their failure policy from the packaged config/pipeline.yaml.
"""

import importlib.util
import json
import sys
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

from jobjumper.contexts.features import handlers
from jobjumper.contexts.normalization.exceptions import StructuralParseError
from jobjumper.contexts.validation.records import (
    CompanyResearchReport,
    FreeTextDocument,
    InterviewPrepKit,
    MatchScoreReport,
)
from jobjumper.utils.config import clear_config_cache

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "normalize_response.py"


@pytest.fixture(autouse=True)
def packaged_config(monkeypatch):
    """Use the packaged pipeline.yaml regardless of the environment."""
    monkeypatch.delenv("PIPELINE_CONFIG_PATH", raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.mark.integration
class TestHandlers:
    """Test handlers with their configured policies."""

    def test_score_match(self):
        record = handlers.score_match('```json\n{"score": 55, "gaps": ["Go"]}\n```')
        assert record == MatchScoreReport(score=55, gaps=["Go"])

    def test_analyze_job_fit_propagates(self):
        with pytest.raises(StructuralParseError):
            handlers.analyze_job_fit("The job posting could not be read.")

    def test_score_match_truncated_propagates(self):
        with pytest.raises(StructuralParseError):
            handlers.score_match('{"score": 72, "breakdown": {"tech": 8}, "summary": "Strong candid')

    def test_research_company_propagates(self):
        with pytest.raises(StructuralParseError):
            handlers.research_company(None)

    def test_research_company(self):
        record = handlers.research_company('{"companyName": "Acme", "sources": []}')
        assert record == CompanyResearchReport(company_name="Acme")

    def test_prepare_interview_substitutes(self):
        record = handlers.prepare_interview("no json at all")
        assert isinstance(record, InterviewPrepKit)
        assert record.company_research.mission == "Failed to generate."
        assert record.technical.questions == []

    def test_prepare_interview_policy_override(self):
        with pytest.raises(StructuralParseError):
            handlers.prepare_interview("no json at all", policy="propagate")

    def test_enhance_resume(self):
        text = 'Here is the tailored resume:\n{"summary": "**ML** engineer", "skills": ["Python", "SQL"]}'
        record = handlers.enhance_resume(text)
        assert record.summary == "ML engineer"
        assert record.skills == "Python, SQL"

    def test_generate_document(self):
        document = handlers.generate_document("Sure, here is your cover letter:\nDear Hiring Manager,")
        assert document == FreeTextDocument(content="Dear Hiring Manager,")

    def test_generate_document_empty_propagates(self):
        with pytest.raises(StructuralParseError):
            handlers.generate_document("   ")

    def test_rewrite_text(self):
        document = handlers.rewrite_text("I have rewritten it: **Led** a team of 5", "Managed 5 people")
        assert document.content == "Led a team of 5"

    def test_rewrite_text_keeps_original_on_failure(self):
        document = handlers.rewrite_text(None, "Managed 5 people")
        assert document.content == "Managed 5 people"


def load_cli():
    """Import scripts/normalize_response.py as a module."""
    spec = importlib.util.spec_from_file_location("normalize_response", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def cli_app():
    yield load_cli().app
    # The CLI replaces loguru sinks; restore the default one
    logger.remove()
    logger.add(sys.stderr)


@pytest.mark.integration
class TestNormalizeResponseCLI:
    """Test the normalize_response CLI end to end."""

    def test_prints_record_json(self, cli_app, tmp_path):
        input_file = tmp_path / "response.txt"
        input_file.write_text('```json\n{"score": 72, "summary": "Good fit"}\n```')

        result = CliRunner().invoke(
            cli_app, ["match_score", str(input_file), "--log-dir", str(tmp_path / "logs")]
        )

        assert result.exit_code == 0
        assert '"score": 72' in result.output
        assert '"summary": "Good fit"' in result.output
        assert (tmp_path / "logs" / "normalize.log").exists()

    def test_reads_stdin(self, cli_app, tmp_path):
        result = CliRunner().invoke(
            cli_app,
            ["rewrite", "-", "--original", "Kept", "--log-dir", str(tmp_path)],
            input="",
        )
        assert result.exit_code == 0
        assert '"content": "Kept"' in result.output

    def test_structural_failure_exit_code(self, cli_app, tmp_path):
        input_file = tmp_path / "response.txt"
        input_file.write_text("no json here")

        result = CliRunner().invoke(
            cli_app, ["job_fit", str(input_file), "--log-dir", str(tmp_path / "logs")]
        )

        assert result.exit_code == 1

    def test_policy_override(self, cli_app, tmp_path):
        input_file = tmp_path / "response.txt"
        input_file.write_text("no json here")

        result = CliRunner().invoke(
            cli_app,
            [
                "job_fit",
                str(input_file),
                "--policy",
                "substitute_default",
                "--log-dir",
                str(tmp_path / "logs"),
            ],
        )

        assert result.exit_code == 0
        assert '"reason": "Failed to generate."' in result.output

    def test_unknown_feature(self, cli_app, tmp_path):
        result = CliRunner().invoke(cli_app, ["cover_letter", "-", "--log-dir", str(tmp_path)])
        assert result.exit_code != 0

    def test_missing_input_creates_no_log_dir(self, cli_app, tmp_path):
        log_dir = tmp_path / "logs"

        result = CliRunner().invoke(
            cli_app, ["job_fit", str(tmp_path / "missing.txt"), "--log-dir", str(log_dir)]
        )

        assert result.exit_code != 0
        assert not log_dir.exists()

    def test_log_file_records_feature(self, cli_app, tmp_path):
        input_file = tmp_path / "response.txt"
        input_file.write_text(json.dumps({"score": 1}))
        log_dir = tmp_path / "logs"

        CliRunner().invoke(cli_app, ["match_score", str(input_file), "--log-dir", str(log_dir)])

        log_text = (log_dir / "normalize.log").read_text()
        assert "Feature: match_score" in log_text
        assert "[features] match_score: produced MatchScoreReport" in log_text
