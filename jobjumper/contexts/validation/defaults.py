"""
Default values for validated records.

Scalar defaults are the record dataclasses' field defaults (0, "", []); this
module holds the limits and placeholder builders shared by the validators
and the pipeline runner. Downstream consumers branch on these values, so they
are part of the contract.
"""

from typing import Callable, Dict

from jobjumper.contexts.validation.records import (
    CompanyBrief,
    CompanyResearchReport,
    FreeTextDocument,
    InterviewPrepKit,
    JobFitAnalysis,
    MatchScoreReport,
    Recommendation,
    Record,
    ResearchSummary,
    ResumeRecord,
)

# Best-effort enrichment lists are truncated, not rejected
MAX_SOURCES = 10
MAX_EMPLOYEE_VOICES = 5

DEFAULT_PLACEHOLDER_TEXT = "Failed to generate."


def _match_score_placeholder(text: str) -> MatchScoreReport:
    return MatchScoreReport(summary=text)


def _job_fit_placeholder(text: str) -> JobFitAnalysis:
    return JobFitAnalysis(recommendation=Recommendation(reason=text))


def _company_research_placeholder(text: str) -> CompanyResearchReport:
    return CompanyResearchReport(summary=ResearchSummary(verdict=text))


def _interview_prep_placeholder(text: str) -> InterviewPrepKit:
    return InterviewPrepKit(company_research=CompanyBrief(mission=text))


def _resume_placeholder(text: str) -> ResumeRecord:
    return ResumeRecord(summary=text)


def _document_placeholder(text: str) -> FreeTextDocument:
    return FreeTextDocument(content=text)


# Shape name -> builder of an all-defaults record whose headline field carries
# the placeholder text
PLACEHOLDER_BUILDERS: Dict[str, Callable[[str], Record]] = {
    "match_score": _match_score_placeholder,
    "job_fit": _job_fit_placeholder,
    "company_research": _company_research_placeholder,
    "interview_prep": _interview_prep_placeholder,
    "resume": _resume_placeholder,
    "document": _document_placeholder,
}
