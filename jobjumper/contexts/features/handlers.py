"""
Feature handlers.

One function per dashboard feature: raw model text in, typed record out. The
failure policy and placeholder text come from config/pipeline.yaml unless the
caller overrides the policy.

Example:
    from jobjumper.contexts.features.handlers import analyze_job_fit

    analysis = analyze_job_fit(response_text)
    print(analysis.recommendation.status.kind)
"""

from typing import Optional, Union

from jobjumper.contexts.features.pipeline import (
    OnStructuralFailure,
    normalize_text_response,
    run_pipeline,
)
from jobjumper.contexts.validation.records import (
    CompanyResearchReport,
    FreeTextDocument,
    InterviewPrepKit,
    JobFitAnalysis,
    MatchScoreReport,
    ResumeRecord,
)
from jobjumper.utils.config import get_pipeline_config

Policy = Optional[Union[str, OnStructuralFailure]]


def _resolve_policy(feature: str, policy: Policy) -> OnStructuralFailure:
    if policy is None:
        policy = get_pipeline_config().policy_for(feature)
    return OnStructuralFailure(policy)


def _run(raw_text: Optional[str], feature: str, shape: str, policy: Policy):
    return run_pipeline(
        raw_text,
        shape,
        on_failure=_resolve_policy(feature, policy),
        placeholder_text=get_pipeline_config().placeholder_text,
        feature=feature,
    )


def score_match(raw_text: Optional[str], policy: Policy = None) -> MatchScoreReport:
    """Resume-vs-job match score with strengths, gaps and recommendations."""
    return _run(raw_text, "match_score", "match_score", policy)


def analyze_job_fit(raw_text: Optional[str], policy: Policy = None) -> JobFitAnalysis:
    """Full job-fit analysis (key info, match dimensions, skills, recommendation)."""
    return _run(raw_text, "job_fit", "job_fit", policy)


def research_company(raw_text: Optional[str], policy: Policy = None) -> CompanyResearchReport:
    """Company research report (intelligence, culture, compensation, reviews, sources)."""
    return _run(raw_text, "company_research", "company_research", policy)


def prepare_interview(raw_text: Optional[str], policy: Policy = None) -> InterviewPrepKit:
    """
    Interview prep kit.

    Configured to substitute by default: on a structural failure the kit is
    returned with the placeholder text in companyResearch.mission.
    """
    return _run(raw_text, "interview_prep", "interview_prep", policy)


def enhance_resume(raw_text: Optional[str], policy: Policy = None) -> ResumeRecord:
    """Resume tailored to a job description."""
    return _run(raw_text, "resume", "resume", policy)


def generate_document(raw_text: Optional[str], policy: Policy = None) -> FreeTextDocument:
    """Free-text document such as a cover letter."""
    config = get_pipeline_config()
    return normalize_text_response(
        raw_text,
        on_failure=_resolve_policy("document", policy),
        fallback=config.placeholder_text,
        feature="document",
    )


def rewrite_text(
    raw_text: Optional[str], original: str, policy: Policy = None
) -> FreeTextDocument:
    """
    Rewritten section of text (summary, bullet, ...).

    When the model returns nothing usable and the policy substitutes, the
    original text is kept.
    """
    return normalize_text_response(
        raw_text,
        on_failure=_resolve_policy("rewrite", policy),
        fallback=original,
        feature="rewrite",
    )
