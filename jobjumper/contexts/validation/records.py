"""
Typed result records.

One dataclass tree per feature. Every field has a default, so constructing a
record with no arguments yields the documented all-defaults record (0 for
numbers, "" for strings, [] for lists, nested records with their own
defaults). to_dict() renders the camelCase payload the dashboard consumes.
"""

from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from functools import partial
from typing import Any, Dict, List, Union

from jobjumper.contexts.validation.soft_enums import (
    Level,
    RecommendationStatus,
    Sentiment,
    SkillStatus,
    SoftLabel,
)

Number = Union[int, float]


def to_camel(name: str) -> str:
    """
    Convert a snake_case attribute name to the camelCase payload key.

    Example:
        >>> to_camel("nice_to_have")
        'niceToHave'
    """
    first, *rest = name.split("_")
    return first + "".join(word.capitalize() for word in rest)


def _to_payload(value: Any) -> Any:
    if isinstance(value, SoftLabel):
        return value.text
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value):
        return {to_camel(f.name): _to_payload(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, list):
        return [_to_payload(item) for item in value]
    return value


class Record:
    """Mixin giving record dataclasses a camelCase dict rendering."""

    def to_dict(self) -> Dict[str, Any]:
        return _to_payload(self)


def _label(enum_cls):
    return field(default_factory=partial(SoftLabel.empty, enum_cls))


def _strings():
    return field(default_factory=list)


# =============================================================================
# MATCH SCORE REPORT
# =============================================================================


@dataclass
class MatchScoreReport(Record):
    score: Number = 0
    summary: str = ""
    strengths: List[str] = _strings()
    gaps: List[str] = _strings()
    recommendations: List[str] = _strings()


# =============================================================================
# JOB FIT ANALYSIS
# =============================================================================


@dataclass
class KeyInfo(Record):
    role: str = ""
    company: str = ""
    location: str = ""
    salary: str = ""
    work_mode: str = ""
    experience: str = ""


@dataclass
class MatchDimension(Record):
    score: Number = 0
    reason: str = ""


@dataclass
class MatchAnalysis(Record):
    overall_score: Number = 0
    technical_match: MatchDimension = field(default_factory=MatchDimension)
    experience_match: MatchDimension = field(default_factory=MatchDimension)
    role_match: MatchDimension = field(default_factory=MatchDimension)


@dataclass
class TechnicalSkill(Record):
    name: str = ""
    status: SkillStatus = SkillStatus.MISSING


@dataclass
class SkillsBreakdown(Record):
    technical: List[TechnicalSkill] = field(default_factory=list)
    soft: List[str] = _strings()
    nice_to_have: List[str] = _strings()


@dataclass
class CompetitiveAnalysis(Record):
    level: SoftLabel[Level] = _label(Level)
    pool_size: str = ""
    differentiators: List[str] = _strings()


@dataclass
class Recommendation(Record):
    status: SoftLabel[RecommendationStatus] = _label(RecommendationStatus)
    reason: str = ""


@dataclass
class JobFitAnalysis(Record):
    key_info: KeyInfo = field(default_factory=KeyInfo)
    match_analysis: MatchAnalysis = field(default_factory=MatchAnalysis)
    skills: SkillsBreakdown = field(default_factory=SkillsBreakdown)
    red_flags: List[str] = _strings()
    competitive_analysis: CompetitiveAnalysis = field(default_factory=CompetitiveAnalysis)
    recommendation: Recommendation = field(default_factory=Recommendation)


# =============================================================================
# COMPANY RESEARCH REPORT
# =============================================================================


@dataclass
class ResearchSummary(Record):
    verdict: str = ""
    opportunity_score: Number = 0
    apply_priority: SoftLabel[Level] = _label(Level)
    next_steps: List[str] = _strings()


@dataclass
class CompanyIntelligence(Record):
    overview: str = ""
    size_and_stage: str = ""
    financial_health: str = ""
    competitors: List[str] = _strings()


@dataclass
class MarketAnalysis(Record):
    market_position: str = ""
    recent_news: List[str] = _strings()


@dataclass
class CultureInsights(Record):
    work_environment: str = ""
    engineering_culture: str = ""
    values: List[str] = _strings()


@dataclass
class SalaryBreakdown(Record):
    fresher: str = ""
    mid: str = ""
    senior: str = ""


@dataclass
class Compensation(Record):
    salary_range: str = ""
    breakdown: SalaryBreakdown = field(default_factory=SalaryBreakdown)
    comparison: str = ""
    benefits: List[str] = _strings()


@dataclass
class HiringProcess(Record):
    process: str = ""
    timeline: str = ""
    tips: List[str] = _strings()


@dataclass
class RiskAssessment(Record):
    level: SoftLabel[Level] = _label(Level)
    concerns: List[str] = _strings()


@dataclass
class ApplicationStrategy(Record):
    approach: str = ""
    talking_points: List[str] = _strings()
    questions_to_ask: List[str] = _strings()


@dataclass
class GlassdoorReviews(Record):
    # Ratings arrive as 4.1, "4.1", or "4.1/5"; rendered as text
    rating: str = ""
    pros: List[str] = _strings()
    cons: List[str] = _strings()


@dataclass
class RedditReviews(Record):
    sentiment: str = ""
    key_discussions: List[str] = _strings()


@dataclass
class EmployeeVoice(Record):
    quote: str = ""
    source: str = ""
    sentiment: SoftLabel[Sentiment] = _label(Sentiment)


@dataclass
class Reviews(Record):
    glassdoor: GlassdoorReviews = field(default_factory=GlassdoorReviews)
    reddit: RedditReviews = field(default_factory=RedditReviews)
    employee_voices: List[EmployeeVoice] = field(default_factory=list)


@dataclass
class Source(Record):
    title: str = ""
    url: str = ""


@dataclass
class CompanyResearchReport(Record):
    company_name: str = ""
    role_title: str = ""
    summary: ResearchSummary = field(default_factory=ResearchSummary)
    company_intelligence: CompanyIntelligence = field(default_factory=CompanyIntelligence)
    market_analysis: MarketAnalysis = field(default_factory=MarketAnalysis)
    culture: CultureInsights = field(default_factory=CultureInsights)
    compensation: Compensation = field(default_factory=Compensation)
    hiring: HiringProcess = field(default_factory=HiringProcess)
    risks: RiskAssessment = field(default_factory=RiskAssessment)
    strategy: ApplicationStrategy = field(default_factory=ApplicationStrategy)
    reviews: Reviews = field(default_factory=Reviews)
    sources: List[Source] = field(default_factory=list)


# =============================================================================
# INTERVIEW PREP KIT
# =============================================================================


@dataclass
class CompanyBrief(Record):
    mission: str = ""
    culture: str = ""
    products: List[str] = _strings()
    recent_news: List[str] = _strings()


@dataclass
class TechnicalQuestion(Record):
    question: str = ""
    answer: str = ""


@dataclass
class TechnicalPrep(Record):
    topics: List[str] = _strings()
    questions: List[TechnicalQuestion] = field(default_factory=list)


@dataclass
class BehavioralQuestion(Record):
    question: str = ""
    star_guide: str = ""


@dataclass
class BehavioralPrep(Record):
    competencies: List[str] = _strings()
    questions: List[BehavioralQuestion] = field(default_factory=list)


@dataclass
class InterviewPrepKit(Record):
    company_research: CompanyBrief = field(default_factory=CompanyBrief)
    technical: TechnicalPrep = field(default_factory=TechnicalPrep)
    behavioral: BehavioralPrep = field(default_factory=BehavioralPrep)
    questions_to_ask: List[str] = _strings()


# =============================================================================
# FREE-TEXT DOCUMENT
# =============================================================================


@dataclass
class FreeTextDocument(Record):
    content: str = ""


# =============================================================================
# RESUME
# =============================================================================


@dataclass
class ExperienceEntry(Record):
    id: str = ""
    role: str = ""
    company: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""


@dataclass
class ProjectEntry(Record):
    id: str = ""
    name: str = ""
    technologies: str = ""
    link: str = ""
    description: str = ""


@dataclass
class EducationEntry(Record):
    id: str = ""
    degree: str = ""
    school: str = ""
    year: str = ""


@dataclass
class ResumeRecord(Record):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    linkedin: str = ""
    location: str = ""
    summary: str = ""
    skills: str = ""
    job_title: str = ""
    experience: List[ExperienceEntry] = field(default_factory=list)
    projects: List[ProjectEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
