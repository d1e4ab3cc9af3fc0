"""
Strict validators: generic JSON value -> fully-populated typed record.

Each validate_* function accepts any JSON value (including None when nothing
was parsed) and walks it field by field:

- strings go through ensure_string(), string lists through ensure_string_array()
- numbers are type-checked, never parsed from strings (mistyped -> 0)
- nested objects of the wrong type fall back to their all-defaults record
- object lists are validated element by element; non-mapping elements fill
  the element's main text field
- soft enums keep their literal text

Validators never raise; their only effect is the returned record.
"""

from typing import Any, Callable, Dict, List, Optional, Type, TypeVar

from jobjumper.contexts.normalization.coercion import ensure_string, ensure_string_array
from jobjumper.contexts.normalization.json_types import JSONValue, is_number
from jobjumper.contexts.normalization.logger import log_field_defaulted
from jobjumper.contexts.validation.defaults import MAX_EMPLOYEE_VOICES, MAX_SOURCES
from jobjumper.contexts.validation.records import (
    ApplicationStrategy,
    BehavioralPrep,
    BehavioralQuestion,
    CompanyBrief,
    CompanyIntelligence,
    CompanyResearchReport,
    Compensation,
    CompetitiveAnalysis,
    CultureInsights,
    EducationEntry,
    EmployeeVoice,
    ExperienceEntry,
    FreeTextDocument,
    GlassdoorReviews,
    HiringProcess,
    InterviewPrepKit,
    JobFitAnalysis,
    KeyInfo,
    MarketAnalysis,
    MatchAnalysis,
    MatchDimension,
    MatchScoreReport,
    Number,
    ProjectEntry,
    Recommendation,
    RedditReviews,
    ResearchSummary,
    ResumeRecord,
    Reviews,
    RiskAssessment,
    SalaryBreakdown,
    SkillsBreakdown,
    Source,
    TechnicalPrep,
    TechnicalQuestion,
    TechnicalSkill,
)
from jobjumper.contexts.validation.soft_enums import (
    Level,
    RecommendationStatus,
    Sentiment,
    SkillStatus,
    SoftLabel,
)

T = TypeVar("T")


class _Fields:
    """
    Read-only view of one JSON object while validating it.

    Wraps a value that should be a mapping. Anything else reads as an empty
    mapping, except when a primary key is given: then a bare scalar/list is
    treated as that key's value (e.g., a skill given as "SQL" instead of
    {"name": "SQL"}).
    """

    def __init__(self, value: Any, path: str, primary: Optional[str] = None):
        self.path = path
        if isinstance(value, dict):
            self.data: Dict[str, Any] = value
        elif primary is not None and value is not None:
            self.data = {primary: value}
        else:
            self.data = {}
            if value is not None:
                log_field_defaulted(path)

    def _child_path(self, key: str) -> str:
        return f"{self.path}.{key}"

    def number(self, key: str) -> Number:
        value = self.data.get(key)
        if is_number(value):
            return value
        if value is not None:
            log_field_defaulted(self._child_path(key))
        return 0

    def text(self, key: str) -> str:
        return ensure_string(self.data.get(key))

    def texts(self, key: str) -> List[str]:
        value = self.data.get(key)
        if value is not None and not isinstance(value, list):
            log_field_defaulted(self._child_path(key))
        return ensure_string_array(value)

    def label(self, key: str, enum_cls: Type) -> SoftLabel:
        return SoftLabel.parse(enum_cls, self.data.get(key))

    def nested(self, key: str) -> "_Fields":
        return _Fields(self.data.get(key), self._child_path(key))

    def items(
        self,
        key: str,
        build: Callable[[Any, str], T],
        limit: Optional[int] = None,
    ) -> List[T]:
        value = self.data.get(key)
        if not isinstance(value, list):
            if value is not None:
                log_field_defaulted(self._child_path(key))
            return []
        if limit is not None:
            value = value[:limit]
        return [build(item, f"{self._child_path(key)}[{i}]") for i, item in enumerate(value)]


# =============================================================================
# MATCH SCORE REPORT
# =============================================================================


def validate_match_score(value: JSONValue) -> MatchScoreReport:
    """
    Validate a match-score payload.

    Example:
        >>> validate_match_score({"score": 72, "summary": "Good fit"})
        MatchScoreReport(score=72, summary='Good fit', strengths=[], gaps=[], recommendations=[])
    """
    f = _Fields(value, "match_score")
    return MatchScoreReport(
        score=f.number("score"),
        summary=f.text("summary"),
        strengths=f.texts("strengths"),
        gaps=f.texts("gaps"),
        recommendations=f.texts("recommendations"),
    )


# =============================================================================
# JOB FIT ANALYSIS
# =============================================================================


def _match_dimension(f: _Fields) -> MatchDimension:
    return MatchDimension(score=f.number("score"), reason=f.text("reason"))


def _technical_skill(value: Any, path: str) -> TechnicalSkill:
    f = _Fields(value, path, primary="name")
    return TechnicalSkill(name=f.text("name"), status=SkillStatus.parse(f.data.get("status")))


def validate_job_fit(value: JSONValue) -> JobFitAnalysis:
    """Validate a job-fit analysis payload (keyInfo, matchAnalysis, skills, ...)."""
    f = _Fields(value, "job_fit")

    key_info = f.nested("keyInfo")
    match = f.nested("matchAnalysis")
    skills = f.nested("skills")
    competition = f.nested("competitiveAnalysis")
    recommendation = f.nested("recommendation")

    return JobFitAnalysis(
        key_info=KeyInfo(
            role=key_info.text("role"),
            company=key_info.text("company"),
            location=key_info.text("location"),
            salary=key_info.text("salary"),
            work_mode=key_info.text("workMode"),
            experience=key_info.text("experience"),
        ),
        match_analysis=MatchAnalysis(
            overall_score=match.number("overallScore"),
            technical_match=_match_dimension(match.nested("technicalMatch")),
            experience_match=_match_dimension(match.nested("experienceMatch")),
            role_match=_match_dimension(match.nested("roleMatch")),
        ),
        skills=SkillsBreakdown(
            technical=skills.items("technical", _technical_skill),
            soft=skills.texts("soft"),
            nice_to_have=skills.texts("niceToHave"),
        ),
        red_flags=f.texts("redFlags"),
        competitive_analysis=CompetitiveAnalysis(
            level=competition.label("level", Level),
            pool_size=competition.text("poolSize"),
            differentiators=competition.texts("differentiators"),
        ),
        recommendation=Recommendation(
            status=recommendation.label("status", RecommendationStatus),
            reason=recommendation.text("reason"),
        ),
    )


# =============================================================================
# COMPANY RESEARCH REPORT
# =============================================================================


def _employee_voice(value: Any, path: str) -> EmployeeVoice:
    f = _Fields(value, path, primary="quote")
    return EmployeeVoice(
        quote=f.text("quote"),
        source=f.text("source"),
        sentiment=f.label("sentiment", Sentiment),
    )


def _source(value: Any, path: str) -> Source:
    f = _Fields(value, path, primary="title")
    return Source(title=f.text("title"), url=f.text("url"))


def validate_company_research(value: JSONValue) -> CompanyResearchReport:
    """
    Validate a company-research payload.

    Sources are capped at MAX_SOURCES and employee voices at
    MAX_EMPLOYEE_VOICES, keeping the first entries in order.
    """
    f = _Fields(value, "company_research")

    summary = f.nested("summary")
    intel = f.nested("companyIntelligence")
    market = f.nested("marketAnalysis")
    culture = f.nested("culture")
    compensation = f.nested("compensation")
    breakdown = compensation.nested("breakdown")
    hiring = f.nested("hiring")
    risks = f.nested("risks")
    strategy = f.nested("strategy")
    reviews = f.nested("reviews")
    glassdoor = reviews.nested("glassdoor")
    reddit = reviews.nested("reddit")

    return CompanyResearchReport(
        company_name=f.text("companyName"),
        role_title=f.text("roleTitle"),
        summary=ResearchSummary(
            verdict=summary.text("verdict"),
            opportunity_score=summary.number("opportunityScore"),
            apply_priority=summary.label("applyPriority", Level),
            next_steps=summary.texts("nextSteps"),
        ),
        company_intelligence=CompanyIntelligence(
            overview=intel.text("overview"),
            size_and_stage=intel.text("sizeAndStage"),
            financial_health=intel.text("financialHealth"),
            competitors=intel.texts("competitors"),
        ),
        market_analysis=MarketAnalysis(
            market_position=market.text("marketPosition"),
            recent_news=market.texts("recentNews"),
        ),
        culture=CultureInsights(
            work_environment=culture.text("workEnvironment"),
            engineering_culture=culture.text("engineeringCulture"),
            values=culture.texts("values"),
        ),
        compensation=Compensation(
            salary_range=compensation.text("salaryRange"),
            breakdown=SalaryBreakdown(
                fresher=breakdown.text("fresher"),
                mid=breakdown.text("mid"),
                senior=breakdown.text("senior"),
            ),
            comparison=compensation.text("comparison"),
            benefits=compensation.texts("benefits"),
        ),
        hiring=HiringProcess(
            process=hiring.text("process"),
            timeline=hiring.text("timeline"),
            tips=hiring.texts("tips"),
        ),
        risks=RiskAssessment(
            level=risks.label("level", Level),
            concerns=risks.texts("concerns"),
        ),
        strategy=ApplicationStrategy(
            approach=strategy.text("approach"),
            talking_points=strategy.texts("talkingPoints"),
            questions_to_ask=strategy.texts("questionsToAsk"),
        ),
        reviews=Reviews(
            glassdoor=GlassdoorReviews(
                rating=glassdoor.text("rating"),
                pros=glassdoor.texts("pros"),
                cons=glassdoor.texts("cons"),
            ),
            reddit=RedditReviews(
                sentiment=reddit.text("sentiment"),
                key_discussions=reddit.texts("keyDiscussions"),
            ),
            employee_voices=reviews.items(
                "employeeVoices", _employee_voice, limit=MAX_EMPLOYEE_VOICES
            ),
        ),
        sources=f.items("sources", _source, limit=MAX_SOURCES),
    )


# =============================================================================
# INTERVIEW PREP KIT
# =============================================================================


def _technical_question(value: Any, path: str) -> TechnicalQuestion:
    f = _Fields(value, path, primary="question")
    return TechnicalQuestion(question=f.text("question"), answer=f.text("answer"))


def _behavioral_question(value: Any, path: str) -> BehavioralQuestion:
    f = _Fields(value, path, primary="question")
    return BehavioralQuestion(question=f.text("question"), star_guide=f.text("starGuide"))


def validate_interview_prep(value: JSONValue) -> InterviewPrepKit:
    """Validate an interview-prep payload (companyResearch, technical, behavioral, questionsToAsk)."""
    f = _Fields(value, "interview_prep")

    research = f.nested("companyResearch")
    technical = f.nested("technical")
    behavioral = f.nested("behavioral")

    return InterviewPrepKit(
        company_research=CompanyBrief(
            mission=research.text("mission"),
            culture=research.text("culture"),
            products=research.texts("products"),
            recent_news=research.texts("recentNews"),
        ),
        technical=TechnicalPrep(
            topics=technical.texts("topics"),
            questions=technical.items("questions", _technical_question),
        ),
        behavioral=BehavioralPrep(
            competencies=behavioral.texts("competencies"),
            questions=behavioral.items("questions", _behavioral_question),
        ),
        questions_to_ask=f.texts("questionsToAsk"),
    )


# =============================================================================
# FREE-TEXT DOCUMENT
# =============================================================================


def validate_document(value: JSONValue) -> FreeTextDocument:
    """
    Validate a generated document.

    A string is the document. A mapping contributes its content (or document)
    field; anything else is coerced with ensure_string().
    """
    if isinstance(value, str):
        return FreeTextDocument(content=value)
    if isinstance(value, dict):
        for key in ("content", "document"):
            if value.get(key) is not None:
                return FreeTextDocument(content=ensure_string(value[key]))
    return FreeTextDocument(content=ensure_string(value))


# =============================================================================
# RESUME
# =============================================================================


def _experience(value: Any, path: str) -> ExperienceEntry:
    f = _Fields(value, path, primary="role")
    return ExperienceEntry(
        id=f.text("id"),
        role=f.text("role"),
        company=f.text("company"),
        start_date=f.text("startDate"),
        end_date=f.text("endDate"),
        description=f.text("description"),
    )


def _project(value: Any, path: str) -> ProjectEntry:
    f = _Fields(value, path, primary="name")
    return ProjectEntry(
        id=f.text("id"),
        name=f.text("name"),
        technologies=f.text("technologies"),
        link=f.text("link"),
        description=f.text("description"),
    )


def _education(value: Any, path: str) -> EducationEntry:
    f = _Fields(value, path, primary="degree")
    return EducationEntry(
        id=f.text("id"),
        degree=f.text("degree"),
        school=f.text("school"),
        year=f.text("year"),
    )


def validate_resume(value: JSONValue) -> ResumeRecord:
    """Validate a resume payload (rewritten or parsed from an image)."""
    f = _Fields(value, "resume")
    return ResumeRecord(
        full_name=f.text("fullName"),
        email=f.text("email"),
        phone=f.text("phone"),
        linkedin=f.text("linkedin"),
        location=f.text("location"),
        summary=f.text("summary"),
        skills=f.text("skills"),
        job_title=f.text("jobTitle"),
        experience=f.items("experience", _experience),
        projects=f.items("projects", _project),
        education=f.items("education", _education),
    )
