from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from app.core.config import settings

AtsStrategy = Literal["skills", "keywords"]
SentimentLabel = Literal["POSITIVE", "NEGATIVE", "NEUTRAL", "MIXED"]
EnrichmentStatus = Literal["ok", "failed", "skipped"]
SectionName = Literal[
    "header",
    "summary",
    "experience",
    "education",
    "skills",
    "projects",
    "certifications",
    "awards",
    "publications",
    "references",
]


class AnalysisRequest(BaseModel):
    resume_text: str = Field(default="", max_length=settings.max_resume_chars)
    job_description: str | None = Field(default=None, max_length=settings.max_job_description_chars)
    ats_strategy: AtsStrategy = "skills"
    include_enrichment: bool = True


class CandidateInfo(BaseModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None


class SkillMatch(BaseModel):
    technical: list[str] = Field(default_factory=list)
    soft: list[str] = Field(default_factory=list)
    required: list[str] = Field(default_factory=list)


class AtsResult(BaseModel):
    strategy: AtsStrategy = "skills"
    score_percent: int = Field(default=0, ge=0, le=100)
    found_keywords: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)


class SkillsSummary(BaseModel):
    technical: list[str] = Field(default_factory=list)
    soft: list[str] = Field(default_factory=list)
    match_percent: int = Field(default=0, ge=0, le=100)
    missing: list[str] = Field(default_factory=list)


class SkillsGap(BaseModel):
    missing_skills: list[str] = Field(default_factory=list)
    suggested_improvements: list[str] = Field(default_factory=list)


class JobSuggestion(BaseModel):
    title: str
    match_score_percent: int = Field(ge=0, le=100)
    matching_skills: list[str] = Field(default_factory=list)
    missing_required: list[str] = Field(default_factory=list)


class BulletIssue(BaseModel):
    bullet_text: str
    feedback: str


class WorkExperienceCritique(BaseModel):
    feedback: str | None = None
    action_verb_issues: list[BulletIssue] = Field(default_factory=list)
    quantification_issues: list[BulletIssue] = Field(default_factory=list)


class ReadabilityReport(BaseModel):
    word_count: int = Field(default=0, ge=0)
    estimated_pages: int = Field(default=0, ge=0)
    long_sentence_count: int = Field(default=0, ge=0)
    feedback: list[str] = Field(default_factory=list)


class KeyPhrase(BaseModel):
    text: str
    score: float | None = Field(default=None, ge=0.0, le=1.0)


class Entity(BaseModel):
    text: str
    type: str = "OTHER"
    score: float | None = Field(default=None, ge=0.0, le=1.0)


class AnalysisReport(BaseModel):
    """Everything the deterministic pipeline produces for one resume."""

    word_count: int
    summary: str
    candidate_info: CandidateInfo
    sections: dict[SectionName, list[str]]
    skill_match: SkillMatch
    skills: SkillsSummary
    skills_gap: SkillsGap
    important_keywords: list[str]
    ats: AtsResult
    job_suggestions: list[JobSuggestion]
    work_experience_analysis: WorkExperienceCritique
    readability_analysis: ReadabilityReport


class AnalysisResult(AnalysisReport):
    key_phrases: list[KeyPhrase] = Field(default_factory=list)
    entities: list[Entity] = Field(default_factory=list)
    sentiment: SentimentLabel = "NEUTRAL"
    enrichment_status: EnrichmentStatus = "skipped"
    enrichment_error: str | None = None
