from __future__ import annotations

import asyncio
import contextlib
import logging

from app.core.config.scoring import get_scoring_value
from app.enrichment.types import EnrichmentError, EnrichmentProvider, EnrichmentResult
from app.features import (
    analyze_readability,
    critique_work_experience,
    extract_candidate_info,
    extract_important_keywords,
    match_skills,
    score_ats,
    score_keyword_overlap,
    segment_sections,
    suggest_jobs,
    tokenize,
)
from app.normalize.utils import normalize_lines, normalize_text
from app.schemas.analysis import (
    AnalysisReport,
    AnalysisRequest,
    AnalysisResult,
    AtsStrategy,
    SkillMatch,
    SkillsGap,
    SkillsSummary,
)
from app.taxonomy import SkillCatalog

logger = logging.getLogger(__name__)


class AnalysisInputError(ValueError):
    def __init__(self, message: str, *, field: str):
        super().__init__(message)
        self.field = field


def _build_summary(text: str) -> str:
    max_chars = int(get_scoring_value("summary.max_chars", 300))
    ellipsis = str(get_scoring_value("summary.ellipsis", "..."))
    return text[:max_chars] + ellipsis


def enrichment_excerpt(text: str) -> str:
    return text[: int(get_scoring_value("enrichment.excerpt_chars", 5000))]


def analyze_resume_text(
    resume_text: str,
    job_description: str | None = None,
    *,
    catalog: SkillCatalog,
    ats_strategy: AtsStrategy = "skills",
) -> AnalysisReport:
    """Run every deterministic analysis step over one resume/job pair."""
    clean_text = normalize_text(resume_text)
    if not clean_text:
        raise AnalysisInputError("resume_text is required and must not be empty.", field="resume_text")
    line_text = normalize_lines(resume_text)
    jd_text = normalize_text(job_description or "")

    tokens = tokenize(clean_text)
    technical = match_skills(tokens, catalog.technical_skills)
    soft = match_skills(tokens, catalog.soft_skills)
    required = match_skills(tokenize(jd_text), catalog.technical_skills)
    important_keywords = extract_important_keywords(
        clean_text,
        threshold=float(get_scoring_value("keywords.tfidf_threshold", 0.1)),
    )

    sections = segment_sections(line_text)
    candidate_info = extract_candidate_info(line_text)
    experience = critique_work_experience(sections.get("experience"), catalog.action_verbs)
    readability = analyze_readability(
        clean_text,
        words_per_page=int(get_scoring_value("readability.words_per_page", 250)),
        long_sentence_words=int(get_scoring_value("readability.long_sentence_words", 25)),
        max_pages=int(get_scoring_value("readability.max_pages", 2)),
    )

    skill_ats = score_ats(technical, required)
    if ats_strategy == "keywords":
        ats = score_keyword_overlap(
            tokens,
            jd_text,
            min_length=int(get_scoring_value("ats.keyword_min_length", 3)),
        )
    else:
        ats = skill_ats

    suggestions = suggest_jobs(
        technical,
        catalog.role_profiles,
        threshold=float(get_scoring_value("suggestions.threshold", 0.3)),
        required_weight=float(get_scoring_value("suggestions.required_weight", 0.7)),
        optional_weight=float(get_scoring_value("suggestions.optional_weight", 0.3)),
        top_n=int(get_scoring_value("suggestions.top_n", 3)),
    )

    logger.info(
        "resume_analysis_completed words=%s sections=%s technical=%s required=%s strategy=%s",
        readability.word_count,
        len(sections),
        len(technical),
        len(required),
        ats.strategy,
    )
    return AnalysisReport(
        word_count=readability.word_count,
        summary=_build_summary(clean_text),
        candidate_info=candidate_info,
        sections=sections,
        skill_match=SkillMatch(technical=technical, soft=soft, required=required),
        skills=SkillsSummary(
            technical=technical,
            soft=soft,
            match_percent=skill_ats.score_percent,
            missing=skill_ats.missing_keywords,
        ),
        skills_gap=SkillsGap(
            missing_skills=skill_ats.missing_keywords,
            suggested_improvements=list(skill_ats.missing_keywords),
        ),
        important_keywords=sorted(important_keywords),
        ats=ats,
        job_suggestions=suggestions,
        work_experience_analysis=experience,
        readability_analysis=readability,
    )


async def enrich_safely(provider: EnrichmentProvider | None, text: str) -> EnrichmentResult:
    """Call the enrichment provider, converting every failure into a degraded result."""
    if provider is None:
        return EnrichmentResult.skipped()
    try:
        payload = await provider.enrich(text)
    except EnrichmentError as exc:
        logger.warning("resume_enrichment_failed provider=%s code=%s: %s", provider.name, exc.code, exc)
        return EnrichmentResult.failed(exc.code)
    except Exception as exc:  # noqa: BLE001 - enrichment must never fail the analysis
        logger.warning("resume_enrichment_failed provider=%s code=unexpected: %s", provider.name, exc)
        return EnrichmentResult.failed("enrichment_unexpected")
    return EnrichmentResult.ok(payload)


def merge_enrichment(report: AnalysisReport, enrichment: EnrichmentResult) -> AnalysisResult:
    return AnalysisResult(
        **report.model_dump(),
        key_phrases=enrichment.payload.key_phrases,
        entities=enrichment.payload.entities,
        sentiment=enrichment.payload.sentiment,
        enrichment_status=enrichment.status,
        enrichment_error=enrichment.error_code,
    )


async def analyze_resume(
    request: AnalysisRequest,
    *,
    catalog: SkillCatalog,
    provider: EnrichmentProvider | None = None,
) -> AnalysisResult:
    """Analyze one resume, running enrichment alongside the deterministic steps."""
    if not normalize_text(request.resume_text):
        raise AnalysisInputError("resume_text is required and must not be empty.", field="resume_text")

    active_provider = provider if request.include_enrichment else None
    excerpt = enrichment_excerpt(normalize_text(request.resume_text))
    enrichment_task = asyncio.create_task(enrich_safely(active_provider, excerpt))
    try:
        report = await asyncio.to_thread(
            analyze_resume_text,
            request.resume_text,
            request.job_description,
            catalog=catalog,
            ats_strategy=request.ats_strategy,
        )
    except Exception:
        enrichment_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await enrichment_task
        raise
    enrichment = await enrichment_task
    return merge_enrichment(report, enrichment)
