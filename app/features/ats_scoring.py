from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS

from app.schemas.analysis import AtsResult, AtsStrategy, JobSuggestion
from app.taxonomy import RoleProfile

from .tokenizer import tokenize

DEFAULT_SUGGESTION_THRESHOLD = 0.3
DEFAULT_REQUIRED_WEIGHT = 0.7
DEFAULT_OPTIONAL_WEIGHT = 0.3
DEFAULT_TOP_N = 3
DEFAULT_KEYWORD_MIN_LENGTH = 3


def round_percent(ratio: float) -> int:
    """Ratio in [0, 1] to a whole percentage, halves rounded up."""
    # round(..., 9) absorbs float noise such as 0.7 + 0.075 -> 0.77499999...
    return max(0, min(100, int(math.floor(round(ratio * 100, 9) + 0.5))))


def score_ats(
    found: Iterable[str],
    required: Sequence[str],
    *,
    strategy: AtsStrategy = "skills",
) -> AtsResult:
    found_set = set(found)
    matched = [item for item in required if item in found_set]
    missing = [item for item in required if item not in found_set]
    score = round_percent(len(matched) / len(required)) if required else 0
    return AtsResult(
        strategy=strategy,
        score_percent=score,
        found_keywords=matched,
        missing_keywords=missing,
    )


def job_description_keywords(text: str, *, min_length: int = DEFAULT_KEYWORD_MIN_LENGTH) -> list[str]:
    """Distinct lower-cased job description terms minus stop words and numbers."""
    keywords: list[str] = []
    seen: set[str] = set()
    for token in tokenize(text):
        term = token.lower()
        if term in seen or len(term) < min_length or term.isdigit():
            continue
        if term in ENGLISH_STOP_WORDS:
            continue
        seen.add(term)
        keywords.append(term)
    return keywords


def score_keyword_overlap(
    resume_tokens: Iterable[str],
    job_description: str,
    *,
    min_length: int = DEFAULT_KEYWORD_MIN_LENGTH,
) -> AtsResult:
    required = job_description_keywords(job_description, min_length=min_length)
    resume_terms = {token.lower() for token in resume_tokens}
    return score_ats(resume_terms, required, strategy="keywords")


def _role_match_score(
    profile: RoleProfile,
    found: set[str],
    *,
    required_weight: float,
    optional_weight: float,
) -> float:
    required_hits = sum(1 for skill in profile.required if skill in found)
    optional_hits = sum(1 for skill in profile.optional if skill in found)
    return (
        required_hits / len(profile.required) * required_weight
        + optional_hits / len(profile.optional) * optional_weight
    )


def suggest_jobs(
    found: Iterable[str],
    role_profiles: Sequence[RoleProfile],
    *,
    threshold: float = DEFAULT_SUGGESTION_THRESHOLD,
    required_weight: float = DEFAULT_REQUIRED_WEIGHT,
    optional_weight: float = DEFAULT_OPTIONAL_WEIGHT,
    top_n: int = DEFAULT_TOP_N,
) -> list[JobSuggestion]:
    found_set = set(found)
    scored: list[tuple[float, JobSuggestion]] = []
    for profile in role_profiles:
        score = _role_match_score(
            profile,
            found_set,
            required_weight=required_weight,
            optional_weight=optional_weight,
        )
        if score <= threshold:
            continue
        scored.append(
            (
                score,
                JobSuggestion(
                    title=profile.title,
                    match_score_percent=round_percent(score),
                    matching_skills=[
                        skill for skill in (*profile.required, *profile.optional) if skill in found_set
                    ],
                    missing_required=[skill for skill in profile.required if skill not in found_set],
                ),
            )
        )

    # sorted() is stable, so equal scores keep catalog order.
    scored = sorted(scored, key=lambda item: item[0], reverse=True)
    return [suggestion for _, suggestion in scored[:top_n]]
