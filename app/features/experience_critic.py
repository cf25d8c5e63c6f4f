from __future__ import annotations

import re
from collections.abc import Collection, Sequence

from app.normalize.utils import strip_bullet_prefix
from app.schemas.analysis import BulletIssue, WorkExperienceCritique

MISSING_SECTION_FEEDBACK = "Work experience section not found."
QUANTIFICATION_FEEDBACK = (
    "Consider adding quantifiable achievements (e.g., numbers, percentages) to show impact."
)

_NON_LETTER_RE = re.compile(r"[^a-z]")
_DIGIT_RE = re.compile(r"\d")


def _first_word(bullet: str) -> str:
    words = strip_bullet_prefix(bullet).split()
    if not words:
        return ""
    return _NON_LETTER_RE.sub("", words[0].lower())


def critique_work_experience(
    lines: Sequence[str] | None,
    action_verbs: Collection[str],
) -> WorkExperienceCritique:
    bullets = [line.strip() for line in lines or [] if line and line.strip()]
    if not bullets:
        return WorkExperienceCritique(feedback=MISSING_SECTION_FEEDBACK)

    action_verb_issues: list[BulletIssue] = []
    quantification_issues: list[BulletIssue] = []
    for bullet in bullets:
        first_word = _first_word(bullet)
        if first_word not in action_verbs:
            action_verb_issues.append(
                BulletIssue(
                    bullet_text=bullet,
                    feedback=f"Consider starting with a strong action verb instead of '{first_word}'.",
                )
            )
        # A numbered-list marker is not a metric.
        if not _DIGIT_RE.search(strip_bullet_prefix(bullet)):
            quantification_issues.append(BulletIssue(bullet_text=bullet, feedback=QUANTIFICATION_FEEDBACK))

    return WorkExperienceCritique(
        action_verb_issues=action_verb_issues,
        quantification_issues=quantification_issues,
    )
