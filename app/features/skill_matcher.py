from __future__ import annotations

from collections.abc import Iterable, Sequence


def match_skills(tokens: Iterable[str], vocabulary: Sequence[str]) -> list[str]:
    """Return the vocabulary entries present in the token stream.

    A token matches an entry when either one contains the other, compared
    case-insensitively. Short tokens therefore match generously ("r" hits
    "R" but also "React"). Results follow vocabulary order and contain only
    canonical entries.
    """
    lowered_vocabulary = [(skill, skill.lower()) for skill in vocabulary]
    found: set[str] = set()
    for token in tokens:
        normalized = token.lower()
        if not normalized:
            continue
        for skill, lowered in lowered_vocabulary:
            if skill in found:
                continue
            if normalized in lowered or lowered in normalized:
                found.add(skill)
    return [skill for skill in vocabulary if skill in found]
