from __future__ import annotations

import re

from app.schemas.analysis import CandidateInfo

# A run of capitalised words on the first line of the document.
_NAME_RE = re.compile(r"^([A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)*)")
_EMAIL_RE = re.compile(r"[a-zA-Z0-9._-]+@[a-zA-Z0-9._-]+\.[a-zA-Z0-9_-]+")
_PHONE_RE = re.compile(r"\d{3}[-.]?\d{3}[-.]?\d{4}")


def _first_match(pattern: re.Pattern[str], text: str) -> str | None:
    match = pattern.search(text)
    return match.group(0).strip() if match else None


def extract_candidate_info(text: str) -> CandidateInfo:
    stripped = (text or "").strip()
    name_match = _NAME_RE.match(stripped)
    return CandidateInfo(
        name=name_match.group(1).strip() if name_match else None,
        email=_first_match(_EMAIL_RE, stripped),
        phone=_first_match(_PHONE_RE, stripped),
    )
