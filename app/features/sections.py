from __future__ import annotations

import re

DEFAULT_SECTION = "header"

# Ordered; the first pattern that matches a whole trimmed line wins.
_SECTION_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("summary", re.compile(r"^summary$", re.IGNORECASE)),
    ("experience", re.compile(r"^(?:experience|work experience|professional experience)$", re.IGNORECASE)),
    ("education", re.compile(r"^education$", re.IGNORECASE)),
    ("skills", re.compile(r"^(?:skills|technical skills)$", re.IGNORECASE)),
    ("projects", re.compile(r"^projects$", re.IGNORECASE)),
    ("certifications", re.compile(r"^certifications$", re.IGNORECASE)),
    ("awards", re.compile(r"^(?:awards|honors and awards)$", re.IGNORECASE)),
    ("publications", re.compile(r"^publications$", re.IGNORECASE)),
    ("references", re.compile(r"^references$", re.IGNORECASE)),
)


def match_section_heading(line: str) -> str | None:
    stripped = line.strip()
    for name, pattern in _SECTION_PATTERNS:
        if pattern.match(stripped):
            return name
    return None


def segment_sections(text: str) -> dict[str, list[str]]:
    """Split resume text into heading-delimited sections.

    Heading lines switch the active section and are not stored. Seeing a
    heading again restarts that section, dropping what it held before.
    Every other line, blank ones included, goes to the active section.
    """
    sections: dict[str, list[str]] = {DEFAULT_SECTION: []}
    current = DEFAULT_SECTION

    for line in (text or "").splitlines():
        heading = match_section_heading(line)
        if heading is not None:
            current = heading
            sections[current] = []
            continue
        sections[current].append(line.strip())

    return sections
