from __future__ import annotations

import re

_BULLET_CHARS = "•◦▪▫●○■□◆◇▶►-–—*·"
_BULLET_PATTERN = re.compile(rf"^\s*(?:[{re.escape(_BULLET_CHARS)}]|(?:\d+[\.\)]))\s+")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_line(line: str) -> str:
    return _WHITESPACE_RE.sub(" ", line).strip()


def normalize_text(text: str) -> str:
    """Collapse every whitespace run, newlines included, into one space."""
    return _WHITESPACE_RE.sub(" ", text or "").strip()


def normalize_lines(text: str) -> str:
    """Collapse whitespace inside each line but keep the line structure."""
    return "\n".join(normalize_line(line) for line in (text or "").splitlines()).strip()


def strip_bullet_prefix(line: str) -> str:
    return _BULLET_PATTERN.sub("", line).strip()
