from __future__ import annotations

import re

_WORD_RE = re.compile(r"[^\W_]+")


def tokenize(text: str) -> list[str]:
    """Split text into maximal alphanumeric runs, keeping order and case."""
    return _WORD_RE.findall(text or "")
