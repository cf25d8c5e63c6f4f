from __future__ import annotations

import math
import re

from app.schemas.analysis import ReadabilityReport

DEFAULT_WORDS_PER_PAGE = 250
DEFAULT_LONG_SENTENCE_WORDS = 25
DEFAULT_MAX_PAGES = 2

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")


def count_words(text: str) -> int:
    return len((text or "").split())


def analyze_readability(
    text: str,
    *,
    words_per_page: int = DEFAULT_WORDS_PER_PAGE,
    long_sentence_words: int = DEFAULT_LONG_SENTENCE_WORDS,
    max_pages: int = DEFAULT_MAX_PAGES,
) -> ReadabilityReport:
    word_count = count_words(text)
    pages = math.ceil(word_count / words_per_page)
    long_sentences = sum(
        1 for sentence in _SENTENCE_SPLIT_RE.split(text or "") if count_words(sentence) > long_sentence_words
    )

    feedback: list[str] = []
    if pages > max_pages:
        feedback.append(f"Your resume is {pages} pages long. Consider shortening it to 1-2 pages.")
    if long_sentences > 0:
        feedback.append(
            f"You have {long_sentences} long sentences. Consider shortening them for better readability."
        )

    return ReadabilityReport(
        word_count=word_count,
        estimated_pages=pages,
        long_sentence_count=long_sentences,
        feedback=feedback,
    )
