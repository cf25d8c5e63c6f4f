from __future__ import annotations

import logging

from sklearn.feature_extraction.text import TfidfVectorizer

logger = logging.getLogger(__name__)

DEFAULT_TFIDF_THRESHOLD = 0.1


def extract_important_keywords(text: str, *, threshold: float = DEFAULT_TFIDF_THRESHOLD) -> set[str]:
    """Terms of a single document whose TF-IDF weight exceeds ``threshold``.

    With one document the IDF factor is constant, so the ranking reduces to
    sublinear term frequency under L2 normalisation: a term seen once in a
    long resume falls below the threshold while repetition is damped.
    """
    if not text or not text.strip():
        return set()

    vectorizer = TfidfVectorizer(stop_words="english", sublinear_tf=True)
    try:
        matrix = vectorizer.fit_transform([text])
    except ValueError:
        # Only stop words or one-character tokens.
        logger.debug("keyword_extraction_empty_vocabulary chars=%s", len(text))
        return set()

    terms = vectorizer.get_feature_names_out()
    row = matrix.toarray()[0]
    return {str(term) for term, score in zip(terms, row) if score > threshold}
