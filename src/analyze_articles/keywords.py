"""Capitalization-pattern keyword extraction."""

from __future__ import annotations

import logging
import re
from typing import AbstractSet, Iterable

from spacy.lang.en.stop_words import STOP_WORDS

logger = logging.getLogger(__name__)

DEFAULT_STOP_WORDS: frozenset[str] = frozenset(STOP_WORDS)
MIN_KEYWORD_LENGTH = 4

CONSECUTIVE_CAPITALIZED_RE = re.compile(r"([A-Z][a-zA-Z0-9-]*)(\s[A-Z][a-zA-Z0-9-]*)+")
CAPITALIZED_RE = re.compile(r"[A-Z][a-zA-Z0-9-]*")


def build_stop_words(extra: Iterable[str] = ()) -> frozenset[str]:
    """Default English stop words plus any extra (lower-cased) entries."""
    return DEFAULT_STOP_WORDS | {word.lower() for word in extra}


def _strip_article(candidate: str) -> str:
    # A trailing "The" takes precedence; only one side is ever stripped
    if candidate.endswith(" The"):
        return candidate[: -len(" The")]
    if candidate.startswith("The "):
        return candidate[len("The "):]
    return candidate


def find_keyword_candidates(text: str) -> list[str]:
    """Multi-word capitalized runs first, then every capitalized word."""
    candidates = [match.group(0) for match in CONSECUTIVE_CAPITALIZED_RE.finditer(text)]
    candidates.extend(CAPITALIZED_RE.findall(text))
    return [_strip_article(candidate) for candidate in candidates]


def clean_keywords(
    candidates: list[str],
    stop_words: AbstractSet[str] = DEFAULT_STOP_WORDS,
    min_length: int = MIN_KEYWORD_LENGTH,
) -> list[str]:
    """
    Deduplicate candidates and keep only the most specific ones.

    A candidate contained in another, different candidate is dropped,
    e.g. 'Theresa May' is part of 'Prime Minister Theresa May'.
    """
    unique: list[str] = []
    for candidate in candidates:
        if len(candidate) >= min_length and candidate not in unique:
            unique.append(candidate)

    most_specific = [
        candidate
        for candidate in unique
        if not any(other != candidate and candidate in other for other in unique)
    ]

    return [candidate for candidate in most_specific if candidate.lower() not in stop_words]


def extract_keywords(
    text: str,
    stop_words: AbstractSet[str] = DEFAULT_STOP_WORDS,
    min_length: int = MIN_KEYWORD_LENGTH,
) -> list[str]:
    """
    Extract keyword candidates from a word pool.

    Args:
        text: Headline, description, tags and body joined by spaces.
        stop_words: Lower-case words never returned as keywords.
        min_length: Shortest candidate kept.

    Returns:
        Keyword strings in first-seen order.
    """
    if not text:
        return []

    keywords = clean_keywords(find_keyword_candidates(text), stop_words, min_length)
    logger.debug("Extracted %d keywords", len(keywords))
    return keywords
