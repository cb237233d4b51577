"""Sentence and document polarity scoring using VADER."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from numbers import Real
from typing import Any, Iterable, Protocol

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from analyze_articles.errors import ScoringError
from analyze_articles.models import Sentiment

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("pos", "neg", "neu")


class Scorer(Protocol):
    def score(self, text: str) -> Sentiment: ...


class SentimentScorer:
    """Wrap a VADER analyzer and validate its output."""

    def __init__(self, analyzer: Any | None = None):
        self._analyzer = analyzer or SentimentIntensityAnalyzer()

    def score(self, text: str) -> Sentiment:
        try:
            scores = self._analyzer.polarity_scores(text)
        except Exception as exc:
            raise ScoringError(f"Sentiment scoring failed: {exc}") from exc

        if not isinstance(scores, dict):
            raise ScoringError(f"Scorer returned {type(scores).__name__}, expected dict")
        for key in REQUIRED_KEYS:
            value = scores.get(key)
            if not isinstance(value, Real) or isinstance(value, bool):
                raise ScoringError(f"Scorer returned invalid {key!r}: {value!r}")

        return Sentiment.from_polarity_scores(scores)


def score_many(scorer: Scorer, texts: Iterable[str], max_workers: int = 1) -> list[Sentiment]:
    """Score texts, keeping results in input order regardless of completion order."""
    texts = list(texts)
    if max_workers <= 1 or len(texts) <= 1:
        return [scorer.score(text) for text in texts]

    logger.debug("Scoring %d spans with %d workers", len(texts), max_workers)
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(scorer.score, texts))
