"""Data models for analyze_articles pipeline stage."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class Sentiment:
    """Polarity magnitudes for a span of text."""
    positive: float
    negative: float
    neutral: float
    compound: float = 0.0

    @classmethod
    def from_polarity_scores(cls, scores: Mapping[str, Any]) -> Sentiment:
        """Build from a VADER-style mapping with pos/neg/neu/compound keys."""
        return cls(
            positive=float(scores["pos"]),
            negative=float(scores["neg"]),
            neutral=float(scores["neu"]),
            compound=float(scores.get("compound", 0.0)),
        )


@dataclass(frozen=True)
class ArticleInput:
    """Extracted article text plus the metadata fields the analysis reads."""
    url: str
    text: str
    headline_text: str = ""
    description_text: str = ""
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class Sentence:
    """A sentence span in document order with its own sentiment."""
    text: str
    display_length: int
    sentiment: Sentiment


@dataclass
class SentimentTally:
    """Counts of matching sentences per sentiment bucket."""
    positive_count: int = 0
    negative_count: int = 0
    neutral_count: int = 0


@dataclass
class Quote:
    """Quoted span and every sentence it appears in."""
    text: str
    occurrence_count: int = 0
    sentence_texts: list[str] = field(default_factory=list)
    sentiment: SentimentTally = field(default_factory=SentimentTally)


@dataclass
class Keyword:
    """Capitalization-derived topic or entity phrase and every sentence it appears in."""
    text: str
    occurrence_count: int = 0
    sentence_texts: list[str] = field(default_factory=list)
    sentiment: SentimentTally = field(default_factory=SentimentTally)


@dataclass(frozen=True)
class DocumentSentiment:
    """Whole-document sentiment for the headline, the body and both combined."""
    headline: Sentiment
    text: Sentiment
    overall: Sentiment


@dataclass
class ExtractedArticle:
    """Body text and per-backend metadata produced by the extractors."""
    text: str
    metadata: dict[str, Any]


@dataclass
class AnalysisResult:
    """Cross-referenced analysis of a single article."""
    url: str
    sentences: list[Sentence]
    quotes: list[Quote]
    keywords: list[Keyword]
    sentiment: DocumentSentiment
    word_count: int
    text: str
    html: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
