"""Analyze article text into sentences, quotes, keywords and sentiment."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import AbstractSet, Any

from analyze_articles.config import AnalyzeConfig, get_config
from analyze_articles.cross_reference import cross_reference
from analyze_articles.extract_text import TRAFILATURA, extract_text_and_metadata
from analyze_articles.keywords import build_stop_words, extract_keywords
from analyze_articles.models import (
    AnalysisResult,
    ArticleInput,
    DocumentSentiment,
    Keyword,
    Quote,
)
from analyze_articles.quotes import extract_quotes
from analyze_articles.segment import segment_sentences
from analyze_articles.sentiment import Scorer, SentimentScorer

logger = logging.getLogger(__name__)


def _build_article_input(url: str, text: str, structured: dict[str, Any]) -> ArticleInput:
    return ArticleInput(
        url=url,
        text=text,
        headline_text=structured.get("title") or "",
        description_text=structured.get("description") or "",
        tags=tuple(structured.get("tags") or ()),
    )


def _build_word_pool(article: ArticleInput) -> str:
    return " ".join(
        [article.headline_text, article.description_text, ",".join(article.tags), article.text]
    )


def score_document(article: ArticleInput, scorer: Scorer) -> DocumentSentiment:
    """Score headline, body and headline + description + body concurrently."""
    overall_text = f"{article.headline_text} {article.description_text} {article.text}"
    with ThreadPoolExecutor(max_workers=3) as executor:
        headline = executor.submit(scorer.score, article.headline_text)
        body = executor.submit(scorer.score, article.text)
        overall = executor.submit(scorer.score, overall_text)
        return DocumentSentiment(
            headline=headline.result(),
            text=body.result(),
            overall=overall.result(),
        )


def analyze_article(
    article: ArticleInput,
    scorer: Scorer | None = None,
    stop_words: AbstractSet[str] | None = None,
    config: AnalyzeConfig | None = None,
    html: str | None = None,
    metadata: dict[str, Any] | None = None,
) -> AnalysisResult:
    """
    Analyze already-extracted article text.

    Args:
        article: Article text and the metadata fields the analysis reads.
        scorer: Sentiment scorer (defaults to VADER).
        stop_words: Words never reported as keywords (defaults to spaCy's
            English list plus configured extras).
        config: Pipeline config (defaults to the process-wide config).
        html: Raw HTML passed through to the result untouched.
        metadata: Extractor metadata passed through to the result untouched.

    Returns:
        AnalysisResult for the article.
    """
    config = config or get_config()
    scorer = scorer or SentimentScorer()
    if stop_words is None:
        stop_words = build_stop_words(config.keywords.extra_stop_words)

    quotes = [Quote(text=text) for text in extract_quotes(article.text)]

    sentences = segment_sentences(
        article.text,
        scorer,
        language=config.language,
        max_workers=config.max_workers,
    )

    keywords = [
        Keyword(text=text)
        for text in extract_keywords(
            _build_word_pool(article),
            stop_words=stop_words,
            min_length=config.keywords.min_length,
        )
    ]
    keywords.extend(Keyword(text=tag) for tag in article.tags)

    cross_reference(sentences, quotes, keywords)

    sentiment = score_document(article, scorer)
    word_count = len(article.text.split())

    logger.info(
        "Analyzed %s: %d sentences, %d quotes, %d keywords, %d words",
        article.url,
        len(sentences),
        len(quotes),
        len(keywords),
        word_count,
    )

    return AnalysisResult(
        url=article.url,
        sentences=sentences,
        quotes=quotes,
        keywords=keywords,
        sentiment=sentiment,
        word_count=word_count,
        text=article.text,
        html=html,
        metadata=metadata or {},
    )


def analyze(
    url: str,
    html: str,
    scorer: Scorer | None = None,
    stop_words: AbstractSet[str] | None = None,
    config: AnalyzeConfig | None = None,
) -> AnalysisResult:
    """
    Extract and analyze an article from raw HTML.

    The URL is used by the extractors to resolve the main content and is
    copied to the result.

    Raises:
        ExtractionError: If no body text could be extracted.
        ScoringError: If the sentiment scorer fails on any span.
    """
    config = config or get_config()
    extracted = extract_text_and_metadata(url, html, prefer=config.extraction.prefer)

    structured = extracted.metadata.get(TRAFILATURA) or {}
    article = _build_article_input(url, extracted.text, structured)

    # Canonical body text is carried on the result itself
    metadata = dict(extracted.metadata)
    metadata[TRAFILATURA] = {key: value for key, value in structured.items() if key != "text"}

    return analyze_article(
        article,
        scorer=scorer,
        stop_words=stop_words,
        config=config,
        html=html,
        metadata=metadata,
    )
