"""Link quotes and keywords to the sentences that mention them."""

from __future__ import annotations

import logging
from typing import Iterable, Union

from analyze_articles.models import Keyword, Quote, Sentence, Sentiment, SentimentTally

logger = logging.getLogger(__name__)

POSITIVE = "positive"
NEGATIVE = "negative"
NEUTRAL = "neutral"

Reference = Union[Quote, Keyword]


def classify_sentiment(sentiment: Sentiment) -> str:
    """
    Assign a sentence to one sentiment bucket.

    Negative requires beating both positive and neutral; anything that is
    neither clearly positive nor clearly negative counts as neutral.
    """
    if sentiment.positive > sentiment.negative:
        return POSITIVE
    if sentiment.negative > sentiment.positive and sentiment.negative > sentiment.neutral:
        return NEGATIVE
    return NEUTRAL


def _increment(tally: SentimentTally, bucket: str) -> None:
    if bucket == POSITIVE:
        tally.positive_count += 1
    elif bucket == NEGATIVE:
        tally.negative_count += 1
    else:
        tally.neutral_count += 1


def _reference_sentence(references: Iterable[Reference], sentence: Sentence, bucket: str) -> None:
    sentence_lower = sentence.text.lower()
    for reference in references:
        if reference.text.lower() not in sentence_lower:
            continue
        reference.occurrence_count += 1
        if sentence.text not in reference.sentence_texts:
            reference.sentence_texts.append(sentence.text)
        _increment(reference.sentiment, bucket)


def cross_reference(
    sentences: list[Sentence],
    quotes: list[Quote],
    keywords: list[Keyword],
) -> None:
    """
    Count each quote and keyword per matching sentence, in place.

    Matching is a case-insensitive substring test. Keywords are re-sorted by
    occurrence count (descending, stable); quotes keep extraction order.
    """
    for sentence in sentences:
        bucket = classify_sentiment(sentence.sentiment)
        _reference_sentence(quotes, sentence, bucket)
        _reference_sentence(keywords, sentence, bucket)

    keywords.sort(key=lambda keyword: keyword.occurrence_count, reverse=True)
    logger.debug(
        "Cross-referenced %d sentences against %d quotes and %d keywords",
        len(sentences),
        len(quotes),
        len(keywords),
    )
