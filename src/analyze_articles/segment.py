"""Split article text into scored sentences."""

from __future__ import annotations

import logging
import re
from functools import lru_cache

import spacy

from analyze_articles.models import Sentence
from analyze_articles.sentiment import Scorer, score_many

logger = logging.getLogger(__name__)

LINE_END_RE = re.compile(r"([^.])\n")
HTML_BOUNDARY_RE = re.compile(r"<\s*(?:br|/?p)\b[^>]*>", re.IGNORECASE)
WORD_CHAR_RE = re.compile(r"\w")


@lru_cache(maxsize=None)
def load_sentencizer(language: str = "en"):
    """Blank spaCy pipeline with only the rule-based sentencizer."""
    logger.info("Loading spaCy sentencizer for language: %s", language)
    nlp = spacy.blank(language)
    nlp.add_pipe("sentencizer")
    return nlp


def add_full_stops(text: str) -> str:
    """Insert a full stop before every newline that doesn't already follow one."""
    return LINE_END_RE.sub(r"\1.\n", text)


def split_sentences(text: str, language: str = "en") -> list[str]:
    """
    Split text into sentence strings in document order.

    Newlines and <br>/<p> markup are hard boundaries; within a line the
    spaCy sentencizer decides. Spans without any word character (e.g. the
    lone "." left behind by blank lines) are dropped.
    """
    if not text:
        return []

    nlp = load_sentencizer(language)
    lines = HTML_BOUNDARY_RE.sub("\n", text).split("\n")

    sentences = []
    for line in lines:
        if not line.strip():
            continue
        for span in nlp(line).sents:
            sentence = span.text.strip()
            if sentence and WORD_CHAR_RE.search(sentence):
                sentences.append(sentence)
    return sentences


def segment_sentences(
    text: str,
    scorer: Scorer,
    language: str = "en",
    max_workers: int = 1,
) -> list[Sentence]:
    """Segment text into Sentence records, each scored on its newline-collapsed form."""
    raw_sentences = split_sentences(add_full_stops(text), language)
    flattened = [sentence.replace("\n", " ") for sentence in raw_sentences]
    sentiments = score_many(scorer, flattened, max_workers=max_workers)

    return [
        Sentence(text=raw, display_length=len(flat), sentiment=sentiment)
        for raw, flat, sentiment in zip(raw_sentences, flattened, sentiments, strict=True)
    ]
