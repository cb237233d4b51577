"""Shared fixtures for analyze_articles tests."""

import pytest

from analyze_articles.config import reset_config
from analyze_articles.models import Sentiment

NEUTRAL = Sentiment(positive=0.0, negative=0.0, neutral=1.0)
POSITIVE = Sentiment(positive=0.6, negative=0.0, neutral=0.4, compound=0.7)
NEGATIVE = Sentiment(positive=0.0, negative=0.6, neutral=0.4, compound=-0.7)


class StubScorer:
    """Returns the sentiment of the first matching fragment, else a default."""

    def __init__(self, overrides=None, default=NEUTRAL):
        self.overrides = overrides or {}
        self.default = default
        self.calls = []

    def score(self, text):
        self.calls.append(text)
        for fragment, sentiment in self.overrides.items():
            if fragment in text:
                return sentiment
        return self.default


@pytest.fixture
def make_scorer():
    return StubScorer


@pytest.fixture
def sentiments():
    return {"neutral": NEUTRAL, "positive": POSITIVE, "negative": NEGATIVE}


@pytest.fixture(autouse=True)
def isolated_config():
    reset_config()
    yield
    reset_config()
