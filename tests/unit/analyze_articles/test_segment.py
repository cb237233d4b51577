"""Tests for analyze_articles.segment module."""

import time

from analyze_articles.models import Sentiment
from analyze_articles.segment import add_full_stops, segment_sentences, split_sentences


class TestAddFullStops:
    def test_adds_full_stop_before_newline(self) -> None:
        assert add_full_stops("Line one\nLine two") == "Line one.\nLine two"

    def test_keeps_existing_full_stop(self) -> None:
        assert add_full_stops("Done.\nNext") == "Done.\nNext"

    def test_no_newline_unchanged(self) -> None:
        assert add_full_stops("Single line") == "Single line"


class TestSplitSentences:
    def test_splits_on_sentence_punctuation(self) -> None:
        assert split_sentences("Hello world. How are you?") == ["Hello world.", "How are you?"]

    def test_newlines_are_boundaries(self) -> None:
        assert split_sentences("First line\nSecond line") == ["First line", "Second line"]

    def test_markup_breaks_are_boundaries(self) -> None:
        assert split_sentences("One thing<br>Another thing") == ["One thing", "Another thing"]

    def test_drops_punctuation_only_spans(self) -> None:
        assert split_sentences("A line.\n.\nB line") == ["A line.", "B line"]

    def test_quote_stays_with_its_sentence(self) -> None:
        sentences = split_sentences('He said "We will win." Critics disagreed.')
        assert sentences == ['He said "We will win."', "Critics disagreed."]

    def test_empty_text(self) -> None:
        assert split_sentences("") == []


class TestSegmentSentences:
    def test_builds_scored_sentences(self, make_scorer, sentiments) -> None:
        scorer = make_scorer({"great": sentiments["positive"]})
        sentences = segment_sentences("This is great\nThis is fine", scorer)

        assert [s.text for s in sentences] == ["This is great.", "This is fine"]
        assert sentences[0].sentiment == sentiments["positive"]
        assert sentences[1].sentiment == sentiments["neutral"]
        assert sentences[0].display_length == len("This is great.")

    def test_scores_newline_collapsed_text(self, make_scorer) -> None:
        scorer = make_scorer()
        segment_sentences("Short one. Another one.", scorer)
        assert scorer.calls == ["Short one.", "Another one."]

    def test_order_preserved_with_concurrent_scoring(self) -> None:
        class SlowFirstScorer:
            def score(self, text):
                index = int(text.split()[1].rstrip("."))
                time.sleep(0.01 * (5 - index))
                return Sentiment(positive=index / 10, negative=0.0, neutral=1 - index / 10)

        text = "\n".join(f"Sentence {i}." for i in range(5))
        sentences = segment_sentences(text, SlowFirstScorer(), max_workers=4)

        assert [s.text for s in sentences] == [f"Sentence {i}." for i in range(5)]
        assert [s.sentiment.positive for s in sentences] == [i / 10 for i in range(5)]
