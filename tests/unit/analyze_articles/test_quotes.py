"""Tests for analyze_articles.quotes module."""

from analyze_articles.quotes import extract_quotes, normalize_quotation_marks


class TestNormalizeQuotationMarks:
    def test_curly_quotes(self) -> None:
        assert normalize_quotation_marks("“Yes”") == '"Yes"'

    def test_german_quotes(self) -> None:
        assert normalize_quotation_marks("„Ja“") == '"Ja"'

    def test_guillemets(self) -> None:
        assert normalize_quotation_marks("«Oui»") == '"Oui"'

    def test_plain_text_unchanged(self) -> None:
        assert normalize_quotation_marks("no quotes here") == "no quotes here"


class TestExtractQuotes:
    def test_finds_quotes_in_order(self) -> None:
        text = 'She said "first thing" and then "second thing".'
        assert extract_quotes(text) == ["first thing", "second thing"]

    def test_dedup_keeps_last_casing(self) -> None:
        text = 'He said "Hello World" and later "hello world".'
        assert extract_quotes(text) == ["hello world"]

    def test_dedup_keeps_first_position(self) -> None:
        text = '"Alpha" then "Beta" then "ALPHA"'
        assert extract_quotes(text) == ["ALPHA", "Beta"]

    def test_guillemets_stripped(self) -> None:
        assert extract_quotes("Il a dit «Bonjour».") == ["Bonjour"]

    def test_curly_quotes_trimmed(self) -> None:
        assert extract_quotes("“  We will win  ”, she said.") == ["We will win"]

    def test_multiline_quote(self) -> None:
        text = 'He said "this spans\ntwo lines" today.'
        assert extract_quotes(text) == ["this spans\ntwo lines"]

    def test_unterminated_quote_ignored(self) -> None:
        assert extract_quotes('A "closed" quote and an "open one') == ["closed"]

    def test_escaped_quote_inside(self) -> None:
        assert extract_quotes('x "a \\" b" y') == ['a \\" b']

    def test_empty_quote_kept(self) -> None:
        assert extract_quotes('He said "" twice.') == [""]

    def test_no_quotes(self) -> None:
        assert extract_quotes("Nothing quoted here.") == []

    def test_empty_text(self) -> None:
        assert extract_quotes("") == []
