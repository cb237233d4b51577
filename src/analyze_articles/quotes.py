"""Extract quoted spans from article text."""

import logging
import re

logger = logging.getLogger(__name__)

# English curly, German low/high and French guillemet quotation marks
QUOTATION_MARKS_RE = re.compile(r"[“”„«»]")
QUOTE_RE = re.compile(r'(["])(\\?.)*?\1', re.DOTALL)


def normalize_quotation_marks(text: str) -> str:
    return QUOTATION_MARKS_RE.sub('"', text)


def _strip_quote(raw: str) -> str:
    quote = raw.strip()
    if quote.startswith('"'):
        quote = quote[1:]
    if quote.endswith('"'):
        quote = quote[:-1]
    return quote.strip()


def extract_quotes(text: str) -> list[str]:
    """
    Find every double-quoted span in text.

    Quotes are deduplicated case-insensitively. The casing of the last
    occurrence is kept, at the position of the first occurrence.

    Args:
        text: Article body text.

    Returns:
        List of unique quote strings without their quotation marks.
    """
    if not text:
        return []

    unique_quotes: dict[str, str] = {}
    for match in QUOTE_RE.finditer(normalize_quotation_marks(text)):
        quote = _strip_quote(match.group(0))
        unique_quotes[quote.lower()] = quote

    logger.debug("Found %d unique quotes", len(unique_quotes))
    return list(unique_quotes.values())
