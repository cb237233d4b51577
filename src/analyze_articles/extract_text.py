import logging
from typing import Any, Optional

import trafilatura
from readability import Document
from lxml import html as lxml_html

from analyze_articles.errors import ExtractionError
from analyze_articles.models import ExtractedArticle

logger = logging.getLogger(__name__)

TRAFILATURA = "trafilatura"
READABILITY = "readability"
BACKENDS = (READABILITY, TRAFILATURA)

LIST_FIELDS = ("tags", "categories")


def extract_text_and_metadata(url: str, html: str, prefer: str = READABILITY) -> ExtractedArticle:
    """
    Extract article body text and metadata from raw HTML.

    Both backends run: trafilatura supplies the structured metadata (title,
    description, tags), readability supplies the main content. Body text
    comes from the preferred backend, falling back to the other one.

    Raises:
        ExtractionError: If neither backend produced body text.
    """
    if prefer not in BACKENDS:
        raise ValueError(f"Invalid extraction backend: {prefer}. Must be one of {BACKENDS}")
    if not url:
        logger.warning("No URL given, article text extraction may be degraded")

    structured: dict[str, Any] = {}
    try:
        structured = extract_with_trafilatura(url, html)
    except Exception as e:
        logger.warning("trafilatura failed for %s: %s", url, e)

    readable: Optional[dict[str, Any]] = None
    try:
        readable = extract_with_readability(url, html)
    except Exception as e:
        logger.warning("readability failed for %s: %s", url, e)

    candidates = {
        TRAFILATURA: structured.get("text"),
        READABILITY: readable.get("text") if readable else None,
    }
    order = [prefer] + [backend for backend in BACKENDS if backend != prefer]

    for backend in order:
        text = (candidates[backend] or "").strip()
        if text:
            logger.info("Extracted %d characters of text for %s using %s", len(text), url, backend)
            return ExtractedArticle(
                text=text,
                metadata={TRAFILATURA: structured, READABILITY: readable},
            )

    raise ExtractionError(f"No article text could be extracted for {url or '<no url>'}")


def _as_list(value: Any) -> list[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return [str(part) for part in value if part]


def extract_with_trafilatura(url: str, html: str) -> dict[str, Any]:
    document = trafilatura.bare_extraction(html, url=url or None, with_metadata=True)
    if document is None:
        return {}

    data = {}
    for key, value in document.as_dict().items():
        if key in LIST_FIELDS:
            data[key] = _as_list(value)
        elif value is None or isinstance(value, (str, int, float, bool)):
            data[key] = value
    return data


def extract_with_readability(url: str, html: str) -> Optional[dict[str, Any]]:
    doc = Document(html, url=url or None)
    summary_html = doc.summary()

    tree = lxml_html.fromstring(summary_html)
    text = tree.text_content()

    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        return None
    return {
        "title": doc.title(),
        "short_title": doc.short_title(),
        "text": "\n".join(lines),
    }
