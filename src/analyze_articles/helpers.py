"""Helper functions for analyze_articles CLI."""

from __future__ import annotations

import argparse

from common.cli_helpers import parse_existing_file

from analyze_articles.models import AnalysisResult


def parse_analyze_articles_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for analyze_articles."""

    parser = argparse.ArgumentParser(description="Analyze a news article saved as HTML.")

    # Input options
    parser.add_argument(
        "--html-file",
        required=True,
        type=lambda v: parse_existing_file(v, "html-file"),
        help="Path to the article HTML",
    )
    parser.add_argument(
        "--url",
        default="",
        help="Original article URL (improves text extraction)",
    )

    # Config options
    parser.add_argument(
        "--config",
        default=None,
        help="Config name or path (default: ANALYZE_ARTICLES_CONFIG env var or 'default')",
    )

    # Output options
    parser.add_argument("--load-local", action="store_true", help="Save results to local file")
    parser.add_argument("--output-dir", default=None, help="Override the configured output directory")

    return parser.parse_args(argv)


def output_exclusions(include_html: bool, include_metadata: bool) -> list[str]:
    """Fields left out of the saved record."""
    excluded = []
    if not include_html:
        excluded.append("html")
    if not include_metadata:
        excluded.append("metadata")
    return excluded


def summarize_result(result: AnalysisResult, top: int = 5) -> str:
    """One-line summary of an analysis for logging."""
    top_keywords = ", ".join(
        f"{keyword.text} ({keyword.occurrence_count})" for keyword in result.keywords[:top]
    )
    return (
        f"{len(result.sentences)} sentences, {len(result.quotes)} quotes, "
        f"{len(result.keywords)} keywords, {result.word_count} words; "
        f"overall compound={result.sentiment.overall.compound:.3f}; "
        f"top keywords: {top_keywords or '-'}"
    )
