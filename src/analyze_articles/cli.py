"""CLI for analyzing a single article."""

from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv

from common.cli_helpers import setup_logging
from common.local_io import save_jsonl_records_local

from analyze_articles.analyze_articles import analyze
from analyze_articles.config import get_config, load_config, set_config
from analyze_articles.errors import AnalysisError
from analyze_articles.helpers import output_exclusions, parse_analyze_articles_args, summarize_result

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    args = parse_analyze_articles_args(argv)

    load_dotenv()
    setup_logging()

    set_config(load_config(args.config))
    config = get_config()
    html = args.html_file.read_text(encoding="utf-8", errors="replace")

    try:
        result = analyze(args.url, html)
    except AnalysisError as exc:
        logger.error("Failed to analyze %s: %s", args.html_file, exc)
        return 1

    logger.info("Analyzed %s: %s", args.url or args.html_file, summarize_result(result))

    if args.load_local:
        save_jsonl_records_local(
            [result],
            "analyzed_articles",
            output_dir=args.output_dir or config.output.dir,
            exclude=output_exclusions(config.output.include_html, config.output.include_metadata),
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
