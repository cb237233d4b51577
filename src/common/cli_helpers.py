"""Common CLI helper utilities."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path


def setup_logging(level: int = logging.INFO) -> None:
    """Configure standard logging format for CLI tools."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def parse_existing_file(value: str, field_name: str = "file") -> Path:
    """Parse a path argument that must point at an existing file.

    Raises:
        argparse.ArgumentTypeError: If the path is not an existing file.
    """
    path = Path(value)
    if not path.is_file():
        raise argparse.ArgumentTypeError(f"{field_name} must be an existing file: {value}")
    return path
