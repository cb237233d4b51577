"""Configuration loader for analyze_articles."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from common.config import ConfigSingleton, load_yaml, resolve_config_path, section

from analyze_articles.extract_text import BACKENDS, READABILITY
from analyze_articles.keywords import MIN_KEYWORD_LENGTH

CONFIG_DIR = Path(__file__).parent / "configs"
CONFIG_ENV_VAR = "ANALYZE_ARTICLES_CONFIG"


@dataclass
class ExtractionConfig:
    prefer: str = READABILITY  # "readability" or "trafilatura"


@dataclass
class KeywordConfig:
    min_length: int = MIN_KEYWORD_LENGTH
    extra_stop_words: list[str] = field(default_factory=list)


@dataclass
class OutputConfig:
    dir: str = "output"
    include_html: bool = False
    include_metadata: bool = False


@dataclass
class AnalyzeConfig:
    """Configuration for the article analysis pipeline."""

    language: str = "en"  # spaCy blank pipeline language
    max_workers: int = 1
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    keywords: KeywordConfig = field(default_factory=KeywordConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def __post_init__(self) -> None:
        if not self.language:
            raise ValueError("language must not be empty")

        if self.max_workers < 1:
            raise ValueError(f"Invalid max_workers: {self.max_workers}. Must be >= 1")

        if self.extraction.prefer not in BACKENDS:
            raise ValueError(
                f"Invalid extraction.prefer: {self.extraction.prefer}. "
                f"Must be one of {list(BACKENDS)}"
            )

        if self.keywords.min_length < 1:
            raise ValueError(f"Invalid keywords.min_length: {self.keywords.min_length}. Must be >= 1")


def load_config(config_name: str | None = None) -> AnalyzeConfig:
    """Load analysis config by name (e.g. 'default' or 'test') or path.

    Args:
        config_name: Config name without extension, or path to a config file.
            If None, uses the ANALYZE_ARTICLES_CONFIG env var or "default".

    Returns:
        AnalyzeConfig instance
    """
    config_path = resolve_config_path(config_name, CONFIG_DIR, env_var=CONFIG_ENV_VAR)
    return _parse_config(load_yaml(config_path))


def _parse_config(data: dict) -> AnalyzeConfig:
    extraction_data = section(data, "extraction")
    keyword_data = section(data, "keywords")
    output_data = section(data, "output")

    return AnalyzeConfig(
        language=data.get("language", "en"),
        max_workers=int(data.get("max_workers", 1)),
        extraction=ExtractionConfig(
            prefer=extraction_data.get("prefer", READABILITY),
        ),
        keywords=KeywordConfig(
            min_length=int(keyword_data.get("min_length", MIN_KEYWORD_LENGTH)),
            extra_stop_words=list(keyword_data.get("extra_stop_words") or []),
        ),
        output=OutputConfig(
            dir=output_data.get("dir", "output"),
            include_html=bool(output_data.get("include_html", False)),
            include_metadata=bool(output_data.get("include_metadata", False)),
        ),
    )


_manager: ConfigSingleton[AnalyzeConfig] = ConfigSingleton(load_config)
get_config = _manager.get
set_config = _manager.set
reset_config = _manager.reset
