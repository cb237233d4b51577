"""Exceptions raised by the article analysis pipeline."""


class AnalysisError(Exception):
    """Base class for failures that abort the analysis of a document."""


class ExtractionError(AnalysisError):
    """Neither extraction backend produced usable body text."""


class ScoringError(AnalysisError):
    """The sentiment scorer failed or returned malformed output."""
