"""Serialization utilities."""

from dataclasses import asdict
from typing import Iterable


def serialize_dataclass(obj, exclude: Iterable[str] = ()) -> dict:
    """Serialize a dataclass to a dict, dropping excluded top-level fields."""
    excluded = set(exclude)
    return {key: value for key, value in asdict(obj).items() if key not in excluded}
