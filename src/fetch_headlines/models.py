"""Data models for fetch_headlines pipeline stage."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Headline:
    """Normalized news headline passed to the classifier."""
    title: str
    url: str
    source: str
    description: str = ""
