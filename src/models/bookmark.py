"""Bookmark record held by the in-memory store."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Bookmark:
    """A validated bookmark. Instances are immutable once stored."""

    id: str
    title: str
    url: str
    desc: str
    rating: int
