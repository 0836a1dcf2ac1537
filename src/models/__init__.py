"""Domain models."""
from models.bookmark import Bookmark

__all__ = ["Bookmark"]
