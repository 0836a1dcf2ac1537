"""Service layer for bookmark CRUD operations."""
import logging

from uuid6 import uuid7

from db.memory import BookmarkStore
from models.bookmark import Bookmark
from schemas.bookmark import BookmarkCreate
from schemas.validators import validate_bookmark_fields

logger = logging.getLogger(__name__)


def list_bookmarks(store: BookmarkStore) -> list[Bookmark]:
    """Get all bookmarks in insertion order."""
    return store.snapshot()


def get_bookmark(store: BookmarkStore, bookmark_id: str) -> Bookmark | None:
    """Get a bookmark by ID. Returns None if not found."""
    matches = store.find(bookmark_id)
    return matches[0] if matches else None


def create_bookmark(store: BookmarkStore, data: BookmarkCreate) -> Bookmark:
    """
    Validate and store a new bookmark.

    Fields are checked in order (title, url, desc, rating) and the first failing
    rule is reported. The stored rating is the integer it was coerced to.

    Raises:
        ValueError: If any field fails validation.
    """
    rating = validate_bookmark_fields(data.title, data.url, data.desc, data.rating)

    while True:
        bookmark = Bookmark(
            id=str(uuid7()),
            title=data.title,
            url=data.url,
            desc=data.desc,
            rating=rating,
        )
        # add() refuses an id already in the store
        if store.add(bookmark):
            break

    logger.info("Created bookmark %s (%s)", bookmark.id, bookmark.url)
    return bookmark


def delete_bookmark(store: BookmarkStore, bookmark_id: str) -> bool:
    """
    Delete a bookmark. Returns True if deleted, False if not found.

    Every entry carrying the id is removed, should more than one exist.
    """
    removed = store.remove(bookmark_id)
    if removed == 0:
        return False
    logger.info("Deleted bookmark %s", bookmark_id)
    return True
