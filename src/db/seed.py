"""Sample bookmarks loaded at startup when SEED_BOOKMARKS is enabled."""
import logging

from db.memory import BookmarkStore
from schemas.bookmark import BookmarkCreate
from services import bookmark_service

logger = logging.getLogger(__name__)

SAMPLE_BOOKMARKS = [
    BookmarkCreate(
        title="Google",
        url="http://google.com",
        desc="An indie search engine startup",
        rating=4,
    ),
    BookmarkCreate(
        title="Fluffiest Cats",
        url="http://medium.com/bloggerx/fluffiest-cats-334",
        desc="The only list of fluffy cats online",
        rating=5,
    ),
]


def seed_bookmarks(store: BookmarkStore) -> int:
    """
    Load the sample bookmarks through the regular create path.

    Returns:
        Number of bookmarks added.
    """
    for data in SAMPLE_BOOKMARKS:
        bookmark_service.create_bookmark(store, data)
    logger.info("Seeded %d sample bookmarks", len(SAMPLE_BOOKMARKS))
    return len(SAMPLE_BOOKMARKS)
