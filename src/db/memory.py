"""In-memory bookmark store."""
import threading

from fastapi import Request

from models.bookmark import Bookmark


class BookmarkStore:
    """
    Ordered, process-local collection of bookmarks.

    Every read-modify-write sequence runs under a single mutex, so a create or
    delete is never interleaved with another one even when handlers run on
    worker threads. Insertion order is preserved for listing.

    The store holds no validation logic; callers go through
    ``services.bookmark_service`` which validates before calling ``add``.
    """

    def __init__(self) -> None:
        self._bookmarks: list[Bookmark] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._bookmarks)

    def snapshot(self) -> list[Bookmark]:
        """Return a copy of the collection in insertion order."""
        with self._lock:
            return list(self._bookmarks)

    def find(self, bookmark_id: str) -> list[Bookmark]:
        """Return all bookmarks whose id equals ``bookmark_id`` (exact match)."""
        with self._lock:
            return [b for b in self._bookmarks if b.id == bookmark_id]

    def add(self, bookmark: Bookmark) -> bool:
        """
        Append a bookmark to the end of the collection.

        Returns:
            False without storing anything if a bookmark with the same id
            already exists, True otherwise.
        """
        with self._lock:
            if any(b.id == bookmark.id for b in self._bookmarks):
                return False
            self._bookmarks.append(bookmark)
            return True

    def remove(self, bookmark_id: str) -> int:
        """
        Remove every bookmark whose id equals ``bookmark_id``.

        Returns:
            Number of entries removed (0 if the id was not present).
        """
        with self._lock:
            kept = [b for b in self._bookmarks if b.id != bookmark_id]
            removed = len(self._bookmarks) - len(kept)
            self._bookmarks = kept
            return removed


def get_bookmark_store(request: Request) -> BookmarkStore:
    """Return the store owned by the running application."""
    return request.app.state.bookmark_store
