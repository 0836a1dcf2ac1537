"""HTTP layer for the Bookmarks API."""
