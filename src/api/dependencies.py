"""FastAPI dependencies for injection."""
from core.auth import require_api_token
from db.memory import get_bookmark_store

__all__ = [
    "get_bookmark_store",
    "require_api_token",
]
