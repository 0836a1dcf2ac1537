"""Authentication module for static bearer-token validation."""
import secrets

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.config import Settings, get_request_settings


# HTTP Bearer token scheme
security = HTTPBearer(auto_error=False)


class AuthenticationError(Exception):
    """
    Raised when a request lacks a valid bearer token.

    Rendered by the application as a 401 with a JSON ``{"error": message}`` body.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


def verify_token(token: str, settings: Settings) -> bool:
    """Compare a presented token with the configured one in constant time."""
    return secrets.compare_digest(token.encode(), settings.api_token.encode())


async def require_api_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    settings: Settings = Depends(get_request_settings),
) -> None:
    """
    Dependency that rejects requests without the configured bearer token.

    HTTPBearer yields None when the Authorization header is missing or its scheme
    is not "Bearer" (case-insensitive).

    Raises:
        AuthenticationError: If the header is missing/malformed or the token is wrong.
    """
    if credentials is None:
        raise AuthenticationError("No valid Auth header found")

    if not verify_token(credentials.credentials, settings):
        raise AuthenticationError("Invalid credentials")
