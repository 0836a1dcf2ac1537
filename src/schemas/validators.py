"""
Validation rules for bookmark input.

Rules are checked in a fixed order and the first failure wins, so a client
always learns which specific rule its request broke.
"""
import math
import re
from typing import Annotated, Any

from pydantic import AnyUrl, TypeAdapter, UrlConstraints, ValidationError

TITLE_MIN_LENGTH = 2
TITLE_MAX_LENGTH = 20
DESC_MIN_LENGTH = 8
DESC_MAX_LENGTH = 60
ALLOWED_RATINGS = frozenset({1, 2, 3, 4, 5})

TITLE_REQUIRED = "The title is required."
TITLE_LENGTH = (
    f"The title must be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH} characters."
)
URL_REQUIRED = "A url is required."
URL_INVALID = "The url must be a valid url."
DESC_REQUIRED = "The description is required."
DESC_LENGTH = (
    f"The description must be between {DESC_MIN_LENGTH} and {DESC_MAX_LENGTH} characters."
)
RATING_REQUIRED = "Rating is required."
RATING_INVALID = 'Rating must be one of "1", "2", "3", "4", or "5".'

# Leading optional sign and digits, the way integer-prefix parsing reads "4 stars"
_INT_PREFIX_PATTERN = re.compile(r"^\s*([+-]?\d+)")

# HttpUrl would also cap the length at 2083 characters; long URLs are valid here
_http_url_adapter = TypeAdapter(
    Annotated[AnyUrl, UrlConstraints(allowed_schemes=["http", "https"], host_required=True)],
)


def _is_missing(value: Any) -> bool:  # noqa: ANN401
    """None, empty strings, zero and False all count as not provided."""
    return value is None or value == "" or value is False or value == 0


def is_web_url(value: Any) -> bool:  # noqa: ANN401
    """
    Check that a value is an absolute http(s) URL with a host.

    Whitespace anywhere in the string is rejected outright, since the URL parser
    would otherwise percent-encode or strip it.
    """
    if not isinstance(value, str) or any(ch.isspace() for ch in value):
        return False
    try:
        parsed = _http_url_adapter.validate_python(value)
    except ValidationError:
        return False
    return bool(parsed.host)


def coerce_rating(value: Any) -> int | None:  # noqa: ANN401
    """
    Coerce a rating to an integer.

    Ints pass through, floats are truncated, strings are read from their leading
    sign and digits ("4" -> 4, " 4 stars" -> 4). Booleans, non-finite floats and
    anything else yield None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        match = _INT_PREFIX_PATTERN.match(value)
        return int(match.group(1)) if match else None
    return None


def _has_length_between(value: Any, minimum: int, maximum: int) -> bool:  # noqa: ANN401
    return isinstance(value, str) and minimum <= len(value) <= maximum


def validate_bookmark_fields(
    title: Any,  # noqa: ANN401
    url: Any,  # noqa: ANN401
    desc: Any,  # noqa: ANN401
    rating: Any,  # noqa: ANN401
) -> int:
    """
    Validate raw bookmark fields.

    Args:
        title: Title as submitted by the client.
        url: URL as submitted by the client.
        desc: Description as submitted by the client.
        rating: Rating as submitted (int, float or numeric string).

    Returns:
        The rating coerced to an int.

    Raises:
        ValueError: With the message of the first rule that fails.
    """
    if _is_missing(title):
        raise ValueError(TITLE_REQUIRED)
    if not _has_length_between(title, TITLE_MIN_LENGTH, TITLE_MAX_LENGTH):
        raise ValueError(TITLE_LENGTH)

    if _is_missing(url):
        raise ValueError(URL_REQUIRED)
    if not is_web_url(url):
        raise ValueError(URL_INVALID)

    if _is_missing(desc):
        raise ValueError(DESC_REQUIRED)
    if not _has_length_between(desc, DESC_MIN_LENGTH, DESC_MAX_LENGTH):
        raise ValueError(DESC_LENGTH)

    if _is_missing(rating):
        raise ValueError(RATING_REQUIRED)
    coerced = coerce_rating(rating)
    if coerced not in ALLOWED_RATINGS:
        raise ValueError(RATING_INVALID)

    return coerced
