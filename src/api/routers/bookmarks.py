"""Bookmark CRUD endpoints."""
from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import PlainTextResponse

from api.dependencies import get_bookmark_store, require_api_token
from db.memory import BookmarkStore
from schemas.bookmark import BookmarkCreate, BookmarkResponse, parse_bookmark_create
from services import bookmark_service

router = APIRouter(
    prefix="/bookmarks",
    tags=["bookmarks"],
    dependencies=[Depends(require_api_token)],
)


@router.get("", response_model=list[BookmarkResponse])
async def list_bookmarks(
    store: BookmarkStore = Depends(get_bookmark_store),
) -> list[BookmarkResponse]:
    """List all bookmarks in insertion order."""
    bookmarks = bookmark_service.list_bookmarks(store)
    return [BookmarkResponse.model_validate(b) for b in bookmarks]


@router.post(
    "",
    response_model=BookmarkResponse,
    status_code=201,
    responses={400: {"description": "The first validation rule the input broke (plain text)"}},
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": BookmarkCreate.model_json_schema()}},
        },
    },
)
async def create_bookmark(
    request: Request,
    store: BookmarkStore = Depends(get_bookmark_store),
) -> BookmarkResponse | PlainTextResponse:
    """
    Create a new bookmark.

    The body is read here rather than declared as a parameter so that it is only
    parsed after the bearer token has been checked.
    """
    try:
        data = parse_bookmark_create(await request.body())
        bookmark = bookmark_service.create_bookmark(store, data)
    except ValueError as e:
        return PlainTextResponse(str(e), status_code=400)
    return BookmarkResponse.model_validate(bookmark)


@router.get(
    "/{bookmark_id}",
    response_model=list[BookmarkResponse],
    responses={404: {"description": "Bookmark not found (empty body)"}},
)
async def get_bookmark(
    bookmark_id: str,
    store: BookmarkStore = Depends(get_bookmark_store),
) -> list[BookmarkResponse] | Response:
    """Get a single bookmark by ID, wrapped in a one-element list."""
    bookmark = bookmark_service.get_bookmark(store, bookmark_id)
    if bookmark is None:
        return Response(status_code=404)
    return [BookmarkResponse.model_validate(bookmark)]


@router.delete(
    "/{bookmark_id}",
    response_class=PlainTextResponse,
    responses={400: {"description": "Bookmark does not exist"}},
)
async def delete_bookmark(
    bookmark_id: str,
    store: BookmarkStore = Depends(get_bookmark_store),
) -> PlainTextResponse:
    """Delete a bookmark. Responds with the removed ID."""
    deleted = bookmark_service.delete_bookmark(store, bookmark_id)
    if not deleted:
        return PlainTextResponse("Bookmark does not exist", status_code=400)
    return PlainTextResponse(bookmark_id)
