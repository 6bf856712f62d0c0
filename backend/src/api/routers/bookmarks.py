"""Bookmark CRUD endpoints."""
from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_current_user
from models.user import User
from schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from services import bookmark_service

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])

# Primary keys are 32-bit integers; larger ids would overflow the driver
MAX_BOOKMARK_ID = 2**31 - 1


@router.post("/", response_model=BookmarkResponse, status_code=201)
async def create_bookmark(
    data: BookmarkCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """Create a new bookmark."""
    bookmark = await bookmark_service.create_bookmark(db, current_user.id, data)
    return BookmarkResponse.model_validate(bookmark)


@router.get("/", response_model=list[BookmarkResponse])
async def list_bookmarks(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> list[BookmarkResponse]:
    """List all bookmarks for the current user."""
    bookmarks = await bookmark_service.get_bookmarks(db, current_user.id)
    return [BookmarkResponse.model_validate(b) for b in bookmarks]


@router.get("/{bookmark_id}", response_model=BookmarkResponse | None)
async def get_bookmark(
    bookmark_id: int = Path(ge=1, le=MAX_BOOKMARK_ID),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse | None:
    """
    Get a single bookmark by ID.

    Returns null (not 404) when the bookmark is missing or owned by another user.
    """
    bookmark = await bookmark_service.get_bookmark(db, current_user.id, bookmark_id)
    if bookmark is None:
        return None
    return BookmarkResponse.model_validate(bookmark)


@router.patch("/{bookmark_id}", response_model=BookmarkResponse)
async def edit_bookmark(
    data: BookmarkUpdate,
    bookmark_id: int = Path(ge=1, le=MAX_BOOKMARK_ID),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """Update a bookmark."""
    bookmark = await bookmark_service.edit_bookmark(
        db, current_user.id, bookmark_id, data,
    )
    return BookmarkResponse.model_validate(bookmark)


@router.delete("/{bookmark_id}", status_code=204)
async def delete_bookmark(
    bookmark_id: int = Path(ge=1, le=MAX_BOOKMARK_ID),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> None:
    """Delete a bookmark."""
    await bookmark_service.delete_bookmark(db, current_user.id, bookmark_id)
