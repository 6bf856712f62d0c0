"""Service layer for ownership-scoped bookmark CRUD."""
import logging
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import AuthorizationError
from models.bookmark import Bookmark
from schemas.bookmark import BookmarkCreate, BookmarkUpdate

logger = logging.getLogger(__name__)

NOT_ALLOWED = "You are not allowed to edit this bookmark"


async def create_bookmark(
    db: AsyncSession,
    user_id: int,
    data: BookmarkCreate,
) -> Bookmark:
    """Create a new bookmark owned by user_id."""
    bookmark = Bookmark(user_id=user_id, **data.model_dump())
    db.add(bookmark)
    await db.flush()
    await db.refresh(bookmark)
    return bookmark


async def get_bookmarks(db: AsyncSession, user_id: int) -> Sequence[Bookmark]:
    """Get all bookmarks owned by user_id, in database order."""
    result = await db.execute(select(Bookmark).where(Bookmark.user_id == user_id))
    return result.scalars().all()


async def get_bookmark(
    db: AsyncSession,
    user_id: int,
    bookmark_id: int,
) -> Bookmark | None:
    """
    Get a bookmark by ID, scoped to its owner in the query.

    Returns None if it doesn't exist or belongs to someone else.
    """
    result = await db.execute(
        select(Bookmark).where(
            Bookmark.id == bookmark_id,
            Bookmark.user_id == user_id,
        ),
    )
    return result.scalar_one_or_none()


async def _get_owned_for_mutation(
    db: AsyncSession,
    user_id: int,
    bookmark_id: int,
) -> Bookmark:
    """
    Load a bookmark by ID alone, then check the owner.

    Missing and foreign bookmarks raise the same AuthorizationError.
    """
    bookmark = await db.get(Bookmark, bookmark_id)
    if bookmark is None or bookmark.user_id != user_id:
        logger.warning(
            "User %s denied access to bookmark %s", user_id, bookmark_id,
        )
        raise AuthorizationError(NOT_ALLOWED)
    return bookmark


async def edit_bookmark(
    db: AsyncSession,
    user_id: int,
    bookmark_id: int,
    data: BookmarkUpdate,
) -> Bookmark:
    """
    Apply a partial update to a bookmark owned by user_id.

    Raises:
        AuthorizationError: If the bookmark is missing or not owned by user_id.
    """
    bookmark = await _get_owned_for_mutation(db, user_id, bookmark_id)

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(bookmark, field, value)

    await db.flush()
    await db.refresh(bookmark)
    return bookmark


async def delete_bookmark(db: AsyncSession, user_id: int, bookmark_id: int) -> None:
    """
    Delete a bookmark owned by user_id.

    Raises:
        AuthorizationError: If the bookmark is missing or not owned by user_id.
    """
    bookmark = await _get_owned_for_mutation(db, user_id, bookmark_id)
    await db.delete(bookmark)
    await db.flush()
