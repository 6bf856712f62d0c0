"""User model for storing registered accounts."""
from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from models.bookmark import Bookmark


class User(Base, TimestampMixin):
    """User model - email/password account that owns bookmarks."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        comment="Login identifier, compared case-sensitively as stored",
    )
    hash: Mapped[str] = mapped_column(
        String(255),
        comment="Argon2 password digest - the plaintext is never stored",
    )

    bookmarks: Mapped[list["Bookmark"]] = relationship(
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
