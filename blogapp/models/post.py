"""
Blog Backend — Post SQLAlchemy Model
====================================

What:  ORM model representing the `posts` table.
How:   Inherits from the shared DeclarativeBase; Alembic reads this for migrations.
Who:   Used by PostService for list/create and by Alembic for schema management.

Table Design:
    - UUID primary key, generated on insert
    - title / content: TEXT, NOT NULL, CHECK non-empty
    - created_at: timestamp with time zone, defaulted at insertion
    Rows are never updated or deleted.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Index, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from blogapp.database import Base


class Post(Base):
    """
    A blog post.

    Query Patterns:
        - List posts: SELECT ... ORDER BY created_at, id
          → Uses idx_posts_created_at
    """

    __tablename__ = "posts"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique identifier generated on insert",
    )

    title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Post title",
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Post body",
    )

    # Always UTC; clients convert for display
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this post was created (UTC)",
    )

    # The store is the only place emptiness is enforced
    __table_args__ = (
        CheckConstraint("length(title) > 0", name="ck_posts_title_not_empty"),
        CheckConstraint("length(content) > 0", name="ck_posts_content_not_empty"),
        Index("idx_posts_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, title={self.title!r}, created_at='{self.created_at}')>"
