"""
Blog Backend — Post Service
===========================

What:  The two post operations: list every post, create one post.
Who:   Called by route handlers; talks to the database through the session
       injected per request.

Error Handling Strategy:
    Any SQLAlchemy failure is wrapped in DatabaseError with the underlying
    driver message. No retry: a failed operation is reported once and the
    request's session is rolled back by get_db_session.

Ordering:
    Posts are returned by created_at. Rows with an identical created_at
    fall back to id order, which is stable but not insertion order.
"""

import logging
from typing import List

from sqlalchemy import asc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from blogapp.exceptions import DatabaseError
from blogapp.models.post import Post
from blogapp.schemas.post import PostCreate, PostResponse

logger = logging.getLogger(__name__)


def _store_message(exc: SQLAlchemyError) -> str:
    """
    What: The driver-level message of a failed store operation.
    Why:  DBAPI errors wrap the driver exception; its text is what the
          caller needs to see, without SQLAlchemy's statement dump.
    """
    orig = getattr(exc, "orig", None)
    if orig is not None:
        return str(orig)
    return str(exc)


class PostService:
    """
    Stateless service for post operations.

    Responsibilities:
        - list_posts(): every stored post, oldest first
        - create_post(): insert one post and return it with generated fields
    """

    async def list_posts(self, db: AsyncSession) -> List[PostResponse]:
        """
        Return all posts.

        Query plan:
            SELECT * FROM posts ORDER BY created_at ASC, id ASC

        Raises:
            DatabaseError: Query execution failed (→ 500)
        """
        try:
            result = await db.execute(
                select(Post).order_by(asc(Post.created_at), asc(Post.id))
            )
            posts = result.scalars().all()
        except SQLAlchemyError as e:
            message = _store_message(e)
            logger.error("Database error listing posts: %s", message)
            raise DatabaseError(
                message=message,
                operation="list_posts",
                context={"error_type": type(e).__name__},
            ) from e

        return [PostResponse.model_validate(post) for post in posts]

    async def create_post(self, db: AsyncSession, data: PostCreate) -> PostResponse:
        """
        Insert a post and return the stored record.

        How:
            The row is flushed so the generated id and created_at are
            available, then committed here so the 201 is only built for a
            stored row. get_db_session's own commit runs after the response
            has been sent.

        Raises:
            DatabaseError: Insert or commit failed, including CHECK
                           violations for empty title or content (→ 500)
        """
        post = Post(title=data.title, content=data.content)
        try:
            db.add(post)
            await db.flush()
            await db.commit()
        except SQLAlchemyError as e:
            message = _store_message(e)
            logger.error("Database error creating post: %s", message)
            raise DatabaseError(
                message=message,
                operation="create_post",
                context={"error_type": type(e).__name__},
            ) from e

        logger.info("Post created: %s", post.id)
        return PostResponse.model_validate(post)


# ── Singleton Instance ────────────────────────────────────────────────────
post_service = PostService()
