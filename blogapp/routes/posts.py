"""
Blog Backend — Posts Route Handlers
===================================

What:  Handles GET /api/posts (list) and POST /api/posts (create).
How:   Delegates to PostService, returns JSON. Store failures raised by the
       service are turned into 500 responses by the handlers in main.py.
Who:   Called by the client on mount and on form submit.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blogapp.database import get_db_session
from blogapp.schemas.post import ErrorResponse, PostCreate, PostResponse
from blogapp.services.post_service import post_service

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api", tags=["Posts"])


@router.get(
    "/posts",
    response_model=List[PostResponse],
    responses={
        200: {"description": "All posts, oldest first"},
        500: {"description": "Store failure", "model": ErrorResponse},
    },
    summary="List posts",
)
async def list_posts(
    db: AsyncSession = Depends(get_db_session),
) -> List[PostResponse]:
    """Return every stored post."""
    return await post_service.list_posts(db=db)


@router.post(
    "/posts",
    status_code=201,
    response_model=PostResponse,
    responses={
        201: {"description": "Post created", "model": PostResponse},
        500: {"description": "Store failure", "model": ErrorResponse},
    },
    summary="Create a post",
)
async def create_post(
    body: PostCreate,
    db: AsyncSession = Depends(get_db_session),
) -> PostResponse:
    """
    Insert a post and return it with its generated `id` and `created_at`.

    Only the presence of `title` and `content` is checked here; a missing
    field is rejected by FastAPI with 422.
    """
    return await post_service.create_post(db=db, data=body)
