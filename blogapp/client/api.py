"""
Blog Client — HTTP API Client
=============================

What:  Async client for the two post endpoints.
How:   Wraps an httpx.AsyncClient; non-2xx responses raise
       httpx.HTTPStatusError. No retry: one request per call.
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

import httpx

from blogapp.config import settings

logger = logging.getLogger(__name__)


@dataclass
class Post:
    """A post as returned by the API."""
    id: uuid.UUID
    title: str
    content: str
    created_at: datetime

    @classmethod
    def from_json(cls, item: Dict[str, Any]) -> "Post":
        return cls(
            id=uuid.UUID(str(item["id"])),
            title=item["title"],
            content=item["content"],
            created_at=datetime.fromisoformat(item["created_at"].replace("Z", "+00:00")),
        )


class PostsAPI:
    """
    Client for GET/POST /api/posts.

    Usage:
        async with PostsAPI() as api:
            posts = await api.list_posts()
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = (base_url or settings.blog_api_url).rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            transport=transport,
            timeout=timeout if timeout is not None else settings.client_timeout,
        )

    async def __aenter__(self) -> "PostsAPI":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def list_posts(self) -> List[Post]:
        response = await self._client.get("/api/posts")
        response.raise_for_status()
        posts = [Post.from_json(item) for item in response.json()]
        logger.debug("Fetched %d posts from %s", len(posts), self.base_url)
        return posts

    async def create_post(self, title: str, content: str) -> Post:
        response = await self._client.post(
            "/api/posts", json={"title": title, "content": content}
        )
        response.raise_for_status()
        return Post.from_json(response.json())
