"""
Blog Backend — Pydantic Request/Response Schemas
================================================

What:  Pydantic models defining the API contract between client and backend.
How:   FastAPI uses these models to validate request bodies, serialize
       responses, and generate the OpenAPI documentation.

Validation:
    Request bodies are only checked for the presence of `title` and
    `content`. Emptiness is left to the store's CHECK constraints.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class PostCreate(BaseModel):
    """
    What:  Body of POST /api/posts.
    Who:   Sent by the client form on submit.
    """
    title: str = Field(description="Post title")
    content: str = Field(description="Post body")


class PostResponse(BaseModel):
    """
    What:  Full representation of a stored post.
    Who:   Returned by both GET /api/posts (as array items) and POST /api/posts.
    """
    id: uuid.UUID = Field(description="Unique post identifier (UUID)")
    title: str = Field(description="Post title")
    content: str = Field(description="Post body")
    created_at: datetime = Field(description="When the post was created (UTC ISO 8601)")

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """
    What:  Error body for failed store operations.

    Example:
        {"error": "relation \"posts\" does not exist", "request_id": "a1b2c3d4"}
    """
    error: str = Field(description="Error message from the failed operation")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
