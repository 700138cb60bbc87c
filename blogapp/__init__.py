"""
Blog Backend — Application Package Initializer
==============================================

What: Marks the `blogapp` directory as a Python package.
Who:  Imported by uvicorn (`blogapp.main:app`), Alembic, pytest and the client.

Architecture Note:
    The backend keeps the usual layered split:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Post logic)       │  ← Queries, error translation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    The `client` subpackage is the consumer side: an HTTP client for the two
    post endpoints and the page model that renders the list and the form.
"""

__version__ = "1.0.0"
