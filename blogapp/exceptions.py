"""
Blog Backend — Custom Exception Hierarchy
=========================================

What:  Application-specific exceptions raised by the service layer.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) turn them into
       JSON error responses with the right HTTP status code.
Who:   Raised by services; caught by the handlers in main.py.

Exception Hierarchy:
    BlogError (base)
    └── DatabaseError   → 500 Internal Server Error

The API has a single failure kind on the wire: a store operation failed.
The underlying store message is passed through to the caller.
"""

from typing import Any, Dict, Optional


class BlogError(Exception):
    """
    Base exception for all blog application errors.

    Attributes:
        message:  Error description returned in the API response
        context:  Additional debug info (logged, not returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class DatabaseError(BlogError):
    """
    Raised when a query or insert against the posts store fails.

    When:    Connection lost, constraint violation (empty title/content),
             missing table, etc.
    HTTP:    500 Internal Server Error, body `{"error": message}`
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if operation:
            ctx["operation"] = operation
        super().__init__(message=message, context=ctx)
        self.operation = operation
