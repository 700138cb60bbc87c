"""
Blog Client
===========

Consumer side of the blog API: `PostsAPI` for the HTTP calls and
`BlogPage` for the post list and new-post form state.
"""

from blogapp.client.api import Post, PostsAPI
from blogapp.client.page import BlogPage

__all__ = ["BlogPage", "Post", "PostsAPI"]
