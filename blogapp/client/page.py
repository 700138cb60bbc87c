"""
Blog Client — Page Model
========================

What:  The client's view state and rendering.
State: `posts` (list shown on the page) and the form fields `title` and
       `content`.

Lifecycle:
    mount()   → list request once, replaces `posts`
    submit()  → create request with the current fields; after the server
                confirms, appends the returned post and clears the fields
    render()  → HTML: heading, one entry per post, and the Add Post form

Failures from the API propagate unchanged; the state is not touched.
"""

import logging
from html import escape
from typing import List

from blogapp.client.api import Post, PostsAPI

logger = logging.getLogger(__name__)


class BlogPage:
    """Posts list and new-post form backed by a PostsAPI."""

    def __init__(self, api: PostsAPI):
        self.api = api
        self.posts: List[Post] = []
        self.title = ""
        self.content = ""

    async def mount(self) -> None:
        """Load the post list, replacing whatever is held locally."""
        self.posts = await self.api.list_posts()
        logger.debug("Mounted with %d posts", len(self.posts))

    async def submit(self) -> Post:
        """Create a post from the form fields and add it to the list."""
        post = await self.api.create_post(self.title, self.content)
        self.posts = [*self.posts, post]
        self.title = ""
        self.content = ""
        return post

    def render(self) -> str:
        entries = "".join(
            f'<div class="post" data-id="{post.id}">'
            f"<h2>{escape(post.title)}</h2>"
            f"<p>{escape(post.content)}</p>"
            f"</div>"
            for post in self.posts
        )
        form = (
            '<form method="post" action="/api/posts">'
            f'<input name="title" value="{escape(self.title)}" placeholder="Title" required>'
            f'<textarea name="content" placeholder="Content" required>{escape(self.content)}</textarea>'
            '<button type="submit">Add Post</button>'
            "</form>"
        )
        return f'<div class="App"><h1>Blog Posts</h1>{entries}{form}</div>'

    def render_text(self) -> str:
        lines = ["Blog Posts", "=========="]
        if not self.posts:
            lines.append("(no posts)")
        for post in self.posts:
            lines.append("")
            lines.append(f"## {post.title}")
            lines.append(post.content)
        return "\n".join(lines)
