"""
Blog Client Tests
=================

What:  PostsAPI and BlogPage against httpx.MockTransport, plus one run
       against the real app through ASGITransport.
"""

import json
from uuid import uuid4

import httpx
import pytest
from httpx import ASGITransport

from blogapp.client.__main__ import parse_args, run
from blogapp.client.api import PostsAPI
from blogapp.client.page import BlogPage
from blogapp.main import app


def _post_json(title, content):
    return {
        "id": str(uuid4()),
        "title": title,
        "content": content,
        "created_at": "2026-10-19T12:00:00Z",
    }


def _mock_api(stored, fail_create=False):
    """PostsAPI whose transport serves `stored` and appends on POST."""
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.method == "GET":
            return httpx.Response(200, json=stored)
        if fail_create:
            return httpx.Response(500, json={"error": "insert failed"})
        body = json.loads(request.content)
        post = _post_json(body["title"], body["content"])
        stored.append(post)
        return httpx.Response(201, json=post)

    api = PostsAPI(base_url="http://blog.test", transport=httpx.MockTransport(handler))
    return api, requests


class TestBlogPageRender:

    @pytest.mark.asyncio
    async def test_two_posts_render_two_entries(self):
        api, _ = _mock_api([_post_json("One", "1"), _post_json("Two", "2")])
        page = BlogPage(api)

        await page.mount()
        html = page.render()

        assert len(page.posts) == 2
        assert html.count('<div class="post"') == 2
        assert "<h2>One</h2>" in html and "<h2>Two</h2>" in html
        await api.aclose()

    @pytest.mark.asyncio
    async def test_empty_list_renders_no_entries(self):
        api, _ = _mock_api([])
        page = BlogPage(api)

        await page.mount()

        assert page.posts == []
        assert '<div class="post"' not in page.render()
        assert "(no posts)" in page.render_text()
        await api.aclose()

    def test_render_escapes_markup(self):
        page = BlogPage(api=None)
        page.title = '<script>"x"</script>'
        html = page.render()

        assert "<script>" not in html
        assert "required" in html
        assert "Add Post" in html


class TestBlogPageSubmit:

    @pytest.mark.asyncio
    async def test_submit_appends_and_clears_fields(self):
        api, requests = _mock_api([_post_json("Old", "old")])
        page = BlogPage(api)
        await page.mount()

        page.title = "A"
        page.content = "B"
        created = await page.submit()

        assert json.loads(requests[-1].content) == {"title": "A", "content": "B"}
        assert [p.title for p in page.posts] == ["Old", "A"]
        assert page.posts[-1].id == created.id
        assert page.title == ""
        assert page.content == ""
        await api.aclose()

    @pytest.mark.asyncio
    async def test_failed_submit_keeps_state(self):
        api, _ = _mock_api([], fail_create=True)
        page = BlogPage(api)
        await page.mount()
        page.title = "A"
        page.content = "B"

        with pytest.raises(httpx.HTTPStatusError):
            await page.submit()

        assert page.posts == []
        assert (page.title, page.content) == ("A", "B")
        await api.aclose()


class TestAgainstApp:

    @pytest.mark.asyncio
    async def test_round_trip_through_app(self, test_client):
        async with PostsAPI(base_url="http://test", transport=ASGITransport(app=app)) as api:
            page = BlogPage(api)
            await page.mount()
            assert page.posts == []

            page.title = "Hello"
            page.content = "World"
            await page.submit()

            fresh = BlogPage(api)
            await fresh.mount()

        assert [p.title for p in fresh.posts] == ["Hello"]
        assert fresh.posts[0].id == page.posts[0].id


class TestCommandLine:

    def test_title_requires_content(self):
        with pytest.raises(SystemExit):
            parse_args(["--title", "only"])

    def test_defaults_to_listing(self):
        args = parse_args(["--api-url", "http://blog.test"])

        assert args.api_url == "http://blog.test"
        assert args.title is None

    @pytest.mark.asyncio
    async def test_empty_title_is_still_submitted(self, monkeypatch):
        api, requests = _mock_api([])
        monkeypatch.setattr("blogapp.client.__main__.PostsAPI", lambda base_url: api)
        args = parse_args(["--title", "", "--content", ""])

        await run(args)

        posts = [r for r in requests if r.method == "POST"]
        assert len(posts) == 1
        assert json.loads(posts[0].content) == {"title": "", "content": ""}

    def test_empty_title_without_content_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["--title", ""])
