"""
Command-line front end for the blog client.

    python -m blogapp.client                          # list posts
    python -m blogapp.client --title T --content C    # add a post, then list
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from blogapp.client.api import PostsAPI
from blogapp.client.page import BlogPage
from blogapp.config import settings


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="blogapp.client", description="List and add blog posts.")
    parser.add_argument("--api-url", default=settings.blog_api_url, help="Base URL of the blog API")
    parser.add_argument("--title", help="Title of a post to add")
    parser.add_argument("--content", help="Content of a post to add")
    parser.add_argument("--html", action="store_true", help="Print the page as HTML")
    args = parser.parse_args(argv)
    if (args.title is None) != (args.content is None):
        parser.error("--title and --content are required together")
    return args


async def run(args: argparse.Namespace) -> str:
    async with PostsAPI(base_url=args.api_url) as api:
        page = BlogPage(api)
        await page.mount()
        if args.title is not None:
            page.title = args.title
            page.content = args.content
            await page.submit()
        return page.render() if args.html else page.render_text()


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        stream=sys.stderr,
    )
    print(asyncio.run(run(parse_args(argv))))
    return 0


if __name__ == "__main__":
    sys.exit(main())
