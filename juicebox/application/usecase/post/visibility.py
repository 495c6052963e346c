"""Visibility rules for returning posts to a requester."""

from collections.abc import Iterable
from typing import Optional

from juicebox.domain.model import Post
from juicebox.domain.value import UserId


def filter_visible(posts: Iterable[Post], requester_id: Optional[UserId]) -> list[Post]:
    """Drop inactive posts unless the requester wrote them.

    Args:
        posts: Assembled posts
        requester_id: Authenticated user, or None for anonymous requests

    Returns:
        The visible posts, in input order
    """
    return [post for post in posts if post.is_visible_to(requester_id)]
