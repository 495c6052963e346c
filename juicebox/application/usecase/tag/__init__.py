"""Tag use cases."""

from .list_posts_by_tag import ListPostsByTagRequest, ListPostsByTagUseCase
from .list_tags import ListTagsResponse, ListTagsUseCase

__all__ = [
    "ListPostsByTagRequest",
    "ListPostsByTagUseCase",
    "ListTagsResponse",
    "ListTagsUseCase",
]
