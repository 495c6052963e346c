"""Domain value objects for Juicebox."""

from juicebox.domain.value.identifiers import PostId, TagId, UserId
from juicebox.domain.value.types import PostField, TagName, UserField, Username

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "TagId",
    # Types
    "TagName",
    "Username",
    "PostField",
    "UserField",
]
