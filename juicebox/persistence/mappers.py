"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from juicebox.domain.model import Author, PostRecord, PublicUser, Tag, User
from juicebox.domain.value import PostId, TagId, TagName, UserId, Username


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model, credential hash included
    """
    return User(
        id=UserId(row["id"]),
        username=Username(row["username"]),
        password=row["password"],
        name=row.get("name"),
        location=row.get("location"),
        active=row["active"],
    )


def row_to_public_user(row: Dict[str, Any]) -> PublicUser:
    """Convert a credential-free user row to PublicUser."""
    return PublicUser(
        id=UserId(row["id"]),
        username=Username(row["username"]),
        name=row.get("name"),
        location=row.get("location"),
        active=row["active"],
    )


def row_to_author(row: Dict[str, Any]) -> Author:
    """Convert an author projection row to Author."""
    return Author(
        id=UserId(row["id"]),
        username=Username(row["username"]),
        name=row.get("name"),
        location=row.get("location"),
    )


def row_to_post_record(row: Dict[str, Any]) -> PostRecord:
    """Convert database row to PostRecord.

    Args:
        row: Database row as dict

    Returns:
        Scalar post row
    """
    return PostRecord(
        id=PostId(row["id"]),
        author_id=UserId(row["author_id"]),
        title=row["title"],
        content=row["content"],
        active=row["active"],
    )


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(id=TagId(row["id"]), name=TagName(row["name"]))
