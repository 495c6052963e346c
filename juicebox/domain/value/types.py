"""Domain value objects for Juicebox.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from juicebox.domain.value.common import RootValueObject


class TagName(RootValueObject[str]):
    """Tag name, the natural key of a tag.

    Surrounding whitespace is stripped; the remaining value must be 1-255
    characters. Examples: '#happy', 'go', 'rust'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name format."""
        v = v.strip()
        if not v or len(v) > 255:
            raise ValueError("Tag name must be 1-255 characters")
        return v


class Username(RootValueObject[str]):
    """Unique login name of a user."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not empty and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Username must be 1-255 characters")
        return v


class PostField(str, Enum):
    """Scalar post attributes that may be changed by a partial update.

    The enum value is the column name in the ``posts`` table.
    """

    TITLE = "title"
    CONTENT = "content"
    ACTIVE = "active"


class UserField(str, Enum):
    """User attributes that may be changed by a partial update.

    The enum value is the column name in the ``users`` table.
    """

    NAME = "name"
    LOCATION = "location"
    ACTIVE = "active"
    PASSWORD = "password"
