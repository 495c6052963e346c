"""User aggregate root and its public projections."""

from typing import Optional

from juicebox.domain.model.common import DomainModel
from juicebox.domain.value import UserId, Username


class User(DomainModel):
    """User aggregate root as stored.

    Carries the bcrypt hash of the user's password. Only the authentication
    path may hold a ``User``; everything returned outward uses ``PublicUser``,
    ``Author`` or ``UserProfile``, none of which has a credential field.
    """

    id: UserId
    username: Username
    password: str
    name: Optional[str] = None
    location: Optional[str] = None
    active: bool = True


class PublicUser(DomainModel):
    """User row without the credential."""

    id: UserId
    username: Username
    name: Optional[str] = None
    location: Optional[str] = None
    active: bool = True

    @classmethod
    def from_user(cls, user: User) -> "PublicUser":
        """Project a stored user onto its public fields."""
        return cls(
            id=user.id,
            username=user.username,
            name=user.name,
            location=user.location,
            active=user.active,
        )


class Author(DomainModel):
    """Author summary embedded in every post aggregate."""

    id: UserId
    username: Username
    name: Optional[str] = None
    location: Optional[str] = None
