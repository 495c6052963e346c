"""Domain layer errors.

Every domain error carries a ``name`` (the error kind) and a ``message`` so
the HTTP boundary can surface ``{name, message}`` without inspecting types.
"""


class DomainError(Exception):
    """Base domain error."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    @property
    def name(self) -> str:
        """Error kind reported to callers."""
        return type(self).__name__


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class UnknownFieldError(ValidationError):
    """Raised when a partial update names a field outside the allow-list."""

    def __init__(self, resource: str, field: str):
        self.resource = resource
        self.field = field
        super().__init__(f"Unknown {resource} field: {field}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class PostNotFoundError(NotFoundError):
    """Raised when a post id does not reference an existing post."""

    def __init__(self, post_id: int):
        super().__init__("Post", str(post_id))
        self.post_id = post_id
        self.message = "Could not find a post with that postId"
        self.args = (self.message,)


class UserNotFoundError(NotFoundError):
    """Raised when a user id does not reference an existing user."""

    def __init__(self, user_id: int):
        super().__init__("User", str(user_id))
        self.user_id = user_id


class UserExistsError(DomainError):
    """Raised when registering a username that is already taken."""

    def __init__(self, username: str):
        self.username = username
        super().__init__("A user by that username already exists")


class IncorrectCredentialsError(DomainError):
    """Raised when a username/password pair does not match."""

    def __init__(self) -> None:
        super().__init__("Username or password is incorrect")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to edit content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to edit {resource} {resource_id}"
        )
