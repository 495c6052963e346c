"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    @property
    def name(self) -> str:
        """Error kind reported to callers."""
        return type(self).__name__


class AuthorizationHeaderError(InterfaceError):
    """Raised when a protected route gets no usable bearer token."""

    def __init__(self, message: str = "You must be logged in to perform this action"):
        super().__init__(message)
