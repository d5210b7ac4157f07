"""
Exception hierarchy for the blog backend.

Every error carries the HTTP status code the API answers with, so routes
only raise and the app-level exception handlers build the response.
"""


class BlogError(Exception):
    """Base class for all errors surfaced through the API."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(BlogError):
    """A required field is missing, empty, or of the wrong type."""

    status_code = 400
    default_message = "Invalid request"


class AuthError(BlogError):
    """Base class for bearer token failures."""

    status_code = 401
    default_message = "Authentication failed"


class MissingTokenError(AuthError):
    """No bearer token was supplied."""

    status_code = 401
    default_message = "Access token required"


class InvalidTokenError(AuthError):
    """The bearer token is malformed, badly signed, or expired."""

    status_code = 403
    default_message = "Invalid or expired token"


class InvalidCredentialsError(BlogError):
    """Username/password pair did not match a stored credential."""

    status_code = 401
    default_message = "Invalid credentials"


class NotFoundError(BlogError):
    """The requested resource does not exist."""

    status_code = 404
    default_message = "Not found"


class StorageError(BlogError):
    """Reading or writing a backing store failed."""

    status_code = 500
    default_message = "Storage failure"
