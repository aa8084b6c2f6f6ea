"""
Error taxonomy shared by the feed services.

Services raise these instead of returning None; the application registers
handlers that turn them into HTTP responses (see app.main).
"""


class FeedError(Exception):
    """Base class for every error surfaced by the post/like/comment core"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidReference(FeedError):
    """A supplied identifier is not a well-formed reference"""

    status_code = 400


class NotFound(FeedError):
    """A referenced post or author does not exist"""

    status_code = 404


class PermissionDenied(FeedError):
    """The caller is not allowed to change this post"""

    status_code = 403


class StoreFault(FeedError):
    """The durable store failed (connectivity, constraint violation)"""

    status_code = 500
