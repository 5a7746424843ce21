"""Exception types raised by CommentRadar."""


class CommentRadarError(Exception):
    """Base class for errors shown to the user."""


class InvalidVideoURLError(CommentRadarError):
    """The input could not be resolved to a YouTube video id."""


class MissingAPIKeyError(CommentRadarError):
    """No YouTube Data API key is configured."""


class YouTubeAPIError(CommentRadarError):
    """The YouTube Data API rejected a request."""

    def __init__(self, message: str, reason: str = None, status: int = None):
        super().__init__(message)
        self.reason = reason
        self.status = status
