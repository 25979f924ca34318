"""Exceptions raised by the repository pipeline."""


class GitfolioError(Exception):
    """Base exception for gitfolio errors."""

    pass


class NetworkError(GitfolioError):
    """Raised on a non-2xx response or a transport failure."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(GitfolioError):
    """Raised when cached or remote JSON cannot be understood."""

    pass
