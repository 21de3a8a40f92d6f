"""Exceptions raised while building a pull request report."""


class ReportError(Exception):
    """Base class for report errors."""


class ConfigError(ReportError):
    """Raised when the configuration file is missing or cannot be parsed."""


class RemoteFetchError(ReportError):
    """Raised when a GitHub search request fails."""
    def __init__(self, message, status_code=None):
        self.status_code = status_code
        super().__init__(message)


class PageFetchError(RemoteFetchError):
    """Raised when fetching a continuation page of search results fails."""
