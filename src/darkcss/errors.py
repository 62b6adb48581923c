"""Error hierarchy for darkcss."""
from __future__ import annotations


class DarkcssError(Exception):
    """Base error for all darkcss errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ConfigError(DarkcssError):
    """The configuration file is missing, unreadable or malformed."""


class MappingError(DarkcssError):
    """A mapping table key cannot be interpreted."""


class FetchError(DarkcssError):
    """Retrieving a page or stylesheet failed."""

    def __init__(
        self,
        message: str,
        *,
        url: str = "",
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.url = url
        self.status_code = status_code


class FetchTimeoutError(FetchError):
    """The request timed out."""


class MediaQueryError(DarkcssError):
    """A media query could not be parsed."""

    def __init__(
        self,
        message: str,
        *,
        query: str = "",
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.query = query


class SpliceError(DarkcssError):
    """The target file has no auto-generated marker region."""
