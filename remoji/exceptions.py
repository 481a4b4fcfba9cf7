"""Custom exception hierarchy for remoji.

Exception Hierarchy:
    RemojiError (base)
    ├── NotFoundError - a lookup or listing matched nothing
    ├── InvalidQueryError - a user pattern is not a valid regular expression
    ├── ConfigurationError - an invalid REMOJI_* setting
    └── CacheError - the local emoji cache
        ├── CacheMissingError
        ├── CacheReadError
        ├── CacheWriteError
        └── ImportFailedError

Usage:
    from remoji.exceptions import InvalidQueryError

    try:
        pattern = re.compile(query)
    except re.error as e:
        raise InvalidQueryError("Invalid search pattern", pattern=query) from e
"""

from typing import Any, Optional, Sequence


class RemojiError(Exception):
    """Base exception for all remoji errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., paths, queries)
    """

    def __init__(
        self,
        message: str,
        **context: Any,
    ) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class NotFoundError(RemojiError):
    """A lookup or listing produced no results."""

    def __init__(
        self,
        message: str = "No emojis found",
        *,
        queries: Optional[Sequence[str]] = None,
        **context: Any,
    ) -> None:
        if queries:
            context["queries"] = list(queries)
        super().__init__(message, **context)


class InvalidQueryError(RemojiError):
    """A user-supplied pattern could not be compiled."""

    def __init__(
        self,
        message: str = "Invalid search pattern",
        *,
        pattern: Optional[str] = None,
        **context: Any,
    ) -> None:
        if pattern is not None:
            context["pattern"] = pattern
        super().__init__(message, **context)


class ConfigurationError(RemojiError):
    """A REMOJI_* setting has an invalid value."""

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)


# =============================================================================
# Cache Errors
# =============================================================================


class CacheError(RemojiError):
    """Base exception for the local emoji cache."""

    pass


class CacheMissingError(CacheError):
    """The cache file does not exist yet."""

    def __init__(
        self,
        message: str = "Emoji cache not found",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        super().__init__(message, **context)


class CacheReadError(CacheError):
    """The cache file exists but could not be read or decoded."""

    def __init__(
        self,
        message: str = "Failed to read emoji cache",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        super().__init__(message, **context)


class CacheWriteError(CacheError):
    """The cache file could not be written."""

    def __init__(
        self,
        message: str = "Failed to write emoji cache",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        super().__init__(message, **context)


class ImportFailedError(CacheError):
    """Fetching or parsing the remote emoji table failed."""

    def __init__(
        self,
        message: str = "Failed to import emoji table",
        *,
        url: Optional[str] = None,
        **context: Any,
    ) -> None:
        if url:
            context["url"] = url
        super().__init__(message, **context)
