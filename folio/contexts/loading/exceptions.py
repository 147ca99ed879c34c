"""Custom exceptions for the loading context."""

from typing import Optional


class FolioError(Exception):
    """Base class for every error the pipeline reports."""


class SourceUnavailable(FolioError):
    """
    Exception raised when the profile document cannot be retrieved.

    Covers transport failures and non-success HTTP statuses alike.

    Attributes:
        message: Error description
        location: File path or URL that was requested
        status: HTTP status code, when the Source returned one
        original_error: The underlying transport or OS error
    """

    def __init__(
        self,
        message: str,
        location: Optional[str] = None,
        status: Optional[int] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.location = location
        self.status = status
        self.original_error = original_error

        parts = [message]

        if location:
            parts.append(f"Location: {location}")

        if status is not None:
            parts.append(f"Status: {status}")

        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))


class MalformedDocument(FolioError):
    """
    Exception raised when the fetched body is not a valid profile document.

    Attributes:
        message: Error description
        path: Dotted path of the offending value (e.g., 'experience[2].achievements')
        snippet: The text or value that failed to parse
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        snippet: Optional[str] = None,
    ):
        self.message = message
        self.path = path
        self.snippet = snippet

        parts = [message]

        if path:
            parts.append(f"At: {path}")

        if snippet:
            snippet = snippet[:200] + "..." if len(snippet) > 200 else snippet
            parts.append(f"Actual value:\n{snippet}")

        super().__init__("\n".join(parts))
