"""
Custom exception hierarchy for CoreMint.

All exceptions inherit from CoreMintError so callers can catch
library, provider and configuration failures in one place.
"""


class CoreMintError(Exception):
    """
    Base exception for all CoreMint errors.
    All custom exceptions should inherit from this class.
    """

    def __init__(self, message: str, context: dict | None = None):
        """
        Initialize CoreMint error.
        Args:
            message: Error message
            context: Optional context dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class StoreError(CoreMintError):
    """
    Record store errors.
    Raised when persisting the library fails (I/O, database errors).
    Corrupt or missing data on load is not an error.
    """

    pass


class ValidationError(CoreMintError):
    """
    Validation errors.
    Raised when input validation fails or data is invalid.
    """

    pass


class NotFoundError(CoreMintError):
    """
    Resource not found errors.
    Raised when a requested knowledge item or tag doesn't exist.
    """

    pass


class ConfigurationError(CoreMintError):
    """
    Configuration errors.
    Raised when configuration is invalid or missing required values.
    """

    pass


class LLMError(CoreMintError):
    """
    LLM operation errors.
    Raised when LLM calls fail (API errors, timeouts, empty responses).
    """

    pass


class AnalysisError(CoreMintError):
    """
    Knowledge extraction errors.
    Raised when the analysis provider fails or returns an unusable payload.
    """

    pass


class LibraryClosedError(CoreMintError):
    """
    Library view errors.
    Raised when an operation is issued against a closed library session.
    """

    pass
