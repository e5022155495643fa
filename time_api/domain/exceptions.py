"""Domain exceptions for the Server Time API.

Custom exceptions that represent domain-specific errors.
"""


class DomainException(Exception):
    """Base exception for all domain-related errors."""

    def __init__(self, message: str, error_code: str):
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class ConfigurationException(DomainException):
    """Raised when there's a configuration error."""

    def __init__(self, message: str):
        super().__init__(message, "CONFIGURATION_ERROR")


class DocumentationUnavailableException(DomainException):
    """Raised when the API document is requested but failed to load."""

    def __init__(self, message: str = "API documentation is not available"):
        super().__init__(message, "DOCUMENTATION_UNAVAILABLE")
