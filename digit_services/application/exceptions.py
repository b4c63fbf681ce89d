"""Application-layer exceptions. Do not reuse domain exceptions."""


class ApplicationError(Exception):
    """Base for all application-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ErrorRecordNotFoundError(ApplicationError):
    """Raised when the index holds no error record for the requested id."""


class IndexStoreError(ApplicationError):
    """Raised when the search index is unreachable or returns a document we cannot read."""


class MessagingFailureError(ApplicationError):
    """Raised when publishing to the message broker fails."""


class ReplayError(ApplicationError):
    """Raised by a replay client when the original request could not be re-issued successfully."""
