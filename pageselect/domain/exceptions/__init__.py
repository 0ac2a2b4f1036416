"""Domain exceptions."""


class DomainException(Exception):
    """Base exception for domain layer errors."""
    pass


class FetchError(DomainException):
    """Exception raised when the remote collection cannot deliver a page.

    Covers network failures, non-2xx responses and payloads that cannot be
    turned into a valid page. Never fatal; the triggering action can be retried.
    """

    def __init__(self, message: str, page_index: int | None = None, cause: Exception = None):
        super().__init__(message)
        self.page_index = page_index
        self.cause = cause


class MalformedPageError(FetchError):
    """Exception raised when a fetched page violates page invariants."""


class MalformedRecordError(FetchError):
    """Exception raised when a remote record cannot be turned into an item."""


class OperationInProgress(DomainException):
    """Exception raised when a bulk operation is requested while another runs."""

    def __init__(self, active_operation: str, *, message: str | None = None):
        final_message = message or f"Bulk operation already in progress: {active_operation}"
        super().__init__(final_message)
        self.active_operation = active_operation


class DomainValidationError(DomainException):
    """Exception raised when validation fails at the domain boundary."""

    def __init__(self, message: str):
        super().__init__(message)


class InvalidArgument(DomainValidationError):
    """Exception raised when an operation receives an out-of-range argument."""


class PageNotLoadedError(DomainException):
    """Exception raised when a page-scoped action targets a page that is not displayed."""

    def __init__(self, page_index: int, loaded_index: int | None = None):
        if loaded_index is None:
            message = f"Page {page_index} is not loaded; no page is displayed"
        else:
            message = f"Page {page_index} is not loaded; page {loaded_index} is displayed"
        super().__init__(message)
        self.page_index = page_index
        self.loaded_index = loaded_index
