"""Errors raised by outbound adapters."""


class AdapterError(Exception):
    """An external system failed or refused a request."""


class StorageError(AdapterError):
    """The object store rejected an upload or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
