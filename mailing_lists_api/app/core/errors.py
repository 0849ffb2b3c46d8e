"""
Exception types raised by the store and the mailing list service.

Domain errors derive from ``ValueError`` and carry the HTTP status the
API answers with.  Storage errors derive from ``RuntimeError``; they
are never handled by the service and end up as a 500 response.
"""

from fastapi import status


class MailingListError(ValueError):
    """Base class for request level errors with a human readable message."""

    status_code: int = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MailingListNotFoundError(MailingListError):
    """No mailing list has the requested name."""


class MemberNotFoundError(MailingListError):
    """The email is not a member of the mailing list."""


# The two conflicts below answer 404 rather than 409 so that existing
# clients of the API keep seeing the status codes they were built for.
class NameMismatchError(MailingListError):
    """The list name in the URL differs from the one in the request body."""


class MemberExistsError(MailingListError):
    """The email is already a member of the mailing list."""


class StorageError(RuntimeError):
    """Base class for failures of the backing data file."""


class StorageUnavailableError(StorageError):
    """The data file cannot be read or written."""


class StorageCorruptError(StorageError):
    """The data file does not hold a JSON array of mailing lists."""
