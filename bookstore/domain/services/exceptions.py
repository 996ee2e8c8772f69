"""Domain failures raised by the book service."""

from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of book service failures."""

    NOT_FOUND = "not_found"
    BAD_REQUEST = "bad_request"


_STATUS_CODES = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.BAD_REQUEST: 400,
}


class BookServiceError(Exception):
    """Raised when a book service operation cannot be carried out.

    The status code is only a hint for the transport layer; the service
    itself never performs transport mapping.
    """

    def __init__(self, message: str, kind: ErrorKind):
        super().__init__(message)
        self.message = message
        self.kind = kind

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self.kind]


class BookNotFoundError(BookServiceError):
    """The requested book does not exist."""

    def __init__(self, message: str = "The book does not exist."):
        super().__init__(message, ErrorKind.NOT_FOUND)


class InvalidBookError(BookServiceError):
    """The submitted book cannot be accepted."""

    def __init__(self, message: str):
        super().__init__(message, ErrorKind.BAD_REQUEST)
