"""Exceptions related to customer-records."""

__all__ = [
    "CustomerRecordsException",
    "InputException",
    "ValidationError",
    "InvalidId",
    "InvalidName",
    "InvalidCode",
    "InvalidAddress",
    "DuplicateId",
    "CapacityExceeded",
    "NotFound",
]


class CustomerRecordsException(Exception):
    """Generic base exception used for this library."""


class InputException(CustomerRecordsException):
    """Raised when input files or values are not formatted as expected."""


class ValidationError(CustomerRecordsException):
    """Raised when a record field fails its validation rule."""

    field: str = ""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidId(ValidationError):
    """Raised when a customer id is not a positive integer."""

    field = "id"


class InvalidName(ValidationError):
    """Raised when a customer name is empty or too long."""

    field = "name"


class InvalidCode(ValidationError):
    """Raised when a customer code is not a short alphanumeric code."""

    field = "code"


class InvalidAddress(ValidationError):
    """Raised when a customer address is too long."""

    field = "address"


class DuplicateId(CustomerRecordsException):
    """Raised when adding a record whose id is already in the store."""

    def __init__(self, record_id: int) -> None:
        super().__init__(f"Customer id {record_id} already exists")
        self.record_id = record_id


class CapacityExceeded(CustomerRecordsException):
    """Raised when adding a record to a store that is full."""

    def __init__(self, capacity: int) -> None:
        super().__init__(f"Maximum customer limit of {capacity} reached")
        self.capacity = capacity


class NotFound(CustomerRecordsException):
    """Raised when a record id is not in the store."""

    def __init__(self, record_id: int) -> None:
        super().__init__(f"Customer {record_id} not found")
        self.record_id = record_id
