from .enums import ErrorCode


class DomainError(Exception):
    """Base exception for business rule violations."""

    code = ErrorCode.INTERNAL_ERROR


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    code = ErrorCode.VALIDATION_ERROR


class InvalidFormatError(ValidationError):
    """Raised when a roll number or score does not have the expected format."""

    code = ErrorCode.INVALID_FORMAT


class DuplicateRollNoError(ValidationError):
    """Raised when enrolling a roll number that is already on the roster."""

    code = ErrorCode.DUPLICATE_ROLL_NO


class StorageError(DomainError):
    """Raised when a persisted snapshot cannot be read or written."""
