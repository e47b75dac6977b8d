class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DuplicateEntryError(ValidationError):
    """Raised when a subject already has a record for the requested date."""

    def __init__(self, message: str, existing):
        super().__init__(message)
        self.existing = existing


class LedgerCorruptError(DomainError):
    """Raised when the persisted chain cannot be decoded."""
