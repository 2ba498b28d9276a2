"""Domain exception base classes."""


class DomainError(Exception):
    """Base class of all domain errors."""

    def __init__(self, message: str = "Domain error occurred") -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(DomainError):
    """An id does not resolve to a record."""


class ForbiddenError(DomainError):
    """The caller may not mutate this record."""


class ConflictError(DomainError):
    """Uniqueness or referential conflict."""
