"""Input validation errors raised by use cases."""

from bookstore.application.common.exceptions.base import ApplicationError


class MissingCanonicalTextError(ApplicationError):
    """Neither the canonical field nor any per-language value was supplied."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field} is required")
