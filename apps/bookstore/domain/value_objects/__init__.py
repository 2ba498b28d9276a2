"""Domain Value Objects."""

from bookstore.domain.value_objects.localized_text import LocalizedText

__all__ = ["LocalizedText"]
