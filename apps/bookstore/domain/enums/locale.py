"""Supported display locales."""

from __future__ import annotations

from enum import Enum


class Locale(str, Enum):
    """Display language of localized catalog content."""

    EN = "en"
    AR = "ar"

    @classmethod
    def parse(cls, value: str | None) -> Locale | None:
        """Return the matching locale, or None when ``value`` is not supported."""
        if not value:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


DEFAULT_LOCALE = Locale.EN
