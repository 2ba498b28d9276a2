"""Request locale resolution."""

from __future__ import annotations

from bookstore.domain.enums import DEFAULT_LOCALE, Locale


def resolve_locale(
    lang: str | None,
    accept_language: str | None,
    default: Locale = DEFAULT_LOCALE,
) -> Locale:
    """Pick the display locale of a request.

    Priority, first match wins:
        1. ``lang`` query value, if it is a supported locale.
        2. First Accept-Language entry whose primary subtag is supported
           (quality suffix and region subtag are ignored).
        3. ``default``.

    Malformed input never raises; it just falls through to the default.

    Args:
        lang: Explicit ``?lang=`` value.
        accept_language: Raw Accept-Language header.
        default: Locale returned when nothing matches.

    Returns:
        The resolved locale.
    """
    explicit = Locale.parse(lang)
    if explicit is not None:
        return explicit

    if accept_language:
        for entry in accept_language.split(","):
            tag = entry.split(";")[0].strip().lower()
            candidate = Locale.parse(tag.split("-")[0])
            if candidate is not None:
                return candidate

    return default
