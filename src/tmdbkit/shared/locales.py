"""Locale helpers for TMDb language and region filters.

TMDb expects ISO 639-1 language codes ("en") and ISO 3166-1 region codes
("GB"). Callers hold locale identifiers in either BCP 47 ("en-GB") or POSIX
("en_GB.UTF-8") form; the helpers here reduce those to the codes TMDb wants.
"""

from __future__ import annotations

import locale
import re
from collections.abc import Callable, Iterable

from tmdbkit.shared.constants import TMDB, LocaleTokens

LocaleProvider = Callable[[], str]

_LANGUAGE_SUBTAG = re.compile(r"^[A-Za-z]{2,3}$")
_REGION_SUBTAG = re.compile(r"^(?:[A-Za-z]{2}|\d{3})$")


def _subtags(identifier: str) -> list[str]:
    normalized = identifier.strip()
    # POSIX locales may carry an encoding and a modifier: en_GB.UTF-8@euro
    normalized = normalized.split(".", 1)[0].split("@", 1)[0]
    for separator in LocaleTokens.SUBTAG_SEPARATORS[1:]:
        normalized = normalized.replace(separator, LocaleTokens.SUBTAG_SEPARATORS[0])
    return normalized.split(LocaleTokens.SUBTAG_SEPARATORS[0])


def language_code(identifier: str | None) -> str | None:
    """Return the lowercase primary language subtag of a locale identifier.

    Args:
        identifier: Locale identifier such as "en-GB", "pt_BR" or "fr"

    Returns:
        The language subtag ("en"), or None when none can be parsed

    Example:
        >>> language_code("en-GB")
        'en'
        >>> language_code("C") is None
        True
    """
    if not identifier:
        return None

    primary = _subtags(identifier)[0]
    if not _LANGUAGE_SUBTAG.match(primary):
        return None
    return primary.lower()


def region_code(identifier: str | None) -> str | None:
    """Return the uppercase region subtag of a locale identifier.

    Script subtags ("zh-Hant-TW") are skipped.

    Args:
        identifier: Locale identifier

    Returns:
        The region subtag ("GB"), or None when the identifier has no region
    """
    if not identifier or language_code(identifier) is None:
        return None

    for subtag in _subtags(identifier)[1:]:
        if _REGION_SUBTAG.match(subtag):
            return subtag.upper()
    return None


def region_filter_code(value: str | None) -> str | None:
    """Return the region code for a region filter value.

    A bare region code ("us", "GB", "419") is taken as-is; anything else is
    treated as a locale identifier and reduced with ``region_code``.

    Example:
        >>> region_filter_code("us")
        'US'
        >>> region_filter_code("pt_BR")
        'BR'
    """
    if not value:
        return None
    stripped = value.strip()
    if _REGION_SUBTAG.match(stripped):
        return stripped.upper()
    return region_code(stripped)


def join_language_codes(identifiers: Iterable[str | None]) -> str:
    """Comma-join the primary language subtags of several locales.

    Input order and duplicates are preserved. A locale without a parsable
    language subtag is rendered as the literal "null" token at its position.

    Example:
        >>> join_language_codes(["en-GB", "fr"])
        'en,fr'
        >>> join_language_codes(["de", "", "de"])
        'de,null,de'
    """
    return LocaleTokens.LIST_SEPARATOR.join(
        language_code(identifier) or LocaleTokens.UNMAPPED_LANGUAGE
        for identifier in identifiers
    )


def fixed_locale(identifier: str) -> LocaleProvider:
    """Build a provider that always returns the same locale identifier."""

    def provider() -> str:
        return identifier

    return provider


def system_locale() -> str:
    """Return the process locale, falling back to the TMDb default language."""
    try:
        identifier, _encoding = locale.getlocale()
    except ValueError:
        return TMDB.DEFAULT_LANGUAGE
    return identifier or TMDB.DEFAULT_LANGUAGE


__all__ = [
    "LocaleProvider",
    "fixed_locale",
    "join_language_codes",
    "language_code",
    "region_code",
    "region_filter_code",
    "system_locale",
]
