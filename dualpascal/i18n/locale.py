"""
Locale helpers

The blog is bilingual: every article, category and localized profile field
belongs to exactly one of the two supported locales.
"""

from __future__ import annotations

import enum


class Locale(str, enum.Enum):
    JA = "ja"
    EN = "en"


SUPPORTED_LOCALES: tuple[str, ...] = tuple(locale.value for locale in Locale)

LANGUAGE_NAMES: dict[str, str] = {
    "ja": "日本語",
    "en": "English",
}


def is_supported_locale(locale: str | None) -> bool:
    return locale in SUPPORTED_LOCALES


def counterpart_locale(locale: str | Locale) -> str:
    """Return the other supported locale ("ja" <-> "en").

    Raises:
        ValueError: if ``locale`` is not a supported locale.
    """
    value = locale.value if isinstance(locale, Locale) else locale
    if value == Locale.JA.value:
        return Locale.EN.value
    if value == Locale.EN.value:
        return Locale.JA.value
    raise ValueError(f"Unsupported locale: {locale!r}")


def pick_localized(values: dict[str, str | None], locale: str | Locale, default: str = "") -> str:
    """Return the value for ``locale``, falling back to the counterpart locale, then ``default``.

    Empty strings count as missing.
    """
    value = locale.value if isinstance(locale, Locale) else locale
    if not is_supported_locale(value):
        value = Locale.JA.value
    return values.get(value) or values.get(counterpart_locale(value)) or default
