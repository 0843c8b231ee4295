"""
i18n package

Locale constants and helpers shared by articles, categories, profiles and
blog settings.
"""

from .locale import (
    LANGUAGE_NAMES,
    SUPPORTED_LOCALES,
    Locale,
    counterpart_locale,
    is_supported_locale,
    pick_localized,
)

__all__ = [
    "LANGUAGE_NAMES",
    "SUPPORTED_LOCALES",
    "Locale",
    "counterpart_locale",
    "is_supported_locale",
    "pick_localized",
]
