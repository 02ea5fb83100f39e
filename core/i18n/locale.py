"""
locale.py

Centralized language management for clock texts (i18n).

Usage
-----
from core.i18n.locale import locale
am, pm = locale.am_pm_labels()
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

LOCALE_TRACK_MISSING_KEYS = True   # set False in production


class LocaleManager:
    """Singleton-style helper that stores translations and current language."""

    # ------------------------------------------------------------------ #
    # Construction                                                       #
    # ------------------------------------------------------------------ #
    def __init__(self, default_lang: str = "en") -> None:
        self.supported = {
            "en": self._en_dict(),
            "de": self._de_dict(),
            # add further languages here
        }
        self.lang = default_lang if default_lang in self.supported else "en"
        self._missing_keys_logged: set[str] = set()

    # ------------------------------------------------------------------ #
    # Public API                                                         #
    # ------------------------------------------------------------------ #
    def set_language(self, lang: str) -> None:
        if lang in self.supported:
            self.lang = lang
        else:
            logger.warning("Unsupported language '%s', keeping '%s'", lang, self.lang)

    def t(self, key: str) -> str:
        """
        Return localized string.  If the key is missing and tracking is
        enabled, write a log entry and return the key itself.
        """
        value = self.supported.get(self.lang, {}).get(key)
        if value is not None:
            return value

        if LOCALE_TRACK_MISSING_KEYS and key not in self._missing_keys_logged:
            logger.warning("Missing translation key '%s' (lang=%s)", key, self.lang)
            self._missing_keys_logged.add(key)

        return key

    def am_pm_labels(self) -> tuple[str, str]:
        """Return the (AM, PM) label pair of the current language."""
        return self.t("am"), self.t("pm")

    # ------------------------------------------------------------------ #
    # Internal dictionaries                                              #
    # ------------------------------------------------------------------ #
    def _en_dict(self) -> dict[str, str]:
        return {
            "am": "AM",
            "pm": "PM",
            "clock.title": "Clock",
        }

    def _de_dict(self) -> dict[str, str]:
        return {
            "am": "vorm.",
            "pm": "nachm.",
            "clock.title": "Uhr",
        }


# Singleton instance
locale = LocaleManager()
