"""
Deskclock feature package initializer.

Provides factory functions that the host application can call to create a
configured clock engine and sleep calculator without hard-coding internals.

Both factories accept an optional `config` (defaults to the global
`config_service`) so tests and hosts can pass their own.
"""

from __future__ import annotations

from typing import Callable, Optional

from core.config.config_service import ConfigService, config_service
from core.helpers.date_time_helper import utc_now_millis
from core.i18n.locale import LocaleManager
from .logic.clock_engine import ClockEngine
from .logic.sleep_time_calculator import SleepTimeCalculator
from .logic.time_formatter import TimeFormatter
from .models.format_mode import FormatMode
from .models.sleep_settings import SleepSettings


def get_feature_name(locale: Optional[LocaleManager] = None) -> str:
    """
    Human readable feature name (used e.g. for navigation labels).

    Returns:
        str: The localized feature name.
    """
    return _locale_for(locale, None).t("clock.title")


def create_sleep_calculator(config: Optional[ConfigService] = None) -> SleepTimeCalculator:
    """
    Factory for a calculator using the [Sleep] configuration section.

    Raises:
        InvalidConfiguration: configured values are degenerate.
    """
    cfg = _config_or_default(config).sleep
    return SleepTimeCalculator(
        SleepSettings(
            fall_asleep_buffer_minutes=cfg.fall_asleep_buffer_minutes,
            sleep_cycle_minutes=cfg.sleep_cycle_minutes,
            cycle_count=cfg.cycle_count,
        )
    )


def create_clock_engine(
    config: Optional[ConfigService] = None,
    *,
    locale: Optional[LocaleManager] = None,
    now_millis: Callable[[], int] = utc_now_millis,
) -> ClockEngine:
    """
    Factory for a live clock engine using the [Clock] configuration section.

    Args:
        config (ConfigService, optional): Configuration source.
        locale (LocaleManager, optional): AM/PM label source; a manager in the
            configured language is created if omitted.
        now_millis (callable): System clock in epoch milliseconds.

    Returns:
        ClockEngine: Live engine, not yet updated.
    """
    cfg = _config_or_default(config)
    lm = _locale_for(locale, cfg.clock.language)
    return ClockEngine(
        formatter=TimeFormatter(am_pm_labels=lm.am_pm_labels),
        now_millis=now_millis,
        format_mode=FormatMode.from_preference(cfg.clock.use_24h),
        timezone_override=cfg.clock.timezone_override or None,
        sleep_calculator=create_sleep_calculator(cfg),
    )


# --- Internal helpers -------------------------------------------------------

def _config_or_default(config: Optional[ConfigService]) -> ConfigService:
    if config is not None:
        return config
    return config_service


def _locale_for(locale: Optional[LocaleManager], language: Optional[str]) -> LocaleManager:
    if locale is not None:
        return locale
    if language is None:
        from core.i18n.locale import locale as shared  # global instance
        return shared
    return LocaleManager(default_lang=language)
