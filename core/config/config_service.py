"""Typed, layered configuration loader with precedence handling."""
from __future__ import annotations

import configparser
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from threading import RLock
from typing import Any, Dict

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
#  Paths & default definitions
# --------------------------------------------------------------------------- #

CONFIG_DIR = Path(__file__).resolve().parent
DEFAULTS_INI = CONFIG_DIR / "defaults.ini"
ENV_PREFIX = "DESKCLOCK_"


_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "Clock": {
        "use_24h": "false",
        "timezone_override": "",
        "language": "en",
    },
    "Sleep": {
        "fall_asleep_buffer_minutes": "194",
        "sleep_cycle_minutes": "90",
        "cycle_count": "4",
    },
}


# --------------------------------------------------------------------------- #
#  Datamodels
# --------------------------------------------------------------------------- #

@dataclass
class ClockConfig:
    use_24h: bool = False
    timezone_override: str = ""
    language: str = "en"


@dataclass
class SleepConfig:
    fall_asleep_buffer_minutes: int = 194
    sleep_cycle_minutes: int = 90
    cycle_count: int = 4


# --------------------------------------------------------------------------- #
#  Helpers
# --------------------------------------------------------------------------- #

def _cp_to_dict(cp: configparser.ConfigParser) -> Dict[str, Dict[str, Any]]:
    data: Dict[str, Dict[str, Any]] = {}
    for section in cp.sections():
        data[section] = {k: v for k, v in cp.items(section)}
    return data


def _read_ini(path: Path) -> Dict[str, Dict[str, Any]]:
    cp = configparser.ConfigParser()
    cp.read(path, encoding="utf-8")
    return _cp_to_dict(cp)


def _apply(target: Dict[str, Dict[str, Any]], source: Dict[str, Dict[str, Any]]) -> None:
    for section, items in source.items():
        target.setdefault(section, {}).update(items)


def _cast(value: Any, typ: type) -> Any:
    if typ is bool:
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in {"1", "true", "yes", "on"}
    if typ is int:
        return int(value)
    if typ is float:
        return float(value)
    return typ(value)


class ConfigValueError(ValueError):
    """Raised when a configured value cannot be cast to its field type."""


_TYPES = {"bool": bool, "int": int, "float": float, "str": str}


def _build_dataclass(cls: type, section: str, data: Dict[str, Any]) -> Any:
    kwargs = {}
    for field in fields(cls):
        # field.type is a string under postponed annotations
        typ = _TYPES.get(field.type, str) if isinstance(field.type, str) else field.type
        val = data.get(field.name, field.default)
        try:
            kwargs[field.name] = _cast(val, typ)
        except (TypeError, ValueError) as exc:
            raise ConfigValueError(
                f"[{section}] {field.name}={val!r} is not a valid {typ.__name__}"
            ) from exc
    return cls(**kwargs)


def _env_overlays(environ: Dict[str, str] | None = None) -> Dict[str, Dict[str, Any]]:
    result: Dict[str, Dict[str, Any]] = {}
    for env_key, value in (os.environ if environ is None else environ).items():
        if not env_key.startswith(ENV_PREFIX):
            continue
        remainder = env_key[len(ENV_PREFIX):]
        parts = remainder.split("__", 1)
        if len(parts) != 2:
            continue
        section, key = parts
        section = section.title()
        key = key.lower()
        result.setdefault(section, {})[key] = value
    return result


def _user_config_path() -> Path:
    if os.name == "nt":
        appdata = os.environ.get("APPDATA") or (Path.home() / "AppData" / "Roaming")
        return Path(appdata) / "DeskClock" / "config.ini"
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "deskclock" / "config.ini"


# --------------------------------------------------------------------------- #
#  ConfigService
# --------------------------------------------------------------------------- #


class ConfigService:
    """Facade merging layered configuration with type safety."""

    def __init__(
        self,
        *,
        defaults_ini: Path | None = None,
        user_ini: Path | None = None,
        environ: Dict[str, str] | None = None,
    ) -> None:
        self._lock = RLock()
        self._defaults_ini = defaults_ini or DEFAULTS_INI
        self._user_ini = user_ini
        self._environ = environ
        self.reload()

    # ------------------------------------------------------------------ #
    def reload(self) -> None:
        with self._lock:
            merged: Dict[str, Dict[str, Any]] = {}

            # Layer 0: embedded defaults
            _apply(merged, _DEFAULTS)

            # Layer 1: defaults.ini
            if self._defaults_ini.exists():
                _apply(merged, _read_ini(self._defaults_ini))

            # Layer 2: environment variables
            _apply(merged, _env_overlays(self._environ))

            # Layer 3: user overrides
            user_ini = self._user_ini or _user_config_path()
            if user_ini.exists():
                _apply(merged, _read_ini(user_ini))

            self.clock = _build_dataclass(ClockConfig, "Clock", merged.get("Clock", {}))
            self.sleep = _build_dataclass(SleepConfig, "Sleep", merged.get("Sleep", {}))
            logger.debug("Configuration loaded: clock=%s sleep=%s", self.clock, self.sleep)


# Global singleton
config_service = ConfigService()
