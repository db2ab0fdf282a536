"""Application configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import os

ENV_PREFIX = "ADVICE_"
DEFAULT_CONTROLLER_ADVICE_ENABLED = True
DEFAULT_NOT_FOUND_HANDLER_ENABLED = False

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


def _get_bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


@dataclass(frozen=True)
class AdviceSettings:
    """Runtime switches for the exception translator."""

    controller_advice_enabled: bool = DEFAULT_CONTROLLER_ADVICE_ENABLED
    not_found_handler_enabled: bool = DEFAULT_NOT_FOUND_HANDLER_ENABLED

    def safe_for_logging(self) -> dict[str, bool]:
        """Return settings as a plain mapping for log lines."""
        return {
            "controller_advice_enabled": self.controller_advice_enabled,
            "not_found_handler_enabled": self.not_found_handler_enabled,
        }


@lru_cache(maxsize=1)
def get_advice_settings() -> AdviceSettings:
    """Load translator settings from the environment."""
    return AdviceSettings(
        controller_advice_enabled=_get_bool_env(
            f"{ENV_PREFIX}CONTROLLER_ADVICE_ENABLED",
            DEFAULT_CONTROLLER_ADVICE_ENABLED,
        ),
        not_found_handler_enabled=_get_bool_env(
            f"{ENV_PREFIX}NOT_FOUND_HANDLER_ENABLED",
            DEFAULT_NOT_FOUND_HANDLER_ENABLED,
        ),
    )
