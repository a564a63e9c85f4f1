"""Root logger setup for the desktop and web shells.

Two environment variables win over anything chosen in the settings dialog:
``DATEDESK_LOG_LEVEL`` (a level name such as ``warning`` or a number) and
``DATEDESK_DEBUG`` (truthy forces DEBUG).
"""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LEVEL_ENV = "DATEDESK_LOG_LEVEL"
DEBUG_ENV = "DATEDESK_DEBUG"

_TRUTHY = {"1", "true", "yes", "on"}


def parse_level(text: Optional[str]) -> Optional[int]:
    """Return the numeric level for ``text`` or None when it names no level."""
    value = (text or "").strip()
    if not value:
        return None
    if value.isdigit():
        try:
            return int(value)
        except ValueError:
            # isdigit() also accepts characters like superscripts.
            return None
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else None


def env_level() -> Optional[int]:
    """Level forced by the environment, if any."""
    raw = os.getenv(LEVEL_ENV)
    if raw:
        return parse_level(raw) or logging.INFO
    if (os.getenv(DEBUG_ENV) or "").strip().lower() in _TRUTHY:
        return logging.DEBUG
    return None


def env_requests_debug() -> bool:
    """True if the environment forces DEBUG (or something more verbose)."""
    level = env_level()
    return level is not None and level <= logging.DEBUG


def configure_root(default_level: int = logging.INFO) -> int:
    """Install the compact console handler once and set the root level."""
    effective = env_level() or default_level
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    root.setLevel(effective)
    return effective


def apply_gui_preferences(settings: Any) -> int:
    """Apply ``settings.debug_logging`` to the root logger.

    ``settings`` is a ``SettingsVM`` (or anything with a ``debug_logging``
    flag). Environment overrides still win. Returns the level now in effect.
    """
    forced = env_level()
    if forced is not None:
        level = forced
    else:
        level = logging.DEBUG if getattr(settings, "debug_logging", False) else logging.INFO
    logging.getLogger().setLevel(level)
    return level


def level_name(level: int) -> str:
    return logging.getLevelName(level)
