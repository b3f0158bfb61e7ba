#!/usr/bin/env python3
"""Configuration management for the poker display layer."""

import logging
import os
from typing import Literal, Optional, Tuple, cast

from pokerdisplay.icons import (
    LOWER_HALVES,
    UPPER_HALVES,
    LowerIconTable,
    UpperIconTable,
    load_icon_tables,
)
from pokerdisplay.markup import ChatMarkup, get_markup

logger = logging.getLogger(__name__)

Platform = Literal["discord", "telegram"]


def _parse_bool(value: Optional[str], default: bool = False) -> bool:
    """Parse a boolean environment variable value."""

    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable."""

    raw = os.getenv(name, str(default))
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


class Config:
    """Load and validate configuration from environment variables."""

    def __init__(self) -> None:
        self.DEBUG: bool = _parse_bool(
            os.getenv("POKERDISPLAY_DEBUG"),
            default=False,
        )

        platform = (
            os.getenv("POKERDISPLAY_PLATFORM", "discord")
            .strip()
            .lower()
        )
        if platform not in {"discord", "telegram"}:
            raise ValueError(
                "POKERDISPLAY_PLATFORM must be one of: 'discord', 'telegram'"
            )
        self.PLATFORM: Platform = cast(Platform, platform)

        # Optional JSON file replacing the built-in emoji ids
        self.ICONS_PATH: str = os.getenv("POKERDISPLAY_ICONS_PATH", "").strip()

        self.GAP_WIDTH: int = _env_int("POKERDISPLAY_GAP_WIDTH", 3)
        self.COMMUNITY_SLOTS: int = _env_int("POKERDISPLAY_COMMUNITY_SLOTS", 5)

    @property
    def log_level(self) -> int:
        return logging.DEBUG if self.DEBUG else logging.INFO

    def markup(self) -> ChatMarkup:
        """Return the markup dialect for the configured platform."""
        return get_markup(self.PLATFORM)

    def icon_tables(self) -> Tuple[UpperIconTable, LowerIconTable]:
        """Return the icon tables from ``ICONS_PATH`` or the built-in ones."""
        if not self.ICONS_PATH:
            return UPPER_HALVES, LOWER_HALVES
        return load_icon_tables(self.ICONS_PATH)

    def validate(self) -> None:
        """Validate configuration and raise if invalid."""
        if self.GAP_WIDTH < 1:
            raise ValueError(
                f"Invalid gap width: {self.GAP_WIDTH} (must be at least 1)"
            )
        if self.COMMUNITY_SLOTS < 0:
            raise ValueError(
                f"Invalid community slot count: {self.COMMUNITY_SLOTS}"
            )
        if self.ICONS_PATH and not os.path.isfile(self.ICONS_PATH):
            raise ValueError(f"Icon table file not found: {self.ICONS_PATH}")
        logger.debug(
            "Configuration valid (platform=%s, icons=%s)",
            self.PLATFORM,
            self.ICONS_PATH or "built-in",
        )
