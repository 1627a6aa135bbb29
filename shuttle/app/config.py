"""Window layout settings for the transfer window.

Defaults reproduce the countries/capitals demo. ``WindowConfig.from_env``
lets a user override the title and size without code changes.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, replace
from typing import Mapping, Optional

_log = logging.getLogger(__name__)

_SIZE_RE = re.compile(r"^\s*(\d+)\s*[xX]\s*(\d+)\s*$")


@dataclass(frozen=True)
class WindowConfig:
    """Typed layout settings consumed by ``MainWindowView``."""

    title: str = "Arrange Countries and Capitals"
    width: int = 500
    height: int = 450
    padding: int = 5
    gap: int = 10
    list_min_width: int = 150
    button_column_width: int = 50
    left_header: str = "Countries"
    right_header: str = "Capitals"
    move_right_label: str = " > "
    move_left_label: str = " < "

    @property
    def geometry(self) -> str:
        return f"{self.width}x{self.height}"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "WindowConfig":
        """Build a config honouring ``SHUTTLE_WINDOW_TITLE`` / ``SHUTTLE_WINDOW_SIZE``.

        Invalid sizes are logged and ignored.
        """
        env = os.environ if environ is None else environ
        config = cls()

        title = (env.get("SHUTTLE_WINDOW_TITLE") or "").strip()
        if title:
            config = replace(config, title=title)

        size = env.get("SHUTTLE_WINDOW_SIZE")
        if size:
            parsed = parse_size(size)
            if parsed is None:
                _log.warning("Ignoring invalid SHUTTLE_WINDOW_SIZE=%r (expected WxH)", size)
            else:
                config = replace(config, width=parsed[0], height=parsed[1])
        return config


def parse_size(text: str) -> Optional[tuple[int, int]]:
    """Parse ``"WxH"`` into positive integers, or return ``None``."""
    match = _SIZE_RE.match(text or "")
    if not match:
        return None
    width, height = int(match.group(1)), int(match.group(2))
    if width <= 0 or height <= 0:
        return None
    return width, height


__all__ = ["WindowConfig", "parse_size"]
