"""
Desktop Entry: Parse freedesktop .desktop files into AppEntry values.

Only Name, Icon and Exec inside the [Desktop Entry] section are read. Keys
are taken in a single linear scan, so a repeated key keeps its last value.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from appicons.icon_resolver import resolve_icon_path

logger = logging.getLogger(__name__)

DESKTOP_ENTRY_SECTION = "[Desktop Entry]"

# Parser states
_OUTSIDE = 0
_INSIDE = 1


@dataclass(frozen=True)
class AppEntry:
    """An installed application as described by its .desktop file."""
    name: str
    icon_name: str  # Icon= value, an absolute path or freedesktop icon name
    icon_path: str  # Resolved filesystem path to icon, "" if none
    exec_cmd: str   # Exec line from .desktop
    desktop_file: str = ""


def _resolve_entry_icon(theme: str, size: int, icon_name: str) -> str:
    """Use an existing absolute Icon= path directly, else search the themes."""
    if not icon_name:
        return ""
    if os.path.isabs(icon_name) and os.path.exists(icon_name):
        return icon_name
    icon_path = resolve_icon_path(theme, size, icon_name)
    if not icon_path:
        logger.warning("Could not find path for icon %s", icon_name)
    return icon_path


def parse_desktop_entry(theme: str, size: int, desktop_path: str) -> Optional[AppEntry]:
    """Read name, icon and exec from a .desktop file.

    Returns None only if the file can't be opened or read. Missing keys are
    left as empty strings.
    """
    fields = {"Name": "", "Icon": "", "Exec": ""}
    state = _OUTSIDE
    try:
        with open(desktop_path, encoding="utf-8", errors="replace") as f:
            for line in f:
                line = line.rstrip("\r\n")
                if line.startswith("["):
                    state = _INSIDE if line == DESKTOP_ENTRY_SECTION else _OUTSIDE
                if state != _INSIDE:
                    continue
                key, sep, value = line.partition("=")
                if sep and key in fields:
                    fields[key] = value
    except OSError as exc:
        logger.error("Could not read desktop file %s: %s", desktop_path, exc)
        return None

    icon_name = fields["Icon"]
    return AppEntry(
        name=fields["Name"],
        icon_name=icon_name,
        icon_path=_resolve_entry_icon(theme, size, icon_name),
        exec_cmd=fields["Exec"],
        desktop_file=desktop_path,
    )
