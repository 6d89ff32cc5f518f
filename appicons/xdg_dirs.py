"""
XDG Dirs: Locate the freedesktop.org data directories and active icon theme.

Data directories come from XDG_DATA_DIRS in priority order. Each one may
hold applications/ (desktop entries), icons/ (icon themes) and pixmaps/.
"""

import logging
import os
import subprocess
from typing import List

logger = logging.getLogger(__name__)

FALLBACK_DATA_DIRS = ("/usr/local/share", "/usr/share")
FALLBACK_THEME = "hicolor"


def data_directories() -> List[str]:
    """Return the ordered list of XDG data directories.

    Empty components are dropped, so an unset or empty XDG_DATA_DIRS falls
    back to /usr/local/share then /usr/share.
    """
    data_location = os.environ.get("XDG_DATA_DIRS", "")
    locations = [d for d in data_location.split(":") if d]
    if not locations:
        return list(FALLBACK_DATA_DIRS)
    return locations


def join_path(*parts: str) -> str:
    """Join path parts, keeping absolute-looking names inside the base.

    Unlike os.path.join, a later part such as "/usr/bin/foo" does not discard
    the parts before it: join_path("/usr/share/applications", "/usr/bin/foo")
    gives "/usr/share/applications/usr/bin/foo".
    """
    return os.path.normpath(os.sep.join(parts))


def current_icon_theme() -> str:
    """Get the active GTK icon theme name, or hicolor if it can't be queried."""
    try:
        result = subprocess.run(
            ["gtk-query-settings", "gtk-icon-theme-name"],
            capture_output=True, text=True, timeout=5
        )
    except (subprocess.TimeoutExpired, FileNotFoundError, OSError) as exc:
        logger.debug("gtk-query-settings unavailable: %s", exc)
        return FALLBACK_THEME

    for line in result.stdout.splitlines():
        if "gtk-icon-theme-name" in line:
            # Format: gtk-icon-theme-name: "Adwaita"
            parts = line.split('"')
            if len(parts) >= 2 and parts[1]:
                return parts[1]
    return FALLBACK_THEME
