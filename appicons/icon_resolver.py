"""
Icon Resolver: Map a freedesktop icon name to an image file on disk.

Search order, each tier checked across every data directory before the next:
1. The requested theme:  <data dir>/icons/<theme>
2. The hicolor fallback: <data dir>/icons/hicolor
3. Flat pixmaps:         <data dir>/pixmaps/<name>.<ext>
4. Every installed theme under <data dir>/icons, in listing order

The order is significant and must not change. Results are never cached; the
same filesystem always produces the same path.
"""

import logging
import os
from typing import List

from appicons.xdg_dirs import FALLBACK_THEME, data_directories, join_path

logger = logging.getLogger(__name__)

# Raster first, then scalable
ICON_EXTENSIONS = (".png", ".svg")

# Icon contexts searched when the requested size has no match, in order
ICON_CATEGORIES = ("apps", "actions", "devices", "emblems", "mimetypes", "places", "status")


def _list_subdirs(directory: str) -> List[str]:
    """Sorted names of the visible subdirectories of directory.

    An unreadable or missing directory has no subdirectories.
    """
    try:
        entries = list(os.scandir(directory))
    except OSError:
        return []
    names = []
    for entry in entries:
        if entry.name.startswith("."):
            continue
        try:
            if not entry.is_dir():
                continue
        except OSError:
            continue
        names.append(entry.name)
    names.sort()
    return names


def _lookup_any_size_in_category(theme_dir: str, category: str, icon_name: str) -> str:
    """Find icon_name in any size of one category, larger sizes first.

    Size directories are walked in reverse lexicographic order. That favours
    bigger icons except for 3 digit sizes (128 sorts below 48); this ordering
    is kept as-is for compatibility with existing lookups.
    """
    # <theme>/<size>/<category>/<name>.<ext>
    for size_dir in reversed(_list_subdirs(theme_dir)):
        match_dir = join_path(theme_dir, size_dir)
        for extension in ICON_EXTENSIONS:
            test_icon = join_path(match_dir, category, icon_name + extension)
            if os.path.exists(test_icon):
                return test_icon

    # <theme>/<category>/<size>/<name>.<ext>
    category_dir = join_path(theme_dir, category)
    for size_dir in reversed(_list_subdirs(category_dir)):
        match_dir = join_path(category_dir, size_dir)
        for extension in ICON_EXTENSIONS:
            test_icon = join_path(match_dir, icon_name + extension)
            if os.path.exists(test_icon):
                return test_icon

    return ""


def lookup_icon_in_theme(icon_size: str, theme_dir: str, icon_name: str) -> str:
    """Search a single theme directory for icon_name at icon_size.

    Returns the icon path or "" if the theme has no such icon.
    """
    if not os.path.isdir(theme_dir):
        return ""

    sized = f"{icon_size}x{icon_size}"
    for extension in ICON_EXTENSIONS:
        filename = icon_name + extension
        candidates = (
            join_path(theme_dir, icon_size, "apps", filename),   # 48/apps/
            join_path(theme_dir, sized, "apps", filename),       # 48x48/apps/
            join_path(theme_dir, "apps", icon_size, filename),   # apps/48/
            join_path(theme_dir, "apps", sized, filename),       # apps/48x48/
            # Requested size missing: try scalable
            join_path(theme_dir, "scalable", "apps", filename),
            join_path(theme_dir, "apps", "scalable", filename),
        )
        for test_icon in candidates:
            if os.path.exists(test_icon):
                return test_icon

    for category in ICON_CATEGORIES:
        test_icon = _lookup_any_size_in_category(theme_dir, category, icon_name)
        if test_icon:
            return test_icon
    return ""


def resolve_icon_path(theme: str, size: int, icon_name: str) -> str:
    """Resolve an icon name to an image path, or "" if nothing matches."""
    data_dirs = data_directories()
    icon_size = str(size)

    for data_dir in data_dirs:
        icon_path = lookup_icon_in_theme(icon_size, join_path(data_dir, "icons", theme), icon_name)
        if icon_path:
            return icon_path

    for data_dir in data_dirs:
        icon_path = lookup_icon_in_theme(
            icon_size, join_path(data_dir, "icons", FALLBACK_THEME), icon_name
        )
        if icon_path:
            return icon_path

    for data_dir in data_dirs:
        for extension in ICON_EXTENSIONS:
            icon_path = join_path(data_dir, "pixmaps", icon_name + extension)
            if os.path.exists(icon_path):
                return icon_path

    # Last resort: every installed theme
    for data_dir in data_dirs:
        icons_dir = join_path(data_dir, "icons")
        for theme_name in _list_subdirs(icons_dir):
            icon_path = lookup_icon_in_theme(icon_size, join_path(icons_dir, theme_name), icon_name)
            if icon_path:
                return icon_path

    logger.debug("No icon found for %r (theme=%s, size=%s)", icon_name, theme, icon_size)
    return ""
