"""
App Lookup: Find installed applications by name, command or window info.

Every lookup walks the XDG data directories in priority order and parses
<data dir>/applications/*.desktop, attaching a resolved icon path for the
requested theme and size. Nothing is cached between calls.
"""

import logging
import os
from typing import Iterator, List, Optional

from appicons.desktop_entry import AppEntry, parse_desktop_entry
from appicons.xdg_dirs import data_directories, join_path

logger = logging.getLogger(__name__)


def _iter_desktop_files(data_dir: str) -> Iterator[str]:
    """Yield visible, non-directory entries of <data_dir>/applications."""
    app_dir = join_path(data_dir, "applications")
    try:
        names = sorted(os.listdir(app_dir))
    except OSError:
        return
    for name in names:
        path = join_path(app_dir, name)
        if name.startswith(".") or os.path.isdir(path):
            continue
        yield path


def find_app_by_metadata(theme: str, size: int, app_name: str) -> Optional[AppEntry]:
    """Return the first app whose Name or Exec equals app_name exactly."""
    for data_dir in data_directories():
        for desktop_path in _iter_desktop_files(data_dir):
            app = parse_desktop_entry(theme, size, desktop_path)
            if app is None:
                continue
            if app.name == app_name or app.exec_cmd == app_name:
                return app
    return None


def find_app(theme: str, size: int, app_name: str) -> Optional[AppEntry]:
    """Look up an app by its desktop file name, then by file contents."""
    for data_dir in data_directories():
        desktop_path = join_path(data_dir, "applications", app_name + ".desktop")
        if os.path.exists(desktop_path):
            return parse_desktop_entry(theme, size, desktop_path)
    return find_app_by_metadata(theme, size, app_name)


def find_apps_matching(theme: str, size: int, fragment: str) -> List[AppEntry]:
    """Return every app whose Name or Exec contains fragment, ignoring case.

    Results are in directory then file order; duplicates across data
    directories are kept.
    """
    needle = fragment.lower()
    apps = []
    for data_dir in data_directories():
        for desktop_path in _iter_desktop_files(data_dir):
            app = parse_desktop_entry(theme, size, desktop_path)
            if app is None:
                continue
            if needle in app.name.lower() or needle in app.exec_cmd.lower():
                apps.append(app)
    return apps


def find_app_for_window(theme: str, size: int, window) -> Optional[AppEntry]:
    """Match a window to an app by title, class names, command, then icon name.

    window is anything with title, classes, command and icon_name attributes
    (see appicons.window_info.WindowInfo). The first hit wins.
    """
    app = find_app(theme, size, window.title)
    if app is not None:
        return app
    for wm_class in window.classes:
        app = find_app(theme, size, wm_class)
        if app is not None:
            return app
    app = find_app(theme, size, window.command)
    if app is not None:
        return app
    app = find_app(theme, size, window.icon_name)
    if app is None:
        logger.debug("No application matched window %r", window.title)
    return app


class FdoIconProvider:
    """Icon provider following the freedesktop.org desktop entry and icon theme conventions."""

    def find_icon_from_app_name(self, theme: str, size: int, app_name: str) -> Optional[AppEntry]:
        return find_app(theme, size, app_name)

    def find_icons_matching_app_name(self, theme: str, size: int, app_name: str) -> List[AppEntry]:
        return find_apps_matching(theme, size, app_name)

    def find_icon_from_window(self, theme: str, size: int, window) -> Optional[AppEntry]:
        return find_app_for_window(theme, size, window)


def new_fdo_icon_provider() -> FdoIconProvider:
    return FdoIconProvider()
