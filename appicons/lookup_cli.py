#!/usr/bin/env python3
"""
App Icons CLI: Look up installed applications and their icons.

Usage:
    appicons firefox                          # Exact name / desktop file lookup
    appicons --match term                     # Every app containing "term"
    appicons --icon utilities-terminal        # Resolve an icon name only
    appicons --window --title Foo --class foo # Match window info
    appicons --windows                        # Resolve icons for open windows
    appicons --pick                           # Choose from a dialog
"""

import argparse
import logging
import sys

from appicons.app_lookup import find_app, find_app_for_window, find_apps_matching
from appicons.icon_resolver import resolve_icon_path
from appicons.window_info import WindowInfo, list_windows
from appicons.xdg_dirs import current_icon_theme

DEFAULT_ICON_SIZE = 48


def format_app(app) -> str:
    """One block of text describing a found application."""
    return (
        f"Name:      {app.name}\n"
        f"Icon name: {app.icon_name}\n"
        f"Icon path: {app.icon_path}\n"
        f"Exec:      {app.exec_cmd}"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="appicons",
        description="Find freedesktop.org applications and resolve their icons",
    )
    parser.add_argument("name", nargs="?", help="Application name, desktop file name or command")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--match", metavar="FRAGMENT", help="List every app whose name or command contains FRAGMENT")
    mode.add_argument("--icon", metavar="ICON_NAME", help="Resolve an icon name to a file")
    mode.add_argument("--window", action="store_true", help="Match the window given by --title/--class/--command/--icon-name")
    mode.add_argument("--windows", action="store_true", help="Resolve every open window (needs wmctrl)")
    mode.add_argument("--pick", action="store_true", help="Pick an application from a dialog")

    window = parser.add_argument_group("window info")
    window.add_argument("--title", default="")
    window.add_argument("--class", dest="classes", action="append", metavar="WM_CLASS")
    window.add_argument("--command", default="")
    window.add_argument("--icon-name", default="")

    parser.add_argument("--theme", help="Icon theme (default: active GTK theme)")
    parser.add_argument("--size", type=int, default=DEFAULT_ICON_SIZE,
                        help=f"Icon size in pixels (default: {DEFAULT_ICON_SIZE})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def run(args) -> int:
    """Execute the parsed command. Returns the process exit status."""
    theme = args.theme or current_icon_theme()
    size = args.size

    if args.icon is not None:
        icon_path = resolve_icon_path(theme, size, args.icon)
        if not icon_path:
            return 1
        print(icon_path)
        return 0

    if args.match is not None:
        apps = find_apps_matching(theme, size, args.match)
        for app in apps:
            print(f"{app.name}\t{app.exec_cmd}\t{app.icon_path}")
        return 0 if apps else 1

    if args.window:
        window = WindowInfo(
            title=args.title,
            classes=tuple(args.classes or ()),
            command=args.command,
            icon_name=args.icon_name,
        )
        app = find_app_for_window(theme, size, window)
        if app is None:
            return 1
        print(format_app(app))
        return 0

    if args.windows:
        found = False
        for window in list_windows():
            app = find_app_for_window(theme, size, window)
            icon_path = app.icon_path if app is not None else ""
            found = found or app is not None
            print(f"{window.title}\t{icon_path}")
        return 0 if found else 1

    if args.pick:
        from appicons.ui.app_picker_dialog import pick_application
        app = pick_application(theme, size)
        if app is None:
            return 1
        print(format_app(app))
        return 0

    app = find_app(theme, size, args.name)
    if app is None:
        return 1
    print(format_app(app))
    return 0


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    no_mode = not (args.match is not None or args.icon is not None or args.window
                   or args.windows or args.pick)
    if no_mode and not args.name:
        parser.error("an application name is required")
    if not no_mode and args.name:
        parser.error("an application name can't be combined with --match, --icon, --window, --windows or --pick")
    window_fields = args.title or args.classes or args.command or args.icon_name
    if window_fields and not args.window:
        parser.error("--title, --class, --command and --icon-name require --window")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
