"""
Window Info: Identify open windows for icon lookup.

WindowInfo carries what the window manager knows about a window. The
list_windows() helper builds them from `wmctrl -lxp`, filling the command
line from the owning process via psutil.
"""

import logging
import shutil
import subprocess
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import psutil

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WindowInfo:
    """Identity of a live window as reported by the window manager."""
    title: str = ""
    classes: Tuple[str, ...] = field(default_factory=tuple)  # WM_CLASS, instance first
    command: str = ""
    icon_name: str = ""


def split_wm_class(wm_class: str) -> Tuple[str, ...]:
    """Split wmctrl's "instance.Class" column into its two names.

    Instance and class may both contain dots (org.gnome.Nautilus.Org.gnome.Nautilus),
    so equal halves are preferred over the first dot.
    """
    if not wm_class or wm_class == "N/A":
        return ()
    parts = wm_class.split(".")
    half = len(parts) // 2
    if len(parts) % 2 == 0 and ".".join(parts[:half]).lower() == ".".join(parts[half:]).lower():
        return (".".join(parts[:half]), ".".join(parts[half:]))
    instance, sep, cls = wm_class.partition(".")
    if not sep:
        return (wm_class,)
    return (instance, cls)


def process_command(pid: int) -> str:
    """Return the command line of pid joined with spaces, or "" if unavailable."""
    if pid <= 0:
        return ""
    try:
        return " ".join(psutil.Process(pid).cmdline())
    except (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess) as exc:
        logger.debug("No command line for pid %d: %s", pid, exc)
        return ""


def parse_wmctrl_line(line: str) -> Optional[WindowInfo]:
    """Parse one line of `wmctrl -lxp` output.

    Format: <window id> <desktop> <pid> <instance.Class> <host> <title...>
    Returns None for lines that don't have the expected columns.
    """
    parts = line.split(None, 5)
    if len(parts) < 5:
        return None
    try:
        pid = int(parts[2])
    except ValueError:
        return None
    title = parts[5] if len(parts) > 5 else ""
    return WindowInfo(
        title=title,
        classes=split_wm_class(parts[3]),
        command=process_command(pid),
    )


def list_windows() -> List[WindowInfo]:
    """List open windows via wmctrl. Returns [] if wmctrl can't be used."""
    if not shutil.which("wmctrl"):
        logger.warning("wmctrl not installed -- window listing unavailable")
        return []

    try:
        result = subprocess.run(
            ["wmctrl", "-lxp"],
            capture_output=True, text=True, timeout=5,
        )
    except (subprocess.TimeoutExpired, FileNotFoundError, OSError) as exc:
        logger.warning("wmctrl failed: %s", exc)
        return []

    if result.returncode != 0:
        logger.warning("wmctrl exited with status %d: %s", result.returncode, result.stderr.strip())
        return []

    windows = []
    for line in result.stdout.splitlines():
        window = parse_wmctrl_line(line)
        if window is not None:
            windows.append(window)
    return windows
