"""Tests for .desktop file parsing."""

import logging

from appicons.desktop_entry import AppEntry, parse_desktop_entry


def test_parse_basic_entry(data_dirs, make_file):
    d1, _ = data_dirs
    icon = make_file(d1 / "icons" / "hicolor" / "48x48" / "apps" / "sample-icon.png")
    desktop = make_file(
        d1 / "applications" / "sample.desktop",
        "[Desktop Entry]\n"
        "Type=Application\n"
        "Name=Sample App\n"
        "Comment=Runs the sample app\n"
        "Icon=sample-icon\n"
        "Exec=sample-app --flag %U\n",
    )

    app = parse_desktop_entry("Adwaita", 48, str(desktop))

    assert app == AppEntry(
        name="Sample App",
        icon_name="sample-icon",
        icon_path=str(icon),
        exec_cmd="sample-app --flag %U",
        desktop_file=str(desktop),
    )


def test_last_key_wins(data_dirs, make_file):
    desktop = make_file(
        data_dirs[0] / "twice.desktop",
        "[Desktop Entry]\nName=First\nExec=one\nName=Second\n",
    )

    app = parse_desktop_entry("Adwaita", 48, str(desktop))
    assert app.name == "Second"
    assert app.exec_cmd == "one"


def test_keys_outside_desktop_entry_ignored(data_dirs, make_file):
    desktop = make_file(
        data_dirs[0] / "scoped.desktop",
        "Name=Before Header\n"
        "[Desktop Entry]\n"
        "Name=Real\n"
        "Exec=real\n"
        "[Desktop Action new-window]\n"
        "Name=New Window\n"
        "Exec=real --new-window\n",
    )

    app = parse_desktop_entry("Adwaita", 48, str(desktop))
    assert app.name == "Real"
    assert app.exec_cmd == "real"


def test_name_only_in_other_section(data_dirs, make_file):
    desktop = make_file(
        data_dirs[0] / "other.desktop",
        "[Other]\nName=Nope\n",
    )

    app = parse_desktop_entry("Adwaita", 48, str(desktop))
    assert app == AppEntry(name="", icon_name="", icon_path="", exec_cmd="", desktop_file=str(desktop))


def test_header_must_match_whole_line(data_dirs, make_file):
    desktop = make_file(
        data_dirs[0] / "spaced.desktop",
        "[Desktop Entry] \nName=Trailing Space\n",
    )

    assert parse_desktop_entry("Adwaita", 48, str(desktop)).name == ""


def test_value_keeps_equals_signs(data_dirs, make_file):
    desktop = make_file(
        data_dirs[0] / "eq.desktop",
        "[Desktop Entry]\nExec=env FOO=bar baz --opt=1\n",
    )

    assert parse_desktop_entry("Adwaita", 48, str(desktop)).exec_cmd == "env FOO=bar baz --opt=1"


def test_localized_keys_ignored(data_dirs, make_file):
    desktop = make_file(
        data_dirs[0] / "l10n.desktop",
        "[Desktop Entry]\nName=Files\nName[de]=Dateien\n",
    )

    assert parse_desktop_entry("Adwaita", 48, str(desktop)).name == "Files"


def test_absolute_icon_path_used_directly(data_dirs, make_file, tmp_path):
    icon = make_file(tmp_path / "opt" / "app" / "logo.svg")
    desktop = make_file(
        data_dirs[0] / "abs.desktop",
        f"[Desktop Entry]\nIcon={icon}\n",
    )

    app = parse_desktop_entry("Adwaita", 48, str(desktop))
    assert app.icon_name == str(icon)
    assert app.icon_path == str(icon)


def test_unresolved_icon_is_empty_and_logged(data_dirs, make_file, caplog):
    desktop = make_file(
        data_dirs[0] / "noicon.desktop",
        "[Desktop Entry]\nName=No Icon\nIcon=does-not-exist\n",
    )

    with caplog.at_level(logging.WARNING, logger="appicons.desktop_entry"):
        app = parse_desktop_entry("Adwaita", 48, str(desktop))

    assert app is not None
    assert app.icon_name == "does-not-exist"
    assert app.icon_path == ""
    assert "does-not-exist" in caplog.text


def test_unreadable_file_returns_none(data_dirs, caplog):
    missing = data_dirs[0] / "applications" / "gone.desktop"

    with caplog.at_level(logging.ERROR, logger="appicons.desktop_entry"):
        assert parse_desktop_entry("Adwaita", 48, str(missing)) is None
    assert "gone.desktop" in caplog.text


def test_crlf_line_endings(data_dirs, tmp_path):
    desktop = data_dirs[0] / "dos.desktop"
    desktop.write_bytes(b"[Desktop Entry]\r\nName=Dos\r\nExec=dos\r\n")

    app = parse_desktop_entry("Adwaita", 48, str(desktop))
    assert app.name == "Dos"
    assert app.exec_cmd == "dos"
