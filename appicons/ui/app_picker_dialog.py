"""
App Picker Dialog: Browse installed applications and pick one.

Shows a searchable list of applications with their resolved icons. The desktop
files are scanned once when the dialog opens; typing filters that list by
name or command.
"""

from typing import Optional

from PySide6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QLabel,
    QDialogButtonBox,
)
from PySide6.QtCore import Qt, QSize
from PySide6.QtGui import QIcon

from appicons.app_lookup import find_apps_matching
from appicons.desktop_entry import AppEntry


class AppPickerDialog(QDialog):
    """Dialog for browsing and selecting an installed application."""

    def __init__(self, theme: str, size: int, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Select Application")
        self.setMinimumSize(500, 600)
        self.setModal(True)

        self._theme = theme
        self._size = size
        self._apps = []
        self._selected_app = None

        layout = QVBoxLayout(self)

        self.search_input = QLineEdit()
        self.search_input.setPlaceholderText("Search applications...")
        self.search_input.textChanged.connect(self._on_search)
        layout.addWidget(self.search_input)

        self.count_label = QLabel("Scanning applications...")
        layout.addWidget(self.count_label)

        self.app_list = QListWidget()
        self.app_list.setIconSize(QSize(size, size))
        self.app_list.itemDoubleClicked.connect(self._on_double_click)
        self.app_list.currentItemChanged.connect(self._on_selection_changed)
        layout.addWidget(self.app_list)

        # Details of the selected app
        self.info_label = QLabel("")
        self.info_label.setWordWrap(True)
        layout.addWidget(self.info_label)

        button_box = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        button_box.accepted.connect(self._on_accept)
        button_box.rejected.connect(self.reject)
        self.ok_button = button_box.button(QDialogButtonBox.Ok)
        self.ok_button.setText("Select")
        self.ok_button.setEnabled(False)
        layout.addWidget(button_box)

        self._load_apps()
        self.search_input.setFocus()

    def _load_apps(self):
        """Scan the desktop files and populate the app list."""
        self._apps = find_apps_matching(self._theme, self._size, "")
        self._populate_list(self._apps)
        self.count_label.setText(f"{len(self._apps)} applications found")

    def _populate_list(self, apps):
        """Fill the list widget with app entries."""
        self.app_list.clear()
        for app in apps:
            item = QListWidgetItem()
            item.setText(app.name or app.exec_cmd)
            item.setData(Qt.UserRole, app)

            if app.icon_path:
                icon = QIcon(app.icon_path)
                if not icon.isNull():
                    item.setIcon(icon)

            item.setToolTip(app.desktop_file)
            self.app_list.addItem(item)

    def _on_search(self, text):
        """Filter the loaded apps by name or command."""
        query = text.lower().strip()
        if not query:
            self._populate_list(self._apps)
            self.count_label.setText(f"{len(self._apps)} applications found")
            return

        filtered = [
            app for app in self._apps
            if query in app.name.lower() or query in app.exec_cmd.lower()
        ]
        self._populate_list(filtered)
        self.count_label.setText(f"{len(filtered)} of {len(self._apps)} applications")

    def _on_selection_changed(self, current, previous):
        if current is None:
            self.info_label.setText("")
            self.ok_button.setEnabled(False)
            self._selected_app = None
            return

        app = current.data(Qt.UserRole)
        self._selected_app = app
        self.ok_button.setEnabled(True)

        icon_status = app.icon_path or "no icon found"
        self.info_label.setText(
            f"Exec: {app.exec_cmd}\n"
            f"Icon: {app.icon_name} ({icon_status})"
        )

    def _on_double_click(self, item):
        self._selected_app = item.data(Qt.UserRole)
        self.accept()

    def _on_accept(self):
        if self._selected_app:
            self.accept()

    def get_selected_app(self) -> Optional[AppEntry]:
        """Return the selected AppEntry, or None."""
        return self._selected_app


def pick_application(theme: str, size: int) -> Optional[AppEntry]:
    """Run the picker in its own QApplication and return the chosen AppEntry or None."""
    from PySide6.QtWidgets import QApplication

    _app = QApplication.instance() or QApplication([])
    dialog = AppPickerDialog(theme, size)
    if not dialog.exec():
        return None
    return dialog.get_selected_app()
