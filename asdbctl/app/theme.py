"""Theme management for the slider window."""

from __future__ import annotations

import logging
import os

from PySide6 import QtGui, QtWidgets


_Role = QtGui.QPalette.ColorRole

# role -> RGB; roles not listed keep Qt's defaults
_PALETTE_COLORS: dict[str, dict[QtGui.QPalette.ColorRole, tuple[int, int, int]]] = {
    "dark": {
        _Role.Window: (53, 53, 53),
        _Role.WindowText: (255, 255, 255),
        _Role.Base: (35, 35, 35),
        _Role.Text: (255, 255, 255),
        _Role.Button: (53, 53, 53),
        _Role.ButtonText: (255, 255, 255),
        _Role.Highlight: (255, 196, 0),
        _Role.HighlightedText: (0, 0, 0),
    },
    "light": {
        _Role.Window: (246, 246, 246),
        _Role.WindowText: (0, 0, 0),
        _Role.Base: (255, 255, 255),
        _Role.Text: (0, 0, 0),
        _Role.Button: (236, 236, 236),
        _Role.ButtonText: (0, 0, 0),
        _Role.Highlight: (255, 170, 0),
        _Role.HighlightedText: (0, 0, 0),
    },
}


def detect_system_theme() -> str:
    """Returns 'dark' when GTK_THEME names a dark theme, else 'light'."""
    gtk_theme = os.environ.get("GTK_THEME", "").lower()
    if any(hint in gtk_theme for hint in ("dark", "night", "black")):
        return "dark"
    return "light"


def build_palette(name: str) -> QtGui.QPalette:
    palette = QtGui.QPalette()
    for role, (r, g, b) in _PALETTE_COLORS[name].items():
        palette.setColor(role, QtGui.QColor(r, g, b))
    return palette


def resolve_theme(mode: str) -> str | None:
    """Map a configured mode to a palette name.

    None means "system" with no dark preference: keep the platform palette.
    """
    if mode == "system":
        return "dark" if detect_system_theme() == "dark" else None
    if mode not in _PALETTE_COLORS:
        logging.warning(f"Unknown theme {mode!r}, using system.")
        return resolve_theme("system")
    return mode


def apply_theme(app: QtWidgets.QApplication, mode: str) -> None:
    """Apply a theme to the application.

    Args:
        app: The QApplication instance
        mode: One of "system", "light" or "dark".
    """
    name = resolve_theme(mode)
    app.setStyle("Fusion")
    app.setPalette(build_palette(name) if name else QtGui.QPalette())
    logging.info(f"Applied {mode} theme")
