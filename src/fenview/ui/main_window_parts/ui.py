"""MainWindow UI construction and retranslation helpers."""

from __future__ import annotations

from typing import Any

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from fenview.ui.board.board_view import BoardView
from fenview.ui.i18n import t
from fenview.ui.panels.fen_form import FenForm
from fenview.ui.panels.output_panel import OutputPanel


def setup_ui(host: Any) -> None:
    """Build the central layout and status bar widgets."""
    central = QWidget()
    host.setCentralWidget(central)
    root = QVBoxLayout(central)
    root.setContentsMargins(6, 6, 6, 6)
    root.setSpacing(6)

    # FEN input (top)
    host._fen_form = FenForm()
    root.addWidget(host._fen_form)

    body = QHBoxLayout()
    body.setSpacing(6)

    # Board (left)
    host._board_view = BoardView()
    body.addWidget(host._board_view, stretch=3)

    # Parser output (right)
    host._output_panel = OutputPanel()
    host._output_panel.setMinimumWidth(320)
    body.addWidget(host._output_panel, stretch=2)

    root.addLayout(body, stretch=1)

    # Status bar
    host._status = QStatusBar()
    host.setStatusBar(host._status)
    host._status_label = QLabel(t().status_ready)
    host._status.addWidget(host._status_label)


def setup_menu(host: Any) -> None:
    """Build menu actions and bind action handlers."""
    menu_bar = host.menuBar()
    assert menu_bar is not None
    s = t()

    # File menu
    host._menu_file = menu_bar.addMenu(s.menu_file)
    assert host._menu_file is not None

    host._act_export_html = QAction(s.menu_export_html, host)
    host._act_export_html.setShortcut("Ctrl+E")
    host._act_export_html.triggered.connect(host._on_export_html)
    host._menu_file.addAction(host._act_export_html)

    host._menu_file.addSeparator()

    host._act_flip = QAction(s.menu_flip_board, host)
    host._act_flip.setShortcut("F")
    host._act_flip.triggered.connect(host._on_flip)
    host._menu_file.addAction(host._act_flip)

    host._menu_file.addSeparator()

    host._act_quit = QAction(s.menu_quit, host)
    host._act_quit.setShortcut("Ctrl+Q")
    host._act_quit.setMenuRole(QAction.MenuRole.QuitRole)
    host._act_quit.triggered.connect(host.close)
    host._menu_file.addAction(host._act_quit)

    # Settings menu
    host._menu_settings = menu_bar.addMenu(s.menu_settings)
    assert host._menu_settings is not None

    host._act_settings = QAction(s.menu_settings_action, host)
    host._act_settings.setShortcut("Ctrl+,")
    # Keep this action inside our custom Settings menu across locales/platforms.
    host._act_settings.setMenuRole(QAction.MenuRole.NoRole)
    host._act_settings.triggered.connect(host._on_settings)
    host._menu_settings.addAction(host._act_settings)


def retranslate_ui(host: Any) -> None:
    """Update all translatable strings when the locale changes."""
    s = t()
    assert host._menu_file is not None
    assert host._menu_settings is not None

    host.setWindowTitle(s.window_title)

    # Menu bar
    host._menu_file.setTitle(s.menu_file)
    host._act_export_html.setText(s.menu_export_html)
    host._act_flip.setText(s.menu_flip_board)
    host._act_quit.setText(s.menu_quit)
    host._menu_settings.setTitle(s.menu_settings)
    host._act_settings.setText(s.menu_settings_action)

    # Child widgets
    host._fen_form.retranslate_ui()
    host._output_panel.retranslate_ui()
