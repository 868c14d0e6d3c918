"""MainWindow HTML export action."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from fenview.core.notation import ParseResult
from fenview.ui.html_io import write_board_html
from fenview.ui.i18n import t


def on_export_html(
    host: Any,
    *,
    file_dialog_cls: type[Any],
    message_box_cls: type[Any],
) -> None:
    result = host._last_result
    if not isinstance(result, ParseResult):
        message_box_cls.warning(host, t().export_html_title, t().export_html_no_board)
        return

    file_path, _ = file_dialog_cls.getSaveFileName(
        host,
        t().export_html_title,
        "board.html",
        f"{t().html_filter};;{t().all_files}",
    )
    if not file_path:
        return

    try:
        save_path = write_board_html(Path(file_path), result.board, title=result.to_fen())
    except OSError as exc:
        message_box_cls.warning(
            host,
            t().export_html_title,
            t().export_html_failed.format(exc=exc),
        )
        return
    host._status_label.setText(t().status_exported_html.format(name=save_path.name))
