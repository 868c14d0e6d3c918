"""User-configurable application settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from fenview.core.notation import STARTING_FEN


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True

    # Position shown at start-up
    initial_fen: str = STARTING_FEN

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppSettings:
        """Build settings, overriding defaults from ``FENVIEW_*`` variables."""
        env = os.environ if environ is None else environ
        settings = cls()
        settings.language = env.get("FENVIEW_LANGUAGE", settings.language)
        settings.board_theme = env.get("FENVIEW_BOARD_THEME", settings.board_theme)
        settings.initial_fen = env.get("FENVIEW_INITIAL_FEN", settings.initial_fen)
        coords = env.get("FENVIEW_SHOW_COORDINATES")
        if coords is not None:
            settings.show_coordinates = coords.strip().lower() not in ("0", "false", "no", "off")
        return settings
