"""Tests for locale switching and failure messages."""

from __future__ import annotations

import pytest

from fenview.core.enums import FenErrorKind
from fenview.ui.i18n import LANGUAGES, set_language, t


def test_languages() -> None:
    assert LANGUAGES == ["English", "Portuguese"]


def test_unknown_language_falls_back_to_english() -> None:
    set_language("Klingon")
    assert t().btn_show == "Show"


def test_portuguese_field_count_message() -> None:
    set_language("Portuguese")
    assert (
        t().failure_message(FenErrorKind.WRONG_FIELD_COUNT)
        == "Erro FEN: Esperado 6 campos separados por espaço."
    )


@pytest.mark.parametrize("language", ["English", "Portuguese"])
@pytest.mark.parametrize("kind", list(FenErrorKind))
def test_every_kind_has_a_distinct_message(language: str, kind: FenErrorKind) -> None:
    set_language(language)
    strings = t()
    assert strings.failure_message(kind) != strings.error_generic
