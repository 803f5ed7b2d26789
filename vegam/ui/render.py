"""Rich-text rendering of the word list (no Qt dependency)."""

from __future__ import annotations

import html

from vegam.core.state import WORD_MARKER, Phase, SessionState
from vegam.ui.colors import Palette

ACTIVE_ANCHOR = "active-word"
CARET = "▏"


def _span(text: str, style: str) -> str:
    return f'<span style="{style}">{html.escape(text)}</span>'


def render_words_html(state: SessionState) -> str:
    """Rich text for the whole word list.

    Typed characters are colored by correctness, characters typed past the end
    of a word are shown in the danger color after it, and the character under
    the cursor gets an accent background. Marks are per character so a mistake
    never changes where the following text lands.
    """
    show_cursor = state.phase is not Phase.FINISHED
    parts = []
    for wi, word in enumerate(state.words):
        typed = state.typed_at(wi)
        if typed.endswith(WORD_MARKER):
            typed = typed[: -len(WORD_MARKER)]
        active = show_cursor and wi == state.word_index

        chars = []
        for ci, ch in enumerate(word):
            if active and ci == state.char_index:
                style = f"background:{Palette.ACCENT_BG}; color:{Palette.ACCENT};"
            elif ci >= len(typed):
                style = f"color:{Palette.TEXT_FAINT};"
            elif typed[ci] == ch:
                style = f"color:{Palette.TEXT};"
            else:
                style = f"color:{Palette.DANGER};"
            chars.append(_span(ch, style))
        extra = typed[len(word):]
        if extra:
            chars.append(_span(extra, f"color:{Palette.DANGER}; text-decoration: underline;"))
        if active and state.char_index >= len(word):
            chars.append(_span(CARET, f"color:{Palette.ACCENT};"))

        word_html = "".join(chars)
        if active:
            word_html = (
                f'<a name="{ACTIVE_ANCHOR}"></a>'
                f'<span style="background:{Palette.ACTIVE_WORD_BG};">{word_html}</span>'
            )
        parts.append(word_html)
    separator = _span(" · ", f"color:{Palette.TEXT_FAINT};")
    return (
        f'<div style="font-size:24px; line-height:160%; color:{Palette.TEXT_MUTED};">'
        + separator.join(parts)
        + "</div>"
    )
