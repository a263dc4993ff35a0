"""Clipboard delivery of generated passwords."""

from __future__ import annotations

import pyperclip

from passforge.utils.errors import ClipboardError


def copy_to_clipboard(text: str) -> None:
    """Place ``text`` on the system clipboard.

    Raises :class:`ClipboardError` when no clipboard mechanism is available
    (for example on a headless machine without ``xclip`` or ``wl-copy``).
    """

    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise ClipboardError(f"unable to copy to the clipboard: {exc}") from exc


__all__ = ["copy_to_clipboard"]
