"""Keypress normalisation, with the terminal read replaced by scripted input."""

from __future__ import annotations

import pytest

from frontend.cli import input_handler


@pytest.mark.parametrize(
    "keys, action",
    [
        (" ", "toggle"),
        ("c", "confirm"),
        ("\r", "enter"),
        ("n", "hint"),
        ("R", "restart"),
        ("?", "help"),
        ("2", "2"),
        ("\x1b[A", "up"),
        ("\x1b[D", "left"),
        ("\x1bx", "quit"),
        ("\x1b[Z", ""),
        ("\x07", ""),
    ],
    ids=repr,
)
def test_get_key(monkeypatch: pytest.MonkeyPatch, keys: str, action: str) -> None:
    pending = iter(keys)
    monkeypatch.setattr(input_handler, "_getch", lambda: next(pending))
    assert input_handler.get_key() == action
