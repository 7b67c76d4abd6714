"""Tests for the clipboard implementations."""

import pytest

from colormixer.clipboard import (
    CLIPBOARD_READ_SCRIPT,
    CLIPBOARD_WRITE_SCRIPT,
    MemoryClipboard,
    PageClipboard,
)
from colormixer.errors import ClipboardUnavailableError


class FakeContext:
    def __init__(self):
        self.granted = []

    def grant_permissions(self, permissions, origin=None):
        self.granted.append((list(permissions), origin))


class FakePage:
    """Answers evaluate() calls the way the clipboard scripts would."""

    def __init__(self, write_result=None, read_result=None):
        self.context = FakeContext()
        self.write_result = write_result if write_result is not None else {"ok": True, "error": None}
        self.read_result = read_result
        self.calls = []

    def evaluate(self, script, arg=None):
        self.calls.append((script, arg))
        if script == CLIPBOARD_WRITE_SCRIPT:
            return self.write_result
        if script == CLIPBOARD_READ_SCRIPT:
            return self.read_result
        raise AssertionError("unexpected script")


class TestMemoryClipboard:
    def test_write_and_read(self):
        clipboard = MemoryClipboard()
        assert clipboard.read_text() is None
        clipboard.write_text("#FF5733")
        clipboard.write_text("rgb(255, 87, 51)")
        assert clipboard.read_text() == "rgb(255, 87, 51)"
        assert clipboard.history == ["#FF5733", "rgb(255, 87, 51)"]

    def test_unavailable(self):
        clipboard = MemoryClipboard(available=False)
        with pytest.raises(ClipboardUnavailableError) as exc_info:
            clipboard.write_text("#FF5733")
        assert exc_info.value.text == "#FF5733"
        assert clipboard.history == []


class TestPageClipboard:
    def test_write_passes_text(self):
        page = FakePage()
        PageClipboard(page).write_text("#0000FF")
        assert page.calls == [(CLIPBOARD_WRITE_SCRIPT, "#0000FF")]

    def test_write_denied(self):
        """A rejected writeText becomes ClipboardUnavailableError."""
        page = FakePage(write_result={"ok": False, "error": "NotAllowedError: Write permission denied."})
        with pytest.raises(ClipboardUnavailableError, match="NotAllowedError"):
            PageClipboard(page).write_text("#0000FF")

    def test_grant_permissions(self):
        page = FakePage()
        clipboard = PageClipboard(page)
        clipboard.grant_permissions()
        clipboard.grant_permissions(origin="http://localhost:3000")
        assert page.context.granted == [
            (["clipboard-read", "clipboard-write"], None),
            (["clipboard-read", "clipboard-write"], "http://localhost:3000"),
        ]

    def test_read_text(self):
        page = FakePage(read_result="#FF5733")
        assert PageClipboard(page).read_text() == "#FF5733"
