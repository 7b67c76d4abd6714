"""
Clipboard boundary.

ColorState never touches a real clipboard itself; it calls a Clipboard,
which either writes the text or raises ClipboardUnavailableError.

Available implementations:
    - MemoryClipboard: in-process, for tests and the offline CLI
    - PageClipboard: navigator.clipboard inside a Playwright page
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .errors import ClipboardUnavailableError


class Clipboard(ABC):
    """Write-only clipboard capability."""

    @abstractmethod
    def write_text(self, text: str) -> None:
        """
        Put ``text`` on the clipboard.

        Raises:
            ClipboardUnavailableError: if access is denied or unsupported
        """
        pass


class MemoryClipboard(Clipboard):
    """
    Clipboard kept in memory.

    Set ``available=False`` to behave like a host that denies access.
    """

    def __init__(self, available: bool = True):
        self.available = available
        self.history: List[str] = []

    def write_text(self, text: str) -> None:
        if not self.available:
            raise ClipboardUnavailableError("Clipboard access denied", text=text)
        self.history.append(text)

    def read_text(self) -> Optional[str]:
        return self.history[-1] if self.history else None


# Resolves to {ok, error} instead of rejecting so denial is data, not a JS exception
CLIPBOARD_WRITE_SCRIPT = """
async (text) => {
    if (!navigator.clipboard || !navigator.clipboard.writeText) {
        return {ok: false, error: "navigator.clipboard is not available"};
    }
    try {
        await navigator.clipboard.writeText(text);
        return {ok: true, error: null};
    } catch (e) {
        return {ok: false, error: String(e)};
    }
}
"""

CLIPBOARD_READ_SCRIPT = """
async () => {
    try {
        return await navigator.clipboard.readText();
    } catch (e) {
        return null;
    }
}
"""


class PageClipboard(Clipboard):
    """
    Clipboard of a Playwright page (sync API).

    Chromium only allows clipboard access once the permissions are granted
    on the browser context:

        clipboard = PageClipboard(page)
        clipboard.grant_permissions()
        clipboard.write_text("#FF5733")
    """

    PERMISSIONS = ["clipboard-read", "clipboard-write"]

    def __init__(self, page):
        self.page = page

    def grant_permissions(self, origin: Optional[str] = None):
        """Grant clipboard permissions on the page's browser context."""
        if origin:
            self.page.context.grant_permissions(self.PERMISSIONS, origin=origin)
        else:
            self.page.context.grant_permissions(self.PERMISSIONS)

    def write_text(self, text: str) -> None:
        result = self.page.evaluate(CLIPBOARD_WRITE_SCRIPT, text)
        if not result or not result.get("ok"):
            reason = (result or {}).get("error") or "unknown error"
            raise ClipboardUnavailableError(f"Clipboard write failed: {reason}", text=text)

    def read_text(self) -> Optional[str]:
        """Read the clipboard back; None when reading is not permitted."""
        return self.page.evaluate(CLIPBOARD_READ_SCRIPT)
