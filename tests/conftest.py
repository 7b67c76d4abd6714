"""
Pytest configuration and shared fixtures for colormixer tests.

Provides a manual clock for the copy-feedback timer, in-memory clipboards,
and real-browser fixtures for the page-level tests.
"""

import functools
import os
import threading
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from typing import Generator

import pytest

from colormixer import ColorState, CopyFeedback, MemoryClipboard, MixerConfig, SessionLog


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow (real browser)")
    config.addinivalue_line("markers", "ai_e2e: marks tests as requiring AI API keys")


class ManualHandle:
    def __init__(self, due: float, callback):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class ManualScheduler:
    """Scheduler driven by advance() instead of wall-clock time."""

    def __init__(self):
        self.now = 0.0
        self.handles = []

    def call_later(self, delay, callback):
        handle = ManualHandle(self.now + delay, callback)
        self.handles.append(handle)
        return handle

    def advance(self, seconds: float):
        target = self.now + seconds
        while True:
            due = [h for h in self.handles if not h.cancelled and h.due <= target]
            if not due:
                break
            handle = min(due, key=lambda h: h.due)
            self.handles.remove(handle)
            self.now = handle.due
            handle.callback()
        self.now = target

    @property
    def pending(self):
        return [h for h in self.handles if not h.cancelled]


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def clipboard() -> MemoryClipboard:
    return MemoryClipboard()


@pytest.fixture
def log() -> SessionLog:
    return SessionLog()


@pytest.fixture
def state(scheduler, clipboard, log) -> ColorState:
    """Fresh ColorState on a manual clock."""
    return ColorState(
        config=MixerConfig(),
        clipboard=clipboard,
        feedback=CopyFeedback(scheduler=scheduler),
        log=log,
    )


# Minimal rendition of the mixer UI with the same data-testid contract
MIXER_HTML = """
<!doctype html>
<html>
<body>
  <h1>Color Mixer</h1>
  <p>Mix and match colors with RGB sliders</p>
  <div data-testid="color-preview"><div id="preview" aria-label="Color preview"></div></div>
  <div data-testid="rgb-controls">
    <label data-testid="label-r" for="r">Red</label>
    <input data-testid="slider-r" id="r" type="range" min="0" max="255" step="1" value="255">
    <span data-testid="value-r"></span>
    <label data-testid="label-g" for="g">Green</label>
    <input data-testid="slider-g" id="g" type="range" min="0" max="255" step="1" value="87">
    <span data-testid="value-g"></span>
    <label data-testid="label-b" for="b">Blue</label>
    <input data-testid="slider-b" id="b" type="range" min="0" max="255" step="1" value="51">
    <span data-testid="value-b"></span>
  </div>
  <div data-testid="color-values">
    <span data-testid="hex-value" class="cursor-pointer"></span>
    <span data-testid="rgb-value" class="cursor-pointer"></span>
  </div>
  <div data-testid="preset-grid" class="grid">
    <button data-testid="preset-red" data-rgb="255,0,0">Red</button>
    <button data-testid="preset-green" data-rgb="0,255,0">Green</button>
    <button data-testid="preset-blue" data-rgb="0,0,255">Blue</button>
    <button data-testid="preset-yellow" data-rgb="255,255,0">Yellow</button>
    <button data-testid="preset-black" data-rgb="0,0,0">Black</button>
    <button data-testid="preset-white" data-rgb="255,255,255">White</button>
  </div>
  <div id="toast" role="alert" style="display:none"></div>
  <script>
    const ids = ["r", "g", "b"];
    const hex = () => "#" + ids.map(id =>
      Number(document.getElementById(id).value).toString(16).padStart(2, "0")).join("").toUpperCase();
    const rgb = () => "rgb(" + ids.map(id => document.getElementById(id).value).join(", ") + ")";
    function render() {
      ids.forEach(id => {
        document.querySelector(`[data-testid="value-${id}"]`).textContent = document.getElementById(id).value;
      });
      document.querySelector('[data-testid="hex-value"]').textContent = "HEX: " + hex();
      document.querySelector('[data-testid="rgb-value"]').textContent = "RGB: " + rgb();
      document.getElementById("preview").style.backgroundColor = rgb();
    }
    let toastTimer = null;
    function copy(text) {
      navigator.clipboard.writeText(text).then(() => {
        const toast = document.getElementById("toast");
        toast.textContent = "Copied: " + text;
        toast.style.display = "block";
        clearTimeout(toastTimer);
        toastTimer = setTimeout(() => { toast.style.display = "none"; }, 2000);
      }).catch(() => {});
    }
    ids.forEach(id => document.getElementById(id).addEventListener("input", render));
    document.querySelectorAll("[data-rgb]").forEach(btn => btn.addEventListener("click", () => {
      btn.dataset.rgb.split(",").forEach((v, i) => { document.getElementById(ids[i]).value = v; });
      render();
    }));
    document.querySelector('[data-testid="hex-value"]').addEventListener("click", () => copy(hex()));
    document.querySelector('[data-testid="rgb-value"]').addEventListener("click", () => copy(rgb()));
    render();
  </script>
</body>
</html>
"""


@pytest.fixture(scope="session")
def playwright_browser():
    """Session-scoped browser for faster tests; skips when none is installed."""
    from playwright.sync_api import sync_playwright

    with sync_playwright() as p:
        try:
            browser = p.chromium.launch(headless=True)
        except Exception as e:
            pytest.skip(f"Chromium not available: {e}")
        yield browser
        browser.close()


@pytest.fixture
def browser_page(playwright_browser) -> Generator:
    """Page fixture that creates a fresh page for each test."""
    page = playwright_browser.new_page()
    yield page
    page.close()


@pytest.fixture
def mixer_page(browser_page):
    """A page showing the mixer UI at its initial color."""
    browser_page.set_content(MIXER_HTML)
    return browser_page


# Utility functions for tests
def has_api_key() -> bool:
    """Check if any AI API key is available."""
    return bool(os.environ.get("GEMINI_API_KEY") or os.environ.get("OPENAI_API_KEY"))


def get_api_key_and_reader():
    """Get available API key and reader type."""
    if os.environ.get("GEMINI_API_KEY"):
        return os.environ.get("GEMINI_API_KEY"), "gemini"
    elif os.environ.get("OPENAI_API_KEY"):
        return os.environ.get("OPENAI_API_KEY"), "openai"
    return None, None


class QuietHandler(SimpleHTTPRequestHandler):
    def log_message(self, format, *args):
        pass


@pytest.fixture(scope="session")
def mixer_url(tmp_path_factory) -> Generator[str, None, None]:
    """
    Serve the mixer UI over http://127.0.0.1.

    Localhost is a secure context, so navigator.clipboard works there,
    unlike on a set_content page.
    """
    root = tmp_path_factory.mktemp("mixer_app")
    (root / "index.html").write_text(MIXER_HTML)

    handler = functools.partial(QuietHandler, directory=str(root))
    server = ThreadingHTTPServer(("127.0.0.1", 0), handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}/index.html"
    server.shutdown()
    server.server_close()


def run_in_thread(fn, *args):
    """
    Run fn on a fresh thread and return (result, exception).

    The sync Playwright API allows one instance per thread, and the session
    browser fixture already holds the main thread's.
    """
    outcome = {"result": None, "error": None}

    def target():
        try:
            outcome["result"] = fn(*args)
        except BaseException as e:
            outcome["error"] = e

    thread = threading.Thread(target=target)
    thread.start()
    thread.join()
    return outcome["result"], outcome["error"]


@pytest.fixture(scope="session")
def chromium_available():
    """Skip when Chromium cannot be launched."""
    from playwright.sync_api import sync_playwright

    def launch():
        with sync_playwright() as p:
            p.chromium.launch(headless=True).close()

    _, error = run_in_thread(launch)
    if error is not None:
        pytest.skip(f"Chromium not available: {error}")
