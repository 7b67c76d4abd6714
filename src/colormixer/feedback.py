"""
Copy feedback: the transient "Copied: ..." toast.

CopyFeedback is a two-state machine (hidden / visible(text)). A successful
copy shows it and schedules an automatic hide; a second copy before the hide
fires cancels the pending hide and starts a fresh window.

Scheduling is pluggable. Anything with ``call_later(delay, callback)``
returning a handle with ``cancel()`` works:

    - ThreadScheduler (default): daemon threading.Timer per call
    - an asyncio event loop: ``loop.call_later`` already fits
    - tests: a manual clock (see tests/conftest.py)
"""

import logging
import threading
from enum import Enum
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_FEEDBACK_SECONDS = 2.0


class FeedbackState(Enum):
    HIDDEN = "hidden"
    VISIBLE = "visible"


class ThreadScheduler:
    """Runs callbacks on daemon timer threads."""

    def call_later(self, delay: float, callback: Callable[[], Any]) -> threading.Timer:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer


class CopyFeedback:
    """
    Transient confirmation that a value was copied.

    Usage:
        feedback = CopyFeedback()
        feedback.show("#FF5733")
        feedback.visible    # True
        feedback.message    # "Copied: #FF5733"
        # ... two seconds later
        feedback.visible    # False
    """

    def __init__(self, duration: float = DEFAULT_FEEDBACK_SECONDS, scheduler=None):
        if duration <= 0:
            raise ValueError(f"Feedback duration must be positive, got {duration}")
        self.duration = duration
        self.scheduler = scheduler or ThreadScheduler()
        self._lock = threading.RLock()
        self._text: Optional[str] = None
        self._handle = None
        self._generation = 0

    @property
    def state(self) -> FeedbackState:
        return FeedbackState.VISIBLE if self._text is not None else FeedbackState.HIDDEN

    @property
    def visible(self) -> bool:
        return self._text is not None

    @property
    def text(self) -> Optional[str]:
        """The copied text while visible, else None."""
        return self._text

    @property
    def message(self) -> Optional[str]:
        if self._text is None:
            return None
        return f"Copied: {self._text}"

    def show(self, text: str):
        """Show feedback for ``text``, superseding any pending hide."""
        with self._lock:
            self._cancel_pending()
            self._generation += 1
            generation = self._generation
            self._text = text
            self._handle = self.scheduler.call_later(
                self.duration, lambda: self._expire(generation)
            )
        logger.debug("Copy feedback shown for %r (%.1fs)", text, self.duration)

    def hide(self):
        """Hide immediately and drop any pending timer."""
        with self._lock:
            self._cancel_pending()
            self._generation += 1
            self._text = None

    def _expire(self, generation: int):
        with self._lock:
            # A newer show() owns the feedback now
            if generation != self._generation:
                return
            self._handle = None
            self._text = None
        logger.debug("Copy feedback expired")

    def _cancel_pending(self):
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def __repr__(self) -> str:
        if self._text is None:
            return "CopyFeedback(hidden)"
        return f"CopyFeedback(visible({self._text!r}))"
