"""Streaming dictation into an edit session.

A speech-to-text engine produces a stream of transcript events: partial
results while the user is still speaking, then one final result per
utterance. Only final results change the document. They are queued by the
capture thread and applied later, in arrival order, on the thread that
owns the edit session.
"""

import logging
import queue
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterable, Optional

from .voice import Action, VoiceCommandInterpreter

if TYPE_CHECKING:
    from .editor import EditSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TranscriptEvent:
    text: str
    is_final: bool = False


PartialCallback = Callable[[str, Action], None]


class DictationSession:
    """Cancellable consumer of transcript events."""

    def __init__(self, on_partial: Optional[PartialCallback] = None):
        self.on_partial = on_partial
        self._finals: "queue.Queue[str]" = queue.Queue()
        self._cancelled = threading.Event()
        self._thread: Optional[threading.Thread] = None
        # Preview-only interpreter; the session's own interpreter records finals
        self._preview = VoiceCommandInterpreter()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def partial_text(self) -> Optional[str]:
        return self._preview.partial_text

    def feed(self, event: TranscriptEvent) -> bool:
        """Accept one transcript event. Safe to call from any thread.

        Returns:
            True if a final utterance was queued.
        """
        if self.cancelled:
            return False
        if not event.is_final:
            action = self._preview.preview(event.text)
            if self.on_partial:
                self.on_partial(event.text, action)
            return False
        self._preview.partial_text = None
        self._finals.put(event.text)
        logger.debug("Queued final utterance %r", event.text)
        return True

    def listen(self, source: Iterable[TranscriptEvent]) -> threading.Thread:
        """Consume ``source`` on a background thread until exhausted or cancelled."""
        def run():
            for event in source:
                if self.cancelled:
                    break
                self.feed(event)
            logger.debug("Dictation source finished")

        self._thread = threading.Thread(target=run, name="markpad-dictation", daemon=True)
        self._thread.start()
        return self._thread

    def cancel(self):
        """Stop listening. Partial results are dropped; later events are ignored."""
        self._cancelled.set()
        self._preview.partial_text = None

    def join(self, timeout: Optional[float] = None):
        if self._thread is not None:
            self._thread.join(timeout)

    def pending(self) -> int:
        return self._finals.qsize()

    def apply_pending(self, session: "EditSession") -> int:
        """Apply queued final utterances to ``session`` in order.

        Must be called on the thread that owns ``session``.

        Returns:
            Number of utterances applied.
        """
        applied = 0
        while True:
            try:
                utterance = self._finals.get_nowait()
            except queue.Empty:
                break
            session.run_voice(utterance)
            applied += 1
        return applied
