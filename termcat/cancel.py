"""Cancellation signalling from the UI to a running producer."""

from __future__ import annotations

import queue
import weakref


class _Channel:
    def __init__(self) -> None:
        self.signals: queue.SimpleQueue[None] = queue.SimpleQueue()
        self.senders: weakref.WeakSet[Canceller] = weakref.WeakSet()


class Canceller:
    """UI-side handle; copy it freely with :func:`copy.copy`."""

    def __init__(self, channel: _Channel) -> None:
        self._channel = channel
        channel.senders.add(self)

    def __copy__(self) -> Canceller:
        return Canceller(self._channel)

    def signal(self) -> None:
        """Send one cancel signal. Never fails, even if nobody listens."""
        self._channel.signals.put(None)


class CancelObserver:
    """Producer-side view of the cancel channel."""

    def __init__(self, channel: _Channel) -> None:
        self._channel = channel

    def is_cancelled(self) -> bool:
        """Consume a pending signal, or report that every canceller is gone."""
        try:
            self._channel.signals.get_nowait()
        except queue.Empty:
            return len(self._channel.senders) == 0
        return True


def cancel_channel() -> tuple[Canceller, CancelObserver]:
    """Create a connected canceller and observer."""
    channel = _Channel()
    return Canceller(channel), CancelObserver(channel)