"""Reorders out-of-sequence combat events and hands them on in id order."""

from __future__ import annotations

import copy
import heapq
import itertools
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable

from arcext.structs import Agent, CombatEvent

_log = logging.getLogger(__name__)

Callback = Callable[
    [CombatEvent | None, Agent | None, Agent | None, str | None, int, int], Any
]

_FIRST_ID = 2  # the first event of a session always carries id 2
_IDLE_WAIT = 0.1


@dataclass(order=True)
class SequencedEvent:
    """A copied combat event waiting for its turn."""

    event_id: int
    event: CombatEvent | None = field(default=None, compare=False)
    source: Agent | None = field(default=None, compare=False)
    destination: Agent | None = field(default=None, compare=False)
    skillname: str | None = field(default=None, compare=False)
    revision: int = field(default=1, compare=False)


class EventSequencer:
    """Queues events by id and passes them to a callback strictly in order.

    Events with id 0 are passed on at once when nothing is queued, and
    otherwise queued behind the last numbered event.  A background thread
    delivers every queued event whose id is next in line.
    """

    def __init__(self, callback: Callback) -> None:
        self._callback = callback
        self._queue: list[tuple[int, int, SequencedEvent]] = []
        self._counter = itertools.count()
        self._cond = threading.Condition(threading.RLock())
        self._stop = threading.Event()
        self._next_id = _FIRST_ID
        self._last_id = _FIRST_ID
        self._running = False
        self._thread = threading.Thread(
            target=self._run, name="event-sequencer", daemon=True
        )
        self._thread.start()

    def process_event(
        self,
        event: CombatEvent | None,
        source: Agent | None,
        destination: Agent | None,
        skillname: str | None,
        event_id: int,
        revision: int,
    ) -> None:
        """Deliver or queue one event."""
        with self._cond:
            if event_id == 0:
                if not self._queue:
                    self._callback(event, source, destination, skillname, event_id, revision)
                    return
                queued_id = self._last_id
            else:
                self._last_id = event_id
                queued_id = event_id
            item = SequencedEvent(
                event_id=queued_id,
                event=copy.copy(event),
                source=copy.copy(source),
                destination=copy.copy(destination),
                skillname=skillname,
                revision=revision,
            )
            heapq.heappush(self._queue, (queued_id, next(self._counter), item))
            self._cond.notify_all()

    def events_pending(self) -> bool:
        """Whether events are queued or one is being delivered."""
        return bool(self._queue) or self._running

    def reset(self) -> None:
        """Drop all queued events and restart the id counters."""
        with self._cond:
            self._queue.clear()
            self._next_id = _FIRST_ID
            self._last_id = _FIRST_ID

    def close(self) -> None:
        """Stop the delivery thread."""
        self._stop.set()
        with self._cond:
            self._cond.notify_all()
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join()

    def __enter__(self) -> EventSequencer:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _run(self) -> None:
        while not self._stop.is_set():
            if self._deliver_ready():
                continue
            with self._cond:
                if self._stop.is_set():
                    return
                if not self._queue or self._queue[0][0] != self._next_id:
                    self._cond.wait(timeout=_IDLE_WAIT)

    def _deliver_ready(self) -> bool:
        """Deliver all events carrying the next id; True if any were."""
        delivered = False
        while True:
            with self._cond:
                if self._stop.is_set() or not self._queue:
                    break
                if self._queue[0][0] != self._next_id:
                    break
                _, _, item = heapq.heappop(self._queue)
                self._running = True
            try:
                self._callback(
                    item.event,
                    item.source,
                    item.destination,
                    item.skillname,
                    item.event_id,
                    item.revision,
                )
            except Exception:
                _log.exception("event callback failed for id %d", item.event_id)
            finally:
                self._running = False
            delivered = True
        if delivered:
            with self._cond:
                self._next_id += 1
        return delivered