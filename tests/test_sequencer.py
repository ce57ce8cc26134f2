import threading
import time

import pytest

from arcext.sequencer import EventSequencer, SequencedEvent
from arcext.structs import Agent, CombatEvent


def wait_until(predicate, timeout=3.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


class Recorder:
    def __init__(self):
        self.calls = []
        self.lock = threading.Lock()

    def __call__(self, event, source, destination, skillname, event_id, revision):
        with self.lock:
            self.calls.append((event, source, destination, skillname, event_id, revision))
        return 0

    def ids(self):
        with self.lock:
            return [call[4] for call in self.calls]

    def values(self):
        with self.lock:
            return [call[0].value if call[0] else None for call in self.calls]


@pytest.fixture
def setup():
    recorder = Recorder()
    sequencer = EventSequencer(recorder)
    yield sequencer, recorder
    sequencer.close()


def test_zero_id_with_empty_queue_is_immediate(setup):
    sequencer, recorder = setup
    sequencer.process_event(None, Agent(name="a"), None, None, 0, 1)
    assert recorder.ids() == [0]
    assert recorder.calls[0][1].name == "a"


def test_out_of_order_events_are_sorted(setup):
    sequencer, recorder = setup
    for event_id in (4, 3, 2):
        sequencer.process_event(CombatEvent(value=event_id), None, None, None, event_id, 1)
    assert wait_until(lambda: len(recorder.ids()) == 3)
    assert recorder.ids() == [2, 3, 4]
    assert wait_until(lambda: not sequencer.events_pending())


def test_equal_ids_keep_arrival_order(setup):
    sequencer, recorder = setup
    sequencer.process_event(CombatEvent(value=10), None, None, None, 3, 1)
    sequencer.process_event(CombatEvent(value=20), None, None, None, 3, 1)
    sequencer.process_event(CombatEvent(value=30), None, None, None, 2, 1)
    assert wait_until(lambda: len(recorder.ids()) == 3)
    assert recorder.values() == [30, 10, 20]


def test_zero_id_queued_behind_last_id(setup):
    sequencer, recorder = setup
    sequencer.process_event(CombatEvent(value=1), None, None, None, 3, 1)
    sequencer.process_event(CombatEvent(value=2), None, None, None, 0, 1)
    assert recorder.ids() == []
    sequencer.process_event(CombatEvent(value=3), None, None, None, 2, 1)
    assert wait_until(lambda: len(recorder.ids()) == 3)
    assert recorder.values() == [3, 1, 2]
    assert recorder.ids() == [2, 3, 3]


def test_gap_keeps_events_pending_until_reset(setup):
    sequencer, recorder = setup
    sequencer.process_event(CombatEvent(), None, None, None, 5, 1)
    time.sleep(0.2)
    assert recorder.ids() == []
    assert sequencer.events_pending() is True
    sequencer.reset()
    assert sequencer.events_pending() is False


def test_event_data_is_copied(setup):
    sequencer, recorder = setup
    event = CombatEvent(value=7)
    source = Agent(name="Source", id=11)
    sequencer.process_event(event, source, None, "Skill", 3, 2)
    event.value = 99
    source.name = "changed"
    sequencer.process_event(None, None, None, None, 2, 1)
    assert wait_until(lambda: len(recorder.ids()) == 2)
    delivered = recorder.calls[1]
    assert delivered[0].value == 7
    assert delivered[1].name == "Source"
    assert delivered[3] == "Skill"
    assert delivered[5] == 2


def test_reset_restarts_counter(setup):
    sequencer, recorder = setup
    sequencer.process_event(CombatEvent(), None, None, None, 2, 1)
    assert wait_until(lambda: recorder.ids() == [2])
    sequencer.reset()
    assert sequencer.events_pending() is False
    sequencer.process_event(CombatEvent(), None, None, None, 2, 1)
    assert wait_until(lambda: recorder.ids() == [2, 2])
    wait_until(lambda: not sequencer.events_pending())
    assert sequencer.events_pending() is False


def test_context_manager_closes():
    recorder = Recorder()
    with EventSequencer(recorder) as sequencer:
        sequencer.process_event(None, None, None, None, 0, 1)
    assert recorder.ids() == [0]
    assert sequencer._thread.is_alive() is False


def test_sequenced_event_orders_by_id():
    low = SequencedEvent(event_id=2, skillname="b")
    high = SequencedEvent(event_id=5, skillname="a")
    assert sorted([high, low]) == [low, high]
    assert SequencedEvent(event_id=3, skillname="x") == SequencedEvent(event_id=3, skillname="y")