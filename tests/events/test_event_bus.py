"""Tests for EventBus — type-hierarchy dispatch and handler isolation."""

import threading
from dataclasses import dataclass

from assetpicker.events.bus import Event, EventBus
from assetpicker.events.picker_events import DialogShownEvent, PickerEvent, SelectionChangedEvent


@dataclass(kw_only=True)
class _FakeEvent(Event):
    payload: str = ""


class TestEventBus:
    def test_publish_to_exact_type(self, bus):
        received = []
        bus.subscribe(_FakeEvent, lambda e: received.append(e.payload))

        bus.publish(_FakeEvent(payload="hello"))

        assert received == ["hello"]

    def test_base_type_subscription_receives_subclasses(self, bus):
        received = []
        bus.subscribe(PickerEvent, lambda e: received.append(type(e)))

        bus.publish(SelectionChangedEvent(picked_ids=("A",)))
        bus.publish(DialogShownEvent(dialog_id="confirm"))
        bus.publish(_FakeEvent())

        assert received == [SelectionChangedEvent, DialogShownEvent]

    def test_failing_handler_does_not_block_others(self, bus):
        received = []

        def _boom(event):
            raise RuntimeError("boom")

        bus.subscribe(_FakeEvent, _boom)
        bus.subscribe(_FakeEvent, lambda e: received.append(e.payload))

        bus.publish(_FakeEvent(payload="x"))

        assert received == ["x"]

    def test_unsubscribe(self, bus):
        received = []
        sub = bus.subscribe(_FakeEvent, lambda e: received.append(e.payload))

        bus.unsubscribe(sub)
        bus.publish(_FakeEvent(payload="x"))

        assert received == []
        assert sub.active is False

    def test_cancelled_subscription_is_skipped(self, bus):
        received = []
        sub = bus.subscribe(_FakeEvent, lambda e: received.append(e.payload))

        sub.cancel()
        bus.publish(_FakeEvent(payload="x"))

        assert received == []

    def test_async_handlers_run_on_worker(self, bus):
        done = threading.Event()
        threads = []

        def _handler(event):
            threads.append(threading.current_thread().name)
            done.set()

        bus.subscribe(_FakeEvent, _handler, async_=True)
        bus.publish(_FakeEvent())

        assert done.wait(5)
        assert threads[0].startswith("assetpicker-events")

    def test_publish_async_returns_futures(self, bus):
        received = []
        bus.subscribe(_FakeEvent, lambda e: received.append(e.payload))

        futures = bus.publish_async(_FakeEvent(payload="later"))
        for future in futures:
            future.result(timeout=5)

        assert received == ["later"]
