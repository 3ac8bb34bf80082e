from lostfound.matching import InMemoryItemStore, InMemoryMatchStore, MatchingEngine
from lostfound.modules.notifications import bus
from lostfound.modules.notifications.notifier import BusNotifier


def test_bus_notifier_publishes_to_counterpart_owner(make_item):
    found = make_item(id="B", type="found", owner_id=42)
    lost = make_item(id="A", type="lost", owner_id=41)
    items = InMemoryItemStore([found, lost])
    sent = []
    notifier = BusNotifier(items, publish=lambda user, event: sent.append((user, event)) or 1)

    created = MatchingEngine(items, InMemoryMatchStore(), notifier).on_item_created(lost)

    assert len(created) == 1
    assert len(sent) == 1
    user, event = sent[0]
    assert user == 42
    assert event["type"] == "new_match"
    assert event["match"]["id"] == created[0].id
    assert event["targetItem"]["id"] == "B"


def test_bus_delivers_to_live_subscribers_only():
    q = bus.subscribe("9")
    try:
        assert bus.subscriber_count(9) == 1
        assert bus.publish(9, {"type": "ping"}) == 1
        assert q.get_nowait() == {"type": "ping"}
    finally:
        bus.unsubscribe(9, q)
    assert bus.subscriber_count(9) == 0
    # nobody listening: dropped silently
    assert bus.publish(9, {"type": "ping"}) == 0


def test_full_queue_drops_events():
    q = bus.subscribe(11, maxsize=1)
    try:
        assert bus.publish(11, {"n": 1}) == 1
        assert bus.publish(11, {"n": 2}) == 0
    finally:
        bus.unsubscribe(11, q)


def test_failed_delivery_does_not_block_other_recipients(make_item):
    lost = make_item(id="A", type="lost", owner_id=1)
    first = make_item(id="F10", type="found", owner_id=10)
    second = make_item(id="F20", type="found", owner_id=20)
    items = InMemoryItemStore([first, second, lost])
    sent = []

    def publish(user, event):
        if user == 10:
            raise RuntimeError("session gone")
        sent.append((user, event["targetItem"]["id"]))
        return 1

    created = MatchingEngine(items, InMemoryMatchStore(), BusNotifier(items, publish=publish)).on_item_created(lost)

    assert len(created) == 2
    assert sent == [(20, "F20")]
