from ramen_rush.events.bus import EventBus


def test_event_bus_emit_subscribe():
    bus = EventBus()
    received = {}

    def handler(sender, **kwargs):
        received.update(kwargs)

    bus.subscribe("test", handler)
    bus.emit("test", value=42, msg="hello")

    assert received["value"] == 42
    assert received["msg"] == "hello"


def test_event_bus_sender_is_bus():
    bus = EventBus()
    senders = []
    bus.subscribe("ping", lambda sender, **kwargs: senders.append(sender))
    bus.emit("ping")
    assert senders == [bus]


def test_emit_without_subscribers_is_noop():
    bus = EventBus()
    bus.emit("nobody_listens", value=1)


def test_unsubscribe_stops_delivery():
    bus = EventBus()
    calls = []

    def handler(sender, **kwargs):
        calls.append(kwargs)

    bus.subscribe("tick", handler)
    bus.emit("tick", n=1)
    bus.unsubscribe("tick", handler)
    bus.emit("tick", n=2)
    bus.unsubscribe("never_subscribed", handler)

    assert calls == [{"n": 1}]
