"""Tests für den Event-Hub"""
import pytest

from app.services.events import EventHub, BOOKING_CONFLICT

TRIP_FINISHED = "trip_finished"


@pytest.mark.unit
class TestEventHub:
    """Unit-Tests für EventHub"""

    def test_emit_reaches_subscribers(self):
        """Test: Alle Handler eines Events werden aufgerufen"""
        hub = EventHub()
        first, second = [], []
        hub.subscribe(BOOKING_CONFLICT, first.append)
        hub.subscribe(BOOKING_CONFLICT, second.append)

        delivered = hub.emit(BOOKING_CONFLICT, {"car_id": 1})

        assert delivered == 2
        assert first == [{"car_id": 1}]
        assert second == [{"car_id": 1}]

    def test_events_are_separated_by_name(self):
        """Test: Handler bekommen nur ihr eigenes Event"""
        hub = EventHub()
        received = []
        hub.subscribe(TRIP_FINISHED, received.append)

        assert hub.emit(BOOKING_CONFLICT, {}) == 0
        assert received == []

    def test_unsubscribe(self):
        """Test: Abgemeldete Handler werden nicht mehr aufgerufen"""
        hub = EventHub()
        received = []
        unsubscribe = hub.subscribe(BOOKING_CONFLICT, received.append)
        assert hub.handler_count(BOOKING_CONFLICT) == 1

        unsubscribe()
        hub.emit(BOOKING_CONFLICT, {"car_id": 1})

        assert received == []
        assert hub.handler_count(BOOKING_CONFLICT) == 0

    def test_unsubscribe_twice_is_harmless(self):
        """Test: Doppeltes Abmelden wirft keinen Fehler"""
        hub = EventHub()
        unsubscribe = hub.subscribe(BOOKING_CONFLICT, lambda payload: None)
        unsubscribe()
        unsubscribe()
        assert hub.handler_count(BOOKING_CONFLICT) == 0

    def test_failing_handler_does_not_stop_others(self):
        """Test: Exception in einem Handler wird geloggt, andere laufen weiter"""
        hub = EventHub()
        received = []

        def broken(payload):
            raise RuntimeError("kaputt")

        hub.subscribe(BOOKING_CONFLICT, broken)
        hub.subscribe(BOOKING_CONFLICT, received.append)

        delivered = hub.emit(BOOKING_CONFLICT, "payload")

        assert delivered == 1
        assert received == ["payload"]

    def test_handler_may_unsubscribe_itself(self):
        """Test: Abmelden während emit ist erlaubt"""
        hub = EventHub()
        calls = []

        def once(payload):
            calls.append(payload)
            unsubscribe()

        unsubscribe = hub.subscribe(TRIP_FINISHED, once)
        hub.emit(TRIP_FINISHED, 1)
        hub.emit(TRIP_FINISHED, 2)

        assert calls == [1]
