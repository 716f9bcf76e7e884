"""Tests für Attribution-Events (mit httpx MockTransport)"""
import asyncio
import json
import pytest
import httpx

from app.config import Settings
from app.services.attribution import (
    AttributionContext,
    TRIP_RECORDED,
    init_attribution,
    set_customer_user_id,
    track_event,
)

SECRET = "x" * 32


@pytest.fixture
def captured():
    return []


@pytest.fixture
def transport(captured):
    """Antwortet mit 200 und merkt sich alle Requests"""
    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, text="ok")
    return httpx.MockTransport(handler)


@pytest.fixture
def configured_settings():
    return Settings(
        secret_key=SECRET,
        attribution_dev_key="dev-key",
        attribution_app_id="id123456",
        attribution_endpoint="https://attribution.example/inappevent/"
    )


@pytest.mark.unit
class TestInitAttribution:
    """Tests für init_attribution"""

    def test_disabled_without_keys(self, transport, captured):
        """Test: Ohne Dev-Key bleibt der Kontext uninitialisiert"""
        context = init_attribution(Settings(secret_key=SECRET), transport=transport)
        assert context.initialized is False
        assert asyncio.run(track_event(context, TRIP_RECORDED, {"af_revenue": 10})) is False
        assert captured == []

    def test_enabled_with_keys(self, configured_settings, transport):
        """Test: Dev-Key und App-ID aktivieren den Kontext"""
        context = init_attribution(configured_settings, transport=transport)
        assert context.initialized is True
        assert context.endpoint == "https://attribution.example/inappevent"

    def test_customer_user_id_only_when_initialized(self):
        """Test: Kunden-ID wird nur im aktiven Kontext gesetzt"""
        context = AttributionContext(endpoint="https://attribution.example")
        set_customer_user_id(context, "client-1")
        assert context.customer_user_id is None


@pytest.mark.unit
class TestTrackEvent:
    """Tests für track_event"""

    def test_sends_event(self, configured_settings, transport, captured):
        """Test: POST an {endpoint}/{app_id} mit Dev-Key im Header"""
        context = init_attribution(configured_settings, transport=transport)
        set_customer_user_id(context, "client-1")

        assert asyncio.run(track_event(context, TRIP_RECORDED, {"af_revenue": 350.0}, appsflyer_id="af-1")) is True

        assert len(captured) == 1
        request = captured[0]
        assert request.method == "POST"
        assert str(request.url) == "https://attribution.example/inappevent/id123456"
        assert request.headers["authentication"] == "dev-key"

        body = json.loads(request.content)
        assert body["eventName"] == TRIP_RECORDED
        assert body["eventValue"] == {"af_revenue": 350.0}
        assert body["appsflyer_id"] == "af-1"
        assert body["customer_user_id"] == "client-1"
        assert "eventTime" in body

    def test_http_error_returns_false(self, configured_settings):
        """Test: Fehlerantwort wird geloggt, nicht geworfen"""
        transport = httpx.MockTransport(lambda request: httpx.Response(500))
        context = init_attribution(configured_settings, transport=transport)
        assert asyncio.run(track_event(context, TRIP_RECORDED)) is False

    def test_network_error_returns_false(self, configured_settings):
        """Test: Verbindungsfehler wird geloggt, nicht geworfen"""
        def handler(request):
            raise httpx.ConnectError("offline", request=request)

        context = init_attribution(configured_settings, transport=httpx.MockTransport(handler))
        assert asyncio.run(track_event(context, TRIP_RECORDED)) is False
