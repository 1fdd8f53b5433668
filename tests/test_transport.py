import pytest
import requests

from placesquery.core.errors import TransportError
from placesquery.infrastructure.providers.places.transport import RequestsGetter


class DummyResponse:
    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text


class DummySession:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []
        self.closed = False

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.exc:
            raise self.exc
        return self.response

    def close(self):
        self.closed = True


def test_returns_body_text():
    session = DummySession(DummyResponse(200, '{"status": "OK"}'))
    g = RequestsGetter(session)
    assert g.get("http://x/details/json?key=K", timeout=7) == '{"status": "OK"}'
    assert session.calls == [("http://x/details/json?key=K", 7)]


def test_http_error_status():
    g = RequestsGetter(DummySession(DummyResponse(403, "denied")))
    with pytest.raises(TransportError) as exc:
        g.get("http://x/details/json?key=SECRET&sensor=false")
    assert exc.value.status_code == 403
    assert "SECRET" not in exc.value.url


def test_network_error_wrapped():
    cause = requests.ConnectionError("dns")
    g = RequestsGetter(DummySession(exc=cause))
    with pytest.raises(TransportError) as exc:
        g.get("http://x/?key=K")
    assert exc.value.cause is cause
    assert exc.value.status_code is None


def test_network_error_does_not_leak_key(caplog):
    url = "http://127.0.0.1:1/place/textsearch/json?key=SECRETKEY&sensor=false"
    cause = requests.ConnectionError(
        "HTTPConnectionPool(host='127.0.0.1', port=1): Max retries exceeded with url: "
        "/place/textsearch/json?key=SECRETKEY&sensor=false (Caused by NewConnectionError)"
    )
    g = RequestsGetter(DummySession(exc=cause))
    with caplog.at_level("WARNING"), pytest.raises(TransportError) as exc:
        g.get(url, timeout=2)
    assert "SECRETKEY" not in str(exc.value)
    assert "SECRETKEY" not in exc.value.url
    assert "ConnectionError" in str(exc.value)
    assert "key=***" in str(exc.value)
    assert caplog.records
    assert all("SECRETKEY" not in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize("status", [101, 300, 304])
def test_non_2xx_status_is_transport_error(status):
    g = RequestsGetter(DummySession(DummyResponse(status, "moved")))
    with pytest.raises(TransportError) as exc:
        g.get("http://x/?key=K")
    assert exc.value.status_code == status


def test_any_2xx_returns_body():
    g = RequestsGetter(DummySession(DummyResponse(204, "")))
    assert g.get("http://x/?key=K") == ""


def test_injected_session_left_open():
    session = DummySession(DummyResponse())
    RequestsGetter(session).close()
    assert session.closed is False


def test_own_session_closed(monkeypatch):
    g = RequestsGetter()
    closed = []
    monkeypatch.setattr(g.session, "close", lambda: closed.append(True))
    g.close()
    assert closed == [True]
