import threading

from fastapi.testclient import TestClient

from service_tracker.api.main import create_app
from service_tracker.tracker import ServiceTracker


def test_track_then_count(client):
    r = client.post("/track/foo")
    assert r.status_code == 204
    assert r.content == b""

    r2 = client.get("/count/foo")
    assert r2.status_code == 200
    assert r2.headers["content-type"].startswith("application/json")
    assert r2.content == b'{"count":1}'
    assert r2.json() == {"count": 1}


def test_count_of_untracked_service_is_zero(client):
    r = client.get("/count/bar")
    assert r.status_code == 200
    assert r.json() == {"count": 0}


def test_three_tracks(client):
    for _ in range(3):
        assert client.post("/track/x").status_code == 204
    assert client.get("/count/x").json() == {"count": 3}


def test_wrong_method_uses_router_default(client):
    r = client.get("/track/foo")
    assert r.status_code in (404, 405)
    assert r.status_code != 204
    r2 = client.post("/count/foo")
    assert r2.status_code in (404, 405)


def test_missing_segment_is_not_routed(client, tracker):
    assert client.post("/track/").status_code == 404
    assert client.get("/count/").status_code == 404
    assert len(tracker) == 0


def test_blank_service_name_rejected(client, tracker):
    r = client.post("/track/%20%20")
    assert r.status_code == 400
    assert "blank" in r.json()["detail"]
    assert len(tracker) == 0
    assert client.get("/count/%20").status_code == 400


def test_service_name_is_decoded_from_path(client, tracker):
    assert client.post("/track/my%20service").status_code == 204
    assert tracker.get_count("my service") == 1
    assert client.get("/count/my%20service").json() == {"count": 1}


def test_api_uses_injected_tracker(client, tracker):
    tracker.increment("preloaded")
    tracker.increment("preloaded")
    assert client.get("/count/preloaded").json() == {"count": 2}
    client.post("/track/preloaded")
    assert tracker.get_count("preloaded") == 3


def test_apps_do_not_share_counts():
    a = TestClient(create_app())
    b = TestClient(create_app())
    a.post("/track/svc")
    assert a.get("/count/svc").json() == {"count": 1}
    assert b.get("/count/svc").json() == {"count": 0}


class _BrokenCountTracker(ServiceTracker):
    def get_count(self, service):
        return object()


def test_serialization_error_returns_500_with_text():
    client = TestClient(create_app(tracker=_BrokenCountTracker()))
    r = client.get("/count/foo")
    assert r.status_code == 500
    assert r.headers["content-type"].startswith("text/plain")
    assert "not JSON serializable" in r.text


def test_concurrent_requests_no_lost_updates(tracker):
    app = create_app(tracker=tracker)
    workers, per_worker = 4, 25

    def work():
        client = TestClient(app)
        for _ in range(per_worker):
            assert client.post("/track/busy").status_code == 204

    threads = [threading.Thread(target=work) for _ in range(workers)]
    for th in threads:
        th.start()
    for th in threads:
        th.join(timeout=30.0)
    assert tracker.get_count("busy") == workers * per_worker
    assert TestClient(app).get("/count/busy").json() == {"count": workers * per_worker}
