"""Tests for the storage handle cache and the health endpoints.

Run with: pytest django-api/tests/test_connection.py -v
"""

import threading

import pytest

from core.connection import ConnectionCache
from core.errors import StorageFailureError


class Handle:
    def __init__(self) -> None:
        self.alive = True
        self.closed = False


class TestConnectionCache:
    """Tests for ConnectionCache."""

    def test_acquire_memoizes_handle(self):
        calls = []
        cache = ConnectionCache(connect=lambda: calls.append(1) or Handle(), disconnect=lambda h: None)
        assert cache.acquire() is cache.acquire()
        assert len(calls) == 1
        assert cache.is_connected()

    def test_concurrent_acquire_shares_one_attempt(self):
        started = threading.Event()
        proceed = threading.Event()
        calls = []

        def connect():
            calls.append(1)
            started.set()
            proceed.wait(timeout=5)
            return Handle()

        cache = ConnectionCache(connect=connect, disconnect=lambda h: None)
        results = []
        threads = [threading.Thread(target=lambda: results.append(cache.acquire())) for _ in range(5)]
        threads[0].start()
        assert started.wait(timeout=5)
        for thread in threads[1:]:
            thread.start()
        proceed.set()
        for thread in threads:
            thread.join(timeout=5)

        assert len(calls) == 1
        assert len(results) == 5
        assert all(handle is results[0] for handle in results)

    def test_failed_attempt_is_retried(self):
        attempts = []

        def connect():
            attempts.append(1)
            if len(attempts) == 1:
                raise OSError("connection refused")
            return Handle()

        cache = ConnectionCache(connect=connect, disconnect=lambda h: None)
        with pytest.raises(StorageFailureError):
            cache.acquire()
        assert not cache.is_connected()
        assert isinstance(cache.acquire(), Handle)
        assert len(attempts) == 2

    def test_release_tears_down_and_reconnects(self):
        cache = ConnectionCache(connect=Handle, disconnect=lambda h: setattr(h, "closed", True))
        first = cache.acquire()
        cache.release()
        assert first.closed
        assert not cache.is_connected()
        assert cache.acquire() is not first

    def test_release_without_handle_is_noop(self):
        disconnected = []
        cache = ConnectionCache(connect=Handle, disconnect=disconnected.append)
        cache.release()
        assert disconnected == []

    def test_dead_handle_is_replaced(self):
        cache = ConnectionCache(connect=Handle, disconnect=lambda h: None, is_alive=lambda h: h.alive)
        first = cache.acquire()
        first.alive = False
        assert cache.acquire() is not first

    def test_dead_handle_is_disconnected(self):
        disconnected = []
        cache = ConnectionCache(connect=Handle, disconnect=disconnected.append, is_alive=lambda h: h.alive)
        first = cache.acquire()
        first.alive = False
        second = cache.acquire()
        assert disconnected == [first]
        assert second is not first

    def test_failed_teardown_of_dead_handle_still_reconnects(self):
        def disconnect(handle):
            raise OSError("already gone")

        cache = ConnectionCache(connect=Handle, disconnect=disconnect, is_alive=lambda h: h.alive)
        first = cache.acquire()
        first.alive = False
        assert cache.acquire() is not first
        assert cache.is_connected()


class TestHealthEndpoints:
    """Tests for GET /api/health and /api/health/ready"""

    def test_liveness(self, api_client):
        response = api_client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    @pytest.mark.django_db
    def test_readiness_with_database(self, api_client):
        response = api_client.get("/api/health/ready")
        assert response.status_code == 200
        assert response.json()["status"] == "ready"

    def test_readiness_without_storage(self, api_client, monkeypatch):
        def refuse():
            raise OSError("connection refused")

        monkeypatch.setattr(
            "core.handlers.health.storage_handle",
            ConnectionCache(connect=refuse, disconnect=lambda h: None),
        )
        response = api_client.get("/api/health/ready")
        assert response.status_code == 503
        assert response.json()["reason"] == "storage_unavailable"
