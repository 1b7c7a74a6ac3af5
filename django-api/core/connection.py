"""Process-wide storage handle cache.

Invariants:
    - At most one live handle is cached per ConnectionCache
    - Concurrent acquire() calls during establishment share one in-flight attempt
    - A failed attempt is forgotten so the next acquire() retries
"""

import logging
import threading
from concurrent.futures import Future
from typing import Callable, Generic, TypeVar

from django.db import DEFAULT_DB_ALIAS, connections
from django.db.backends.base.base import BaseDatabaseWrapper

from core.errors import StorageFailureError

logger = logging.getLogger(__name__)

H = TypeVar("H")


class ConnectionCache(Generic[H]):
    """Lazily established, memoized storage handle with explicit lifecycle."""

    def __init__(
        self,
        connect: Callable[[], H],
        disconnect: Callable[[H], None],
        is_alive: Callable[[H], bool] | None = None,
    ) -> None:
        self._connect = connect
        self._disconnect = disconnect
        self._is_alive = is_alive or (lambda handle: True)
        self._lock = threading.Lock()
        self._handle: H | None = None
        self._pending: Future | None = None

    def acquire(self) -> H:
        """Return the cached live handle, establishing one if needed."""
        with self._lock:
            if self._handle is not None and self._is_alive(self._handle):
                logger.debug("Using existing storage handle")
                return self._handle
            stale, self._handle = self._handle, None
            pending = self._pending
            owner = pending is None
            if owner:
                pending = self._pending = Future()

        if stale is not None:
            logger.warning("Cached storage handle is no longer usable, discarding it")
            try:
                self._disconnect(stale)
            except Exception as exc:
                logger.warning("Stale storage handle teardown failed: %s", exc)

        if not owner:
            try:
                return pending.result()
            except Exception as exc:
                raise StorageFailureError("acquire") from exc

        logger.info("Establishing storage handle")
        try:
            handle = self._connect()
        except Exception as exc:
            with self._lock:
                self._pending = None
            pending.set_exception(exc)
            logger.error("Storage handle could not be established: %s", exc)
            raise StorageFailureError("acquire") from exc

        with self._lock:
            self._handle = handle
            self._pending = None
        pending.set_result(handle)
        logger.info("Storage handle established")
        return handle

    def release(self) -> None:
        """Tear down the cached handle, if any."""
        with self._lock:
            handle, self._handle = self._handle, None
        if handle is None:
            return
        logger.info("Releasing storage handle")
        self._disconnect(handle)

    def is_connected(self) -> bool:
        with self._lock:
            return self._handle is not None and self._is_alive(self._handle)


def _connect_default() -> BaseDatabaseWrapper:
    connection = connections[DEFAULT_DB_ALIAS]
    connection.ensure_connection()
    connection.inc_thread_sharing()
    return connection


def _disconnect_default(connection: BaseDatabaseWrapper) -> None:
    connection.dec_thread_sharing()
    connection.close()


def _is_usable(connection: BaseDatabaseWrapper) -> bool:
    return connection.connection is not None and connection.is_usable()


storage_handle: ConnectionCache[BaseDatabaseWrapper] = ConnectionCache(
    connect=_connect_default,
    disconnect=_disconnect_default,
    is_alive=_is_usable,
)
