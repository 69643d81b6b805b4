"""Single-thread request/reply worker over a pair of queues.

The caller puts one request on the inbox and blocks on the outbox for
the reply, so requests and replies stay paired and ordered. A sentinel
on the inbox stops the thread.
"""

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Callable
from types import TracebackType
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

_In = TypeVar("_In")
_Out = TypeVar("_Out")

_STOP = object()


class _Failure:
    """Wraps an exception raised by the handler so it crosses the queue."""

    __slots__ = ("exc",)

    def __init__(self, exc: BaseException) -> None:
        self.exc = exc


class QueueWorker(Generic[_In, _Out]):
    """Apply *handler* to each request on a dedicated thread.

    Usage::

        with QueueWorker(fizzbuzz, timeout=5.0) as worker:
            worker.ask(15)  # "FizzBuzz"
    """

    def __init__(
        self,
        handler: Callable[[_In], _Out],
        *,
        timeout: float | None = None,
        name: str = "queue-worker",
    ) -> None:
        self._handler = handler
        self._timeout = timeout
        self._inbox: queue.Queue[object] = queue.Queue()
        self._outbox: queue.Queue[object] = queue.Queue()
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)
        self._lock = threading.Lock()
        self._closed = False
        self._thread.start()

    def _run(self) -> None:
        while True:
            item = self._inbox.get()
            if item is _STOP:
                logger.debug("Worker %s stopping", self._thread.name)
                return
            try:
                reply: object = self._handler(item)  # type: ignore[arg-type]
            except Exception as exc:
                reply = _Failure(exc)
            self._outbox.put(reply)

    @property
    def alive(self) -> bool:
        return self._thread.is_alive()

    def ask(self, request: _In) -> _Out:
        """Send *request* and block until its reply arrives.

        Raises:
            RuntimeError: The worker has been closed.
            TimeoutError: No reply within the configured timeout. The worker
                is closed afterwards, so later calls raise RuntimeError.
        """
        with self._lock:
            if self._closed:
                msg = "worker is closed"
                raise RuntimeError(msg)
            self._inbox.put(request)
            try:
                reply = self._outbox.get(timeout=self._timeout)
            except queue.Empty as exc:
                # A late reply must never answer a later request.
                self._closed = True
                self._inbox.put(_STOP)
                msg = f"no reply for {request!r} within {self._timeout}s"
                raise TimeoutError(msg) from exc
        if isinstance(reply, _Failure):
            raise reply.exc
        return reply  # type: ignore[return-value]

    def close(self) -> None:
        """Stop the worker thread. Safe to call more than once."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._inbox.put(_STOP)
        self._thread.join(self._timeout)

    def __enter__(self) -> QueueWorker[_In, _Out]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
