"""BackgroundDispatcher – fire-and-forget execution of secondary deliveries.

Every submitted coroutine runs independently: inside a running event loop it
becomes a task on that loop, otherwise it is handed to a lazily started
daemon loop thread. A failure is logged once and never reaches the caller or
the other deliveries.
"""
from __future__ import annotations

import asyncio
import concurrent.futures
import logging
import threading
from typing import Any, Coroutine

logger = logging.getLogger(__name__)


class BackgroundDispatcher:
    """Runs background operations without blocking the submitting caller.

    Typical usage::

        dispatcher = BackgroundDispatcher()
        dispatcher.submit(notifier.send(level, message, context))

        # Before shutting down (or at the end of a Lambda invocation):
        await dispatcher.drain()
    """

    def __init__(self, thread_name: str = "contextlog-background") -> None:
        self._thread_name = thread_name
        self._tasks: set[asyncio.Task[None]] = set()
        self._futures: set[concurrent.futures.Future[None]] = set()
        self._lock = threading.Lock()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None

    @property
    def pending(self) -> int:
        with self._lock:
            return len(self._tasks) + len(self._futures)

    def submit(self, *operations: Coroutine[Any, Any, Any]) -> None:
        try:
            running: asyncio.AbstractEventLoop | None = asyncio.get_running_loop()
        except RuntimeError:
            running = None

        for operation in operations:
            guarded = self._guard(operation)
            if running is not None:
                task = running.create_task(guarded)
                with self._lock:
                    self._tasks.add(task)
                task.add_done_callback(self._discard_task)
            else:
                future = asyncio.run_coroutine_threadsafe(guarded, self._ensure_loop())
                with self._lock:
                    self._futures.add(future)
                future.add_done_callback(self._discard_future)

    async def drain(self, timeout: float | None = None) -> None:
        """Wait for pending operations submitted on this loop or the loop thread."""
        loop = asyncio.get_running_loop()
        current = asyncio.current_task()
        with self._lock:
            tasks = [t for t in self._tasks if t.get_loop() is loop and t is not current]
            futures = list(self._futures)
        waiters: list[asyncio.Future[Any]] = [*tasks, *(asyncio.wrap_future(f) for f in futures)]
        if waiters:
            await asyncio.wait(waiters, timeout=timeout)

    def wait(self, timeout: float | None = None) -> None:
        """Block until operations submitted from synchronous code complete."""
        with self._lock:
            futures = list(self._futures)
        if futures:
            concurrent.futures.wait(futures, timeout=timeout)

    def close(self, timeout: float | None = 5.0) -> None:
        """Stop the loop thread, if one was started."""
        with self._lock:
            loop, thread = self._loop, self._thread
            self._loop = self._thread = None
        if loop is None:
            return
        loop.call_soon_threadsafe(loop.stop)
        if thread is not None:
            thread.join(timeout)
        if not loop.is_running():
            loop.close()

    async def _guard(self, operation: Coroutine[Any, Any, Any]) -> None:
        try:
            await operation
        except Exception:  # noqa: BLE001
            logger.exception("Error in background logging operations")

    def _ensure_loop(self) -> asyncio.AbstractEventLoop:
        with self._lock:
            if self._loop is None:
                loop = asyncio.new_event_loop()
                thread = threading.Thread(target=loop.run_forever, name=self._thread_name, daemon=True)
                thread.start()
                self._loop, self._thread = loop, thread
            return self._loop

    def _discard_task(self, task: asyncio.Task[None]) -> None:
        with self._lock:
            self._tasks.discard(task)

    def _discard_future(self, future: concurrent.futures.Future[None]) -> None:
        with self._lock:
            self._futures.discard(future)


__all__ = ["BackgroundDispatcher"]
