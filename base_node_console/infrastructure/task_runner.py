"""Task Runner: executes detached handler work off the input thread.

Invariants:
    - spawn() never blocks on the unit it submits and never returns its result
    - Exceptions escaping a unit are logged here and go nowhere else
    - No cancellation: a submitted unit runs to completion, even after shutdown
      is requested; close() only waits (bounded) and then stops the loop
    - Completion order across units is unspecified

Design Decisions:
    - One private asyncio loop on a daemon thread: backend handles are async,
      and the input thread stays synchronous
    - run_coroutine_threadsafe over loop.create_task: the only thread-safe way
      to hand a coroutine to a loop running on another thread
    - Every unit shares the one loop thread: backend coroutines must not block
      (no sync IO, no time.sleep), or all other detached units stall with them
"""

import asyncio
import concurrent.futures
import logging
import threading
from collections.abc import Coroutine
from typing import Any

logger = logging.getLogger(__name__)


class AsyncioTaskRunner:
    """Fire-and-forget executor backed by an event loop on a worker thread."""

    def __init__(
        self, thread_name: str = "console-tasks",
        shutdown_timeout_seconds: float = 5.0,
    ):
        self._thread_name = thread_name
        self._shutdown_timeout = shutdown_timeout_seconds
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None
        self._pending: set[concurrent.futures.Future] = set()
        self._lock = threading.Lock()

    @property
    def running(self) -> bool:
        return self._loop is not None and self._loop.is_running()

    @property
    def pending(self) -> int:
        """Units submitted but not finished yet."""
        with self._lock:
            return len(self._pending)

    def start(self) -> None:
        if self._thread is not None:
            return
        loop = asyncio.new_event_loop()
        ready = threading.Event()

        def _run() -> None:
            asyncio.set_event_loop(loop)
            loop.call_soon(ready.set)
            loop.run_forever()

        self._loop = loop
        self._thread = threading.Thread(
            target=_run, name=self._thread_name, daemon=True,
        )
        self._thread.start()
        ready.wait()
        logger.debug(f"Task runner started on thread '{self._thread_name}'")

    def spawn(
        self, coro: Coroutine[Any, Any, None], name: str | None = None,
    ) -> None:
        """Submit a coroutine and return immediately."""
        if not self.running:
            coro.close()
            raise RuntimeError("Task runner is not running")
        task_name = name or getattr(coro, "__name__", "task")
        future = asyncio.run_coroutine_threadsafe(coro, self._loop)
        with self._lock:
            self._pending.add(future)
        future.add_done_callback(
            lambda f: self._on_done(f, task_name),
        )

    def _on_done(self, future: concurrent.futures.Future, task_name: str) -> None:
        with self._lock:
            self._pending.discard(future)
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            logger.error(
                f"Detached task '{task_name}' failed: {exc}",
                exc_info=exc, extra={"task_name": task_name},
            )

    def close(self) -> None:
        """Wait up to the shutdown timeout for in-flight units, then stop."""
        if self._thread is None or self._loop is None:
            return
        with self._lock:
            in_flight = list(self._pending)
        if in_flight:
            _, not_done = concurrent.futures.wait(
                in_flight, timeout=self._shutdown_timeout,
            )
            if not_done:
                logger.warning(
                    f"Stopping task runner with {len(not_done)} unfinished task(s)",
                )
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout=self._shutdown_timeout)
        if not self._thread.is_alive():
            self._loop.close()
        self._thread = None
        self._loop = None
        logger.debug("Task runner stopped")

    def __enter__(self) -> "AsyncioTaskRunner":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
