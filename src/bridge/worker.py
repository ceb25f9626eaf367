"""Single background worker that runs submitted tasks one at a time, in order."""

from __future__ import annotations

import logging
import queue
import threading
from typing import Callable, Optional

from .errors import WorkerClosedError

LOGGER = logging.getLogger(__name__)

Task = Callable[[], None]

_STOP = object()


class SerialWorker:
    """FIFO task queue drained by one daemon thread."""

    def __init__(self, name: str = "genai-worker") -> None:
        self.name = name
        self._tasks: "queue.Queue[object]" = queue.Queue()
        self._lock = threading.Lock()
        self._closed = False
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)
        self._thread.start()
        LOGGER.debug("Worker %s started", name)

    @property
    def closed(self) -> bool:
        return self._closed

    def submit(self, task: Task) -> None:
        with self._lock:
            if self._closed:
                raise WorkerClosedError(f"Worker {self.name} has been shut down")
            self._tasks.put(task)

    def shutdown(self, wait: bool = False, timeout: Optional[float] = None) -> bool:
        """
        Stop accepting work; tasks already queued still run.

        Returns True for the call that performed the shutdown, False afterwards.
        """
        with self._lock:
            if self._closed:
                return False
            self._closed = True
            self._tasks.put(_STOP)
        LOGGER.debug("Worker %s shutting down", self.name)
        if wait and threading.current_thread() is not self._thread:
            self._thread.join(timeout)
        return True

    def join(self, timeout: Optional[float] = None) -> None:
        self._thread.join(timeout)

    def is_alive(self) -> bool:
        return self._thread.is_alive()

    def _run(self) -> None:
        while True:
            task = self._tasks.get()
            try:
                if task is _STOP:
                    LOGGER.debug("Worker %s stopped", self.name)
                    return
                try:
                    task()  # type: ignore[operator]
                except Exception:
                    LOGGER.exception("Unhandled error in worker %s task", self.name)
            finally:
                self._tasks.task_done()
