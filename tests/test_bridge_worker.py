from pathlib import Path
import sys
import threading

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from src.bridge.errors import WorkerClosedError
from src.bridge.worker import SerialWorker


@pytest.fixture
def worker():
    worker = SerialWorker(name="test-worker")
    yield worker
    worker.shutdown(wait=True, timeout=5)


def test_tasks_run_in_submission_order(worker):
    order = []
    for index in range(20):
        worker.submit(lambda index=index: order.append(index))
    worker.shutdown(wait=True, timeout=5)

    assert order == list(range(20))


def test_one_task_at_a_time(worker):
    active = []
    overlaps = []
    lock = threading.Lock()

    def task():
        with lock:
            active.append(1)
            if len(active) > 1:
                overlaps.append(True)
        with lock:
            active.pop()

    for _ in range(50):
        worker.submit(task)
    worker.shutdown(wait=True, timeout=5)

    assert overlaps == []


def test_failing_task_does_not_stop_worker(worker):
    done = threading.Event()

    def failing():
        raise RuntimeError("boom")

    worker.submit(failing)
    worker.submit(done.set)

    assert done.wait(timeout=5)
    assert worker.is_alive()


def test_shutdown_is_idempotent_and_drains_queue(worker):
    gate = threading.Event()
    ran = []

    worker.submit(gate.wait)
    worker.submit(lambda: ran.append("queued"))

    assert worker.shutdown() is True
    assert worker.shutdown() is False
    gate.set()
    worker.join(timeout=5)

    assert ran == ["queued"]
    assert worker.closed
    assert not worker.is_alive()


def test_submit_after_shutdown_raises(worker):
    worker.shutdown(wait=True, timeout=5)
    with pytest.raises(WorkerClosedError):
        worker.submit(lambda: None)
