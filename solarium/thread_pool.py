"""A pool of pre-created worker threads that each run one task at a time."""

from __future__ import annotations

import os
import threading
from typing import Any, Callable, List, Optional, Tuple


class _Worker:
    """Tracks the activity of one worker thread."""

    def __init__(self) -> None:
        self.condition = threading.Condition()
        self.task: Optional[Tuple[Callable[..., Any], Tuple[Any, ...]]] = None
        self.result: Any = None
        self.error: Optional[BaseException] = None
        self.fresh_work = False  # True from assignment until the result is collected.
        self.fresh_result = False
        self.die = False
        self.thread = threading.Thread(target=self._dispatch, daemon=True)
        self.thread.start()

    def _dispatch(self) -> None:
        while True:
            with self.condition:
                while (not self.fresh_work or self.fresh_result) and not self.die:
                    self.condition.wait()
                if self.die:
                    return
                assert self.task is not None
                work_function, args = self.task
            result: Any = None
            error: Optional[BaseException] = None
            try:
                result = work_function(*args)
            except BaseException as exc:  # handed back to whoever collects the result
                error = exc
            with self.condition:
                self.result = result
                self.error = error
                self.fresh_result = True
                self.condition.notify_all()

    def stop(self) -> None:
        with self.condition:
            self.die = True
            self.condition.notify_all()
        self.thread.join()


class ThreadPool:
    """Manages a fixed set of worker threads.

    Each call to start() must eventually be matched by a call to result() for
    the returned thread id; a worker is not free again until its result has
    been collected.
    """

    def __init__(self, size: Optional[int] = None) -> None:
        if size is None:
            size = os.cpu_count() or 1
        if size < 1:
            raise ValueError(f"pool size must be positive, not {size}")
        self._available = threading.Semaphore(size)
        self._workers: List[_Worker] = [_Worker() for _ in range(size)]
        self._closed = False

    def __len__(self) -> int:
        return len(self._workers)

    def start(self, work_function: Callable[..., Any], *args: Any) -> int:
        """Hand work to a free worker and return its pool-relative id.

        Blocks until a worker is free.
        """
        if self._closed:
            raise RuntimeError("thread pool is closed")
        self._available.acquire()
        for thread_id, worker in enumerate(self._workers):
            with worker.condition:
                if not worker.fresh_work:
                    worker.task = (work_function, args)
                    worker.fresh_work = True
                    worker.condition.notify_all()
                    return thread_id
        self._available.release()
        raise RuntimeError("no free worker despite available slot")

    def result(self, thread_id: int) -> Any:
        """Wait for and return the result of the work given to thread_id.

        An exception raised by the work function is raised here.
        """
        if not 0 <= thread_id < len(self._workers):
            raise IndexError(f"no worker with id {thread_id}")
        worker = self._workers[thread_id]
        with worker.condition:
            while not worker.fresh_result:
                worker.condition.wait()
            result, error = worker.result, worker.error
            worker.result = None
            worker.error = None
            worker.task = None
            worker.fresh_result = False
            worker.fresh_work = False
        self._available.release()
        if error is not None:
            raise error
        return result

    def close(self) -> None:
        """Stop all workers, waiting for any work in progress to finish."""
        if self._closed:
            return
        self._closed = True
        for worker in self._workers:
            worker.stop()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()