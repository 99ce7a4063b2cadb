from __future__ import annotations

import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Callable, List, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def available_parallelism() -> int:
    return os.cpu_count() or 1


def effective_parallelism(requested: int, available: Optional[int] = None) -> int:
    """Number of worker threads to use for a requested parallelism.

    Non-positive requests mean "use every execution unit"; larger requests are
    capped at what the machine has.
    """
    available = available if available is not None else available_parallelism()
    if requested <= 0:
        return available
    return min(requested, available)


class ForkJoinPool:
    """Bounded thread pool for tasks that fork children and join on them.

    `invoke_all` hands a task to a worker only when a worker slot is free and
    runs it on the calling thread otherwise. Submitted work therefore never
    exceeds the number of workers, and a task blocked joining its children
    cannot starve the pool. Every child has finished by the time
    `invoke_all` returns or raises.
    """

    def __init__(self, parallelism: int, thread_name_prefix: str = "crawl"):
        if parallelism < 1:
            raise ValueError("parallelism must be >= 1")
        self.parallelism = parallelism
        self._executor = ThreadPoolExecutor(max_workers=parallelism, thread_name_prefix=thread_name_prefix)
        self._free_slots = threading.Semaphore(parallelism)

    def _run_in_slot(self, task: Callable[[], T]) -> T:
        try:
            return task()
        finally:
            self._free_slots.release()

    def invoke_all(self, tasks: Sequence[Callable[[], T]]) -> List[T]:
        """Run `tasks` (forking where workers are free) and return their results in order.

        The first exception raised by any task is re-raised once all of them
        have completed.
        """
        results: List[Optional[T]] = [None] * len(tasks)
        forked = []
        inline = []
        for index, task in enumerate(tasks):
            if self._free_slots.acquire(blocking=False):
                try:
                    forked.append((index, self._executor.submit(self._run_in_slot, task)))
                except BaseException:
                    self._free_slots.release()
                    raise
            else:
                inline.append((index, task))

        try:
            for index, task in inline:
                results[index] = task()
        finally:
            wait([future for _, future in forked])

        for index, future in forked:
            results[index] = future.result()
        return results

    def shutdown(self) -> None:
        self._executor.shutdown(wait=True)

    def __enter__(self) -> "ForkJoinPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()
