"""Drills on sharing data between threads."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field


def _sum_from(numbers: Sequence[int], offset: int, step: int) -> int:
    total = sum(numbers[offset::step])
    print(f"Sum of offset {offset} is {total}")
    return total


def offset_sums(
    numbers: Sequence[int], offsets: Iterable[int] = range(8), step: int = 5
) -> list[int]:
    """Sum every step-th number from each offset, one thread per offset.

    All threads read the same sequence; nothing is copied.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    offsets = list(offsets)
    if not offsets:
        return []
    with ThreadPoolExecutor(max_workers=len(offsets)) as pool:
        futures = [pool.submit(_sum_from, numbers, o, step) for o in offsets]
        return [f.result() for f in futures]


@dataclass
class JobStatus:
    """Count of completed jobs, safe to update from several threads."""

    jobs_completed: int = 0
    _lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def complete_one(self) -> int:
        """Record one finished job and return the new count."""
        with self._lock:
            self.jobs_completed += 1
            return self.jobs_completed

    @property
    def completed(self) -> int:
        with self._lock:
            return self.jobs_completed


def run_jobs(total: int = 10, interval: float = 0.25, poll: float = 0.5) -> JobStatus:
    """Complete jobs in a worker thread while the caller waits for all of them."""
    status = JobStatus()

    def worker() -> None:
        for _ in range(total):
            time.sleep(interval)
            status.complete_one()

    thread = threading.Thread(target=worker, daemon=True)
    thread.start()
    while status.completed < total:
        print("waiting... ")
        time.sleep(poll)
    thread.join()
    return status