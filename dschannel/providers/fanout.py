"""Shared worker pool for per-table fan-out.

Every unit of work owns whatever it opens; the pool only bounds how many
units run at once across all channels in the process.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Hashable, Iterable
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from concurrent.futures import wait as wait_for_all
from typing import TypeVar

from dschannel.settings import load_channel_settings

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")

_executor: ThreadPoolExecutor | None = None
_lock = threading.Lock()


def get_shared_executor() -> ThreadPoolExecutor:
    """Return the process-wide pool, creating it on first use."""
    global _executor
    with _lock:
        if _executor is None:
            workers = load_channel_settings().fanout_workers
            _executor = ThreadPoolExecutor(
                max_workers=workers,
                thread_name_prefix="dschannel-fanout-",
            )
            logger.debug(f"Created shared fan-out pool with {workers} workers")
        return _executor


def shutdown_shared_executor(wait: bool = True) -> None:
    """Shut the shared pool down; the next fan-out creates a fresh one."""
    global _executor
    with _lock:
        executor, _executor = _executor, None
    if executor is not None:
        executor.shutdown(wait=wait, cancel_futures=not wait)


def fan_out(
    fn: Callable[[K], T],
    items: Iterable[K],
    executor: Executor | None = None,
) -> dict[K, T]:
    """Run ``fn`` once per distinct item and collect results keyed by item.

    Waits for every unit before returning. If any unit failed, the failure of
    the first item (in iteration order) is raised and no results are returned.
    """
    pool = executor or get_shared_executor()
    futures: dict[K, Future[T]] = {}
    try:
        for item in items:
            if item not in futures:
                futures[item] = pool.submit(fn, item)
    finally:
        # units already submitted finish before anything propagates
        wait_for_all(futures.values())

    results: dict[K, T] = {}
    for item, future in futures.items():
        error = future.exception()
        if error is not None:
            logger.debug(f"Fan-out unit for {item!r} failed: {error}")
            raise error
        results[item] = future.result()
    return results
