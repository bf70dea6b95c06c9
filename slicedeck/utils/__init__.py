"""
Shared helpers: logging setup and the fan-out/fan-in load runner.

Usage:
    from slicedeck.utils import log, setup_logging, run_concurrently
"""

import logging
import sys
import threading
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import Callable, Dict, List, Mapping, Optional, TypeVar

T = TypeVar("T")

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

log = logging.getLogger("slicedeck")


# --------------------------------------------------------------------------- #
# Logging
# --------------------------------------------------------------------------- #
def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Configure root logging for a CLI run."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        handlers=handlers,
    )


# --------------------------------------------------------------------------- #
# Fan-out / fan-in
# --------------------------------------------------------------------------- #
def run_concurrently(
    tasks: Mapping[str, Callable[[], T]],
    max_workers: int = 4,
) -> Dict[str, T]:
    """Run every callable in *tasks* on a thread pool and return their results by key.

    The first task to raise wins: its exception is re-raised unchanged and
    no task that has not started yet will start. Tasks already running are
    left to finish, their results discarded.
    """
    if not tasks:
        return {}

    aborted = threading.Event()
    failures: List[BaseException] = []

    def guarded(key: str, fn: Callable[[], T]) -> Optional[T]:
        if aborted.is_set():
            log.debug("Skipping load '%s' after an earlier failure", key)
            return None
        try:
            return fn()
        except Exception as exc:
            failures.append(exc)
            aborted.set()
            raise

    with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(tasks)))) as pool:
        futures = {pool.submit(guarded, key, fn): key for key, fn in tasks.items()}
        _, pending = wait(futures, return_when=FIRST_EXCEPTION)

        if failures:
            for other in pending:
                other.cancel()
            log.debug("Load failed, cancelled %d pending", len(pending))
            raise failures[0]

        return {key: future.result() for future, key in futures.items()}
