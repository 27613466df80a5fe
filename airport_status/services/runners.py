"""
Four ways of fetching the same list of airport codes.

- run_sequential: one fetch after another, failures skipped
- run_wait_all: all fetches at once, wait for every one, failures dropped
- run_fire_and_report: one task per code, failures routed to an injected handler
- run_wait_each: one task per code, each result retrieved and recovered in order

Blocking fetches run in a thread pool sized to the number of codes, so every
fetch of a concurrent run is in flight at the same time.
"""

import asyncio
import functools
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Protocol, Sequence

from ..models.airport import AirportModel
from ..reporting import StatusReporter
from .client import FetchFailure

logger = logging.getLogger(__name__)

DEMO_CODES = ["LAX", "SFO", "PDX", "SEA"]
DEMO_CODES_WITH_INVALID = ["LAX", "SF-", "PD-", "SEA"]

ErrorHandler = Callable[[str, BaseException], None]


class Fetcher(Protocol):
    def fetch(self, code: str) -> AirportModel: ...


@dataclass
class RunResult:
    """Outcome of one runner over its list of codes."""
    strategy: str
    records: List[AirportModel] = field(default_factory=list)
    failures: Dict[str, str] = field(default_factory=dict)
    task_failed: Dict[str, bool] = field(default_factory=dict)
    elapsed_ms: int = 0


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def _fetch_pool(size: int) -> ThreadPoolExecutor:
    return ThreadPoolExecutor(max_workers=max(size, 1), thread_name_prefix="airport-fetch")


def run_sequential(
    fetcher: Fetcher,
    reporter: StatusReporter,
    codes: Sequence[str] = DEMO_CODES,
) -> RunResult:
    """Fetch each code in order, printing a row per success."""
    result = RunResult(strategy="sequential")
    reporter.header()
    start = time.perf_counter()

    for code in codes:
        try:
            airport = fetcher.fetch(code)
        except FetchFailure as e:
            logger.debug(f"Skipping {code}: {e}")
            continue
        result.records.append(airport)
        reporter.row(airport)

    result.elapsed_ms = _elapsed_ms(start)
    reporter.elapsed(result.elapsed_ms)
    return result


async def run_wait_all(
    fetcher: Fetcher,
    reporter: StatusReporter,
    codes: Sequence[str] = DEMO_CODES,
) -> RunResult:
    """Fetch all codes concurrently, then print the successes in submission order."""
    result = RunResult(strategy="wait_all")
    reporter.header()
    start = time.perf_counter()
    loop = asyncio.get_running_loop()

    with _fetch_pool(len(codes)) as pool:
        outcomes = await asyncio.gather(
            *(loop.run_in_executor(pool, fetcher.fetch, code) for code in codes),
            return_exceptions=True,
        )

    for code, outcome in zip(codes, outcomes):
        if isinstance(outcome, FetchFailure):
            logger.debug(f"Dropping {code}: {outcome}")
            continue
        if isinstance(outcome, BaseException):
            raise outcome
        result.records.append(outcome)

    for airport in result.records:
        reporter.row(airport)

    result.elapsed_ms = _elapsed_ms(start)
    reporter.elapsed(result.elapsed_ms)
    return result


def _route_failure(error_handler: ErrorHandler, task: asyncio.Task) -> None:
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        error_handler(task.get_name(), error)


async def run_fire_and_report(
    fetcher: Fetcher,
    reporter: StatusReporter,
    error_handler: ErrorHandler,
    codes: Sequence[str] = DEMO_CODES_WITH_INVALID,
) -> RunResult:
    """
    Launch one fire-and-forget task per code.

    A task that fails hands its exception to error_handler along with its code;
    nothing is raised to the caller. After every task has finished, the terminal
    failure flag of each task is printed.
    """
    result = RunResult(strategy="fire_and_report")
    start = time.perf_counter()
    loop = asyncio.get_running_loop()

    with _fetch_pool(len(codes)) as pool:

        async def report_status(code: str) -> AirportModel:
            airport = await loop.run_in_executor(pool, fetcher.fetch, code)
            reporter.delay(airport)
            return airport

        tasks = []
        for code in codes:
            task = asyncio.create_task(report_status(code), name=code)
            task.add_done_callback(functools.partial(_route_failure, error_handler))
            tasks.append(task)

        await asyncio.wait(tasks)

    for task in tasks:
        failed = task.cancelled() or task.exception() is not None
        result.task_failed[task.get_name()] = failed
        reporter.task_flag(task.get_name(), failed)
        if not failed:
            result.records.append(task.result())

    result.elapsed_ms = _elapsed_ms(start)
    return result


async def run_wait_each(
    fetcher: Fetcher,
    reporter: StatusReporter,
    codes: Sequence[str] = DEMO_CODES_WITH_INVALID,
) -> RunResult:
    """Start every fetch at once, then retrieve and recover each result in order."""
    result = RunResult(strategy="wait_each")
    start = time.perf_counter()
    loop = asyncio.get_running_loop()

    with _fetch_pool(len(codes)) as pool:
        pending = [(code, loop.run_in_executor(pool, fetcher.fetch, code)) for code in codes]

        for code, future in pending:
            try:
                airport = await future
            except FetchFailure as e:
                result.failures[code] = reporter.error(e)
                continue
            result.records.append(airport)
            reporter.status(airport)

    result.elapsed_ms = _elapsed_ms(start)
    return result
