"""
Fetching services: the airport status client and the four runners.
"""

from .client import AirportStatusClient, FetchFailure
from .runners import (
    DEMO_CODES,
    DEMO_CODES_WITH_INVALID,
    RunResult,
    run_sequential,
    run_wait_all,
    run_fire_and_report,
    run_wait_each,
)

__all__ = [
    # Client
    "AirportStatusClient",
    "FetchFailure",

    # Runners
    "DEMO_CODES",
    "DEMO_CODES_WITH_INVALID",
    "RunResult",
    "run_sequential",
    "run_wait_all",
    "run_fire_and_report",
    "run_wait_each",
]
