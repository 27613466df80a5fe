"""
Shared fixtures: an in-process fetcher with simulated latency and a reporter
that writes to a buffer instead of the terminal.
"""

import io
import threading
import time

import pytest
from rich.console import Console

from airport_status.models.airport import AirportModel
from airport_status.reporting import StatusReporter
from airport_status.services.client import FetchFailure

TEMPERATURES = {"LAX": 66.0, "SFO": 58.0, "PDX": 49.0, "SEA": 47.0}


def make_payload(code: str, delayed: bool = False) -> dict:
    """Build a response body shaped like the FAA airport status API."""
    return {
        "Name": f"{code} International",
        "City": "Somewhere",
        "IATA": code,
        "ICAO": f"K{code}",
        "Delay": delayed,
        "DelayCount": 0,
        "Status": [{"Reason": "No known delays for this airport"}],
        "Weather": {
            "Weather": [{"Temp": ["Fair"]}],
            "Visibility": [10.0],
            "Temp": [f"{TEMPERATURES.get(code, 70.0)} F (18.9 C)"],
            "Wind": ["Southwest at 8.1mph"],
        },
    }


class FakeFetcher:
    """Fetch collaborator that sleeps instead of calling the network."""

    def __init__(self, latency: float = 0.0, delayed=("SFO",)):
        self.latency = latency
        self.delayed = set(delayed)
        self.calls = []
        self._lock = threading.Lock()

    def fetch(self, code: str) -> AirportModel:
        with self._lock:
            self.calls.append(code)
        time.sleep(self.latency)
        if code not in TEMPERATURES:
            raise FetchFailure(code, f"404 Client Error: Not Found for url: /status/{code}")
        return AirportModel.model_validate(make_payload(code, code in self.delayed))


@pytest.fixture
def fetcher():
    return FakeFetcher()


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def reporter(output):
    console = Console(file=output, width=120, color_system=None)
    return StatusReporter(console=console)


@pytest.fixture
def printed(output):
    """Return a callable giving the non-blank lines printed so far."""
    def lines():
        return [line.rstrip() for line in output.getvalue().splitlines() if line.strip()]
    return lines
