"""
Pydantic v2 models for airport status records.
"""

from .airport import AirportModel, WeatherModel

__all__ = [
    "AirportModel",
    "WeatherModel",
]
