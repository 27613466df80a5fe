"""
Airport status models for responses of the FAA airport status API.

Records are immutable and only ever built from a fully validated response.
"""

import re
from typing import Any, List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

# Readings look like "66.0 F (18.9 C)"; the leading number is the temperature
_LEADING_NUMBER = re.compile(r"^\s*(-?\d+(?:\.\d+)?)")


class WeatherModel(BaseModel):
    """Weather block of an airport status response."""
    model_config = ConfigDict(frozen=True)

    temperature: List[float] = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("Temp", "temperature"),
        description="Temperature readings, first one is current",
    )

    @field_validator("temperature", mode="before")
    @classmethod
    def parse_readings(cls, value: Any) -> Any:
        """Accept numeric readings or strings that start with a number."""
        if not isinstance(value, list):
            return value

        readings = []
        for reading in value:
            if isinstance(reading, str):
                match = _LEADING_NUMBER.match(reading)
                if not match:
                    raise ValueError(f"Unreadable temperature: {reading!r}")
                reading = float(match.group(1))
            readings.append(reading)
        return readings

    @property
    def first_temperature(self) -> float:
        return self.temperature[0]


class AirportModel(BaseModel):
    """Status of one airport as reported by the remote service."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code: str = Field(..., alias="IATA", description="IATA airport code")
    name: str = Field(..., alias="Name", description="Airport name")
    delayed: bool = Field(..., alias="Delay", description="Whether delays are reported")
    weather: WeatherModel = Field(..., alias="Weather")
