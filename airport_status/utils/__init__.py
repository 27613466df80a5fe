"""
Configuration helpers for airport-status.
"""

from .config import AirportStatusConfig, load_config, get_config

__all__ = [
    "AirportStatusConfig",
    "load_config",
    "get_config",
]
