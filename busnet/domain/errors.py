"""Typed domain errors for the bus network.

Absent stops and routes are never errors: queries answer ``False`` or
``UNREACHABLE`` and removals are no-ops. These types cover the cases that
are rejected outright, such as malformed routes or strict-mode lookups.

All errors inherit from BusNetworkError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class BusNetworkError(Exception):
    """Base error for the bus network domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class StopNotFoundError(BusNetworkError):
    """A route referenced a stop that is not in the graph.

    Only raised when automatic stop creation is disabled.

    Attributes:
        stop_name: The stop name that was not found
    """

    stop_name: str = ""


@dataclass
class InvalidRouteError(BusNetworkError):
    """A route was rejected before touching the graph.

    Attributes:
        origin: First endpoint of the rejected route
        destination: Second endpoint of the rejected route
        distance: The distance that was supplied
    """

    origin: str = ""
    destination: str = ""
    distance: object = None


@dataclass
class ConfigurationError(BusNetworkError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
