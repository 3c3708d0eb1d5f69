"""Domain layer - Core models, the unreachable sentinel and errors.

No external dependencies.
"""

from .errors import (
    BusNetworkError,
    ConfigurationError,
    InvalidRouteError,
    StopNotFoundError,
)
from .models import UNREACHABLE, Distance, Route

__all__ = [
    # Models
    "Distance",
    "Route",
    "UNREACHABLE",
    # Errors
    "BusNetworkError",
    "ConfigurationError",
    "InvalidRouteError",
    "StopNotFoundError",
]
