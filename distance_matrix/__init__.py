"""
distance_matrix - lookups over distance/duration matrix results.

Holds the origin x destination grid returned by a distance matrix service
and answers route questions about it: the route for a pair, all routes
from or to a place, and the shortest route by distance or duration.
"""

from distance_matrix.config import Configuration, setup_logging
from distance_matrix.exceptions import (
    DistanceMatrixError,
    ErrorKind,
    InvalidArgumentError,
    InvalidMatrixError,
    InvalidRouteError,
    InvalidValueError,
)
from distance_matrix.matrix import Matrix
from distance_matrix.schemas import Measurement, Place, PlaceRef, Places, Route, RouteStatus
from distance_matrix.services import RoutesFinder, resolve_place

__all__ = [
    "Configuration",
    "setup_logging",
    # Errors
    "DistanceMatrixError",
    "ErrorKind",
    "InvalidArgumentError",
    "InvalidMatrixError",
    "InvalidRouteError",
    "InvalidValueError",
    # Data
    "Matrix",
    "Measurement",
    "Place",
    "PlaceRef",
    "Places",
    "Route",
    "RouteStatus",
    # Lookups
    "RoutesFinder",
    "resolve_place",
]
