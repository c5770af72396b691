"""
Custom exceptions for the distance_matrix package.

Every error carries an ``ErrorKind`` so callers can branch on the kind
of failure instead of catching individual classes.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from distance_matrix.schemas.route import Route


class ErrorKind(str, Enum):
    """Category of a distance_matrix error."""

    INVALID_ARGUMENT = "invalid_argument"
    INVALID_ROUTE = "invalid_route"
    INVALID_VALUE = "invalid_value"
    INVALID_MATRIX = "invalid_matrix"


class DistanceMatrixError(Exception):
    """Base exception for all distance_matrix errors."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidArgumentError(DistanceMatrixError, ValueError):
    """Raised when a caller passes a place reference the matrix cannot resolve."""

    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, message: str, argument: Any = None) -> None:
        self.argument = argument
        super().__init__(message)


class InvalidRouteError(DistanceMatrixError):
    """Raised by strict lookups when a selected route does not have an OK status."""

    kind = ErrorKind.INVALID_ROUTE

    def __init__(self, route: Route, message: str = "") -> None:
        self.route = route
        message = message or (
            f"Route from {route.origin.label!r} to {route.destination.label!r} "
            f"is not ok (status: {route.status.value})"
        )
        super().__init__(message)


class InvalidValueError(DistanceMatrixError, ValueError):
    """Raised when a place, route or configuration is built from invalid values."""

    kind = ErrorKind.INVALID_VALUE

    def __init__(self, attribute: str, message: str = "") -> None:
        self.attribute = attribute
        super().__init__(message or f"Invalid value for {attribute}")


class InvalidMatrixError(DistanceMatrixError):
    """Raised when the route grid does not line up with its origins and destinations."""

    kind = ErrorKind.INVALID_MATRIX
