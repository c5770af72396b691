"""
Routes Finder Service - lookups over a populated distance matrix.

Answers questions such as "which route goes from A to B", "all routes
from/to A" and "the shortest route to A" without any I/O. Every lookup
accepts either a Place or the object a Place was built from.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, List, Optional

from distance_matrix.exceptions import InvalidArgumentError, InvalidRouteError
from distance_matrix.schemas.place import Place, PlaceRef
from distance_matrix.schemas.route import Route

if TYPE_CHECKING:
    from distance_matrix.matrix import Matrix

logger = logging.getLogger(__name__)


def resolve_place(matrix: Matrix, ref: PlaceRef) -> Place:
    """
    Resolve a lookup argument to a Place.

    Places are returned unchanged. Any other object is matched against
    the places of the matrix that were built from it, origins first.

    Raises:
        InvalidArgumentError: If ``ref`` is not a Place and no place of
            the matrix was built from it.
    """
    if isinstance(ref, Place):
        return ref

    place = matrix.origins.find_built_from(ref) or matrix.destinations.find_built_from(ref)
    if place is None:
        raise InvalidArgumentError(
            f"{ref!r} is neither a place nor an object a place of this matrix was built from",
            argument=ref,
        )

    logger.debug("Resolved %r to place %r", ref, place.label)
    return place


def _ensure_ok(route: Route) -> Route:
    if not route.ok:
        logger.warning(
            "Rejecting route %s -> %s with status %s",
            route.origin.label,
            route.destination.label,
            route.status.value,
        )
        raise InvalidRouteError(route)
    return route


class RoutesFinder:
    """
    Read-only query service over one Matrix.

    The matrix is never mutated, so a finder is thread-safe and several
    finders may share a matrix.

    Attributes:
        _matrix: Matrix the lookups run against.
    """

    def __init__(self, matrix: Matrix) -> None:
        self._matrix = matrix

    @property
    def matrix(self) -> Matrix:
        return self._matrix

    def routes_for(self, place_or_object: PlaceRef) -> List[Route]:
        """
        All routes from or to a place.

        If the place is an origin its full row is returned, otherwise if it
        is a destination its full column. Routes of any status are included.

        Args:
            place_or_object: Place, or the object a place was built from.

        Returns:
            Routes in matrix order.

        Raises:
            InvalidArgumentError: If the place is neither origin nor destination.
        """
        place = resolve_place(self._matrix, place_or_object)
        data = self._matrix.data

        row = self._matrix.origins.index_of(place)
        if row is not None:
            logger.debug("Selecting row %d for origin %r", row, place.label)
            return list(data[row])

        column = self._matrix.destinations.index_of(place)
        if column is not None:
            logger.debug("Selecting column %d for destination %r", column, place.label)
            return [routes[column] for routes in data]

        raise InvalidArgumentError(
            f"Place {place.label!r} is neither an origin nor a destination",
            argument=place_or_object,
        )

    def routes_for_strict(self, place_or_object: PlaceRef) -> List[Route]:
        """
        Like ``routes_for``, but every route must be OK.

        Raises:
            InvalidArgumentError: If the place cannot be resolved.
            InvalidRouteError: If any selected route is not OK.
        """
        routes = self.routes_for(place_or_object)
        for route in routes:
            _ensure_ok(route)
        return routes

    def route_for(
        self,
        *,
        origin: Optional[PlaceRef] = None,
        destination: Optional[PlaceRef] = None,
    ) -> Route:
        """
        The route between one origin and one destination.

        Args:
            origin: Origin Place, or the object it was built from.
            destination: Destination Place, or the object it was built from.

        Returns:
            The matrix cell for the pair, whatever its status.

        Raises:
            InvalidArgumentError: If either argument is missing or cannot be
                resolved to an origin/destination respectively.
        """
        if origin is None or destination is None:
            raise InvalidArgumentError("Must provide both origin and destination")

        origin_place = resolve_place(self._matrix, origin)
        destination_place = resolve_place(self._matrix, destination)

        row = self._matrix.origins.index_of(origin_place)
        if row is None:
            raise InvalidArgumentError(
                f"Place {origin_place.label!r} is not an origin", argument=origin
            )
        column = self._matrix.destinations.index_of(destination_place)
        if column is None:
            raise InvalidArgumentError(
                f"Place {destination_place.label!r} is not a destination",
                argument=destination,
            )

        return self._matrix.data[row][column]

    def route_for_strict(
        self,
        *,
        origin: Optional[PlaceRef] = None,
        destination: Optional[PlaceRef] = None,
    ) -> Route:
        """
        Like ``route_for``, but the route must be OK.

        Raises:
            InvalidArgumentError: As ``route_for``.
            InvalidRouteError: If the route is not OK.
        """
        return _ensure_ok(self.route_for(origin=origin, destination=destination))

    def shortest_route_by_distance_to(self, place_or_object: PlaceRef) -> Route:
        """Route with the smallest distance among ``routes_for(place_or_object)``."""
        return self._shortest(place_or_object, lambda r: r.distance_in_meters)

    def shortest_route_by_distance_to_strict(self, place_or_object: PlaceRef) -> Route:
        """Like ``shortest_route_by_distance_to``, but the chosen route must be OK."""
        return _ensure_ok(self.shortest_route_by_distance_to(place_or_object))

    def shortest_route_by_duration_to(self, place_or_object: PlaceRef) -> Route:
        """Route with the smallest duration among ``routes_for(place_or_object)``."""
        return self._shortest(place_or_object, lambda r: r.duration_in_seconds)

    def shortest_route_by_duration_to_strict(self, place_or_object: PlaceRef) -> Route:
        """Like ``shortest_route_by_duration_to``, but the chosen route must be OK."""
        return _ensure_ok(self.shortest_route_by_duration_to(place_or_object))

    def _shortest(
        self,
        place_or_object: PlaceRef,
        measure: Callable[[Route], Optional[float]],
    ) -> Route:
        """
        Pick the first route with the minimum measured value.

        Routes without a value are skipped. When no route has one, the
        first candidate is returned so the caller can inspect its status.
        """
        candidates = self.routes_for(place_or_object)
        measured = [route for route in candidates if measure(route) is not None]

        if not measured:
            logger.debug(
                "No measured routes among %d candidates, returning the first",
                len(candidates),
            )
            return candidates[0]

        return min(measured, key=measure)
