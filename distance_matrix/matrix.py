"""
Distance matrix.

A Matrix holds the origins and destinations of one query together with
the grid of routes the service returned for them. Lookups are delegated
to ``RoutesFinder``.
"""

from __future__ import annotations

import logging
from functools import cached_property
from typing import Any, Iterable, List, Optional, Sequence, Tuple

import pandas as pd
from pandera.typing import DataFrame

from distance_matrix.config import Configuration
from distance_matrix.exceptions import InvalidMatrixError
from distance_matrix.schemas.place import PlaceRef, Places
from distance_matrix.schemas.route import Route, RouteTableSchema
from distance_matrix.services.routes_finder import RoutesFinder

logger = logging.getLogger(__name__)


class Matrix:
    """
    Immutable origin x destination grid of routes.

    ``data[i][j]`` is the route from ``origins[i]`` to ``destinations[j]``.

    Attributes:
        origins: Ordered origin places.
        destinations: Ordered destination places.
        data: Rows of routes, one row per origin.
        configuration: Options the matrix was requested with.
    """

    def __init__(
        self,
        origins: Iterable[Any],
        destinations: Iterable[Any],
        data: Sequence[Sequence[Route]],
        configuration: Optional[Configuration] = None,
    ) -> None:
        self._origins = origins if isinstance(origins, Places) else Places(origins)
        self._destinations = (
            destinations if isinstance(destinations, Places) else Places(destinations)
        )
        self._data: Tuple[Tuple[Route, ...], ...] = tuple(tuple(row) for row in data)
        self._configuration = configuration or Configuration()

        self._validate()
        logger.debug(
            "Built %dx%d matrix (mode=%s)",
            len(self._origins),
            len(self._destinations),
            self._configuration.mode,
        )

    def _validate(self) -> None:
        if not self._origins:
            raise InvalidMatrixError("Matrix must have at least one origin")
        if not self._destinations:
            raise InvalidMatrixError("Matrix must have at least one destination")
        if len(self._data) != len(self._origins):
            raise InvalidMatrixError(
                f"Expected {len(self._origins)} rows, got {len(self._data)}"
            )

        for i, row in enumerate(self._data):
            if len(row) != len(self._destinations):
                raise InvalidMatrixError(
                    f"Row {i}: expected {len(self._destinations)} routes, got {len(row)}"
                )
            for j, route in enumerate(row):
                if route.origin != self._origins[i] or route.destination != self._destinations[j]:
                    raise InvalidMatrixError(
                        f"Route at [{i}][{j}] does not connect "
                        f"{self._origins[i].label!r} to {self._destinations[j].label!r}"
                    )

    @property
    def origins(self) -> Places:
        return self._origins

    @property
    def destinations(self) -> Places:
        return self._destinations

    @property
    def data(self) -> Tuple[Tuple[Route, ...], ...]:
        return self._data

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    @cached_property
    def routes_finder(self) -> RoutesFinder:
        return RoutesFinder(self)

    def with_configuration(self, **changes: Any) -> "Matrix":
        """Create a matrix sharing this data with updated configuration."""
        return Matrix(
            self._origins,
            self._destinations,
            self._data,
            self._configuration.with_changes(**changes),
        )

    # -------------------------
    # Finder delegation
    # -------------------------

    def routes_for(self, place_or_object: PlaceRef) -> List[Route]:
        return self.routes_finder.routes_for(place_or_object)

    def routes_for_strict(self, place_or_object: PlaceRef) -> List[Route]:
        return self.routes_finder.routes_for_strict(place_or_object)

    def route_for(self, **kwargs: PlaceRef) -> Route:
        return self.routes_finder.route_for(**kwargs)

    def route_for_strict(self, **kwargs: PlaceRef) -> Route:
        return self.routes_finder.route_for_strict(**kwargs)

    def shortest_route_by_distance_to(self, place_or_object: PlaceRef) -> Route:
        return self.routes_finder.shortest_route_by_distance_to(place_or_object)

    def shortest_route_by_distance_to_strict(self, place_or_object: PlaceRef) -> Route:
        return self.routes_finder.shortest_route_by_distance_to_strict(place_or_object)

    def shortest_route_by_duration_to(self, place_or_object: PlaceRef) -> Route:
        return self.routes_finder.shortest_route_by_duration_to(place_or_object)

    def shortest_route_by_duration_to_strict(self, place_or_object: PlaceRef) -> Route:
        return self.routes_finder.shortest_route_by_duration_to_strict(place_or_object)

    # -------------------------
    # Export
    # -------------------------

    def to_dataframe(self) -> DataFrame[RouteTableSchema]:
        """
        Flatten the matrix into one row per route.

        Returns:
            DataFrame validated against RouteTableSchema.
        """
        records = [
            {
                "origin_index": i,
                "destination_index": j,
                "origin": route.origin.label,
                "destination": route.destination.label,
                "status": route.status.value,
                "distance_in_meters": route.distance_in_meters,
                "duration_in_seconds": route.duration_in_seconds,
            }
            for i, row in enumerate(self._data)
            for j, route in enumerate(row)
        ]
        df = pd.DataFrame.from_records(records, columns=list(RouteTableSchema.to_schema().columns))
        return RouteTableSchema.validate(df)

    def __repr__(self) -> str:
        return (
            f"Matrix(origins={[p.label for p in self._origins]!r}, "
            f"destinations={[p.label for p in self._destinations]!r}, "
            f"mode={self._configuration.mode!r})"
        )
