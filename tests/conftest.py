"""
Shared fixtures for distance_matrix tests.

Provides a 2x2 matrix (two origins, two destinations) in two flavours:
one where every route is OK and one where the service reported
ZERO_RESULTS for every pair.
"""

from typing import List

import pytest

from distance_matrix.matrix import Matrix
from distance_matrix.schemas.place import Place
from distance_matrix.schemas.route import Route, RouteStatus


class Location:
    """Caller-side object that places are built from."""

    def __init__(self, address: str) -> None:
        self.address = address

    def __repr__(self) -> str:
        return f"Location({self.address!r})"


# (distance in metres, duration in seconds) per [origin][destination]
OK_MEASUREMENTS = [
    [(2032.0, 367.0), (20790.0, 1505.0)],
    [(24126.0, 1470.0), (12839.0, 940.0)],
]


@pytest.fixture
def origin_1() -> Place:
    return Place(address="Karl Johans gate, Oslo")


@pytest.fixture
def origin_2() -> Place:
    return Place(address="Askerveien 1, Asker")


@pytest.fixture
def destination_1() -> Place:
    return Place(address="Drammensveien 1, Oslo")


@pytest.fixture
def destination_2_built_from() -> Location:
    return Location("Skjellestadhagen, Heggedal")


@pytest.fixture
def destination_2(destination_2_built_from: Location) -> Place:
    return Place.build(destination_2_built_from)


@pytest.fixture
def origins(origin_1: Place, origin_2: Place) -> List[Place]:
    return [origin_1, origin_2]


@pytest.fixture
def destinations(destination_1: Place, destination_2: Place) -> List[Place]:
    return [destination_1, destination_2]


@pytest.fixture
def ok_matrix(origins: List[Place], destinations: List[Place]) -> Matrix:
    """Matrix where every route is OK."""
    data = [
        [
            Route.create(
                origin=origin,
                destination=destination,
                distance_in_meters=OK_MEASUREMENTS[i][j][0],
                duration_in_seconds=OK_MEASUREMENTS[i][j][1],
            )
            for j, destination in enumerate(destinations)
        ]
        for i, origin in enumerate(origins)
    ]
    return Matrix(origins=origins, destinations=destinations, data=data)


@pytest.fixture
def zero_results_matrix(origins: List[Place], destinations: List[Place]) -> Matrix:
    """Matrix where the service found no route for any pair."""
    data = [
        [
            Route(origin=origin, destination=destination, status=RouteStatus.ZERO_RESULTS)
            for destination in destinations
        ]
        for origin in origins
    ]
    return Matrix(origins=origins, destinations=destinations, data=data)
