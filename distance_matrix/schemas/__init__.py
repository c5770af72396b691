"""
Schema definitions for distance matrix data.

Immutable dataclasses for places and routes, plus the Pandera contract
for the flattened route table.
"""

from .place import Place, PlaceRef, Places
from .route import Measurement, Route, RouteStatus, RouteTableSchema

__all__ = [
    # Places
    "Place",
    "PlaceRef",
    "Places",
    # Routes
    "Measurement",
    "Route",
    "RouteStatus",
    "RouteTableSchema",
]
