"""
Place schemas.

A Place is one endpoint of a distance matrix query, identified either by
a free-form address or by a latitude/longitude pair. Places may be built
from arbitrary caller objects; the source object is remembered so the
caller can later look routes up by that object instead of the Place.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional, Tuple, Union, overload

from distance_matrix.exceptions import InvalidValueError


@dataclass(frozen=True)
class Place:
    """
    Immutable geographic endpoint.

    Equality and hashing consider only ``address``, ``lat`` and ``lng``;
    ``built_from`` is excluded so a Place built from an object compares
    equal to one built from the same values directly.

    Attributes:
        address: Free-form address string.
        lat: Latitude in decimal degrees.
        lng: Longitude in decimal degrees.
        built_from: Source object the place was extracted from, if any.
    """

    address: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    built_from: Any = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Validate that exactly one way of identifying the place is given."""
        has_address = bool(self.address)
        has_lat, has_lng = self.lat is not None, self.lng is not None

        if has_lat != has_lng:
            raise InvalidValueError("lat_lng", "Both lat and lng must be given")
        if has_address and has_lat:
            raise InvalidValueError(
                "address", "Place cannot have both an address and lat/lng"
            )
        if not has_address and not has_lat:
            raise InvalidValueError(
                "address", "Place must have either an address or lat and lng"
            )

    @classmethod
    def build(cls, obj: Any) -> "Place":
        """
        Build a Place from a Place, an address string, a mapping or an object.

        Mappings and objects are inspected for ``address`` or ``lat`` and
        ``lng`` (``lon`` is accepted as an alias) and are recorded as
        ``built_from``.

        Raises:
            InvalidValueError: If no usable attributes can be extracted.
        """
        if isinstance(obj, Place):
            return obj
        if isinstance(obj, str):
            return cls(address=obj, built_from=obj)

        if isinstance(obj, Mapping):
            getter = obj.get
        else:
            def getter(name: str) -> Any:
                return getattr(obj, name, None)

        address = getter("address")
        lat = getter("lat")
        lng = getter("lng")
        if lng is None:
            lng = getter("lon")

        if address is None and lat is None and lng is None:
            raise InvalidValueError(
                "place",
                f"Must be a mapping or an object with address or lat/lng, got {obj!r}",
            )

        if address:
            return cls(address=str(address), built_from=obj)
        return cls(
            lat=None if lat is None else float(lat),
            lng=None if lng is None else float(lng),
            built_from=obj,
        )

    def was_built_from(self, obj: Any) -> bool:
        """Check whether this place was extracted from ``obj``."""
        if self.built_from is None:
            return False
        if self.built_from is obj:
            return True
        # Array-like sources (e.g. pandas rows) compare element-wise.
        result = self.built_from == obj
        return isinstance(result, bool) and result

    @property
    def label(self) -> str:
        """Address, or ``"lat,lng"`` for coordinate places."""
        if self.address:
            return self.address
        return f"{self.lat},{self.lng}"


# Anything a lookup accepts: a Place, or the object a Place was built from.
PlaceRef = Union[Place, Any]


class Places(Sequence):
    """Immutable ordered collection of places."""

    def __init__(self, places: Iterable[Any] = ()) -> None:
        self._places: Tuple[Place, ...] = tuple(Place.build(p) for p in places)

    @overload
    def __getitem__(self, index: int) -> Place: ...

    @overload
    def __getitem__(self, index: slice) -> "Places": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Places(self._places[index])
        return self._places[index]

    def __len__(self) -> int:
        return len(self._places)

    def __iter__(self) -> Iterator[Place]:
        return iter(self._places)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Places):
            return self._places == other._places
        if isinstance(other, (list, tuple)):
            return list(self._places) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._places)

    def __repr__(self) -> str:
        return f"Places({list(self._places)!r})"

    def index_of(self, place: Place) -> Optional[int]:
        """Position of ``place`` by value equality, or None."""
        for i, candidate in enumerate(self._places):
            if candidate == place:
                return i
        return None

    def find_built_from(self, obj: Any) -> Optional[Place]:
        """First place that was built from ``obj``, or None."""
        for place in self._places:
            if place.was_built_from(obj):
                return place
        return None
