"""
Route schemas.

A Route is a single cell of a distance matrix: the result reported by the
service for one origin/destination pair. ``RouteTableSchema`` is the
Pandera contract for the flattened, one-row-per-cell table produced by
``Matrix.to_dataframe``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

import pandera as pa
from pandera.typing import Series

from distance_matrix.exceptions import InvalidValueError
from distance_matrix.schemas.place import Place


class RouteStatus(str, Enum):
    """Element-level status codes returned by the distance matrix service."""

    OK = "ok"
    NOT_FOUND = "not_found"
    ZERO_RESULTS = "zero_results"
    MAX_ROUTE_LENGTH_EXCEEDED = "max_route_length_exceeded"

    @classmethod
    def parse(cls, value: Union["RouteStatus", str]) -> "RouteStatus":
        """Accept enum members or service strings such as ``"ZERO_RESULTS"``."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise InvalidValueError("status", f"Unknown route status: {value!r}") from None


@dataclass(frozen=True)
class Measurement:
    """A measured quantity with its unit and the service's display text."""

    value: float
    unit: str
    text: Optional[str] = None


@dataclass(frozen=True)
class Route:
    """
    Immutable result for one origin/destination pair.

    Distances are in metres and durations in seconds. Measurements are only
    present when the status is OK.

    Attributes:
        origin: Place the route starts at.
        destination: Place the route ends at.
        status: Element status reported by the service.
        distance: Travel distance, if known.
        duration: Travel duration, if known.
        duration_in_traffic: Duration taking live traffic into account.
    """

    origin: Place
    destination: Place
    status: RouteStatus = RouteStatus.OK
    distance: Optional[Measurement] = None
    duration: Optional[Measurement] = None
    duration_in_traffic: Optional[Measurement] = None

    def __post_init__(self) -> None:
        """Validate that measurements only accompany OK routes."""
        object.__setattr__(self, "status", RouteStatus.parse(self.status))
        if self.status is not RouteStatus.OK:
            for name in ("distance", "duration", "duration_in_traffic"):
                if getattr(self, name) is not None:
                    raise InvalidValueError(
                        name,
                        f"{name} must be empty for a route with status {self.status.value}",
                    )

    @property
    def ok(self) -> bool:
        return self.status is RouteStatus.OK

    @property
    def distance_in_meters(self) -> Optional[float]:
        return self.distance.value if self.distance else None

    @property
    def distance_text(self) -> Optional[str]:
        return self.distance.text if self.distance else None

    @property
    def duration_in_seconds(self) -> Optional[float]:
        return self.duration.value if self.duration else None

    @property
    def duration_text(self) -> Optional[str]:
        return self.duration.text if self.duration else None

    @property
    def duration_in_traffic_in_seconds(self) -> Optional[float]:
        return self.duration_in_traffic.value if self.duration_in_traffic else None

    @classmethod
    def create(
        cls,
        origin: Place,
        destination: Place,
        status: Union[RouteStatus, str] = RouteStatus.OK,
        distance_in_meters: Optional[float] = None,
        duration_in_seconds: Optional[float] = None,
        distance_text: Optional[str] = None,
        duration_text: Optional[str] = None,
        duration_in_traffic_in_seconds: Optional[float] = None,
        duration_in_traffic_text: Optional[str] = None,
    ) -> "Route":
        """
        Factory method to create a Route from plain values.

        Args:
            origin: Origin place.
            destination: Destination place.
            status: RouteStatus or service status string.
            distance_in_meters: Distance value in metres.
            duration_in_seconds: Duration value in seconds.
            distance_text: Human readable distance, e.g. ``"2.1 km"``.
            duration_text: Human readable duration, e.g. ``"5 mins"``.
            duration_in_traffic_in_seconds: Traffic-aware duration in seconds.
            duration_in_traffic_text: Human readable traffic-aware duration.

        Returns:
            Validated Route instance.
        """
        distance = None
        if distance_in_meters is not None:
            distance = Measurement(float(distance_in_meters), "m", distance_text)

        duration = None
        if duration_in_seconds is not None:
            duration = Measurement(float(duration_in_seconds), "s", duration_text)

        in_traffic = None
        if duration_in_traffic_in_seconds is not None:
            in_traffic = Measurement(
                float(duration_in_traffic_in_seconds), "s", duration_in_traffic_text
            )

        return cls(
            origin=origin,
            destination=destination,
            status=RouteStatus.parse(status),
            distance=distance,
            duration=duration,
            duration_in_traffic=in_traffic,
        )


class RouteTableSchema(pa.DataFrameModel):
    """
    Schema for a flattened distance matrix.

    Each row represents one matrix cell. Measurement columns are nullable
    because non-OK routes carry no values.
    """

    origin_index: Series[int] = pa.Field(
        ge=0,
        description="Zero-based row of the route in the matrix",
    )
    destination_index: Series[int] = pa.Field(
        ge=0,
        description="Zero-based column of the route in the matrix",
    )
    origin: Series[str] = pa.Field(
        nullable=False,
        description="Origin place label",
    )
    destination: Series[str] = pa.Field(
        nullable=False,
        description="Destination place label",
    )
    status: Series[str] = pa.Field(
        isin=[s.value for s in RouteStatus],
        description="Element status reported by the service",
    )
    distance_in_meters: Series[float] = pa.Field(
        ge=0,
        nullable=True,
        description="Travel distance in metres (null for non-OK routes)",
    )
    duration_in_seconds: Series[float] = pa.Field(
        ge=0,
        nullable=True,
        description="Travel duration in seconds (null for non-OK routes)",
    )

    class Config:
        strict = False
        coerce = True
        name = "RouteTableSchema"
        ordered = True
