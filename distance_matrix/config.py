"""
Configuration for the distance_matrix package.

Holds the query options a matrix was requested with, loading of defaults
from environment variables, and logging setup.
"""

import logging
import os
import sys
from typing import Any, Dict, Literal, Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from distance_matrix.exceptions import InvalidValueError

ENV_PREFIX = "DISTANCE_MATRIX_"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

Mode = Literal["driving", "walking", "bicycling", "transit"]
Avoid = Literal["tolls", "highways", "ferries", "indoor"]
Units = Literal["metric", "imperial"]
TransitMode = Literal["bus", "subway", "train", "tram", "rail"]
TransitRoutingPreference = Literal["less_walking", "fewer_transfers"]
TrafficModel = Literal["best_guess", "pessimistic", "optimistic"]


class Configuration(BaseModel):
    """
    Query options for a distance matrix.

    Immutable; use ``with_changes`` to derive a modified copy.

    Attributes:
        mode: Travel mode.
        avoid: Route feature to avoid.
        units: Unit system for display texts.
        language: Language for display texts.
        departure_time: Unix timestamp or ``"now"``.
        arrival_time: Unix timestamp (transit only).
        transit_mode: Preferred transit vehicle.
        transit_routing_preference: Transit routing bias.
        traffic_model: Assumption used for time in traffic.
        api_key: Service API key.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    mode: Mode = "driving"
    avoid: Optional[Avoid] = None
    units: Units = "metric"
    language: Optional[str] = None
    departure_time: Optional[Union[int, Literal["now"]]] = None
    arrival_time: Optional[int] = None
    transit_mode: Optional[TransitMode] = None
    transit_routing_preference: Optional[TransitRoutingPreference] = None
    traffic_model: Optional[TrafficModel] = None
    api_key: Optional[str] = None

    @field_validator("departure_time", "arrival_time")
    @classmethod
    def _non_negative_timestamp(cls, value):
        if isinstance(value, int) and value < 0:
            raise ValueError("timestamp must be >= 0")
        return value

    @model_validator(mode="after")
    def _check_combinations(self) -> "Configuration":
        if self.departure_time is not None and self.arrival_time is not None:
            raise ValueError("departure_time and arrival_time are mutually exclusive")
        if self.traffic_model is not None:
            if self.mode != "driving":
                raise ValueError("traffic_model requires driving mode")
            if self.departure_time is None:
                raise ValueError("traffic_model requires departure_time")
        if self.mode != "transit":
            for name in ("arrival_time", "transit_mode", "transit_routing_preference"):
                if getattr(self, name) is not None:
                    raise ValueError(f"{name} requires transit mode")
        return self

    @classmethod
    def create(cls, **options: Any) -> "Configuration":
        """
        Factory method for creating a validated Configuration.

        Raises:
            InvalidValueError: If any option is unknown or invalid.
        """
        try:
            return cls(**options)
        except ValidationError as e:
            first = e.errors()[0]
            attribute = ".".join(str(p) for p in first["loc"]) or "configuration"
            raise InvalidValueError(attribute, str(e)) from e

    @classmethod
    def from_env(cls, **overrides: Any) -> "Configuration":
        """
        Build a Configuration from ``DISTANCE_MATRIX_*`` environment variables.

        A ``.env`` file is loaded first if present. Explicit keyword
        overrides win over the environment.
        """
        load_dotenv()
        options: Dict[str, Any] = {}
        for name in cls.model_fields:
            raw = os.getenv(f"{ENV_PREFIX}{name.upper()}")
            if raw:
                options[name] = raw
        for name in ("departure_time", "arrival_time"):
            if name in options and options[name].isdigit():
                options[name] = int(options[name])
        options.update(overrides)
        return cls.create(**options)

    def with_changes(self, **changes: Any) -> "Configuration":
        """Create a validated copy with the given options replaced."""
        return Configuration.create(**{**self.model_dump(), **changes})


def setup_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Configure console logging for the package logger.

    Safe to call repeatedly; only one handler is ever installed.

    Returns:
        The ``distance_matrix`` logger.
    """
    logger = logging.getLogger("distance_matrix")
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    return logger
