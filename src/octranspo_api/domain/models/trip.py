"""Trip domain model."""

from dataclasses import dataclass

from octranspo_api.domain.models.optional_scalar import OptionalScalar


@dataclass(frozen=True)
class Trip:
    """A single predicted trip arriving at a stop."""

    trip_destination: str
    trip_start_time: str  # Opaque text, e.g. "11:13"; not a fixed-width clock
    adjusted_schedule_time: int  # Minutes until arrival
    adjustment_age: float  # Minutes since the GPS adjustment, -1 when scheduled only
    last_trip_of_schedule: OptionalScalar[bool]
    bus_type: str
    latitude: OptionalScalar[float]
    longitude: OptionalScalar[float]
    gps_speed: OptionalScalar[float]
