from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RoutingSettings:
    bus_wait_time: float  # minutes
    bus_velocity: float  # km/h

    def __post_init__(self) -> None:
        if self.bus_wait_time < 0.0:
            raise ValueError(f"Invalid bus wait time: {self.bus_wait_time}")
        if self.bus_velocity <= 0.0:
            raise ValueError(f"Invalid bus velocity: {self.bus_velocity}")

    def travel_time_min(self, distance_m: float) -> float:
        """Minutes needed to cover ``distance_m`` meters at bus velocity."""

        return distance_m / 1000.0 / self.bus_velocity * 60.0
