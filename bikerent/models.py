"""Core records of the rental domain: bikes, riders and rentals."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from enum import Enum

SECONDS_PER_DAY = 60 * 60 * 24


class BikeType(Enum):
    """Pricing class of a bike."""

    STANDARD = "STANDARD"
    PREMIUM = "PREMIUM"

    @classmethod
    def parse(cls, text: str) -> BikeType:
        """Return the type named by ``text``; anything unknown is STANDARD."""
        return cls.PREMIUM if text == cls.PREMIUM.value else cls.STANDARD

    def __str__(self) -> str:
        return self.value


class BikeState(Enum):
    """Where a bike currently stands in its life cycle."""

    AVAILABLE = "AVAILABLE"
    RENTED = "RENTED"
    MAINTENANCE = "MAINTENANCE"

    @classmethod
    def parse(cls, text: str) -> BikeState:
        """Return the state named by ``text``; anything unknown is AVAILABLE."""
        if text == cls.RENTED.value:
            return cls.RENTED
        if text == cls.MAINTENANCE.value:
            return cls.MAINTENANCE
        return cls.AVAILABLE

    def __str__(self) -> str:
        return self.value


@dataclass
class Bike:
    """A bike in the fleet."""

    id: int
    make: str
    model: str
    bike_type: BikeType
    rate_per_day: float
    state: BikeState = BikeState.AVAILABLE


@dataclass
class Rider:
    """A registered rider."""

    id: int
    name: str
    contact: str


def current_timestamp() -> int:
    """Return the current time as whole seconds since the Unix epoch."""
    return int(time.time())


def days_between(start: int, end: int) -> int:
    """Return the number of started days between two timestamps."""
    return int(math.ceil((end - start) / SECONDS_PER_DAY))


@dataclass
class Rental:
    """A rental of one bike by one rider; ``end_date`` is 0 while active."""

    id: int
    bike_id: int
    rider_id: int
    start_date: int
    end_date: int = 0
    cost: float = 0.0
    is_active: bool = True

    def complete(self, end_date: int, cost: float) -> None:
        """Close the rental at ``end_date`` with the charged ``cost``."""
        self.end_date = end_date
        self.cost = cost
        self.is_active = False

    def duration_days(self, now: int | None = None) -> int:
        """Return the rental length in started days.

        An active rental is measured up to ``now`` (the current time by
        default); a completed one up to its end date.
        """
        if self.is_active:
            until = current_timestamp() if now is None else now
        else:
            until = self.end_date
        return days_between(self.start_date, until)