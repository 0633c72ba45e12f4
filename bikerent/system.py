"""The rental desk: fleet, riders and rentals kept in CSV files."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

from bikerent.models import (
    Bike,
    BikeState,
    BikeType,
    Rental,
    Rider,
    current_timestamp,
    days_between,
)

BIKE_FILE = "bikes.csv"
RIDER_FILE = "riders.csv"
RENTAL_FILE = "rentals.csv"

LATE_PENALTY_DAYS = 7
LATE_PENALTY_FACTOR = 1.20

_T = TypeVar("_T")


class RentalError(Exception):
    """A rental operation was refused."""


@dataclass(frozen=True)
class ReturnReceipt:
    """What a completed return charged."""

    rental: Rental
    days: int
    cost: float
    late_penalty: bool


@dataclass(frozen=True)
class Analytics:
    """Totals over all rentals."""

    total_revenue: float
    active_count: int
    completed_count: int


def _number(value: float) -> str:
    return f"{value:g}"


def _split(line: str) -> list[str]:
    fields = line.split(",")
    if len(fields) > 1 and fields[-1] == "":
        fields.pop()
    return fields


def _parse_bike(fields: list[str]) -> Bike:
    state = fields[5] if len(fields) > 5 else ""
    return Bike(
        id=int(fields[0]),
        make=fields[1],
        model=fields[2],
        bike_type=BikeType.parse(fields[3]),
        rate_per_day=float(fields[4]),
        state=BikeState.parse(state),
    )


def _parse_rider(fields: list[str]) -> Rider:
    return Rider(id=int(fields[0]), name=fields[1], contact=fields[2])


def _parse_rental(fields: list[str]) -> Rental:
    return Rental(
        id=int(fields[0]),
        bike_id=int(fields[1]),
        rider_id=int(fields[2]),
        start_date=int(fields[3]),
        end_date=int(fields[4]),
        cost=float(fields[5]),
        is_active=fields[6] == "1",
    )


class RentalSystem:
    """Bikes, riders and rentals persisted under ``data_dir``."""

    def __init__(self, data_dir: str | Path = "data") -> None:
        self.data_dir = Path(data_dir)
        self.bikes: list[Bike] = list(self._load(BIKE_FILE, 5, _parse_bike))
        self.riders: list[Rider] = list(self._load(RIDER_FILE, 3, _parse_rider))
        self.rentals: list[Rental] = list(
            self._load(RENTAL_FILE, 7, _parse_rental)
        )
        self._next_bike_id = self.bikes[-1].id + 1 if self.bikes else 1
        self._next_rider_id = self.riders[-1].id + 1 if self.riders else 1
        self._next_rental_id = self.rentals[-1].id + 1 if self.rentals else 1

    def __enter__(self) -> RentalSystem:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.save()

    # --- persistence ---

    def _load(
        self, name: str, min_fields: int, parse: Callable[[list[str]], _T]
    ) -> Iterator[_T]:
        try:
            handle = open(self.data_dir / name, encoding="utf-8")
        except OSError:
            return
        with handle:
            for raw in handle:
                line = raw.rstrip("\n")
                if not line:
                    continue
                fields = _split(line)
                if len(fields) >= min_fields:
                    yield parse(fields)

    def _write(self, name: str, lines: Iterable[str]) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        text = "".join(f"{line}\n" for line in lines)
        (self.data_dir / name).write_text(text, encoding="utf-8")

    def _save_bikes(self) -> None:
        self._write(
            BIKE_FILE,
            (
                f"{b.id},{b.make},{b.model},{b.bike_type},"
                f"{_number(b.rate_per_day)},{b.state}"
                for b in self.bikes
            ),
        )

    def _save_riders(self) -> None:
        self._write(RIDER_FILE, (f"{r.id},{r.name},{r.contact}" for r in self.riders))

    def _save_rentals(self) -> None:
        self._write(
            RENTAL_FILE,
            (
                f"{r.id},{r.bike_id},{r.rider_id},{r.start_date},{r.end_date},"
                f"{_number(r.cost)},{'1' if r.is_active else '0'}"
                for r in self.rentals
            ),
        )

    def save(self) -> None:
        """Write all three data files."""
        self._save_bikes()
        self._save_riders()
        self._save_rentals()

    # --- bikes ---

    def add_bike(
        self, make: str, model: str, bike_type: BikeType, rate: float
    ) -> Bike:
        """Add a bike to the fleet and persist it."""
        bike = Bike(self._next_bike_id, make, model, bike_type, rate)
        self._next_bike_id += 1
        self.bikes.append(bike)
        self._save_bikes()
        return bike

    def find_bike(self, bike_id: int) -> Bike | None:
        """Return the bike with ``bike_id``, or None."""
        return next((b for b in self.bikes if b.id == bike_id), None)

    def format_bikes(self) -> str:
        """Return the fleet as a text table."""
        lines = [
            "",
            "--- Available Bikes ---",
            f"{'ID':<5}{'Make':<15}{'Model':<15}{'Type':<10}{'Rate':<10}State",
        ]
        lines.extend(
            f"{b.id:<5}{b.make:<15}{b.model:<15}{str(b.bike_type):<10}"
            f"{_number(b.rate_per_day):<10}{b.state}"
            for b in self.bikes
        )
        return "\n".join(lines) + "\n"

    # --- riders ---

    def add_rider(self, name: str, contact: str) -> Rider:
        """Register a rider and persist it."""
        rider = Rider(self._next_rider_id, name, contact)
        self._next_rider_id += 1
        self.riders.append(rider)
        self._save_riders()
        return rider

    def find_rider(self, rider_id: int) -> Rider | None:
        """Return the rider with ``rider_id``, or None."""
        return next((r for r in self.riders if r.id == rider_id), None)

    def format_riders(self) -> str:
        """Return the riders as a text table."""
        lines = ["", "--- Rider List ---", f"{'ID':<5}{'Name':<20}Contact"]
        lines.extend(f"{r.id:<5}{r.name:<20}{r.contact}" for r in self.riders)
        return "\n".join(lines) + "\n"

    # --- rentals ---

    def rent_bike(
        self, bike_id: int, rider_id: int, now: int | None = None
    ) -> Rental:
        """Start a rental of an available bike for a rider without one."""
        bike = self.find_bike(bike_id)
        rider = self.find_rider(rider_id)
        if bike is None:
            raise RentalError("Bike ID not found.")
        if rider is None:
            raise RentalError("Rider ID not found.")
        if bike.state is not BikeState.AVAILABLE:
            raise RentalError(
                f"Bike is not available (Current state: {bike.state})."
            )
        if any(r.rider_id == rider_id and r.is_active for r in self.rentals):
            raise RentalError("Rider already has an active rental.")

        bike.state = BikeState.RENTED
        start = current_timestamp() if now is None else now
        rental = Rental(self._next_rental_id, bike_id, rider_id, start)
        self._next_rental_id += 1
        self.rentals.append(rental)
        self._save_bikes()
        self._save_rentals()
        return rental

    def return_bike(self, rental_id: int, now: int | None = None) -> ReturnReceipt:
        """Close an active rental and charge for it."""
        rental = next((r for r in self.rentals if r.id == rental_id), None)
        if rental is None:
            raise RentalError("Rental ID not found.")
        if not rental.is_active:
            raise RentalError("Rental is already completed.")
        bike = self.find_bike(rental.bike_id)
        if bike is None:
            raise RentalError("Bike data consistency error.")

        end = current_timestamp() if now is None else now
        days = days_between(rental.start_date, end)
        if days == 0:
            days = 1
        cost = days * bike.rate_per_day
        late = days > LATE_PENALTY_DAYS
        if late:
            cost *= LATE_PENALTY_FACTOR

        rental.complete(end, cost)
        bike.state = BikeState.AVAILABLE
        self._save_bikes()
        self._save_rentals()
        return ReturnReceipt(rental, days, cost, late)

    def active_rentals(self) -> list[Rental]:
        """Return the rentals still open."""
        return [r for r in self.rentals if r.is_active]

    def format_active_rentals(self) -> str:
        """Return the open rentals as a text table."""
        lines = [
            "",
            "--- Active Rentals ---",
            f"{'RentalID':<10}{'BikeID':<10}{'RiderID':<10}Start Date",
        ]
        lines.extend(
            f"{r.id:<10}{r.bike_id:<10}{r.rider_id:<10}{r.start_date}"
            for r in self.active_rentals()
        )
        return "\n".join(lines) + "\n"

    def analytics(self) -> Analytics:
        """Return revenue and counts over all rentals."""
        completed = [r for r in self.rentals if not r.is_active]
        return Analytics(
            total_revenue=sum((r.cost for r in completed), 0.0),
            active_count=len(self.rentals) - len(completed),
            completed_count=len(completed),
        )