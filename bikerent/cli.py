"""Interactive menu for the rental desk."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable
from typing import TextIO

from bikerent.models import BikeType
from bikerent.system import RentalError, RentalSystem

MENU = (
    "\n=== Bike Rental System ===\n"
    "1. Add Bike\n"
    "2. List Bikes\n"
    "3. Register Rider\n"
    "4. List Riders\n"
    "5. Rent Bike\n"
    "6. Return Bike\n"
    "7. View Active Rentals\n"
    "8. Show Analytics\n"
    "0. Exit\n"
    "Enter choice: "
)

_INT = re.compile(r"[+-]?\d+")
_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_WORD = re.compile(r"\S+")


class _BadNumber(ValueError):
    """The next input is not a number."""


class _Input:
    """Whitespace-separated and line reads over a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def _fill(self) -> None:
        if not self._pending:
            self._pending = self._stream.readline()
            if not self._pending:
                raise EOFError

    def _skip_space(self) -> None:
        while True:
            self._fill()
            self._pending = self._pending.lstrip()
            if self._pending:
                return

    def _take(self, pattern: re.Pattern[str]) -> str:
        self._skip_space()
        match = pattern.match(self._pending)
        if match is None:
            raise _BadNumber(self._pending)
        self._pending = self._pending[match.end():]
        return match.group()

    def word(self) -> str:
        return self._take(_WORD)

    def integer(self) -> int:
        return int(self._take(_INT))

    def real(self) -> float:
        return float(self._take(_FLOAT))

    def skip_char(self) -> None:
        self._fill()
        self._pending = self._pending[1:]

    def line(self) -> str:
        self._fill()
        text, _, self._pending = self._pending.partition("\n")
        return text

    def discard_line(self) -> None:
        self._pending = ""


_Say = Callable[[str], None]


def _add_bike(system: RentalSystem, reader: _Input, say: _Say) -> None:
    say("Enter Make: ")
    make = reader.word()
    say("Enter Model: ")
    model = reader.word()
    say("Enter Type (0: Standard, 1: Premium): ")
    type_code = reader.integer()
    say("Enter Rate per Day: ")
    rate = reader.real()
    bike_type = BikeType.PREMIUM if type_code == 1 else BikeType.STANDARD
    bike = system.add_bike(make, model, bike_type, rate)
    say(f"Bike added successfully. ID: {bike.id}\n")


def _list_bikes(system: RentalSystem, reader: _Input, say: _Say) -> None:
    say(system.format_bikes())


def _add_rider(system: RentalSystem, reader: _Input, say: _Say) -> None:
    say("Enter Name: ")
    reader.skip_char()
    name = reader.line()
    say("Enter Contact: ")
    contact = reader.word()
    rider = system.add_rider(name, contact)
    say(f"Rider registered successfully. ID: {rider.id}\n")


def _list_riders(system: RentalSystem, reader: _Input, say: _Say) -> None:
    say(system.format_riders())


def _rent_bike(system: RentalSystem, reader: _Input, say: _Say) -> None:
    say("Enter Bike ID: ")
    bike_id = reader.integer()
    say("Enter Rider ID: ")
    rider_id = reader.integer()
    rental = system.rent_bike(bike_id, rider_id)
    rider = system.find_rider(rental.rider_id)
    name = rider.name if rider is not None else ""
    say(f"Bike rented successfully to {name}.\n")


def _return_bike(system: RentalSystem, reader: _Input, say: _Say) -> None:
    say("Enter Rental ID to return: ")
    rental_id = reader.integer()
    receipt = system.return_bike(rental_id)
    if receipt.late_penalty:
        say("Notice: Rental exceeded 7 days. Late penalty applied.\n")
    say("Bike returned successfully.\n")
    say(f"Total Days: {receipt.days}\n")
    say(f"Total Cost: ${receipt.cost:g}\n")


def _active_rentals(system: RentalSystem, reader: _Input, say: _Say) -> None:
    say(system.format_active_rentals())


def _analytics(system: RentalSystem, reader: _Input, say: _Say) -> None:
    stats = system.analytics()
    say("\n--- Analytics ---\n")
    say(f"Total Revenue: ${stats.total_revenue:g}\n")
    say(f"Active Rentals: {stats.active_count}\n")
    say(f"Completed Rentals: {stats.completed_count}\n")


_ACTIONS: dict[int, Callable[[RentalSystem, _Input, _Say], None]] = {
    1: _add_bike,
    2: _list_bikes,
    3: _add_rider,
    4: _list_riders,
    5: _rent_bike,
    6: _return_bike,
    7: _active_rentals,
    8: _analytics,
}


def run(
    system: RentalSystem,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Drive the menu until the user exits or input ends; return the exit code."""
    reader = _Input(sys.stdin if stdin is None else stdin)
    out = sys.stdout if stdout is None else stdout
    say: _Say = out.write

    try:
        while True:
            say(MENU)
            try:
                choice = reader.integer()
            except _BadNumber:
                reader.discard_line()
                say("Invalid input. Please enter a number.\n")
                continue
            if choice == 0:
                say("Exiting...\n")
                return 0
            action = _ACTIONS.get(choice)
            if action is None:
                say("Invalid choice. Try again.\n")
                continue
            try:
                action(system, reader, say)
            except _BadNumber:
                reader.discard_line()
                say("Invalid input. Please enter a number.\n")
            except RentalError as error:
                say(f"Error: {error}\n")
    except EOFError:
        return 0


def main(argv: list[str] | None = None) -> int:
    """Start the interactive rental desk."""
    parser = argparse.ArgumentParser(prog="bikerent", description="Bike rental desk.")
    parser.add_argument(
        "--data-dir", default="data", help="directory holding the CSV data files"
    )
    args = parser.parse_args(argv)
    with RentalSystem(args.data_dir) as system:
        return run(system, sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())