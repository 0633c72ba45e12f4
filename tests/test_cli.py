import io
import sys

import pytest

from bikerent.cli import main, run
from bikerent.models import BikeState, BikeType
from bikerent.system import RentalSystem


def _run(system, text):
    out = io.StringIO()
    code = run(system, io.StringIO(text), out)
    return code, out.getvalue()


@pytest.fixture
def system(tmp_path):
    return RentalSystem(tmp_path)


@pytest.fixture
def stocked(system):
    system.add_bike("Trek", "FX", BikeType.PREMIUM, 12.5)
    system.add_rider("Jane Doe", "jane@example.com")
    return system


def test_exit(system):
    code, out = _run(system, "0\n")
    assert code == 0
    assert "=== Bike Rental System ===" in out
    assert out.endswith("Exiting...\n")


def test_end_of_input_stops(system):
    code, out = _run(system, "")
    assert code == 0
    assert "Exiting" not in out


def test_add_bike(system):
    code, out = _run(system, "1\nTrek\nFX\n1\n12.5\n0\n")
    assert "Bike added successfully. ID: 1" in out
    bike = system.bikes[0]
    assert (bike.make, bike.model, bike.bike_type) == ("Trek", "FX", BikeType.PREMIUM)
    assert bike.rate_per_day == 12.5


def test_add_standard_bike(system):
    _run(system, "1 Giant Escape 0 8\n0\n")
    assert system.bikes[0].bike_type is BikeType.STANDARD
    assert system.bikes[0].rate_per_day == 8.0


def test_register_rider_keeps_spaces(system):
    _, out = _run(system, "3\nJane Doe\njane@example.com\n0\n")
    assert "Rider registered successfully. ID: 1" in out
    assert system.riders[0].name == "Jane Doe"
    assert system.riders[0].contact == "jane@example.com"


def test_rent_and_return(stocked):
    _, out = _run(stocked, "5\n1\n1\n6\n1\n0\n")
    assert "Bike rented successfully to Jane Doe." in out
    assert "Bike returned successfully." in out
    assert "Total Cost: $" in out
    assert stocked.rentals[0].is_active is False
    assert stocked.find_bike(1).state is BikeState.AVAILABLE


def test_rent_error_is_reported(system):
    _, out = _run(system, "5\n1\n1\n0\n")
    assert "Error: Bike ID not found." in out
    assert system.rentals == []


def test_return_error_is_reported(system):
    _, out = _run(system, "6\n3\n0\n")
    assert "Error: Rental ID not found." in out


def test_invalid_input(system):
    _, out = _run(system, "abc\n0\n")
    assert "Invalid input. Please enter a number." in out
    assert out.endswith("Exiting...\n")


def test_invalid_number_in_command(system):
    _, out = _run(system, "5\nxyz\n0\n")
    assert "Invalid input. Please enter a number." in out
    assert system.rentals == []


def test_invalid_choice(system):
    _, out = _run(system, "9\n0\n")
    assert "Invalid choice. Try again." in out


def test_listings(stocked):
    _, out = _run(stocked, "2\n4\n7\n0\n")
    assert "--- Available Bikes ---" in out
    assert "--- Rider List ---" in out
    assert "--- Active Rentals ---" in out
    assert "Jane Doe" in out


def test_analytics(stocked):
    _, out = _run(stocked, "8\n0\n")
    assert "--- Analytics ---" in out
    assert "Active Rentals: 0" in out
    assert "Completed Rentals: 0" in out


def test_main_saves_data(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("0\n"))
    code = main(["--data-dir", str(tmp_path)])
    assert code == 0
    assert "Exiting..." in capsys.readouterr().out
    assert (tmp_path / "bikes.csv").exists()
    assert (tmp_path / "rentals.csv").exists()