# bikerent

A small, menu-driven manager for a bike rental shop. It keeps track of the
bikes you own, the riders you have registered and every rental, and it
reports the revenue from completed rentals. All data lives in plain CSV
files.

## Installing

```
pip install .
```

## Running

```
bikerent
```

or, to keep the data somewhere other than `./data`:

```
bikerent --data-dir /path/to/shop
```

This opens the main menu:

```
=== Bike Rental System ===
1. Add Bike
2. List Bikes
3. Register Rider
4. List Riders
5. Rent Bike
6. Return Bike
7. View Active Rentals
8. Show Analytics
0. Exit
```

Data is kept in `bikes.csv`, `riders.csv` and `rentals.csv` inside the data
directory (`data` under the current working directory by default). Each
change is written straight away, and everything is written once more when
the menu is left with `0` or when input ends.

## Rules

- Every bike is either `STANDARD` or `PREMIUM` and has a rate per day.
- A bike can be rented only while it is `AVAILABLE`, and a rider can hold
  only one active rental at a time.
- On return, the charge is the number of started days (at least one) times
  the bike's daily rate. Rentals longer than 7 days carry a 20% surcharge.
- The analytics view shows total revenue from completed rentals and counts
  of active and completed rentals.

## Using it from Python

`bikerent.system.RentalSystem` holds the data; refused operations raise
`bikerent.system.RentalError`. `rent_bike` and `return_bike` take an
optional `now` timestamp (seconds since the epoch) and use the current time
when it is left out.

```python
from bikerent.models import BikeType
from bikerent.system import RentalSystem, RentalError

system = RentalSystem("data")
bike = system.add_bike("Trek", "FX2", BikeType.STANDARD, 15.0)
rider = system.add_rider("Ada Example", "ada@example.com")

rental = system.rent_bike(bike.id, rider.id, now=1_700_000_000)
receipt = system.return_bike(rental.id, now=1_700_000_000 + 3 * 86400)
print(receipt.days, receipt.cost)  # 3 45.0

try:
    system.return_bike(rental.id, now=1_700_000_000 + 4 * 86400)
except RentalError as err:
    print(err)  # Rental is already completed.

print(system.analytics())
system.save()
```

`RentalSystem` is also a context manager that saves all files on exit.
`format_bikes`, `format_riders` and `format_active_rentals` return the same
text tables the menu prints. `bikerent.cli.run(system, stdin, stdout)` drives
the menu over any pair of text streams.

## What it does not do

- There is no way to edit or delete bikes, riders or rentals, and no menu
  entry to put a bike into `MAINTENANCE`; such changes have to be made in the
  CSV files by hand.
- The CSV files are written without quoting, so names, makes or contacts
  that contain a comma will not load back correctly.
- Start dates in the active rentals table are shown as raw timestamps.