"""Bike rental management: bikes, riders, rentals and analytics stored in CSV files."""

__version__ = "1.0.0"
__all__ = ["models", "system", "cli"]