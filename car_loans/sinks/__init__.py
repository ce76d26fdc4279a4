"""Output sinks for exporting loan data."""

from car_loans.sinks.json_file import JsonFileSink

__all__ = ["JsonFileSink"]
