"""Output sinks for exporting generated listings."""

from property_gen.sinks.console import ConsoleSink
from property_gen.sinks.csv_file import CsvFileSink
from property_gen.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "CsvFileSink", "JsonFileSink"]
