"""Output sinks for rendering and exporting results."""

from bank_core.sinks.console import ConsoleSink
from bank_core.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "JsonFileSink"]
