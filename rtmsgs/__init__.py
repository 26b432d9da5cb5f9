"""Little-endian wire encoding for robot messages, times and durations."""

__version__ = "0.1.0"