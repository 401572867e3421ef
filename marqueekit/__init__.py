"""Compact and indented JSON writing, and a TimeZoneDB client with date-name helpers."""

__version__ = "0.1.0"