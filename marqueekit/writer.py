"""Compact and indented JSON serialisation onto text sinks."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from marqueekit.floatparts import FloatParts
from marqueekit.sinks import (
    BoundedStringSink,
    CountingSink,
    IndentedPrint,
    Prettyfier,
    Sink,
    StringSink,
)

_ESCAPES = {'"': '"', "\\": "\\", "\b": "b", "\f": "f", "\n": "n", "\r": "r", "\t": "t"}


class JsonWriter:
    """Writes JSON tokens to a sink and counts what the sink accepted."""

    def __init__(self, sink: Sink) -> None:
        self._sink = sink
        self._length = 0

    @property
    def bytes_written(self) -> int:
        return self._length

    def begin_array(self) -> None:
        self.write_raw("[")

    def end_array(self) -> None:
        self.write_raw("]")

    def begin_object(self) -> None:
        self.write_raw("{")

    def end_object(self) -> None:
        self.write_raw("}")

    def write_colon(self) -> None:
        self.write_raw(":")

    def write_comma(self) -> None:
        self.write_raw(",")

    def write_boolean(self, value: bool) -> None:
        self.write_raw("true" if value else "false")

    def write_string(self, value: str | None) -> None:
        if value is None:
            self.write_raw("null")
            return
        self.write_raw('"')
        for char in value:
            self.write_char(char)
        self.write_raw('"')

    def write_char(self, char: str) -> None:
        special = _ESCAPES.get(char)
        if special:
            self.write_raw("\\")
            self.write_raw(special)
        else:
            self.write_raw(char)

    def write_float(self, value: float, double: bool = True) -> None:
        if math.isnan(value):
            self.write_raw("NaN")
            return
        if value < 0.0:
            self.write_raw("-")
            value = -value
        if math.isinf(value):
            self.write_raw("Infinity")
            return

        parts = FloatParts.from_value(value, double)
        self.write_integer(parts.integral)
        if parts.decimal_places:
            self.write_decimals(parts.decimal, parts.decimal_places)
        if parts.exponent < 0:
            self.write_raw("e-")
            self.write_integer(-parts.exponent)
        elif parts.exponent > 0:
            self.write_raw("e")
            self.write_integer(parts.exponent)

    def write_integer(self, value: int) -> None:
        if value < 0:
            raise ValueError("write_integer takes a non-negative value")
        self.write_raw(str(value))

    def write_decimals(self, value: int, width: int) -> None:
        digits = f"{value % 10 ** width:0{width}d}" if width > 0 else ""
        self.write_raw("." + digits)

    def write_raw(self, text: str) -> None:
        self._length += self._sink.print(text)


def serialize(value: Any, writer: JsonWriter) -> None:
    """Write ``value`` (dict, list, tuple, str, bool, int, float or None)."""
    if value is None or isinstance(value, str):
        writer.write_string(value)
    elif isinstance(value, bool):
        writer.write_boolean(value)
    elif isinstance(value, int):
        if value < 0:
            writer.write_raw("-")
        writer.write_integer(abs(value))
    elif isinstance(value, float):
        writer.write_float(value)
    elif isinstance(value, Mapping):
        writer.begin_object()
        for position, (key, item) in enumerate(value.items()):
            if position:
                writer.write_comma()
            if not isinstance(key, str):
                raise TypeError(f"object keys must be str, not {type(key).__name__}")
            writer.write_string(key)
            writer.write_colon()
            serialize(item, writer)
        writer.end_object()
    elif isinstance(value, (list, tuple)):
        writer.begin_array()
        for position, item in enumerate(value):
            if position:
                writer.write_comma()
            serialize(item, writer)
        writer.end_array()
    else:
        raise TypeError(f"cannot serialise {type(value).__name__}")


def print_to(value: Any, sink: Sink) -> int:
    """Write compact JSON to ``sink`` and return the count it accepted."""
    writer = JsonWriter(sink)
    serialize(value, writer)
    return writer.bytes_written


def pretty_print_to(value: Any, sink: Sink) -> int:
    """Write indented JSON to ``sink`` and return the count it accepted."""
    indented = sink if isinstance(sink, IndentedPrint) else IndentedPrint(sink)
    return print_to(value, Prettyfier(indented))


def dumps(value: Any) -> str:
    sink = StringSink()
    print_to(value, sink)
    return sink.value


def pretty_dumps(value: Any) -> str:
    sink = StringSink()
    pretty_print_to(value, sink)
    return sink.value


def print_to_buffer(value: Any, size: int) -> str:
    """Return compact JSON cut to what fits in a buffer of ``size`` characters."""
    sink = BoundedStringSink(size)
    print_to(value, sink)
    return sink.value


def measure_length(value: Any) -> int:
    return print_to(value, CountingSink())


def measure_pretty_length(value: Any) -> int:
    return pretty_print_to(value, CountingSink())