import io
import json
import math

import pytest

from marqueekit.sinks import StreamSink, StringSink
from marqueekit.writer import (
    JsonWriter,
    dumps,
    measure_length,
    measure_pretty_length,
    pretty_dumps,
    pretty_print_to,
    print_to,
    print_to_buffer,
    serialize,
)

SAMPLES = [
    {"a": 1},
    [1, -2, "three", True, False, None],
    {"nested": {"list": [1, [2, [3]]], "text": 'quote " tab\t line\n'}},
    [],
    {},
    "plain",
    -42,
]


def test_compact_object():
    assert dumps({"a": 1}) == '{"a":1}'


def test_pretty_object():
    assert pretty_dumps({"a": 1}) == '{\r\n  "a": 1\r\n}'


def test_none_is_null():
    assert dumps(None) == "null"


@pytest.mark.parametrize("value", SAMPLES)
def test_round_trip(value):
    assert json.loads(dumps(value)) == value


@pytest.mark.parametrize("value", SAMPLES)
def test_pretty_round_trip(value):
    assert json.loads(pretty_dumps(value)) == value


@pytest.mark.parametrize("value", [3.14, 0.5, 1e20, 6.02e23, 2.5e-8, -1234.5678, 0.0])
def test_float_round_trip(value):
    assert math.isclose(float(dumps(value)), value, rel_tol=1e-8)


def test_special_floats():
    assert dumps(float("nan")) == "NaN"
    assert dumps(float("-inf")) == "-Infinity"
    assert dumps(float("inf")) == "Infinity"


@pytest.mark.parametrize("value", SAMPLES)
def test_measure_matches_output(value):
    assert measure_length(value) == len(dumps(value))
    assert measure_pretty_length(value) == len(pretty_dumps(value))


def test_print_to_counts():
    sink = StringSink()
    assert print_to([1, 2], sink) == len(sink.value)


def test_print_to_stream():
    stream = io.StringIO()
    count = pretty_print_to({"k": [1]}, StreamSink(stream))
    assert count == len(stream.getvalue())
    assert json.loads(stream.getvalue()) == {"k": [1]}


@pytest.mark.parametrize("size", [1, 2, 4, 10, 100])
def test_print_to_buffer_truncates(size):
    value = {"hello": "world"}
    assert print_to_buffer(value, size) == dumps(value)[: size - 1]


def test_writer_escapes():
    sink = StringSink()
    writer = JsonWriter(sink)
    writer.write_string('a"b\\c')
    assert json.loads(sink.value) == 'a"b\\c'
    assert writer.bytes_written == len(sink.value)


def test_writer_decimals_are_zero_padded():
    sink = StringSink()
    writer = JsonWriter(sink)
    writer.write_integer(1)
    writer.write_decimals(5, 3)
    assert float(sink.value) == 1.005


def test_writer_rejects_negative_integer():
    with pytest.raises(ValueError):
        JsonWriter(StringSink()).write_integer(-1)


def test_serialize_rejects_unknown_types():
    with pytest.raises(TypeError):
        serialize({1, 2}, JsonWriter(StringSink()))
    with pytest.raises(TypeError):
        dumps({1: "x"})