# marqueekit

A small toolkit with no dependencies outside the standard library, in two
parts:

* a JSON writer that produces compact output, or indented output through a
  character-level pretty printer;
* a client for the TimeZoneDB web service that fetches the current local
  time for a latitude and longitude, and helpers that turn a timestamp into
  a day name, a month name and an AM/PM marker.

## Installation

```
pip install .
```

Tests run with `pytest` after `pip install .[test]`.

## Writing JSON

```python
from marqueekit.writer import dumps, pretty_dumps, measure_length, print_to_buffer

data = {"name": "clock", "values": [1, -2, 3.5, True, None]}

dumps(data)
# '{"name":"clock","values":[1,-2,3.5,true,null]}'

print(pretty_dumps(data))   # lines end with "\r\n", indented by two spaces

measure_length(data)        # number of characters dumps() would produce
print_to_buffer(data, 10)   # at most 9 characters: one is kept for a terminator
```

`serialize` accepts dicts (and other mappings) with `str` keys, lists,
tuples, `str`, `bool`, `int`, `float` and `None`; anything else, or a
non-string key, raises `TypeError`.

Floats are written with up to nine digits after the decimal point (fewer as
the integral part grows), trailing zeros dropped. Values of `1e7` and above,
or positive values of `1e-5` and below, are written in exponent notation,
e.g. `1e7` or `1.5e-6`. NaN and infinities are written as `NaN`, `Infinity`
and `-Infinity`, which is not standard JSON.

For finer control, `print_to(value, sink)` and `pretty_print_to(value, sink)`
write to any object with a `print(text)` method that returns the number of
characters it accepted, and return the total accepted. `marqueekit.sinks`
provides:

* `StringSink` – collects text in its `value` attribute;
* `BoundedStringSink(size)` – keeps at most `size - 1` characters;
* `StreamSink(stream)` – writes to any text stream;
* `CountingSink` – discards text and counts it;
* `IndentedPrint` and `Prettyfier` – decorators that indent lines and turn
  compact JSON text into indented text. `IndentedPrint` supports up to 15
  levels and a tab size below 7 (`set_tab_size`).

A `JsonWriter(sink)` can also be driven token by token (`begin_object`,
`write_string`, `write_colon`, `write_float`, `write_comma`, ...), with the
count in `bytes_written`.

Float decomposition lives in `marqueekit.floatparts`:
`FloatParts.from_value(x)` splits a finite, non-negative value into
`integral`, `decimal`, `decimal_places` and base-ten `exponent`; passing
`double=False` works in single precision instead. `normalize` and
`make_float` scale by binary powers of ten.

## Time zone lookups

```python
from marqueekit.timedb import TimeDB, day_name, month_name, am_pm, zero_pad

db = TimeDB("placeholder")
db.update_config("placeholder", "51.5", "-0.12")
timestamp = db.get_time()

day_name(timestamp), month_name(timestamp), am_pm(timestamp)
zero_pad(7)   # '07'
```

`get_time()` sends a plain HTTP request to `api.timezonedb.com` on port 80
and returns the `timestamp` field of the reply, or the fallback value `20`
(`FALLBACK_TIME`) when the service cannot be reached or reports no time.
The service's timestamp is already shifted to local time, so `day_name`,
`month_name` and `am_pm` read it as UTC. Month names are short (`"Jan"`,
`"June"`, `"July"`, `"Sep"`, ...). The `connect` and `timeout` keyword
arguments of `TimeDB` choose how the connection is opened.
`extract_json(response)` pulls the last JSON object out of a raw response.

## What it does not do

The writer only writes JSON; it has no parser. The time client only fetches
a timestamp: there is no clock, scrolling display or other front end that
shows the time, and no command-line program.