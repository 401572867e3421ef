"""Client for the TimeZoneDB service and helpers for naming date parts."""

from __future__ import annotations

import json
import logging
import socket
import time
from contextlib import closing
from datetime import datetime, timezone
from typing import Any, Callable

log = logging.getLogger(__name__)

SERVER_NAME = "api.timezonedb.com"
SERVER_PORT = 80
FALLBACK_TIME = 20

_DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "June",
    "July", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def extract_json(response: str) -> str:
    """Return the JSON object text found at the end of a raw HTTP response.

    Characters are kept from each ``{`` up to and including the following
    ``}``; the result is then cut to start at the last ``{`` kept.
    """
    recorded: list[str] = []
    record = False
    for char in response:
        if char == "{":
            record = True
        if record:
            recorded.append(char)
        if char == "}":
            record = False
    text = "".join(recorded)
    start = text.rfind("{")
    return text[start:] if start >= 0 else ""


def _as_datetime(timestamp: float) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


def day_name(timestamp: float) -> str:
    """Return the English name of the weekday of ``timestamp``."""
    return _DAY_NAMES[_as_datetime(timestamp).weekday()]


def month_name(timestamp: float) -> str:
    """Return the short English name of the month of ``timestamp``."""
    return _MONTH_NAMES[_as_datetime(timestamp).month - 1]


def am_pm(timestamp: float) -> str:
    """Return ``"PM"`` from noon onwards, ``"AM"`` otherwise."""
    hour = _as_datetime(timestamp).hour
    if hour >= 12:
        return "PM"
    return "AM"


def zero_pad(number: int) -> str:
    """Prefix numbers below ten with a zero."""
    return f"0{number}" if number < 10 else str(number)


def _timestamp_of(document: Any) -> int:
    if not isinstance(document, dict):
        return 0
    value = document.get("timestamp", 0)
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return 0
    return 0


class TimeDB:
    """Fetches the local time for a position from TimeZoneDB."""

    def __init__(
        self,
        api_key: str,
        *,
        connect: Callable[..., Any] = socket.create_connection,
        timeout: float = 10.0,
    ) -> None:
        self.api_key = api_key
        self.lat = ""
        self.lon = ""
        self.millis_at_update: float | None = None
        self._connect = connect
        self._timeout = timeout

    def update_config(self, api_key: str, lat: str, lon: str) -> None:
        self.api_key = api_key
        self.lat = lat
        self.lon = lon

    def request_path(self) -> str:
        return (
            f"/v2.1/get-time-zone?key={self.api_key}&format=json"
            f"&by=position&lat={self.lat}&lng={self.lon}"
        )

    def _request(self) -> bytes:
        lines = [
            f"GET {self.request_path()} HTTP/1.1",
            f"Host: {SERVER_NAME}",
            "User-Agent: ArduinoWiFi/1.1",
            "Connection: close",
            "",
            "",
        ]
        return "\r\n".join(lines).encode("latin-1")

    def get_time(self) -> int:
        """Return the local epoch time, or ``FALLBACK_TIME`` when none is had."""
        log.info("Getting Time Data for %s,%s", self.lat, self.lon)
        try:
            connection = self._connect((SERVER_NAME, SERVER_PORT), self._timeout)
        except OSError as error:
            log.warning("connection for time data failed: %s", error)
            return FALLBACK_TIME

        chunks: list[bytes] = []
        with closing(connection):
            try:
                connection.sendall(self._request())
                while chunk := connection.recv(4096):
                    chunks.append(chunk)
            except OSError as error:
                log.warning("reading time data failed: %s", error)

        body = extract_json(b"".join(chunks).decode("latin-1"))
        log.debug("time data: %s", body)
        try:
            document = json.loads(body)
        except ValueError:
            document = None
        self.millis_at_update = time.monotonic() * 1000.0

        timestamp = _timestamp_of(document)
        return FALLBACK_TIME if timestamp == 0 else timestamp