"""Text sinks used by the JSON writer."""

from __future__ import annotations

from typing import Protocol, TextIO


class Sink(Protocol):
    def print(self, text: str) -> int: ...


class CountingSink:
    """Discards text and reports how much it was given."""

    def __init__(self) -> None:
        self.count = 0

    def print(self, text: str) -> int:
        self.count += len(text)
        return len(text)


class StringSink:
    """Collects text in a growing string."""

    def __init__(self, initial: str = "") -> None:
        self.value = initial

    def print(self, text: str) -> int:
        self.value += text
        return len(text)


class BoundedStringSink:
    """Collects text into a buffer of ``size`` characters, one kept for the terminator."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("buffer size must be at least 1")
        self._capacity = size - 1
        self._parts: list[str] = []
        self._length = 0

    @property
    def value(self) -> str:
        return "".join(self._parts)

    def print(self, text: str) -> int:
        room = self._capacity - self._length
        accepted = text[: max(room, 0)]
        if accepted:
            self._parts.append(accepted)
            self._length += len(accepted)
        return len(accepted)


class StreamSink:
    """Writes text to a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def print(self, text: str) -> int:
        self._stream.write(text)
        return len(text)


class IndentedPrint:
    """Indents every line written to the wrapped sink."""

    MAX_LEVEL = 15
    MAX_TAB_SIZE = 7

    def __init__(self, sink: Sink) -> None:
        self._sink = sink
        self.level = 0
        self.tab_size = 2
        self._is_new_line = True

    def print(self, text: str) -> int:
        written = 0
        for char in text:
            if self._is_new_line:
                written += sum(self._sink.print(" ") for _ in range(self.level * self.tab_size))
            written += self._sink.print(char)
            self._is_new_line = char == "\n"
        return written

    def indent(self) -> None:
        if self.level < self.MAX_LEVEL:
            self.level += 1

    def unindent(self) -> None:
        if self.level > 0:
            self.level -= 1

    def set_tab_size(self, size: int) -> None:
        if size < self.MAX_TAB_SIZE:
            self.tab_size = size & self.MAX_TAB_SIZE


class Prettyfier:
    """Turns compact JSON text into indented JSON text."""

    def __init__(self, sink: IndentedPrint) -> None:
        self._sink = sink
        self._previous = ""
        self._in_string = False

    def print(self, text: str) -> int:
        written = 0
        for char in text:
            if self._in_string:
                written += self._string_char(char)
            else:
                written += self._markup_char(char)
            self._previous = char
        return written

    def _in_empty_block(self) -> bool:
        return self._previous in ("{", "[")

    def _string_char(self, char: str) -> int:
        if char == '"' and self._previous != "\\":
            self._in_string = False
        return self._sink.print(char)

    def _markup_char(self, char: str) -> int:
        if char in "{[":
            return self._indent_if_needed() + self._sink.print(char)
        if char in "}]":
            return self._unindent_if_needed() + self._sink.print(char)
        if char == ":":
            return self._sink.print(": ")
        if char == ",":
            return self._sink.print(",\r\n")
        if char == '"':
            self._in_string = True
        return self._indent_if_needed() + self._sink.print(char)

    def _indent_if_needed(self) -> int:
        if not self._in_empty_block():
            return 0
        self._sink.indent()
        return self._sink.print("\r\n")

    def _unindent_if_needed(self) -> int:
        if self._in_empty_block():
            return 0
        self._sink.unindent()
        return self._sink.print("\r\n")