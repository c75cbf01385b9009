"""Reading and writing delimiter-separated values."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from transitkit.datasink import DataSink
from transitkit.datasource import DataSource

_QUOTE = '"'


def _check_delimiter(delimiter: str) -> None:
    if len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")


class DSVReader:
    """Reads rows of delimiter-separated values from a data source.

    Values may be wrapped in double quotes, inside which the delimiter and
    newlines are taken literally and a doubled quote stands for one quote.
    """

    def __init__(self, source: DataSource, delimiter: str) -> None:
        _check_delimiter(delimiter)
        self._source = source
        self._delimiter = delimiter

    def end(self) -> bool:
        """Return True once every row has been read."""
        return self._source.end()

    def read_row(self) -> list[str] | None:
        """Read the next row, one string per column, or None at the end."""
        if self._source.end():
            return None
        row: list[str] = []
        value: list[str] = []
        quoted = False
        while (ch := self._source.get()) is not None:
            if ch == _QUOTE:
                if quoted and self._source.peek() == _QUOTE:
                    value.append(_QUOTE)
                    self._source.get()
                else:
                    quoted = not quoted
            elif ch == self._delimiter and not quoted:
                row.append("".join(value))
                value = []
            elif ch == "\n" and not quoted:
                row.append("".join(value))
                return row
            else:
                value.append(ch)
        if value or row:
            row.append("".join(value))
        return row or None

    def __iter__(self) -> Iterator[list[str]]:
        while (row := self.read_row()) is not None:
            yield row


class DSVWriter:
    """Writes rows of delimiter-separated values to a data sink."""

    def __init__(self, sink: DataSink, delimiter: str, quote_all: bool = False) -> None:
        _check_delimiter(delimiter)
        self._sink = sink
        self._delimiter = delimiter
        self._quote_all = quote_all

    def _format_value(self, value: str) -> str:
        needs_quote = (
            self._quote_all
            or self._delimiter in value
            or _QUOTE in value
            or "\n" in value
        )
        if not needs_quote:
            return value
        return _QUOTE + value.replace(_QUOTE, _QUOTE * 2) + _QUOTE

    def write_row(self, row: Sequence[str]) -> None:
        """Write one row followed by a newline."""
        line = self._delimiter.join(self._format_value(value) for value in row)
        self._sink.write(line + "\n")