"""Character sources that readers pull their input from."""

from __future__ import annotations

from abc import ABC, abstractmethod


class DataSource(ABC):
    """A sequential source of characters."""

    @abstractmethod
    def end(self) -> bool:
        """Return True once every character has been consumed."""

    @abstractmethod
    def get(self) -> str | None:
        """Consume and return the next character, or None at the end."""

    @abstractmethod
    def peek(self) -> str | None:
        """Return the next character without consuming it, or None at the end."""

    @abstractmethod
    def read(self, count: int) -> str:
        """Consume up to ``count`` characters; an empty string means the end."""


class StringDataSource(DataSource):
    """A data source backed by an in-memory string."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._index = 0

    def end(self) -> bool:
        return self._index >= len(self._text)

    def get(self) -> str | None:
        if self.end():
            return None
        ch = self._text[self._index]
        self._index += 1
        return ch

    def peek(self) -> str | None:
        if self.end():
            return None
        return self._text[self._index]

    def read(self, count: int) -> str:
        if count <= 0:
            return ""
        chunk = self._text[self._index:self._index + count]
        self._index += len(chunk)
        return chunk