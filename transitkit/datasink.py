"""Character sinks that writers push their output to."""

from __future__ import annotations

from abc import ABC, abstractmethod


class DataSink(ABC):
    """A sequential destination for characters."""

    @abstractmethod
    def put(self, ch: str) -> None:
        """Append a single character."""

    @abstractmethod
    def write(self, data: str) -> None:
        """Append a string of characters."""


class StringDataSink(DataSink):
    """A data sink that collects everything written into a string."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    @property
    def string(self) -> str:
        """Everything written so far."""
        return "".join(self._parts)

    def put(self, ch: str) -> None:
        if len(ch) != 1:
            raise ValueError(f"put expects a single character, got {ch!r}")
        self._parts.append(ch)

    def write(self, data: str) -> None:
        self._parts.append(data)