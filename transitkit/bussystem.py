"""A bus system of stops and routes read from delimiter-separated values."""

from __future__ import annotations

from dataclasses import dataclass

from transitkit.dsv import DSVReader

INVALID_STOP_ID = 2**64 - 1


@dataclass(frozen=True)
class Stop:
    """A bus stop and the street map node it sits on."""

    id: int
    node_id: int


@dataclass(frozen=True)
class Route:
    """A named route visiting stops in order."""

    name: str
    stop_ids: tuple[int, ...] = ()

    def stop_count(self) -> int:
        """Return the number of stops on the route."""
        return len(self.stop_ids)

    def get_stop_id(self, index: int) -> int:
        """Return the stop id at index, or INVALID_STOP_ID if out of range."""
        if 0 <= index < len(self.stop_ids):
            return self.stop_ids[index]
        return INVALID_STOP_ID


def _parse_id(text: str) -> int:
    value = int(text)
    if value < 0:
        raise ValueError(f"id must not be negative, got {text!r}")
    return value


def _is_header(row: list[str]) -> bool:
    first = row[0]
    return not (first and first[0].isdigit())


class CSVBusSystem:
    """Stops and routes read from two DSV readers.

    Stop rows are ``stop_id, node_id``; rows whose first two columns are not
    both ids (such as a header) are skipped. Route rows are
    ``name, stop_id, ...``; a first row that does not start with a digit is
    taken as a header. Rows naming a route already seen extend it. Raises
    ValueError if a route row holds a stop id that is not a number.
    """

    def __init__(self, stop_reader: DSVReader, route_reader: DSVReader) -> None:
        self._stops: list[Stop] = []
        self._stop_map: dict[int, Stop] = {}
        for row in stop_reader:
            if len(row) < 2:
                continue
            try:
                stop = Stop(_parse_id(row[0]), _parse_id(row[1]))
            except ValueError:
                continue
            self._stops.append(stop)
            self._stop_map.setdefault(stop.id, stop)

        route_stops: dict[str, list[int]] = {}
        first_row = True
        for row in route_reader:
            if not row:
                continue
            if first_row:
                first_row = False
                if _is_header(row):
                    continue
            stops = route_stops.setdefault(row[0], [])
            stops.extend(_parse_id(value) for value in row[1:])

        self._routes = [Route(name, tuple(ids)) for name, ids in route_stops.items()]
        self._route_map = {route.name: route for route in self._routes}

    def stop_count(self) -> int:
        """Return the number of stops in the system."""
        return len(self._stops)

    def route_count(self) -> int:
        """Return the number of routes in the system."""
        return len(self._routes)

    def stop_by_index(self, index: int) -> Stop | None:
        """Return the stop at index in input order, or None."""
        if 0 <= index < len(self._stops):
            return self._stops[index]
        return None

    def stop_by_id(self, stop_id: int) -> Stop | None:
        """Return the first stop with this id, or None."""
        return self._stop_map.get(stop_id)

    def route_by_index(self, index: int) -> Route | None:
        """Return the route at index in order of first appearance, or None."""
        if 0 <= index < len(self._routes):
            return self._routes[index]
        return None

    def route_by_name(self, name: str) -> Route | None:
        """Return the route with this name, or None."""
        return self._route_map.get(name)