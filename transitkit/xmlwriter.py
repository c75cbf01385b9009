"""Writing XML entities to a data sink."""

from __future__ import annotations

from transitkit.datasink import DataSink
from transitkit.xmlentity import EntityType, XMLEntity

_ESCAPES = str.maketrans({
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
    '"': "&quot;",
    "'": "&apos;",
})


def _format_attributes(entity: XMLEntity) -> str:
    return "".join(f' {key}="{value}"' for key, value in entity.attributes)


class XMLWriter:
    """Writes XML entities to a data sink, tracking open elements."""

    def __init__(self, sink: DataSink) -> None:
        self._sink = sink
        self._open: list[str] = []

    def flush(self) -> None:
        """Write end tags for every element still open, innermost first."""
        while self._open:
            self._sink.write(f"</{self._open[-1]}>")
            self._open.pop()

    def write_entity(self, entity: XMLEntity) -> None:
        """Write one entity.

        Raises ValueError for an end element that does not close the
        innermost open element.
        """
        if entity.type is EntityType.START_ELEMENT:
            output = f"<{entity.name_data}{_format_attributes(entity)}>"
            self._open.append(entity.name_data)
        elif entity.type is EntityType.END_ELEMENT:
            if not self._open or self._open[-1] != entity.name_data:
                raise ValueError(f"end element {entity.name_data!r} does not match an open element")
            output = f"</{entity.name_data}>"
            self._open.pop()
        elif entity.type is EntityType.COMPLETE_ELEMENT:
            output = f"<{entity.name_data}{_format_attributes(entity)}/>"
        else:
            output = entity.name_data.translate(_ESCAPES)
        self._sink.write(output)