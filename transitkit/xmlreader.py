"""Reading XML from a data source as a stream of entities."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from contextlib import suppress
from xml.parsers import expat

from transitkit.datasource import DataSource
from transitkit.xmlentity import EntityType, XMLEntity

_CHUNK_SIZE = 4096
_XML_WHITESPACE = " \t\n\r"


class XMLReader:
    """Reads XML entities from a data source.

    A start element immediately followed by its matching end element is
    reported as a single complete element. Whitespace-only character data
    is dropped.
    """

    def __init__(self, source: DataSource) -> None:
        self._source = source
        self._pending: deque[XMLEntity] = deque()
        self._finished = False
        self._parser = expat.ParserCreate()
        self._parser.ordered_attributes = True
        self._parser.StartElementHandler = self._on_start
        self._parser.EndElementHandler = self._on_end
        self._parser.CharacterDataHandler = self._on_chardata

    def _on_start(self, name: str, attributes: list[str]) -> None:
        entity = XMLEntity(EntityType.START_ELEMENT, name)
        for key, value in zip(attributes[::2], attributes[1::2]):
            entity.set_attribute(key, value)
        self._pending.append(entity)

    def _on_end(self, name: str) -> None:
        self._pending.append(XMLEntity(EntityType.END_ELEMENT, name))

    def _on_chardata(self, data: str) -> None:
        if data.strip(_XML_WHITESPACE):
            self._pending.append(XMLEntity(EntityType.CHAR_DATA, data))

    def end(self) -> bool:
        """Return True once every entity has been read."""
        return self._finished and not self._pending

    def _next_entity(self) -> XMLEntity | None:
        while not self._finished and not self._pending:
            chunk = self._source.read(_CHUNK_SIZE)
            if not chunk:
                self._finished = True
                with suppress(expat.ExpatError):
                    self._parser.Parse("", True)
                break
            try:
                self._parser.Parse(chunk, False)
            except expat.ExpatError:
                self._finished = True
                return None
        if not self._pending:
            return None
        entity = self._pending.popleft()
        if entity.type is EntityType.START_ELEMENT and self._pending:
            following = self._pending[0]
            if following.type is EntityType.END_ELEMENT and following.name_data == entity.name_data:
                self._pending.popleft()
                entity.type = EntityType.COMPLETE_ELEMENT
        return entity

    def read_entity(self, skip_cdata: bool = False) -> XMLEntity | None:
        """Return the next entity, or None when there are no more.

        With ``skip_cdata`` only element entities are returned.
        """
        while (entity := self._next_entity()) is not None:
            if skip_cdata and entity.type is EntityType.CHAR_DATA:
                continue
            return entity
        return None

    def __iter__(self) -> Iterator[XMLEntity]:
        while (entity := self.read_entity()) is not None:
            yield entity