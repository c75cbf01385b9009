"""A street map of nodes and ways read from OpenStreetMap XML."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from transitkit.xmlentity import EntityType, XMLEntity
from transitkit.xmlreader import XMLReader

INVALID_NODE_ID = 2**64 - 1
INVALID_WAY_ID = 2**64 - 1

Location = tuple[float, float]


def _attribute_key(attributes: dict[str, str], index: int) -> str:
    keys = sorted(attributes)
    if 0 <= index < len(keys):
        return keys[index]
    return ""


@dataclass
class Node:
    """A point on the map with a latitude/longitude location."""

    id: int
    location: Location
    attributes: dict[str, str] = field(default_factory=dict)

    def attribute_count(self) -> int:
        """Return the number of attributes attached to the node."""
        return len(self.attributes)

    def get_attribute_key(self, index: int) -> str:
        """Return the key at index in sorted key order, or "" if out of range."""
        return _attribute_key(self.attributes, index)

    def has_attribute(self, key: str) -> bool:
        """Return True if the attribute is attached to the node."""
        return key in self.attributes

    def get_attribute(self, key: str) -> str:
        """Return the attribute's value, or "" if it is not attached."""
        return self.attributes.get(key, "")


@dataclass
class Way:
    """An ordered sequence of node ids, such as a street."""

    id: int
    node_ids: list[int] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)

    def node_count(self) -> int:
        """Return the number of nodes in the way."""
        return len(self.node_ids)

    def get_node_id(self, index: int) -> int:
        """Return the node id at index, or INVALID_NODE_ID if out of range."""
        if 0 <= index < len(self.node_ids):
            return self.node_ids[index]
        return INVALID_NODE_ID

    def attribute_count(self) -> int:
        """Return the number of attributes attached to the way."""
        return len(self.attributes)

    def get_attribute_key(self, index: int) -> str:
        """Return the key at index in sorted key order, or "" if out of range."""
        return _attribute_key(self.attributes, index)

    def has_attribute(self, key: str) -> bool:
        """Return True if the attribute is attached to the way."""
        return key in self.attributes

    def get_attribute(self, key: str) -> str:
        """Return the attribute's value, or "" if it is not attached."""
        return self.attributes.get(key, "")


def _children(reader: XMLReader, entity: XMLEntity) -> Iterator[XMLEntity]:
    """Yield the entities inside an element until its end element."""
    if entity.type is not EntityType.START_ELEMENT:
        return
    while (child := reader.read_entity()) is not None:
        if child.type is EntityType.END_ELEMENT:
            return
        if child.type is not EntityType.CHAR_DATA:
            yield child


def _tag(entity: XMLEntity) -> tuple[str, str]:
    return entity.attribute_value("k"), entity.attribute_value("v")


class OpenStreetMap:
    """Nodes and ways read from an OpenStreetMap XML document.

    Nodes are indexed in ascending id order; ways in document order.
    Raises ValueError if a node or way carries a missing or malformed id
    or coordinate.
    """

    def __init__(self, reader: XMLReader) -> None:
        self._nodes: dict[int, Node] = {}
        self._ways: list[Way] = []
        self._way_map: dict[int, Way] = {}
        for entity in reader:
            if entity.type not in (EntityType.START_ELEMENT, EntityType.COMPLETE_ELEMENT):
                continue
            if entity.name_data == "node":
                self._read_node(reader, entity)
            elif entity.name_data == "way":
                self._read_way(reader, entity)
        self._node_order = [self._nodes[node_id] for node_id in sorted(self._nodes)]

    def _read_node(self, reader: XMLReader, entity: XMLEntity) -> None:
        node_id = int(entity.attribute_value("id"))
        location = (float(entity.attribute_value("lat")), float(entity.attribute_value("lon")))
        attributes: dict[str, str] = {}
        for child in _children(reader, entity):
            if child.name_data == "tag":
                key, value = _tag(child)
                attributes[key] = value
        self._nodes[node_id] = Node(node_id, location, attributes)

    def _read_way(self, reader: XMLReader, entity: XMLEntity) -> None:
        way_id = int(entity.attribute_value("id"))
        node_ids: list[int] = []
        attributes: dict[str, str] = {}
        for child in _children(reader, entity):
            if child.name_data == "nd":
                node_ids.append(int(child.attribute_value("ref")))
            elif child.name_data == "tag":
                key, value = _tag(child)
                attributes[key] = value
        way = Way(way_id, node_ids, attributes)
        self._way_map[way_id] = way
        self._ways.append(way)

    def node_count(self) -> int:
        """Return the number of distinct nodes."""
        return len(self._nodes)

    def way_count(self) -> int:
        """Return the number of ways read."""
        return len(self._ways)

    def node_by_index(self, index: int) -> Node | None:
        """Return the node at index in ascending id order, or None."""
        if 0 <= index < len(self._node_order):
            return self._node_order[index]
        return None

    def node_by_id(self, node_id: int) -> Node | None:
        """Return the node with this id, or None."""
        return self._nodes.get(node_id)

    def way_by_index(self, index: int) -> Way | None:
        """Return the way at index in document order, or None."""
        if 0 <= index < len(self._ways):
            return self._ways[index]
        return None

    def way_by_id(self, way_id: int) -> Way | None:
        """Return the way with this id, or None."""
        return self._way_map.get(way_id)