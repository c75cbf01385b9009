"""The unit of XML that readers produce and writers consume."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class EntityType(Enum):
    """The kind of an XML entity."""

    START_ELEMENT = "start"
    END_ELEMENT = "end"
    CHAR_DATA = "chardata"
    COMPLETE_ELEMENT = "complete"


@dataclass
class XMLEntity:
    """An element boundary or a run of character data.

    For elements ``name_data`` is the tag name; for character data it is the text.
    """

    type: EntityType
    name_data: str = ""
    attributes: list[tuple[str, str]] = field(default_factory=list)

    def attribute_exists(self, name: str) -> bool:
        """Return True if an attribute with this name is present."""
        return any(key == name for key, _ in self.attributes)

    def attribute_value(self, name: str) -> str:
        """Return the attribute's value, or an empty string if it is absent."""
        return next((value for key, value in self.attributes if key == name), "")

    def set_attribute(self, name: str, value: str) -> None:
        """Set an attribute, replacing it in place if it already exists."""
        if not name:
            raise ValueError("attribute name must not be empty")
        for index, (key, _) in enumerate(self.attributes):
            if key == name:
                self.attributes[index] = (name, value)
                return
        self.attributes.append((name, value))