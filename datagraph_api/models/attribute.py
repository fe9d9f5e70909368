"""
    Attribute models - attribute metadata (the declared type) and
    attribute instances attached to nodes and edges.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Tuple

from ..types import TAG_SEPARATOR
from .coercion import optional_text, require_id, require_list, require_mapping, text_list


@dataclass(frozen=True)
class AttributeMetadata:
    """
    Declared attribute type, shared by zero or more Attribute instances.
    """
    id: str
    name: str = ""
    alternate_name: str = ""
    unit_text: str = ""
    tag_set: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def joined_tags(self) -> str:
        return TAG_SEPARATOR.join(self.tag_set)

    @classmethod
    def from_dict(cls, data: Any, path: str = "attributeMetadata") -> "AttributeMetadata":
        """
        Build metadata from a decoded JSON object.

        Raises:
            ParseError: If the object is malformed or has no ``id``.
        """
        data = require_mapping(data, path)
        return cls(
            id=require_id(data, "id", path),
            name=optional_text(data, "name", path),
            alternate_name=optional_text(data, "alternateName", path),
            unit_text=optional_text(data, "unitText", path),
            tag_set=text_list(data, "tagSet", path),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'alternateName': self.alternate_name,
            'unitText': self.unit_text,
            'tagSet': list(self.tag_set),
        }


@dataclass(frozen=True)
class Attribute:
    """
    Concrete value attached to a node or an edge.
    ``id`` references an AttributeMetadata; the reference is not checked here.
    """
    id: str
    value: str = ""
    optional_value_list: Tuple[str, ...] = field(default_factory=tuple)
    tag_set: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def joined_tags(self) -> str:
        return TAG_SEPARATOR.join(self.tag_set)

    def optional_value(self, slot: int) -> str:
        """Trimmed optional value at ``slot``, or '' when absent."""
        if slot < len(self.optional_value_list):
            return self.optional_value_list[slot].strip()
        return ""

    @classmethod
    def from_dict(cls, data: Any, path: str = "attribute") -> "Attribute":
        data = require_mapping(data, path)
        return cls(
            id=require_id(data, "id", path),
            value=optional_text(data, "value", path),
            optional_value_list=text_list(data, "optionalValueList", path),
            tag_set=text_list(data, "tagSet", path),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'value': self.value,
            'optionalValueList': list(self.optional_value_list),
            'tagSet': list(self.tag_set),
        }


def attributes_from_list(data: Mapping[str, Any], path: str) -> Tuple[Attribute, ...]:
    """Parse the ``attributeList`` of a node or an edge."""
    items = require_list(data, "attributeList", path)
    return tuple(
        Attribute.from_dict(item, f"{path}.attributeList[{i}]")
        for i, item in enumerate(items)
    )
