"""
    Node model - representation of a node in the graph
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .attribute import Attribute, attributes_from_list
from .coercion import require_id, require_mapping


@dataclass(frozen=True)
class Node:
    """
    A node in the graph.
    Each node has an ID and an ordered list of attributes.
    """
    id: str
    attribute_list: Tuple[Attribute, ...] = field(default_factory=tuple)

    def find_attribute(self, metadata_id: str) -> Optional[Attribute]:
        """
        First attribute referencing ``metadata_id``, in declaration order.
        Later attributes with the same metadata id are ignored.
        """
        for attribute in self.attribute_list:
            if attribute.id == metadata_id:
                return attribute
        return None

    def __repr__(self) -> str:
        ids = ", ".join(a.id for a in self.attribute_list)
        return f"Node({self.id}, [{ids}])"

    @classmethod
    def from_dict(cls, data: Any, path: str = "node") -> "Node":
        data = require_mapping(data, path)
        return cls(
            id=require_id(data, "id", path),
            attribute_list=attributes_from_list(data, path),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'attributeList': [a.to_dict() for a in self.attribute_list],
        }
