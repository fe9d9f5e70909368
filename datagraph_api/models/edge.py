"""
    Edge model - representation of an edge between nodes.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .attribute import Attribute, attributes_from_list
from .coercion import require_id, require_mapping


@dataclass(frozen=True)
class Edge:
    """
        Class for an edge between two nodes.
        Endpoints are node ids; they are resolved against the node list
        only when the data graph is assembled.
    """
    from_node: str
    to_node: str
    attribute_list: Tuple[Attribute, ...] = field(default_factory=tuple)

    def find_attribute(self, metadata_id: str) -> Optional[Attribute]:
        """First attribute referencing ``metadata_id`` (same rule as Node)"""
        for attribute in self.attribute_list:
            if attribute.id == metadata_id:
                return attribute
        return None

    def get_source_target(self) -> Tuple[str, str]:
        """Get source and target node ids"""
        return self.from_node, self.to_node

    def __repr__(self) -> str:
        return f"Edge({self.from_node} -> {self.to_node})"

    @classmethod
    def from_dict(cls, data: Any, path: str = "edge") -> "Edge":
        data = require_mapping(data, path)
        return cls(
            from_node=require_id(data, "fromNode", path),
            to_node=require_id(data, "toNode", path),
            attribute_list=attributes_from_list(data, path),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'fromNode': self.from_node,
            'toNode': self.to_node,
            'attributeList': [a.to_dict() for a in self.attribute_list],
        }
