"""
    Graph model - the attributed property graph as read from a document.
    Read-only once built; referential integrity is not checked here.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from .attribute import AttributeMetadata
from .coercion import require_list, require_mapping
from .edge import Edge
from .node import Node


@dataclass(frozen=True)
class Graph:
    """
        Root input: attribute metadata, nodes and edges, all in
        declaration order.
    """
    attribute_metadata_list: Tuple[AttributeMetadata, ...] = field(default_factory=tuple)
    node_list: Tuple[Node, ...] = field(default_factory=tuple)
    edge_list: Tuple[Edge, ...] = field(default_factory=tuple)

    def get_number_of_nodes(self) -> int:
        return len(self.node_list)

    def get_number_of_edges(self) -> int:
        return len(self.edge_list)

    def __repr__(self) -> str:
        return (f"Graph(metadata={len(self.attribute_metadata_list)}, "
                f"nodes={len(self.node_list)}, edges={len(self.edge_list)})")

    @classmethod
    def from_dict(cls, data: Any) -> "Graph":
        """
        Build a Graph from a decoded JSON document.

        Args:
            data: Mapping with ``attributeMetadataList``, ``nodeList`` and
                  ``edgeList`` keys. Missing lists are treated as empty.

        Returns:
            The populated Graph.

        Raises:
            ParseError: If the document shape is wrong or an identifying
                        field is missing.
        """
        data = require_mapping(data, "$")
        metadata = tuple(
            AttributeMetadata.from_dict(item, f"attributeMetadataList[{i}]")
            for i, item in enumerate(require_list(data, "attributeMetadataList", "$"))
        )
        nodes = tuple(
            Node.from_dict(item, f"nodeList[{i}]")
            for i, item in enumerate(require_list(data, "nodeList", "$"))
        )
        edges = tuple(
            Edge.from_dict(item, f"edgeList[{i}]")
            for i, item in enumerate(require_list(data, "edgeList", "$"))
        )
        return cls(metadata, nodes, edges)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'attributeMetadataList': [m.to_dict() for m in self.attribute_metadata_list],
            'nodeList': [n.to_dict() for n in self.node_list],
            'edgeList': [e.to_dict() for e in self.edge_list],
        }
