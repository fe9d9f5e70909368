"""
    DataGraph - column-oriented, dictionary-encoded form of a Graph.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ..types import StringSeriesKind
from .series import Series, StringSeries


@dataclass(frozen=True)
class DataGraph:
    """
        Final output of the assembler. A pure data value: string
        vocabularies in ``StringSeriesKind`` order plus node-scoped and
        edge-scoped integer series.
    """
    string_series_list: Tuple[StringSeries, ...] = field(default_factory=tuple)
    node_series_list: Tuple[Series, ...] = field(default_factory=tuple)
    edge_series_list: Tuple[Series, ...] = field(default_factory=tuple)

    def get_string_series(self, kind: StringSeriesKind) -> StringSeries:
        for series in self.string_series_list:
            if series.kind is kind:
                return series
        raise KeyError(kind.value)

    def find_node_series(self, name: str) -> Optional[Series]:
        return next((s for s in self.node_series_list if s.name == name), None)

    def find_edge_series(self, name: str) -> Optional[Series]:
        return next((s for s in self.edge_series_list if s.name == name), None)

    @property
    def node_count(self) -> int:
        return len(self.get_string_series(StringSeriesKind.NODE_ID))

    @property
    def edge_count(self) -> int:
        # Endpoint series always exist, one entry per edge
        if self.edge_series_list:
            return len(self.edge_series_list[0])
        return 0

    def __repr__(self) -> str:
        return (f"DataGraph(strings={len(self.string_series_list)}, "
                f"node_series={len(self.node_series_list)}, "
                f"edge_series={len(self.edge_series_list)})")

    def to_dict(self) -> Dict[str, Any]:
        return {
            'stringSeriesList': [s.to_dict() for s in self.string_series_list],
            'nodeSeriesList': [s.to_dict() for s in self.node_series_list],
            'edgeSeriesList': [s.to_dict() for s in self.edge_series_list],
        }
