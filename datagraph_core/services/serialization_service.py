"""
    Serialization and deserialization service for DataGraph values.

    Supports configurable output via ``SerializationConfig``.

    Design Pattern: Strategy (serialization strategy is configurable)
    ─────────────────────────────────────────────────────────────────
    The ``SerializationConfig`` determines whether series carry their
    counts and structured path, and whether empty vocabularies are kept.

    Also provides Factory Method for deserialization:
        dict / JSON  →  DataGraphSerializer.deserialize  →  DataGraph
"""
import json
from typing import Any, Dict, List, Optional

from datagraph_api.exceptions import ParseError
from datagraph_api.models.data_graph import DataGraph
from datagraph_api.models.series import Series, SeriesPath, StringSeries
from datagraph_api.types import Field, Section, StringSeriesKind

from datagraph_core.graph_platform.config import SerializationConfig


class DataGraphSerializer:
    """
    Serialize / deserialize ``DataGraph`` instances.

    Usage:
        serializer = DataGraphSerializer(SerializationConfig(indent=None))
        data = serializer.serialize(data_graph)       # → dict
        json_str = serializer.to_json(data_graph)     # → str
        data_graph = serializer.deserialize(data)     # → DataGraph
    """

    def __init__(self, config: Optional[SerializationConfig] = None):
        self._config = config or SerializationConfig()

    @property
    def config(self) -> SerializationConfig:
        return self._config

    @config.setter
    def config(self, value: SerializationConfig) -> None:
        self._config = value

    # ── Serialization ────────────────────────────────────────────

    def serialize(self, data_graph: DataGraph) -> Dict[str, Any]:
        """
        Convert a DataGraph to a plain dictionary.

        Returns:
            dict with keys 'stringSeriesList', 'nodeSeriesList', 'edgeSeriesList'.
        """
        string_series = [
            s.to_dict() for s in data_graph.string_series_list
            if len(s) or not self._config.skip_empty_string_series
        ]
        return {
            'stringSeriesList': string_series,
            'nodeSeriesList': [self._serialize_series(s) for s in data_graph.node_series_list],
            'edgeSeriesList': [self._serialize_series(s) for s in data_graph.edge_series_list],
        }

    def to_json(self, data_graph: DataGraph) -> str:
        return json.dumps(self.serialize(data_graph), indent=self._config.indent)

    def _serialize_series(self, series: Series) -> Dict[str, Any]:
        result = series.to_dict()
        if not self._config.include_path:
            for key in ('section', 'field', 'attributeIndex', 'discriminator'):
                del result[key]
        if not self._config.include_counts:
            del result['used']
            del result['unused']
        return result

    # ── Deserialization ──────────────────────────────────────────

    def deserialize(self, data: Dict[str, Any]) -> DataGraph:
        """
        Rebuild a DataGraph from a dictionary produced by ``serialize``.

        Missing counts are recomputed from the sentinel entries; a missing
        structured path is recovered from the series name.

        Vocabularies dropped by ``skip_empty_string_series`` come back
        empty, so the result always carries every ``StringSeriesKind`` in
        declaration order.

        Raises:
            ParseError: If the document is not an object, or a vocabulary
                        or a series name is unknown.
        """
        if not isinstance(data, dict):
            raise ParseError(f"Invalid data graph document: expected an object, got {type(data).__name__}")
        try:
            vocabularies = {}
            for item in _objects(data.get('stringSeriesList', [])):
                vocabularies[StringSeriesKind(item['name'])] = tuple(item.get('values', []))
            string_series = tuple(
                StringSeries(kind, vocabularies.get(kind, ()))
                for kind in StringSeriesKind
            )
            node_series = tuple(self._deserialize_series(s) for s in _objects(data.get('nodeSeriesList', [])))
            edge_series = tuple(self._deserialize_series(s) for s in _objects(data.get('edgeSeriesList', [])))
        except (KeyError, ValueError, TypeError) as exc:
            raise ParseError(f"Invalid data graph document: {exc}") from exc

        return DataGraph(string_series, node_series, edge_series)

    def from_json(self, json_str: str) -> DataGraph:
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as exc:
            raise ParseError(f"Invalid JSON: {exc}") from exc
        return self.deserialize(data)

    @staticmethod
    def _deserialize_series(item: Dict[str, Any]) -> Series:
        if 'section' in item:
            path = SeriesPath(
                Section(item['section']),
                Field.from_label(item['field']),
                int(item['attributeIndex']),
                int(item['discriminator']),
            )
        else:
            path = parse_series_name(item['name'])

        values: List[int] = [int(v) for v in item.get('values', [])]
        unused = item.get('unused', sum(1 for v in values if v < 0))
        used = item.get('used', len(values) - unused)
        return Series(path, tuple(values), used, unused)


def _objects(items: Any) -> List[Dict[str, Any]]:
    if not isinstance(items, list) or not all(isinstance(i, dict) for i in items):
        raise TypeError("expected an array of objects")
    return items


def parse_series_name(name: str) -> SeriesPath:
    """
    Inverse of ``SeriesPath.name``: ``node_opt_value_one_2_0`` →
    (node, opt_value_one, 2, 0).
    """
    prefix, attribute_index, discriminator = name.rsplit('_', 2)
    section, field_label = prefix.split('_', 1)
    return SeriesPath(
        Section(section),
        Field.from_label(field_label),
        int(attribute_index),
        int(discriminator),
    )
