"""
    Data graph assembly — turns a Graph into a DataGraph.

    Design Pattern: Template Method
    ─────────────────────────────────
    ``to_data_graph`` fixes the order of the phases:

        1. global value dictionary   (every primary / optional value)
        2. unit-text vocabulary      (metadata unit texts)
        3. edge endpoint resolution  (against the node-id vocabulary)
        4. per-attribute series      (transformer registry, nodes then edges)
        5. string series + series    → immutable DataGraph

    All dictionaries and rows live only for one call, so one assembler
    can be reused across graphs and threads.
"""
import logging
from typing import List, Optional, Tuple

from datagraph_api.models.data_graph import DataGraph
from datagraph_api.models.graph import Graph
from datagraph_api.models.series import Series, SeriesPath, StringSeries
from datagraph_api.types import SENTINEL, Discriminator, Field, Section, StringSeriesKind

from datagraph_core.graph_platform.config import DataGraphConfig

from .dictionary_service import StringDictionary, build_dictionary, build_positional_index
from .exceptions import ConfigurationError
from .tabular_service import TabularService
from .transformer_registry import TransformerRegistry, default_transformers

logger = logging.getLogger(__name__)

FROM_NODE_PATH = SeriesPath(Section.EDGE, Field.FROM_NODE, 0, Discriminator.NODE_REF)
TO_NODE_PATH = SeriesPath(Section.EDGE, Field.TO_NODE, 0, Discriminator.NODE_REF)


class DataGraphAssembler:
    """
    Pure ``(Graph, DataGraphConfig) -> DataGraph`` pipeline.

    Usage:
        assembler = DataGraphAssembler(DataGraphConfig(supported_tags=['alpha']))
        data_graph = assembler.to_data_graph(graph)
    """

    def __init__(self, config: Optional[DataGraphConfig] = None):
        self._config = config or DataGraphConfig()
        self._config.validate()

    @property
    def config(self) -> DataGraphConfig:
        return self._config

    def to_data_graph(self, graph: Graph) -> DataGraph:
        """
        Build the DataGraph of ``graph``.

        Raises:
            ConfigurationError: If caller transformers clash with each
                                other or with the built-in columns.
            TransformerError:   If a transformer fails; no partial
                                DataGraph is returned.
        """
        tabular_service = TabularService(self._config.max_optional_values)

        # 1. Global value dictionary
        tabular = tabular_service.to_tabular_graph(graph)
        strings = build_dictionary(tabular_service.value_strings(tabular))

        # 2. Unit-text vocabulary
        unit_texts = build_dictionary(
            m.unit_text.strip() for m in graph.attribute_metadata_list
        )

        # 3. Edge endpoints
        node_ids = build_positional_index([n.id for n in graph.node_list])
        endpoint_series = self._resolve_endpoints(graph, node_ids)

        # 4. Per-attribute series
        attribute_count = len(graph.attribute_metadata_list)
        node_registry = self._build_registry(
            Section.NODE, self._config.node_transformers,
            attribute_count, tabular_service, strings, unit_texts)
        edge_registry = self._build_registry(
            Section.EDGE, self._config.edge_transformers,
            attribute_count, tabular_service, strings, unit_texts)

        node_series = node_registry.generate_all(
            tabular_service.to_entity_table(graph, Section.NODE),
            self._config.max_workers)
        edge_series = edge_registry.generate_all(
            tabular_service.to_entity_table(graph, Section.EDGE),
            self._config.max_workers)

        # 5. Assemble
        metadata = graph.attribute_metadata_list
        string_series = (
            StringSeries(StringSeriesKind.SUPPORTED_TAGS, tuple(self._config.supported_tags)),
            StringSeries(StringSeriesKind.UNIT_TEXT, unit_texts.vocabulary),
            StringSeries(StringSeriesKind.NODE_ID, node_ids.vocabulary),
            StringSeries(StringSeriesKind.ATTRIBUTE_ID, tuple(m.id for m in metadata)),
            StringSeries(StringSeriesKind.ATTRIBUTE_NAME, tuple(m.name.strip() for m in metadata)),
            StringSeries(StringSeriesKind.ATTRIBUTE_ALTERNATE_NAME,
                         tuple(m.alternate_name.strip() for m in metadata)),
            StringSeries(StringSeriesKind.ATTRIBUTE_UNIT_TEXT,
                         tuple(m.unit_text.strip() for m in metadata)),
            StringSeries(StringSeriesKind.STRINGS, strings.vocabulary),
        )

        data_graph = DataGraph(
            string_series_list=string_series,
            node_series_list=tuple(node_series),
            edge_series_list=endpoint_series + tuple(edge_series),
        )
        logger.info("Data graph assembled: %d nodes, %d edges, %d strings, "
                    "%d node series, %d edge series",
                    len(graph.node_list), len(graph.edge_list), len(strings),
                    len(data_graph.node_series_list), len(data_graph.edge_series_list))
        return data_graph

    def _build_registry(self, section, custom, attribute_count,
                        tabular_service, strings, unit_texts) -> TransformerRegistry:
        registry = TransformerRegistry(section)
        for entry in custom:
            if entry.path in (FROM_NODE_PATH, TO_NODE_PATH):
                raise ConfigurationError(f"Series '{entry.path.name}' is reserved for edge endpoints")
        registry.extend(custom)
        if self._config.include_default_transformers:
            registry.extend(default_transformers(
                section, attribute_count, tabular_service.optional_fields,
                strings, unit_texts))
        return registry

    @staticmethod
    def _resolve_endpoints(graph: Graph, node_ids: StringDictionary) -> Tuple[Series, Series]:
        """
        ``from_node`` / ``to_node`` as node positions; unknown ids become
        SENTINEL and count as unused.
        """
        result: List[Series] = []
        for path, endpoint in ((FROM_NODE_PATH, 0), (TO_NODE_PATH, 1)):
            values = tuple(
                node_ids.index_of(edge.get_source_target()[endpoint])
                for edge in graph.edge_list
            )
            unused = sum(1 for v in values if v == SENTINEL)
            result.append(Series(path, values, len(values) - unused, unused))

        gaps = result[0].unused + result[1].unused
        if gaps:
            logger.warning("%d edge endpoint(s) reference unknown nodes.", gaps)
        return result[0], result[1]


def to_data_graph(config: DataGraphConfig, graph: Graph) -> DataGraph:
    """Functional shortcut for ``DataGraphAssembler(config).to_data_graph(graph)``."""
    return DataGraphAssembler(config).to_data_graph(graph)
