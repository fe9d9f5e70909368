"""
    DataGraphPlatform — the central orchestrator of the application.

    Design Patterns applied
    ───────────────────────
    • Singleton          – one platform instance per process
                           (via ``DataGraphPlatform.get_instance()``).
    • Strategy           – pluggable data sources.
    • Facade             – single entry-point for callers; hides plugin
                           loading, assembly and serialization.

    The platform holds configuration and plugins only; every conversion
    builds its own dictionaries, so calls do not share state.
"""
import logging
from typing import List, Optional

from datagraph_api.models.data_graph import DataGraph
from datagraph_api.models.graph import Graph
from datagraph_api.plugins.base import DataSourcePlugin

from datagraph_core.services.assembler_service import DataGraphAssembler
from datagraph_core.services.exceptions import PluginNotFoundError
from datagraph_core.services.serialization_service import DataGraphSerializer

from .config import DataGraphConfig, PlatformConfig, SerializationConfig
from .data_sources import DataSourceCatalog

logger = logging.getLogger(__name__)


class DataGraphPlatform:
    """
    Facade over the data graph pipeline.

    Usage:
        platform = DataGraphPlatform(PlatformConfig())
        data_graph = platform.convert(json_text)
        print(platform.to_json(data_graph))
    """

    _instance: Optional['DataGraphPlatform'] = None

    # ── Singleton ────────────────────────────────────────────────

    @classmethod
    def get_instance(cls, config: Optional[PlatformConfig] = None) -> 'DataGraphPlatform':
        """
        Return the singleton platform instance, creating it on first call.

        Args:
            config: Optional custom config (only used on first call).
        """
        if cls._instance is None:
            cls._instance = cls(config or PlatformConfig())
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Destroy the singleton (useful for testing)."""
        cls._instance = None

    # ── Constructor ──────────────────────────────────────────────

    def __init__(self, config: Optional[PlatformConfig] = None,
                 catalog: Optional[DataSourceCatalog] = None):
        """
        Args:
            config: Platform configuration (assembly, serialization, defaults).
            catalog: Installed data sources; defaults to entry-point discovery.
        """
        self._config: PlatformConfig = config or PlatformConfig()
        self._sources: DataSourceCatalog = catalog or DataSourceCatalog()
        self._assembler = DataGraphAssembler(self._config.data_graph)
        self._serializer = DataGraphSerializer(self._config.serialization)
        logger.info("DataGraphPlatform initialized.")

    # ── Configuration ────────────────────────────────────────────

    @property
    def config(self) -> PlatformConfig:
        return self._config

    @config.setter
    def config(self, value: PlatformConfig) -> None:
        self._config = value
        self._assembler = DataGraphAssembler(value.data_graph)
        self._serializer.config = value.serialization

    @property
    def data_graph_config(self) -> DataGraphConfig:
        return self._config.data_graph

    @data_graph_config.setter
    def data_graph_config(self, value: DataGraphConfig) -> None:
        self._config.data_graph = value
        self._assembler = DataGraphAssembler(value)

    @property
    def serialization_config(self) -> SerializationConfig:
        return self._config.serialization

    @serialization_config.setter
    def serialization_config(self, value: SerializationConfig) -> None:
        self._config.serialization = value
        self._serializer.config = value

    # ── Plugin discovery ─────────────────────────────────────────

    def get_data_source_names(self) -> List[str]:
        """Sorted list of installed data-source plugin names."""
        return self._sources.names()

    def get_data_source(self, name: Optional[str] = None) -> DataSourcePlugin:
        """
        Get a data-source plugin by name (default: ``config.default_data_source``).

        Raises:
            PluginNotFoundError: If no such plugin is installed.
        """
        plugin_name = name or self._config.default_data_source
        plugin = self._sources.find(plugin_name) if plugin_name else None
        if plugin is None:
            raise PluginNotFoundError(
                f"Data source plugin '{plugin_name}' not found. "
                f"Available: {self._sources.names()}"
            )
        return plugin

    # ── Pipeline ─────────────────────────────────────────────────

    def parse(self, content: str, plugin_name: Optional[str] = None) -> Graph:
        """Parse document text with a data-source plugin."""
        return self.get_data_source(plugin_name).parse(content)

    def load_file(self, file_path: str, plugin_name: Optional[str] = None) -> Graph:
        """Parse a file with a data-source plugin."""
        graph = self.get_data_source(plugin_name).parse_file(file_path)
        logger.info("Graph loaded from '%s': %r", file_path, graph)
        return graph

    def to_data_graph(self, graph: Graph) -> DataGraph:
        return self._assembler.to_data_graph(graph)

    def convert(self, content: str, plugin_name: Optional[str] = None) -> DataGraph:
        """
        Parse then assemble.

        Raises:
            ParseError:       Malformed document; nothing is assembled.
            TransformerError: A transformer failed.
        """
        return self.to_data_graph(self.parse(content, plugin_name))

    # ── Serialization ────────────────────────────────────────────

    def to_json(self, data_graph: DataGraph) -> str:
        return self._serializer.to_json(data_graph)

    def from_json(self, json_str: str) -> DataGraph:
        return self._serializer.from_json(json_str)

    def __repr__(self) -> str:
        return f"DataGraphPlatform(data_sources={self._sources.names()})"
