"""
    Abstract base class for data-source plugins.
    Defines the "Contract" that every input format must follow.
"""
from abc import ABC, abstractmethod

from ..models.graph import Graph


class DataSourcePlugin(ABC):
    """
        Abstract base class for Data Source plugins.
        Pattern: Strategy (for data loading).
    """

    @abstractmethod
    def get_plugin_name(self) -> str:
        """
            Returns the unique name of the plugin.
            Example: "JSON Graph Parser"
        """
        pass

    @abstractmethod
    def parse(self, content: str) -> Graph:
        """
        Main method: Parses a document and returns a Graph object.

        Args:
            content: Full text of the document.

        Returns:
            Graph: Graph instance populated with metadata, nodes and edges.

        Raises:
            ParseError: If the document is malformed.
        """
        pass

    def parse_file(self, file_path: str) -> Graph:
        """Read a UTF-8 file and hand its content to ``parse``."""
        with open(file_path, "r", encoding="utf-8") as fh:
            return self.parse(fh.read())
