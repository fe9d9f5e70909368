import json
import logging

from datagraph_api.exceptions import ParseError
from datagraph_api.models.graph import Graph
from datagraph_api.plugins.base import DataSourcePlugin

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    raise ParseError(f"Malformed JSON: {name} is not a valid JSON number")


class JsonDataSourcePlugin(DataSourcePlugin):
    """
    Reads the attributed property graph document:

        {attributeMetadataList: [...], nodeList: [...], edgeList: [...]}

    Only identifying fields are required; references between metadata,
    nodes and edges are left unchecked.
    """

    def get_plugin_name(self) -> str:
        return "JSON Graph Parser"

    def parse(self, content: str) -> Graph:
        try:
            data = json.loads(content, parse_constant=_reject_constant)
        except json.JSONDecodeError as exc:
            raise ParseError(f"Malformed JSON at line {exc.lineno}, column {exc.colno}: {exc.msg}") from exc
        except TypeError as exc:
            raise ParseError(f"Cannot parse {type(content).__name__} content") from exc

        graph = Graph.from_dict(data)
        logger.debug("Parsed %r", graph)
        return graph

    def parse_file(self, file_path: str) -> Graph:
        try:
            return super().parse_file(file_path)
        except UnicodeDecodeError as exc:
            raise ParseError(f"{file_path}: not valid UTF-8") from exc
