# tests/conftest.py
"""
Shared test fixtures.
Alpha graph: 3 attribute types, 4 nodes, 3 edges (one dangling endpoint).
Mixed presence: some nodes lack attributes, one value is empty.
"""
import pytest
from pathlib import Path

from datagraph_api.models.graph import Graph
from datagraph_core.graph_platform.config import DataGraphConfig

from data_source_plugin_json.plugin import JsonDataSourcePlugin

FIXTURES_DIR = Path(__file__).parent / "plugin_test" / "fixtures"
ALPHA_PATH = FIXTURES_DIR / "graph_alpha.json"

SUPPORTED_TAGS = ["alpha", "beta", "delta"]

# Global value dictionary of the alpha graph, in code order
ALPHA_STRINGS = [
    "100", "19.3", "air", "car", "fast", "gold",
    "heavy", "metal", "plane", "road", "silver", "vehicle",
]


def meta(meta_id, name="", alternate_name="", unit_text="", tags=()):
    return {"id": meta_id, "name": name, "alternateName": alternate_name,
            "unitText": unit_text, "tagSet": list(tags)}


def attr(meta_id, value="", optional=(), tags=()):
    return {"id": meta_id, "value": value,
            "optionalValueList": list(optional), "tagSet": list(tags)}


def node(node_id, *attributes):
    return {"id": node_id, "attributeList": list(attributes)}


def edge(from_node, to_node, *attributes):
    return {"fromNode": from_node, "toNode": to_node, "attributeList": list(attributes)}


def make_graph(metadata=(), nodes=(), edges=()) -> Graph:
    """Build a Graph from small dict literals."""
    return Graph.from_dict({
        "attributeMetadataList": list(metadata),
        "nodeList": list(nodes),
        "edgeList": list(edges),
    })


# ── Pytest fixtures ──────────────────────────────────────────────

@pytest.fixture
def alpha_graph() -> Graph:
    """Alpha graph parsed from the JSON fixture."""
    return JsonDataSourcePlugin().parse_file(str(ALPHA_PATH))


@pytest.fixture
def config() -> DataGraphConfig:
    """Default configuration with the supported tags set."""
    return DataGraphConfig(supported_tags=list(SUPPORTED_TAGS))


@pytest.fixture
def car_graph() -> Graph:
    """Single node, single attribute."""
    return make_graph(
        metadata=[meta("a1", "Name")],
        nodes=[node("n1", attr("a1", "car"))],
    )
