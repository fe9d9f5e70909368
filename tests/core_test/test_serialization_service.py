# tests/core_test/test_serialization_service.py

import json
import pytest

from datagraph_api.exceptions import ParseError
from datagraph_api.types import Field, Section, StringSeriesKind
from datagraph_core.graph_platform.config import DataGraphConfig, SerializationConfig
from datagraph_core.services.assembler_service import to_data_graph
from datagraph_core.services.serialization_service import DataGraphSerializer, parse_series_name

from tests.conftest import make_graph


@pytest.fixture
def alpha(config, alpha_graph):
    return to_data_graph(config, alpha_graph)


class TestSerialize:

    def test_top_level_keys(self, alpha):
        data = DataGraphSerializer().serialize(alpha)
        assert set(data) == {"stringSeriesList", "nodeSeriesList", "edgeSeriesList"}
        assert [s["name"] for s in data["stringSeriesList"]][-1] == "strings"

    def test_series_entry(self, alpha):
        entry = DataGraphSerializer().serialize(alpha)["nodeSeriesList"][0]
        assert entry == {
            "name": "node_value_0_0",
            "section": "node",
            "field": "value",
            "attributeIndex": 0,
            "discriminator": 0,
            "values": [3, 8, 5, 10],
            "used": 4,
            "unused": 0,
        }

    def test_without_counts_and_path(self, alpha):
        config = SerializationConfig(include_counts=False, include_path=False)
        entry = DataGraphSerializer(config).serialize(alpha)["edgeSeriesList"][1]
        assert entry == {"name": "edge_to_node_0_3", "values": [1, 3, -1]}

    def test_skip_empty_string_series(self, car_graph):
        dg = to_data_graph(DataGraphConfig(), car_graph)
        config = SerializationConfig(skip_empty_string_series=True)
        names = [s["name"] for s in DataGraphSerializer(config).serialize(dg)["stringSeriesList"]]
        assert "tags" not in names
        assert "unit_text" not in names
        assert "strings" in names

    def test_to_json(self, alpha):
        text = DataGraphSerializer(SerializationConfig(indent=None)).to_json(alpha)
        assert "\n" not in text
        assert json.loads(text)["stringSeriesList"][2]["values"] == ["n1", "n2", "n3", "n4"]


class TestDeserialize:

    def test_round_trip(self, alpha):
        serializer = DataGraphSerializer()
        assert serializer.from_json(serializer.to_json(alpha)) == alpha

    def test_round_trip_without_path_or_counts(self, alpha):
        serializer = DataGraphSerializer(SerializationConfig(include_counts=False, include_path=False))
        assert serializer.deserialize(serializer.serialize(alpha)) == alpha

    def test_round_trip_restores_skipped_vocabularies(self, car_graph):
        dg = to_data_graph(DataGraphConfig(), car_graph)
        serializer = DataGraphSerializer(SerializationConfig(skip_empty_string_series=True))
        back = serializer.from_json(serializer.to_json(dg))
        assert back == dg
        assert [s.kind for s in back.string_series_list] == list(StringSeriesKind)
        assert back.get_string_series(StringSeriesKind.SUPPORTED_TAGS).values == ()
        assert back.string_series_list[StringSeriesKind.STRINGS.position].values == ("car",)

    def test_round_trip_of_empty_graph(self):
        dg = to_data_graph(DataGraphConfig(), make_graph())
        serializer = DataGraphSerializer(SerializationConfig(skip_empty_string_series=True))
        back = serializer.from_json(serializer.to_json(dg))
        assert back.node_count == 0
        assert back.edge_count == 0

    @pytest.mark.parametrize("text", [
        "[]",
        "\"graph\"",
        '{"nodeSeriesList": [1, 2]}',
        '{"stringSeriesList": {"name": "tags"}}',
    ])
    def test_non_object_input(self, text):
        with pytest.raises(ParseError):
            DataGraphSerializer().from_json(text)

    def test_invalid_json(self):
        with pytest.raises(ParseError):
            DataGraphSerializer().from_json("{")

    def test_unknown_string_series(self):
        with pytest.raises(ParseError):
            DataGraphSerializer().deserialize({"stringSeriesList": [{"name": "bogus"}]})

    def test_bad_series_name(self):
        with pytest.raises(ParseError):
            DataGraphSerializer().deserialize({"nodeSeriesList": [{"name": "nonsense"}]})


class TestParseSeriesName:

    @pytest.mark.parametrize("name, expected", [
        ("node_value_0_0", (Section.NODE, Field.VALUE, 0, 0)),
        ("edge_opt_value_three_12_0", (Section.EDGE, Field.OPT_VALUE_THREE, 12, 0)),
        ("edge_from_node_0_3", (Section.EDGE, Field.FROM_NODE, 0, 3)),
        ("node_meta_tags_2_-7", (Section.NODE, Field.META_TAGS, 2, -7)),
    ])
    def test_parse(self, name, expected):
        path = parse_series_name(name)
        assert (path.section, path.field, path.attribute_index, path.discriminator) == expected
        assert path.name == name
