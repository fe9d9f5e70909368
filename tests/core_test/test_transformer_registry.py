# tests/core_test/test_transformer_registry.py

import logging
import pytest

from datagraph_api.models.series import SeriesPath
from datagraph_api.types import SENTINEL, Discriminator, Field, Section
from datagraph_core.services.dictionary_service import build_dictionary
from datagraph_core.services.exceptions import ConfigurationError, TransformerError
from datagraph_core.services.tabular_service import TabularService
from datagraph_core.services.transformer_registry import (
    TransformerRegistry,
    default_transformers,
    length_transformer,
    string_code_transformer,
    unit_text_transformer,
)

from tests.conftest import attr, make_graph, meta, node


def _path(field_id=Field.VALUE, index=0, discriminator=Discriminator.STRING_CODE,
          section=Section.NODE):
    return SeriesPath(section, field_id, index, discriminator)


@pytest.fixture
def registry():
    return TransformerRegistry(Section.NODE)

@pytest.fixture
def node_table(alpha_graph):
    return TabularService().to_entity_table(alpha_graph, Section.NODE)


class TestBuiltins:

    def test_string_code(self):
        to_code = string_code_transformer(build_dictionary(["car", "plane"]))
        assert to_code(None, "plane") == 1
        assert to_code(None, "boat") == SENTINEL

    def test_unit_text_code(self):
        to_code = unit_text_transformer(build_dictionary(["kg", "km/h"]))
        assert to_code(None, "km/h") == 1

    def test_length(self):
        assert length_transformer(None, "silver") == 6

    def test_default_layout(self):
        entries = default_transformers(
            Section.EDGE, 2, (Field.OPT_VALUE_ZERO,),
            build_dictionary([]), build_dictionary([]))
        assert [e.path.name for e in entries] == [
            "edge_value_0_0", "edge_opt_value_zero_0_0", "edge_unit_text_0_1", "edge_value_0_2",
            "edge_value_1_0", "edge_opt_value_zero_1_0", "edge_unit_text_1_1", "edge_value_1_2",
        ]


class TestRegistration:

    def test_register_keeps_order(self, registry):
        registry.register(_path(index=1), length_transformer)
        registry.register(_path(index=0), length_transformer)
        assert registry.names() == ["node_value_1_0", "node_value_0_0"]
        assert len(registry) == 2
        assert _path(index=1) in registry

    def test_duplicate_path_rejected(self, registry):
        registry.register(_path(), length_transformer)
        with pytest.raises(ConfigurationError, match="already registered"):
            registry.register(_path(discriminator=0), length_transformer)

    def test_wrong_section_rejected(self, registry):
        with pytest.raises(ConfigurationError, match="belongs to section"):
            registry.register(_path(section=Section.EDGE), length_transformer)

    def test_non_callable_rejected(self, registry):
        with pytest.raises(ConfigurationError, match="not callable"):
            registry.register(_path(), "len")

    def test_table_section_must_match(self, registry, alpha_graph):
        edge_table = TabularService().to_entity_table(alpha_graph, Section.EDGE)
        with pytest.raises(ConfigurationError):
            registry.generate_all(edge_table)


class TestGeneration:

    def test_one_value_per_entity(self, registry, node_table):
        registry.register(_path(index=1), length_transformer)
        (series,) = registry.generate_all(node_table)
        assert series.values == (3, SENTINEL, SENTINEL, SENTINEL)
        assert (series.used, series.unused) == (1, 3)

    def test_empty_value_counts_as_unused(self, registry, node_table):
        registry.register(_path(index=2), length_transformer)
        (series,) = registry.generate_all(node_table)
        # n3 has "19.3", n4 has "" and n1 / n2 lack the attribute
        assert series.values == (SENTINEL, SENTINEL, 4, SENTINEL)
        assert (series.used, series.unused) == (1, 3)

    def test_transformer_not_called_for_empty_values(self, registry, node_table):
        seen = []

        def spy(row, value):
            seen.append(value)
            return 0

        registry.register(_path(index=2), spy)
        registry.generate_all(node_table)
        assert seen == ["19.3"]

    def test_transformer_receives_row(self, registry, node_table):
        registry.register(_path(index=0, discriminator=9),
                          lambda row, value: int(row[Field.NODE_ID][1:]))
        (series,) = registry.generate_all(node_table)
        assert series.values == (1, 2, 3, 4)

    def test_undeclared_attribute_index(self, registry, node_table, caplog):
        registry.register(_path(index=5), length_transformer)
        with caplog.at_level(logging.WARNING):
            (series,) = registry.generate_all(node_table)
        assert series.values == (SENTINEL,) * 4
        assert series.unused == 4
        assert "undeclared attribute index" in caplog.text

    def test_parallel_generation_keeps_order(self, node_table):
        graph_registry = TransformerRegistry(Section.NODE)
        for index in range(3):
            for discriminator in (Discriminator.LENGTH, 7, 8):
                graph_registry.register(_path(index=index, discriminator=discriminator),
                                        length_transformer)
        sequential = graph_registry.generate_all(node_table)
        parallel = graph_registry.generate_all(node_table, max_workers=4)
        assert parallel == sequential


class TestTransformerErrors:

    def test_raising_transformer_aborts(self, registry, node_table):
        def broken(row, value):
            raise RuntimeError("boom")

        registry.register(_path(discriminator=50), broken)
        with pytest.raises(TransformerError, match="node_value_0_50") as info:
            registry.generate_all(node_table)
        assert info.value.series_name == "node_value_0_50"
        assert isinstance(info.value.__cause__, RuntimeError)

    @pytest.mark.parametrize("result", ["1", 1.5, None, True])
    def test_non_integer_result_aborts(self, registry, node_table, result):
        registry.register(_path(discriminator=50), lambda row, value: result)
        with pytest.raises(TransformerError, match="expected an integer"):
            registry.generate_all(node_table)

    def test_error_propagates_from_worker_threads(self, registry, node_table):
        registry.register(_path(discriminator=50), length_transformer)
        registry.register(_path(discriminator=51), lambda row, value: 1 // 0)
        with pytest.raises(TransformerError, match="ZeroDivisionError"):
            registry.generate_all(node_table, max_workers=2)


class TestWithSmallGraph:

    def test_string_codes_against_dictionary(self):
        graph = make_graph(
            [meta("a1")],
            [node("n1", attr("a1", "car")), node("n2", attr("a1", "car")), node("n3")],
        )
        strings = build_dictionary(["car"])
        registry = TransformerRegistry(Section.NODE)
        registry.register(_path(), string_code_transformer(strings))
        (series,) = registry.generate_all(TabularService().to_entity_table(graph, Section.NODE))
        assert series.values == (0, 0, SENTINEL)
        assert series.used + series.unused == 3
