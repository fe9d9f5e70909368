"""
    Tabularization — flattens node / edge attributes into fixed-width rows.

    Two strategies
    ──────────────
    • occurrence-indexed (``to_tabular_graph``):
          one Row per (entity, attribute) actually present, in entity
          declaration order, then attribute declaration order.
          Feeds the global value dictionary.
    • entity-indexed (``to_entity_table``):
          one slot per entity for every declared attribute-metadata entry,
          holding the Row or ``None`` when the entity lacks the attribute.
          Feeds every per-attribute output column, so those columns always
          have exactly one entry per entity.
"""
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union

from datagraph_api.models.attribute import Attribute, AttributeMetadata
from datagraph_api.models.edge import Edge
from datagraph_api.models.graph import Graph
from datagraph_api.models.node import Node
from datagraph_api.models.series import Row
from datagraph_api.types import (
    DEFAULT_MAX_OPTIONAL_VALUES,
    OPTIONAL_VALUE_FIELDS,
    ROW_WIDTH,
    Field,
    Section,
)

logger = logging.getLogger(__name__)

Entity = Union[Node, Edge]

# Stand-in for attributes whose metadata id is not declared
_UNKNOWN_METADATA = AttributeMetadata(id="")


@dataclass(frozen=True)
class TabularGraph:
    """Occurrence-indexed rows for nodes and edges."""
    nodes: Tuple[Row, ...] = field(default_factory=tuple)
    edges: Tuple[Row, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class EntityTable:
    """
    Entity-indexed rows of one section.

    ``slots[attribute_index][entity_index]`` is the Row of that entity for
    that attribute, or ``None`` when the entity does not carry it.
    """
    section: Section
    entity_count: int
    slots: Tuple[Tuple[Optional[Row], ...], ...] = field(default_factory=tuple)

    def rows_for(self, attribute_index: int) -> Tuple[Optional[Row], ...]:
        """Rows of one attribute; an undeclared index yields all ``None``."""
        if 0 <= attribute_index < len(self.slots):
            return self.slots[attribute_index]
        return (None,) * self.entity_count


class TabularService:
    """
    Builds rows from a Graph.

    Usage:
        service = TabularService(max_optional_values=3)
        tab = service.to_tabular_graph(graph)
        nodes = service.to_entity_table(graph, Section.NODE)
    """

    def __init__(self, max_optional_values: int = DEFAULT_MAX_OPTIONAL_VALUES):
        self._max_optional_values = max(0, min(max_optional_values, len(OPTIONAL_VALUE_FIELDS)))

    @property
    def optional_fields(self) -> Tuple[Field, ...]:
        """Optional-value columns that get filled"""
        return OPTIONAL_VALUE_FIELDS[:self._max_optional_values]

    # ── Rows ─────────────────────────────────────────────────────

    def make_row(self, entity: Entity, attribute: Attribute,
                 metadata: Optional[AttributeMetadata]) -> Row:
        """
        Build the Row of one (entity, attribute) pair.

        Args:
            entity:    Node or Edge carrying the attribute.
            attribute: The attribute occurrence.
            metadata:  Its declared metadata, ``None`` when undeclared
                       (metadata columns are then empty).
        """
        meta = metadata or _UNKNOWN_METADATA
        cols: List[str] = [""] * ROW_WIDTH

        if isinstance(entity, Node):
            cols[Field.NODE_ID] = entity.id
        else:
            cols[Field.FROM_NODE] = entity.from_node
            cols[Field.TO_NODE] = entity.to_node

        cols[Field.VALUE] = attribute.value.strip()
        for slot, field_id in enumerate(self.optional_fields):
            cols[field_id] = attribute.optional_value(slot)
        cols[Field.TAGS] = attribute.joined_tags
        cols[Field.META_ID] = attribute.id
        cols[Field.NAME] = meta.name.strip()
        cols[Field.ALT_NAME] = meta.alternate_name.strip()
        cols[Field.UNIT_TEXT] = meta.unit_text.strip()
        cols[Field.META_TAGS] = meta.joined_tags
        return Row(tuple(cols))

    # ── Occurrence-indexed ───────────────────────────────────────

    def to_tabular_graph(self, graph: Graph) -> TabularGraph:
        metadata_by_id = _metadata_by_id(graph.attribute_metadata_list)

        undeclared = sum(
            1
            for entity in graph.node_list + graph.edge_list
            for attribute in entity.attribute_list
            if attribute.id not in metadata_by_id
        )
        if undeclared:
            logger.warning("%d attribute(s) reference undeclared metadata ids.", undeclared)

        return TabularGraph(
            nodes=tuple(self._occurrence_rows(graph.node_list, metadata_by_id)),
            edges=tuple(self._occurrence_rows(graph.edge_list, metadata_by_id)),
        )

    def _occurrence_rows(self, entities: Sequence[Entity],
                         metadata_by_id: Dict[str, AttributeMetadata]) -> Iterator[Row]:
        for entity in entities:
            for attribute in entity.attribute_list:
                yield self.make_row(entity, attribute, metadata_by_id.get(attribute.id))

    def value_strings(self, tabular: TabularGraph) -> List[str]:
        """Primary and filled optional values of every row, nodes first."""
        fields = (Field.VALUE,) + self.optional_fields
        values: List[str] = []
        for rows in (tabular.nodes, tabular.edges):
            for field_id in fields:
                values.extend(row[field_id] for row in rows)
        return values

    # ── Entity-indexed ───────────────────────────────────────────

    def to_entity_table(self, graph: Graph, section: Section) -> EntityTable:
        """
        Entity-indexed rows for the nodes (``Section.NODE``) or the edges
        (``Section.EDGE``) of ``graph``.
        """
        if section is Section.NODE:
            entities: Sequence[Entity] = graph.node_list
        elif section is Section.EDGE:
            entities = graph.edge_list
        else:
            raise ValueError(f"No entities in section '{section.value}'")

        for position, entity in enumerate(entities):
            _log_duplicates(section, position, entity)

        slots = tuple(
            tuple(self._slot_row(entity, metadata) for entity in entities)
            for metadata in graph.attribute_metadata_list
        )
        return EntityTable(section, len(entities), slots)

    def _slot_row(self, entity: Entity, metadata: AttributeMetadata) -> Optional[Row]:
        attribute = entity.find_attribute(metadata.id)
        if attribute is None:
            return None
        return self.make_row(entity, attribute, metadata)


def _metadata_by_id(metadata_list: Sequence[AttributeMetadata]) -> Dict[str, AttributeMetadata]:
    result: Dict[str, AttributeMetadata] = {}
    for metadata in metadata_list:
        result.setdefault(metadata.id, metadata)
    return result


def _log_duplicates(section: Section, position: int, entity: Entity) -> None:
    counts = Counter(a.id for a in entity.attribute_list)
    for metadata_id, count in counts.items():
        if count > 1:
            logger.debug("%s %d: %d attributes reference '%s'; first one used.",
                         section.value, position, count, metadata_id)
