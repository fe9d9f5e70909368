"""
    Column transformer registry — the extension point of the pipeline.

    Design Pattern: Registry + Strategy
    ───────────────────────────────────
    Each entry pairs a ``SeriesPath`` with a ``ColumnTransformer``
    (a plain callable ``(row, value) -> int``).  The registry keeps
    entries in registration order and turns each one into a ``Series``
    over the entity-indexed rows of its section.

    Built-in transformers:
        • string code     – position in the global value dictionary
        • unit-text code  – position in the unit-text vocabulary
        • length          – raw length of the source string
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Iterator, List, Sequence, Set

from datagraph_api.models.series import (
    ColumnPathTransformer,
    ColumnTransformer,
    Row,
    Series,
    SeriesPath,
)
from datagraph_api.types import SENTINEL, Discriminator, Field, Section

from .dictionary_service import StringDictionary
from .exceptions import ConfigurationError, TransformerError
from .tabular_service import EntityTable

logger = logging.getLogger(__name__)


# ── Built-in transformers ────────────────────────────────────────

def string_code_transformer(dictionary: StringDictionary) -> ColumnTransformer:
    """Maps a value to its code in ``dictionary`` (-1 when unmapped)."""
    def transform(_row: Row, value: str) -> int:
        return dictionary.index_of(value)
    return transform


def unit_text_transformer(unit_texts: StringDictionary) -> ColumnTransformer:
    """Maps a unit text to its code in the unit-text vocabulary."""
    def transform(_row: Row, value: str) -> int:
        return unit_texts.index_of(value)
    return transform


def length_transformer(_row: Row, value: str) -> int:
    return len(value)


def default_transformers(
    section: Section,
    attribute_count: int,
    optional_fields: Sequence[Field],
    strings: StringDictionary,
    unit_texts: StringDictionary,
) -> List[ColumnPathTransformer]:
    """
    Built-in columns for every declared attribute index, grouped by
    attribute in metadata order.

    Per attribute:
        value → string code, each filled optional slot → string code,
        unit_text → unit-text code, value → length.
    """
    to_string_code = string_code_transformer(strings)
    to_unit_code = unit_text_transformer(unit_texts)

    entries: List[ColumnPathTransformer] = []
    for index in range(attribute_count):
        for field_id in (Field.VALUE,) + tuple(optional_fields):
            entries.append(ColumnPathTransformer(
                SeriesPath(section, field_id, index, Discriminator.STRING_CODE),
                to_string_code,
            ))
        entries.append(ColumnPathTransformer(
            SeriesPath(section, Field.UNIT_TEXT, index, Discriminator.UNIT_TEXT_CODE),
            to_unit_code,
        ))
        entries.append(ColumnPathTransformer(
            SeriesPath(section, Field.VALUE, index, Discriminator.LENGTH),
            length_transformer,
        ))
    return entries


# ── Registry ─────────────────────────────────────────────────────

class TransformerRegistry:
    """
    Ordered mapping SeriesPath → ColumnTransformer for one section.

    Usage:
        registry = TransformerRegistry(Section.NODE)
        registry.register(path, transformer)
        series_list = registry.generate_all(node_table)
    """

    def __init__(self, section: Section):
        self._section = section
        self._entries: List[ColumnPathTransformer] = []
        self._paths: Set[SeriesPath] = set()

    @property
    def section(self) -> Section:
        return self._section

    def register(self, path: SeriesPath, transformer: ColumnTransformer) -> None:
        """
        Add one column.

        Raises:
            ConfigurationError: If the path belongs to another section,
                                is already registered, or the transformer
                                is not callable.
        """
        if path.section is not self._section:
            raise ConfigurationError(
                f"Series '{path.name}' belongs to section '{path.section.value}', "
                f"not '{self._section.value}'"
            )
        if path in self._paths:
            raise ConfigurationError(f"Series '{path.name}' is already registered")
        if not callable(transformer):
            raise ConfigurationError(f"Transformer for series '{path.name}' is not callable")

        self._entries.append(ColumnPathTransformer(path, transformer))
        self._paths.add(path)

    def extend(self, entries: Iterable[ColumnPathTransformer]) -> None:
        for entry in entries:
            self.register(entry.path, entry.transformer)

    def names(self) -> List[str]:
        return [entry.path.name for entry in self._entries]

    def __iter__(self) -> Iterator[ColumnPathTransformer]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, path: SeriesPath) -> bool:
        return path in self._paths

    def __repr__(self) -> str:
        return f"TransformerRegistry(section='{self._section.value}', entries={len(self._entries)})"

    # ── Series generation ────────────────────────────────────────

    def generate(self, table: EntityTable, entry: ColumnPathTransformer) -> Series:
        """
        Run one transformer over the entity-indexed rows of its attribute.

        Absent rows and empty source values give SENTINEL and count as
        unused; the transformer only sees non-empty values.
        """
        path = entry.path
        rows = table.rows_for(path.attribute_index)

        values: List[int] = []
        used = 0
        for row in rows:
            source = row[path.field] if row is not None else ""
            if not source:
                values.append(SENTINEL)
                continue
            used += 1
            values.append(_apply(entry, row, source))

        return Series(path, tuple(values), used, len(rows) - used)

    def generate_all(self, table: EntityTable, max_workers: int = 1) -> List[Series]:
        """
        One Series per registered entry, in registration order.

        With ``max_workers > 1`` columns are generated on a thread pool;
        ``Executor.map`` keeps the output in registration order.
        """
        if table.section is not self._section:
            raise ConfigurationError(
                f"Cannot run '{self._section.value}' transformers over "
                f"'{table.section.value}' rows"
            )

        for entry in self._entries:
            if not 0 <= entry.path.attribute_index < len(table.slots):
                logger.warning("Series '%s' targets undeclared attribute index %d; "
                               "all %d entries will be unused.",
                               entry.path.name, entry.path.attribute_index,
                               table.entity_count)

        if max_workers > 1 and len(self._entries) > 1:
            with ThreadPoolExecutor(max_workers=max_workers) as pool:
                return list(pool.map(lambda e: self.generate(table, e), self._entries))
        return [self.generate(table, entry) for entry in self._entries]


def _apply(entry: ColumnPathTransformer, row: Row, source: str) -> int:
    try:
        code = entry.transformer(row, source)
    except Exception as exc:
        raise TransformerError(entry.path.name, f"{type(exc).__name__}: {exc}") from exc

    if isinstance(code, bool) or not isinstance(code, int):
        raise TransformerError(
            entry.path.name,
            f"expected an integer code, got {type(code).__name__}"
        )
    return code
