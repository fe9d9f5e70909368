"""
    Columnar building blocks: rows, series paths, integer series and
    string series.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Tuple

from ..types import ROW_WIDTH, Field, Section, StringSeriesKind


@dataclass(frozen=True)
class Row:
    """
    Fixed-width string columns for one (entity, attribute) pair.
    Columns are addressed by ``Field``.
    """
    cols: Tuple[str, ...]

    def __post_init__(self):
        if len(self.cols) != ROW_WIDTH:
            raise ValueError(f"Row must have {ROW_WIDTH} columns, got {len(self.cols)}")

    def __getitem__(self, field_id: Field) -> str:
        return self.cols[field_id]


@dataclass(frozen=True)
class SeriesPath:
    """Structured address of one output column"""
    section: Section
    field: Field
    attribute_index: int
    discriminator: int

    @property
    def name(self) -> str:
        """``{section}_{field}_{attributeIndex}_{discriminator}``"""
        return (f"{self.section.value}_{self.field.label}_"
                f"{self.attribute_index}_{int(self.discriminator)}")


@dataclass(frozen=True)
class Series:
    """
    One named column of integer codes, one entry per entity.

    ``used`` counts entries whose source value was non-empty;
    ``unused`` counts absent or empty ones.
    """
    path: SeriesPath
    values: Tuple[int, ...] = field(default_factory=tuple)
    used: int = 0
    unused: int = 0

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def section(self) -> Section:
        return self.path.section

    def __len__(self) -> int:
        return len(self.values)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'section': self.path.section.value,
            'field': self.path.field.label,
            'attributeIndex': self.path.attribute_index,
            'discriminator': int(self.path.discriminator),
            'values': list(self.values),
            'used': self.used,
            'unused': self.unused,
        }


@dataclass(frozen=True)
class StringSeries:
    """Named, ordered vocabulary of strings referenced by Series codes"""
    kind: StringSeriesKind
    values: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def name(self) -> str:
        return self.kind.value

    def __len__(self) -> int:
        return len(self.values)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'values': list(self.values),
        }


# (row, source value) -> integer code
ColumnTransformer = Callable[[Row, str], int]


@dataclass(frozen=True)
class ColumnPathTransformer:
    """A transformer registered against the path of the column it produces"""
    path: SeriesPath
    transformer: ColumnTransformer
