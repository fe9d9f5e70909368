"""
Data Graph API — models, columnar types and plugin contracts.
"""
from .types import (
    SENTINEL,
    OPTIONAL_VALUE_CAPACITY,
    DEFAULT_MAX_OPTIONAL_VALUES,
    Section,
    Field,
    Discriminator,
    StringSeriesKind,
)
from .exceptions import DataGraphError, ParseError
from .models.attribute import Attribute, AttributeMetadata
from .models.node import Node
from .models.edge import Edge
from .models.graph import Graph
from .models.series import (
    Row,
    SeriesPath,
    Series,
    StringSeries,
    ColumnTransformer,
    ColumnPathTransformer,
)
from .models.data_graph import DataGraph
from .plugins.base import DataSourcePlugin

__all__ = [
    'SENTINEL',
    'OPTIONAL_VALUE_CAPACITY',
    'DEFAULT_MAX_OPTIONAL_VALUES',
    'Section',
    'Field',
    'Discriminator',
    'StringSeriesKind',
    'DataGraphError',
    'ParseError',
    'Attribute',
    'AttributeMetadata',
    'Node',
    'Edge',
    'Graph',
    'Row',
    'SeriesPath',
    'Series',
    'StringSeries',
    'ColumnTransformer',
    'ColumnPathTransformer',
    'DataGraph',
    'DataSourcePlugin',
]
