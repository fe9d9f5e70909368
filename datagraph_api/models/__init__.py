"""
Graph input models and columnar output models.
"""
from .attribute import Attribute, AttributeMetadata
from .node import Node
from .edge import Edge
from .graph import Graph
from .series import Row, SeriesPath, Series, StringSeries, ColumnTransformer, ColumnPathTransformer
from .data_graph import DataGraph

__all__ = [
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
]
