"""
Data Graph Platform — configuration and data-source discovery.

Public API:
    PlatformConfig      – top-level configuration
    DataGraphConfig     – assembly settings and custom transformers
    SerializationConfig – JSON export options
    DataSourceCatalog   – installed data-source plugins

Note: DataGraphPlatform is intentionally NOT imported eagerly to avoid
circular imports with ``datagraph_core.services``.  Import it directly:
``from datagraph_core.graph_platform.core import DataGraphPlatform``.
"""
from .config import PlatformConfig, DataGraphConfig, SerializationConfig
from .data_sources import DATA_SOURCE_EP_GROUP, DataSourceCatalog

__all__ = [
    'PlatformConfig',
    'DataGraphConfig',
    'SerializationConfig',
    'DataSourceCatalog',
    'DATA_SOURCE_EP_GROUP',
]
