"""
Core services — dictionaries, tabularization, transformer registry,
assembly and serialization.

Note: DataGraphAssembler and DataGraphSerializer are intentionally NOT
imported eagerly to avoid circular imports with
``datagraph_core.graph_platform.config``.  Import them directly:
``from datagraph_core.services.assembler_service import DataGraphAssembler``.
"""
from .dictionary_service import StringDictionary, build_dictionary, build_positional_index
from .tabular_service import TabularService, TabularGraph, EntityTable
from .transformer_registry import (
    TransformerRegistry,
    default_transformers,
    string_code_transformer,
    unit_text_transformer,
    length_transformer,
)
from .exceptions import (
    DataGraphError,
    ParseError,
    ConfigurationError,
    TransformerError,
    PluginNotFoundError,
)

__all__ = [
    'StringDictionary',
    'build_dictionary',
    'build_positional_index',
    'TabularService',
    'TabularGraph',
    'EntityTable',
    'TransformerRegistry',
    'default_transformers',
    'string_code_transformer',
    'unit_text_transformer',
    'length_transformer',
    'DataGraphError',
    'ParseError',
    'ConfigurationError',
    'TransformerError',
    'PluginNotFoundError',
]
