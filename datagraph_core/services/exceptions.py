# datagraph_core/services/exceptions.py
from datagraph_api.exceptions import DataGraphError, ParseError


class ConfigurationError(DataGraphError):
    """Raised when a DataGraphConfig or a transformer registration is invalid."""
    pass

class TransformerError(DataGraphError):
    """Raised when a column transformer fails; aborts the whole assembly."""

    def __init__(self, series_name: str, message: str):
        super().__init__(f"Transformer for series '{series_name}' failed: {message}")
        self.series_name = series_name

class PluginNotFoundError(DataGraphError):
    """Raised when a requested data-source plugin is not installed."""
    pass


__all__ = [
    'DataGraphError',
    'ParseError',
    'ConfigurationError',
    'TransformerError',
    'PluginNotFoundError',
]
