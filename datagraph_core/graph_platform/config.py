"""
    Platform configuration — column transformers, supported tags,
    serialization options and default settings.

    Provides typed configuration objects that control how a Graph is
    turned into a DataGraph and how the result is serialized.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from datagraph_api.models.series import ColumnPathTransformer
from datagraph_api.types import DEFAULT_MAX_OPTIONAL_VALUES, OPTIONAL_VALUE_CAPACITY

from datagraph_core.services.exceptions import ConfigurationError


@dataclass
class DataGraphConfig:
    """
    Caller-supplied settings for one assembly.

    Attributes:
        supported_tags:      Published as the ``tags`` string series.
        node_transformers:   Extra node columns; registered before the defaults.
        edge_transformers:   Extra edge columns; registered before the defaults.
        max_optional_values: How many optional-value slots are filled
                             (0 .. OPTIONAL_VALUE_CAPACITY).
        include_default_transformers: Whether the built-in per-attribute
                             columns are generated.
        max_workers:         Worker threads for series generation.
                             ``1`` runs everything inline.
    """
    supported_tags: List[str] = field(default_factory=list)
    node_transformers: List[ColumnPathTransformer] = field(default_factory=list)
    edge_transformers: List[ColumnPathTransformer] = field(default_factory=list)
    max_optional_values: int = DEFAULT_MAX_OPTIONAL_VALUES
    include_default_transformers: bool = True
    max_workers: int = 1

    def validate(self) -> None:
        """
        Check value ranges.

        Raises:
            ConfigurationError: On any out-of-range setting.
        """
        if not 0 <= self.max_optional_values <= OPTIONAL_VALUE_CAPACITY:
            raise ConfigurationError(
                f"max_optional_values must be between 0 and {OPTIONAL_VALUE_CAPACITY}, "
                f"got {self.max_optional_values}"
            )
        if self.max_workers < 1:
            raise ConfigurationError(f"max_workers must be >= 1, got {self.max_workers}")


@dataclass
class SerializationConfig:
    """
    Controls what appears in serialized DataGraph output.

    Attributes:
        include_counts:        Whether each series carries ``used`` / ``unused``.
        include_path:          Whether each series carries its structured path
                               (section, field, attributeIndex, discriminator).
        skip_empty_string_series: Drop vocabularies with no entries.
        indent:                JSON indentation; ``None`` for compact output.
    """
    include_counts: bool = True
    include_path: bool = True
    skip_empty_string_series: bool = False
    indent: Optional[int] = 2


@dataclass
class PlatformConfig:
    """
    Top-level configuration for the Data Graph platform.

    Attributes:
        data_graph:          Assembly settings.
        serialization:       Controls JSON export.
        default_data_source: Entry-point name of the default data source plugin.
    """
    data_graph: DataGraphConfig = field(default_factory=DataGraphConfig)
    serialization: SerializationConfig = field(default_factory=SerializationConfig)
    default_data_source: Optional[str] = "json"
