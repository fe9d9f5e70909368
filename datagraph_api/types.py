"""
    Columnar vocabulary: sections, row fields, discriminators and
    string-series kinds shared by the models and the core services.
"""
from enum import Enum, IntEnum
from typing import Dict, Tuple

# Reserved code meaning "value absent or unmapped"
SENTINEL = -1

# Fixed number of optional-value slots carried by every Row
OPTIONAL_VALUE_CAPACITY = 5

# How many optional slots are filled unless configured otherwise
DEFAULT_MAX_OPTIONAL_VALUES = 3

TAG_SEPARATOR = ";"


class Section(Enum):
    """Entity class a series belongs to"""
    META = "meta"
    NODE = "node"
    EDGE = "edge"


class Field(IntEnum):
    """
    Closed set of Row columns.
    The integer value is the column position inside ``Row.cols``.
    """
    NODE_ID = 0
    FROM_NODE = 1
    TO_NODE = 2
    VALUE = 3
    OPT_VALUE_ZERO = 4
    OPT_VALUE_ONE = 5
    OPT_VALUE_TWO = 6
    OPT_VALUE_THREE = 7
    OPT_VALUE_FOUR = 8
    TAGS = 9
    META_ID = 10
    NAME = 11
    ALT_NAME = 12
    UNIT_TEXT = 13
    META_TAGS = 14

    @property
    def label(self) -> str:
        """Name used when deriving series names"""
        return _FIELD_LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> "Field":
        for field_id, field_label in _FIELD_LABELS.items():
            if field_label == label:
                return field_id
        raise ValueError(f"Unknown field label: {label}")


_FIELD_LABELS: Dict[Field, str] = {
    Field.NODE_ID: "node_id",
    Field.FROM_NODE: "from_node",
    Field.TO_NODE: "to_node",
    Field.VALUE: "value",
    Field.OPT_VALUE_ZERO: "opt_value_zero",
    Field.OPT_VALUE_ONE: "opt_value_one",
    Field.OPT_VALUE_TWO: "opt_value_two",
    Field.OPT_VALUE_THREE: "opt_value_three",
    Field.OPT_VALUE_FOUR: "opt_value_four",
    Field.TAGS: "tags",
    Field.META_ID: "meta_id",
    Field.NAME: "name",
    Field.ALT_NAME: "alt_name",
    Field.UNIT_TEXT: "unit_text",
    Field.META_TAGS: "meta_tags",
}

ROW_WIDTH = len(Field)

# Optional-value columns in slot order; length == OPTIONAL_VALUE_CAPACITY
OPTIONAL_VALUE_FIELDS: Tuple[Field, ...] = (
    Field.OPT_VALUE_ZERO,
    Field.OPT_VALUE_ONE,
    Field.OPT_VALUE_TWO,
    Field.OPT_VALUE_THREE,
    Field.OPT_VALUE_FOUR,
)


class Discriminator(IntEnum):
    """
    Built-in discriminators for series paths.
    Custom columns may use any other integer.
    """
    STRING_CODE = 0
    UNIT_TEXT_CODE = 1
    LENGTH = 2
    NODE_REF = 3


class StringSeriesKind(Enum):
    """Auxiliary vocabularies, declared in output order"""
    SUPPORTED_TAGS = "tags"
    UNIT_TEXT = "unit_text"
    NODE_ID = "node_id"
    ATTRIBUTE_ID = "attribute_id"
    ATTRIBUTE_NAME = "attribute_name"
    ATTRIBUTE_ALTERNATE_NAME = "attribute_alternate_name"
    ATTRIBUTE_UNIT_TEXT = "attribute_unit_text"
    STRINGS = "strings"

    @property
    def position(self) -> int:
        """Index of this vocabulary inside ``DataGraph.string_series_list``"""
        return list(StringSeriesKind).index(self)
