"""
    String dictionaries used for dictionary encoding.

    Two flavours:
    • ``build_dictionary``         – drops empty strings, deduplicates and
                                     sorts by code point; codes are
                                     reproducible from the input set alone.
    • ``build_positional_index``   – keeps declaration order; the code of
                                     an id is its position (first wins).
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, Sequence, Tuple

from datagraph_api.types import SENTINEL


@dataclass(frozen=True)
class StringDictionary:
    """
    Vocabulary plus reverse lookup.

    Usage:
        d = build_dictionary(["car", "plane", "car", ""])
        d.vocabulary            # ('car', 'plane')
        d.index_of("plane")     # 1
        d.index_of("boat")      # -1
    """
    vocabulary: Tuple[str, ...] = field(default_factory=tuple)
    _index: Dict[str, int] = field(default_factory=dict, repr=False, compare=False)

    def index_of(self, value: str) -> int:
        """Code of ``value``, or SENTINEL when absent. Never raises."""
        return self._index.get(value, SENTINEL)

    def __contains__(self, value: str) -> bool:
        return value in self._index

    def __len__(self) -> int:
        return len(self.vocabulary)


def build_dictionary(values: Iterable[str]) -> StringDictionary:
    """Deduplicated, code-point sorted vocabulary without the empty string."""
    vocabulary = tuple(sorted({v for v in values if v}))
    return StringDictionary(vocabulary, {v: i for i, v in enumerate(vocabulary)})


def build_positional_index(values: Sequence[str]) -> StringDictionary:
    """
    Vocabulary in declaration order, identity-indexed by position.
    Repeated values keep the position of their first occurrence.
    """
    index: Dict[str, int] = {}
    for position, value in enumerate(values):
        index.setdefault(value, position)
    return StringDictionary(tuple(values), index)
