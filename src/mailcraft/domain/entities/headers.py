"""Multi-valued header map.

Each header name maps to an ordered list of values, so repeated headers
(``Received``, ``X-Tag``...) keep every value in the order it was added.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Union

HeaderSource = Union[
    "HeaderMap",
    Mapping[str, str],
    Mapping[str, Iterable[str]],
    Iterable[tuple[str, str]],
]


class HeaderMap:
    """Mutable header map where a key may hold several values."""

    def __init__(self, headers: HeaderSource | None = None) -> None:
        self._values: dict[str, list[str]] = {}
        if headers is not None:
            self.put_all(headers)

    def put(self, key: str, value: str) -> None:
        """Append a single ``key: value`` pair."""
        self._values.setdefault(key, []).append(value)

    def put_all(self, headers: HeaderSource) -> None:
        """Merge every pair from ``headers`` into this map.

        Existing values are kept; new values are appended after them.
        """
        if isinstance(headers, HeaderMap):
            pairs: Iterable[tuple[str, str]] = headers.items()
        elif isinstance(headers, Mapping):
            pairs = _mapping_pairs(headers)
        else:
            pairs = headers

        # Materialise first so merging a map into itself terminates
        for key, value in list(pairs):
            self.put(key, value)

    def get_all(self, key: str) -> list[str]:
        return list(self._values.get(key, ()))

    def keys(self) -> list[str]:
        return list(self._values)

    def items(self) -> list[tuple[str, str]]:
        return [(key, value) for key, values in self._values.items() for value in values]

    def freeze(self) -> Mapping[str, tuple[str, ...]]:
        """Return a read-only snapshot detached from this map."""
        return MappingProxyType({key: tuple(values) for key, values in self._values.items()})

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._values))

    def __len__(self) -> int:
        return sum(len(values) for values in self._values.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HeaderMap):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"HeaderMap({self.items()!r})"


def _mapping_pairs(headers: Mapping) -> Iterator[tuple[str, str]]:
    for key, value in headers.items():
        if isinstance(value, str):
            yield key, value
        else:
            for item in value:
                yield key, item
