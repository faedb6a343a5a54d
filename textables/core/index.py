"""
Hierarchical keys for table rows and columns.

An index entry (``IndexKey``) is a tuple of ``Level``s, outermost first. Each
level carries a label and an integer position. Positions order blocks: when
two indices are merged, entries are stably sorted by their positions, so
blocks stay together while first-seen order is preserved inside a block.
Labels that are empty or start with ``"__"`` are hidden: they group entries
but are never printed.
"""

import bisect
from typing import Any, Container, Dict, Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple

from ..constants import HIDDEN_PREFIX
from ..utils.errors import RankMismatchError, TableKeyError


class Level(NamedTuple):
    """One level of an index entry."""

    position: int
    label: str

    @property
    def hidden(self) -> bool:
        return is_hidden(self.label)


IndexKey = Tuple[Level, ...]


def is_hidden(label: str) -> bool:
    return label == "" or label.startswith(HIDDEN_PREFIX)


def make_level(obj: Any, position: int = 1) -> Level:
    if isinstance(obj, Level):
        return obj
    return Level(position, str(obj))


def make_key(key: Any, depth: Optional[int] = None) -> IndexKey:
    """Coerce a user key to an IndexKey.

    A scalar becomes a one-level key, a tuple of labels a multi-level key.
    Levels built by hand pass through unchanged.
    """
    if isinstance(key, Level):
        levels: IndexKey = (key,)
    elif isinstance(key, tuple):
        if not key:
            raise ValueError("Index keys must have at least one level")
        levels = tuple(make_level(k) for k in key)
    else:
        levels = (make_level(key),)

    if depth is not None and len(levels) != depth:
        raise RankMismatchError(
            f"Key {format_key(levels)!r} has {len(levels)} levels, expected {depth}"
        )
    return levels


def format_key(key: IndexKey) -> str:
    return " / ".join(level.label for level in key)


def key_positions(key: IndexKey) -> Tuple[int, ...]:
    return tuple(level.position for level in key)


def key_labels(key: IndexKey) -> Tuple[str, ...]:
    return tuple(level.label for level in key)


def prepend_level(key: IndexKey, label: Any, position: int = 1) -> IndexKey:
    return (make_level(label, position),) + tuple(key)


def shift_key(key: IndexKey, offset: int) -> IndexKey:
    if not offset:
        return key
    outer = key[0]
    return (Level(outer.position + offset, outer.label),) + tuple(key[1:])


def has_positions(key: Any) -> bool:
    """True if ``key`` was given with explicit ``Level`` positions."""
    if isinstance(key, Level):
        return True
    return isinstance(key, tuple) and any(isinstance(k, Level) for k in key)


def match_key(
    keys: Sequence[IndexKey], members: Container[IndexKey], key: Any, by_labels: bool = True
) -> Optional[IndexKey]:
    """Return the entry of ``keys`` that ``key`` refers to, or None.

    With ``by_labels`` a key without an exact match falls back to the single
    entry carrying the same labels.
    """
    entry = make_key(key)
    if entry in members:
        return entry
    if not by_labels:
        return None
    labels = key_labels(entry)
    matches = [k for k in keys if key_labels(k) == labels]
    if len(matches) > 1:
        raise TableKeyError(
            f"Key {format_key(entry)!r} is ambiguous: {len(matches)} entries share its labels"
        )
    return matches[0] if matches else None


def insert_ordered(keys: List[IndexKey], key: IndexKey) -> int:
    """Insert ``key`` after the last entry whose positions sort at or before it."""
    positions = [key_positions(k) for k in keys]
    at = bisect.bisect_right(positions, key_positions(key))
    keys.insert(at, key)
    return at


class MultiIndex(Sequence[IndexKey]):
    """An immutable, ordered sequence of unique index entries of equal depth."""

    def __init__(self, keys: Iterable[Any] = (), depth: Optional[int] = None):
        entries = tuple(make_key(k) for k in keys)
        depths = {len(k) for k in entries}
        if len(depths) > 1:
            raise RankMismatchError(f"Index entries have mixed depths: {sorted(depths)}")
        if entries:
            found = depths.pop()
            if depth is not None and found != depth:
                raise RankMismatchError(f"Index has depth {found}, expected {depth}")
            depth = found

        lookup: Dict[IndexKey, int] = {}
        for i, key in enumerate(entries):
            if key in lookup:
                raise ValueError(f"Duplicate index entry: {format_key(key)!r}")
            lookup[key] = i

        self._keys = entries
        self._depth = depth
        self._lookup = lookup

    @property
    def depth(self) -> Optional[int]:
        """Number of levels per entry (None for an empty index of unknown depth)."""
        return self._depth

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[IndexKey]:
        return iter(self._keys)

    def __getitem__(self, i):  # type: ignore[override]
        if isinstance(i, slice):
            return MultiIndex(self._keys[i], depth=self._depth)
        return self._keys[i]

    def __contains__(self, key: object) -> bool:
        return key in self._lookup

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MultiIndex):
            return NotImplemented
        return self._keys == other._keys

    def __repr__(self) -> str:
        entries = ", ".join(repr(format_key(k)) for k in self._keys)
        return f"MultiIndex(depth={self._depth}, [{entries}])"

    def index(self, key: Any, start: int = 0, stop: Optional[int] = None) -> int:
        i = self._lookup[self.resolve(key)]
        start, stop, _ = slice(start, stop).indices(len(self._keys))
        if not start <= i < stop:
            raise ValueError(f"Key {format_key(self._keys[i])!r} is not in [{start}, {stop})")
        return i

    def resolve(self, key: Any) -> IndexKey:
        """Find the entry a user key refers to.

        Exact matches win. Otherwise a key given as plain labels matches the
        single entry with the same labels, whatever its positions.
        """
        found = match_key(self._keys, self._lookup, key)
        if found is None:
            raise TableKeyError(f"Key {format_key(make_key(key))!r} not in index")
        return found

    def labels(self, level: int) -> List[str]:
        return [key[level].label for key in self._keys]

    def append_level(self, label: Any, position: int = 1) -> "MultiIndex":
        """Return an index one level deeper, with ``label`` as the new outer level."""
        depth = None if self._depth is None else self._depth + 1
        return MultiIndex(
            (prepend_level(k, label, position) for k in self._keys), depth=depth
        )

    def shift(self, offset: int) -> "MultiIndex":
        """Return an index with every outer position moved by ``offset``."""
        return MultiIndex((shift_key(k, offset) for k in self._keys), depth=self._depth)

    def max_outer_position(self) -> int:
        return max((k[0].position for k in self._keys), default=0)

    def spans(self, level: int) -> List[Tuple[int, int]]:
        """Runs ``[start, stop)`` of consecutive entries sharing levels ``0..level``."""
        runs: List[Tuple[int, int]] = []
        start = 0
        for i in range(1, len(self._keys) + 1):
            if i == len(self._keys) or (
                self._keys[i][: level + 1] != self._keys[start][: level + 1]
            ):
                runs.append((start, i))
                start = i
        return runs

    @classmethod
    def union(cls, *indices: "MultiIndex") -> "MultiIndex":
        """Ordered union: first-seen order, then a stable sort on positions."""
        check_depths(indices)
        seen: Dict[IndexKey, None] = {}
        for index in indices:
            for key in index:
                seen.setdefault(key, None)
        return cls(sorted(seen, key=key_positions), depth=common_depth(indices))

    @classmethod
    def concat(cls, *indices: "MultiIndex") -> "MultiIndex":
        """Concatenate in argument order, shifting outer positions so entries stay distinct."""
        check_depths(indices)
        keys: List[IndexKey] = []
        for index, offset in zip(indices, concat_offsets(indices)):
            keys.extend(index.shift(offset))
        return cls(keys, depth=common_depth(indices))


def common_depth(indices: Sequence[MultiIndex]) -> Optional[int]:
    return next((i.depth for i in indices if i.depth is not None), None)


def check_depths(indices: Sequence[MultiIndex], axis: str = "index") -> None:
    depths = {i.depth for i in indices if i.depth is not None}
    if len(depths) > 1:
        raise RankMismatchError(
            f"Cannot combine {axis} entries of different depths: {sorted(depths)}"
        )


def concat_offsets(indices: Sequence[MultiIndex]) -> List[int]:
    """Outer-position offsets that place each index after the ones before it."""
    offsets = []
    high = 0
    for index in indices:
        if not len(index):
            offsets.append(0)
            continue
        lowest = min(k[0].position for k in index)
        offset = high - lowest + 1
        offsets.append(offset)
        high = index.max_outer_position() + offset
    return offsets
