from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


def materialize_path(predecessor: Dict[T, T], start: T, end: T) -> Iterator[T]:
    """
    Walk a backward-search predecessor map from ``start`` toward ``end``.

    Yields the cells strictly between ``start`` and ``end``; neither endpoint
    is produced. The walk is lazy and single-pass.
    """

    cursor = start
    while True:
        cursor = predecessor[cursor]
        if cursor == end:
            return
        yield cursor


def collect_path(cells: Iterable[Optional[T]]) -> Optional[List[T]]:
    """Drain a ``find_path`` result; ``None`` means no path exists."""

    steps = list(cells)
    if steps == [None]:
        return None
    return steps
