from __future__ import annotations

import logging
from typing import Callable, Dict, Hashable, Iterable, Iterator, List, Mapping, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
KeyFunc = Callable[[T], Optional[str]]


class AggregationResult(Mapping[Hashable, int]):
    """
    Counts grouped by one categorical key (str) or a key pair (tuple of str).

    Keys keep the insertion order of their first occurrence. Results are
    never mutated in place; re-ordering returns a new instance.
    """

    def __init__(self, counts: Mapping[Hashable, int] | None = None) -> None:
        self._counts: Dict[Hashable, int] = dict(counts or {})

    def __getitem__(self, key: Hashable) -> int:
        return self._counts[key]

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"AggregationResult({self._counts!r})"

    def total(self) -> int:
        return sum(self._counts.values())

    def max_count(self) -> int:
        return max(self._counts.values(), default=0)

    def sorted_by_count(self, descending: bool = True) -> AggregationResult:
        """
        Return a copy ordered by count. The sort is stable, so keys with
        equal counts keep their first-occurrence order.
        """
        ordered = sorted(
            self._counts.items(),
            key=lambda kv: -kv[1] if descending else kv[1],
        )
        return AggregationResult(dict(ordered))

    def pairs(self) -> List[Tuple[Hashable, int]]:
        """(label, count) pairs in result order."""
        return list(self._counts.items())

    def triples(self) -> List[Tuple[str, str, int]]:
        """(first_key, second_key, count) for two-key results."""
        out: List[Tuple[str, str, int]] = []
        for key, count in self._counts.items():
            first, second = key  # type: ignore[misc]
            out.append((first, second, count))
        return out


def _safe_key(func: KeyFunc, item: T) -> Optional[str]:
    try:
        return func(item)
    except (KeyError, AttributeError, TypeError):
        return None


def aggregate(
    records: Iterable[T],
    key: KeyFunc,
    second_key: Optional[KeyFunc] = None,
) -> AggregationResult:
    """
    Count records per distinct key (or key pair when second_key is given).

    A record whose key cannot be extracted (missing field, wrong shape) is
    excluded from the grouping instead of aborting the whole aggregation.
    """
    counts: Dict[Hashable, int] = {}
    skipped = 0

    for item in records:
        first = _safe_key(key, item)
        if first is None:
            skipped += 1
            continue

        group: Hashable = first
        if second_key is not None:
            second = _safe_key(second_key, item)
            if second is None:
                skipped += 1
                continue
            group = (first, second)

        counts[group] = counts.get(group, 0) + 1

    if skipped:
        logger.debug(
            "Records excluded from aggregation",
            extra={"n_skipped": skipped, "n_groups": len(counts)},
        )

    return AggregationResult(counts)
