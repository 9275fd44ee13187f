"""
Algorithm catalog: an explicit, ordered list of named strategies.

Callers build a catalog and pass it to whatever needs to enumerate or look
up algorithms. There is no process-wide registry.
"""

from typing import Iterable, Iterator, Tuple

from ..core.errors import UnknownAlgorithmError
from .base import SortAlgorithm
from . import bubble, insertion, merge

BUBBLE = SortAlgorithm(name="bubble", title="Bubble sort", sort=bubble.sort)
INSERTION = SortAlgorithm(name="insertion", title="Insertion sort", sort=insertion.sort)
MERGE = SortAlgorithm(name="merge", title="Merge sort", sort=merge.sort)


class AlgorithmCatalog:
    """
    Immutable, ordered collection of algorithms addressed by name.

    Usage:
        catalog = AlgorithmCatalog([BUBBLE, MERGE])
        outcome = catalog.get("merge").sort([3, 1, 2])
    """

    def __init__(self, algorithms: Iterable[SortAlgorithm]) -> None:
        self._algorithms: Tuple[SortAlgorithm, ...] = tuple(algorithms)
        names = [a.name for a in self._algorithms]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate algorithm names: {duplicates}")

    def __iter__(self) -> Iterator[SortAlgorithm]:
        return iter(self._algorithms)

    def __len__(self) -> int:
        return len(self._algorithms)

    def __contains__(self, name: object) -> bool:
        return any(a.name == name for a in self._algorithms)

    def names(self) -> Tuple[str, ...]:
        return tuple(a.name for a in self._algorithms)

    def get(self, name: str) -> SortAlgorithm:
        """
        Look up an algorithm by its stable name.

        Raises:
            UnknownAlgorithmError: If no algorithm has that name
        """
        for algorithm in self._algorithms:
            if algorithm.name == name:
                return algorithm
        raise UnknownAlgorithmError(
            f"Unknown algorithm {name!r}. Available: {list(self.names())}"
        )


def default_catalog() -> AlgorithmCatalog:
    """Catalog of the standard strategies: bubble, insertion, merge."""
    return AlgorithmCatalog([BUBBLE, INSERTION, MERGE])
