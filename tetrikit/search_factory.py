"""Registry of search algorithms, looked up by name."""

from __future__ import annotations

from typing import Optional

from .path_search import PathSearch
from .search_algorithm import SearchAlgorithm


class SearchFactory:
    """Keeps prototype search algorithms and hands out new instances of them."""

    def __init__(self) -> None:
        self._algorithms: dict[str, SearchAlgorithm] = {}
        self.register("PathSearch", PathSearch())

    def register(self, name: str, algorithm: SearchAlgorithm) -> None:
        """Register ``algorithm`` under ``name``; an existing entry is kept."""
        self._algorithms.setdefault(name, algorithm)

    def create(self, name: str) -> Optional[SearchAlgorithm]:
        """Return a new instance of the named algorithm, or None.

        Only algorithms the factory knows how to build are created; any other
        registered name gives None.
        """
        prototype = self._algorithms.get(name)
        if prototype is None:
            return None
        if name == "PathSearch" and isinstance(prototype, PathSearch):
            return PathSearch(prototype.config)
        return None

    def names(self) -> list[str]:
        """Names of all registered algorithms, sorted."""
        return sorted(self._algorithms)


_instance: Optional[SearchFactory] = None


def get_search_factory() -> SearchFactory:
    """Return the shared search factory."""
    global _instance
    if _instance is None:
        _instance = SearchFactory()
    return _instance