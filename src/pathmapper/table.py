"""MapperTable — many patterns, bucketed by their literal base path.

Patterns are registered during setup and bucketed into an immutable
lookup structure by ``compile()``.
"""

import logging
from dataclasses import dataclass
from typing import Any

from pathmapper.config import MapperConfig
from pathmapper.errors import ConfigurationError, MatchFailure, UnmatchedPath
from pathmapper.mapper import PathMapper

logger = logging.getLogger("pathmapper.table")


@dataclass(frozen=True, slots=True)
class TableMatch:
    """Result of a successful table lookup."""

    mapper: PathMapper
    params: dict[str, str]
    target: Any = None


@dataclass(frozen=True, slots=True)
class _Entry:
    mapper: PathMapper
    target: Any


def _segments(path: str) -> tuple[str, ...]:
    return tuple(p for p in path.split("/") if p)


class MapperTable:
    """A set of patterns resolved most-specific base path first.

    Usage::

        table = MapperTable()
        table.add("/pages/[...page].page.json", target="page")
        table.add("/components/[...component].component.json", target="component")
        table.compile()
        found = table.resolve("/pages/about-us.page.json")
        # found.target == "page", found.params == {"page": "about-us"}

    Candidates are patterns whose base path is a prefix of the path,
    longest base path first. Within one base path the first registered
    pattern wins.
    """

    __slots__ = ("_buckets", "_compiled", "_config", "_entries")

    def __init__(self, *, config: MapperConfig | None = None) -> None:
        self._config = config
        self._entries: list[_Entry] = []
        self._buckets: tuple[tuple[tuple[str, ...], tuple[_Entry, ...]], ...] = ()
        self._compiled = False

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, pattern: str, target: Any = None) -> PathMapper:
        """Register a pattern. Must be called before compile()."""
        if self._compiled:
            msg = f"Cannot add pattern {pattern!r} after compilation."
            raise ConfigurationError(msg)

        mapper = PathMapper(pattern, config=self._config)
        self._entries.append(_Entry(mapper=mapper, target=target))
        logger.debug("registered %r under base %r", pattern, mapper.base_path)
        return mapper

    @property
    def mappers(self) -> list[PathMapper]:
        """All registered mappers in registration order."""
        return [entry.mapper for entry in self._entries]

    def compile(self) -> None:
        """Freeze the table. No more patterns can be added."""
        buckets: dict[tuple[str, ...], list[_Entry]] = {}
        for entry in self._entries:
            buckets.setdefault(_segments(entry.mapper.base_path), []).append(entry)

        ordered = sorted(buckets.items(), key=lambda item: len(item[0]), reverse=True)
        self._buckets = tuple((base, tuple(entries)) for base, entries in ordered)
        self._compiled = True
        logger.debug("compiled %d patterns into %d buckets", len(self._entries), len(buckets))

    def find(self, path: str) -> TableMatch | None:
        """Return the first matching pattern for *path*, or ``None``."""
        if not self._compiled:
            msg = "MapperTable.compile() must be called before lookups."
            raise ConfigurationError(msg)

        parts = _segments(path)
        for base, entries in self._buckets:
            if parts[: len(base)] != base:
                continue
            for entry in entries:
                try:
                    params = entry.mapper.match(path)
                except MatchFailure:
                    continue
                return TableMatch(mapper=entry.mapper, params=params, target=entry.target)
        return None

    def resolve(self, path: str) -> TableMatch:
        """Return the first matching pattern for *path*.

        Raises ``UnmatchedPath`` if no registered pattern matches.
        """
        found = self.find(path)
        if found is None:
            logger.debug("no pattern matches %r", path)
            raise UnmatchedPath(path)
        return found
