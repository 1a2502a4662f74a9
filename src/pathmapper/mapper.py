"""PathMapper — test, match and stringify paths against one pattern.

The pattern is compiled once at construction. The mapper holds no
per-call state, so one instance can be shared between threads.
"""

import logging
from collections.abc import Mapping

from pathmapper.compiler.compiler import compile_pattern, static_prefix
from pathmapper.compiler.parts import BindablePart, CompiledPattern, Part
from pathmapper.config import MapperConfig
from pathmapper.errors import MatchFailure, ToLessParamsFailure

logger = logging.getLogger("pathmapper.mapper")


class PathMapper:
    """Bidirectional mapping between a path pattern and concrete paths.

    Usage::

        mapper = PathMapper("/pages/[...page].page.json")
        mapper.test("/pages/about-us.page.json")     # True
        mapper.match("/pages/products/shoes.page.json")
        # {"page": "products/shoes"}
        mapper.stringify({"page": "about-us"})
        # "/pages/about-us.page.json"

    ``match`` raises :class:`MatchFailure` for a path that does not fit
    the pattern; use ``test`` first when a miss is expected.
    """

    __slots__ = ("_base_path", "_bindable", "_compiled", "_pattern")

    def __init__(self, pattern: str, *, config: MapperConfig | None = None) -> None:
        self._pattern = pattern
        self._compiled: CompiledPattern = compile_pattern(pattern, config)
        self._bindable: tuple[BindablePart, ...] = self._compiled.bindable
        self._base_path = static_prefix(self._compiled.parts)

    def __repr__(self) -> str:
        return f"PathMapper({self._pattern!r})"

    @property
    def pattern(self) -> str:
        """The pattern string as given."""
        return self._pattern

    @property
    def expression(self) -> str:
        """Textual form of the compiled whole-path expression."""
        return self._compiled.expression

    @property
    def parts(self) -> tuple[Part, ...]:
        return self._compiled.parts

    @property
    def params(self) -> list[str]:
        """Placeholder ids in pattern order. Repeated ids appear repeatedly."""
        return [part.id for part in self._bindable]

    @property
    def base_path(self) -> str:
        """Literal prefix before the first placeholder, e.g. ``"/pages"``."""
        return self._base_path

    def get_params(self) -> list[str]:
        return self.params

    def get_base_path(self) -> str:
        return self._base_path

    def test(self, path: str) -> bool:
        """Return whether *path* matches the pattern."""
        return self._compiled.regex.match(path) is not None

    def captures(self, path: str) -> tuple[str, ...]:
        """Return the captured values of *path* in left-to-right order.

        Unlike :meth:`match`, keeps every value when the pattern repeats
        an id. Raises :class:`MatchFailure` if *path* does not match.
        """
        found = self._compiled.regex.match(path)
        if found is None:
            logger.debug("no match: %r against %s", path, self.expression)
            raise MatchFailure(path, self.expression)
        return found.groups()

    def match(self, path: str) -> dict[str, str]:
        """Bind each placeholder id to its captured value.

        The k-th capture group is assigned to the k-th placeholder. When
        an id repeats, the later value wins.

        Raises :class:`MatchFailure` if *path* does not match.
        """
        values = self.captures(path)
        return {part.id: value for part, value in zip(self._bindable, values, strict=True)}

    def stringify(self, params: Mapping[str, str]) -> str:
        """Substitute *params* into the pattern and return the path.

        Exactly one value per placeholder is required. Each placeholder
        token (``[id]`` or ``[...id]``) is replaced at its first
        occurrence. The result is not checked against :meth:`test`.

        Raises :class:`ToLessParamsFailure` if the number of params
        differs from the number of placeholders, or if a placeholder id
        has no value.
        """
        if len(params) != len(self._bindable):
            logger.debug("rejected params %s for %r", list(params), self._pattern)
            raise ToLessParamsFailure(params, self.params)

        path = self._pattern
        for part in self._bindable:
            if part.id not in params:
                logger.debug("missing param %r for %r", part.id, self._pattern)
                raise ToLessParamsFailure(params, self.params)
            path = path.replace(part.token, str(params[part.id]), 1)
        return path
