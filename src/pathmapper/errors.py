"""Pathmapper exception hierarchy.

Shared across the compiler, PathMapper and MapperTable so every module
raises and catches the same types.
"""

from collections.abc import Iterable


class PathMapperError(Exception):
    """Base for all pathmapper-specific errors."""


class ConfigurationError(PathMapperError):
    """Raised when a MapperConfig is invalid or a frozen table is modified."""


class MatchFailure(PathMapperError):  # noqa: N818
    """A path does not satisfy the compiled expression of a pattern.

    Raised by ``PathMapper.match`` and ``PathMapper.captures``.
    ``PathMapper.test`` returns ``False`` instead.
    """

    def __init__(self, path: str, expression: str) -> None:
        self.path = path
        self.expression = expression
        super().__init__(f"Path {path!r} does not match regex {expression!r}")


class ToLessParamsFailure(PathMapperError):  # noqa: N818
    """Bindings passed to ``stringify`` do not cover the pattern's placeholders.

    Both orderings are preserved: ``params`` in the order supplied,
    ``required`` in pattern order.
    """

    def __init__(self, params: Iterable[str], required: Iterable[str]) -> None:
        self.params = tuple(params)
        self.required = tuple(required)
        super().__init__(
            f"To less params: {', '.join(self.params)}. Required: {', '.join(self.required)}"
        )


class UnmatchedPath(PathMapperError):  # noqa: N818
    """No pattern registered in a MapperTable matches the path."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"No pattern matches {path!r}")
