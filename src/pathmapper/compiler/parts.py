"""Part and CompiledPattern frozen dataclasses."""

import re
from dataclasses import dataclass
from typing import ClassVar, TypeAlias


@dataclass(frozen=True, slots=True)
class StaticPart:
    """A literal segment of a pattern, matched verbatim.

    ``value`` is the raw segment text, ``regex`` its escaped form.
    """

    value: str
    regex: str

    kind: ClassVar[str] = "static"


@dataclass(frozen=True, slots=True)
class SinglePart:
    """A ``[name]`` placeholder, optionally followed by a literal suffix.

    Binds characters within one path segment: ``[id].json`` matches
    ``42.json`` and binds ``id="42"``.
    """

    id: str
    suffix: str
    regex: str

    kind: ClassVar[str] = "single"

    @property
    def token(self) -> str:
        """Placeholder text as written in the pattern."""
        return f"[{self.id}]"


@dataclass(frozen=True, slots=True)
class MultiPart:
    """A ``[...name]`` placeholder, optionally followed by a literal suffix.

    Binds one or more segments greedily: ``[...page].page.json`` matches
    ``products/shoes.page.json`` and binds ``page="products/shoes"``.
    """

    id: str
    suffix: str
    regex: str

    kind: ClassVar[str] = "multi"

    @property
    def token(self) -> str:
        """Placeholder text as written in the pattern."""
        return f"[...{self.id}]"


BindablePart: TypeAlias = SinglePart | MultiPart
Part: TypeAlias = StaticPart | SinglePart | MultiPart


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """Result of compiling a pattern. Never mutated after creation.

    Attributes:
        parts: Every segment in left-to-right order, static parts included.
        regex: The whole-path matching expression.
    """

    parts: tuple[Part, ...]
    regex: re.Pattern[str]

    @property
    def expression(self) -> str:
        """Textual form of the whole-path matching expression."""
        return self.regex.pattern

    @property
    def bindable(self) -> tuple[BindablePart, ...]:
        """Placeholder parts only, in capture-group order."""
        return tuple(part for part in self.parts if not isinstance(part, StaticPart))
