"""Mapper configuration.

MapperConfig is a frozen dataclass: immutable after creation, validated
once, shared freely between mappers.
"""

import re
from dataclasses import dataclass

from pathmapper.compiler.captures import CAPTURES
from pathmapper.errors import ConfigurationError

# \1 .. \99 not preceded by an escaped backslash, or (?P=name)
_BACKREFERENCE_RE = re.compile(r"(?<!\\)(?:\\\\)*\\[1-9]|\(\?P=")


@dataclass(frozen=True, slots=True)
class MapperConfig:
    """Compilation settings. Immutable after creation.

    All fields have defaults matching the standard pattern grammar::

        config = MapperConfig(optional_slashes=False)
        mapper = PathMapper("/pages/[...page].json", config=config)

    Attributes:
        single_capture: Capture fragment for ``[name]`` placeholders.
        multi_capture: Capture fragment for ``[...name]`` placeholders.
        optional_slashes: Accept paths with or without a leading and
            trailing ``/``. When ``False`` slashes must appear exactly as
            written in the pattern: ``/pages/[slug]`` requires the leading
            slash, ``pages/[slug]`` rejects it, and a trailing slash is
            rejected unless the pattern ends with one.

    Capture fragments are repeated once per placeholder in the compiled
    expression, so they must hold exactly one unnamed group and no
    backreferences.
    """

    single_capture: str = CAPTURES["single"]
    multi_capture: str = CAPTURES["multi"]
    optional_slashes: bool = True

    def __post_init__(self) -> None:
        for field_name in ("single_capture", "multi_capture"):
            fragment = getattr(self, field_name)
            try:
                compiled = re.compile(fragment)
            except re.error as exc:
                msg = f"{field_name} {fragment!r} is not a valid regular expression: {exc}"
                raise ConfigurationError(msg) from exc
            if compiled.groups != 1:
                found = compiled.groups
                msg = f"{field_name} {fragment!r} must contain exactly one group, found {found}"
                raise ConfigurationError(msg)
            if compiled.groupindex:
                msg = f"{field_name} {fragment!r} must not use named groups"
                raise ConfigurationError(msg)
            if _BACKREFERENCE_RE.search(fragment):
                msg = f"{field_name} {fragment!r} must not use backreferences"
                raise ConfigurationError(msg)


DEFAULT_CONFIG = MapperConfig()
