"""Pattern compiler: segment classification and expression assembly.

A pattern is split on ``/`` and each segment becomes one part::

    "pages"              -> StaticPart("pages")
    "[id].json"          -> SinglePart(id="id", suffix=".json")
    "[...page].page.json" -> MultiPart(id="page", suffix=".page.json")

The parts' fragments are joined with an escaped ``/`` and anchored to the
whole string, with the leading and trailing slash optional.
"""

import logging
import re

from pathmapper.compiler.escape import escape_for_regex
from pathmapper.compiler.parts import (
    CompiledPattern,
    MultiPart,
    Part,
    SinglePart,
    StaticPart,
)
from pathmapper.config import DEFAULT_CONFIG, MapperConfig
from pathmapper.errors import ConfigurationError

logger = logging.getLogger("pathmapper.compiler")

# Placeholder grammar. Multi is tested first. Any text after the
# placeholder is a literal suffix; segments never contain "/".
_MULTI_RE = re.compile(r"\[\.\.\.([a-zA-Z0-9]+)\](.*)", re.DOTALL)
_SINGLE_RE = re.compile(r"\[([a-zA-Z0-9]+)\](.*)", re.DOTALL)

_SEPARATOR = r"\/"


def convert_segment(segment: str, config: MapperConfig | None = None) -> Part:
    """Classify one pattern segment and build its matching fragment.

    A segment that does not match a placeholder form in full is static,
    so ``v[id]`` or ``[user_id]`` are matched literally. Whatever follows
    the placeholder is a literal suffix: ``[name]@2x.png``.
    """
    config = config or DEFAULT_CONFIG

    if match := _MULTI_RE.fullmatch(segment):
        name, suffix = match.groups()
        return MultiPart(
            id=name,
            suffix=suffix,
            regex=config.multi_capture + escape_for_regex(suffix),
        )

    if match := _SINGLE_RE.fullmatch(segment):
        name, suffix = match.groups()
        return SinglePart(
            id=name,
            suffix=suffix,
            regex=config.single_capture + escape_for_regex(suffix),
        )

    return StaticPart(value=segment, regex=escape_for_regex(segment))


def compile_pattern(pattern: str, config: MapperConfig | None = None) -> CompiledPattern:
    """Compile a pattern string into its parts and whole-path expression.

    Pure and deterministic: the same pattern and config always produce
    equal parts and a byte-identical expression.

    Examples::

        compile_pattern("hello/world").expression
            -> r"\\A\\/?hello\\/world\\/?\\Z"
        compile_pattern("/pages/[...page].json").expression
            -> r"\\A\\/?pages\\/([\\w/.\\-]+)\\.json\\/?\\Z"
    """
    config = config or DEFAULT_CONFIG

    segments = pattern.split("/")
    # A leading slash is optional at match time, not an empty segment
    rooted = segments[0] == ""
    if rooted:
        segments.pop(0)

    parts = tuple(convert_segment(segment, config) for segment in segments)
    body = _SEPARATOR.join(part.regex for part in parts)

    if config.optional_slashes:
        expression = rf"\A\/?{body}\/?\Z"
    else:
        # Slashes exactly as written in the pattern
        lead = _SEPARATOR if rooted else ""
        expression = rf"\A{lead}{body}\Z"

    try:
        regex = re.compile(expression)
    except re.error as exc:
        msg = f"Pattern {pattern!r} does not compile with the configured captures: {exc}"
        raise ConfigurationError(msg) from exc

    compiled = CompiledPattern(parts=parts, regex=regex)
    logger.debug("compiled %r into %d parts: %s", pattern, len(parts), expression)
    return compiled


def static_prefix(parts: tuple[Part, ...]) -> str:
    """Return the literal path preceding the first placeholder.

    Always starts with ``/``. A pattern starting with a placeholder has
    base ``"/"``; a pattern without placeholders is its own base.
    Empty segments (doubled or trailing slashes) are skipped.
    """
    prefix: list[str] = []
    for part in parts:
        if not isinstance(part, StaticPart):
            break
        if part.value:
            prefix.append(part.value)
    return "/" + "/".join(prefix)
