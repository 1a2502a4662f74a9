"""Regex escaping for literal pattern text."""

import re

# Characters with special meaning in a regular expression.
# Narrower than re.escape(): "-", "/", "&", "~" and whitespace pass through.
_SPECIAL_RE = re.compile(r"[.*+?^${}()|\[\]\\]")


def escape_for_regex(text: str) -> str:
    """Prefix every regex metacharacter in *text* with a backslash.

    Examples::

        escape_for_regex("hello world")   -> "hello world"
        escape_for_regex("hello (world)") -> "hello \\(world\\)"
        escape_for_regex(".page.json")    -> "\\.page\\.json"
    """
    return _SPECIAL_RE.sub(lambda m: "\\" + m.group(0), text)
