"""Capture fragments for placeholder segments.

Each placeholder kind maps to a regex fragment with exactly one group.
``single`` stays inside one path segment, ``multi`` may span ``/``.
"""

CAPTURES: dict[str, str] = {
    "single": r"([\w.\-]+)",
    "multi": r"([\w/.\-]+)",
}
