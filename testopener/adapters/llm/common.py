"""Common helpers shared by generation adapters."""

from __future__ import annotations

import re

# A whole response wrapped in one fenced block, optionally tagged with a language.
_FENCE_RE = re.compile(
    r"\A\s*```[\w.+#-]*[ \t]*\r?\n(?P<body>.*?)\r?\n?```\s*\Z", re.DOTALL
)


def strip_code_fences(text: str) -> str:
    """
    Remove a markdown code fence wrapping the entire response.

    Fences that only surround part of the text are left untouched, since the
    generated file may legitimately contain them (e.g. in docstrings). The
    unwrapped body ends with exactly one newline.
    """
    match = _FENCE_RE.match(text)
    if match is None:
        return text
    return match.group("body").rstrip("\r\n") + "\n"


def normalize_output(text: str, strip_fences: bool = True) -> str:
    """Apply fence removal if enabled; any other payload is returned unchanged."""
    if strip_fences:
        return strip_code_fences(text)
    return text
