"""Line selection helpers used when including snippets from source files."""

from __future__ import annotations

import re

_ANCHOR_START = re.compile(r"ANCHOR:\s*(?P<anchor_name>[\w_-]+)")
_ANCHOR_END = re.compile(r"ANCHOR_END:\s*(?P<anchor_name>[\w_-]+)")


def _lines(text: str) -> list[str]:
    """Split text into lines on ``\\n`` or ``\\r\\n``, without a trailing empty line."""
    if not text:
        return []
    parts = text.split("\n")
    ends_with_newline = parts[-1] == ""
    if ends_with_newline:
        parts.pop()
    terminated = len(parts) if ends_with_newline else len(parts) - 1
    return [
        part[:-1] if position < terminated and part.endswith("\r") else part
        for position, part in enumerate(parts)
    ]


def _anchor_name(pattern: re.Pattern[str], line: str) -> str | None:
    match = pattern.search(line)
    return match.group("anchor_name") if match else None


def take_lines(text: str, start: int | None = None, stop: int | None = None) -> str:
    """Return the lines from ``start`` (inclusive) to ``stop`` (exclusive).

    ``None`` leaves that side of the range open. An empty or reversed range
    yields an empty string.
    """
    lines = _lines(text)
    first = 0 if start is None else start
    selected = lines[first:] if stop is None else lines[first:max(stop, first)]
    return "\n".join(selected)


def take_anchored_lines(text: str, anchor: str) -> str:
    """Return the lines between ``ANCHOR: anchor`` and ``ANCHOR_END: anchor``.

    Lines that carry any anchor marker are left out.
    """
    retained: list[str] = []
    anchor_found = False

    for line in _lines(text):
        if anchor_found:
            end_name = _anchor_name(_ANCHOR_END, line)
            if end_name is not None:
                if end_name == anchor:
                    break
            elif not _ANCHOR_START.search(line):
                retained.append(line)
        elif _anchor_name(_ANCHOR_START, line) == anchor:
            anchor_found = True

    return "\n".join(retained)


def take_rustdoc_include_lines(
    text: str, start: int | None = None, stop: int | None = None
) -> str:
    """Keep lines within the range as they are and prefix the others with ``# ``."""
    first = 0 if start is None else start

    def in_range(index: int) -> bool:
        return index >= first and (stop is None or index < stop)

    return "\n".join(
        line if in_range(index) else f"# {line}"
        for index, line in enumerate(_lines(text))
    )


def take_rustdoc_include_anchored_lines(text: str, anchor: str) -> str:
    """Keep lines inside the named anchor and prefix the others with ``# ``.

    Anchor marker lines themselves are dropped.
    """
    output: list[str] = []
    within_anchored_section = False

    for line in _lines(text):
        if within_anchored_section:
            end_name = _anchor_name(_ANCHOR_END, line)
            if end_name is not None:
                if end_name == anchor:
                    within_anchored_section = False
            elif not _ANCHOR_START.search(line):
                output.append(line)
        else:
            start_name = _anchor_name(_ANCHOR_START, line)
            if start_name is not None:
                if start_name == anchor:
                    within_anchored_section = True
            elif not _ANCHOR_END.search(line):
                output.append(f"# {line}")

    return "\n".join(output)