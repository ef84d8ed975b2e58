"""Hiding of "boring" lines inside rendered code blocks."""

from __future__ import annotations

import re

from mdpress.config import CodeConfig
from mdpress.playground import CODE_BLOCK_RE

_BORING_LINE = re.compile(r"(\s*)#(.?)(.*)")
_LANGUAGE = re.compile(r"\blanguage-(\w+)\b")
_HIDELINES = re.compile(r"\bhidelines=(\S+)")

_BORING_OPEN = '<span class="boring">'
_BORING_CLOSE = "</span>"


def _lines(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def hide_lines_rust(content: str) -> str:
    """Wrap Rust lines starting with ``#`` in a boring span.

    ``##`` escapes a literal ``#``, and ``#!`` / ``#[`` attribute lines are
    kept as they are. No newline follows the last line.
    """
    lines = _lines(content)
    result: list[str] = []
    for position, line in enumerate(lines):
        newline = "" if position == len(lines) - 1 else "\n"
        match = _BORING_LINE.fullmatch(line)
        if match:
            indent, marker, rest = match.groups()
            if marker == "#":
                result.append(f"{indent}{marker}{rest}{newline}")
                continue
            if marker not in ("!", "["):
                shown = "" if marker == " " else marker
                result.append(
                    f"{_BORING_OPEN}{indent}{shown}{rest}{newline}{_BORING_CLOSE}"
                )
                continue
        result.append(line + newline)
    return "".join(result)


def hide_lines_with_prefix(content: str, prefix: str) -> str:
    """Wrap lines whose first non-blank text is ``prefix`` in a boring span.

    The prefix itself is removed; every line ends with a newline.
    """
    result: list[str] = []
    for line in _lines(content):
        if line.lstrip().startswith(prefix):
            position = line.find(prefix)
            indent, rest = line[:position], line[position + len(prefix):]
            result.append(f"{_BORING_OPEN}{indent}{rest}\n{_BORING_CLOSE}")
        else:
            result.append(line + "\n")
    return "".join(result)


def _hidelines_prefix(classes: str, code_config: CodeConfig) -> str | None:
    explicit = _HIDELINES.search(classes)
    if explicit:
        return explicit.group(1)
    language = _LANGUAGE.search(classes)
    if language:
        return code_config.hidelines.get(language.group(1))
    return None


def hide_lines(html: str, code_config: CodeConfig) -> str:
    """Convert hidden lines in every ``<code>`` block of ``html``.

    Rust blocks use ``#`` markers; other languages use the block's
    ``hidelines=`` class or the prefix configured for their language.
    """

    def replace(match: re.Match[str]) -> str:
        text, classes, code = match.groups()
        if "language-rust" in classes:
            return f'<code class="{classes}">{hide_lines_rust(code)}</code>'
        prefix = _hidelines_prefix(classes, code_config)
        if prefix is None:
            return text
        return f'<code class="{classes}">{hide_lines_with_prefix(code, prefix)}</code>'

    return CODE_BLOCK_RE.sub(replace, html)