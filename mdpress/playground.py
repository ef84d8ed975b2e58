"""Code block class fixes and playground wrapping for runnable Rust snippets."""

from __future__ import annotations

import re

from mdpress.config import Playground, RustEdition

_FIX_CODE_BLOCKS = re.compile(r'<code([^>]+)class="([^"]+)"([^>]*)>')
CODE_BLOCK_RE = re.compile(r'(<code[^>]?class="([^"]+)".*?>(.*?)</code>)', re.DOTALL)

_EDITION_CLASSES = ("edition2015", "edition2018", "edition2021")


def _lines(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def fix_code_blocks(html: str) -> str:
    """Replace commas with spaces in the class lists of ``<code>`` tags."""

    def replace(match: re.Match[str]) -> str:
        before, classes, after = match.groups()
        return f'<code{before}class="{classes.replace(",", " ")}"{after}>'

    return _FIX_CODE_BLOCKS.sub(replace, html)


def partition_source(text: str) -> tuple[str, str]:
    """Split source into its leading crate attributes and blank lines, and the rest."""
    before: list[str] = []
    after: list[str] = []
    after_header = False
    for line in _lines(text):
        trimmed = line.strip()
        header = not trimmed or trimmed.startswith("#![")
        if not header or after_header:
            after_header = True
            after.append(line + "\n")
        else:
            before.append(line + "\n")
    return "".join(before), "".join(after)


def _is_runnable(classes: str, playground: Playground) -> bool:
    if "language-rust" not in classes:
        return False
    if "mdbook-runnable" in classes:
        return True
    return playground.runnable and not any(
        marker in classes for marker in ("ignore", "noplayground", "noplaypen")
    )


def add_playground_pre(
    html: str, playground: Playground, edition: RustEdition | None = None
) -> str:
    """Wrap runnable Rust code blocks in a playground ``<pre>``.

    Snippets without a ``main`` function get a hidden one wrapped around them.
    """

    def replace(match: re.Match[str]) -> str:
        text, classes, code = match.groups()
        if not _is_runnable(classes, playground):
            return text

        if any(name in classes for name in _EDITION_CLASSES) or edition is None:
            edition_class = ""
        else:
            edition_class = f" {edition.css_class()}"

        if (
            (playground.editable and "editable" in classes)
            or "fn main" in text
            or "quick_main!" in text
        ):
            content = code
        else:
            attrs, body = partition_source(code)
            content = f"# #![allow(unused)]\n{attrs}#fn main() {{\n{body}#}}"

        return (
            f'<pre class="playground"><code class="{classes}{edition_class}">'
            f"{content}</code></pre>"
        )

    return CODE_BLOCK_RE.sub(replace, html)