"""Theme assets, with user overrides loaded from a theme directory."""

from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

# Files in the theme directory, mapped to the Theme field they replace.
_OVERRIDABLE_FILES = {
    "index.hbs": "index",
    "head.hbs": "head",
    "redirect.hbs": "redirect",
    "header.hbs": "header",
    "book.js": "js",
    "css/chrome.css": "chrome_css",
    "css/general.css": "general_css",
    "css/print.css": "print_css",
    "css/variables.css": "variables_css",
    "highlight.js": "highlight_js",
    "clipboard.min.js": "clipboard_js",
    "highlight.css": "highlight_css",
    "tomorrow-night.css": "tomorrow_night_css",
    "ayu-highlight.css": "ayu_highlight_css",
}


@dataclass
class Theme:
    """The templates, styles and scripts that make up an HTML theme."""

    index: bytes = b""
    head: bytes = b""
    redirect: bytes = b""
    header: bytes = b""
    chrome_css: bytes = b""
    general_css: bytes = b""
    print_css: bytes = b""
    variables_css: bytes = b""
    fonts_css: bytes | None = None
    font_files: list[Path] = field(default_factory=list)
    favicon_png: bytes | None = b""
    favicon_svg: bytes | None = b""
    js: bytes = b""
    highlight_css: bytes = b""
    tomorrow_night_css: bytes = b""
    ayu_highlight_css: bytes = b""
    highlight_js: bytes = b""
    clipboard_js: bytes = b""


def _load_with_warn(filename: Path) -> bytes | None:
    """Read ``filename``; return ``None`` if it is missing or cannot be read."""
    if not filename.exists():
        return None
    try:
        return filename.read_bytes()
    except OSError as exc:
        logger.warning("Couldn't load custom file, %s: %s", filename, exc)
        return None


def _font_files(fonts_dir: Path) -> list[Path] | None:
    try:
        entries = sorted(fonts_dir.iterdir())
    except OSError:
        return None
    files = []
    for entry in entries:
        if entry.name == "fonts.css":
            continue
        try:
            is_dir = entry.is_dir()
        except OSError:
            continue
        if is_dir:
            logger.info("skipping font directory %s", entry)
            continue
        files.append(entry)
    return files


def load_theme(
    theme_dir: str | os.PathLike[str], defaults: Theme | None = None
) -> Theme:
    """Build a theme from ``defaults``, replacing each part found in ``theme_dir``.

    If only one of the two favicons is overridden, the other is dropped.
    """
    base = defaults if defaults is not None else Theme()
    theme = dataclasses.replace(base, font_files=list(base.font_files))

    theme_dir = Path(theme_dir)
    if not theme_dir.is_dir():
        return theme

    for relative, attribute in _OVERRIDABLE_FILES.items():
        contents = _load_with_warn(theme_dir / relative)
        if contents is not None:
            setattr(theme, attribute, contents)

    fonts_dir = theme_dir / "fonts"
    if fonts_dir.exists():
        fonts_css = _load_with_warn(fonts_dir / "fonts.css")
        if fonts_css is not None:
            theme.fonts_css = fonts_css
        files = _font_files(fonts_dir)
        if files is not None:
            theme.font_files = files

    png = _load_with_warn(theme_dir / "favicon.png")
    svg = _load_with_warn(theme_dir / "favicon.svg")
    if png is not None:
        theme.favicon_png = png
    if svg is not None:
        theme.favicon_svg = svg
    if png is not None and svg is None:
        theme.favicon_svg = None
    elif svg is not None and png is None:
        theme.favicon_png = None

    return theme