"""Rendering options that affect code blocks."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class RustEdition(enum.Enum):
    """A Rust edition that runnable code blocks are compiled with."""

    E2015 = "2015"
    E2018 = "2018"
    E2021 = "2021"

    def css_class(self) -> str:
        """Return the code block class naming this edition."""
        return f"edition{self.value}"


@dataclass
class Playground:
    """Options for runnable and editable code blocks."""

    editable: bool = False
    copyable: bool = True
    copy_js: bool = True
    line_numbers: bool = False
    runnable: bool = True


@dataclass
class CodeConfig:
    """Options for code blocks, such as hidden-line prefixes per language."""

    hidelines: dict[str, str] = field(default_factory=dict)