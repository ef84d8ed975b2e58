# mdpress

`mdpress` is a small library of helpers for building an HTML book out of
Markdown chapters. It has no dependencies beyond the standard library.

What it provides:

- `mdpress.strings`: take line ranges and `ANCHOR:` / `ANCHOR_END:` regions
  out of included source files, either keeping only the selected lines or
  keeping everything and prefixing the unselected lines with `# `.
- `mdpress.fsutil`: write files into an output tree (creating parent
  directories), empty a directory, copy a tree while skipping some
  extensions, compute a `../` prefix back to the root, and name the 404 page.
- `mdpress.tomlpath`: read, insert and delete values at dotted keys such as
  `output.html.optional` in nested tables (for example, ones loaded with
  `tomllib`).
- `mdpress.theme`: the `Theme` dataclass and `load_theme`, which replaces
  parts of a theme with files found in a theme directory.
- `mdpress.config`: `RustEdition`, `Playground` and `CodeConfig`, the options
  used by the code block helpers.
- `mdpress.playground`: turn comma-separated code classes into
  space-separated ones (`fix_code_blocks`) and wrap runnable Rust code
  blocks in a playground `<pre>` (`add_playground_pre`).
- `mdpress.hiding`: wrap "boring" code lines in `<span class="boring">`
  (`hide_lines`, `hide_lines_rust`, `hide_lines_with_prefix`).

## Installation

```
pip install mdpress
```

Python 3.11 or later is required.

## Examples

Take part of an included file:

```python
from mdpress.strings import take_lines, take_anchored_lines, take_rustdoc_include_lines

text = "Lorem\nipsum\ndolor\nsit\namet"
take_lines(text, 1, 3)                    # 'ipsum\ndolor'
take_rustdoc_include_lines(text, 3, None) # '# Lorem\n# ipsum\n# dolor\nsit\namet'
take_anchored_lines("a\nANCHOR: x\nb\nANCHOR_END: x\nc", "x")  # 'b'
```

Work with dotted TOML keys:

```python
from mdpress.tomlpath import read_key, insert_key, delete_key

table = {}
insert_key(table, "output.html.optional", True)
read_key(table, "output.html.optional")    # True
delete_key(table, "output.html.optional")  # True
read_key(table, "output.html.optional")    # None
```

Compute a relative path back to the root of the output:

```python
from mdpress.fsutil import path_to_root, get_404_output_file

path_to_root("some/relative/path")  # '../../'
get_404_output_file(None)           # '404.html'
```

Wrap a Rust snippet for a playground, then hide its boring lines:

```python
from mdpress.config import CodeConfig, Playground, RustEdition
from mdpress.hiding import hide_lines
from mdpress.playground import add_playground_pre, fix_code_blocks

fix_code_blocks('<code class="language-rust,ignore">')
# '<code class="language-rust ignore">'

html = add_playground_pre(
    '<code class="language-rust">x()</code>', Playground(), RustEdition.E2021
)
# '<pre class="playground"><code class="language-rust edition2021">'
# '# #![allow(unused)]\n#fn main() {\nx()\n#}</code></pre>'

hide_lines(html, CodeConfig())
```

Other languages can hide lines with a configured prefix:

```python
from mdpress.hiding import hide_lines_with_prefix

hide_lines_with_prefix("~hidden()\nshown()", "~")
# '<span class="boring">hidden()\n</span>shown()\n'
```

Load a theme directory over a set of defaults:

```python
from mdpress.theme import Theme, load_theme

theme = load_theme("theme", Theme(index=b"{{content}}"))
```

Files such as `index.hbs`, `css/chrome.css` or `fonts/fonts.css` in the
directory replace the matching fields. If only one of `favicon.png` and
`favicon.svg` is present, the other favicon is set to `None`.

## What it does not do

`mdpress` does not render Markdown to HTML, add anchors to headers, build a
table of contents or previous/next links, or render page templates. It has
no command-line program and does not build a whole book on its own; it
supplies the pieces listed above for a build that does.

## Running the tests

```
pip install -e ".[test]"
pytest
```