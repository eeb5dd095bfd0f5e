# stkit

Building blocks for a terminal emulator, in plain Python with no third-party
dependencies.

## What is in it

- `stkit.symbols` – shape tables. Every box-drawing shape is a 16-bit value:
  the high bits name a category (`BDL` lines, `BDA` arcs, `BBD`/`BBU`/`BBL`/`BBR`
  eighth blocks, `BBQ` quadrants, `BBS` shades, `BRL` braille, `BDE` extra
  symbols, `BRS` branch symbols, `BDB` bold) and the low bits carry the data.
  It holds `BOXDATA` (U+2500..U+259F), `BOXMISC`, `BOXLEGACY` (built by
  `build_legacy_table()`), `SEXTANTS`, `OCTANTS` and `BRANCH_SYMBOLS`.
- `stkit.raster` – `GlyphBuffer`, a grid of character cells kept in one 8-bit
  alpha image, with primitives for rectangles, centred lines, rounded corners,
  circles, fading lines, dashes, diagonals, block patterns and triangles,
  plus `downsample()` from a supersampled buffer. Also `rounded_div()`,
  `avg_intensity()` and `warn_once()`.
- `stkit.extra` – `generate_extra_symbols(cw, ch, bold, display_width)` renders
  dashes, diagonals, rounded corners, sextants, octants, wedges and the other
  legacy computing symbols (U+1FB00.., U+1CD00..) into one `GlyphBuffer`;
  `extra_line_width()` gives the stem thickness used.
- `stkit.branch` – `generate_branch_symbols(cw, ch, thickness, display_width)`
  renders the branch-drawing symbols U+F5D0..U+F60D anti-aliased;
  `branch_line_width()` gives their line width.
- `stkit.boxdraw` – `BoxRenderer` decides which code points it draws
  (`is_boxdraw()`), encodes them (`box_index()`) and turns a shape value into a
  list of drawing operations (`draw()`, `draw_lines()`, `draw_boxes()`):
  `Fill` rectangles and `MaskBlit` composites from a prerendered alpha mask.
  `BoxOptions` switches the families on and off (`boxdraw`, `boxdraw_bold`,
  `boxdraw_braille`, `boxdraw_extra`, `boxdraw_branch`, `branch_thickness`).
  Masks are generated lazily and cached per cell size.
- `stkit.urls` – `detect_url()` finds the URL under a cell in a grid of `Cell`
  objects, following wrapped lines both ways, dropping unbalanced closing
  brackets and trailing punctuation, and returns a `UrlMatch` with the text and
  the cells it spans. Cells carrying a hyperlink are matched by that link.
  `parse_url_protocols()`, `is_protocol_supported()`, `local_file_url()`,
  `copy_text_for_url()` (local `file:` and `vscode://file/` URLs become
  decoded paths) and `open_url()`, which starts an opener program on the URL
  in a new session.
- `stkit.osc7` – `parse_cwd()` reads a `file://host/path` working-directory
  report, accepting only an empty host, `localhost` or the local host name,
  and raises `Osc7Error` otherwise; `url_decode()` and `hex_value()`.
- `stkit.alpha` – `clamp()`, `adjust_alpha()` and `adjust_unfocused_alpha()`
  for stepping window opacity in 0.0..1.0 (a delta of zero resets to the
  default; an unfocused value of -1 means disabled and is left alone).
- `stkit.newterm` – `spawn_new_terminal()` starts a command in a new session in
  the directory picked by `choose_directory()`: the OSC 7 directory, the
  foreground process's directory (`foreground_cwd()`, read from `/proc`) or
  the shell's (`cwd_by_pid()`), as selected by `NewTermOption`.

## Installation

```
pip install .
```

Tests:

```
pip install ".[test]"
pytest
```

## Examples

Rasterise the extra symbols for a 10x20 cell and read back a pixel:

```python
from stkit.extra import generate_extra_symbols

buf = generate_extra_symbols(10, 20, bold=False, display_width=1920)
print(buf.pixel(0, 5, 10))
```

Turn a character into drawing operations:

```python
from stkit.boxdraw import BoxOptions, BoxRenderer

renderer = BoxRenderer(BoxOptions(), display_width=1920)
if renderer.is_boxdraw(0x2500):
    bd = renderer.box_index(0x2500, bold=False)
    ops = renderer.draw(0, 0, 10, 20, (0xFFFF, 0xFFFF, 0xFFFF), (0, 0, 0), bd)
```

Parse an OSC 7 report:

```python
from stkit.osc7 import parse_cwd

print(parse_cwd("file://localhost/home/user/My%20Dir", hostname="myhost"))
# /home/user/My Dir
```

Check URL protocols:

```python
from stkit.urls import parse_url_protocols, is_protocol_supported

protocols = parse_url_protocols("https://, http://, file:/")
print(is_protocol_supported("https://example.com", protocols))
```

## What it does not do

stkit is not a terminal emulator. It has no window, no drawing backend, no
pseudo-terminal, no escape-sequence parser and no keyboard handling: the
drawing operations from `BoxRenderer` and the masks from `GlyphBuffer` must be
put on screen by the caller, and the caller supplies the cell grid that
`detect_url()` searches. It installs no command-line programs.