# notepaper

Print your own notebook paper. `notepaper` writes single-page PDF files with
ruled lines, dot grids, cursive writing guides or blackletter ladder guides,
sized for Letter, A4 or B5 paper.

## Installation

```
pip install .
```

The package has no runtime dependencies; it writes the PDF itself.

## Usage

```
notepaper [options]
```

By default pages are written into a `pdf/` directory under the current
directory; `--dir` chooses another one. The directory is created if it does
not exist. The chosen options are printed before the page is drawn.

Every option can be given with one dash or with two (`-sp 8` or `--sp 8`).

| Option        | Default  | Meaning                                                |
|---------------|----------|--------------------------------------------------------|
| `-style N`    | `0`      | page style: `0` lines, `1` dots, `2` cursive grid      |
| `-sp MM`      | `7.0`    | spacing between dots or lines, in millimetres          |
| `-c`          | off      | draw a center dot or line between the main ones        |
| `-o L\|P`     | `L`      | paper orientation: landscape or portrait               |
| `-ps SIZE`    | `Letter` | paper size: `Letter`, `A4` or `B5` (case-insensitive)  |
| `-u MM`       | `5.0`    | unit height of the cursive grid; used instead of `-sp` |
| `-a DEG`      | `0.0`    | angle offset of the center dots, in degrees            |
| `-l`          | off      | add blackletter ladder guides (2/4/2/4) to line pages  |
| `-dark`       | off      | draw every line dark instead of light gray             |
| `--dir PATH`  | `pdf`    | directory the PDF file is written to                   |

An unknown paper size, orientation or style, or a spacing that is not
positive, is reported and the command exits with status 1.

### Examples

Ruled A4 portrait paper with 8 mm spacing and light center lines:

```
notepaper -ps A4 -o P -sp 8 -c
```

A Letter landscape dot grid with slanted center dots:

```
notepaper -style 1 -c -a 12
```

A cursive practice sheet with 4 mm units:

```
notepaper -style 2 -u 4
```

### Output file names

- lines: `lines-<SIZE>-<O>-<spacing>[-center].pdf`, spacing with three decimals (`7.000`)
- dots: `dots-<SIZE>-<O>-<spacing>[-center].pdf`, spacing with six decimals (`7.000000`)
- cursive: `cursive-<SIZE>-<O>-<units>-center.pdf`, units with six decimals

`<SIZE>` is the paper size in upper case, `<O>` the orientation letter.

## Using it from Python

```python
from notepaper.options import make_options
from notepaper.drawing import draw_dots

options = make_options(spacing=5.0, centermark=True, orientation="P", paper_size="a4")
path = draw_dots(options, "out")
```

- `notepaper.options` – `make_options` builds an immutable `Options` from the
  user's choices; `page_dimensions(paper_size, orientation)` returns the page
  width, height and margins in millimetres. `Color` and `Point` are small
  value types.
- `notepaper.drawing` – `draw_lines`, `draw_dots` and `cursive_grid` render a
  page into a directory and return the written path; `lines_filename`,
  `dots_filename` and `cursive_filename` give the file names.
- `notepaper.ladder` – `draw_ladder`, `draw_ladder_lines` and
  `draw_ladder_line_group` draw blackletter ladder guides on a canvas.
- `notepaper.canvas` – `PdfCanvas` is a one-page vector canvas in millimetres
  (origin at the top left) with `line`, `circle` and `polygon` methods and
  `to_bytes` / `save` for output; `new_canvas(options)` sizes one for a page.
- `notepaper.cli` – `main(argv=None)` is the command above; `build_parser`
  returns its argument parser.

## Limitations

Each run writes a single one-page PDF. Line pages without `-c` or `-l` draw
no rules, so a plain lined page needs one of those options. Only Letter, A4
and B5 paper are known, and no text, fonts or images are drawn.