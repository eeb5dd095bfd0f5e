"""Extra box drawing symbols rendered into an alpha mask.

Covers what plain rectangles cannot draw well: dashes, diagonals, rounded
corners, sextants, octants, wedges and the other legacy computing symbols.
The result is one :class:`~stkit.raster.GlyphBuffer` at screen scale whose
cells are addressed by the indices encoded with the ``BDE`` category.
"""

from __future__ import annotations

from stkit.raster import GlyphBuffer, rounded_div
from stkit.symbols import (
    BE_ARC_DL,
    BE_ARC_DR,
    BE_ARC_UL,
    BE_ARC_UR,
    BE_DIAG_CROSS,
    BE_DIAG_LR,
    BE_DIAG_RL,
    BE_EXTRA_LEN,
    BE_HDASH2,
    BE_HDASH2_HEAVY,
    BE_HDASH3,
    BE_HDASH3_HEAVY,
    BE_HDASH4,
    BE_HDASH4_HEAVY,
    BE_LEGACY_IDX,
    BE_MISC_LEN,
    BE_OCTANTS_IDX,
    BE_SEXTANTS_LEN,
    BE_VDASH2,
    BE_VDASH2_HEAVY,
    BE_VDASH3,
    BE_VDASH3_HEAVY,
    BE_VDASH4,
    BE_VDASH4_HEAVY,
    BOXMISC,
    OCTANTS,
    SEXTANTS,
    SS_FACTOR,
)

__all__ = ["extra_line_width", "generate_extra_symbols"]


def extra_line_width(cw: int, ch: int, bold: bool) -> int:
    """Stem thickness used for extra symbols in a ``cw`` x ``ch`` cell."""
    mwh = min(cw, ch)
    base = max(1, rounded_div(mwh, 8))
    if bold and mwh >= 6:
        return max(base + 1, rounded_div(3 * base, 2))
    return base


def generate_extra_symbols(cw: int, ch: int, bold: bool, display_width: int) -> GlyphBuffer:
    """Render every extra symbol for the given cell size.

    Raises ValueError when the display is too narrow to hold a cell.
    """
    lw = extra_line_width(cw, ch, bold)
    cx = rounded_div(cw - lw, 2)
    cy = rounded_div(ch - lw, 2)
    buf = GlyphBuffer(cw, ch, cx, cy, lw, lw, BE_EXTRA_LEN, 1, display_width)
    ss = GlyphBuffer(cw, ch, cx, cy, lw, lw, BE_MISC_LEN, SS_FACTOR, display_width)

    bm = BOXMISC
    # dashes, diagonals, rounded corners
    for code, n, heavy in (
        (BE_HDASH2, 2, False), (BE_HDASH3, 3, False), (BE_HDASH4, 4, False),
        (BE_HDASH2_HEAVY, 2, True), (BE_HDASH3_HEAVY, 3, True), (BE_HDASH4_HEAVY, 4, True),
    ):
        ss.draw_hdashes(bm[code], n, heavy)
    for code, n, heavy in (
        (BE_VDASH2, 2, False), (BE_VDASH3, 3, False), (BE_VDASH4, 4, False),
        (BE_VDASH2_HEAVY, 2, True), (BE_VDASH3_HEAVY, 3, True), (BE_VDASH4_HEAVY, 4, True),
    ):
        ss.draw_vdashes(bm[code], n, heavy)
    ss.draw_rounded_corners(bm[BE_ARC_DR], bm[BE_ARC_DL], bm[BE_ARC_UL], bm[BE_ARC_UR])
    ss.draw_diagonals(bm[BE_DIAG_LR], bm[BE_DIAG_RL], bm[BE_DIAG_CROSS])
    buf.downsample(0, ss, 0, BE_MISC_LEN)

    buf.draw_block_patterns(BE_OCTANTS_IDX, OCTANTS, 4)

    _draw_legacy(ss, buf)
    return buf


def _draw_legacy(ss: GlyphBuffer, buf: GlyphBuffer) -> None:
    idx = BE_LEGACY_IDX
    buf.draw_block_patterns(idx, SEXTANTS, 3)          # U+1FB00..U+1FB3B
    idx += BE_SEXTANTS_LEN
    idx = _draw_wedges(ss, buf, idx)                   # U+1FB3C..U+1FB6F, U+1FB9A..B
    idx = _vertical_one_eighth_blocks(buf, idx)        # U+1FB70..U+1FB75
    idx = _horizontal_one_eighth_blocks(buf, idx)      # U+1FB76..U+1FB7B
    idx = _one_eighth_frames(buf, idx)                 # U+1FB7C..U+1FB80
    idx = _horizontal_one_eighth_block_1358(buf, idx)  # U+1FB81
    idx = _upper_one_eighth_blocks(buf, idx)           # U+1FB82..U+1FB86
    idx = _right_one_eighth_blocks(buf, idx)           # U+1FB87..U+1FB8B
    idx = _medium_shades(buf, idx)                     # U+1FB8C..U+1FB94
    idx = _checker_board_fill(ss, buf, idx)            # U+1FB95..U+1FB96
    idx = _heavy_horizontal_fill(buf, idx)             # U+1FB97
    idx = _diagonal_fill(ss, buf, idx)                 # U+1FB98..U+1FB99
    idx += 2                                           # U+1FB9A..U+1FB9B (wedges)
    idx = _triangular_medium_shades(ss, buf, idx)      # U+1FB9C..U+1FB9F
    idx = _left_thirds_blocks(buf, idx)                # U+1FBCE..U+1FBCF
    _one_quarter_blocks(buf, idx)                      # U+1FBE4..U+1FBE7


def _draw_wedge(ss, buf, idx, x1, y1, x2, y2, x3, y3, block, invert) -> None:
    ss.draw_rect(0, 0, 0, ss.cw, ss.ch, 255 if invert else 0)
    ss.draw_triangle(0, x1, y1, x2, y2, x3, y3, 0 if invert else 255)
    if block:
        top = ss.ch * (block - 1) // 3
        bottom = ss.ch * block // 3
        ss.draw_rect(0, 0, top, ss.cw, bottom - top, 0 if invert else 255)
    buf.downsample(idx, ss, 0, 1)


def _draw_wedges(ss: GlyphBuffer, buf: GlyphBuffer, idx: int) -> int:
    cw, ch = ss.cw, ss.ch
    cy = rounded_div(ch, 2)
    x0, x1 = 0, rounded_div(cw, 2)
    y0, y1, y2 = 0, ch // 3, ch * 2 // 3
    x0e, x1e = x1 - 1, cw - 1
    y0e, y1e, y2e = y1 - 1, y2 - 1, ch - 1

    ss.erase_symbol(0)
    for i in range(2):
        inv = i
        if i == 0:
            middle = (x1e, y1, x0, y1e, x1e, y1e, 3, 0)      # U+1FB46
            last = (x0, y1, x0, y1e, x1e, y1e, 3, 0)         # U+1FB51
        else:
            middle = (x0, y1, x0, y1e, x1e, y1, 1, 0)        # U+1FB5C
            last = (x0, y1, x1e, y1e, x1e, y1, 1, 0)         # U+1FB67
        wedges = (
            (x0, y2, x0, y2e, x0e, y2e, 0, inv),
            (x0, y2, x0, y2e, x1e, y2e, 0, inv),
            (x0, y1, x0, y2e, x0e, y2e, 0, inv),
            (x0, y1, x0, y2e, x1e, y2e, 0, inv),
            (x0, y0, x0, y2e, x0e, y2e, 0, inv),
            (x0, y0, x0, y0e, x0e, y0, 0, inv ^ 1),
            (x0, y0, x0, y0e, x1e, y0, 0, inv ^ 1),
            (x0, y0, x0, y1e, x0e, y0, 0, inv ^ 1),
            (x0, y0, x0, y1e, x1e, y0, 0, inv ^ 1),
            (x0, y0, x0, y2e, x0e, y0, 0, inv ^ 1),
            middle,
            (x1e, y2, x1, y2e, x1e, y2e, 0, inv),
            (x1e, y2, x0, y2e, x1e, y2e, 0, inv),
            (x1e, y1, x1, y2e, x1e, y2e, 0, inv),
            (x1e, y1, x0, y2e, x1e, y2e, 0, inv),
            (x1e, y0, x1, y2e, x1e, y2e, 0, inv),
            (x1, y0, x1e, y0, x1e, y0e, 0, inv ^ 1),
            (x0, y0, x1e, y0, x1e, y0e, 0, inv ^ 1),
            (x1, y0, x1e, y0, x1e, y1e, 0, inv ^ 1),
            (x0, y0, x1e, y0, x1e, y1e, 0, inv ^ 1),
            (x1, y0, x1e, y2e, x1e, y0, 0, inv ^ 1),
            last,
        )
        for wedge in wedges:
            _draw_wedge(ss, buf, idx, *wedge)
            idx += 1

    for i in range(2):
        inv = 1 - i
        for tri in (
            (x0, y0, x0, y2e, x1, cy),
            (x0, y0, x1, cy, x1e, y0),
            (x1e, y0, x1, cy, x1e, y2e),
            (x0, y2e, x1, cy, x1e, y2e),
        ):
            _draw_wedge(ss, buf, idx, *tri, 0, inv)
            idx += 1

    # U+1FB9A
    ss.draw_rect(0, 0, 0, ss.cw, ss.ch, 0)
    ss.draw_triangle(0, x0, y0, x1, cy, x1e, y0, 255)
    ss.draw_triangle(0, x0, y2e, x1, cy, x1e, y2e, 255)
    buf.downsample(idx + 42, ss, 0, 1)

    # U+1FB9B
    ss.draw_rect(0, 0, 0, ss.cw, ss.ch, 0)
    ss.draw_triangle(0, x0, y0, x0, y2e, x1, cy, 255)
    ss.draw_triangle(0, x1e, y0, x1, cy, x1e, y2e, 255)
    buf.downsample(idx + 43, ss, 0, 1)

    return idx


def _vertical_one_eighth_blocks(buf: GlyphBuffer, idx: int) -> int:
    for i in range(1, 7):
        buf.draw_rect(idx, rounded_div(buf.cw * i, 8), 0, buf.lw, buf.ch, 255)
        idx += 1
    return idx


def _horizontal_one_eighth_blocks(buf: GlyphBuffer, idx: int) -> int:
    lh = max(buf.ch // 8, 1)
    for i in range(1, 7):
        buf.draw_rect(idx, 0, rounded_div(buf.ch * i, 8), buf.cw, lh, 255)
        idx += 1
    return idx


def _one_eighth_frames(buf: GlyphBuffer, idx: int) -> int:
    cw, ch, lw = buf.cw, buf.ch, buf.lw
    lh = max(ch // 8, 1)
    frames = (
        ((0, 0, lw, ch), (0, ch - lh, cw, lh)),          # U+1FB7C
        ((0, 0, lw, ch), (0, 0, cw, lh)),                # U+1FB7D
        ((cw - lw, 0, lw, ch), (0, 0, cw, lh)),          # U+1FB7E
        ((cw - lw, 0, lw, ch), (0, ch - lh, cw, lh)),    # U+1FB7F
        ((0, 0, cw, lh), (0, ch - lh, cw, lh)),          # U+1FB80
    )
    for rects in frames:
        for x, y, w, h in rects:
            buf.draw_rect(idx, x, y, w, h, 255)
        idx += 1
    return idx


def _horizontal_one_eighth_block_1358(buf: GlyphBuffer, idx: int) -> int:
    cw, ch = buf.cw, buf.ch
    lh = max(ch // 8, 1)
    for i in (0, 2, 4):
        buf.draw_rect(idx, 0, rounded_div((ch - lh) * i, 8), cw, lh, 255)
    buf.draw_rect(idx, 0, ch - lh, cw, lh, 255)
    return idx + 1


def _upper_one_eighth_blocks(buf: GlyphBuffer, idx: int) -> int:
    for i in (2, 3, 5, 6, 7):
        buf.draw_rect(idx, 0, 0, buf.cw, rounded_div(buf.ch * i, 8), 255)
        idx += 1
    return idx


def _right_one_eighth_blocks(buf: GlyphBuffer, idx: int) -> int:
    cw = buf.cw
    for i in (2, 3, 5, 6, 7):
        w = rounded_div(cw * i, 8)
        buf.draw_rect(idx, cw - w, 0, w, buf.ch, 255)
        idx += 1
    return idx


def _medium_shades(buf: GlyphBuffer, idx: int) -> int:
    cw, ch = buf.cw, buf.ch
    w2, h2 = rounded_div(cw, 2), rounded_div(ch, 2)
    shapes = (
        ((0, 0, w2, ch, 128),),                                   # U+1FB8C
        ((w2, 0, cw - w2, ch, 128),),                             # U+1FB8D
        ((0, 0, cw, h2, 128),),                                   # U+1FB8E
        ((0, h2, cw, ch - h2, 128),),                             # U+1FB8F
        ((0, 0, cw, ch, 128),),                                   # U+1FB90
        ((0, 0, cw, h2, 255), (0, h2, cw, ch - h2, 128)),         # U+1FB91
        ((0, 0, cw, h2, 128), (0, h2, cw, ch - h2, 255)),         # U+1FB92
        (),                                                       # U+1FB93 reserved
        ((0, 0, w2, ch, 128), (w2, 0, cw - w2, ch, 255)),         # U+1FB94
    )
    for rects in shapes:
        for x, y, w, h, alpha in rects:
            buf.draw_rect(idx, x, y, w, h, alpha)
        idx += 1
    return idx


def _checker_board_fill(ss: GlyphBuffer, buf: GlyphBuffer, idx: int) -> int:
    ss.erase_symbol(0)
    for j in range(4):
        for i in (0, 2):
            x1 = ss.cw * (i + (j & 1)) // 4
            x2 = ss.cw * (i + (j & 1) + 1) // 4
            y1 = ss.ch * j // 4
            y2 = ss.ch * (j + 1) // 4
            ss.draw_rect(0, x1, y1, x2 - x1, y2 - y1, 255)
    buf.downsample(idx, ss, 0, 1)
    buf.copy_symbol(idx + 1, idx, True)
    return idx + 2


def _heavy_horizontal_fill(buf: GlyphBuffer, idx: int) -> int:
    # U+1FB97 looks the same as U+1CDB7
    buf.copy_symbol(idx, BE_OCTANTS_IDX + 183, False)
    return idx + 1


def _diagonal_fill(ss: GlyphBuffer, buf: GlyphBuffer, idx: int) -> int:
    if buf.cw < 12:
        stripes = 4
    elif buf.cw < 16:
        stripes = 6
    else:
        stripes = 8
    dx = ss.cw / ss.ch

    ss.erase_symbol(0)
    for j in range(0, stripes, 2):
        x = float(ss.cw * j // stripes)
        length = ss.cw * (j + 1) // stripes - x
        for i in range(ss.ch):
            x1 = int(ss.cw - x) if x < 0 else int(x)
            x2 = int(x1 + length)
            ss.draw_rect(0, x1, i, min(x2, ss.cw) - x1, 1, 255)
            if x2 > ss.cw:
                ss.draw_rect(0, 0, i, x2 - ss.cw, 1, 255)
            x += dx
            if x >= ss.cw:
                x -= ss.cw
    buf.downsample(idx, ss, 0, 1)
    buf.copy_symbol(idx + 1, idx, True)
    return idx + 2


def _triangular_medium_shades(ss: GlyphBuffer, buf: GlyphBuffer, idx: int) -> int:
    cw, ch = ss.cw, ss.ch
    for tri in (
        (0, 0, 0, ch - 1, cw - 1, 0),
        (0, 0, cw - 1, ch - 1, cw - 1, 0),
        (cw - 1, 0, 0, ch - 1, cw - 1, ch - 1),
        (0, 0, 0, ch - 1, cw - 1, ch - 1),
    ):
        ss.erase_symbol(0)
        ss.draw_triangle(0, *tri, 128)
        buf.downsample(idx, ss, 0, 1)
        idx += 1
    return idx


def _left_thirds_blocks(buf: GlyphBuffer, idx: int) -> int:
    buf.draw_rect(idx, 0, 0, rounded_div(buf.cw * 2, 3), buf.ch, 255)
    buf.draw_rect(idx + 1, 0, 0, rounded_div(buf.cw, 3), buf.ch, 255)
    return idx + 2


def _one_quarter_blocks(buf: GlyphBuffer, idx: int) -> int:
    cw, ch = buf.cw, buf.ch
    w2, h2 = rounded_div(cw, 2), rounded_div(ch, 2)
    cx, cy = rounded_div(cw - w2, 2), rounded_div(ch - h2, 2)
    for x, y, w, h in (
        (cx, 0, w2, h2),          # U+1FBE4
        (cx, h2, w2, ch - h2),    # U+1FBE5
        (0, cy, w2, h2),          # U+1FBE6
        (cw - w2, cy, w2, h2),    # U+1FBE7
    ):
        buf.draw_rect(idx, x, y, w, h, 255)
        idx += 1
    return idx