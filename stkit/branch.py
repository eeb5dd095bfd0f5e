"""Branch drawing symbols (U+F5D0..U+F60D) rendered into an alpha mask."""

from __future__ import annotations

from stkit.raster import GlyphBuffer, rounded_div
from stkit.symbols import (
    BRANCH_SYMBOLS,
    BSABL,
    BSABL_INDX,
    BSABR,
    BSABR_INDX,
    BSATL,
    BSATL_INDX,
    BSATR,
    BSATR_INDX,
    BSCM,
    BSCM_INDX,
    BSCN,
    BSFD,
    BSFL,
    BSFR,
    BSFU,
    BSLD,
    BSLL,
    BSLR,
    BSLU,
    SS_FACTOR,
)

__all__ = ["branch_line_width", "generate_branch_symbols"]


def _centre(n: int) -> int:
    """Rounded half of ``n``, truncating toward zero like integer C division."""
    total = n + 1
    return total // 2 if total >= 0 else -((-total) // 2)


def branch_line_width(cw: int, ch: int, thickness: int) -> int:
    """Line width for branch symbols; a positive ``thickness`` wins."""
    if thickness > 0:
        return thickness
    return max(1, rounded_div(min(cw, ch), 8))


def generate_branch_symbols(cw: int, ch: int, thickness: int, display_width: int) -> GlyphBuffer:
    """Render every branch symbol for the given cell size.

    Raises ValueError when the display is too narrow to hold a cell.
    """
    lw = branch_line_width(cw, ch, thickness)
    cx = _centre(cw - lw)
    cy = _centre(ch - lw)
    count = len(BRANCH_SYMBOLS)
    out = GlyphBuffer(cw, ch, cx, cy, lw, 0, count, 1, display_width)
    ss = GlyphBuffer(cw, ch, cx, cy, lw, 0, count, SS_FACTOR, display_width)

    ss.draw_circle(BSCM_INDX, True)
    ss.draw_rounded_corners(BSABR_INDX, BSABL_INDX, BSATL_INDX, BSATR_INDX)

    for i, s in enumerate(BRANCH_SYMBOLS):
        if s & BSLR:
            ss.draw_line_right(i)
        if s & BSLL:
            ss.draw_line_left(i)
        if s & BSLD:
            ss.draw_line_down(i)
        if s & BSLU:
            ss.draw_line_up(i)
        if s & (BSFR | BSFL):
            ss.draw_horiz_fading_line(i, bool(s & BSFL))
        if s & (BSFD | BSFU):
            ss.draw_vert_fading_line(i, bool(s & BSFU))
        for flag, source in (
            (BSABR, BSABR_INDX),
            (BSABL, BSABL_INDX),
            (BSATR, BSATR_INDX),
            (BSATL, BSATL_INDX),
            (BSCM, BSCM_INDX),
        ):
            if s & flag:
                ss.copy_symbol(i, source, False)
        if s & BSCN:
            ss.draw_circle(i, False)

    out.downsample(0, ss, 0, out.numchars)
    return out