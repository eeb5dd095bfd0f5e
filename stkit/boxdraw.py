"""Box drawing, block, shade, braille and branch symbols as drawing operations.

A :class:`BoxRenderer` turns a code point into a 16-bit shape value and a
shape value into a list of operations: :class:`Fill` rectangles and
:class:`MaskBlit` composites from a prerendered alpha mask. A backend carries
the operations out.
"""

from __future__ import annotations

from dataclasses import dataclass

from stkit.branch import branch_line_width, generate_branch_symbols
from stkit.extra import extra_line_width, generate_extra_symbols
from stkit.raster import GlyphBuffer, warn_once
from stkit.symbols import (
    BBD,
    BBL,
    BBQ,
    BBR,
    BBS,
    BBU,
    BDA,
    BDB,
    BDE,
    BDL,
    BE_LEGACY_IDX,
    BE_OCTANTS_IDX,
    BE_OCTANTS_LEN,
    BL,
    BOXDATA,
    BOXLEGACY,
    BOXMISC,
    BR,
    BRANCH_FIRST,
    BRANCH_SYMBOLS,
    BRL,
    BRS,
    BSLH_IDX,
    BSLV_IDX,
    DD,
    DL,
    DR,
    DU,
    LD,
    LL,
    LR,
    LU,
    TL,
    TR,
)

__all__ = ["BoxOptions", "Fill", "MaskBlit", "BoxRenderer"]

Color = tuple[int, int, int]

_OCTANTS_FIRST = 0x1CD00


def _div(n: int, d: int) -> int:
    """Rounded division of ``n`` by ``d``, truncating toward zero."""
    total = n + d // 2
    return total // d if total >= 0 else -((-total) // d)


@dataclass(frozen=True)
class BoxOptions:
    """Which symbol families are drawn instead of taken from the font."""

    boxdraw: bool = True
    boxdraw_bold: bool = False
    boxdraw_braille: bool = False
    boxdraw_extra: bool = False
    boxdraw_branch: bool = False
    branch_thickness: int = 0


@dataclass(frozen=True)
class Fill:
    """A solid rectangle in the given colour."""

    x: int
    y: int
    w: int
    h: int
    color: Color


@dataclass(frozen=True)
class MaskBlit:
    """Composite ``color`` through a rectangle of an alpha mask."""

    mask: GlyphBuffer
    mask_x: int
    mask_y: int
    x: int
    y: int
    w: int
    h: int
    color: Color


class BoxRenderer:
    """Maps code points to shape values and shape values to drawing operations."""

    def __init__(self, options=None, display_width=1920):
        self.options = options if options is not None else BoxOptions()
        self.display_width = display_width
        self._extra: dict[bool, GlyphBuffer] = {}
        self._branch: GlyphBuffer | None = None

    # -- classification ---------------------------------------------------

    def is_boxdraw(self, u: int) -> bool:
        """True when ``u`` is drawn by this renderer rather than the font."""
        o = self.options
        block = u & ~0xFF
        low = u & 0xFF
        return bool(
            (o.boxdraw and block == 0x2500 and BOXDATA[low])
            or (o.boxdraw_braille and block == 0x2800)
            or (o.boxdraw and o.boxdraw_extra and block == 0x2500 and BOXMISC[low])
            or (o.boxdraw and o.boxdraw_extra and block == 0x1FB00 and BOXLEGACY[low])
            or (o.boxdraw and o.boxdraw_extra
                and _OCTANTS_FIRST <= u < _OCTANTS_FIRST + BE_OCTANTS_LEN)
            or (o.boxdraw_branch
                and BRANCH_FIRST <= u < BRANCH_FIRST + len(BRANCH_SYMBOLS))
        )

    def box_index(self, u: int, bold: bool) -> int:
        """Shape value of code point ``u``; the whole shape is encoded in it."""
        o = self.options
        b = BDB if (o.boxdraw_bold and bold) else 0
        block = u & ~0xFF
        low = u & 0xFF

        if o.boxdraw_braille and block == 0x2800:
            return BRL | low
        if o.boxdraw_extra and block == 0x1FB00 and BOXLEGACY[low]:
            return BDE | (BOXLEGACY[low] + BE_LEGACY_IDX - 1)
        if o.boxdraw_extra and _OCTANTS_FIRST <= u < _OCTANTS_FIRST + BE_OCTANTS_LEN:
            return BDE | (u - _OCTANTS_FIRST + BE_OCTANTS_IDX)
        if o.boxdraw_branch and BRANCH_FIRST <= u < BRANCH_FIRST + len(BRANCH_SYMBOLS):
            return BRS | (u - BRANCH_FIRST)
        if o.boxdraw_extra and BOXMISC[low]:
            return BDE | b | BOXMISC[low]
        return b | BOXDATA[low]

    # -- drawing ----------------------------------------------------------

    def draw_boxes(self, x, y, cw, ch, fg, bg, indices) -> list:
        """Draw a run of shapes, one per cell, left to right."""
        ops: list = []
        for bd in indices:
            ops.extend(self.draw(x, y, cw, ch, fg, bg, bd & 0xFFFF))
            x += cw
        return ops

    def draw(self, x, y, w, h, fg, bg, bd) -> list:
        """Operations drawing shape ``bd`` into the cell at (x, y)."""
        cat = bd & ~(BDB | 0xFF)
        data = bd & 0xFF
        ops: list = []

        def rect(rx, ry, rw, rh, color=fg):
            if rw > 0 and rh > 0:
                ops.append(Fill(rx, ry, rw, rh, color))

        if cat & BDE:
            return self._draw_extra(x, y, w, h, fg, bd & 0x3FF, bool(bd & BDB))
        if cat == BRS:
            return self._draw_branch(x, y, w, h, fg, data)
        if bd & (BDL | BDA):
            return self.draw_lines(x, y, w, h, fg, bd)
        if cat == BBD:
            d = _div(data * h, 8)
            rect(x, y + d, w, h - d)
        elif cat == BBU:
            rect(x, y, w, _div(data * h, 8))
        elif cat == BBL:
            rect(x, y, _div(data * w, 8), h)
        elif cat == BBR:
            d = _div(data * w, 8)
            rect(x + d, y, w - d, h)
        elif cat == BBQ:
            w2, h2 = _div(w, 2), _div(h, 2)
            if bd & TL:
                rect(x, y, w2, h2)
            if bd & TR:
                rect(x + w2, y, w - w2, h2)
            if bd & BL:
                rect(x, y + h2, w2, h - h2)
            if bd & BR:
                rect(x + w2, y + h2, w - w2, h - h2)
        elif bd & BBS:
            d = data
            color = tuple(_div(f * d + b * (4 - d), 4) for f, b in zip(fg, bg))
            rect(x, y, w, h, color)
        elif cat == BRL:
            w1 = _div(w, 2)
            h1, h2, h3 = _div(h, 4), _div(h, 2), _div(3 * h, 4)
            dots = (
                (1, x, y, w1, h1),
                (2, x, y + h1, w1, h2 - h1),
                (4, x, y + h2, w1, h3 - h2),
                (8, x + w1, y, w - w1, h1),
                (16, x + w1, y + h1, w - w1, h2 - h1),
                (32, x + w1, y + h2, w - w1, h3 - h2),
                (64, x, y + h3, w1, h - h3),
                (128, x + w1, y + h3, w - w1, h - h3),
            )
            for bit, rx, ry, rw, rh in dots:
                if bd & bit:
                    rect(rx, ry, rw, rh)
        return ops

    def draw_lines(self, x, y, w, h, fg, bd) -> list:
        """Light, double, heavy lines and light arcs as rectangles."""
        ops: list = []

        def rect(rx, ry, rw, rh):
            if rw > 0 and rh > 0:
                ops.append(Fill(rx, ry, rw, rh, fg))

        # Bold is 1.5 * normal stem and at least 1px thicker; needs 6px.
        mwh = min(w, h)
        base_s = max(1, _div(mwh, 8))
        bold = bool(bd & BDB) and mwh >= 6
        s = max(base_s + 1, _div(3 * base_s, 2)) if bold else base_s
        w2, h2 = _div(w - s, 2), _div(h - s, 2)

        light = bd & (LL | LU | LR | LD)
        double = bd & (DL | DU | DR | DD)

        if light:
            arc = bd & BDA
            multi_light = light & (light - 1)
            multi_double = double & (double - 1)
            d = -s if arc or (multi_double and not multi_light) else 0
            if bd & LL:
                rect(x, y + h2, w2 + s + d, s)
            if bd & LU:
                rect(x + w2, y, s, h2 + s + d)
            if bd & LR:
                rect(x + w2 - d, y + h2, w - w2 + d, s)
            if bd & LD:
                rect(x + w2, y + h2 - d, s, h - h2 + d)

        if double:
            dl, du, dr, dd = bd & DL, bd & DU, bd & DR, bd & DD
            if dl:
                p = -s if dd else 0
                n = -s if du else (s if dd else 0)
                rect(x, y + h2 + s, w2 + s + p, s)
                rect(x, y + h2 - s, w2 + s + n, s)
            if du:
                p = -s if dl else 0
                n = -s if dr else (s if dl else 0)
                rect(x + w2 - s, y, s, h2 + s + p)
                rect(x + w2 + s, y, s, h2 + s + n)
            if dr:
                p = -s if du else 0
                n = -s if dd else (s if du else 0)
                rect(x + w2 - p, y + h2 - s, w - w2 + p, s)
                rect(x + w2 - n, y + h2 + s, w - w2 + n, s)
            if dd:
                p = -s if dr else 0
                n = -s if dl else (s if dr else 0)
                rect(x + w2 + s, y + h2 - p, s, h - h2 + p)
                rect(x + w2 - s, y + h2 - n, s, h - h2 + n)
        return ops

    # -- masks ------------------------------------------------------------

    def _extra_mask(self, w, h, bold) -> GlyphBuffer | None:
        buf = self._extra.get(bold)
        lw = extra_line_width(w, h, bold)
        if buf is not None and buf.cw == w and buf.ch == h and buf.lw == lw:
            return buf
        try:
            buf = generate_extra_symbols(w, h, bold, self.display_width)
        except ValueError:
            warn_once("boxdraw_extra: cannot allocate character buffer")
            return None
        self._extra[bold] = buf
        return buf

    def _branch_mask(self, w, h) -> GlyphBuffer | None:
        buf = self._branch
        lw = branch_line_width(w, h, self.options.branch_thickness)
        if buf is not None and buf.cw == w and buf.ch == h and buf.lw == lw:
            return buf
        try:
            buf = generate_branch_symbols(w, h, self.options.branch_thickness,
                                          self.display_width)
        except ValueError:
            warn_once("boxdraw_extra: cannot allocate character buffer")
            return None
        self._branch = buf
        return buf

    def _draw_extra(self, x, y, w, h, fg, symbol, bold) -> list:
        buf = self._extra_mask(w, h, bold)
        if buf is None:
            return []
        mx, my = buf.mask_coords(symbol)
        return [MaskBlit(buf, mx, my, x - buf.xmargin, y, buf.charwidth, buf.ch, fg)]

    def _draw_branch(self, x, y, w, h, fg, symbol) -> list:
        buf = self._branch_mask(w, h)
        if buf is None:
            return []
        # Straight lines need no anti-aliasing.
        if symbol == BSLH_IDX:
            return [Fill(x, y + buf.cy, w, buf.lw, fg)]
        if symbol == BSLV_IDX:
            return [Fill(x + buf.cx, y, buf.lw, h, fg)]
        mx, my = buf.mask_coords(symbol)
        return [MaskBlit(buf, mx, my, x, y, buf.cw, buf.ch, fg)]