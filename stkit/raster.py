"""Alpha-mask glyph buffers for drawing box and branch symbols.

A :class:`GlyphBuffer` holds a grid of same-sized character cells in one
8-bit alpha image. Symbols are drawn into their cells, optionally at a
supersampling factor, and later downsampled into a buffer at screen scale.
"""

from __future__ import annotations

import sys

__all__ = ["GlyphBuffer", "avg_intensity", "rounded_div", "warn_once"]

_warned = False


def rounded_div(n: int, d: int) -> int:
    """Rounded division of non-negative ``n`` by positive ``d``."""
    return (n + d // 2) // d


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def warn_once(msg: str) -> bool:
    """Print ``msg`` to stderr unless a warning was already printed.

    Returns True when the message was written.
    """
    global _warned
    if _warned:
        return False
    print(msg, file=sys.stderr)
    _warned = True
    return True


def avg_intensity(data: bytes | bytearray, offset: int, width: int, factor: int) -> int:
    """Average of a ``factor`` x ``factor`` block starting at ``offset``, rounded."""
    total = sum(
        sum(data[offset + row * width: offset + row * width + factor])
        for row in range(factor)
    )
    area = factor * factor
    return (total + area // 2) // area


class GlyphBuffer:
    """A grid of character cells stored as one 8-bit alpha image."""

    def __init__(self, cw, ch, cx, cy, lw, xmargin, numchars, factor, display_width):
        self.cw = cw * factor
        self.ch = ch * factor
        self.cx = cx * factor
        self.cy = cy * factor
        self.lw = lw * factor
        self.xmargin = xmargin * factor
        self.charwidth = self.cw + self.xmargin * 2
        self.factor = factor
        self.numchars = numchars
        if self.charwidth <= 0:
            raise ValueError("character width must be positive")
        self.cols = min(display_width * factor // self.charwidth, numchars)
        if self.cols <= 0:
            raise ValueError("buffer has no room for a single character")
        self.rows = (numchars + self.cols - 1) // self.cols
        self.width = self.cols * self.charwidth
        self.height = self.rows * self.ch
        self.data = bytearray(self.width * self.height)

    # -- addressing -------------------------------------------------------

    def mask_coords(self, idx: int) -> tuple[int, int]:
        """Top-left pixel of cell ``idx`` in the image."""
        return idx % self.cols * self.charwidth, idx // self.cols * self.ch

    def symbol_offset(self, idx: int) -> int:
        """Offset into :attr:`data` of the first byte of cell ``idx``."""
        col = idx % self.cols
        row = idx // self.cols
        return col * self.charwidth + row * self.ch * self.width

    def pixel(self, idx: int, x: int, y: int) -> int:
        """Alpha at (x, y) of cell ``idx``; x counts from the cell's left margin."""
        if not (0 <= x < self.charwidth and 0 <= y < self.ch):
            raise IndexError(f"pixel ({x}, {y}) outside the cell")
        return self.data[self.symbol_offset(idx) + y * self.width + x]

    # -- scaling ----------------------------------------------------------

    def downsample(self, dstidx: int, src: "GlyphBuffer", srcidx: int, numchars: int) -> None:
        """Average ``numchars`` cells of supersampled ``src`` into this buffer."""
        f = src.factor
        cw, ch, sw = src.charwidth, src.ch, src.width
        dw = self.width - self.charwidth
        for i in range(numchars):
            dst = self.symbol_offset(dstidx + i)
            s = src.symbol_offset(srcidx + i)
            for _ in range(0, ch, f):
                for x in range(0, cw, f):
                    self.data[dst] = avg_intensity(src.data, s + x, sw, f)
                    dst += 1
                s += sw * f
                dst += dw

    # -- primitives -------------------------------------------------------

    def draw_rect(self, idx, x, y, w, h, alpha) -> None:
        """Fill a rectangle of cell ``idx``, clipped to the cell (margins excluded)."""
        base = self.symbol_offset(idx) + self.xmargin
        x1 = max(0, x)
        y1 = max(0, y)
        x2 = min(self.cw, x + w)
        y2 = min(self.ch, y + h)
        if x1 >= self.cw or y1 >= self.ch or x2 < 0 or y2 < 0:
            return
        n = x2 - x1
        if n <= 0:
            return
        run = bytes([alpha & 0xFF]) * n
        for row in range(y1, y2):
            start = base + row * self.width + x1
            self.data[start:start + n] = run

    def draw_line_up(self, idx) -> None:
        self.draw_rect(idx, self.cx, 0, self.lw, self.cy + self.lw, 255)

    def draw_line_down(self, idx) -> None:
        self.draw_rect(idx, self.cx, self.cy, self.lw, self.ch - self.cy, 255)

    def draw_line_left(self, idx) -> None:
        self.draw_rect(idx, 0, self.cy, self.cx + self.lw, self.lw, 255)

    def draw_line_right(self, idx) -> None:
        self.draw_rect(idx, self.cx, self.cy, self.cw - self.cx, self.lw, 255)

    def draw_rounded_corners(self, br, bl, tl, tr) -> None:
        """Draw the four rounded corner arcs into the given cells."""
        lw, f, width = self.lw, self.factor, self.width
        ox1, oy1 = self.cx, self.cy
        ox2, oy2 = ox1 + lw - 1, oy1 + lw - 1
        cbr = self.symbol_offset(br) + self.xmargin
        cbl = self.symbol_offset(bl) + self.xmargin
        ctl = self.symbol_offset(tl) + self.xmargin
        ctr = self.symbol_offset(tr) + self.xmargin

        self.draw_line_up(tl)
        self.draw_line_up(tr)
        self.draw_line_down(bl)
        self.draw_line_down(br)
        self.draw_line_right(tr)
        self.draw_line_right(br)
        self.draw_line_left(tl)
        self.draw_line_left(bl)

        r = min(self.cw - ox1, self.ch - oy1)
        d1 = r - lw - (f // 4)
        d1 = d1 * d1
        d2 = r * r
        centre = r - 1
        data = self.data
        for y in range(r):
            for x in range(r):
                d = (centre - x) ** 2 + (centre - y) ** 2
                c = 255 if d1 <= d <= d2 else 0
                data[cbr + (oy1 + y) * width + ox1 + x] = c
                data[cbl + (oy1 + y) * width + ox2 - x] = c
                data[ctr + (oy2 - y) * width + ox1 + x] = c
                data[ctl + (oy2 - y) * width + ox2 - x] = c

    def draw_circle(self, idx, fill) -> None:
        """Draw a commit circle, filled or as a ring."""
        base = self.symbol_offset(idx) + self.xmargin
        f = self.factor
        lw = self.lw // f
        cw, ch = self.cw // f, self.ch // f
        if lw & 1:
            ox = cw // 2 * f + f // 2
            oy = ch // 2 * f + f // 2
            scale = 100 if cw < 9 else 90
        else:
            ox = (cw + 1) // 2 * f
            oy = (ch + 1) // 2 * f
            scale = 100 if cw < 10 else 90

        r = _cdiv(min(self.cw - ox, self.ch - oy) * scale, 100) - 1

        d1 = 0
        if not fill:
            d1 = r - lw * f
            if lw == 1 and cw > 8:
                d1 = (d1 - f // 4) * (d1 - f // 4)
            elif lw == 1 and cw > 6:
                d1 = d1 * d1 - f * 3
            else:
                d1 = d1 * d1
        d2 = r * r

        data = self.data
        for y in range(self.ch):
            row = base + y * self.width
            for x in range(self.cw):
                d = (ox - x) ** 2 + (oy - y) ** 2
                if d1 <= d <= d2:
                    data[row + x] = 255
                elif d < d1:
                    data[row + x] = 0

    def draw_horiz_fading_line(self, idx, left) -> None:
        steps = 4
        cw = self.cw
        for i in range(steps):
            sz = cw * (steps - i) // (steps * steps + steps)
            x = i * cw // steps
            if left:
                x = cw - x - sz
            self.draw_rect(idx, x, self.cy, sz, self.lw, 255)

    def draw_vert_fading_line(self, idx, up) -> None:
        steps = 5
        ch = self.ch
        for i in range(steps):
            sz = ch * (steps - i) // (steps * steps + steps)
            y = i * ch // steps
            if up:
                y = ch - y - sz
            self.draw_rect(idx, self.cx, y, self.lw, sz, 255)

    def draw_hdashes(self, idx, n, heavy) -> None:
        """Draw ``n`` horizontal dashes, light or heavy."""
        f = self.factor
        cw = self.cw // f
        extra = self.lw if heavy else 0
        y1 = self.cy - extra
        y2 = self.cy + extra + self.lw

        if cw < 4:
            self.draw_rect(idx, 0, y1, self.cw, y2 - y1, 255)
            return

        if cw < 7 or (cw < 12 and n >= 3) or (cw <= 16 and n == 4):
            n = 2 if cw < 6 else n
            n = 3 if (cw < 8 and n == 4) else n
            gap = 1
            for i in range(n):
                x1 = i * cw // n
                x2 = (i + 1) * cw // n
                self.draw_rect(idx, x1 * f, y1, (x2 - x1 - gap) * f, y2 - y1, 255)
            return

        for i in range(n):
            x1 = i * self.cw // n
            x2 = (i + 1) * self.cw // n
            w = x2 - x1
            gap = w * 30 // 100
            self.draw_rect(idx, x1, y1, w - gap, y2 - y1, 255)

    def draw_vdashes(self, idx, n, heavy) -> None:
        """Draw ``n`` vertical dashes, light or heavy."""
        extra = self.lw if heavy else 0
        x1 = self.cx - extra
        x2 = self.cx + extra + self.lw
        for i in range(n):
            y1 = i * self.ch // n
            y2 = (i + 1) * self.ch // n
            h = y2 - y1
            gap = h * 40 // 100
            self.draw_rect(idx, x1, y1 + gap // 2, x2 - x1, h - gap, 255)

    def draw_diagonals(self, lr, rl, cross) -> None:
        """Draw both diagonals and their cross into three cells."""
        datalr = self.symbol_offset(lr)
        datarl = self.symbol_offset(rl)
        w = max(1, self.cw)
        h = max(1, self.ch)
        lw = self.lw * (10 if self.lw // self.factor > 1 else 11) // 4
        cw, ch = self.charwidth, self.ch
        data = self.data
        for x in range(cw):
            y = _cdiv((x - self.xmargin) * h, w)
            for j in range(y - lw // 2, y + lw - lw // 2):
                if 0 <= j < ch:
                    data[datalr + j * self.width + x] = 255
                    data[datarl + j * self.width + cw - x - 1] = 255
        self.copy_symbol(cross, lr, False)
        self.copy_symbol(cross, rl, False)

    def draw_block_patterns(self, idx, patterns, rows) -> None:
        """Draw one cell per pattern; each row uses two bits (left, right)."""
        cx = rounded_div(self.cw, 2)
        for i, pattern in enumerate(patterns):
            for row in range(rows):
                if pattern & 3:
                    x1 = 0 if pattern & 1 else cx
                    x2 = self.cw if pattern & 2 else cx
                    y1 = rounded_div(self.ch * row, rows)
                    y2 = rounded_div(self.ch * (row + 1), rows)
                    self.draw_rect(idx + i, x1, y1, x2 - x1, y2 - y1, 255)
                pattern >>= 2

    def draw_triangle(self, idx, ax, ay, bx, by, cx, cy, alpha) -> None:
        """Fill the triangle with the given corners in cell ``idx``."""
        base = self.symbol_offset(idx) + self.xmargin
        data = self.data
        value = alpha & 0xFF
        (x1, y1), (x2, y2), (x3, y3) = (float(ax), float(ay)), (float(bx), float(by)), (float(cx), float(cy))

        if y1 > y2:
            x1, y1, x2, y2 = x2, y2, x1, y1
        if y2 > y3:
            x2, y2, x3, y3 = x3, y3, x2, y2
            if y1 > y2:
                x1, y1, x2, y2 = x2, y2, x1, y1

        row = base + int(y1) * self.width

        def render(a: float, b: float) -> None:
            xl = int(min(a, b))
            xr = int(max(a, b))
            n = xr - xl + 1
            if n > 0:
                data[row + xl:row + xl + n] = bytes([value]) * n

        if y1 == y2 == y3:
            render(min(x1, x2, x3), max(x1, x2, x3))
            return

        sx1 = x1
        dx1 = (x3 - x1) / (y3 - y1)
        if y1 < y2:
            sx2 = x1
            dx2 = (x2 - x1) / (y2 - y1)
            for _ in range(int(y1), int(y2)):
                render(sx1, sx2)
                sx1 += dx1
                sx2 += dx2
                row += self.width
            if y2 == y3:
                render(x2, x3)
                return

        sx2 = x2
        dx2 = (x3 - x2) / (y3 - y2)
        for _ in range(int(y2), int(y3)):
            render(sx1, sx2)
            sx1 += dx1
            sx2 += dx2
            row += self.width
        data[row + int(x3)] = value

    def copy_symbol(self, dstidx, srcidx, fliphoriz) -> None:
        """OR cell ``srcidx`` into cell ``dstidx``, optionally mirrored."""
        dst = self.symbol_offset(dstidx)
        src = self.symbol_offset(srcidx)
        cw, width = self.charwidth, self.width
        data = self.data
        for y in range(self.ch):
            s = src + y * width
            d = dst + y * width
            source = data[s:s + cw]
            if fliphoriz:
                source = source[::-1]
            data[d:d + cw] = bytes(a | b for a, b in zip(data[d:d + cw], source))

    def erase_symbol(self, idx) -> None:
        """Clear cell ``idx`` including its margins."""
        base = self.symbol_offset(idx)
        blank = bytes(self.charwidth)
        for y in range(self.ch):
            start = base + y * self.width
            self.data[start:start + self.charwidth] = blank