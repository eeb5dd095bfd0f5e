import pytest

from stkit.boxdraw import BoxOptions, BoxRenderer, Fill, MaskBlit
from stkit.symbols import (
    BDB,
    BDE,
    BE_OCTANTS_IDX,
    BOXDATA,
    BRL,
    BRS,
)

FG = (4, 8, 12)
BG = (0, 0, 0)
W, H = 10, 20


def full_renderer(**kw):
    opts = dict(boxdraw=True, boxdraw_bold=True, boxdraw_braille=True,
                boxdraw_extra=True, boxdraw_branch=True)
    opts.update(kw)
    return BoxRenderer(BoxOptions(**opts), 2000)


def area(ops):
    return sum(op.w * op.h for op in ops)


def test_is_boxdraw_respects_options():
    plain = BoxRenderer(BoxOptions(), 2000)
    assert plain.is_boxdraw(0x2500)
    assert not plain.is_boxdraw(0x2800)
    assert not plain.is_boxdraw(0x41)
    off = BoxRenderer(BoxOptions(boxdraw=False), 2000)
    assert not off.is_boxdraw(0x2500)
    full = full_renderer()
    assert full.is_boxdraw(0x2800)
    assert full.is_boxdraw(0xF5D0)
    assert not full.is_boxdraw(0xF5D0 + 62)
    assert full.is_boxdraw(0x1CD00)
    assert full.is_boxdraw(0x2504)


def test_box_index_plain_and_bold():
    r = full_renderer()
    assert r.box_index(0x2500, False) == BOXDATA[0]
    assert r.box_index(0x2500, True) == BDB | BOXDATA[0]
    nobold = BoxRenderer(BoxOptions(), 2000)
    assert nobold.box_index(0x2500, True) == BOXDATA[0]


def test_box_index_categories():
    r = full_renderer()
    assert r.box_index(0x28FF, False) == BRL | 0xFF
    assert r.box_index(0xF5D3, False) == BRS | 3
    assert r.box_index(0x1CD05, False) == BDE | (5 + BE_OCTANTS_IDX)


def test_full_block_fills_cell():
    r = BoxRenderer(BoxOptions(), 2000)
    ops = r.draw(3, 5, W, H, FG, BG, r.box_index(0x2588, False))
    assert ops == [Fill(3, 5, W, H, FG)]


def test_quadrants_cover_three_quarters():
    r = BoxRenderer(BoxOptions(), 2000)
    ops = r.draw(0, 0, W, H, FG, BG, r.box_index(0x2599, False))
    assert len(ops) == 3
    assert area(ops) * 4 == W * H * 3


def test_shade_blends_colours():
    r = BoxRenderer(BoxOptions(), 2000)
    ops = r.draw(0, 0, W, H, FG, BG, r.box_index(0x2592, False))
    assert ops == [Fill(0, 0, W, H, (2, 4, 6))]


def test_all_braille_dots_cover_cell():
    r = full_renderer()
    ops = r.draw(0, 0, W, H, FG, BG, r.box_index(0x28FF, False))
    assert len(ops) == 8
    assert area(ops) == W * H


def test_bold_line_is_thicker():
    r = full_renderer()
    thin = r.draw(0, 0, W, H, FG, BG, r.box_index(0x2500, False))
    thick = r.draw(0, 0, W, H, FG, BG, r.box_index(0x2500, True))
    assert thick[0].h > thin[0].h


def test_empty_shape_draws_nothing():
    r = BoxRenderer(BoxOptions(), 2000)
    assert r.draw(0, 0, W, H, FG, BG, 0) == []


def test_draw_boxes_advances_by_cell_width():
    r = BoxRenderer(BoxOptions(), 2000)
    bd = r.box_index(0x2588, False)
    ops = r.draw_boxes(7, 0, W, H, FG, BG, [bd, bd, bd])
    assert [op.x for op in ops] == [7, 7 + W, 7 + 2 * W]


def test_extra_symbol_uses_mask():
    r = full_renderer()
    ops = r.draw(30, 40, W, H, FG, BG, r.box_index(0x2504, False))
    assert len(ops) == 1
    blit = ops[0]
    assert isinstance(blit, MaskBlit)
    assert blit.w == blit.mask.charwidth
    assert blit.x == 30 - blit.mask.xmargin
    assert blit.h == H


def test_branch_straight_and_masked():
    r = full_renderer()
    horiz = r.draw(0, 0, W, H, FG, BG, r.box_index(0xF5D0, False))
    assert len(horiz) == 1 and horiz[0].w == W
    vert = r.draw(0, 0, W, H, FG, BG, r.box_index(0xF5D1, False))
    assert len(vert) == 1 and vert[0].h == H
    ops = r.draw(0, 0, W, H, FG, BG, r.box_index(0xF5EE, False))
    blit = ops[0]
    assert isinstance(blit, MaskBlit)
    assert (blit.mask_x, blit.mask_y) == blit.mask.mask_coords(30)


def test_too_narrow_display_draws_nothing():
    r = BoxRenderer(BoxOptions(boxdraw_branch=True), 1)
    assert r.draw(0, 0, W, H, FG, BG, r.box_index(0xF5EE, False)) == []


@pytest.mark.parametrize("u", [0x2580, 0x2584, 0x258C, 0x2590, 0x2594, 0x2595])
def test_blocks_stay_inside_cell(u):
    r = BoxRenderer(BoxOptions(), 2000)
    ops = r.draw(0, 0, W, H, FG, BG, r.box_index(u, False))
    assert ops
    for op in ops:
        assert 0 <= op.x and op.x + op.w <= W
        assert 0 <= op.y and op.y + op.h <= H