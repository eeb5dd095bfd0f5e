import pytest

from stkit.extra import extra_line_width, generate_extra_symbols
from stkit.symbols import (
    BE_DIAG_CROSS,
    BE_DIAG_LR,
    BE_DIAG_RL,
    BE_EXTRA_LEN,
    BE_HDASH3,
    BE_LEGACY_IDX,
    BE_OCTANTS_IDX,
    BOXLEGACY,
    BOXMISC,
    SEXTANTS,
)

CW, CH, DISPLAY = 8, 16, 1920


@pytest.fixture(scope="module")
def buf():
    return generate_extra_symbols(CW, CH, False, DISPLAY)


def legacy_cell(low):
    return BE_LEGACY_IDX - 1 + BOXLEGACY[low]


def cell(buf, idx):
    return [[buf.pixel(idx, x, y) for x in range(buf.charwidth)] for y in range(buf.ch)]


def test_bold_is_thicker_on_large_cells():
    assert extra_line_width(16, 32, True) > extra_line_width(16, 32, False)


def test_bold_ignored_on_tiny_cells():
    assert extra_line_width(5, 10, True) == extra_line_width(5, 10, False)


def test_buffer_geometry(buf):
    assert buf.numchars == BE_EXTRA_LEN
    assert buf.factor == 1
    assert buf.cw == CW and buf.ch == CH
    assert buf.xmargin == extra_line_width(CW, CH, False)


def test_full_medium_shade_is_half_alpha(buf):
    rows = cell(buf, legacy_cell(0x90))
    content = {v for row in rows for v in row[buf.xmargin:buf.xmargin + buf.cw]}
    assert content == {128}


def test_margins_stay_empty_for_rect_symbols(buf):
    rows = cell(buf, legacy_cell(0x90))
    for row in rows:
        assert row[:buf.xmargin] == [0] * buf.xmargin
        assert row[buf.xmargin + buf.cw:] == [0] * buf.xmargin


def test_first_octant_is_second_row_left(buf):
    m = buf.xmargin
    assert buf.pixel(BE_OCTANTS_IDX, m, 5) == 255
    assert buf.pixel(BE_OCTANTS_IDX, m, 0) == 0
    assert buf.pixel(BE_OCTANTS_IDX, m + CW - 1, 5) == 0


def test_last_sextant_leaves_top_left_empty(buf):
    idx = BE_LEGACY_IDX + len(SEXTANTS) - 1
    m = buf.xmargin
    assert buf.pixel(idx, m, 0) == 0
    assert buf.pixel(idx, m + CW - 1, 0) == 255
    assert buf.pixel(idx, m, CH - 1) == 255


def test_heavy_horizontal_fill_matches_octant(buf):
    assert cell(buf, legacy_cell(0x97)) == cell(buf, BE_OCTANTS_IDX + 183)


@pytest.mark.parametrize("low", [0x95, 0x98])
def test_mirrored_pairs(buf, low):
    left = cell(buf, legacy_cell(low))
    right = cell(buf, legacy_cell(low + 1))
    assert right == [row[::-1] for row in left]
    assert any(v for row in left for v in row)


def test_left_two_thirds_block(buf):
    idx = legacy_cell(0xCE)
    m = buf.xmargin
    assert buf.pixel(idx, m, CH // 2) == 255
    assert buf.pixel(idx, m + CW - 1, CH // 2) == 0


def test_upper_quarter_block(buf):
    idx = legacy_cell(0x82)
    m = buf.xmargin
    assert buf.pixel(idx, m, 0) == 255
    assert buf.pixel(idx, m, CH - 1) == 0


def test_lower_left_wedge(buf):
    idx = legacy_cell(0x3C)
    m = buf.xmargin
    assert buf.pixel(idx, m, CH - 1) > 0
    assert buf.pixel(idx, m + CW - 1, 0) == 0


def test_dash_leaves_top_row_empty(buf):
    rows = cell(buf, BOXMISC[BE_HDASH3])
    assert not any(rows[0])
    assert any(v for row in rows for v in row)


def test_diagonal_cross_covers_both_diagonals(buf):
    cross = cell(buf, BOXMISC[BE_DIAG_CROSS])
    for part in (BE_DIAG_LR, BE_DIAG_RL):
        rows = cell(buf, BOXMISC[part])
        for crow, prow in zip(cross, rows):
            assert all(c >= p for c, p in zip(crow, prow))


def test_generation_is_deterministic(buf):
    again = generate_extra_symbols(CW, CH, False, DISPLAY)
    assert again.data == buf.data


def test_bold_buffer_uses_thicker_lines():
    bold = generate_extra_symbols(16, 32, True, DISPLAY)
    assert bold.lw == extra_line_width(16, 32, True)


def test_narrow_display_rejected():
    with pytest.raises(ValueError):
        generate_extra_symbols(CW, CH, False, 1)