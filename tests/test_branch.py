import pytest

from stkit.branch import branch_line_width, generate_branch_symbols
from stkit.extra import extra_line_width
from stkit.symbols import BRANCH_SYMBOLS, BSCM_INDX, BSLH_IDX, BSLV_IDX

CW, CH, DISPLAY = 16, 32, 1920


@pytest.fixture(scope="module")
def buf():
    return generate_branch_symbols(CW, CH, 0, DISPLAY)


def cell(buf, idx):
    return [[buf.pixel(idx, x, y) for x in range(buf.charwidth)] for y in range(buf.ch)]


def test_explicit_thickness_wins():
    assert branch_line_width(CW, CH, 3) == 3


def test_default_thickness_matches_box_stems():
    assert branch_line_width(CW, CH, 0) == extra_line_width(CW, CH, False)


def test_buffer_geometry(buf):
    assert buf.numchars == len(BRANCH_SYMBOLS)
    assert buf.xmargin == 0
    assert buf.charwidth == CW


def test_horizontal_line(buf):
    rows = cell(buf, BSLH_IDX)
    for y, row in enumerate(rows):
        expected = 255 if buf.cy <= y < buf.cy + buf.lw else 0
        assert row == [expected] * CW


def test_vertical_line(buf):
    rows = cell(buf, BSLV_IDX)
    for row in rows:
        for x, v in enumerate(row):
            assert v == (255 if buf.cx <= x < buf.cx + buf.lw else 0)


def test_merged_commit_is_filled(buf):
    assert buf.pixel(BSCM_INDX, CW // 2, CH // 2) == 255
    assert buf.pixel(BSCM_INDX, 0, 0) == 0


def test_unmerged_commit_is_a_ring(buf):
    idx = BSCM_INDX + 1
    rows = cell(buf, idx)
    assert buf.pixel(idx, CW // 2, CH // 2) == 0
    assert max(v for row in rows for v in row) > 0


def test_arc_has_empty_corner(buf):
    rows = cell(buf, 6)
    assert rows[0][0] == 0
    assert any(v for row in rows for v in row)


def test_combined_symbol_covers_its_parts(buf):
    combined = cell(buf, 10)  # arc top-right plus vertical line
    for part in (8, BSLV_IDX):
        for crow, prow in zip(combined, cell(buf, part)):
            assert all(c >= p for c, p in zip(crow, prow))


def test_fading_lines_mirror(buf):
    right = cell(buf, 2)
    left = cell(buf, 3)
    assert left == [row[::-1] for row in right]
    assert right[buf.cy][0] >= right[buf.cy][CW - 1]


def test_generation_is_deterministic(buf):
    assert generate_branch_symbols(CW, CH, 0, DISPLAY).data == buf.data


def test_narrow_display_rejected():
    with pytest.raises(ValueError):
        generate_branch_symbols(CW, CH, 0, 1)