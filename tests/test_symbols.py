from stkit import symbols as s


def test_legacy_table():
    table = s.build_legacy_table()
    assert len(table) == 256
    assert table[0x93] == 0
    assert table[0x00] == 1
    assert table[0xE7] == s.BE_LEGACY_LEN
    values = [v for v in table if v]
    assert len(values) == len(set(values))
    assert set(values) == set(range(1, s.BE_LEGACY_LEN + 1)) - {0x93 + 1}
    assert tuple(table) == s.BOXLEGACY


def test_legacy_table_is_fresh_each_call():
    first = s.build_legacy_table()
    first[0] = 99
    assert s.build_legacy_table()[0] == 1


def test_legacy_layout_matches_extra_lengths():
    table = s.build_legacy_table()
    assert max(table) == s.BE_LEGACY_LEN
    assert s.BE_LEGACY_IDX + max(table) == s.BE_OCTANTS_IDX
    assert s.BE_MISC_LEN + max(table) + s.BE_OCTANTS_LEN == s.BE_EXTRA_LEN


def test_legacy_sextants_come_first():
    table = s.build_legacy_table()
    expected = list(range(1, s.BE_SEXTANTS_LEN + 1))
    assert list(table[: s.BE_SEXTANTS_LEN]) == expected


def test_legacy_tail_entries():
    table = s.build_legacy_table()
    assert table[0xCE] == s.BE_LEGACY_LEN - 5
    assert table[0xCF] == s.BE_LEGACY_LEN - 4
    assert table[0xE4] == s.BE_LEGACY_LEN - 3
    assert table[0xE5] == s.BE_LEGACY_LEN - 2
    assert table[0xE6] == s.BE_LEGACY_LEN - 1


def test_legacy_unassigned_codepoints_are_zero():
    table = s.build_legacy_table()
    assigned = set(range(s.BE_LEGACY_LEN - 6)) - {0x93}
    assigned |= {0xCE, 0xCF, 0xE4, 0xE5, 0xE6, 0xE7}
    unassigned = [low for low, value in enumerate(table) if value == 0]
    assert unassigned == sorted(set(range(256)) - assigned)