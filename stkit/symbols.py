"""Shape tables for box drawing, legacy computing and branch symbols.

Every box drawing shape is encoded as a 16-bit value. The high bits pick a
category and the low bits carry the data for that category: line directions,
block eighths, quadrant bits, shade level or braille dots.
"""

from __future__ import annotations

__all__ = [
    "BDL", "BDA", "BBD", "BBL", "BBU", "BBR", "BBQ", "BRL", "BRS", "BDE",
    "BBS", "BDB",
    "LL", "LU", "LR", "LD", "LH", "LV",
    "DL", "DU", "DR", "DD", "DH", "DV",
    "HL", "HU", "HR", "HD", "HH", "HV",
    "TL", "TR", "BL", "BR",
    "BOXDATA", "BOXMISC", "BOXLEGACY", "SEXTANTS", "OCTANTS",
    "BRANCH_SYMBOLS", "build_legacy_table",
    "SS_FACTOR",
]

SS_FACTOR = 5

# Categories (mutually exclusive except BDB).
BDL = 1 << 8    # lines: light, double, heavy
BDA = 1 << 9    # light arcs
BBD = 1 << 10   # lower block, data is 8 - X eighths
BBL = 2 << 10   # left block, X eighths
BBU = 3 << 10   # upper block, X eighths
BBR = 4 << 10   # right block, data is 8 - X eighths
BBQ = 5 << 10   # quadrants
BRL = 6 << 10   # braille, data is the low byte of U+28XX
BRS = 7 << 10   # branch symbols
BDE = 8 << 10   # extra symbols drawn from a mask
BBS = 1 << 14   # shades
BDB = 1 << 15   # bold

# Line directions. Heavy is drawn as light plus double.
LL, LU, LR, LD = 1 << 0, 1 << 1, 1 << 2, 1 << 3
LH, LV = LL + LR, LU + LD
DL, DU, DR, DD = 1 << 4, 1 << 5, 1 << 6, 1 << 7
DH, DV = DL + DR, DU + DD
HL, HU, HR, HD = LL + DL, LU + DU, LR + DR, LD + DD
HH, HV = HL + HR, HU + HD

# Quadrants.
TL, TR, BL, BR = 1 << 0, 1 << 1, 1 << 2, 1 << 3


def _table(entries: dict[int, int], size: int = 256) -> tuple[int, ...]:
    return tuple(entries.get(i, 0) for i in range(size))


BOXDATA: tuple[int, ...] = _table({
    # light lines
    0x00: BDL + LH, 0x02: BDL + LV, 0x0C: BDL + LD + LR, 0x10: BDL + LD + LL,
    0x14: BDL + LU + LR, 0x18: BDL + LU + LL, 0x1C: BDL + LV + LR,
    0x24: BDL + LV + LL, 0x2C: BDL + LH + LD, 0x34: BDL + LH + LU,
    0x3C: BDL + LV + LH, 0x74: BDL + LL, 0x75: BDL + LU, 0x76: BDL + LR,
    0x77: BDL + LD,
    # heavy [+light] lines
    0x01: BDL + HH, 0x03: BDL + HV, 0x0D: BDL + HR + LD, 0x0E: BDL + HD + LR,
    0x0F: BDL + HD + HR, 0x11: BDL + HL + LD, 0x12: BDL + HD + LL,
    0x13: BDL + HD + HL, 0x15: BDL + HR + LU, 0x16: BDL + HU + LR,
    0x17: BDL + HU + HR, 0x19: BDL + HL + LU, 0x1A: BDL + HU + LL,
    0x1B: BDL + HU + HL, 0x1D: BDL + HR + LV, 0x1E: BDL + HU + LD + LR,
    0x1F: BDL + HD + LR + LU, 0x20: BDL + HV + LR, 0x21: BDL + HU + HR + LD,
    0x22: BDL + HD + HR + LU, 0x23: BDL + HV + HR, 0x25: BDL + HL + LV,
    0x26: BDL + HU + LD + LL, 0x27: BDL + HD + LU + LL, 0x28: BDL + HV + LL,
    0x29: BDL + HU + HL + LD, 0x2A: BDL + HD + HL + LU, 0x2B: BDL + HV + HL,
    0x2D: BDL + HL + LD + LR, 0x2E: BDL + HR + LL + LD, 0x2F: BDL + HH + LD,
    0x30: BDL + HD + LH, 0x31: BDL + HD + HL + LR, 0x32: BDL + HR + HD + LL,
    0x33: BDL + HH + HD, 0x35: BDL + HL + LU + LR, 0x36: BDL + HR + LU + LL,
    0x37: BDL + HH + LU, 0x38: BDL + HU + LH, 0x39: BDL + HU + HL + LR,
    0x3A: BDL + HU + HR + LL, 0x3B: BDL + HH + HU, 0x3D: BDL + HL + LV + LR,
    0x3E: BDL + HR + LV + LL, 0x3F: BDL + HH + LV, 0x40: BDL + HU + LH + LD,
    0x41: BDL + HD + LH + LU, 0x42: BDL + HV + LH,
    0x43: BDL + HU + HL + LD + LR, 0x44: BDL + HU + HR + LD + LL,
    0x45: BDL + HD + HL + LU + LR, 0x46: BDL + HD + HR + LU + LL,
    0x47: BDL + HH + HU + LD, 0x48: BDL + HH + HD + LU,
    0x49: BDL + HV + HL + LR, 0x4A: BDL + HV + HR + LL, 0x4B: BDL + HV + HH,
    0x78: BDL + HL, 0x79: BDL + HU, 0x7A: BDL + HR, 0x7B: BDL + HD,
    0x7C: BDL + HR + LL, 0x7D: BDL + HD + LU, 0x7E: BDL + HL + LR,
    0x7F: BDL + HU + LD,
    # double [+light] lines
    0x50: BDL + DH, 0x51: BDL + DV, 0x52: BDL + DR + LD, 0x53: BDL + DD + LR,
    0x54: BDL + DR + DD, 0x55: BDL + DL + LD, 0x56: BDL + DD + LL,
    0x57: BDL + DL + DD, 0x58: BDL + DR + LU, 0x59: BDL + DU + LR,
    0x5A: BDL + DU + DR, 0x5B: BDL + DL + LU, 0x5C: BDL + DU + LL,
    0x5D: BDL + DL + DU, 0x5E: BDL + DR + LV, 0x5F: BDL + DV + LR,
    0x60: BDL + DV + DR, 0x61: BDL + DL + LV, 0x62: BDL + DV + LL,
    0x63: BDL + DV + DL, 0x64: BDL + DH + LD, 0x65: BDL + DD + LH,
    0x66: BDL + DD + DH, 0x67: BDL + DH + LU, 0x68: BDL + DU + LH,
    0x69: BDL + DH + DU, 0x6A: BDL + DH + LV, 0x6B: BDL + DV + LH,
    0x6C: BDL + DH + DV,
    # light arcs
    0x6D: BDA + LD + LR, 0x6E: BDA + LD + LL, 0x6F: BDA + LU + LL,
    0x70: BDA + LU + LR,
    # lower X/8 blocks (data is 8 - X)
    0x81: BBD + 7, 0x82: BBD + 6, 0x83: BBD + 5, 0x84: BBD + 4,
    0x85: BBD + 3, 0x86: BBD + 2, 0x87: BBD + 1, 0x88: BBD + 0,
    # left X/8 blocks
    0x89: BBL + 7, 0x8A: BBL + 6, 0x8B: BBL + 5, 0x8C: BBL + 4,
    0x8D: BBL + 3, 0x8E: BBL + 2, 0x8F: BBL + 1,
    # upper 1/2, 1/8; right 1/2, 1/8
    0x80: BBU + 4, 0x94: BBU + 1,
    0x90: BBR + 4, 0x95: BBR + 7,
    # quadrants
    0x96: BBQ + BL, 0x97: BBQ + BR, 0x98: BBQ + TL,
    0x99: BBQ + TL + BL + BR, 0x9A: BBQ + TL + BR, 0x9B: BBQ + TL + TR + BL,
    0x9C: BBQ + TL + TR + BR, 0x9D: BBQ + TR, 0x9E: BBQ + BL + TR,
    0x9F: BBQ + BL + TR + BR,
    # shades in 25% alpha units
    0x91: BBS + 1, 0x92: BBS + 2, 0x93: BBS + 3,
})

# Low bytes of U+25XX drawn from the extra-symbol mask.
BE_HDASH3 = 0x04
BE_HDASH3_HEAVY = 0x05
BE_VDASH3 = 0x06
BE_VDASH3_HEAVY = 0x07
BE_HDASH4 = 0x08
BE_HDASH4_HEAVY = 0x09
BE_VDASH4 = 0x0A
BE_VDASH4_HEAVY = 0x0B
BE_HDASH2 = 0x4C
BE_HDASH2_HEAVY = 0x4D
BE_VDASH2 = 0x4E
BE_VDASH2_HEAVY = 0x4F
BE_ARC_DR = 0x6D
BE_ARC_DL = 0x6E
BE_ARC_UL = 0x6F
BE_ARC_UR = 0x70
BE_DIAG_RL = 0x71
BE_DIAG_LR = 0x72
BE_DIAG_CROSS = 0x73

BE_MISC_LEN = 19 + 1
BE_SEXTANTS_LEN = 60
BE_WEDGES_LEN = 54
BE_LEGACY_IDX = BE_MISC_LEN
BE_LEGACY_LEN = BE_SEXTANTS_LEN + BE_WEDGES_LEN + 52
BE_OCTANTS_IDX = BE_LEGACY_IDX + BE_LEGACY_LEN
BE_OCTANTS_LEN = 230
BE_EXTRA_LEN = BE_MISC_LEN + BE_LEGACY_LEN + BE_OCTANTS_LEN

# Position of each misc character in the mask; zero means not implemented.
BOXMISC: tuple[int, ...] = _table({
    BE_HDASH3: 1, BE_HDASH3_HEAVY: 2, BE_VDASH3: 3, BE_VDASH3_HEAVY: 4,
    BE_HDASH4: 5, BE_HDASH4_HEAVY: 6, BE_VDASH4: 7, BE_VDASH4_HEAVY: 8,
    BE_HDASH2: 9, BE_HDASH2_HEAVY: 10, BE_VDASH2: 11, BE_VDASH2_HEAVY: 12,
    BE_ARC_DR: 13, BE_ARC_DL: 14, BE_ARC_UL: 15, BE_ARC_UR: 16,
    BE_DIAG_RL: 17, BE_DIAG_LR: 18, BE_DIAG_CROSS: 19,
})

BLK1, BLK2, BLK3, BLK4 = 1 << 0, 1 << 1, 1 << 2, 1 << 3
BLK5, BLK6, BLK7, BLK8 = 1 << 4, 1 << 5, 1 << 6, 1 << 7


def _blocks(spec: str) -> tuple[int, ...]:
    """Turn space-separated block-number groups such as '13 246' into bitmasks."""
    return tuple(sum(1 << (int(d) - 1) for d in group) for group in spec.split())


# Sextants U+1FB00..U+1FB3B. Blocks are numbered left-right, top-bottom
# in a 2x3 grid.
SEXTANTS: tuple[int, ...] = _blocks("""
    1 2 12 3 13 23 123 4 14 24 124 34 134 234 1234
    5 15 25 125 35 235 1235 45 145 245 1245 345 1345 2345 12345
    6 16 26 126 36 136 236 1236 46 146 1246 346 1346 2346 12346
    56 156 256 1256 356 1356 2356 12356 456 1456 2456 12456 3456 13456 23456
""")

# Octants U+1CD00..U+1CDE5 in a 2x4 grid.
OCTANTS: tuple[int, ...] = _blocks("""
    3 23 123 4 14 124 34 134 234 5 15 25 125 135 235 1235
    45 145 245 1245 345 1345 2345 12345 6 16 26 126 36 136 236 1236
    146 246 1246 346 1346 2346 12346 56 156 256 1256 356 1356 2356 12356
    456 1456 2456 12456 3456 13456 23456 17 27 127 37 137 237 1237 47 147 247
    1247 347 1347 2347 12347 157 257 1257 357 2357 12357 457 1457 12457 3457
    13457 23457 67 167 267 1267 367 1367 2367 12367 467 1467 2467 12467 3467
    13467 23467
    123467 567 1567 2567 12567 3567 13567 23567 123567 4567 14567 24567
    124567 34567 134567 234567 1234567 18 28 128 38 138 238 1238 48 148 248
    1248 348 1348 2348 12348
    58 158 258 1258 358 1358 2358 12358 458 1458 2458 12458 3458 13458 23458
    123458 168 268 1268 368 2368 12368 468 1468 12468 3468 13468 23468 568
    1568 2568 12568
    3568 13568 23568 123568 4568 14568 24568 124568 34568 134568 234568
    1234568 178 278 1278 378 1378 2378 12378 478 1478 2478 12478 3478 13478
    23478 123478 578 1578 2578 12578 3578
    13578 23578 123578 4578 14578 24578 124578 34578 134578 234578 1234578
    678 1678 2678 12678 3678 13678 23678 123678 4678 14678 24678 124678 34678
    134678 234678 1234678 15678 25678 125678 35678 235678 1235678 45678
    145678 1245678 1345678 2345678
""")


def build_legacy_table() -> list[int]:
    """Mask positions of legacy characters U+1FBXX; zero for unsupported ones.

    ``BE_LEGACY_IDX - 1`` must be added to a non-zero value to get the cell.
    """
    table = [i + 1 if i < BE_LEGACY_LEN - 6 else 0 for i in range(256)]
    table[0x93] = 0                   # U+1FB93 is reserved
    table[0xCE] = BE_LEGACY_LEN - 5
    table[0xCF] = BE_LEGACY_LEN - 4
    table[0xE4] = BE_LEGACY_LEN - 3
    table[0xE5] = BE_LEGACY_LEN - 2
    table[0xE6] = BE_LEGACY_LEN - 1
    table[0xE7] = BE_LEGACY_LEN
    return table


BOXLEGACY: tuple[int, ...] = tuple(build_legacy_table())

# Branch drawing symbols U+F5D0..U+F60D.
BSFR = 1 << 0
BSFL = 1 << 1
BSFD = 1 << 2
BSFU = 1 << 3
BSABR = 1 << 4
BSABL = 1 << 5
BSATR = 1 << 6
BSATL = 1 << 7
BSCN = 1 << 8
BSCM = 1 << 9
BSLR = 1 << 10
BSLL = 1 << 11
BSLD = 1 << 12
BSLU = 1 << 13
BSLH = BSLR + BSLL
BSLV = BSLD + BSLU

BSLH_IDX = 0
BSLV_IDX = 1
BSABR_INDX = 6
BSABL_INDX = 7
BSATR_INDX = 8
BSATL_INDX = 9
BSCM_INDX = 30

BRANCH_FIRST = 0xF5D0

BRANCH_SYMBOLS: tuple[int, ...] = (
    BSLH, BSLV, BSFR, BSFL, BSFD, BSFU,
    BSABR, BSABL, BSATR, BSATL,
    BSATR + BSLV, BSABR + BSLV, BSATR + BSABR,
    BSATL + BSLV, BSABL + BSLV, BSATL + BSABL,
    BSABL + BSLH, BSABR + BSLH, BSABL + BSABR,
    BSATL + BSLH, BSATR + BSLH, BSATL + BSATR,
    BSATL + BSATR + BSLV, BSABL + BSABR + BSLV,
    BSATL + BSABL + BSLH, BSATR + BSABR + BSLH,
    BSATL + BSABR + BSLV, BSATR + BSABL + BSLV,
    BSATL + BSABR + BSLH, BSATR + BSABL + BSLH,
    BSCM, BSCN,
    BSCM + BSLR, BSCN + BSLR, BSCM + BSLL, BSCN + BSLL,
    BSCM + BSLH, BSCN + BSLL + BSLR,
    BSCM + BSLD, BSCN + BSLD, BSCM + BSLU, BSCN + BSLU,
    BSCM + BSLV, BSCN + BSLU + BSLD,
    BSCM + BSLR + BSLD, BSCN + BSLR + BSLD,
    BSCM + BSLL + BSLD, BSCN + BSLL + BSLD,
    BSCM + BSLR + BSLU, BSCN + BSLR + BSLU,
    BSCM + BSLL + BSLU, BSCN + BSLL + BSLU,
    BSCM + BSLR + BSLV, BSCN + BSLR + BSLU + BSLD,
    BSCM + BSLL + BSLV, BSCN + BSLL + BSLU + BSLD,
    BSCM + BSLD + BSLH, BSCN + BSLD + BSLL + BSLR,
    BSCM + BSLU + BSLH, BSCN + BSLU + BSLL + BSLR,
    BSCM + BSLV + BSLH, BSCN + BSLL + BSLR + BSLU + BSLD,
)