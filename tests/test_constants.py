"""Centralized constants for testing purposes.
Do not use in production code.
"""

from typing import Final

TEST_RANDOM_SEED: Final[int] = 3735928559

# Wire captures, one 4-byte group per line as laid out in the header table.
HEADER_CAPTURE: Final[bytes] = bytes.fromhex(
    "4641434e"  # H_TYPE
    "00000040"  # TFL
    "00010001"  # SA
    "000100ff"  # DA
    "00000000"  # V_SEQ
    "00000000"  # SEQ
    "80000000"  # M_CTL
    "00000000"  # ULS, M_SZ
    "00000000"  # M_ADD
    "00000000"  # MFT, M_RLT, reserved
    "fdec0000"  # TCD, VER
    "00000000"  # C_AD1, C_SZ1
    "00000000"  # C_AD2, C_SZ2
    "00310000"  # MODE, P_TYPE, PRI
    "00000040"  # CBN, TBN, BSIZE
    "00000000"  # LKS, TW, RCT
)

TOKEN_CAPTURE: Final[bytes] = bytes.fromhex(
    "4641434e"  # H_TYPE
    "00000040"  # TFL
    "00010001"  # SA
    "00010055"  # DA
    "00000000"  # V_SEQ
    "00000000"  # SEQ
    "00000000"  # M_CTL
    "00000000"  # ULS, M_SZ
    "00000000"  # M_ADD
    "00000000"  # MFT, M_RLT, reserved
    "fde80000"  # TCD, VER
    "00000000"  # C_AD1, C_SZ1
    "00000000"  # C_AD2, C_SZ2
    "00318000"  # MODE, P_TYPE, PRI
    "01010040"  # CBN, TBN, BSIZE
    "00320000"  # LKS, TW, RCT
)

TRIGGER_CAPTURE: Final[bytes] = bytes.fromhex(
    "4641434e"  # H_TYPE
    "00000060"  # TFL
    "00010001"  # SA
    "000100ff"  # DA
    "00000000"  # V_SEQ
    "00000000"  # SEQ
    "00000000"  # M_CTL
    "00000000"  # ULS, M_SZ
    "00000000"  # M_ADD
    "0a000000"  # MFT, M_RLT, reserved
    "fdf40000"  # TCD, VER
    "00000004"  # C_AD1, C_SZ1
    "00000040"  # C_AD2, C_SZ2
    "00318000"  # MODE, P_TYPE, PRI
    "01010060"  # CBN, TBN, BSIZE
    "00320000"  # LKS, TW, RCT
    "4e4f4445202020202020"  # NODE
    "56454e444f5220202020"  # VENDOR
    "4d414e55462e20202020"  # MANUF.
    "0000"  # reserved
)

CYCLIC_DATA_LENGTH: Final[int] = 136

CYCLIC_CAPTURE: Final[bytes] = bytes.fromhex(
    "4641434e"  # H_TYPE
    "000000c8"  # TFL
    "00010055"  # SA
    "00010001"  # DA
    "000c466d"  # V_SEQ
    "00000000"  # SEQ
    "00000000"  # M_CTL
    "00000000"  # ULS, M_SZ
    "00000000"  # M_ADD
    "0a000000"  # MFT, M_RLT, reserved
    "fde90000"  # TCD, VER
    "00040004"  # C_AD1, C_SZ1
    "00400040"  # C_AD2, C_SZ2
    "00318000"  # MODE, P_TYPE, PRI
    "010100c8"  # CBN, TBN, BSIZE
    "00320000"  # LKS, TW, RCT
) + bytes(CYCLIC_DATA_LENGTH)
