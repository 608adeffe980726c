"""Byte-wise CRC-16, CRC-32, CRC-CCITT, CRC-DNP, CRC-Kermit and CRC-Sick updates.

Each ``update_crc_*`` function takes the running CRC value and the next data
byte and returns the new CRC value.  Bytes may be given as signed or unsigned
integers; only the low eight bits are used.
"""

P_16 = 0xA001
P_32 = 0xEDB88320
P_CCITT = 0x1021
P_DNP = 0xA6BC
P_KERMIT = 0x8408
P_SICK = 0x8005

_MASK16 = 0xFFFF
_MASK32 = 0xFFFFFFFF


def _reflected_table(poly: int) -> tuple[int, ...]:
    """Table for a reflected (LSB-first) CRC with the given polynomial."""
    table = []
    for value in range(256):
        crc = value
        for _ in range(8):
            crc = (crc >> 1) ^ poly if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


def _ccitt_table() -> tuple[int, ...]:
    table = []
    for value in range(256):
        crc = 0
        c = value << 8
        for _ in range(8):
            if (crc ^ c) & 0x8000:
                crc = ((crc << 1) ^ P_CCITT) & _MASK16
            else:
                crc = (crc << 1) & _MASK16
            c = (c << 1) & _MASK16
        table.append(crc)
    return tuple(table)


_TAB16 = _reflected_table(P_16)
_TAB32 = _reflected_table(P_32)
_TABDNP = _reflected_table(P_DNP)
_TABKERMIT = _reflected_table(P_KERMIT)
_TABCCITT = _ccitt_table()


def _byte(c: int) -> int:
    return c & 0xFF


def _reflected_update(table: tuple[int, ...], crc: int, c: int) -> int:
    crc &= _MASK16
    return (crc >> 8) ^ table[(crc ^ _byte(c)) & 0xFF]


def update_crc_16(crc: int, c: int) -> int:
    """Update a CRC-16 (polynomial 0xA001, reflected) with one byte."""
    return _reflected_update(_TAB16, crc, c)


def update_crc_32(crc: int, c: int) -> int:
    """Update a CRC-32 (polynomial 0xEDB88320, reflected) with one byte."""
    crc &= _MASK32
    return (crc >> 8) ^ _TAB32[(crc ^ _byte(c)) & 0xFF]


def update_crc_ccitt(crc: int, c: int) -> int:
    """Update a CRC-CCITT (polynomial 0x1021, MSB first) with one byte."""
    crc &= _MASK16
    index = (crc >> 8) ^ _byte(c)
    return ((crc << 8) ^ _TABCCITT[index]) & _MASK16


def update_crc_dnp(crc: int, c: int) -> int:
    """Update a CRC-DNP (polynomial 0xA6BC, reflected) with one byte."""
    return _reflected_update(_TABDNP, crc, c)


def update_crc_kermit(crc: int, c: int) -> int:
    """Update a CRC-Kermit (polynomial 0x8408, reflected) with one byte."""
    return _reflected_update(_TABKERMIT, crc, c)


def update_crc_sick(crc: int, c: int, prev_byte: int) -> int:
    """Update a CRC-Sick value with one byte and the byte before it."""
    crc &= _MASK16
    if crc & 0x8000:
        crc = (crc << 1) ^ P_SICK
    else:
        crc <<= 1
    crc &= _MASK16
    return crc ^ (_byte(c) | (_byte(prev_byte) << 8))