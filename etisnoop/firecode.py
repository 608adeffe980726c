"""Fire code CRC used to protect DAB+ superframe headers."""

_GEN_POLY = 0x782F  # x^16 + x^14 + x^13 + x^12 + x^11 + x^5 + x^3 + x^2 + x + 1


def firecode_crc(data: bytes) -> int:
    """Return the 16-bit Fire code CRC of ``data`` (initial value 0, no final xor)."""
    crc = 0
    for byte in data:
        for shift in range(7, -1, -1):
            if crc & 0x8000:
                crc = (crc << 1) ^ _GEN_POLY
            else:
                crc <<= 1
            if (byte >> shift) & 1:
                crc ^= _GEN_POLY
            crc &= 0xFFFF
    return crc