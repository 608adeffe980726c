"""Decoding of the multiplexer watermark hidden in FIG 0/1 order and FIG 0/10 ConfInd."""

from __future__ import annotations

import sys
from collections.abc import Sequence

_SYNC_ALTERNATIONS = 16


def _find_sync(bits: Sequence[bool]) -> tuple[int, int] | None:
    """Return (position after sync, alternation count), or None if absent."""
    alternations = 0
    last_bit = True
    for index, bit in enumerate(bits):
        if alternations == _SYNC_ALTERNATIONS:
            return index, alternations
        if last_bit != bool(bit):
            last_bit = bool(bit)
            alternations += 1
        else:
            alternations = 0
            last_bit = True
    return None


def decode_watermark_bits(bits: Sequence[bool]) -> str:
    """Decode a watermark string from a bit sequence; empty if no sync is found."""
    found = _find_sync(bits)
    if found is None:
        return ""
    start, alternations = found
    print(f"Found SYNC at offset {start - alternations} out of {len(bits)}",
          file=sys.stderr)

    data_bits = [bool(b) for b in bits[start::2]]
    chars = bytearray()
    for pos in range(0, len(data_bits) - 7, 8):
        byte = 0
        for bit in data_bits[pos:pos + 8]:
            byte = (byte << 1) | bit
        chars.append(byte)
    return chars.decode("latin-1")


class WatermarkDecoder:
    """Collects watermark bits and decodes them."""

    def __init__(self) -> None:
        self._confind_bits: list[bool] = []
        self._fig0_1_bits: list[bool] = []

    def push_fig0_1_bit(self, bit: bool) -> None:
        """Add a bit carried by the order of FIG 0/1 subchannels."""
        self._fig0_1_bits.append(bool(bit))

    def push_confind_bit(self, confind: bool) -> None:
        """Add a bit carried by the ConfInd flag of FIG 0/10."""
        self._confind_bits.append(bool(confind))

    def calculate_watermark(self) -> str:
        """Return the decoded watermark, preferring the FIG 0/1 encoding."""
        old = decode_watermark_bits(self._confind_bits)
        new = decode_watermark_bits(self._fig0_1_bits)
        if new:
            return new
        if old:
            return old + " (old watermark)"
        return "(NOT FOUND)"