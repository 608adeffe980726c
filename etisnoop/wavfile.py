"""Minimal writer for 16-bit stereo PCM WAV files."""

from __future__ import annotations

import struct
from collections.abc import Iterable
from os import PathLike

_CHANNELS = 2
_BITS_PER_SAMPLE = 16
_HEADER = struct.Struct("<4sI4s4sIHHIIHH4sI")
HEADER_SIZE = _HEADER.size


class WavWriter:
    """Write interleaved 16-bit stereo samples to a WAV file.

    The header sizes are filled in when the writer is closed.
    """

    def __init__(self, filename: str | PathLike, rate: int) -> None:
        byte_rate = rate * (_BITS_PER_SAMPLE // 8) * _CHANNELS
        block_align = _CHANNELS * _BITS_PER_SAMPLE // 8
        header = _HEADER.pack(
            b"RIFF", 0, b"WAVE", b"fmt ", 16, 1, _CHANNELS, rate,
            byte_rate, block_align, _BITS_PER_SAMPLE, b"data", 0)
        self._file = open(filename, "w+b")
        self._file.write(header)
        self._file.flush()

    @property
    def closed(self) -> bool:
        return self._file.closed

    def write(self, samples: Iterable[int]) -> None:
        """Append signed 16-bit samples, left and right interleaved."""
        values = list(samples)
        self._file.write(struct.pack(f"<{len(values)}h", *values))

    def close(self) -> None:
        """Fill in the RIFF and data lengths and close the file."""
        if self._file.closed:
            return
        file_length = self._file.tell()
        self._file.seek(HEADER_SIZE - 4)
        self._file.write(struct.pack("<I", file_length - HEADER_SIZE))
        self._file.seek(4)
        self._file.write(struct.pack("<I", file_length - 8))
        self._file.close()

    def __enter__(self) -> WavWriter:
        return self

    def __exit__(self, *args) -> None:
        self.close()