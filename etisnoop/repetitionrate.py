"""Analysis of how often each FIG type is repeated in the FIC."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

FRAME_DURATION = 24e-3
FIB_LENGTH = 30

_HIST_CHARS = ("▁", "▂", "▃", "▄", "▅", "▆", "▇")
_PREFIX = "CAROUSEL "


@dataclass
class _FigRateInfo:
    frames_present: list[int] = field(default_factory=list)
    frames_complete: list[int] = field(default_factory=list)
    in_fib: set[int] = field(default_factory=set)
    lengths: list[int] = field(default_factory=list)


def _rate_avg(positions: list[int], per_second: bool) -> float:
    # The mean interval telescopes to (last - first) / (count - 1).
    avg = (positions[-1] - positions[0]) / (len(positions) - 1)
    if per_second:
        avg = math.inf if avg == 0 else 1.0 / (avg * FRAME_DURATION)
    return avg


def _length_histogram(lengths: list[int]) -> str:
    histogram = [0] * FIB_LENGTH
    for length in lengths:
        if not 0 <= length < FIB_LENGTH:
            raise ValueError(f"FIG length {length} does not fit in a FIB")
        histogram[length] += 1
    max_hist = max(histogram)
    chars = (_HIST_CHARS[math.floor(h / (max_hist + 1) * len(_HIST_CHARS))]
             for h in histogram)
    return "[" + "".join(chars) + "]"


class RepetitionRateAnalyser:
    """Records in which frames and FIBs each FIG appears and reports its rate."""

    def __init__(self) -> None:
        self._rates: dict[tuple[int, int], _FigRateInfo] = {}
        self._frame_number = 0
        self._fib = 0

    def announce_fig(self, figtype: int, figextension: int, complete: bool,
                     figlen: int) -> None:
        """Record a FIG; ``complete`` marks a complete set of its information."""
        rate = self._rates.setdefault((figtype, figextension), _FigRateInfo())
        rate.frames_present.append(self._frame_number)
        if complete:
            rate.frames_complete.append(self._frame_number)
        rate.in_fib.add(self._fib)
        rate.lengths.append(figlen)

    def new_fib(self, fib: int) -> None:
        """Announce the start of a FIB; FIB 0 starts a new frame."""
        if fib == 0:
            self._frame_number += 1
        self._fib = fib

    def format_analysis(self, per_second: bool) -> str:
        """Return the analysis; rates are FIGs per second or frames per FIG."""
        lines = []
        if per_second:
            lines.append(
                _PREFIX + "FIG T/EXT  AVG  (COUNT) -   AVG  (COUNT) -  LEN - "
                "LENGTH HISTOGRAM               IN FIB(S)")

        for (figtype, figext), rate in sorted(self._rates.items()):
            n_present = len(rate.frames_present)
            n_complete = len(rate.frames_complete)
            line = _PREFIX
            if n_present >= 2:
                avg = _rate_avg(rate.frames_present, per_second)
                line += f"FIG{figtype:2d}/{figext:2d} {avg:6.2f} ({n_present:5d})"
                if n_complete >= 2:
                    avg = _rate_avg(rate.frames_complete, per_second)
                    line += f" - {avg:6.2f} ({n_complete:5d})"
                else:
                    line += " - None complete"
            else:
                line += f"FIG{figtype:2d}/{figext:2d} "

            length_avg = sum(rate.lengths) / len(rate.lengths)
            line += f" - {length_avg:4.1f} {_length_histogram(rate.lengths)} - "
            line += "".join(f" {fib}" for fib in sorted(rate.in_fib))
            lines.append(line)

        return "".join(line + "\n" for line in lines)

    def display_analysis(self, per_second: bool) -> None:
        """Print the analysis to standard output."""
        print(self.format_analysis(per_second), end="")