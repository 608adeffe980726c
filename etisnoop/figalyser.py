"""Compact per-frame view of how the FIGs fill the FIBs of the FIC."""

from __future__ import annotations

from dataclasses import dataclass

_MAX_FIBS = 4
_BAR_WIDTH = 15
_COLUMN_WIDTH = 60


@dataclass(frozen=True)
class FigEntry:
    """One FIG seen in a FIB: its type, extension and length in bytes."""

    figtype: int
    ext: int
    length: int


class FigAnalyser:
    """Collects the FIGs of each FIB in a frame and draws their occupancy."""

    def __init__(self) -> None:
        self._fib = 0
        self._figs: list[list[FigEntry]] = []
        self.clear()

    def set_fib(self, fib: int) -> None:
        """Select the FIB that following FIGs belong to."""
        if not 0 <= fib < _MAX_FIBS:
            raise ValueError(f"FIB index out of range: {fib}")
        self._fib = fib

    def add(self, figtype: int, ext: int, length: int) -> None:
        """Record a FIG in the current FIB."""
        self._figs[self._fib].append(FigEntry(figtype, ext, length))

    def format_analysis(self, mid: int) -> str:
        """Return the occupancy line; mode 3 has four FIBs per frame, others three."""
        num_fibs = 4 if mid == 3 else 3
        parts = ["FIC "]
        for fib, figs in enumerate(self._figs[:num_fibs]):
            consumed = 7
            fic_size = 0
            parts.append(f"[{fib:1d} ")
            for fig in figs:
                parts.append(f"{fig.figtype:01d}/{fig.ext:02d} ({fig.length:2d}) ")
                consumed += 10
                fic_size += fig.length
            parts.append(" ")
            parts.append(" " * max(0, _COLUMN_WIDTH - consumed))
            bar = "".join("#" if 2 * i < fic_size else "-" for i in range(_BAR_WIDTH))
            parts.append(f"|{bar}| ]   ")
        parts.append("\n")
        return "".join(parts)

    def analyse(self, mid: int) -> None:
        """Print the occupancy line to standard output."""
        print(self.format_analysis(mid), end="")

    def clear(self) -> None:
        """Forget all recorded FIGs."""
        self._figs = [[] for _ in range(_MAX_FIBS)]