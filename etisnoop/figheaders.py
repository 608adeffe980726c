"""Common FIG header fields and the analysis result type shared by FIG decoders."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class _SignallingState:
    mode_identity: int = 0
    international_table: int = 0


_state = _SignallingState()


def set_mode_identity(mid: int) -> None:
    """Remember the transmission mode signalled in the ETI frame characterisation."""
    _state.mode_identity = int(mid)


def get_mode_identity() -> int:
    """Return the remembered transmission mode."""
    return _state.mode_identity


def set_international_table(intl_table: int) -> None:
    """Remember which international table is in use."""
    _state.international_table = int(intl_table)


def get_international_table() -> int:
    """Return the international table in use."""
    return _state.international_table


@dataclass
class MessageInfo:
    """One decoded message with its nesting level."""

    msg: str
    level: int = 0


@dataclass
class FigResult:
    """The outcome of decoding one FIG."""

    figtype: int = -1
    figext: int = 0
    msgs: list[MessageInfo] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    complete: bool = False


@dataclass
class Fig0Header:
    """A FIG type 0 data field: C/N, OE, P/D flags and extension."""

    data: bytes
    figlen: int
    ensemble: Any = None
    wm_decoder: Any = None
    # The ensemble only gets updated when the FIB CRC is correct
    fibcrccorrect: bool = True

    @property
    def cn(self) -> int:
        return (self.data[0] & 0x80) >> 7

    @property
    def oe(self) -> int:
        return (self.data[0] & 0x40) >> 6

    @property
    def pd(self) -> int:
        return (self.data[0] & 0x20) >> 5

    @property
    def ext(self) -> int:
        return self.data[0] & 0x1F


@dataclass
class Fig1Header:
    """A FIG type 1 data field: charset, OE flag and extension."""

    data: bytes
    figlen: int
    ensemble: Any = None
    fibcrccorrect: bool = True

    @property
    def charset(self) -> int:
        return (self.data[0] & 0xF0) >> 4

    @property
    def oe(self) -> int:
        return (self.data[0] & 0x08) >> 3

    @property
    def ext(self) -> int:
        return self.data[0] & 0x07


@dataclass
class Fig2Header:
    """A FIG type 2 data field: toggle flag, segment index, rfu and extension."""

    data: bytes
    figlen: int
    ensemble: Any = None
    fibcrccorrect: bool = True

    @property
    def toggle_flag(self) -> int:
        return (self.data[0] & 0x80) >> 7

    @property
    def segment_index(self) -> int:
        return (self.data[0] & 0x70) >> 4

    @property
    def rfu(self) -> int:
        return (self.data[0] & 0x08) >> 3

    @property
    def ext(self) -> int:
        return self.data[0] & 0x07

    def identifier_len(self) -> int:
        """Length of the identifier field that follows the header byte."""
        ext = self.ext
        if ext in (0, 1):  # ensemble label, programme service label
            return 2
        if ext == 4:  # service component label
            pd = (self.data[1] & 0x80) >> 7
            return 3 if pd == 0 else 5
        if ext == 5:  # data service label
            return 4
        if ext == 6:  # X-PAD user application label
            pd = (self.data[1] & 0x80) >> 7
            return 4 if pd == 0 else 6
        return 0