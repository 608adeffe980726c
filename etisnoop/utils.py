"""Output helpers and small decoding utilities shared by the analysers."""

from __future__ import annotations

import math
from dataclasses import dataclass

_WEEKDAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_INT16_MAX = 32767


@dataclass
class _OutputState:
    verbosity: int = 0


_state = _OutputState()


def set_verbosity(v: int) -> None:
    """Set the global verbosity level."""
    _state.verbosity = int(v)


def get_verbosity() -> int:
    """Return the global verbosity level."""
    return _state.verbosity


@dataclass(frozen=True)
class DisplaySettings:
    """Whether to print, and at which indentation."""

    print: bool
    indent: int

    def __add__(self, indent_offset: int) -> DisplaySettings:
        return DisplaySettings(self.print, self.indent + indent_offset)


def format_yaml(header: str, disp: DisplaySettings, buffer: bytes | None = None,
                desc: str = "", value: str = "") -> str:
    """Format one YAML entry, including the trailing newline."""
    pad = " " * (disp.indent + 1)
    parts = [" " * disp.indent, header, ":"]

    if value and not desc and buffer is None:
        parts.append(" " + value)
    else:
        if value:
            parts.append(f"\n{pad}value: {value}")
        if desc:
            parts.append(f"\n{pad}desc: {desc}")
        if buffer is not None and _state.verbosity > 0 and len(buffer) != 0:
            parts.append(f"\n{pad}data: [")
            num_printed = 0
            for i, byte in enumerate(buffer):
                if i > 0:
                    parts.append(",")
                    num_printed += 1
                if num_printed + disp.indent + 1 + 7 > 60:
                    parts.append("\n" + " " * (disp.indent + 8))
                    num_printed = 2
                elif i > 0:
                    parts.append(" ")
                    num_printed += 1
                parts.append(f"0x{byte:02x}")
                num_printed += 3
            parts.append("]")

    parts.append("\n")
    return "".join(parts)


def _emit(header: str, disp: DisplaySettings, buffer: bytes | None,
          desc: str, value: str) -> None:
    if disp.print:
        print(format_yaml(header, disp, buffer, desc, value), end="")


def printbuf(header: str, disp: DisplaySettings | int = 0, buffer: bytes | None = None,
             desc: str = "", value: str = "") -> None:
    """Print a YAML entry; an integer ``disp`` prints only when verbosity exceeds 1."""
    if isinstance(disp, int):
        disp = DisplaySettings(_state.verbosity > 1, disp)
    _emit(header, disp, buffer, desc, value)


def printfig(header: str, disp: DisplaySettings, buffer: bytes | None = None,
             desc: str = "", value: str = "") -> None:
    """Print a YAML entry describing a FIG."""
    _emit(header, disp, buffer, desc, value)


def printvalue(header: str, disp: DisplaySettings | int = 0,
               desc: str = "", value: str = "") -> None:
    """Print a YAML entry without data; an integer ``disp`` always prints."""
    if isinstance(disp, int):
        disp = DisplaySettings(True, disp)
    _emit(header, disp, None, desc, value)


def printinfo(header: str, disp: DisplaySettings, min_verb: int) -> None:
    """Print an info line when the verbosity is at least ``min_verb``."""
    if _state.verbosity >= min_verb:
        print(" " * disp.indent + f"info: {header}")


def printsequencestart(indent: int = 0) -> None:
    """Print the start of a YAML sequence item."""
    print(" " * indent + "-")


def _c_mod(a: int, b: int) -> int:
    return int(math.fmod(a, b))


def mjd_to_str(mjd: int) -> str:
    """Convert a Modified Julian Date into a date string (valid 1900-03-01 to 2100-02-28)."""
    y = int((mjd - 15078.2) / 365.25)
    y_days = int(y * 365.25)
    m = int((mjd - 14956.1 - y_days) / 30.6001)
    mday = mjd - 14956 - y_days - int(m * 30.6001)
    k = 1 if m in (14, 15) else 0
    year = y + k
    mon = m - 1 - k * 12 - 1
    wday = _c_mod(_c_mod(mjd + 2, 7) + 1, 7)

    if mday < 0 or mon < 0 or year < 0:
        return f"invalid MJD mday={mday} mon={mon} year={year}"

    wday_name = _WEEKDAYS[wday] if 0 <= wday < 7 else "?"
    mon_name = _MONTHS[mon] if mon < 12 else "?"
    return f"{wday_name} {mon_name} {mday:02d} {year + 1900}"


def pnum_to_str(programme_number: int) -> str:
    """Describe a Programme Number (RDS PIN coding)."""
    minute = programme_number & 0x3F
    hour = (programme_number >> 6) & 0x1F
    day = (programme_number >> 11) & 0x1F
    if day != 0:
        return f"day of month={day} time={hour:02d}:{minute:02d}"
    if hour == 0 and minute == 0:
        return "Status code: no meaningful PNum is currently provided"
    if hour == 0 and minute == 1:
        return "Blank code: the current programme is not worth recording"
    if hour == 0 and minute == 2:
        return ("Interrupt code: the interrupt is unplanned "
                "(for example a traffic announcement)")
    return "invalid value"


def absolute_to_db(value: int) -> int:
    """Convert an absolute 16-bit level to dB full scale; zero gives -90."""
    if value == 0:
        return -90
    if value < 0:
        raise ValueError(f"level must not be negative: {value}")
    db = 20 * math.log10(value / _INT16_MAX)
    return math.floor(db + 0.5) if db >= 0 else -math.floor(-db + 0.5)


def _read_be(buf: bytes, offset: int, size: int) -> int:
    chunk = bytes(buf[offset:offset + size])
    if offset < 0 or len(chunk) != size:
        raise ValueError(f"need {size} bytes at offset {offset}, buffer has {len(buf)}")
    return int.from_bytes(chunk, "big")


def read_u16(buf: bytes, offset: int = 0) -> int:
    """Read a big-endian unsigned 16-bit integer."""
    return _read_be(buf, offset, 2)


def read_u32(buf: bytes, offset: int = 0) -> int:
    """Read a big-endian unsigned 32-bit integer."""
    return _read_be(buf, offset, 4)