import datetime
import re

import pytest

from etisnoop import utils
from etisnoop.utils import (
    DisplaySettings,
    absolute_to_db,
    format_yaml,
    get_verbosity,
    mjd_to_str,
    pnum_to_str,
    printbuf,
    printfig,
    printinfo,
    printsequencestart,
    printvalue,
    read_u16,
    read_u32,
    set_verbosity,
)


@pytest.fixture(autouse=True)
def reset_verbosity():
    set_verbosity(0)
    yield
    set_verbosity(0)


def test_verbosity_roundtrip():
    set_verbosity(3)
    assert get_verbosity() == 3


def test_display_settings_add():
    d = DisplaySettings(True, 2) + 3
    assert d == DisplaySettings(True, 5)
    assert (DisplaySettings(False, 1) + 1).print is False


def test_format_value_only():
    assert format_yaml("key", DisplaySettings(True, 2), value="val") == "  key: val\n"


def test_format_value_and_desc():
    out = format_yaml("key", DisplaySettings(True, 0), desc="d", value="v")
    assert out == "key:\n value: v\n desc: d\n"


def test_buffer_hidden_at_verbosity_zero():
    assert format_yaml("key", DisplaySettings(True, 0), b"\x01\x02") == "key:\n"


def test_buffer_shown_at_verbosity_one():
    set_verbosity(1)
    out = format_yaml("key", DisplaySettings(True, 0), b"\x01\x02")
    assert out == "key:\n data: [0x01, 0x02]\n"


def test_long_buffer_wraps_and_keeps_all_bytes():
    set_verbosity(1)
    data = bytes(range(40))
    out = format_yaml("key", DisplaySettings(True, 4), data)
    tokens = re.findall(r"0x[0-9a-f]{2}", out)
    assert tokens == [f"0x{b:02x}" for b in data]
    assert out.count("\n") > 2


def test_printbuf_respects_print_flag(capsys):
    printbuf("key", DisplaySettings(False, 0), None, value="v")
    assert capsys.readouterr().out == ""
    printfig("key", DisplaySettings(True, 0), None, value="v")
    assert capsys.readouterr().out == "key: v\n"


def test_printbuf_integer_indent_depends_on_verbosity(capsys):
    printbuf("key", 1, value="v")
    assert capsys.readouterr().out == ""
    set_verbosity(2)
    printbuf("key", 1, value="v")
    assert capsys.readouterr().out == " key: v\n"


def test_printvalue_integer_indent_always_prints(capsys):
    printvalue("key", 2, value="v")
    assert capsys.readouterr().out == "  key: v\n"


def test_printinfo_threshold(capsys):
    printinfo("hello", DisplaySettings(True, 2), 1)
    assert capsys.readouterr().out == ""
    set_verbosity(1)
    printinfo("hello", DisplaySettings(True, 2), 1)
    assert capsys.readouterr().out == "  info: hello\n"


def test_printsequencestart(capsys):
    printsequencestart(3)
    assert capsys.readouterr().out == "   -\n"


def test_mjd_worked_example():
    assert mjd_to_str(51544) == "Sat Jan 01 2000"


@pytest.mark.parametrize("mjd", [15079, 40587, 45218, 51603, 58849, 60000, 88068])
def test_mjd_matches_calendar(mjd):
    day = datetime.date(1858, 11, 17) + datetime.timedelta(days=mjd)
    assert mjd_to_str(mjd) == day.strftime("%a %b %d %Y")


@pytest.mark.parametrize("mjd", [0, 100])
def test_mjd_out_of_range_is_invalid(mjd):
    assert mjd_to_str(mjd).startswith("invalid MJD")


def test_pnum_with_day():
    pnum = (5 << 11) | (13 << 6) | 7
    assert pnum_to_str(pnum) == "day of month=5 time=13:07"


@pytest.mark.parametrize(
    "pnum, expected",
    [
        (0, "Status code: no meaningful PNum is currently provided"),
        (1, "Blank code: the current programme is not worth recording"),
        (2, "Interrupt code: the interrupt is unplanned (for example a traffic announcement)"),
        (3, "invalid value"),
        (1 << 6, "invalid value"),
    ],
)
def test_pnum_special_codes(pnum, expected):
    assert pnum_to_str(pnum) == expected


def test_absolute_to_db_limits():
    assert absolute_to_db(0) == -90
    assert absolute_to_db(32767) == 0


def test_absolute_to_db_monotonic():
    levels = [1, 10, 100, 1000, 10000, 32767]
    values = [absolute_to_db(v) for v in levels]
    assert values == sorted(values)
    assert all(v <= 0 for v in values)


def test_absolute_to_db_negative_raises():
    with pytest.raises(ValueError):
        absolute_to_db(-5)


def test_read_u16_and_u32():
    buf = bytes([0x12, 0x34, 0x56, 0x78, 0x9A])
    assert read_u16(buf) == 0x1234
    assert read_u16(buf, 3) == 0x789A
    assert read_u32(buf, 1) == 0x3456789A


def test_read_short_buffer_raises():
    with pytest.raises(ValueError):
        read_u32(b"\x01\x02\x03")
    with pytest.raises(ValueError):
        read_u16(b"\x01\x02", 1)


def test_module_verbosity_is_shared():
    set_verbosity(5)
    assert utils.get_verbosity() == 5