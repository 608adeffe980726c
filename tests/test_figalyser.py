import re

import pytest

from etisnoop.figalyser import FigAnalyser, FigEntry


def _segments(line):
    return re.findall(r"\[(\d) (.*?)\|([#-]+)\| \]", line)


def test_empty_frame_has_three_fibs_by_default():
    line = FigAnalyser().format_analysis(1)
    assert line.startswith("FIC ")
    assert line.endswith("\n")
    segs = _segments(line)
    assert [s[0] for s in segs] == ["0", "1", "2"]
    assert all(bar == "-" * 15 for _, _, bar in segs)


def test_mode_three_has_four_fibs():
    segs = _segments(FigAnalyser().format_analysis(3))
    assert [s[0] for s in segs] == ["0", "1", "2", "3"]


def test_fig_entry_and_bar():
    fa = FigAnalyser()
    fa.set_fib(0)
    fa.add(0, 1, 5)
    line = fa.format_analysis(1)
    assert "0/01 ( 5) " in line
    segs = _segments(line)
    assert segs[0][2] == "###" + "-" * 12
    assert segs[1][2] == "-" * 15


def test_figs_go_to_selected_fib():
    fa = FigAnalyser()
    fa.set_fib(2)
    fa.add(1, 0, 20)
    segs = _segments(fa.format_analysis(1))
    assert "1/00 (20)" in segs[2][1]
    assert "1/00" not in segs[0][1]
    assert segs[2][2].count("#") == 10


def test_full_fib_fills_bar():
    fa = FigAnalyser()
    fa.set_fib(1)
    fa.add(0, 0, 30)
    segs = _segments(fa.format_analysis(1))
    assert segs[1][2] == "#" * 15


def test_columns_aligned():
    fa = FigAnalyser()
    fa.set_fib(0)
    fa.add(0, 0, 4)
    fa.add(0, 1, 6)
    fa.set_fib(1)
    fa.add(2, 1, 8)
    line = fa.format_analysis(1)
    chunks = line[len("FIC "):].split("]   ")[:3]
    positions = {chunk.index("|") for chunk in chunks}
    assert len(positions) == 1


def test_clear_resets():
    fa = FigAnalyser()
    fa.set_fib(0)
    fa.add(0, 1, 5)
    fa.clear()
    assert fa.format_analysis(1) == FigAnalyser().format_analysis(1)


def test_set_fib_out_of_range():
    with pytest.raises(ValueError):
        FigAnalyser().set_fib(4)


def test_analyse_prints(capsys):
    fa = FigAnalyser()
    fa.add(0, 2, 7)
    fa.analyse(2)
    assert capsys.readouterr().out == fa.format_analysis(2)


def test_fig_entry_fields():
    entry = FigEntry(1, 2, 3)
    assert (entry.figtype, entry.ext, entry.length) == (1, 2, 3)