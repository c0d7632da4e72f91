import io

import pytest

from aocsolve.errors import SourceUnavailable
from aocsolve.util import run_solution, read_lines, cmp
from aocsolve.y2022 import day02

def count_lines(lines):
    return sum(1 for _ in lines)

def test_read_lines_is_lazy_and_rstripped(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("a  \n  b\n\n")
    lines = read_lines(str(path))
    assert next(lines) == "a"
    assert list(lines) == ["  b", ""]

def test_read_lines_missing_file(tmp_path):
    with pytest.raises(SourceUnavailable) as info:
        read_lines(str(tmp_path / "nope"))
    assert isinstance(info.value.__cause__, OSError)

def test_run_solution_defaults_to_input_file(tmp_path, monkeypatch, capsys):
    (tmp_path / "input").write_text("A Y\nB X\nC Z\n")
    monkeypatch.chdir(tmp_path)
    assert run_solution(day02.solve, []) == 0
    assert capsys.readouterr().out == "15\n"

def test_run_solution_passes_part(tmp_path, capsys):
    path = tmp_path / "strategy"
    path.write_text("A Y\nB X\nC Z\n")
    assert run_solution(day02.solve, [str(path), "--part", "2"]) == 0
    assert capsys.readouterr().out == "12\n"

def test_run_solution_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("x\ny\n"))
    assert run_solution(count_lines, ["-"]) == 0
    assert capsys.readouterr().out == "2\n"

def test_run_solution_warns_about_ignored_part(tmp_path, capsys):
    path = tmp_path / "in"
    path.write_text("x\n")
    assert run_solution(count_lines, [str(path), "-p", "1"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "1\n"
    assert "ignoring --part=1" in captured.err

def test_run_solution_missing_file(tmp_path, capsys):
    assert run_solution(day02.solve, [str(tmp_path / "nope")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[ERROR] cannot read input" in captured.err

def test_run_solution_malformed_line(tmp_path, capsys):
    path = tmp_path / "in"
    path.write_text("A Y\nA Q\n")
    assert run_solution(day02.solve, [str(path)]) == 1
    captured = capsys.readouterr()
    # no partial answer
    assert captured.out == ""
    assert "line 2: unknown token 'Q'" in captured.err

def test_run_solution_input_not_utf8(tmp_path, capsys):
    path = tmp_path / "in"
    path.write_bytes(b"1000\n\xff\xfe2000\n")
    assert run_solution(count_lines, [str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[ERROR] cannot read input" in captured.err

def test_read_lines_not_utf8_is_source_unavailable(tmp_path):
    path = tmp_path / "in"
    path.write_bytes(b"\xff")
    with pytest.raises(SourceUnavailable) as info:
        list(read_lines(str(path)))
    assert isinstance(info.value.__cause__, UnicodeDecodeError)

def test_read_lines_leaves_stdin_open(monkeypatch):
    stdin = io.StringIO("a \nb\n")
    monkeypatch.setattr("sys.stdin", stdin)
    assert list(read_lines("-")) == ["a", "b"]
    assert not stdin.closed

def test_run_solution_rejects_bad_part():
    with pytest.raises(SystemExit) as info:
        run_solution(day02.solve, ["--part", "3"])
    assert info.value.code == 2

def test_cmp():
    assert cmp(1, 2) == -1
    assert cmp(2, 2) == 0
    assert cmp(3, 2) == 1
