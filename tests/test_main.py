"""
Command line tests, driven through main(argv).
"""

import io

import pytest

from rlfm.main import main


@pytest.fixture
def banana_file(tmp_path):
    path = tmp_path / "banana.txt"
    path.write_text("banana\n", encoding="utf-8")
    return str(path)


def test_counts_patterns_from_file(banana_file, capsys) -> None:
    assert main(["-t", banana_file, "-p", "ana", "-p", "x", "-j", "1"]) == 0
    out = capsys.readouterr().out
    assert out == "ana\t2\nx\t0\n"


def test_reads_text_from_stdin(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("mississippi\n"))
    assert main(["-p", "ssi", "-p", "", "-j", "1"]) == 0
    assert capsys.readouterr().out == "ssi\t2\n\t12\n"


def test_pattern_file(banana_file, tmp_path, capsys) -> None:
    patterns = tmp_path / "patterns.txt"
    patterns.write_text("a\nnan\nban\n", encoding="utf-8")
    assert main(["-t", banana_file, "-P", str(patterns), "-j", "1", "--naive"]) == 0
    assert capsys.readouterr().out == "a\t3\nnan\t1\nban\t1\n"


def test_graphemes_flag(tmp_path, capsys) -> None:
    path = tmp_path / "accents.txt"
    path.write_text("e\u0301a e\u0301", encoding="utf-8")
    assert main(["-t", str(path), "-g", "-p", "e", "-p", "e\u0301", "-j", "1"]) == 0
    assert capsys.readouterr().out == "e\t0\ne\u0301\t2\n"


def test_bad_stride_exits_with_error(banana_file, capsys) -> None:
    assert main(["-t", banana_file, "-p", "a", "-s", "0"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "checkpoint stride" in captured.err


def test_reports_go_to_stderr(banana_file, capsys) -> None:
    assert main(["-t", banana_file, "-p", "an", "-j", "1", "--timing", "-m"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "an\t2\n"
    assert "indexing time" in captured.err
    assert "MB" in captured.err


def test_unknown_flag_is_a_usage_error(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--bogus"])
    assert exc.value.code == 2


def test_pattern_file_with_crlf_line_endings(banana_file, tmp_path, capsys) -> None:
    patterns = tmp_path / "patterns.txt"
    patterns.write_bytes(b"ana\r\nnab\r\n")
    assert main(["-t", banana_file, "-P", str(patterns), "-j", "1"]) == 0
    assert capsys.readouterr().out == "ana\t2\nnab\t1\n"
