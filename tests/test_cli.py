import logging

import pytest

from lispoo import config
from lispoo.cli import main


@pytest.fixture
def program(tmp_path):
    def write(source):
        path = tmp_path / "prog.lisp"
        path.write_text(source, encoding="utf-8")
        return str(path)
    return write


def test_runs_program(program, capsys):
    path = program("(progn (define i 0) (while (less i 3) (progn (message i) (set! i (add i 1)))))")
    assert main([path]) == 0
    assert capsys.readouterr().out == "0\n1\n2\n"


def test_runs_every_top_level_form(program, capsys):
    path = program("(define x 10)\n(define f (lambda (y) (add x y)))\n(message (f 5))\n")
    assert main([path]) == 0
    assert capsys.readouterr().out == "15\n"


def test_parse_error_exits_non_zero(program, capsys):
    assert main([program("(+ 1 2")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error:" in captured.err


def test_syntax_error_runs_nothing(program, capsys):
    assert main([program("(message 1) (message 2")]) == 1
    assert capsys.readouterr().out == ""


def test_unknown_symbol_exits_non_zero(program, capsys):
    assert main([program("(foo 1 2)")]) == 1
    assert "foo" in capsys.readouterr().err


def test_output_before_error_is_kept(program, capsys):
    assert main([program("(progn (message 1) (if 1 2))")]) == 1
    captured = capsys.readouterr()
    assert captured.out == "1\n"
    assert "if" in captured.err


def test_unreadable_path(tmp_path, capsys):
    missing = tmp_path / "nope.lisp"
    assert main([str(missing)]) == 1
    assert "can't open" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [[], ["a.lisp", "b.lisp"]])
def test_wrong_argument_count(argv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    assert exc_info.value.code == 2
    assert "usage" in capsys.readouterr().err


def test_runaway_recursion_is_fatal(program, capsys, monkeypatch):
    monkeypatch.setenv("LISPOO_RECURSION_LIMIT", "2000")
    assert main([program("(progn (define f (lambda (n) (f n))) (f 1))")]) == 1
    assert "depth" in capsys.readouterr().err


@pytest.mark.parametrize(
    "raw, expected",
    [(None, logging.WARNING), ("debug", logging.DEBUG), ("INFO", logging.INFO), ("bogus", logging.WARNING)]
)
def test_log_level_from_environment(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("LISPOO_LOG_LEVEL", raising=False)
    else:
        monkeypatch.setenv("LISPOO_LOG_LEVEL", raw)
    assert config.get_log_level() == expected


@pytest.mark.parametrize("raw, expected", [("5000", 5000), ("abc", 10000), ("10", 100)])
def test_recursion_limit_from_environment(monkeypatch, raw, expected):
    monkeypatch.setenv("LISPOO_RECURSION_LIMIT", raw)
    assert config.get_recursion_limit() == expected
