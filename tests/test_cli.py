import pytest

from theta.__main__ import main


@pytest.fixture
def program_file(tmp_path):
    def _write(source):
        path = tmp_path / "program.theta"
        path.write_text(source, encoding="utf-8")
        return str(path)
    return _write


def test_runs_program(program_file, capsys):
    path = program_file('(defun inc (x) (+ x 1))\n(write (inc 41))\n(write "done")\n')
    assert main([path]) == 0
    captured = capsys.readouterr()
    assert captured.out == "42\ndone\n"
    assert captured.err == ""


def test_runtime_error(program_file, capsys):
    assert main([program_file("(write 1) (foo) (write 2)")]) == 1
    captured = capsys.readouterr()
    assert captured.out == "1\n"
    assert captured.err.startswith("Encountered RuntimeError.\nMessage: ")
    assert "foo" in captured.err


def test_parse_error(program_file, capsys):
    assert main([program_file("(write 1")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Encountered ParseError." in captured.err


def test_token_error(program_file, capsys):
    assert main([program_file('(write "oops)')]) == 1
    assert "Encountered Tokenization Error." in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.theta")]) == 2
    assert "could not read" in capsys.readouterr().err


def test_emit_ast(program_file, capsys):
    path = program_file("(defun inc (x)\n  (+ x 1))\n(write   (inc 4))")
    assert main(["--emit-ast", path]) == 0
    assert capsys.readouterr().out == "(defun inc (x) (+ x 1))\n(write (inc 4))\n"


def test_invalid_utf8_source(tmp_path, capsys):
    path = tmp_path / "program.theta"
    path.write_bytes(b'(write "\xff")')
    assert main([str(path)]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "could not read" in captured.err
