"""Tests for the command line utility."""

import io
import json

import pytest

from semiconf import __version__
from semiconf.__main__ import main
from semiconf.cli import ArgParser, unparsed_text_error
from semiconf.errors import CLIUsageError


@pytest.fixture
def conf(tmp_path):
    def write(text):
        path = tmp_path / "app.conf"
        path.write_text(text, encoding="utf-8")
        return str(path)
    return write


# ---------------------------------------------------------------------------
# ArgParser
# ---------------------------------------------------------------------------

def test_defaults():
    opts = ArgParser().parse_args([])
    assert opts["file"] == "-"
    assert opts["as_dict"] is False
    assert opts["indent"] is None
    assert opts["strict"] is False
    assert opts["debug"] is False
    assert opts["log_file"] is None

def test_negative_indent():
    with pytest.raises(CLIUsageError):
        ArgParser().parse_args(["--indent", "-1"])

def test_unparsed_text_error():
    e = unparsed_text_error("a='b' junk", " junk")
    assert e.msg == "Line 1, column 7: Unparsed text: 'junk'"

def test_unparsed_text_error_truncates():
    text = "a='b'\n" + "x" * 30
    e = unparsed_text_error(text, "\n" + "x" * 30)
    assert e.msg == "Line 2, column 1: Unparsed text: '" + "x" * 20 + "...'"


# ---------------------------------------------------------------------------
# main
# ---------------------------------------------------------------------------

def test_main_prints_pairs(conf, capsys):
    main([conf("a='b';c=['d';'e'];o=(x='1')")])
    out = json.loads(capsys.readouterr().out)
    assert out == [["a", "b"], ["c", ["d", "e"]], ["o", [["x", "1"]]]]

def test_main_dict(conf, capsys):
    main([conf("a='b';c=['d';'e'];o=(x='1');a='z'"), "--dict"])
    out = json.loads(capsys.readouterr().out)
    assert out == {"a": "z", "c": ["d", "e"], "o": {"x": "1"}}

def test_main_indent(conf, capsys):
    main([conf("a='b'"), "-d", "--indent", "2"])
    assert capsys.readouterr().out == '{\n  "a": "b"\n}\n'

def test_main_keeps_unicode(conf, capsys):
    main([conf("ß='ü'"), "-d"])
    assert capsys.readouterr().out == '{"ß": "ü"}\n'

def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("a='b'"))
    main([])
    assert json.loads(capsys.readouterr().out) == [["a", "b"]]

def test_main_reads_stdin_dash(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("a=[]"))
    main(["-"])
    assert json.loads(capsys.readouterr().out) == [["a", []]]

def test_main_parse_error(conf, capsys):
    path = conf("key=@")
    with pytest.raises(SystemExit) as excinfo:
        main([path])
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert f"File {path}, Line 1, column 5: Expected a string, list or object" in err
    assert "  key=@\n      ^" in err

def test_main_parse_error_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("key"))
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 1
    assert capsys.readouterr().err.startswith("Line 1, column 4: Expected '='")

def test_main_leftover_text_allowed(conf, capsys):
    main([conf("a='b' junk")])
    assert json.loads(capsys.readouterr().out) == [["a", "b"]]

def test_main_strict(conf, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([conf("a='b' junk"), "--strict"])
    assert excinfo.value.code == 1
    assert "Line 1, column 7: Unparsed text: 'junk'" in capsys.readouterr().err

def test_main_strict_allows_trailing_whitespace(conf, capsys):
    main([conf("a='b';\n\n"), "-s"])
    assert json.loads(capsys.readouterr().out) == [["a", "b"]]

def test_main_strict_rejects_separator_controls(conf, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([conf("a='b'\x1c"), "--strict"])
    assert excinfo.value.code == 1
    assert "Line 1, column 6: Unparsed text: '\\x1c'" in capsys.readouterr().err

def test_main_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "nope.conf")])
    assert excinfo.value.code == 1
    assert "Cannot read" in capsys.readouterr().err

def test_main_undecodable_file(tmp_path, capsys):
    path = tmp_path / "latin.conf"
    path.write_bytes(b"a='\xe9'")
    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])
    assert excinfo.value.code == 1
    assert "not valid utf-8 text" in capsys.readouterr().err

def test_main_negative_indent(conf, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([conf("a='b'"), "--indent", "-2"])
    assert excinfo.value.code == 2
    assert "--indent cannot be negative." in capsys.readouterr().err

def test_main_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out == f"semiconf {__version__}\n"
