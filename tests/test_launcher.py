"""Tests for the shellext program launcher and the shared helpers."""

import pytest

from shellext import common, launcher


def run_launcher(argv):
    with pytest.raises(SystemExit) as exc:
        launcher.main(argv)
    return exc.value.code


def test_list(capsys):
    assert run_launcher(['--list']) == 0
    assert capsys.readouterr().out.split() == ['basename', 'cut', 'dirname', 'head', 'realpath']


def test_dispatches_with_tool_options(tmp_path, capsysbinary):
    data = tmp_path / "data.txt"
    data.write_bytes(b"a:b:c\n")
    assert run_launcher(['cut', '-d', ':', '-f', '2-', str(data)]) == 0
    assert capsysbinary.readouterr().out == b"b:c\n"


def test_tool_status_is_passed_through(capsysbinary):
    assert run_launcher(['dirname']) == common.EX_USAGE


def test_unknown_tool(capsys):
    assert run_launcher(['awk']) == 1
    assert "'awk' is not a shellext tool" in capsys.readouterr().err


def test_no_tool_prints_help(capsys):
    assert run_launcher([]) == 1
    assert "usage:" in capsys.readouterr().out


def test_open_source_error_carries_strerror(tmp_path):
    with pytest.raises(common.SourceOpenError) as exc:
        common.open_source(str(tmp_path / "absent"))
    assert exc.value.filename.endswith("absent")
    assert str(exc.value).endswith(": No such file or directory")


def test_parser_error_exits_with_usage_status(capsys):
    parser = common.ToolArgumentParser(prog='tool')
    with pytest.raises(SystemExit) as exc:
        parser.error("bad option")
    assert exc.value.code == common.EX_USAGE
    assert capsys.readouterr().err.endswith("tool: bad option\n")
