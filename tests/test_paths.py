"""Tests for basename, dirname and realpath."""

import os

import pytest

from shellext import basename, dirname, realpath


def run(tool, argv):
    with pytest.raises(SystemExit) as exc:
        tool.main(argv)
    return exc.value.code


@pytest.mark.parametrize("path,suffix,expected", [
    ("/usr/bin/sort", None, "sort"),
    ("include/stdio.h", ".h", "stdio"),
    ("stdio.h", "stdio.h", "stdio.h"),
    ("dir/", None, "dir"),
    ("/a/b//", None, "b"),
    ("///", None, "/"),
    ("", None, "."),
    ("plain", "", "plain"),
])
def test_get_basename(path, suffix, expected):
    assert basename.get_basename(path, suffix) == expected


def test_basename_with_suffix_operand(capsysbinary):
    assert run(basename, ['/tmp/archive.tar', '.tar']) == 0
    assert capsysbinary.readouterr().out == b"archive\n"


def test_basename_multiple(capsysbinary):
    assert run(basename, ['-a', '-z', 'a/b', 'c/d']) == 0
    assert capsysbinary.readouterr().out == b"b\0d\0"


def test_basename_suffix_option_implies_multiple(capsysbinary):
    assert run(basename, ['-s', '.c', 'x/one.c', 'two.c', 'three.h']) == 0
    assert capsysbinary.readouterr().out == b"one\ntwo\nthree.h\n"


def test_basename_extra_operand(capsysbinary):
    assert run(basename, ['a', 'b', 'c']) == 2
    assert b"extra operand 'c'" in capsysbinary.readouterr().err


def test_basename_missing_operand(capsysbinary):
    assert run(basename, []) == 2
    assert b"basename: missing operand" in capsysbinary.readouterr().err


@pytest.mark.parametrize("path,expected", [
    ("/usr/lib", "/usr"),
    ("/usr/lib/", "/usr"),
    ("usr", "."),
    ("/", "/"),
    ("//", "/"),
    ("/usr", "/"),
    ("a//b", "a"),
    ("", "."),
])
def test_get_dirname(path, expected):
    assert dirname.get_dirname(path) == expected


def test_dirname_several_names(capsysbinary):
    assert run(dirname, ['-z', 'a/b/c', 'file']) == 0
    assert capsysbinary.readouterr().out == b"a/b\0.\0"


def test_dirname_missing_operand(capsysbinary):
    assert run(dirname, []) == 2


def test_realpath_resolves_symlinks(tmp_path, capsysbinary):
    target = tmp_path / "target"
    target.mkdir()
    link = tmp_path / "link"
    link.symlink_to(target)
    assert run(realpath, [str(link / ".." / "link")]) == 0
    expected = os.path.realpath(target)
    assert capsysbinary.readouterr().out == os.fsencode(expected) + b"\n"


def test_realpath_missing_path_fails(tmp_path, capsysbinary):
    missing = tmp_path / "nope"
    assert run(realpath, ['-e', str(missing), str(tmp_path)]) == 1
    captured = capsysbinary.readouterr()
    assert captured.out == os.fsencode(os.path.realpath(tmp_path)) + b"\n"
    assert b"realpath: " in captured.err
    assert b"No such file or directory" in captured.err


def test_realpath_quiet(tmp_path, capsysbinary):
    assert run(realpath, ['-q', str(tmp_path / "nope")]) == 1
    assert capsysbinary.readouterr().err == b""


def test_realpath_missing_allowed(tmp_path, capsysbinary):
    missing = tmp_path / "no" / "such" / ".." / "file"
    assert run(realpath, ['-e', '-m', '-z', str(missing)]) == 0
    expected = os.path.join(os.path.realpath(tmp_path), "no", "file")
    assert capsysbinary.readouterr().out == os.fsencode(expected) + b"\0"


def test_realpath_relative_to_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert realpath.resolve("x", realpath.MAY_BE_MISSING) == os.path.join(os.path.realpath(tmp_path), "x")


def test_realpath_empty_path():
    with pytest.raises(FileNotFoundError):
        realpath.resolve("", realpath.MAY_BE_MISSING)


def test_realpath_missing_operand(capsysbinary):
    assert run(realpath, []) == 2
