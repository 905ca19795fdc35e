import sqlite3

import pytest

from sr2kit.cli import display_help, display_version, main


def test_display_help(capsys):
    display_help()
    out = capsys.readouterr().out
    assert out.startswith("Usage: sr2 [options]\n\nOptions:\n")
    assert "  --help, -h        Show this help message\n" in out
    assert "  --version, -v     Show version information\n" in out


def test_display_version(capsys):
    display_version()
    assert "0.0.1" in capsys.readouterr().out


@pytest.mark.parametrize("flag", ["--help", "-h"])
def test_main_help(capsys, flag):
    assert main([flag]) == 0
    assert capsys.readouterr().out.startswith("Usage: sr2 [options]")


@pytest.mark.parametrize("flag", ["--version", "-v"])
def test_main_version(capsys, flag):
    assert main([flag]) == 0
    assert "0.0.1" in capsys.readouterr().out


def test_main_unknown_option(capsys):
    assert main(["--bogus"]) == 0
    captured = capsys.readouterr()
    assert captured.err == "Unknown option: --bogus\n"
    assert captured.out == ""


def test_main_runs_options_in_order(capsys):
    assert main(["-v", "--nope", "-h"]) == 0
    captured = capsys.readouterr()
    assert captured.out.index("0.0.1") < captured.out.index("Usage:")
    assert "Unknown option: --nope" in captured.err


def test_main_no_arguments(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == ""


def test_main_test0_creates_database(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["--test0"]) == 0
    assert "Database opened successfully." in capsys.readouterr().out
    with sqlite3.connect(tmp_path / "sample.sqlite3") as conn:
        tables = [r[0] for r in conn.execute("SELECT name FROM sqlite_master")]
    assert "sample_table" in tables