# tests/test_cli.py
from __future__ import annotations

import logging

import pytest

from strbuf.__main__ import configure_logging, main


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "sample.csv"
    path.write_bytes(b'name,quote\nann,"hi, there"\nbob,\n')
    return path


def test_split_prints_tokens_per_line(sample, capsys):
    assert main(["split", str(sample), "--separator", "|"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "name|quote",
        "ann|hi, there",
        "bob|",
    ]


def test_lines_with_numbers(sample, capsys):
    assert main(["lines", str(sample), "-n"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "     1  name,quote"
    assert len(out) == 3


def test_dump_without_color(tmp_path, capsys):
    path = tmp_path / "data.bin"
    path.write_bytes(b"AB")
    assert main(["dump", str(path), "--no-color"]) == 0
    assert capsys.readouterr().out == "00000000  41 42" + " " * 42 + "  |AB|\n00000002\n"


def test_find_first_and_all(sample, capsys):
    assert main(["find", str(sample), "bob"]) == 0
    assert capsys.readouterr().out.strip() == "27"

    assert main(["find", str(sample), "2c", "--hex", "--all"]) == 0
    assert capsys.readouterr().out.split() == ["4", "14", "18", "30"]


def test_find_reports_missing_pattern(sample, capsys):
    assert main(["find", str(sample), "zzz"]) == 1
    assert "no match found" in capsys.readouterr().err


def test_missing_file_is_an_error(tmp_path, capsys):
    assert main(["dump", str(tmp_path / "nope.bin")]) == 1
    assert "Error" in capsys.readouterr().err


@pytest.mark.parametrize(
    "env_level,expected",
    [
        ("debug", logging.DEBUG),
        ("ERROR", logging.ERROR),
        ("basic_format", logging.WARNING),
        ("no_such_level", logging.WARNING),
    ],
)
def test_configure_logging_resolves_env_level(monkeypatch, env_level, expected):
    seen = {}
    monkeypatch.setenv("STRBUF_LOG_LEVEL", env_level)
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: seen.update(kwargs))

    configure_logging(verbose=False)
    assert seen["level"] == expected


def test_verbose_flag_overrides_env(monkeypatch):
    seen = {}
    monkeypatch.setenv("STRBUF_LOG_LEVEL", "ERROR")
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: seen.update(kwargs))

    configure_logging(verbose=True)
    assert seen["level"] == logging.DEBUG
