#!/usr/bin/env python3
"""Test the m68k-bootinfo command line."""

import json
import logging
import struct

import pytest
from click.testing import CliRunner

from m68k_bootinfo import __version__
from m68k_bootinfo.cli import cli


def tlv(tag: int, payload: bytes = b"") -> bytes:
    payload += b"\0" * (-len(payload) % 4)
    return struct.pack(">HH", tag, len(payload) + 4) + payload


SAMPLE = (
    tlv(0x0001, struct.pack(">I", 1))
    + tlv(0x0002, struct.pack(">I", 4))
    + tlv(0x0005, struct.pack(">II", 0x08000000, 0x04000000))
    + tlv(0x8000, struct.pack(">I", 11))
    + tlv(0x0007, b"root=/dev/sda1\0")
    + struct.pack(">H", 0)
)

SAMPLE_LINES = [
    "machtype = amiga",
    "cputype = 68040",
    "memchunk of 0x04000000 bytes at 0x08000000",
    "amiga.model = A4000",
    'command_line = "root=/dev/sda1"',
]


@pytest.fixture(autouse=True)
def release_log_handlers():
    """Drop handlers bound to the runner's streams once a test is done."""
    yield
    logger = logging.getLogger("m68k_bootinfo")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def run(tmp_path, data, *args):
    """Run the command on `data` with an isolated (absent) config file."""
    path = tmp_path / "bootinfo"
    path.write_bytes(data)
    runner = CliRunner()
    return runner.invoke(
        cli, ["--config", str(tmp_path / "absent.ini"), "-f", str(path), *args]
    )


def test_text_output(tmp_path):
    result = run(tmp_path, SAMPLE)

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == SAMPLE_LINES


def test_long_file_option(tmp_path):
    path = tmp_path / "bootinfo"
    path.write_bytes(SAMPLE)
    result = CliRunner().invoke(cli, ["--config", str(tmp_path / "absent.ini"), "--file", str(path)])

    assert result.exit_code == 0
    assert result.output.splitlines()[0] == "machtype = amiga"


def test_help_exits_with_failure():
    for flag in ("-h", "--help"):
        result = CliRunner().invoke(cli, [flag])
        assert result.exit_code == 1
        assert "--file" in result.output


def test_unknown_argument():
    result = CliRunner().invoke(cli, ["--bogus"])
    assert result.exit_code != 0
    assert "Usage" in result.output


def test_missing_file_argument():
    result = CliRunner().invoke(cli, ["-f"])
    assert result.exit_code != 0


def test_version():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cannot_open(tmp_path):
    result = CliRunner().invoke(
        cli, ["--config", str(tmp_path / "absent.ini"), "-f", str(tmp_path / "missing")]
    )

    assert result.exit_code == 1
    assert "Cannot open bootinfo for reading" in result.output


def test_framing_error(tmp_path):
    """Records before the fault are printed, then the command fails."""
    data = tlv(0x0001, struct.pack(">I", 1)) + struct.pack(">HH", 0x0002, 6) + b"\0\0"
    result = run(tmp_path, data)

    assert result.exit_code == 1
    assert "machtype = amiga" in result.output
    assert "Invalid size 6 for tag 0x0002" in result.output


def test_content_error(tmp_path):
    data = struct.pack(">HH", 0x0007, 8) + b"abcd"
    result = run(tmp_path, data)

    assert result.exit_code == 1
    assert "Unterminated string for tag command_line" in result.output


def test_json_output(tmp_path):
    result = run(tmp_path, SAMPLE, "--format", "json")

    assert result.exit_code == 0, result.output
    records = json.loads(result.output)
    assert [r["name"] for r in records] == [
        "machtype", "cputype", "memchunk", "amiga.model", "command_line",
    ]
    assert records[3]["description"] == "A4000"


def test_json_output_nothing_on_error(tmp_path):
    data = tlv(0x0001, struct.pack(">I", 1)) + struct.pack(">HH", 0x0002, 2)
    result = run(tmp_path, data, "--format", "json")

    assert result.exit_code == 1
    assert "machtype" not in result.output


def test_table_output(tmp_path):
    result = run(tmp_path, SAMPLE, "--format", "table")

    assert result.exit_code == 0, result.output
    assert "machtype" in result.output
    assert "A4000" in result.output


def test_config_file(tmp_path):
    """Input path and format come from the config file when not given."""
    path = tmp_path / "bootinfo"
    path.write_bytes(SAMPLE)
    config = tmp_path / "config.ini"
    config.write_text(
        "[bootinfo]\n"
        f"file = {path}\n"
        "format = json\n"
        "\n"
        "[logging]\n"
        f"log_dir = {tmp_path / 'logs'}\n"
    )

    result = CliRunner().invoke(cli, ["--config", str(config)])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output)[0]["description"] == "amiga"
    assert (tmp_path / "logs" / "m68k_bootinfo.log").exists()


def test_command_line_overrides_config(tmp_path):
    path = tmp_path / "bootinfo"
    path.write_bytes(SAMPLE)
    config = tmp_path / "config.ini"
    config.write_text(f"[bootinfo]\nfile = {tmp_path / 'missing'}\nformat = json\n")

    result = CliRunner().invoke(cli, ["--config", str(config), "-f", str(path), "--format", "text"])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == SAMPLE_LINES


def test_debug_logging(tmp_path):
    result = run(tmp_path, SAMPLE, "--log-level", "debug")

    assert result.exit_code == 0
    assert "Detected machine amiga" in result.output


def test_malformed_config(tmp_path):
    config = tmp_path / "config.ini"
    config.write_text("no section header\n")

    result = CliRunner().invoke(cli, ["--config", str(config), "-f", str(tmp_path / "bootinfo")])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Cannot read config" in result.output
