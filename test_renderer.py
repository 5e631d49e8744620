#!/usr/bin/env python3
"""Test rendering of decoded bootinfo records."""

import json
import struct

from rich.console import Console

from m68k_bootinfo.decoding import decode_bytes
from m68k_bootinfo.renderer import build_table, record_to_dict, render_record

AMIGA = struct.pack(">HHI", 0x0001, 8, 1)


def be16(value: int) -> bytes:
    return struct.pack(">H", value)


def be32(value: int) -> bytes:
    return struct.pack(">I", value)


def tlv(tag: int, payload: bytes = b"") -> bytes:
    payload += b"\0" * (-len(payload) % 4)
    return struct.pack(">HH", tag, len(payload) + 4) + payload


def config_dev(manufacturer: int, product: int, board_addr: int, board_size: int) -> bytes:
    """Amiga struct ConfigDev with only the rendered fields filled in."""
    data = bytearray(68)
    data[17] = product
    data[20:22] = be16(manufacturer)
    data[32:36] = be32(board_addr)
    data[36:40] = be32(board_size)
    return bytes(data)


def lines(data: bytes):
    return [render_record(r) for r in decode_bytes(data)]


def test_render_machtype():
    assert lines(AMIGA) == ["machtype = amiga"]
    assert lines(tlv(0x0001, be32(0x42))) == ["machtype = 0x00000042"]


def test_render_be32_with_and_without_description():
    data = tlv(0x0002, be32(4)) + tlv(0x0002, be32(0x80))
    assert lines(data) == ["cputype = 68040", "cputype = 0x00000080"]


def test_render_memory_range():
    """Size is printed before address."""
    data = tlv(0x0005, be32(0x00100000) + be32(0x00200000))
    assert lines(data) == ["memchunk of 0x00200000 bytes at 0x00100000"]


def test_render_string():
    data = tlv(0x0007, b"root=/dev/sda1 console=ttyS0\0junk")
    assert lines(data) == ['command_line = "root=/dev/sda1 console=ttyS0"']


def test_render_amiga_records():
    data = (
        AMIGA
        + tlv(0x8000, be32(5))
        + tlv(0x8001, config_dev(0x0202, 0x0B, 0x00E90000, 0x00010000))
        + tlv(0x8002, be32(0x00200000))
        + tlv(0x8003, bytes([50]))
        + tlv(0x8004, bytes([60]))
        + tlv(0x8005, be32(709379))
        + tlv(0x8006, be32(3))
        + tlv(0x8007, be16(371))
    )

    assert lines(data) == [
        "machtype = amiga",
        "amiga.model = A1200",
        "amiga.autocon board 0x0202:0x0b at 0x00e90000",
        "amiga.chip_size = 0x00200000",
        "amiga.vblank = 50",
        "amiga.psfreq = 60",
        "amiga.eclock = 0x000ad303",
        "amiga.chipset = AGA",
        "amiga.serper = 371",
    ]
    print("  ✓ Amiga records render")


def test_render_name_only_types():
    data = tlv(0x0042, be32(1)) + tlv(0x0001, be32(8)) + tlv(0x8001, bytes(32))
    assert lines(data) == ["0x0042", "machtype = bvme6000", "bvme6000.brdinfo"]


def test_render_hp300():
    data = tlv(0x0001, be32(9)) + tlv(0x8000, be32(12)) + tlv(0x8002, be32(0xF0C00000))
    assert lines(data) == [
        "machtype = hp300",
        "hp300.model = HP9000/425S",
        "hp300.uart_addr = 0xf0c00000",
    ]


def test_record_to_dict():
    records = decode_bytes(
        AMIGA
        + tlv(0x0005, be32(0x00100000) + be32(0x00200000))
        + tlv(0x8001, config_dev(0x0202, 0x0B, 0x00E90000, 0x00010000))
        + tlv(0x0042)
    )
    machtype, memchunk, autocon, unknown = [record_to_dict(r) for r in records]

    assert machtype == {
        "tag": "0x0001",
        "name": "machtype",
        "type": "be32",
        "size": 4,
        "value": 1,
        "description": "amiga",
    }
    assert memchunk["value"] == {"address": "0x00100000", "size": "0x00200000"}
    assert autocon["value"]["manufacturer"] == "0x0202"
    assert autocon["value"]["product"] == "0x0b"
    assert autocon["value"]["board_size"] == "0x00010000"
    assert unknown["value"] is None

    # Everything must survive a JSON dump
    json.dumps([machtype, memchunk, autocon, unknown])


def test_build_table():
    records = decode_bytes(AMIGA + tlv(0x0007, b"[bracketed]\0"))
    table = build_table(records)

    assert table.row_count == 2

    console = Console(width=120, record=True)
    console.print(table)
    text = console.export_text()
    assert "machtype" in text
    assert "amiga" in text
    assert '"[bracketed]"' in text


def test_build_table_values():
    """Value cells come from the decoded values, not the text lines."""
    records = decode_bytes(
        tlv(0x0005, be32(0x08000000) + be32(0x04000000))
        + tlv(0x0002, be32(0x20))
        + AMIGA
        + tlv(0x8007, be16(372))
        + tlv(0x8001, config_dev(0x0202, 0x45, 0x00E90000, 0x10000))
        + tlv(0x0007, b"root=/dev/sda1\0")
    )
    table = build_table(records)

    cells = [str(cell) for cell in table.columns[4].cells]
    assert cells == [
        "0x04000000 bytes at 0x08000000",
        "0x00000020",
        "amiga",
        "372",
        "board 0x0202:0x45 at 0x00e90000",
        '"root=/dev/sda1"',
    ]
