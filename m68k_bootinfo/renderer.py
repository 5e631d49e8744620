"""Render decoded bootinfo records as text lines, dicts or a rich table."""

from typing import Any, Dict, Iterable

from rich.table import Table
from rich.text import Text

from m68k_bootinfo.decoding.decoder import Record
from m68k_bootinfo.decoding.types import SemanticType
from m68k_bootinfo.decoding.values import read_be16, read_be32, read_u8


def _string_value(payload: bytes) -> str:
    """Payload up to the first NUL."""
    return payload.split(b"\0", 1)[0].decode("utf-8", errors="backslashreplace")


def render_record(record: Record) -> str:
    """Format a record as one line of text."""
    name = record.name
    data = record.payload
    rtype = record.semantic_type

    if rtype is SemanticType.U8:
        return f"{name} = {read_u8(data)}"

    elif rtype is SemanticType.BE16:
        return f"{name} = {read_be16(data)}"

    elif rtype is SemanticType.BE32:
        if record.description is not None:
            return f"{name} = {record.description}"
        return f"{name} = 0x{read_be32(data):08x}"

    elif rtype is SemanticType.STRING:
        return f'{name} = "{_string_value(data)}"'

    elif rtype is SemanticType.MEM_INFO:
        return f"{name} of 0x{read_be32(data, 4):08x} bytes at 0x{read_be32(data, 0):08x}"

    elif rtype is SemanticType.CONFIG_DEV:
        return (
            f"{name} board 0x{read_be16(data, 20):04x}:0x{read_u8(data, 17):02x}"
            f" at 0x{read_be32(data, 32):08x}"
        )

    # UNKNOWN and BOARD_INFO carry no decoded value
    return name


def _value(record: Record) -> Any:
    data = record.payload
    rtype = record.semantic_type

    if rtype is SemanticType.U8:
        return read_u8(data)
    elif rtype is SemanticType.BE16:
        return read_be16(data)
    elif rtype is SemanticType.BE32:
        return read_be32(data)
    elif rtype is SemanticType.STRING:
        return _string_value(data)
    elif rtype is SemanticType.MEM_INFO:
        return {
            "address": f"0x{read_be32(data, 0):08x}",
            "size": f"0x{read_be32(data, 4):08x}",
        }
    elif rtype is SemanticType.CONFIG_DEV:
        return {
            "manufacturer": f"0x{read_be16(data, 20):04x}",
            "product": f"0x{read_u8(data, 17):02x}",
            "board_address": f"0x{read_be32(data, 32):08x}",
            "board_size": f"0x{read_be32(data, 36):08x}",
        }
    else:
        return data.hex() if data else None


def _cell(record: Record) -> str:
    """Table cell text for a record's value."""
    rtype = record.semantic_type
    value = _value(record)

    if rtype is SemanticType.BE32:
        if record.description is not None:
            return record.description
        return f"0x{value:08x}"
    elif rtype in (SemanticType.U8, SemanticType.BE16):
        return str(value)
    elif rtype is SemanticType.STRING:
        return f'"{value}"'
    elif rtype is SemanticType.MEM_INFO:
        return f"{value['size']} bytes at {value['address']}"
    elif rtype is SemanticType.CONFIG_DEV:
        return f"board {value['manufacturer']}:{value['product']} at {value['board_address']}"
    return ""


def record_to_dict(record: Record) -> Dict[str, Any]:
    """
    Convert a record to a JSON-serialisable dictionary.

    Args:
        record: Classified record from the decoder.

    Returns:
        Dictionary with tag, name, type, size, value and description.
    """
    return {
        "tag": f"0x{record.tag:04x}",
        "name": record.name,
        "type": record.semantic_type.value,
        "size": record.size,
        "value": _value(record),
        "description": record.description,
    }


def build_table(records: Iterable[Record], title: str = "Bootinfo") -> Table:
    """Build a rich table with one row per record."""
    table = Table(title=title)
    table.add_column("Tag", style="cyan", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Type")
    table.add_column("Size", justify="right")
    table.add_column("Value")

    for record in records:
        table.add_row(
            f"0x{record.tag:04x}",
            Text(record.name),
            record.semantic_type.value,
            str(record.size),
            Text(_cell(record)),
        )

    return table
