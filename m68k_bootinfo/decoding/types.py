"""Semantic types of bootinfo record payloads and their fixed widths."""

from enum import Enum
from typing import Dict, Optional


class SemanticType(Enum):
    """How a record payload is interpreted."""
    UNKNOWN = "unknown"
    U8 = "u8"
    BE16 = "be16"
    BE32 = "be32"
    STRING = "string"          # zero-terminated
    MEM_INFO = "mem_info"      # struct mem_info: addr, size
    CONFIG_DEV = "config_dev"  # Amiga struct ConfigDev
    BOARD_INFO = "board_info"  # VME board information


# Minimum payload size per type; None means variable length
TYPE_SIZES: Dict[SemanticType, Optional[int]] = {
    SemanticType.UNKNOWN: 0,
    SemanticType.U8: 1,
    SemanticType.BE16: 2,
    SemanticType.BE32: 4,
    SemanticType.STRING: None,
    SemanticType.MEM_INFO: 8,
    SemanticType.CONFIG_DEV: 68,
    SemanticType.BOARD_INFO: 32,
}


def width_of(semantic_type: SemanticType) -> Optional[int]:
    """Return the fixed payload width of a type, or None for variable length."""
    return TYPE_SIZES[semantic_type]
