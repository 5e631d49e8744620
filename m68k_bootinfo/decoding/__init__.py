"""Bootinfo record decoding."""

from m68k_bootinfo.decoding.decoder import (
    BootinfoDecoder,
    DecoderPhase,
    DecoderState,
    Record,
    decode_bytes,
)
from m68k_bootinfo.decoding.errors import (
    BootinfoError,
    BootinfoIOError,
    ContentError,
    FramingError,
    ResourceError,
)
from m68k_bootinfo.decoding.types import SemanticType, width_of

__all__ = [
    "BootinfoDecoder",
    "BootinfoError",
    "BootinfoIOError",
    "ContentError",
    "DecoderPhase",
    "DecoderState",
    "FramingError",
    "Record",
    "ResourceError",
    "SemanticType",
    "decode_bytes",
    "width_of",
]
