"""Bootinfo stream decoder.

The stream is a sequence of records, each made of a 2-byte big-endian tag, a
2-byte big-endian total size (header included, multiple of 4) and the payload.
It ends at end of file or at a BI_LAST tag.

Tags with bit 15 set belong to the machine-specific namespace and can only be
resolved once a BI_MACHTYPE record has identified the machine.
"""

import io
import logging
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, Iterator, List, Optional

from m68k_bootinfo.decoding.errors import (
    BootinfoError,
    BootinfoIOError,
    ContentError,
    FramingError,
    ResourceError,
)
from m68k_bootinfo.decoding.machines import MachineDescriptor, find_machine
from m68k_bootinfo.decoding.records import (
    BI_LAST,
    BI_MACHTYPE,
    GENERIC_RECORDS,
    RecordDefinition,
    RecordDictionary,
    TagNamespace,
    namespace_of,
)
from m68k_bootinfo.decoding.types import SemanticType, width_of
from m68k_bootinfo.decoding.values import read_be16, read_be32

logger = logging.getLogger(__name__)

HEADER_SIZE = 4
SIZE_ALIGNMENT = 4


class DecoderPhase(Enum):
    AWAITING_TAG = "awaiting_tag"
    AWAITING_SIZE = "awaiting_size"
    AWAITING_PAYLOAD = "awaiting_payload"
    DONE = "done"
    FAILED = "failed"


@dataclass
class DecoderState:
    """Machine detected so far in the stream."""
    machine_code: Optional[int] = None
    machine_name: str = "0"
    machine: Optional[MachineDescriptor] = None

    @property
    def detected(self) -> bool:
        return self.machine is not None

    @property
    def records(self) -> Optional[RecordDictionary]:
        """Dictionary for machine-specific tags, None if there is none."""
        if self.machine is None:
            return None
        return self.machine.records

    def detect(self, code: int) -> Optional[MachineDescriptor]:
        """Record a BI_MACHTYPE code; unknown codes leave the machine unchanged."""
        self.machine_code = code
        machine = find_machine(code)
        if machine is not None:
            self.machine = machine
            self.machine_name = machine.name
        return machine


@dataclass
class Record:
    """One decoded and classified bootinfo record."""
    tag: int
    raw_size: int
    payload: bytes
    name: str = ""
    semantic_type: SemanticType = SemanticType.UNKNOWN
    description: Optional[str] = None
    definition: Optional[RecordDefinition] = None

    @property
    def size(self) -> int:
        """Payload size, excluding the header."""
        return len(self.payload)

    @property
    def namespace(self) -> TagNamespace:
        return namespace_of(self.tag)

    @property
    def resolved(self) -> bool:
        return self.definition is not None


class BootinfoDecoder:
    """Read records one at a time from a binary stream.

    Any malformed record is fatal: the error propagates and the decoder stays
    in the FAILED phase. There is no resynchronisation.
    """

    def __init__(self, stream: BinaryIO, state: Optional[DecoderState] = None):
        """
        Initialize decoder.

        Args:
            stream: Binary file-like object positioned at the first record.
            state: Machine detection state; a fresh one if omitted.
        """
        self.stream = stream
        self.state = state if state is not None else DecoderState()
        self.phase = DecoderPhase.AWAITING_TAG
        self.offset = 0
        self.count = 0

    def __iter__(self) -> Iterator[Record]:
        while True:
            record = self.read_record()
            if record is None:
                return
            yield record

    def read_record(self) -> Optional[Record]:
        """
        Decode the next record.

        Returns:
            The classified record, or None at end of file or BI_LAST.

        Raises:
            BootinfoError: On any I/O, framing or content fault.
        """
        if self.phase is DecoderPhase.DONE:
            return None
        if self.phase is DecoderPhase.FAILED:
            raise BootinfoError("Bootinfo decoder already failed")

        try:
            record = self._step()
        except BootinfoError as e:
            self.phase = DecoderPhase.FAILED
            logger.debug(f"Decode failed at offset {self.offset}: {e}")
            raise

        if record is None:
            self.phase = DecoderPhase.DONE
            logger.debug(f"End of bootinfo after {self.count} records")
        else:
            self.phase = DecoderPhase.AWAITING_TAG
            self.count += 1
        return record

    def _step(self) -> Optional[Record]:
        self.phase = DecoderPhase.AWAITING_TAG
        buf = self._read(2, allow_eof=True)
        if buf is None:
            return None

        tag = read_be16(buf)
        if tag == BI_LAST:
            return None

        self.phase = DecoderPhase.AWAITING_SIZE
        raw_size = read_be16(self._read(2, tag))
        if raw_size < HEADER_SIZE or raw_size % SIZE_ALIGNMENT:
            raise FramingError(f"Invalid size {raw_size} for tag 0x{tag:04x}", tag)

        self.phase = DecoderPhase.AWAITING_PAYLOAD
        try:
            payload = self._read(raw_size - HEADER_SIZE, tag)
        except MemoryError as e:
            raise ResourceError(f"No memory for record 0x{tag:04x}", tag) from e

        record = self._classify(tag, raw_size, payload)
        self._validate(record)
        logger.debug(f"0x{tag:04x}: {record.name} ({record.semantic_type.value}, {record.size} bytes)")
        return record

    def _read(self, n: int, tag: Optional[int] = None, allow_eof: bool = False) -> Optional[bytes]:
        """Read exactly n bytes; None only if allow_eof and nothing was left."""
        data = bytearray()
        while len(data) < n:
            try:
                chunk = self.stream.read(n - len(data))
            except OSError as e:
                raise BootinfoIOError(f"Cannot read bootinfo: {e}", tag) from e
            if not chunk:
                break
            data.extend(chunk)

        if allow_eof and not data:
            return None
        if len(data) < n:
            if tag is None:
                raise BootinfoIOError("Unexpected end of file")
            raise BootinfoIOError(f"Unexpected end of file in tag 0x{tag:04x}", tag)

        self.offset += n
        return bytes(data)

    def _classify(self, tag: int, raw_size: int, payload: bytes) -> Record:
        record = Record(tag=tag, raw_size=raw_size, payload=payload)

        namespace = namespace_of(tag)
        if namespace is TagNamespace.MACHINE:
            dictionary = self.state.records
            prefix = f"{self.state.machine_name}." if self.state.detected else ""
        else:
            dictionary = GENERIC_RECORDS
            prefix = ""

        if tag == BI_MACHTYPE and len(payload) >= 4:
            code = read_be32(payload)
            machine = self.state.detect(code)
            if machine is not None:
                record.description = machine.name
                logger.debug(f"Detected machine {machine.name} (code {code})")
            else:
                logger.debug(f"Unknown machine type {code}")

        definition = dictionary.resolve(tag) if dictionary is not None else None
        if definition is None:
            record.name = f"{prefix}0x{tag:04x}"
            return record

        record.definition = definition
        record.name = prefix + definition.name
        record.semantic_type = definition.semantic_type

        # Undersized payloads are rejected by _validate
        if definition.table is not None and len(payload) >= 4:
            label = definition.table.lookup(read_be32(payload))
            if label is not None:
                record.description = label

        return record

    @staticmethod
    def _validate(record: Record) -> None:
        if record.semantic_type is SemanticType.STRING:
            if b"\0" not in record.payload:
                raise ContentError(f"Unterminated string for tag {record.name}", record.tag)
            return

        # Larger payloads are accepted; the excess is ignored
        if record.size < width_of(record.semantic_type):
            raise ContentError(f"Unexpected size {record.raw_size} for tag {record.name}", record.tag)


def decode_bytes(data: bytes) -> List[Record]:
    """Decode a complete in-memory bootinfo blob."""
    return list(BootinfoDecoder(io.BytesIO(data)))
