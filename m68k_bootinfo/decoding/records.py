"""Record dictionaries: tag -> (name, semantic type, lookup table).

One generic dictionary covers tags valid on every machine; each machine family
may add its own dictionary for tags in the machine-specific namespace.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from m68k_bootinfo.decoding.types import SemanticType
from m68k_bootinfo.decoding import tables


# Generic tags (asm/bootinfo.h)
BI_LAST = 0x0000
BI_MACHTYPE = 0x0001
BI_CPUTYPE = 0x0002
BI_FPUTYPE = 0x0003
BI_MMUTYPE = 0x0004
BI_MEMCHUNK = 0x0005
BI_RAMDISK = 0x0006
BI_COMMAND_LINE = 0x0007

MACHINE_TAG_FLAG = 0x8000

# Amiga tags
BI_AMIGA_MODEL = 0x8000
BI_AMIGA_AUTOCON = 0x8001
BI_AMIGA_CHIP_SIZE = 0x8002
BI_AMIGA_VBLANK = 0x8003
BI_AMIGA_PSFREQ = 0x8004
BI_AMIGA_ECLOCK = 0x8005
BI_AMIGA_CHIPSET = 0x8006
BI_AMIGA_SERPER = 0x8007

# Apollo tags
BI_APOLLO_MODEL = 0x8000

# Atari tags
BI_ATARI_MCH_COOKIE = 0x8000
BI_ATARI_MCH_TYPE = 0x8001

# HP9000/300 tags
BI_HP300_MODEL = 0x8000
BI_HP300_UART_SCODE = 0x8001
BI_HP300_UART_ADDR = 0x8002

# VME tags
BI_VME_TYPE = 0x8000
BI_VME_BRDINFO = 0x8001

# Macintosh tags
BI_MAC_MODEL = 0x8000
BI_MAC_VADDR = 0x8001
BI_MAC_VDEPTH = 0x8002
BI_MAC_VROW = 0x8003
BI_MAC_VDIM = 0x8004
BI_MAC_VLOGICAL = 0x8005
BI_MAC_SCCBASE = 0x8006
BI_MAC_BTIME = 0x8007
BI_MAC_GMTBIAS = 0x8008
BI_MAC_MEMSIZE = 0x8009
BI_MAC_CPUID = 0x800a
BI_MAC_ROMBASE = 0x800b
BI_MAC_VIA1BASE = 0x8010
BI_MAC_VIA2BASE = 0x8011
BI_MAC_VIA2TYPE = 0x8012
BI_MAC_ADBTYPE = 0x8013
BI_MAC_ASCBASE = 0x8014
BI_MAC_SCSI5380 = 0x8015
BI_MAC_SCSIDMA = 0x8016
BI_MAC_SCSI5396 = 0x8017
BI_MAC_IDETYPE = 0x8018
BI_MAC_IDEBASE = 0x8019
BI_MAC_NUBUS = 0x801a
BI_MAC_SLOTMASK = 0x801b
BI_MAC_SCCTYPE = 0x801c
BI_MAC_ETHTYPE = 0x801d
BI_MAC_ETHBASE = 0x801e
BI_MAC_PMU = 0x801f
BI_MAC_IOP_SWIM = 0x8020
BI_MAC_IOP_ADB = 0x8021


class TagNamespace(Enum):
    """Which dictionary a tag is resolved against."""
    GENERIC = "generic"
    MACHINE = "machine"


def namespace_of(tag: int) -> TagNamespace:
    if tag & MACHINE_TAG_FLAG:
        return TagNamespace.MACHINE
    return TagNamespace.GENERIC


@dataclass(frozen=True)
class RecordDefinition:
    """Known record: tag, display name, payload type and optional lookup table."""
    tag: int
    name: str
    semantic_type: SemanticType
    table: Optional[tables.LookupTable] = None


@dataclass(frozen=True)
class RecordDictionary:
    """Ordered record definitions, terminated by a BI_LAST entry."""
    name: str
    definitions: Tuple[RecordDefinition, ...]

    @classmethod
    def build(cls, name: str, *definitions: RecordDefinition) -> "RecordDictionary":
        terminator = RecordDefinition(BI_LAST, "last", SemanticType.UNKNOWN)
        return cls(name, tuple(definitions) + (terminator,))

    def resolve(self, tag: int) -> Optional[RecordDefinition]:
        """Return the first definition for `tag`, or None.

        Scanning stops at the terminator, so BI_LAST itself never resolves.
        """
        for definition in self.definitions:
            if definition.tag == BI_LAST:
                break
            if definition.tag == tag:
                return definition
        return None


GENERIC_RECORDS = RecordDictionary.build(
    "m68k",
    RecordDefinition(BI_MACHTYPE, "machtype", SemanticType.BE32),
    RecordDefinition(BI_CPUTYPE, "cputype", SemanticType.BE32, tables.CPU_TYPES),
    RecordDefinition(BI_FPUTYPE, "fputype", SemanticType.BE32, tables.FPU_TYPES),
    RecordDefinition(BI_MMUTYPE, "mmutype", SemanticType.BE32, tables.MMU_TYPES),
    RecordDefinition(BI_MEMCHUNK, "memchunk", SemanticType.MEM_INFO),
    RecordDefinition(BI_RAMDISK, "ramdisk", SemanticType.MEM_INFO),
    RecordDefinition(BI_COMMAND_LINE, "command_line", SemanticType.STRING),
)

AMIGA_RECORDS = RecordDictionary.build(
    "amiga",
    RecordDefinition(BI_AMIGA_MODEL, "model", SemanticType.BE32, tables.AMIGA_MODELS),
    RecordDefinition(BI_AMIGA_AUTOCON, "autocon", SemanticType.CONFIG_DEV),
    RecordDefinition(BI_AMIGA_CHIP_SIZE, "chip_size", SemanticType.BE32),
    RecordDefinition(BI_AMIGA_VBLANK, "vblank", SemanticType.U8),
    RecordDefinition(BI_AMIGA_PSFREQ, "psfreq", SemanticType.U8),
    RecordDefinition(BI_AMIGA_ECLOCK, "eclock", SemanticType.BE32),
    RecordDefinition(BI_AMIGA_CHIPSET, "chipset", SemanticType.BE32, tables.AMIGA_CHIPSETS),
    RecordDefinition(BI_AMIGA_SERPER, "serper", SemanticType.BE16),
)

APOLLO_RECORDS = RecordDictionary.build(
    "apollo",
    RecordDefinition(BI_APOLLO_MODEL, "model", SemanticType.BE32, tables.APOLLO_MODELS),
)

ATARI_RECORDS = RecordDictionary.build(
    "atari",
    RecordDefinition(BI_ATARI_MCH_COOKIE, "mch_cookie", SemanticType.BE32, tables.ATARI_MCH_COOKIES),
    RecordDefinition(BI_ATARI_MCH_TYPE, "mch_type", SemanticType.BE32, tables.ATARI_MCH_TYPES),
)

HP300_RECORDS = RecordDictionary.build(
    "hp300",
    RecordDefinition(BI_HP300_MODEL, "model", SemanticType.BE32, tables.HP300_MODELS),
    RecordDefinition(BI_HP300_UART_SCODE, "uart_scode", SemanticType.BE32),
    RecordDefinition(BI_HP300_UART_ADDR, "uart_addr", SemanticType.BE32),
)

# All Mac fields besides the model are plain BE32 addresses or codes
_MAC_FIELDS = (
    (BI_MAC_VADDR, "vaddr"),
    (BI_MAC_VDEPTH, "vdepth"),
    (BI_MAC_VROW, "vrow"),
    (BI_MAC_VDIM, "vdim"),
    (BI_MAC_VLOGICAL, "vlogical"),
    (BI_MAC_SCCBASE, "sccbase"),
    (BI_MAC_BTIME, "btime"),
    (BI_MAC_GMTBIAS, "gmtbias"),
    (BI_MAC_MEMSIZE, "memsize"),
    (BI_MAC_CPUID, "cpuid"),
    (BI_MAC_ROMBASE, "rombase"),
    (BI_MAC_VIA1BASE, "via1base"),
    (BI_MAC_VIA2BASE, "via2base"),
    (BI_MAC_VIA2TYPE, "via2type"),
    (BI_MAC_ADBTYPE, "adbtype"),
    (BI_MAC_ASCBASE, "ascbase"),
    (BI_MAC_SCSI5380, "scsi5380"),
    (BI_MAC_SCSIDMA, "scsidma"),
    (BI_MAC_SCSI5396, "scsi5396"),
    (BI_MAC_IDETYPE, "idetype"),
    (BI_MAC_IDEBASE, "idebase"),
    (BI_MAC_NUBUS, "nubus"),
    (BI_MAC_SLOTMASK, "slotmask"),
    (BI_MAC_SCCTYPE, "scctype"),
    (BI_MAC_ETHTYPE, "ethtype"),
    (BI_MAC_ETHBASE, "ethbase"),
    (BI_MAC_PMU, "pmu"),
    (BI_MAC_IOP_SWIM, "iop_swim"),
    (BI_MAC_IOP_ADB, "iop_adb"),
)

MAC_RECORDS = RecordDictionary.build(
    "mac",
    RecordDefinition(BI_MAC_MODEL, "model", SemanticType.BE32, tables.MAC_MODELS),
    *(RecordDefinition(tag, name, SemanticType.BE32) for tag, name in _MAC_FIELDS),
)

VME_RECORDS = RecordDictionary.build(
    "vme",
    RecordDefinition(BI_VME_TYPE, "type", SemanticType.BE32, tables.VME_TYPES),
    RecordDefinition(BI_VME_BRDINFO, "brdinfo", SemanticType.BOARD_INFO),
)
