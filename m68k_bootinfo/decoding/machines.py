"""Machine table: BI_MACHTYPE codes and their record dictionaries."""

from dataclasses import dataclass
from typing import Optional, Tuple

from m68k_bootinfo.decoding.records import (
    AMIGA_RECORDS,
    APOLLO_RECORDS,
    ATARI_RECORDS,
    HP300_RECORDS,
    MAC_RECORDS,
    VME_RECORDS,
    RecordDictionary,
)


MACH_AMIGA = 1
MACH_ATARI = 2
MACH_MAC = 3
MACH_APOLLO = 4
MACH_SUN3 = 5
MACH_MVME147 = 6
MACH_MVME16x = 7
MACH_BVME6000 = 8
MACH_HP300 = 9
MACH_Q40 = 10
MACH_SUN3X = 11
MACH_M54XX = 12


@dataclass(frozen=True)
class MachineDescriptor:
    """A machine family and its machine-specific records, if any."""
    code: int
    name: str
    records: Optional[RecordDictionary] = None


MACHINE_TABLE: Tuple[MachineDescriptor, ...] = (
    MachineDescriptor(MACH_AMIGA, "amiga", AMIGA_RECORDS),
    MachineDescriptor(MACH_ATARI, "atari", ATARI_RECORDS),
    MachineDescriptor(MACH_MAC, "mac", MAC_RECORDS),
    MachineDescriptor(MACH_APOLLO, "apollo", APOLLO_RECORDS),
    MachineDescriptor(MACH_SUN3, "sun3"),
    MachineDescriptor(MACH_MVME147, "mvme147", VME_RECORDS),
    MachineDescriptor(MACH_MVME16x, "mvme16X", VME_RECORDS),
    MachineDescriptor(MACH_BVME6000, "bvme6000", VME_RECORDS),
    MachineDescriptor(MACH_HP300, "hp300", HP300_RECORDS),
    MachineDescriptor(MACH_Q40, "q40"),
    MachineDescriptor(MACH_SUN3X, "sun3x"),
    MachineDescriptor(MACH_M54XX, "m54xx"),
)


def find_machine(code: int) -> Optional[MachineDescriptor]:
    """Return the first machine whose code matches, or None."""
    for machine in MACHINE_TABLE:
        if machine.code == code:
            return machine
    return None
