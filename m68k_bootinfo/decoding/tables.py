"""Lookup tables mapping raw bootinfo codes to descriptive names.

Values follow the Linux uapi headers asm/bootinfo*.h and asm/macintosh.h.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple


@dataclass(frozen=True)
class LookupEntry:
    """One raw code and its label."""
    key: int
    label: str


@dataclass(frozen=True)
class LookupTable:
    """Ordered code-to-label table, searched first match wins."""
    name: str
    entries: Tuple[LookupEntry, ...]

    @classmethod
    def from_pairs(cls, name: str, pairs: Iterable[Tuple[int, str]]) -> "LookupTable":
        return cls(name, tuple(LookupEntry(key, label) for key, label in pairs))

    def lookup(self, key: int) -> Optional[str]:
        """Return the label of the first entry matching `key`, if any."""
        for entry in self.entries:
            if entry.key == key:
                return entry.label
        return None


# CPU, FPU and MMU types (bit masks)
CPU_68020 = 1 << 0
CPU_68030 = 1 << 1
CPU_68040 = 1 << 2
CPU_68060 = 1 << 3
CPU_COLDFIRE = 1 << 4

FPU_68881 = 1 << 0
FPU_68882 = 1 << 1
FPU_68040 = 1 << 2
FPU_68060 = 1 << 3
FPU_SUNFPA = 1 << 4
FPU_COLDFIRE = 1 << 5

MMU_68851 = 1 << 0
MMU_68030 = 1 << 1
MMU_68040 = 1 << 2
MMU_68060 = 1 << 3
MMU_APOLLO = 1 << 4
MMU_SUN3 = 1 << 5
MMU_COLDFIRE = 1 << 6

CPU_TYPES = LookupTable.from_pairs("cputypes", [
    (CPU_68020, "68020"),
    (CPU_68030, "68030"),
    (CPU_68040, "68040"),
    (CPU_68060, "68060"),
    (CPU_COLDFIRE, "COLDFIRE"),
])

FPU_TYPES = LookupTable.from_pairs("fputypes", [
    (0, "NONE"),
    (FPU_68881, "68881"),
    (FPU_68882, "68882"),
    (FPU_68040, "68040"),
    (FPU_68060, "68060"),
    (FPU_SUNFPA, "SUNFPA"),
    (FPU_COLDFIRE, "COLDFIRE"),
])

MMU_TYPES = LookupTable.from_pairs("mmutypes", [
    (0, "NONE"),
    (MMU_68851, "68851"),
    (MMU_68030, "68030"),
    (MMU_68040, "68040"),
    (MMU_68060, "68060"),
    (MMU_SUN3, "SUN3"),
    (MMU_APOLLO, "APOLLO"),
    (MMU_COLDFIRE, "COLDFIRE"),
])

# Amiga
AMIGA_MODELS = LookupTable.from_pairs("amiga_models", [
    (0, "UNKNOWN"),
    (1, "A500"),
    (2, "A500+"),
    (3, "A600"),
    (4, "A1000"),
    (5, "A1200"),
    (6, "A2000"),
    (7, "A2500"),
    (8, "A3000"),
    (9, "A3000T"),
    (10, "A3000+"),
    (11, "A4000"),
    (12, "A4000T"),
    (13, "CDTV"),
    (14, "CD32"),
    (15, "DRACO"),
])

AMIGA_CHIPSETS = LookupTable.from_pairs("amiga_chipsets", [
    (0, "STONEAGE"),
    (1, "OCS"),
    (2, "ECS"),
    (3, "AGA"),
])

# Apollo
APOLLO_MODELS = LookupTable.from_pairs("apollo_models", [
    (0, "UNKNOWN"),
    (1, "DN3000"),
    (2, "DN3010"),
    (3, "DN3500"),
    (4, "DN4000"),
    (5, "DN4500"),
])

# Atari; the machine cookie carries the type in its upper 16 bits
ATARI_MCH_ST = 0
ATARI_MCH_STE = 1
ATARI_MCH_TT = 2
ATARI_MCH_FALCON = 3

ATARI_MCH_COOKIES = LookupTable.from_pairs("atari_mch_cookies", [
    (ATARI_MCH_ST << 16, "ST"),
    (ATARI_MCH_STE << 16, "STE"),
    (ATARI_MCH_TT << 16, "TT"),
    (ATARI_MCH_FALCON << 16, "FALCON"),
])

ATARI_MCH_TYPES = LookupTable.from_pairs("atari_mch_types", [
    (0, "NORMAL"),
    (1, "MEDUSA"),
    (2, "HADES"),
    (3, "AB40"),
])

# HP9000/300
HP300_MODELS = LookupTable.from_pairs("hp300_models", [
    (0, "HP9000/320"),
    (1, "HP9000/330"),
    (2, "HP9000/340"),
    (3, "HP9000/345"),
    (4, "HP9000/350"),
    (5, "HP9000/360"),
    (6, "HP9000/370"),
    (7, "HP9000/375"),
    (8, "HP9000/380"),
    (9, "HP9000/385"),
    (10, "HP9000/400"),
    (11, "HP9000/425T"),
    (12, "HP9000/425S"),
    (13, "HP9000/425E"),
    (14, "HP9000/433T"),
    (15, "HP9000/433S"),
])

# Macintosh (Gestalt machine IDs)
MAC_MODELS = LookupTable.from_pairs("mac_models", [
    (6, "Mac II"),
    (7, "Mac IIX"),
    (8, "Mac IICX"),
    (9, "Mac SE30"),
    (11, "Mac IICI"),
    (13, "Mac IIFX"),
    (18, "Mac IISI"),
    (19, "Mac LC"),
    (20, "Mac Q900"),
    (21, "Mac PB170"),
    (22, "Mac Q700"),
    (23, "Mac CLII"),
    (25, "Mac PB140"),
    (26, "Mac Q950"),
    (27, "Mac LCIII"),
    (29, "Mac PB210"),
    (30, "Mac C650"),
    (32, "Mac PB230"),
    (33, "Mac PB180"),
    (34, "Mac PB160"),
    (35, "Mac Q800"),
    (36, "Mac Q650"),
    (37, "Mac LCII"),
    (38, "Mac PB250"),
    (44, "Mac IIVI"),
    (45, "Mac P600"),
    (48, "Mac IIVX"),
    (49, "Mac CCL"),
    (50, "Mac PB165C"),
    (52, "Mac C610"),
    (53, "Mac Q610"),
    (54, "Mac PB145"),
    (56, "Mac P520"),
    (60, "Mac C660"),
    (62, "Mac P460"),
    (71, "Mac PB180C"),
    (72, "Mac PB520"),
    (77, "Mac PB270C"),
    (78, "Mac Q840"),
    (80, "Mac P550"),
    (83, "Mac CCLII"),
    (84, "Mac PB165"),
    (85, "Mac PB190"),
    (88, "Mac TV"),
    (89, "Mac P475"),
    (90, "Mac P475F"),
    (92, "Mac P575"),
    (94, "Mac Q605"),
    (95, "Mac Q605_ACC"),
    (98, "Mac Q630"),
    (99, "Mac P588"),
    (102, "Mac PB280"),
    (103, "Mac PB280C"),
    (115, "Mac PB150"),
])

# VME boards
VME_TYPES = LookupTable.from_pairs("vme_types", [
    (0x0034, "TP34V"),
    (0x0147, "MVME147"),
    (0x0162, "MVME162"),
    (0x0166, "MVME166"),
    (0x0167, "MVME167"),
    (0x0172, "MVME172"),
    (0x0177, "MVME177"),
    (0x4000, "BVME4000"),
    (0x6000, "BVME6000"),
])
