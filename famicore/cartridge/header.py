"""The 16-byte iNES cartridge header."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

HEADER_SIZE = 16
MAGIC = b"NES\x1a"

PRG_ROM_PAGE_SIZE = 0x4000
PRG_RAM_PAGE_SIZE = 0x2000
CHR_ROM_PAGE_SIZE = 0x2000
CHR_RAM_PAGE_SIZE = 0x2000


class Mirroring(Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    NONE = "none"


@dataclass(frozen=True)
class CartridgeHeader:
    mapper_number: int
    mirroring: Mirroring
    prg_rom_pages: int
    prg_ram_pages: int
    chr_rom_pages: int
    preamble: bool

    @classmethod
    def from_bytes(cls, data: bytes | bytearray) -> CartridgeHeader:
        if len(data) < HEADER_SIZE:
            raise ValueError(
                f"cartridge header needs {HEADER_SIZE} bytes, got {len(data)}"
            )
        return cls(
            preamble=bytes(data[0:4]) == MAGIC,
            mirroring=Mirroring.HORIZONTAL if data[6] & 1 == 0 else Mirroring.VERTICAL,
            prg_rom_pages=data[4],
            chr_rom_pages=data[5],
            prg_ram_pages=data[8] or 1,
            mapper_number=(data[6] >> 4) | (data[7] & 0xF0),
        )

    def prg_rom_range(self) -> range:
        return range(HEADER_SIZE, HEADER_SIZE + self.prg_rom_bytes())

    def chr_rom_range(self) -> range:
        start = self.prg_rom_range().stop
        return range(start, start + self.chr_rom_bytes())

    def prg_rom_bytes(self) -> int:
        return self.prg_rom_pages * PRG_ROM_PAGE_SIZE

    def prg_ram_bytes(self) -> int:
        return self.prg_ram_pages * PRG_RAM_PAGE_SIZE

    def chr_rom_bytes(self) -> int:
        return self.chr_rom_pages * CHR_ROM_PAGE_SIZE

    def chr_ram_bytes(self) -> int:
        return CHR_RAM_PAGE_SIZE if self.chr_rom_pages == 0 else 0