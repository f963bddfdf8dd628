"""iNES mapper 3 (CNROM)."""

from __future__ import annotations

from .data import CartridgeData
from .header import Mirroring
from .mapper import _BoardMapper
from .pager import Page, PageSize


class Mapper3(_BoardMapper):
    """Fixed PRG-ROM with a switchable 8 KB CHR-ROM bank."""

    def __init__(self, data: CartridgeData) -> None:
        super().__init__(data)
        self.chr_0 = 0

    def read_prg_byte(self, address: int) -> int:
        return self._read_prg_rom(address, Page.first(PageSize.SIXTEEN_KB))

    def write_prg_byte(self, address: int, value: int) -> None:
        if address >= 0x8000:
            self.chr_0 = value

    def read_chr_byte(self, address: int) -> int:
        return self.data.chr_rom.read(Page.number(self.chr_0, PageSize.EIGHT_KB), address)

    def write_chr_byte(self, address: int, value: int) -> None:
        """CHR-ROM is read-only on this board."""

    def mirroring(self) -> Mirroring:
        return self._header_mirroring()