"""iNES mapper 2 (UxROM)."""

from __future__ import annotations

from .data import CartridgeData
from .header import Mirroring
from .mapper import UnmappedAddressError, _BoardMapper
from .pager import Page, PageSize


class Mapper2(_BoardMapper):
    """A switchable low 16 KB PRG bank with the last bank fixed."""

    def __init__(self, data: CartridgeData) -> None:
        super().__init__(data)
        self.prg_0 = 0

    def read_prg_byte(self, address: int) -> int:
        return self._read_prg_rom(address, Page.number(self.prg_0, PageSize.SIXTEEN_KB))

    def write_prg_byte(self, address: int, value: int) -> None:
        if not 0x8000 <= address <= 0xFFFF:
            raise UnmappedAddressError(address)
        self.prg_0 = value & 0x0F

    def read_chr_byte(self, address: int) -> int:
        return self._read_chr_window(address)

    def write_chr_byte(self, address: int, value: int) -> None:
        self._write_chr_window(address, value)

    def mirroring(self) -> Mirroring:
        return self._header_mirroring()