"""iNES mapper 0 (NROM)."""

from __future__ import annotations

from .data import CartridgeData
from .header import Mirroring
from .mapper import _BoardMapper
from .pager import Page, PageSize


class Mapper0(_BoardMapper):
    """Fixed PRG-ROM, optional PRG-RAM and 8 KB of CHR-ROM or CHR-RAM."""

    def __init__(self, data: CartridgeData) -> None:
        super().__init__(data)

    def read_prg_byte(self, address: int) -> int:
        if self._is_prg_ram(address):
            return self._prg_ram_read(address)
        return self._read_prg_rom(address, Page.first(PageSize.SIXTEEN_KB))

    def write_prg_byte(self, address: int, value: int) -> None:
        if self._is_prg_ram(address):
            self._prg_ram_write(address, value)

    def read_chr_byte(self, address: int) -> int:
        return self._read_chr_window(address)

    def write_chr_byte(self, address: int, value: int) -> None:
        self._write_chr_window(address, value)

    def mirroring(self) -> Mirroring:
        return self._header_mirroring()