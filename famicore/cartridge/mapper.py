"""The interface every cartridge mapper implements, and logic shared by boards."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .data import CartridgeData
from .header import Mirroring
from .pager import Page, PageSize, Pager

PRG_RAM_START = 0x6000
PRG_RAM_END = 0x7FFF


class UnmappedAddressError(Exception):
    """Raised when an address is not decoded by the cartridge."""

    def __init__(self, address: int) -> None:
        super().__init__(f"address {address:04X} is not mapped")
        self.address = address


class Mapper(ABC):
    """A cartridge board as seen from the CPU and the PPU."""

    scanlines = 0

    def signal_scanline(self) -> None:
        """Notify the mapper of a rendered scanline; by default it is only counted."""
        self.scanlines += 1

    @abstractmethod
    def read_prg_byte(self, address: int) -> int:
        """Read CPU-side memory; raises UnmappedAddressError when not decoded."""

    @abstractmethod
    def write_prg_byte(self, address: int, value: int) -> None:
        """Write CPU-side memory or a mapper register."""

    @abstractmethod
    def read_chr_byte(self, address: int) -> int:
        """Read PPU-side pattern memory."""

    @abstractmethod
    def write_chr_byte(self, address: int, value: int) -> None:
        """Write PPU-side pattern memory where the board allows it."""

    @abstractmethod
    def mirroring(self) -> Mirroring:
        """The current nametable mirroring."""

    def irq_flag(self) -> bool:
        return False


class _BoardMapper(Mapper):
    """Helpers for boards with header mirroring and a single 8 KB CHR window."""

    def __init__(self, data: CartridgeData) -> None:
        self.data = data

    @staticmethod
    def _is_prg_ram(address: int) -> bool:
        return PRG_RAM_START <= address <= PRG_RAM_END

    def _prg_ram_read(self, address: int) -> int:
        return self.data.prg_ram.read(Page.first(PageSize.EIGHT_KB), address - PRG_RAM_START)

    def _prg_ram_write(self, address: int, value: int) -> None:
        self.data.prg_ram.write(Page.first(PageSize.EIGHT_KB), address - PRG_RAM_START, value)

    def _read_prg_rom(self, address: int, low_page: Page) -> int:
        """Read a 16 KB switchable low window and a fixed last 16 KB window."""
        if 0x8000 <= address <= 0xBFFF:
            return self.data.prg_rom.read(low_page, address - 0x8000)
        if 0xC000 <= address <= 0xFFFF:
            return self.data.prg_rom.read(Page.last(PageSize.SIXTEEN_KB), address - 0xC000)
        raise UnmappedAddressError(address)

    def _chr_is_ram(self) -> bool:
        return self.data.header.chr_rom_pages == 0

    def _chr_pager(self) -> Pager:
        return self.data.chr_ram if self._chr_is_ram() else self.data.chr_rom

    def _read_chr_window(self, address: int) -> int:
        return self._chr_pager().read(Page.first(PageSize.EIGHT_KB), address)

    def _write_chr_window(self, address: int, value: int) -> None:
        if self._chr_is_ram():
            self.data.chr_ram.write(Page.first(PageSize.EIGHT_KB), address, value)

    def _header_mirroring(self) -> Mirroring:
        return self.data.header.mirroring