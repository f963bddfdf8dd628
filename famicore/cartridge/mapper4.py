"""iNES mapper 4 (MMC3)."""

from __future__ import annotations

from .data import CartridgeData
from .header import Mirroring
from .mapper import UnmappedAddressError, _BoardMapper
from .pager import Page, PageSize


class Mapper4(_BoardMapper):
    """Bank switching in 8 KB PRG and 1 KB CHR units, with a scanline IRQ."""

    def __init__(self, data: CartridgeData) -> None:
        super().__init__(data)
        self.registers = [0] * 8
        self.index = 0
        self.prg_mode = False
        self.chr_mode = False
        self.mirroring_mode = Mirroring.HORIZONTAL
        self.irq_counter = 0
        self.irq_period = 0
        self.irq_enabled = False
        self.irq_reset = False
        self.irq_pending = False

    def _prg_page(self, address: int) -> Page:
        second_last = Page.from_end(1, PageSize.EIGHT_KB)
        swappable = Page.number(self.registers[6], PageSize.EIGHT_KB)
        if address <= 0x9FFF:
            return second_last if self.prg_mode else swappable
        if address <= 0xBFFF:
            return Page.number(self.registers[7], PageSize.EIGHT_KB)
        if address <= 0xDFFF:
            return swappable if self.prg_mode else second_last
        return Page.from_end(0, PageSize.EIGHT_KB)

    def read_prg_byte(self, address: int) -> int:
        if self._is_prg_ram(address):
            return self._prg_ram_read(address)
        if 0x8000 <= address <= 0xFFFF:
            return self.data.prg_rom.read(self._prg_page(address), address % 0x2000)
        raise UnmappedAddressError(address)

    def write_prg_byte(self, address: int, value: int) -> None:
        even = address % 2 == 0
        if self._is_prg_ram(address):
            self._prg_ram_write(address, value)
        elif 0x8000 <= address <= 0x9FFF:
            if even:
                self.index = value & 0b111
                self.prg_mode = value & 0b0100_0000 != 0
                self.chr_mode = value & 0b1000_0000 != 0
            else:
                self.registers[self.index] = value
        elif 0xA000 <= address <= 0xBFFF:
            if even:
                self.mirroring_mode = (
                    Mirroring.VERTICAL if value & 1 == 0 else Mirroring.HORIZONTAL
                )
        elif 0xC000 <= address <= 0xDFFF:
            if even:
                self.irq_period = value
            else:
                self.irq_reset = True
        elif 0xE000 <= address <= 0xFFFF:
            if even:
                self.irq_enabled = False
                self.irq_pending = False
            elif address >= 0xF000:
                self.irq_enabled = True

    def read_chr_byte(self, address: int) -> int:
        if not 0x0000 <= address <= 0x1FFF:
            raise UnmappedAddressError(address)
        r = self.registers
        banks = (r[0] & ~1, r[0] | 1, r[1] & ~1, r[1] | 1, r[2], r[3], r[4], r[5])
        slot = address >> 10
        if self.chr_mode:
            slot ^= 4
        return self.data.chr_rom.read(
            Page.number(banks[slot], PageSize.ONE_KB), address % 0x0400
        )

    def write_chr_byte(self, address: int, value: int) -> None:
        """This board ignores pattern-memory writes."""

    def mirroring(self) -> Mirroring:
        return self.mirroring_mode

    def irq_flag(self) -> bool:
        return self.irq_pending

    def signal_scanline(self) -> None:
        if self.irq_counter == 0 or self.irq_reset:
            if self.irq_enabled:
                self.irq_pending = True
            self.irq_counter = self.irq_period
        else:
            self.irq_counter -= 1