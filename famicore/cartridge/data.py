"""Cartridge memory regions decoded from an iNES image."""

from __future__ import annotations

from dataclasses import dataclass

from .header import CartridgeHeader
from .pager import Pager


@dataclass
class CartridgeData:
    header: CartridgeHeader
    prg_rom: Pager
    prg_ram: Pager
    chr_rom: Pager
    chr_ram: Pager

    @classmethod
    def from_bytes(cls, data: bytes | bytearray) -> CartridgeData:
        header = CartridgeHeader.from_bytes(data)
        prg_range = header.prg_rom_range()
        chr_range = header.chr_rom_range()
        if len(data) < chr_range.stop:
            raise ValueError(
                f"cartridge image is {len(data)} bytes, header requires {chr_range.stop}"
            )
        return cls(
            header=header,
            prg_rom=Pager(data[prg_range.start:prg_range.stop]),
            chr_rom=Pager(data[chr_range.start:chr_range.stop]),
            prg_ram=Pager(bytes(header.prg_ram_bytes())),
            chr_ram=Pager(bytes(header.chr_ram_bytes())),
        )