import pytest

from famicore.cartridge.data import CartridgeData
from famicore.cartridge.header import Mirroring
from famicore.cartridge.mapper import UnmappedAddressError
from famicore.cartridge.mapper0 import Mapper0


def build(prg_pages=2, chr_pages=1, flags6=0):
    header = b"NES\x1a" + bytes([prg_pages, chr_pages, flags6, 0, 1]).ljust(12, b"\x00")
    prg = bytes((i * 7 + i // 0x4000) & 0xFF for i in range(prg_pages * 0x4000))
    chr_rom = bytes((i * 3 + 1) & 0xFF for i in range(chr_pages * 0x2000))
    return Mapper0(CartridgeData.from_bytes(header + prg + chr_rom)), prg, chr_rom


@pytest.fixture
def nrom():
    return build()


@pytest.mark.parametrize("offset", [0, 1, 0x123, 0x3FFF])
def test_prg_rom_two_banks(nrom, offset):
    mapper, prg, _ = nrom
    assert mapper.read_prg_byte(0x8000 + offset) == prg[offset]
    assert mapper.read_prg_byte(0xC000 + offset) == prg[0x4000 + offset]


@pytest.mark.parametrize("offset", [0, 0x42, 0x3FFF])
def test_prg_rom_single_bank_is_mirrored(offset):
    mapper, prg, _ = build(prg_pages=1)
    assert mapper.read_prg_byte(0xC000 + offset) == mapper.read_prg_byte(0x8000 + offset)
    assert mapper.read_prg_byte(0x8000 + offset) == prg[offset]


@pytest.mark.parametrize("address, value", [(0x6001, 0xFA), (0x7FFF, 0x11)])
def test_prg_ram_round_trip(nrom, address, value):
    mapper = nrom[0]
    mapper.write_prg_byte(address, value)
    assert mapper.read_prg_byte(address) == value


def test_writes_to_rom_ignored(nrom):
    mapper, prg, _ = nrom
    mapper.write_prg_byte(0x8000, (prg[0] + 1) & 0xFF)
    mapper.write_prg_byte(0x5000, 0xFF)
    assert mapper.read_prg_byte(0x8000) == prg[0]


def test_unmapped_read(nrom):
    with pytest.raises(UnmappedAddressError) as info:
        nrom[0].read_prg_byte(0x5000)
    assert info.value.address == 0x5000


def test_chr_rom_read_only(nrom):
    mapper, _, chr_rom = nrom
    assert mapper.read_chr_byte(0x0010) == chr_rom[0x10]
    mapper.write_chr_byte(0x0010, (chr_rom[0x10] + 1) & 0xFF)
    assert mapper.read_chr_byte(0x0010) == chr_rom[0x10]


def test_chr_ram_round_trip():
    mapper = build(chr_pages=0)[0]
    written = {address: address & 0xFF for address in (0, 0x1234, 0x1FFF)}
    for address, value in written.items():
        mapper.write_chr_byte(address, value)
    assert {address: mapper.read_chr_byte(address) for address in written} == written


@pytest.mark.parametrize("flags6, expected", [(0, Mirroring.HORIZONTAL), (1, Mirroring.VERTICAL)])
def test_mirroring_from_header(flags6, expected):
    assert build(flags6=flags6)[0].mirroring() == expected