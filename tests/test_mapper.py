import pytest

from famicore.cartridge.header import Mirroring
from famicore.cartridge.mapper import Mapper, UnmappedAddressError


class FlatMapper(Mapper):
    def __init__(self):
        self.memory = bytearray(0x10000)

    def read_prg_byte(self, address):
        if address < 0x4020:
            raise UnmappedAddressError(address)
        return self.memory[address]

    def write_prg_byte(self, address, value):
        self.memory[address] = value

    def read_chr_byte(self, address):
        return self.memory[address]

    def write_chr_byte(self, address, value):
        self.memory[address] = value

    def mirroring(self):
        return Mirroring.NONE


def test_mapper_is_abstract():
    with pytest.raises(TypeError):
        Mapper()


def test_default_irq_flag_is_clear():
    mapper = FlatMapper()
    assert Mapper.irq_flag(mapper) is False
    Mapper.signal_scanline(mapper)
    assert Mapper.irq_flag(mapper) is False


def test_unmapped_address_error_carries_address():
    error = UnmappedAddressError(0x2002)
    assert error.address == 0x2002
    with pytest.raises(UnmappedAddressError) as info:
        raise UnmappedAddressError(0x4000)
    assert info.value.address == 0x4000


def test_subclass_round_trip():
    mapper = FlatMapper()
    mapper.write_prg_byte(0x8000, 0x5A)
    assert mapper.read_prg_byte(0x8000) == 0x5A
    assert mapper.mirroring() == Mirroring.NONE
    Mapper.signal_scanline(mapper)
    assert mapper.read_prg_byte(0x8000) == 0x5A
    assert Mapper.irq_flag(mapper) is False