"""Cartridge mappers, joypad and sound channel components of an 8-bit console emulator."""

__version__ = "0.1.0"