# famicore

Building blocks of an 8-bit home console emulator, written in plain Python
with no dependencies outside the standard library.

- **Cartridges** (`famicore.cartridge`)
  - `header.CartridgeHeader` parses the 16-byte iNES header: page counts,
    mapper number, `Mirroring`, and the byte ranges of PRG-ROM and CHR-ROM.
  - `pager.Pager` gives banked access to a memory region through `Page`
    selectors (`Page.first`, `Page.last`, `Page.number`, `Page.from_end`) of a
    `PageSize`; out-of-range pages or offsets raise `PagerError`.
  - `data.CartridgeData.from_bytes` splits an iNES image into PRG-ROM,
    PRG-RAM, CHR-ROM and CHR-RAM pagers.
  - Mappers behind the common `mapper.Mapper` interface:
    `mapper0.Mapper0` (NROM), `mapper2.Mapper2` (UxROM),
    `mapper3.Mapper3` (CNROM) and `mapper4.Mapper4` (MMC3, with scanline IRQ).
    A CPU read the board does not decode raises `mapper.UnmappedAddressError`.
- **Controller** (`famicore.controller`) — the serial shift-register joypad.
- **Sound** (`famicore.apu`) — the pieces of the audio unit: `pulse.PulseChannel`,
  `triangle.TriangleChannel`, `noise.NoiseChannel`, together with
  `envelope.Envelope`, `sweep.Sweep`, `length_counter.LengthCounter`,
  `sequencer.Sequencer`, `frame_counter.FrameCounter` and
  `filter.FirstOrderFilter`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Loading a cartridge

There is no single front object that picks a mapper from the header; choose
the mapper class from `header.mapper_number` yourself:

```python
from famicore.cartridge.data import CartridgeData
from famicore.cartridge.mapper import UnmappedAddressError
from famicore.cartridge.mapper0 import Mapper0
from famicore.cartridge.mapper2 import Mapper2
from famicore.cartridge.mapper3 import Mapper3
from famicore.cartridge.mapper4 import Mapper4

MAPPERS = {0: Mapper0, 2: Mapper2, 3: Mapper3, 4: Mapper4}

with open("game.nes", "rb") as rom:
    data = CartridgeData.from_bytes(rom.read())

mapper = MAPPERS[data.header.mapper_number](data)

print(mapper.mirroring())               # Mirroring.VERTICAL / Mirroring.HORIZONTAL
reset_low = mapper.read_prg_byte(0xFFFC)
tile_byte = mapper.read_chr_byte(0x0000)

try:
    mapper.read_prg_byte(0x4020)
except UnmappedAddressError:
    pass                                # nothing on the cartridge answers here
```

`CartridgeData.from_bytes` raises `ValueError` when the image is shorter than
its header says. `Mapper4` counts scanlines through `signal_scanline()` and
reports its interrupt with `irq_flag()`; the other mappers always report
`False`.

## Reading the controller

```python
from famicore.controller import Button, Controller

pad = Controller()
pad.set_button_state(Button.A, True)
pad.write_register(1)     # strobe on: latch button states
pad.write_register(0)     # strobe off: shift them out one by one
bits = [pad.read_register() & 1 for _ in range(8)]   # A, B, Select, Start, Up, Down, Left, Right
```

After eight reads every further read returns 1 in bit 0.

## Driving a sound channel

Each channel takes register writes by CPU address, is stepped by its timer and
by the frame counter, and yields a raw 4-bit sample:

```python
from famicore.apu.frame_counter import FrameCounter, FrameResult
from famicore.apu.pulse import PulseChannel
from famicore.apu.sweep import SweepNegationMode

pulse = PulseChannel(SweepNegationMode.ONES_COMPLEMENT)
pulse.set_enabled(True)
pulse.write_register(0x4000, 0b1011_1111)   # 50% duty, halt length, constant volume 15
pulse.write_register(0x4002, 0xFD)          # period low
pulse.write_register(0x4003, 0x00)          # period high, load length
pulse.update_pending_length_counter()

frames = FrameCounter()
samples = []
for cycle in range(29_780):
    if cycle % 2 == 1:
        pulse.tick_sequencer()
    result = frames.tick()
    if result is not FrameResult.NONE:
        pulse.tick_quarter_frame()
    if result is FrameResult.HALF:
        pulse.tick_half_frame()
    samples.append(pulse.sample())          # 0..15
```

`FirstOrderFilter.high_pass(sample_rate, cutoff)` and
`FirstOrderFilter.low_pass(sample_rate, cutoff)` build filters whose `tick(x)`
returns the next filtered value.

## What the package does not do

- It has no MMC1 (mapper 1) board; an image whose header names mapper 1 or any
  number other than 0, 2, 3 or 4 has no mapper class here.
- It has no delta-modulation (DMC) sample channel.
- It has no complete audio unit: there is no `$4015` status register, no
  channel mixer and no sample buffer. The channels, frame counter and filters
  must be wired together by the caller, as above.
- There is no CPU, PPU, memory bus or command-line program.