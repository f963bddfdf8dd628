[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "famicore"
version = "0.1.0"
description = "iNES cartridge mappers, joypad and sound channel components of an 8-bit home console, in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["emulator", "nes", "famicom", "ines", "mapper", "cartridge", "joypad", "chiptune"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["famicore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
