"""iNES cartridges: header, banked memory and mappers 0, 2, 3 and 4."""