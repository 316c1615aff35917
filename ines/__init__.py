"""
iNES ROM toolkit.

Reads iNES cartridge images into their header, PRG ROM and CHR ROM, and
synthesizes minimal mapper 0 ROMs.
"""
