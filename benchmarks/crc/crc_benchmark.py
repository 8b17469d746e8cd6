#!/usr/bin/env python3
import random
import timeit

import fastcrc
from crcmod import mkCrcFun

from bitcrc import bits_from_bytes, crc16_ccitt

#: CRC-16/XMODEM, which is the CRC-16-CCITT polynomial with a cleared initial value
CRC16_XMODEM_FUNC = mkCrcFun(0x11021, initCrc=0, rev=False, xorOut=0)


def crc_bitcrc_lib(bits: list[int]) -> int:
    return crc16_ccitt(bits)


def crc_crcmod_lib(data: bytes) -> int:
    return CRC16_XMODEM_FUNC(data)


def crc_fastcrc_lib(data: bytes) -> int:
    return fastcrc.crc16.xmodem(data)


data_blob = random.randbytes(1024)
bit_blob = bits_from_bytes(data_blob)
assert crc_bitcrc_lib(bit_blob) == crc_crcmod_lib(data_blob) == crc_fastcrc_lib(data_blob)
crc_bitcrc_time = timeit.timeit(lambda: crc_bitcrc_lib(bit_blob), number=100)
crc_crcmod_time = timeit.timeit(lambda: crc_crcmod_lib(data_blob), number=100)
crc_fastcrc_time = timeit.timeit(lambda: crc_fastcrc_lib(data_blob), number=100)

print(f"bitcrc lib: {crc_bitcrc_time:.6f} seconds")
print(f"crcmod lib: {crc_crcmod_time:.6f} seconds")
print(f"fastcrc lib: {crc_fastcrc_time:.6f} seconds")
