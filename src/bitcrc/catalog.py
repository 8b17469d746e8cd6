"""Catalog of standard CRC generator polynomials.

Every entry is available as a :py:class:`Preset` constant and as a plain function taking a bit
stream. Polynomials are given in the normal representation, where the most significant
coefficient ``x**degree`` is implicit:

>>> hex(CRC16_CCITT.polynomial), hex(CRC16_CCITT.generator)
('0x1021', '0x11021')
>>> hex(crc16_ccitt(bits_from_bytes(b"123456789")))
'0x31c3'

All presets use the simplified CRC model of :py:func:`bitcrc.engine.compute`: a cleared initial
register, no reflection and no final XOR. Results therefore match published check values
only for the standards which are specified with exactly those parameters.
"""

from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import TYPE_CHECKING

from bitcrc.bits import bits_from_bytes, bits_from_int
from bitcrc.engine import compute, register_mask, validate_degree

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

#: Conventional check input, fed most significant bit first.
CHECK_INPUT = b"123456789"


@dataclasses.dataclass(frozen=True)
class Preset:
    """Immutable (name, polynomial, degree) parameter set of one standard CRC variant."""

    name: str
    polynomial: int
    degree: int
    usage: str = ""

    def __post_init__(self):
        validate_degree(self.degree)

    @property
    def generator(self) -> int:
        """Full generator polynomial including the implicit ``x**degree`` and ``x**0`` terms."""
        return (1 << self.degree) | (self.polynomial & register_mask(self.degree)) | 1

    def compute(self, bits: Iterable[int]) -> int:
        return compute(bits, self.polynomial, self.degree)

    def check(self) -> int:
        """CRC of the ASCII string ``123456789``."""
        return self.compute(bits_from_bytes(CHECK_INPUT))

    def append(self, bits: Iterable[int]) -> list[int]:
        """Returns the message bits followed by their CRC, most significant bit first."""
        message = list(bits)
        return message + bits_from_int(self.compute(message), self.degree)

    def is_codeword(self, bits: Iterable[int]) -> bool:
        """A message with its CRC appended leaves a cleared register behind."""
        return self.compute(bits) == 0

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(name={self.name!r}, "
            f"polynomial=0x{self.polynomial:x}, degree={self.degree})"
        )


CRC1 = Preset("crc1", 0x1, 1, "parity bit")
CRC4_ITU = Preset("crc4_itu", 0x3, 4, "ITU-T G.704")
CRC5_EPC = Preset("crc5_epc", 0x09, 5, "Gen 2 RFID")
CRC5_ITU = Preset("crc5_itu", 0x15, 5, "ITU-T G.704")
CRC5_USB = Preset("crc5_usb", 0x05, 5, "USB token packets")
CRC6_CDMA2000_A = Preset("crc6_cdma2000_a", 0x27, 6, "CDMA2000")
CRC6_CDMA2000_B = Preset("crc6_cdma2000_b", 0x07, 6, "CDMA2000")
CRC6_ITU = Preset("crc6_itu", 0x03, 6, "ITU-T G.704")
CRC7 = Preset("crc7", 0x09, 7, "ITU-T G.707, ITU-T G.832, MMC, SD")
CRC7_MVB = Preset("crc7_mvb", 0x65, 7, "Train Communication Network, IEC 60870-5")
CRC8 = Preset("crc8", 0xD5, 8, "DVB-S2")
CRC8_CCITT = Preset("crc8_ccitt", 0x07, 8, "ITU-T I.432.1 (ATM HEC), ISDN HEC, SMBus PEC")
CRC8_DALLAS_MAXIM = Preset("crc8_dallas_maxim", 0x31, 8, "1-Wire bus")
CRC8_SAE_J1850 = Preset("crc8_sae_j1850", 0x1D, 8, "AES3, OBD")
CRC8_WCDMA = Preset("crc8_wcdma", 0x9B, 8, "UMTS")
CRC10 = Preset("crc10", 0x233, 10, "ATM, ITU-T I.610")
CRC10_CDMA2000 = Preset("crc10_cdma2000", 0x3D9, 10, "CDMA2000")
CRC11 = Preset("crc11", 0x385, 11, "FlexRay")
CRC12 = Preset("crc12", 0x80F, 12, "telecom systems")
CRC12_CDMA2000 = Preset("crc12_cdma2000", 0xF13, 12, "CDMA2000")
CRC13_BBC = Preset("crc13_bbc", 0x1CF5, 13, "time signal, radio teleswitch")
CRC15_CAN = Preset("crc15_can", 0x4599, 15, "CAN")
CRC15_MPT1327 = Preset("crc15_mpt1327", 0x6815, 15, "MPT 1327")
CRC16_ARINC = Preset("crc16_arinc", 0xA02B, 16, "ACARS")
CRC16_CCITT = Preset(
    "crc16_ccitt", 0x1021, 16, "X.25, V.41, HDLC FCS, XMODEM, Bluetooth, PACTOR, SD, DigRF"
)
CRC16_CDMA2000 = Preset("crc16_cdma2000", 0xC867, 16, "CDMA2000")
CRC16_DECT = Preset("crc16_dect", 0x0589, 16, "DECT")
CRC16_T10_DIF = Preset("crc16_t10_dif", 0x8BB7, 16, "SCSI DIF")
CRC16_DNP = Preset("crc16_dnp", 0x3D65, 16, "DNP, IEC 870, M-Bus")
CRC16_IBM = Preset("crc16_ibm", 0x8005, 16, "Bisync, Modbus, USB, ANSI X3.28")
CRC17_CAN = Preset("crc17_can", 0x1685B, 17, "CAN FD")
CRC21_CAN = Preset("crc21_can", 0x102899, 21, "CAN FD")
CRC24 = Preset("crc24", 0x5D6DCB, 24, "FlexRay")
CRC24_RADIX_64 = Preset("crc24_radix_64", 0x864CFB, 24, "OpenPGP, RTCM104v3")
CRC30 = Preset("crc30", 0x2030B9C7, 30, "CDMA")
CRC32 = Preset("crc32", 0x04C11DB7, 32, "ISO 3309 (HDLC), ANSI X3.66, Ethernet, MPEG-2")
CRC32C = Preset("crc32c", 0x1EDC6F41, 32, "iSCSI, SCTP, Btrfs, ext4")
CRC32K = Preset("crc32k", 0x741B8CD7, 32, "Koopman")
CRC32Q = Preset("crc32q", 0x814141AB, 32, "aviation, AIXM")
CRC40_GSM = Preset("crc40_gsm", 0x0004820009, 40, "GSM control channel")
CRC64_ECMA = Preset("crc64_ecma", 0x42F0E1EBA9EA3693, 64, "ECMA-182")
CRC64_ISO = Preset("crc64_iso", 0x000000000000001B, 64, "ISO 3309 (HDLC), Swiss-Prot/TrEMBL")

PRESETS: Mapping[str, Preset] = MappingProxyType(
    {
        preset.name: preset
        for preset in (
            CRC1,
            CRC4_ITU,
            CRC5_EPC,
            CRC5_ITU,
            CRC5_USB,
            CRC6_CDMA2000_A,
            CRC6_CDMA2000_B,
            CRC6_ITU,
            CRC7,
            CRC7_MVB,
            CRC8,
            CRC8_CCITT,
            CRC8_DALLAS_MAXIM,
            CRC8_SAE_J1850,
            CRC8_WCDMA,
            CRC10,
            CRC10_CDMA2000,
            CRC11,
            CRC12,
            CRC12_CDMA2000,
            CRC13_BBC,
            CRC15_CAN,
            CRC15_MPT1327,
            CRC16_ARINC,
            CRC16_CCITT,
            CRC16_CDMA2000,
            CRC16_DECT,
            CRC16_T10_DIF,
            CRC16_DNP,
            CRC16_IBM,
            CRC17_CAN,
            CRC21_CAN,
            CRC24,
            CRC24_RADIX_64,
            CRC30,
            CRC32,
            CRC32C,
            CRC32K,
            CRC32Q,
            CRC40_GSM,
            CRC64_ECMA,
            CRC64_ISO,
        )
    }
)


def get_preset(name: str) -> Preset:
    """Look up a preset by its function name, for example ``crc16_ccitt``. Catalog style
    spellings like ``CRC-16/CCITT`` or ``CRC-8-Dallas/Maxim`` are accepted as well.

    >>> get_preset("CRC-16/CCITT") is CRC16_CCITT
    True
    """
    key = name.strip().lower()
    for separator in ("-", "/", " "):
        key = key.replace(separator, "_")
    if key.startswith("crc_"):
        key = "crc" + key[4:]
    try:
        return PRESETS[key]
    except KeyError:
        raise ValueError(f"Unknown CRC preset {name!r}") from None


def crc1(bits: Iterable[int]) -> int:
    """Parity of the bit stream, generator ``x + 1``."""
    return compute(bits, CRC1.polynomial, CRC1.degree)


def crc4_itu(bits: Iterable[int]) -> int:
    return compute(bits, CRC4_ITU.polynomial, CRC4_ITU.degree)


def crc5_epc(bits: Iterable[int]) -> int:
    return compute(bits, CRC5_EPC.polynomial, CRC5_EPC.degree)


def crc5_itu(bits: Iterable[int]) -> int:
    return compute(bits, CRC5_ITU.polynomial, CRC5_ITU.degree)


def crc5_usb(bits: Iterable[int]) -> int:
    """USB token packet CRC, generator ``x**5 + x**2 + 1``."""
    return compute(bits, CRC5_USB.polynomial, CRC5_USB.degree)


def crc6_cdma2000_a(bits: Iterable[int]) -> int:
    return compute(bits, CRC6_CDMA2000_A.polynomial, CRC6_CDMA2000_A.degree)


def crc6_cdma2000_b(bits: Iterable[int]) -> int:
    return compute(bits, CRC6_CDMA2000_B.polynomial, CRC6_CDMA2000_B.degree)


def crc6_itu(bits: Iterable[int]) -> int:
    return compute(bits, CRC6_ITU.polynomial, CRC6_ITU.degree)


def crc7(bits: Iterable[int]) -> int:
    """CRC-7 used by MMC and SD cards, generator ``x**7 + x**3 + 1``."""
    return compute(bits, CRC7.polynomial, CRC7.degree)


def crc7_mvb(bits: Iterable[int]) -> int:
    return compute(bits, CRC7_MVB.polynomial, CRC7_MVB.degree)


def crc8(bits: Iterable[int]) -> int:
    """DVB-S2 CRC-8, generator 0xD5."""
    return compute(bits, CRC8.polynomial, CRC8.degree)


def crc8_ccitt(bits: Iterable[int]) -> int:
    """CRC-8 of ATM HEC and SMBus PEC, generator ``x**8 + x**2 + x + 1``."""
    return compute(bits, CRC8_CCITT.polynomial, CRC8_CCITT.degree)


def crc8_dallas_maxim(bits: Iterable[int]) -> int:
    return compute(bits, CRC8_DALLAS_MAXIM.polynomial, CRC8_DALLAS_MAXIM.degree)


def crc8_sae_j1850(bits: Iterable[int]) -> int:
    return compute(bits, CRC8_SAE_J1850.polynomial, CRC8_SAE_J1850.degree)


def crc8_wcdma(bits: Iterable[int]) -> int:
    return compute(bits, CRC8_WCDMA.polynomial, CRC8_WCDMA.degree)


def crc10(bits: Iterable[int]) -> int:
    """ATM CRC-10, generator 0x233."""
    return compute(bits, CRC10.polynomial, CRC10.degree)


def crc10_cdma2000(bits: Iterable[int]) -> int:
    return compute(bits, CRC10_CDMA2000.polynomial, CRC10_CDMA2000.degree)


def crc11(bits: Iterable[int]) -> int:
    """FlexRay header CRC, generator 0x385."""
    return compute(bits, CRC11.polynomial, CRC11.degree)


def crc12(bits: Iterable[int]) -> int:
    return compute(bits, CRC12.polynomial, CRC12.degree)


def crc12_cdma2000(bits: Iterable[int]) -> int:
    return compute(bits, CRC12_CDMA2000.polynomial, CRC12_CDMA2000.degree)


def crc13_bbc(bits: Iterable[int]) -> int:
    return compute(bits, CRC13_BBC.polynomial, CRC13_BBC.degree)


def crc15_can(bits: Iterable[int]) -> int:
    """Classic CAN frame CRC, generator 0x4599."""
    return compute(bits, CRC15_CAN.polynomial, CRC15_CAN.degree)


def crc15_mpt1327(bits: Iterable[int]) -> int:
    return compute(bits, CRC15_MPT1327.polynomial, CRC15_MPT1327.degree)


def crc16_arinc(bits: Iterable[int]) -> int:
    return compute(bits, CRC16_ARINC.polynomial, CRC16_ARINC.degree)


def crc16_ccitt(bits: Iterable[int]) -> int:
    """CRC-16-CCITT, generator ``x**16 + x**12 + x**5 + 1``. With the cleared initial register
    this is the CRC-16/XMODEM algorithm."""
    return compute(bits, CRC16_CCITT.polynomial, CRC16_CCITT.degree)


def crc16_cdma2000(bits: Iterable[int]) -> int:
    return compute(bits, CRC16_CDMA2000.polynomial, CRC16_CDMA2000.degree)


def crc16_dect(bits: Iterable[int]) -> int:
    return compute(bits, CRC16_DECT.polynomial, CRC16_DECT.degree)


def crc16_t10_dif(bits: Iterable[int]) -> int:
    return compute(bits, CRC16_T10_DIF.polynomial, CRC16_T10_DIF.degree)


def crc16_dnp(bits: Iterable[int]) -> int:
    return compute(bits, CRC16_DNP.polynomial, CRC16_DNP.degree)


def crc16_ibm(bits: Iterable[int]) -> int:
    """CRC-16-IBM, generator ``x**16 + x**15 + x**2 + 1``."""
    return compute(bits, CRC16_IBM.polynomial, CRC16_IBM.degree)


def crc17_can(bits: Iterable[int]) -> int:
    """CAN FD CRC for payloads up to 16 bytes."""
    return compute(bits, CRC17_CAN.polynomial, CRC17_CAN.degree)


def crc21_can(bits: Iterable[int]) -> int:
    """CAN FD CRC for payloads larger than 16 bytes."""
    return compute(bits, CRC21_CAN.polynomial, CRC21_CAN.degree)


def crc24(bits: Iterable[int]) -> int:
    """FlexRay frame CRC, generator 0x5D6DCB."""
    return compute(bits, CRC24.polynomial, CRC24.degree)


def crc24_radix_64(bits: Iterable[int]) -> int:
    return compute(bits, CRC24_RADIX_64.polynomial, CRC24_RADIX_64.degree)


def crc30(bits: Iterable[int]) -> int:
    return compute(bits, CRC30.polynomial, CRC30.degree)


def crc32(bits: Iterable[int]) -> int:
    """CRC-32 generator 0x04C11DB7, without the reflection and inversion applied by Ethernet
    and zlib."""
    return compute(bits, CRC32.polynomial, CRC32.degree)


def crc32c(bits: Iterable[int]) -> int:
    """Castagnoli CRC-32C, generator 0x1EDC6F41."""
    return compute(bits, CRC32C.polynomial, CRC32C.degree)


def crc32k(bits: Iterable[int]) -> int:
    """Koopman CRC-32K, generator 0x741B8CD7."""
    return compute(bits, CRC32K.polynomial, CRC32K.degree)


def crc32q(bits: Iterable[int]) -> int:
    return compute(bits, CRC32Q.polynomial, CRC32Q.degree)


def crc40_gsm(bits: Iterable[int]) -> int:
    return compute(bits, CRC40_GSM.polynomial, CRC40_GSM.degree)


def crc64_ecma(bits: Iterable[int]) -> int:
    """ECMA-182 CRC-64, generator 0x42F0E1EBA9EA3693."""
    return compute(bits, CRC64_ECMA.polynomial, CRC64_ECMA.degree)


def crc64_iso(bits: Iterable[int]) -> int:
    """ISO 3309 CRC-64, generator ``x**64 + x**4 + x**3 + x + 1``."""
    return compute(bits, CRC64_ISO.polynomial, CRC64_ISO.degree)


__all__ = ["CHECK_INPUT", "PRESETS", "Preset", "get_preset"]
__all__ += [name.upper() for name in PRESETS]
__all__ += list(PRESETS)
