# protocol/crc_catalogue.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from .crc import BitOrder, crc
from .span import ByteSource

CHECK_INPUT = b"123456789"


@dataclass(frozen=True)
class CrcParams:
    """
    One CRC algorithm in RevEng catalogue terms.

    poly/init are unreflected; bit_order=LSB_FIRST stands for refin=refout=true.
    check: published CRC of b"123456789".
    """
    name: str
    width: int
    poly: int
    init: int = 0
    bit_order: BitOrder = BitOrder.MSB_FIRST
    xorout: int = 0
    check: Optional[int] = None

    def compute(self, message: ByteSource, *, nbytes: Optional[int] = None) -> int:
        value = crc(
            message,
            width=self.width,
            poly=self.poly,
            init=self.init,
            bit_order=self.bit_order,
            nbytes=nbytes,
        )
        return value ^ self.xorout


_MSB = BitOrder.MSB_FIRST
_LSB = BitOrder.LSB_FIRST

_ENTRIES = [
    CrcParams("CRC-4/G-704", 4, 0x3, 0x0, _LSB, 0x0, check=0x7),
    CrcParams("CRC-4/INTERLAKEN", 4, 0x3, 0xF, _MSB, 0xF, check=0xB),
    CrcParams("CRC-7/MMC", 7, 0x09, 0x00, _MSB, 0x00, check=0x75),
    CrcParams("CRC-7/ROHC", 7, 0x4F, 0x7F, _LSB, 0x00, check=0x53),
    CrcParams("CRC-8/SMBUS", 8, 0x07, 0x00, _MSB, 0x00, check=0xF4),
    CrcParams("CRC-8/MAXIM-DOW", 8, 0x31, 0x00, _LSB, 0x00, check=0xA1),
    CrcParams("CRC-8/NRSC-5", 8, 0x31, 0xFF, _MSB, 0x00, check=0xF7),
    CrcParams("CRC-8/DARC", 8, 0x39, 0x00, _LSB, 0x00, check=0x15),
    CrcParams("CRC-8/CDMA2000", 8, 0x9B, 0xFF, _MSB, 0x00, check=0xDA),
    CrcParams("CRC-16/IBM-3740", 16, 0x1021, 0xFFFF, _MSB, 0x0000, check=0x29B1),
    CrcParams("CRC-16/XMODEM", 16, 0x1021, 0x0000, _MSB, 0x0000, check=0x31C3),
    CrcParams("CRC-16/KERMIT", 16, 0x1021, 0x0000, _LSB, 0x0000, check=0x2189),
    CrcParams("CRC-16/ARC", 16, 0x8005, 0x0000, _LSB, 0x0000, check=0xBB3D),
    CrcParams("CRC-16/MODBUS", 16, 0x8005, 0xFFFF, _LSB, 0x0000, check=0x4B37),
    CrcParams("CRC-16/GENIBUS", 16, 0x1021, 0xFFFF, _MSB, 0xFFFF, check=0xD64E),
    CrcParams("CRC-16/MAXIM-DOW", 16, 0x8005, 0x0000, _LSB, 0xFFFF, check=0x44C2),
]

CATALOGUE: Dict[str, CrcParams] = {p.name: p for p in _ENTRIES}


def available() -> List[str]:
    return sorted(CATALOGUE)


def lookup(name: str) -> CrcParams:
    """Find a catalogue entry by name, ignoring case."""
    if not isinstance(name, str) or not name:
        raise ValueError("CRC algorithm name must be a non-empty string")
    for key, params in CATALOGUE.items():
        if key.upper() == name.upper():
            return params
    raise ValueError(f"unknown CRC algorithm: {name}")
