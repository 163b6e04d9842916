from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from rflink_checksum.protocol.crc import BitOrder
from rflink_checksum.protocol.crc_catalogue import CrcParams, lookup


@dataclass(frozen=True)
class Config:
    """
    CRC check value.

    algorithm: catalogue name (e.g. "CRC-8/MAXIM-DOW"); when set, the
               explicit parameters below are ignored.
    width/poly/init/bit_order/xorout: custom algorithm, poly and init
               unreflected, bit_order "msb" or "lsb".
    """
    algorithm: Optional[str] = "CRC-16/IBM-3740"
    width: int = 16
    poly: int = 0x1021
    init: int = 0xFFFF
    bit_order: str = "msb"
    xorout: int = 0


def size(cfg: Any) -> int:
    return (_get_params(cfg).width + 7) // 8


def compute(data: bytes, *, cfg: Any) -> int:
    return _get_params(cfg).compute(data)


# ----------------------------
# Internal
# ----------------------------

def _get_params(cfg: Any) -> CrcParams:
    algorithm = getattr(cfg, "algorithm", None)
    if algorithm is not None:
        return lookup(algorithm)

    fields = {}
    for name in ("width", "poly", "init", "xorout"):
        v = getattr(cfg, name, None)
        if v is None:
            raise AttributeError(f"cfg missing required int attribute: {name}")
        if not isinstance(v, int):
            raise TypeError(f"cfg.{name} must be int")
        fields[name] = v

    if not (0 <= fields["xorout"] < (1 << fields["width"])):
        raise ValueError(f"cfg.xorout must be a {fields['width']}-bit value")

    return CrcParams(
        name="custom",
        width=fields["width"],
        poly=fields["poly"],
        init=fields["init"],
        bit_order=BitOrder(getattr(cfg, "bit_order", "msb")),
        xorout=fields["xorout"],
    )
