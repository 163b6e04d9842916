from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rflink_checksum.protocol.lfsr import lfsr_digest8


@dataclass(frozen=True)
class Config:
    """
    8-bit LFSR Toeplitz digest.

    gen: key stream generator (includes the MSB if the LFSR is rolling)
    key: initial key
    """
    gen: int = 0x98
    key: int = 0xF1


def size(cfg: Any) -> int:
    return 1


def compute(data: bytes, *, cfg: Any) -> int:
    return lfsr_digest8(data, _getattr_int(cfg, "gen"), _getattr_int(cfg, "key"))


def _getattr_int(cfg: Any, name: str) -> int:
    v = getattr(cfg, name, None)
    if v is None:
        raise AttributeError(f"cfg missing required int attribute: {name}")
    if not isinstance(v, int):
        raise TypeError(f"cfg.{name} must be int")
    return v
