from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rflink_checksum.protocol.bytesum import add_bytes


@dataclass(frozen=True)
class Config:
    """
    Sum of all body bytes, truncated to one byte.

    offset: added to the sum before truncation (some sensors seed the sum)
    """
    offset: int = 0


def size(cfg: Any) -> int:
    return 1


def compute(data: bytes, *, cfg: Any) -> int:
    offset = getattr(cfg, "offset", None)
    if offset is None:
        raise AttributeError("cfg missing required int attribute: offset")
    if not isinstance(offset, int):
        raise TypeError("cfg.offset must be int")
    return (add_bytes(data) + offset) & 0xFF
