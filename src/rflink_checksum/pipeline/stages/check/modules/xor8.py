from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rflink_checksum.protocol.bytesum import xor_bytes


@dataclass(frozen=True)
class Config:
    """XOR of all body bytes. No parameters."""


def size(cfg: Any) -> int:
    return 1


def compute(data: bytes, *, cfg: Any) -> int:
    return xor_bytes(data)
