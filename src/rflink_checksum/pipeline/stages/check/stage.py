"""
Check-value stage: a thin usage example of the protocol primitives.

It only appends or verifies a trailing CRC/digest/sum over an opaque byte
body. It knows nothing about any sensor protocol: no field parsing, no
sync search, no decoding. Protocol decoders live outside this package.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import importlib
import logging
import pkgutil

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    """
    Check stage config.

    module: check module name (e.g. "crc", "lfsr8", "xor8", "add8")
    module_cfg: instance of that module's Config (or None -> defaults)
    byteorder: byte order of the appended check value ("big" or "little")
    """
    module: str = "crc"
    module_cfg: Any = None
    byteorder: str = "big"


def available_modules() -> list[str]:
    """
    Enumerate available check modules under pipeline/stages/check/modules.
    """
    pkg = importlib.import_module(f"{__package__}.modules")
    names = [m.name for m in pkgutil.iter_modules(pkg.__path__)]
    return sorted([n for n in names if not n.startswith("_")])


def _import_check_module(name: str):
    if not isinstance(name, str) or not name:
        raise ValueError("cfg.module must be a non-empty string")
    return importlib.import_module(f"{__package__}.modules.{name}")


def _resolve_module_and_cfg(cfg: Config):
    mod = _import_check_module(cfg.module)

    if not hasattr(mod, "Config"):
        raise AttributeError(f"check module '{cfg.module}' missing Config")
    if not hasattr(mod, "size") or not hasattr(mod, "compute"):
        raise AttributeError(f"check module '{cfg.module}' missing size/compute")

    module_cfg = cfg.module_cfg if cfg.module_cfg is not None else mod.Config()
    log.debug("check module %s resolved with %r", cfg.module, module_cfg)
    return mod, module_cfg


def _get_byteorder(cfg: Config) -> str:
    if cfg.byteorder not in ("big", "little"):
        raise ValueError("cfg.byteorder must be 'big' or 'little'")
    return cfg.byteorder


def tx(data: bytes, *, cfg: Config) -> bytes:
    """
    Stage TX: append the check value to the frame body.
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("tx: data must be bytes-like")
    mod, module_cfg = _resolve_module_and_cfg(cfg)
    byteorder = _get_byteorder(cfg)

    body = bytes(data)
    value = mod.compute(body, cfg=module_cfg)
    return body + value.to_bytes(mod.size(module_cfg), byteorder)


def rx(data: bytes, *, cfg: Config) -> bytes:
    """
    Stage RX: verify and strip the trailing check value.

    Raises ValueError if the frame is shorter than the check value or
    the recomputed value does not match.
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("rx: data must be bytes-like")
    mod, module_cfg = _resolve_module_and_cfg(cfg)
    byteorder = _get_byteorder(cfg)

    b = bytes(data)
    n = mod.size(module_cfg)
    if len(b) < n:
        raise ValueError("rx: frame too short")

    body, trailer = b[:len(b) - n], b[len(b) - n:]
    got = int.from_bytes(trailer, byteorder)
    exp = mod.compute(body, cfg=module_cfg)
    if got != exp:
        log.debug("check %s mismatch: got %#x expected %#x over %d bytes", cfg.module, got, exp, len(body))
        raise ValueError(f"rx: check value mismatch: got {got:#x} expected {exp:#x}")

    return body
