# protocol/span.py
from __future__ import annotations

from typing import Iterable, Optional, Union

ByteSource = Union[bytes, bytearray, memoryview, Iterable[int]]


def byte_span(message: ByteSource, nbytes: Optional[int] = None) -> bytes:
    """
    Bounded read-only view over the first `nbytes` bytes of `message`.

    nbytes=None means the whole message. Asking for more bytes than the
    message holds raises ValueError instead of reading past the end.
    """
    if isinstance(message, (str, int)):
        raise TypeError("message must be bytes-like or a sequence of ints")

    try:
        view = memoryview(message)
    except TypeError:
        view = None

    if view is None:
        b = bytes(message)
    else:
        b = _view_to_bytes(view)

    if nbytes is None:
        return b
    if not isinstance(nbytes, int):
        raise TypeError("nbytes must be int")
    if not (0 <= nbytes <= len(b)):
        raise ValueError(f"nbytes out of range [0,{len(b)}]: {nbytes}")
    return b[:nbytes]


_INT_FORMATS = frozenset("bBhHiIlLqQnN")


def _view_to_bytes(view: memoryview) -> bytes:
    # Only unsigned byte buffers are taken as raw memory; wider integer
    # items (numpy int64, array('H'), ...) are one byte value per element.
    if view.ndim != 1:
        raise TypeError(f"message buffer must be 1-D, got ndim={view.ndim}")
    fmt = view.format.lstrip("@=<>!")
    if fmt in ("B", "c"):
        return view.tobytes()
    if fmt not in _INT_FORMATS:
        raise TypeError(f"message buffer must hold integers, got format {view.format!r}")
    return bytes(view.tolist())


def check_width(name: str, value: int, width: int) -> int:
    if not isinstance(value, int):
        raise TypeError(f"{name} must be int")
    if not (0 <= value < (1 << width)):
        raise ValueError(f"{name} must be a {width}-bit value, got {value:#x}")
    return value
