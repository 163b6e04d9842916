# utils/timefmt.py
from __future__ import annotations

from datetime import datetime
from typing import Optional


def local_time_str(time_secs: float = 0) -> str:
    """
    Printable timestamp in local time: "YYYY-MM-DD HH:MM:SS".
    time_secs=0 means now, otherwise seconds since the epoch.
    """
    dt = datetime.now() if not time_secs else datetime.fromtimestamp(time_secs)
    return dt.strftime("%Y-%m-%d %H:%M:%S")


def usecs_time_str(ts: Optional[float] = None) -> str:
    """
    Printable timestamp in local time with microseconds:
    "YYYY-MM-DD HH:MM:SS.ffffff". ts=None means now.
    """
    dt = datetime.now() if ts is None else datetime.fromtimestamp(ts)
    return dt.strftime("%Y-%m-%d %H:%M:%S.%f")


def sample_pos_str(sample_file_pos: float) -> str:
    """Printable sample position, e.g. "@1.250000s"."""
    return f"@{sample_file_pos:f}s"


def nice_freq(freq: float) -> str:
    """Printable frequency, e.g. 433.92e6 -> "433.920MHz"."""
    if freq >= 1e9:
        return f"{freq / 1e9:.3f}GHz"
    if freq >= 1e6:
        return f"{freq / 1e6:.3f}MHz"
    if freq >= 1e3:
        return f"{freq / 1e3:.3f}kHz"
    return f"{freq:f}Hz"
