from datetime import datetime

import pytest

from rflink_checksum.utils import units
from rflink_checksum.utils.timefmt import local_time_str, nice_freq, sample_pos_str, usecs_time_str


def test_temperature_conversions():
    assert units.celsius2fahrenheit(100.0) == pytest.approx(212.0)
    assert units.fahrenheit2celsius(32.0) == pytest.approx(0.0)


@pytest.mark.parametrize(
    "fwd, back, value",
    [
        (units.kmph2mph, units.mph2kmph, 100.0),
        (units.mm2inch, units.inch2mm, 25.4),
        (units.kpa2psi, units.psi2kpa, 101.325),
        (units.hpa2inhg, units.inhg2hpa, 1013.25),
    ],
)
def test_conversions_invert(fwd, back, value):
    assert back(fwd(value)) == pytest.approx(value)


def test_known_conversion_values():
    assert units.mm2inch(25.4) == pytest.approx(1.0)
    assert units.kmph2mph(1.609344) == pytest.approx(1.0)
    assert units.hpa2inhg(1013.25) == pytest.approx(29.92, abs=0.01)
    assert units.kpa2psi(101.325) == pytest.approx(14.696, abs=0.001)


def test_local_time_str_format():
    ts = datetime(2024, 3, 5, 6, 7, 8).timestamp()
    assert local_time_str(ts) == "2024-03-05 06:07:08"
    assert len(local_time_str()) == len("YYYY-MM-DD HH:MM:SS")


def test_usecs_time_str_format():
    ts = datetime(2024, 3, 5, 6, 7, 8, 250000).timestamp()
    assert usecs_time_str(ts) == "2024-03-05 06:07:08.250000"


def test_sample_pos_str():
    assert sample_pos_str(1.25) == "@1.250000s"


@pytest.mark.parametrize(
    "freq, expected",
    [
        (433.92e6, "433.920MHz"),
        (2.4e9, "2.400GHz"),
        (12.5e3, "12.500kHz"),
        (50.0, "50.000000Hz"),
    ],
)
def test_nice_freq(freq, expected):
    assert nice_freq(freq) == expected
