# utils/units.py
from __future__ import annotations

_KM_PER_MILE = 1.609344
_MM_PER_INCH = 25.4
_KPA_PER_PSI = 6.894757
_HPA_PER_INHG = 33.8639


def celsius2fahrenheit(celsius: float) -> float:
    return celsius * 9 / 5 + 32


def fahrenheit2celsius(fahrenheit: float) -> float:
    return (fahrenheit - 32) * 5 / 9


def kmph2mph(kph: float) -> float:
    return kph / _KM_PER_MILE


def mph2kmph(mph: float) -> float:
    return mph * _KM_PER_MILE


def mm2inch(mm: float) -> float:
    return mm / _MM_PER_INCH


def inch2mm(inch: float) -> float:
    return inch * _MM_PER_INCH


def kpa2psi(kpa: float) -> float:
    return kpa / _KPA_PER_PSI


def psi2kpa(psi: float) -> float:
    return psi * _KPA_PER_PSI


def hpa2inhg(hpa: float) -> float:
    return hpa / _HPA_PER_INHG


def inhg2hpa(inhg: float) -> float:
    return inhg * _HPA_PER_INHG
