"""Derived series computed once on a parent SampleSequence.

np     - rolling mean power over NP_WINDOW seconds (input to normalized power)
work   - cumulative work in kJ up to and including the sample
apower - power adjusted to its sea-level equivalent (Bassett et al., acclimatised)

Slicing copies these values and never calls into this module.
"""
from collections import deque

from ..config import NP_WINDOW
from .models import SampleSequence

# the fitted curve crosses zero near 8634 m
ALTITUDE_CEILING_M = 8000.0


def altitude_power_fraction(alt_m: float) -> float:
    """Fraction of sea-level aerobic power available at the given altitude.

    Altitude is clamped to [0, ALTITUDE_CEILING_M], so the result is always positive.
    """
    h = min(max(0.0, float(alt_m)), ALTITUDE_CEILING_M) / 1000.0
    return (-1.12 * h * h - 1.90 * h + 99.9) / 100.0


def derive_series(samples: SampleSequence, window: int = NP_WINDOW) -> None:
    if not len(samples):
        return
    points = max(1, int(round(window / samples.rec_interval)))
    q = deque()
    s = 0.0
    work = 0.0
    for p in samples:
        v = float(p.watts or 0)
        q.append(v)
        s += v
        if len(q) > points:
            s -= q.popleft()
        p.np = s / len(q)

        work += v * samples.rec_interval / 1000.0
        p.work = work

        if p.watts is None:
            p.apower = None
        elif p.alt is None:
            p.apower = v
        else:
            p.apower = v / altitude_power_fraction(p.alt)
