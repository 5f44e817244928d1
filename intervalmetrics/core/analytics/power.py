from collections import deque
from typing import Optional, Sequence

import numpy as np


def rolling_mean(powers: Sequence[Optional[float]], window: int = 30) -> np.ndarray:
    """O(n) rolling average; missing samples count as zero."""
    q = deque()
    s = 0.0
    out = np.zeros(len(powers), dtype=float)
    for i, p in enumerate(powers):
        v = float(p or 0)
        q.append(v)
        s += v
        if len(q) > window:
            s -= q.popleft()
        out[i] = s / len(q)
    return out


def normalized_power_from_rolling(rolling: Sequence[float]) -> float:
    """Fourth-root of the mean fourth power of an already rolled power series."""
    arr = np.asarray(rolling, dtype=float)
    arr = arr[np.isfinite(arr)]
    if not arr.size:
        return 0.0
    return float(np.mean(arr ** 4) ** 0.25)


def normalized_power(powers: Sequence[Optional[float]], window: int = 30) -> float:
    if not len(powers):
        return 0.0
    return normalized_power_from_rolling(rolling_mean(powers, window))


def intensity_factor(np_watts: float, ftp: Optional[float]) -> Optional[float]:
    if not ftp or ftp <= 0:
        return None
    return np_watts / ftp


def training_stress(duration_seconds: float, np_watts: float, ftp: Optional[float]) -> Optional[float]:
    """TSS = (sec x NP x IF) / (FTP x 3600) x 100"""
    if not ftp or ftp <= 0 or duration_seconds <= 0:
        return None
    if_ = np_watts / ftp
    return (duration_seconds * np_watts * if_) / (ftp * 3600.0) * 100.0


def variability_index(np_watts: float, avg_watts: float) -> Optional[float]:
    if not avg_watts or avg_watts <= 0:
        return None
    return np_watts / avg_watts
