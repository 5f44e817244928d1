from typing import List, Optional, Sequence, Tuple

import numpy as np


def filter_altitude(altitude_data: Sequence[Optional[float]]) -> List[float]:
    filtered = []
    for alt in altitude_data:
        if alt is None:
            continue
        if alt > 9000 or alt < -500:
            continue
        if filtered and abs(alt - filtered[-1]) > 100:
            continue
        filtered.append(float(alt))
    return filtered


def elevation_change(altitude_data: Sequence[Optional[float]]) -> Tuple[float, float]:
    """Return (gain, loss) in metres, both non-negative."""
    filtered = filter_altitude(altitude_data)
    if len(filtered) < 2:
        return 0.0, 0.0
    d = np.diff(np.asarray(filtered, dtype=float))
    gain = float(d[d > 0].sum())
    loss = float(-d[d < 0].sum())
    return gain, loss
