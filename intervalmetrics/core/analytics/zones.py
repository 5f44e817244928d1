from typing import Callable, List, Optional, Sequence

import numpy as np


def time_in_zones(
    values: Sequence[Optional[float]],
    zone_index: Callable[[Optional[float]], int],
    zone_count: int,
    rec_interval: float,
) -> List[float]:
    """Seconds spent in each zone; values outside every zone are ignored."""
    if zone_count <= 0:
        return []
    idx = np.array([zone_index(v) for v in values], dtype=int)
    idx = idx[(idx >= 0) & (idx < zone_count)]
    counts = np.bincount(idx, minlength=zone_count)
    return [float(c) * rec_interval for c in counts]
