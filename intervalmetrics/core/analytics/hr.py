from typing import List, Optional, Sequence


def filter_hr_smooth(heartrate_data: Sequence[Optional[float]]) -> List[float]:
    """Drop missing, implausible and spiky heart-rate readings."""
    filtered = []
    for hr in heartrate_data:
        if hr is None:
            continue
        if hr < 30 or hr > 220:
            continue
        if filtered and abs(hr - filtered[-1]) > 50:
            continue
        filtered.append(float(hr))
    return filtered


def efficiency_factor(np_watts: float, avg_hr: float) -> Optional[float]:
    if not avg_hr or avg_hr <= 0 or np_watts <= 0:
        return None
    return np_watts / avg_hr
