from typing import Optional


def format_time(seconds: float) -> Optional[str]:
    try:
        seconds = int(round(float(seconds)))
        if seconds < 0:
            seconds = 0
        hours = seconds // 3600
        minutes = (seconds % 3600) // 60
        secs = seconds % 60
        return f"{hours}:{minutes:02d}:{secs:02d}"
    except (ValueError, TypeError):
        return None
