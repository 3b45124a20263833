import math
from datetime import datetime, timezone

from utils.constants import AVATAR_COLORS


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def format_distance(meters: float) -> str:
    if meters < 100:
        return f"{_round_half_up(meters)}m away"
    if meters < 1000:
        return f"{_round_half_up(meters / 10) * 10}m away"
    if meters < 10000:
        return f"{_round_half_up(meters / 100) / 10:.1f}km away"
    return f"{_round_half_up(meters / 1000)}km away"


def format_radius(meters: float) -> str:
    if meters < 1000:
        return f"{int(meters)}m"
    return f"{meters / 1000:g}km"


def time_ago(created_at: datetime, now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    mins = int((now - created_at).total_seconds() // 60)
    if mins < 1:
        return "just now"
    if mins < 60:
        return f"{mins}m ago"
    hrs = mins // 60
    if hrs < 24:
        return f"{hrs}h ago"
    return f"{hrs // 24}d ago"


def avatar_color(name: str) -> str:
    """Stable color for a username, matching the palette used on map pins."""
    h = 0
    for ch in name:
        # 32-bit signed wraparound
        h = (ord(ch) + ((h << 5) - h)) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return AVATAR_COLORS[abs(h) % len(AVATAR_COLORS)]
