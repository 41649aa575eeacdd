from __future__ import annotations

import time
from collections.abc import Callable, Iterable


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def next_timestamp_id(existing: Iterable[int], clock: Callable[[], int] = _now_ms) -> int:
    """Return a millisecond timestamp id, bumped past any id already taken."""
    taken = set(existing)
    candidate = clock()
    while candidate in taken:
        candidate += 1
    return candidate
