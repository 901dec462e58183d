"""Queue-based algorithms."""

from __future__ import annotations

from collections import deque

_WINDOW = 3000


class RecentCounter:
    """Count the requests made within the last 3000 milliseconds."""

    def __init__(self) -> None:
        self._records: deque[int] = deque()

    def ping(self, t: int) -> int:
        """Record a request at time ``t`` and return how many fall in ``[t - 3000, t]``."""
        self._records.append(t)
        while self._records[0] < t - _WINDOW:
            self._records.popleft()
        return len(self._records)


def predict_party_victory(senate: str) -> str:
    """Return the party, ``"Radiant"`` or ``"Dire"``, that wins the senate vote."""
    size = len(senate)
    dire = deque(i for i, c in enumerate(senate) if c == "D")
    radiant = deque(i for i, c in enumerate(senate) if c != "D")
    while dire and radiant:
        d, r = dire.popleft(), radiant.popleft()
        if d < r:
            dire.append(d + size)
        else:
            radiant.append(r + size)
    return "Radiant" if radiant else "Dire"