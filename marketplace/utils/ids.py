# marketplace/utils/ids.py
import threading
import time
from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class IdGenerator:
    """
    Id oparte na czasie (ms od epoki), jak w prototypie.
    Dwa wywolania w tej samej milisekundzie nie moga dac tego samego id,
    wiec kolejne id jest zawsze wieksze od poprzedniego.
    """

    def __init__(self, clock=time.time_ns):
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            candidate = self._clock() // 1_000_000
            if candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
            return str(candidate)
