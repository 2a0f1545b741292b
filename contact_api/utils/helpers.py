"""
Helper utility functions
"""
import threading
import time
from datetime import datetime
import pytz


def utc_now() -> datetime:
    """Timezone-aware current time in UTC"""
    return datetime.now(pytz.utc)


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string with offset"""
    return utc_now().isoformat()


class SubmissionIdFactory:
    """
    Hands out time-based submission ids (milliseconds since epoch).

    Ids are strictly increasing within the process: two submissions landing in
    the same millisecond get consecutive values instead of colliding.
    """

    def __init__(self, clock=time.time):
        self._clock = clock
        self._last_id = 0
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            candidate = int(self._clock() * 1000)
            if candidate <= self._last_id:
                candidate = self._last_id + 1
            self._last_id = candidate
            return candidate
