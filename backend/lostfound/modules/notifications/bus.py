from __future__ import annotations

from queue import Queue, Full
from threading import Lock
from typing import Any, Dict, List, Union

UserKey = Union[int, str]

# Simple in-memory pub/sub for SSE. Not suitable for multi-process deployments.
_subs: dict[UserKey, List[Queue]] = {}
_lock = Lock()


def _key(user_id: UserKey) -> str:
    # Header values arrive as strings, owner ids as ints
    return str(user_id)


def subscribe(user_id: UserKey, maxsize: int = 100) -> Queue:
    q: Queue = Queue(maxsize=maxsize)
    with _lock:
        _subs.setdefault(_key(user_id), []).append(q)
    return q


def unsubscribe(user_id: UserKey, q: Queue) -> None:
    with _lock:
        arr = _subs.get(_key(user_id))
        if not arr:
            return
        try:
            arr.remove(q)
        except ValueError:
            pass
        if not arr:
            _subs.pop(_key(user_id), None)


def subscriber_count(user_id: UserKey) -> int:
    with _lock:
        return len(_subs.get(_key(user_id), []))


def publish(user_id: UserKey, event: Dict[str, Any]) -> int:
    """Best-effort fan-out. Returns how many subscribers received the event."""
    with _lock:
        arr = list(_subs.get(_key(user_id), []))
    delivered = 0
    for q in arr:
        try:
            q.put_nowait(event)
            delivered += 1
        except Full:
            # slow consumer, drop
            pass
    return delivered
