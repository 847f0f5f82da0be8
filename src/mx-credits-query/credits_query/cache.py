import threading
from typing import Any, Dict, Protocol, Tuple


class Cacher(Protocol):
    def get(self, key: str) -> Tuple[Any, bool]:
        ...

    def set(self, key: str, value: Any) -> None:
        ...


class MemoryCache:
    """Simple thread-safe in-memory cache keyed by logical name."""

    def __init__(self) -> None:
        self._memory: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Tuple[Any, bool]:
        with self._lock:
            if key in self._memory:
                return self._memory[key], True
            return None, False

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._memory[key] = value

    def __len__(self) -> int:
        with self._lock:
            return len(self._memory)
