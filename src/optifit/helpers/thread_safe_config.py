import threading
from copy import deepcopy
from dataclasses import asdict
from typing import Generic, TypeVar

T = TypeVar("T")


# ---------- Thread-safe config wrapper ----------
class ThreadSafeConfig(Generic[T]):
    """Lock-guarded holder for a config dataclass shared across threads."""

    def __init__(self, data_obj: T):
        self._lock = threading.Lock()
        self._data = data_obj

    def get(self) -> T:
        with self._lock:
            return deepcopy(self._data)

    def set(self, field: str, value) -> None:
        self.update(**{field: value})

    def update(self, **kwargs) -> None:
        with self._lock:
            for k, v in kwargs.items():
                if not hasattr(self._data, k):
                    raise AttributeError(f"{type(self._data).__name__} has no field '{k}'")
                setattr(self._data, k, v)

    def get_field(self, field: str):
        with self._lock:
            return getattr(self._data, field)

    def get_raw(self) -> T:  # non-deepcopy for internal save use
        with self._lock:
            return self._data

    def asdict(self) -> dict:
        with self._lock:
            return asdict(self._data)
