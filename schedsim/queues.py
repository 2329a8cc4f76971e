from collections import deque
from enum import Enum
from typing import Iterator, Optional


class Tier(Enum):
    """Queue level a process is dispatched from (MLFQ only)."""
    HIGH = "high"
    LOW = "low"


class ProcessQueue:
    """FIFO waiting line holding pids, never Process copies.

    The pid arena in SimulationState stays the single owner of
    remaining_time; a queue only records who waits and in which order.
    """

    def __init__(self, name: str = "ready"):
        self.name = name
        self._pids = deque()
        self._members = set()

    def add_to_end(self, pid: int) -> None:
        if pid in self._members:
            raise ValueError(f"pid {pid} is already in the {self.name} queue")
        self._pids.append(pid)
        self._members.add(pid)

    def remove_from_head(self) -> Optional[int]:
        if not self._pids:
            return None
        pid = self._pids.popleft()
        self._members.discard(pid)
        return pid

    def is_empty(self) -> bool:
        return not self._pids

    def __contains__(self, pid) -> bool:
        return pid in self._members

    def __len__(self) -> int:
        return len(self._pids)

    def __iter__(self) -> Iterator[int]:
        return iter(self._pids)

    def __repr__(self) -> str:
        return f"ProcessQueue({self.name!r}, {list(self._pids)})"
