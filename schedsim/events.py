# scheduling events emitted by the policies

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional

from schedsim.errors import InvariantViolation
from schedsim.queues import Tier


class EventKind(Enum):
    IDLE = "idle"
    START = "start"
    PREEMPTED = "preempted"
    FINISHED = "finished"


@dataclass(frozen=True)
class SchedulingEvent:
    """One timestamped scheduling decision.

    Attributes
    ----------
    timestamp: Simulated time the event happens at.
    kind: What happened.
    pid: Process concerned, None for IDLE.
    duration: Units the CPU stays idle (IDLE) or the slice granted (START).
    remaining: Remaining time before the slice (START) or after it (PREEMPTED).
    tier: MLFQ queue the slice was taken from (START) or the process went
        back to (PREEMPTED); None for single-queue policies.
    """
    timestamp: int
    kind: EventKind
    pid: Optional[int] = None
    duration: int = 0
    remaining: Optional[int] = None
    tier: Optional[Tier] = None

    @property
    def end(self) -> int:
        return self.timestamp + self.duration


@dataclass
class GanttEntry:
    pid: int
    start: int
    end: int
    tier: Optional[Tier] = None


class EventLog:
    """Append-only event sequence with non-decreasing timestamps.

    Consecutive idle ticks are merged into a single IDLE event whose
    duration grows with every tick.
    """

    def __init__(self):
        self._events: List[SchedulingEvent] = []

    def _append(self, event: SchedulingEvent) -> None:
        if self._events and event.timestamp < self._events[-1].timestamp:
            raise InvariantViolation(
                f"event at t={event.timestamp} precedes t={self._events[-1].timestamp}")
        self._events.append(event)

    def idle(self, timestamp: int, units: int = 1) -> None:
        last = self._events[-1] if self._events else None
        if last is not None and last.kind is EventKind.IDLE and last.end == timestamp:
            self._events[-1] = replace(last, duration=last.duration + units)
            return
        self._append(SchedulingEvent(timestamp, EventKind.IDLE, duration=units))

    def start(self, timestamp: int, pid: int, duration: int, remaining: int,
              tier: Optional[Tier] = None) -> None:
        self._append(SchedulingEvent(timestamp, EventKind.START, pid=pid,
                                     duration=duration, remaining=remaining, tier=tier))

    def preempted(self, timestamp: int, pid: int, remaining: int,
                  tier: Optional[Tier] = None) -> None:
        self._append(SchedulingEvent(timestamp, EventKind.PREEMPTED, pid=pid,
                                     remaining=remaining, tier=tier))

    def finished(self, timestamp: int, pid: int) -> None:
        self._append(SchedulingEvent(timestamp, EventKind.FINISHED, pid=pid, remaining=0))

    @property
    def events(self) -> List[SchedulingEvent]:
        return list(self._events)

    def __len__(self) -> int:
        return len(self._events)


def gantt_chart(events: List[SchedulingEvent]) -> List[GanttEntry]:
    """One bar per executed slice, in dispatch order."""
    return [GanttEntry(pid=e.pid, start=e.timestamp, end=e.end, tier=e.tier)
            for e in events if e.kind is EventKind.START]
