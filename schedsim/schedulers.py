# scheduling policies - FCFS, SJF, Priority (non-preemptive) and RR, MLFQ (queue based)

import logging
from copy import deepcopy
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from schedsim.errors import InvalidConfiguration
from schedsim.events import EventKind, GanttEntry, SchedulingEvent, gantt_chart
from schedsim.metrics import ProcessMetrics, process_metrics, summarize
from schedsim.process import Process, validate_processes
from schedsim.queues import ProcessQueue, Tier
from schedsim.state import SimulationState

logger = logging.getLogger(__name__)

DEFAULT_QUANTUM = 2
DEFAULT_QUANTUM_HIGH = 4
DEFAULT_QUANTUM_LOW = 2

POLICIES = ("fcfs", "sjf", "rr", "priority", "mlfq")


def check_quantum(name: str, value) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise InvalidConfiguration(f"{name} must be a positive integer, got {value!r}")
    return value


@dataclass
class SchedulerResult:
    name: str
    events: List[SchedulingEvent]
    gantt_chart: List[GanttEntry]
    processes: List[ProcessMetrics]
    avg_waiting_time: float
    avg_turnaround_time: float
    avg_response_time: float
    throughput: float
    cpu_utilization: float
    idle_time: int
    context_switches: int
    total_time: int

    @property
    def completion_order(self) -> List[int]:
        return [e.pid for e in self.events if e.kind is EventKind.FINISHED]


class SchedulerBase:
    def __init__(self, name: str):
        self.name = name
        self.current_time = 0
        self.gantt_chart: List[GanttEntry] = []

    def schedule(self, processes: List[Process]) -> SchedulerResult:
        """Run the policy over working copies of ``processes``.

        The input list is validated first and never mutated; a malformed
        process aborts the run before any event is produced.
        """
        procs = deepcopy(validate_processes(processes))
        for p in procs:
            p.reset()

        state = SimulationState(procs)
        self._run(state)

        self.current_time = state.current_time
        events = state.log.events
        self.gantt_chart = gantt_chart(events)
        logger.info("%s: %d processes done at t=%d (%d events)",
                    self.name, len(procs), state.current_time, len(events))
        return self.calculate_metrics(procs, events)

    def _run(self, state: SimulationState) -> None:
        raise NotImplementedError

    def calculate_metrics(self, processes: List[Process],
                          events: List[SchedulingEvent]) -> SchedulerResult:
        per_process = process_metrics(processes, events)
        summary = summarize(per_process, events)
        return SchedulerResult(
            name=self.name,
            events=events,
            gantt_chart=self.gantt_chart,
            processes=per_process,
            **summary,
        )


# non-preemptive family

class NonPreemptiveScheduler(SchedulerBase):
    """Pick one ready process by ``key`` and run it to completion.

    ``min`` returns the first minimum it meets and the ready set comes in
    the caller's list order, so equal keys go to the earlier process.
    """

    def __init__(self, name: str, key: Callable[[Process], int]):
        super().__init__(name)
        self.key = key

    def select(self, ready: List[Process]) -> Process:
        return min(ready, key=self.key)

    def _run(self, state: SimulationState) -> None:
        while not state.all_completed:
            ready = state.ready_set()
            if not ready:
                state.idle_tick()
                continue

            proc = self.select(ready)
            state.run_slice(proc.pid)
            state.mark_completed(proc.pid)


class FCFSScheduler(NonPreemptiveScheduler):
    def __init__(self):
        super().__init__("FCFS (First Come First Serve)", key=lambda p: p.arrival_time)


class SJFScheduler(NonPreemptiveScheduler):
    def __init__(self):
        super().__init__("SJF (Shortest Job First)", key=lambda p: p.burst_time)


class PriorityScheduler(NonPreemptiveScheduler):
    """lower number = higher priority"""

    def __init__(self):
        super().__init__("Priority (Non-Preemptive)", key=lambda p: p.priority)


# queue-based family

class QueueDiscipline:
    """Queue layout of a preemptive policy, built fresh for every run."""

    def holds(self, pid: int) -> bool:
        raise NotImplementedError

    def admit(self, pid: int) -> None:
        raise NotImplementedError

    def next(self) -> Optional[Tuple[int, int, Optional[Tier]]]:
        """Pop the next process as (pid, quantum, tier), None when all queues are empty."""
        raise NotImplementedError

    def requeue(self, pid: int, tier: Optional[Tier]) -> Optional[Tier]:
        """Put back a preempted process; returns the tier it went to."""
        raise NotImplementedError


class RoundRobinQueue(QueueDiscipline):
    def __init__(self, quantum: int):
        self.quantum = quantum
        self.ready = ProcessQueue("ready")

    def holds(self, pid):
        return pid in self.ready

    def admit(self, pid):
        self.ready.add_to_end(pid)

    def next(self):
        pid = self.ready.remove_from_head()
        if pid is None:
            return None
        return pid, self.quantum, None

    def requeue(self, pid, tier):
        self.ready.add_to_end(pid)
        return None


class TwoLevelFeedbackQueue(QueueDiscipline):
    """New arrivals enter HIGH; any unfinished slice sends the process to
    the back of LOW. Nothing ever moves back up."""

    def __init__(self, quantum_high: int, quantum_low: int):
        self.quantum_high = quantum_high
        self.quantum_low = quantum_low
        self.high = ProcessQueue("high")
        self.low = ProcessQueue("low")

    def holds(self, pid):
        return pid in self.high or pid in self.low

    def admit(self, pid):
        self.high.add_to_end(pid)

    def next(self):
        if not self.high.is_empty():
            return self.high.remove_from_head(), self.quantum_high, Tier.HIGH
        if not self.low.is_empty():
            return self.low.remove_from_head(), self.quantum_low, Tier.LOW
        return None

    def requeue(self, pid, tier):
        if tier is Tier.HIGH:
            logger.debug("process %d demoted to low queue", pid)
        self.low.add_to_end(pid)
        return Tier.LOW


class QueueScheduler(SchedulerBase):
    """Admit -> dispatch front -> finish or requeue, with the queue layout
    supplied by ``make_discipline``."""

    def make_discipline(self) -> QueueDiscipline:
        raise NotImplementedError

    @staticmethod
    def admit_arrivals(state: SimulationState, discipline: QueueDiscipline) -> None:
        # arrival order, ties in original list order
        for pid in state.arrival_order:
            if not state.has_arrived(pid):
                break
            if state.is_completed(pid) or discipline.holds(pid):
                continue
            discipline.admit(pid)

    def _run(self, state: SimulationState) -> None:
        discipline = self.make_discipline()

        while not state.all_completed:
            self.admit_arrivals(state, discipline)

            picked = discipline.next()
            if picked is None:
                state.idle_tick()
                continue

            pid, quantum, tier = picked
            state.run_slice(pid, quantum, tier)
            proc = state[pid]
            if proc.remaining_time == 0:
                state.mark_completed(pid)
            else:
                dest = discipline.requeue(pid, tier)
                state.log.preempted(state.current_time, pid, proc.remaining_time, dest)


class RoundRobinScheduler(QueueScheduler):
    def __init__(self, time_quantum: int = DEFAULT_QUANTUM):
        self.time_quantum = check_quantum("quantum", time_quantum)
        super().__init__(f"Round Robin (TQ={time_quantum})")

    def make_discipline(self):
        return RoundRobinQueue(self.time_quantum)


class MLFQScheduler(QueueScheduler):
    """Two-level feedback queue.

    quantum_high is usually the larger of the two but nothing enforces it.
    """

    def __init__(self, quantum_high: int = DEFAULT_QUANTUM_HIGH,
                 quantum_low: int = DEFAULT_QUANTUM_LOW):
        self.quantum_high = check_quantum("quantum_high", quantum_high)
        self.quantum_low = check_quantum("quantum_low", quantum_low)
        super().__init__(f"MLFQ (Q1={quantum_high}, Q2={quantum_low})")

    def make_discipline(self):
        return TwoLevelFeedbackQueue(self.quantum_high, self.quantum_low)


def make_scheduler(policy: str, quantum: int = DEFAULT_QUANTUM,
                   quantum_high: int = DEFAULT_QUANTUM_HIGH,
                   quantum_low: int = DEFAULT_QUANTUM_LOW) -> SchedulerBase:
    policy = policy.lower()
    if policy == "fcfs":
        return FCFSScheduler()
    if policy == "sjf":
        return SJFScheduler()
    if policy == "priority":
        return PriorityScheduler()
    if policy == "rr":
        return RoundRobinScheduler(time_quantum=quantum)
    if policy == "mlfq":
        return MLFQScheduler(quantum_high=quantum_high, quantum_low=quantum_low)
    raise InvalidConfiguration(f"unknown policy {policy!r}, expected one of {', '.join(POLICIES)}")


def run_all_schedulers(processes: List[Process], quantum: int = DEFAULT_QUANTUM,
                       quantum_high: int = DEFAULT_QUANTUM_HIGH,
                       quantum_low: int = DEFAULT_QUANTUM_LOW) -> List[SchedulerResult]:
    # build every scheduler up front so a bad quantum fails before any run
    schedulers = [make_scheduler(policy, quantum, quantum_high, quantum_low)
                  for policy in POLICIES]

    results = []
    for scheduler in schedulers:
        results.append(scheduler.schedule(processes))
        logger.info("%s completed", scheduler.name)

    return results
