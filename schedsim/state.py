# per-run simulation state: process arena, clock and completion tracker

import logging
from typing import Dict, List, Set

from schedsim.errors import InvariantViolation
from schedsim.events import EventLog
from schedsim.process import Process

logger = logging.getLogger(__name__)


class SimulationState:
    """Everything one policy run mutates, owned by that run's loop.

    ``arena`` maps pid -> working copy of the process and is the only place
    remaining_time lives. ``order`` keeps the caller's list order for
    tie-breaks, ``arrival_order`` the same pids stably sorted by arrival.
    """

    def __init__(self, processes: List[Process]):
        self.arena: Dict[int, Process] = {p.pid: p for p in processes}
        self.order: List[int] = [p.pid for p in processes]
        self.arrival_order: List[int] = [
            p.pid for p in sorted(processes, key=lambda p: p.arrival_time)]
        self.current_time = 0
        self.completed: Set[int] = set()
        self.log = EventLog()

        # idle can never outlast the last arrival plus all the work before it
        self.max_idle_ticks = (max(p.arrival_time for p in processes)
                               + sum(p.burst_time for p in processes)) if processes else 0
        self.idle_ticks = 0

    def __getitem__(self, pid: int) -> Process:
        return self.arena[pid]

    # --- clock ---
    def advance(self, units: int) -> None:
        if units < 0:
            raise InvariantViolation(f"clock cannot move backwards by {units}")
        self.current_time += units

    def idle_tick(self) -> None:
        """Nothing is eligible: record one idle unit and move the clock."""
        self.idle_ticks += 1
        if self.idle_ticks > self.max_idle_ticks:
            raise InvariantViolation(
                f"idle for {self.idle_ticks} ticks at t={self.current_time} with "
                f"{len(self.arena) - len(self.completed)} processes unfinished")
        logger.debug("t=%d: CPU idle", self.current_time)
        self.log.idle(self.current_time)
        self.advance(1)

    # --- completion tracker ---
    def has_arrived(self, pid: int) -> bool:
        return self.arena[pid].arrival_time <= self.current_time

    def is_completed(self, pid: int) -> bool:
        return pid in self.completed

    def mark_completed(self, pid: int) -> None:
        proc = self.arena[pid]
        if pid in self.completed:
            raise InvariantViolation(f"process {pid} completed twice")
        if proc.remaining_time != 0:
            raise InvariantViolation(
                f"process {pid} marked complete with {proc.remaining_time} units left")
        self.completed.add(pid)
        self.log.finished(self.current_time, pid)
        logger.debug("t=%d: process %d finished", self.current_time, pid)

    @property
    def all_completed(self) -> bool:
        return len(self.completed) == len(self.arena)

    # --- ready-set selector ---
    def ready_set(self) -> List[Process]:
        """Arrived, uncompleted processes in the caller's original order."""
        return [self.arena[pid] for pid in self.order
                if self.has_arrived(pid) and pid not in self.completed]

    # --- execution ---
    def run_slice(self, pid: int, quantum=None, tier=None) -> int:
        """Run ``pid`` for min(remaining, quantum) units, or to completion
        when quantum is None. Returns the units executed."""
        proc = self.arena[pid]
        if pid in self.completed or proc.remaining_time <= 0:
            raise InvariantViolation(f"process {pid} dispatched after completion")
        if not self.has_arrived(pid):
            raise InvariantViolation(
                f"process {pid} dispatched at t={self.current_time} before arrival "
                f"at t={proc.arrival_time}")

        exec_time = proc.remaining_time if quantum is None else min(proc.remaining_time, quantum)
        self.log.start(self.current_time, pid, exec_time, proc.remaining_time, tier)
        logger.debug("t=%d: process %d runs %d unit(s) (remaining %d)",
                     self.current_time, pid, exec_time, proc.remaining_time)
        self.advance(exec_time)
        proc.remaining_time -= exec_time
        return exec_time
