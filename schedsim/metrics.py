# metrics derived from an event log

from dataclasses import dataclass
from typing import Dict, List

import numpy as np

from schedsim.events import EventKind, SchedulingEvent
from schedsim.process import Process


@dataclass
class ProcessMetrics:
    pid: int
    arrival_time: int
    burst_time: int
    priority: int
    start_time: int = -1
    finish_time: int = -1
    turnaround_time: int = 0
    waiting_time: int = 0
    response_time: int = -1


def process_metrics(processes: List[Process], events: List[SchedulingEvent]) -> List[ProcessMetrics]:
    """Per-process timings, in the order of ``processes``."""
    by_pid: Dict[int, ProcessMetrics] = {
        p.pid: ProcessMetrics(p.pid, p.arrival_time, p.burst_time, p.priority)
        for p in processes
    }

    for event in events:
        if event.pid is None:
            continue
        m = by_pid[event.pid]
        if event.kind is EventKind.START and m.start_time == -1:
            m.start_time = event.timestamp
            m.response_time = event.timestamp - m.arrival_time
        elif event.kind is EventKind.FINISHED:
            m.finish_time = event.timestamp
            m.turnaround_time = m.finish_time - m.arrival_time
            m.waiting_time = m.turnaround_time - m.burst_time

    return [by_pid[p.pid] for p in processes]


def total_time(events: List[SchedulingEvent]) -> int:
    return max((e.end for e in events), default=0)


def context_switches(events: List[SchedulingEvent]) -> int:
    """Dispatches that hand the CPU to a different process than the last one."""
    switches = 0
    last_pid = None
    for event in events:
        if event.kind is not EventKind.START:
            continue
        if last_pid is not None and event.pid != last_pid:
            switches += 1
        last_pid = event.pid
    return switches


def summarize(per_process: List[ProcessMetrics], events: List[SchedulingEvent]) -> Dict[str, float]:
    span = total_time(events)
    busy = sum(e.duration for e in events if e.kind is EventKind.START)
    idle = sum(e.duration for e in events if e.kind is EventKind.IDLE)
    n = len(per_process)

    if n:
        avg_wait = float(np.mean([m.waiting_time for m in per_process]))
        avg_tat = float(np.mean([m.turnaround_time for m in per_process]))
        avg_resp = float(np.mean([m.response_time for m in per_process if m.response_time >= 0]))
    else:
        avg_wait = avg_tat = avg_resp = 0.0

    return {
        "avg_waiting_time": avg_wait,
        "avg_turnaround_time": avg_tat,
        "avg_response_time": avg_resp,
        "throughput": n / span if span > 0 else 0.0,
        "cpu_utilization": busy / span * 100 if span > 0 else 0.0,
        "idle_time": idle,
        "context_switches": context_switches(events),
        "total_time": span,
    }
