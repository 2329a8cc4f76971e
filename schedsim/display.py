# text presentation and paced replay of scheduling events

import time
from typing import Callable, Iterable, List, Optional

from schedsim.events import EventKind, SchedulingEvent
from schedsim.process import Process


def format_event(event: SchedulingEvent) -> str:
    prefix = f"Time {event.timestamp}: "
    if event.kind is EventKind.IDLE:
        return prefix + f"CPU idle for {event.duration} unit(s)."
    if event.kind is EventKind.START:
        tier = f"[{event.tier.value} queue] " if event.tier is not None else ""
        return prefix + (f"{tier}Process {event.pid} runs for {event.duration} unit(s) "
                         f"(remaining: {event.remaining}).")
    if event.kind is EventKind.PREEMPTED:
        where = f", moved to {event.tier.value} queue" if event.tier is not None else ""
        return prefix + f"Process {event.pid} preempted{where} (remaining: {event.remaining})."
    return prefix + f"Process {event.pid} finished."


def replay(events: Iterable[SchedulingEvent], delay_per_unit: float = 0.0,
           step: Optional[Callable[[], None]] = None,
           out: Callable[[str], None] = print,
           sleep: Callable[[float], None] = time.sleep) -> None:
    """Print events one by one, pausing ``delay_per_unit`` seconds per
    simulated unit and calling ``step`` after each slice outcome.

    Works on a finished log, so pacing cannot influence any decision.
    """
    for event in events:
        out(format_event(event))
        if delay_per_unit > 0 and event.duration > 0:
            sleep(event.duration * delay_per_unit)
        if step is not None and event.kind in (EventKind.FINISHED, EventKind.PREEMPTED):
            step()


def wait_for_enter() -> None:
    input("Press Enter to continue...")


def print_process_table(processes: List[Process], out: Callable[[str], None] = print):
    out("-"*50)
    out(f"{'PID':<6} {'Arrival':<10} {'Burst':<10} {'Priority':<10}")
    out("-"*50)
    for p in processes:
        out(f"P{p.pid:<5} {p.arrival_time:<10} {p.burst_time:<10} {p.priority:<10}")
    out("-"*50)


def print_comparison_table(results, out: Callable[[str], None] = print):
    out("\n" + "="*90)
    out("                    SCHEDULING ALGORITHM COMPARISON")
    out("="*90)
    out(f"{'Algorithm':<25} {'Avg Wait':>10} {'Avg TAT':>10} {'Avg Resp':>10} {'CPU Util':>10} {'Switches':>10}")
    out("-"*90)

    for r in results:
        name = r.name.split('(')[0].strip()[:24]
        out(f"{name:<25} {r.avg_waiting_time:>10.2f} {r.avg_turnaround_time:>10.2f} "
            f"{r.avg_response_time:>10.2f} {r.cpu_utilization:>9.1f}% {r.context_switches:>10}")

    out("="*90)

    if not results:
        return

    best_wait = min(results, key=lambda r: r.avg_waiting_time)
    best_tat = min(results, key=lambda r: r.avg_turnaround_time)
    best_resp = min(results, key=lambda r: r.avg_response_time)

    out(f"\nBest Average Waiting Time:    {best_wait.name.split('(')[0].strip()} ({best_wait.avg_waiting_time:.2f})")
    out(f"Best Average Turnaround Time: {best_tat.name.split('(')[0].strip()} ({best_tat.avg_turnaround_time:.2f})")
    out(f"Best Average Response Time:   {best_resp.name.split('(')[0].strip()} ({best_resp.avg_response_time:.2f})")
