"""
schedsim - educational simulator of CPU scheduling policies.

FCFS, SJF, Round Robin, Priority and a two-level MLFQ walk a virtual clock
over a fixed set of processes and produce an ordered log of scheduling
events. Rendering, pacing and plotting consume that log and never feed
back into scheduling decisions.
"""

from schedsim.errors import (
    InvalidConfiguration,
    InvariantViolation,
    MalformedProcess,
    SchedulingError,
)
from schedsim.events import EventKind, GanttEntry, SchedulingEvent
from schedsim.process import (
    Process,
    generate_random_processes,
    load_processes,
    sample_processes,
)
from schedsim.queues import Tier
from schedsim.schedulers import (
    FCFSScheduler,
    MLFQScheduler,
    PriorityScheduler,
    RoundRobinScheduler,
    SchedulerBase,
    SchedulerResult,
    SJFScheduler,
    make_scheduler,
    run_all_schedulers,
)

__version__ = "0.1.0"

__all__ = [
    "EventKind",
    "FCFSScheduler",
    "GanttEntry",
    "InvalidConfiguration",
    "InvariantViolation",
    "MLFQScheduler",
    "MalformedProcess",
    "PriorityScheduler",
    "Process",
    "RoundRobinScheduler",
    "SJFScheduler",
    "SchedulerBase",
    "SchedulerResult",
    "SchedulingError",
    "SchedulingEvent",
    "Tier",
    "generate_random_processes",
    "load_processes",
    "make_scheduler",
    "run_all_schedulers",
    "sample_processes",
]
