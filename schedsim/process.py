# process model and process-set providers

import csv
import logging
import random
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from schedsim.errors import MalformedProcess

logger = logging.getLogger(__name__)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class Process:
    """Process control block

    lower priority value = higher priority
    """
    pid: int
    arrival_time: int
    burst_time: int
    priority: int = 0

    remaining_time: int = field(init=False)

    def __post_init__(self):
        self.remaining_time = self.burst_time

    def validate(self) -> None:
        if not _is_int(self.pid) or self.pid <= 0:
            raise MalformedProcess(f"pid must be a positive integer, got {self.pid!r}")
        if not _is_int(self.arrival_time) or self.arrival_time < 0:
            raise MalformedProcess(
                f"process {self.pid}: arrival_time must be a non-negative integer, "
                f"got {self.arrival_time!r}")
        if not _is_int(self.burst_time) or self.burst_time <= 0:
            raise MalformedProcess(
                f"process {self.pid}: burst_time must be a positive integer, "
                f"got {self.burst_time!r}")
        if not _is_int(self.priority) or self.priority < 0:
            raise MalformedProcess(
                f"process {self.pid}: priority must be a non-negative integer, "
                f"got {self.priority!r}")

    @property
    def is_completed(self) -> bool:
        return self.remaining_time == 0

    def reset(self):
        self.remaining_time = self.burst_time


def validate_processes(processes: Iterable[Process]) -> List[Process]:
    """Check every process and pid uniqueness; returns the input as a list."""
    procs = list(processes)
    seen = set()
    for proc in procs:
        if not isinstance(proc, Process):
            raise MalformedProcess(f"expected a Process, got {type(proc).__name__}")
        proc.validate()
        if proc.pid in seen:
            raise MalformedProcess(f"duplicate pid {proc.pid}")
        seen.add(proc.pid)
    return procs


def sample_processes() -> List[Process]:
    """The fixed four-process sample set used by the demo runs."""
    return [
        Process(pid=1, arrival_time=0, burst_time=5, priority=2),
        Process(pid=2, arrival_time=1, burst_time=3, priority=1),
        Process(pid=3, arrival_time=2, burst_time=8, priority=3),
        Process(pid=4, arrival_time=3, burst_time=6, priority=2),
    ]


def generate_random_processes(n: int, max_arrival: int = 20,
                              max_burst: int = 10, max_priority: int = 5,
                              seed: Optional[int] = None) -> List[Process]:
    # seeded locally, global random state untouched
    rng = random.Random(seed)

    processes = []
    for i in range(n):
        processes.append(Process(
            pid=i + 1,
            arrival_time=rng.randint(0, max_arrival),
            burst_time=rng.randint(1, max_burst),
            priority=rng.randint(0, max_priority),
        ))
    return processes


def _parse_field(row: dict, name: str, line: int, default: Optional[int] = None) -> int:
    raw = row.get(name)
    if raw is None or raw.strip() == "":
        if default is not None:
            return default
        raise MalformedProcess(f"line {line}: missing {name}")
    try:
        return int(raw)
    except ValueError:
        raise MalformedProcess(f"line {line}: {name} is not an integer: {raw.strip()!r}") from None


def load_processes(path) -> List[Process]:
    """Read processes from a CSV file.

    The header must name ``pid``, ``arrival_time`` and ``burst_time``;
    ``priority`` is optional and defaults to 0. Blank lines and lines
    starting with ``#`` are ignored.
    """
    try:
        with open(path, newline="", encoding="utf-8") as fh:
            lines = [(no, text) for no, text in enumerate(fh, start=1)
                     if text.strip() and not text.lstrip().startswith("#")]
    except UnicodeDecodeError as exc:
        raise MalformedProcess(f"{path}: not valid UTF-8 ({exc.reason} at byte {exc.start})") from None

    if not lines:
        raise MalformedProcess(f"{path}: no header row")

    line_numbers = [no for no, _ in lines]
    reader = csv.DictReader(text for _, text in lines)
    if reader.fieldnames is None:
        raise MalformedProcess(f"{path}: no header row")
    reader.fieldnames = [name.strip() for name in reader.fieldnames]
    missing = {"pid", "arrival_time", "burst_time"} - set(reader.fieldnames)
    if missing:
        raise MalformedProcess(f"{path}: header is missing {', '.join(sorted(missing))}")

    processes = []
    for line, row in zip(line_numbers[1:], reader):
        proc = Process(
            pid=_parse_field(row, "pid", line),
            arrival_time=_parse_field(row, "arrival_time", line),
            burst_time=_parse_field(row, "burst_time", line),
            priority=_parse_field(row, "priority", line, default=0),
        )
        try:
            proc.validate()
        except MalformedProcess as exc:
            raise MalformedProcess(f"line {line}: {exc}") from None
        processes.append(proc)

    logger.info("loaded %d processes from %s", len(processes), path)
    return validate_processes(processes)
