import pytest
from helpers import finishes, slices_by_pid

from schedsim.events import EventKind
from schedsim.process import generate_random_processes
from schedsim.schedulers import POLICIES, make_scheduler

SEEDS = range(12)


@pytest.fixture(params=POLICIES)
def scheduler(request):
    return make_scheduler(request.param, quantum=3, quantum_high=4, quantum_low=2)


@pytest.mark.parametrize("seed", SEEDS)
def test_slices_sum_to_burst(scheduler, seed):
    procs = generate_random_processes(8, seed=seed)
    res = scheduler.schedule(procs)
    slices = slices_by_pid(res)
    assert {p.pid: sum(slices[p.pid]) for p in procs} == {p.pid: p.burst_time for p in procs}


@pytest.mark.parametrize("seed", SEEDS)
def test_every_process_finishes_once_and_is_never_dispatched_after(scheduler, seed):
    procs = generate_random_processes(8, seed=seed)
    res = scheduler.schedule(procs)
    done = set()
    for e in res.events:
        if e.kind is EventKind.START:
            assert e.pid not in done
        elif e.kind is EventKind.FINISHED:
            assert e.pid not in done
            done.add(e.pid)
    assert done == {p.pid for p in procs}


@pytest.mark.parametrize("seed", SEEDS)
def test_timestamps_non_decreasing_and_no_early_start(scheduler, seed):
    procs = generate_random_processes(8, seed=seed)
    arrival = {p.pid: p.arrival_time for p in procs}
    res = scheduler.schedule(procs)
    stamps = [e.timestamp for e in res.events]
    assert stamps == sorted(stamps)
    for e in res.events:
        if e.kind is EventKind.START:
            assert e.timestamp >= arrival[e.pid]


@pytest.mark.parametrize("seed", SEEDS)
def test_cpu_never_double_booked_and_span_is_bounded(scheduler, seed):
    procs = generate_random_processes(8, seed=seed)
    res = scheduler.schedule(procs)
    busy = [(e.timestamp, e.end) for e in res.events
            if e.kind in (EventKind.START, EventKind.IDLE)]
    for (_, end), (start, _) in zip(busy, busy[1:]):
        assert end == start
    assert res.total_time >= max(p.arrival_time + p.burst_time for p in procs)
    assert res.total_time == max(finishes(res).values())
