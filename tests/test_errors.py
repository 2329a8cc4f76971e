import pytest

from schedsim.errors import InvalidConfiguration, InvariantViolation, MalformedProcess, SchedulingError
from schedsim.process import Process, validate_processes
from schedsim.schedulers import FCFSScheduler, MLFQScheduler, RoundRobinScheduler, make_scheduler
from schedsim.state import SimulationState


@pytest.mark.parametrize("quantum", [0, -2, 1.5, True, "2", None])
def test_round_robin_rejects_bad_quantum(quantum):
    with pytest.raises(InvalidConfiguration, match="quantum must be a positive integer"):
        RoundRobinScheduler(time_quantum=quantum)


@pytest.mark.parametrize("high, low", [(0, 2), (4, 0), (4, -1), (2.0, 1)])
def test_mlfq_rejects_bad_quanta(high, low):
    with pytest.raises(InvalidConfiguration):
        MLFQScheduler(quantum_high=high, quantum_low=low)


def test_unknown_policy():
    with pytest.raises(InvalidConfiguration, match="unknown policy"):
        make_scheduler("lottery")


@pytest.mark.parametrize("proc, message", [
    (Process(1, 0, 0), "burst_time"),
    (Process(1, 0, -3), "burst_time"),
    (Process(1, -1, 2), "arrival_time"),
    (Process(1, 0, 2, priority=-1), "priority"),
    (Process(0, 0, 2), "pid"),
    (Process(1, 0.5, 2), "arrival_time"),
])
def test_malformed_process_rejected_before_run(proc, message):
    with pytest.raises(MalformedProcess, match=message):
        FCFSScheduler().schedule([Process(2, 0, 1), proc])


def test_duplicate_pid():
    with pytest.raises(MalformedProcess, match="duplicate pid 3"):
        validate_processes([Process(3, 0, 1), Process(3, 1, 1)])


def test_errors_share_a_base_and_builtin_types():
    assert issubclass(InvalidConfiguration, ValueError)
    assert issubclass(MalformedProcess, ValueError)
    assert issubclass(InvariantViolation, RuntimeError)
    for exc in (InvalidConfiguration, MalformedProcess, InvariantViolation):
        assert issubclass(exc, SchedulingError)


def test_idle_guard_trips():
    state = SimulationState([Process(1, 3, 1)])
    state.max_idle_ticks = 2
    state.idle_tick()
    state.idle_tick()
    with pytest.raises(InvariantViolation, match="idle for 3 ticks"):
        state.idle_tick()


def test_empty_input_is_a_normal_run():
    res = FCFSScheduler().schedule([])
    assert res.events == []
    assert res.total_time == 0
