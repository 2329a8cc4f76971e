import pytest

from schedsim.config import SimulationConfig
from schedsim.errors import InvalidConfiguration
from schedsim.schedulers import MLFQScheduler, RoundRobinScheduler


def test_defaults_build_every_policy():
    schedulers = SimulationConfig().build_schedulers()
    assert len(schedulers) == 5
    rr = next(s for s in schedulers if isinstance(s, RoundRobinScheduler))
    mlfq = next(s for s in schedulers if isinstance(s, MLFQScheduler))
    assert rr.time_quantum == 2
    assert (mlfq.quantum_high, mlfq.quantum_low) == (4, 2)


def test_single_policy():
    [scheduler] = SimulationConfig(policy="rr", quantum=3).build_schedulers()
    assert scheduler.name == "Round Robin (TQ=3)"


@pytest.mark.parametrize("kwargs", [
    {"policy": "lottery"},
    {"quantum": 0},
    {"quantum_high": -1},
    {"quantum_low": 0},
    {"delay_per_unit": -0.1},
])
def test_invalid(kwargs):
    with pytest.raises(InvalidConfiguration):
        SimulationConfig(**kwargs).validate()


def test_bad_quantum_fails_even_for_unrelated_policy():
    with pytest.raises(InvalidConfiguration, match="quantum_low"):
        SimulationConfig(policy="fcfs", quantum_low=0).build_schedulers()
