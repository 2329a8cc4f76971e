import matplotlib

matplotlib.use("Agg")

import pytest

from schedsim.process import Process, sample_processes


@pytest.fixture
def sample():
    return sample_processes()


@pytest.fixture
def late_single():
    return [Process(pid=1, arrival_time=5, burst_time=3)]
