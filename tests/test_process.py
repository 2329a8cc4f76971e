import pytest

from schedsim.errors import MalformedProcess
from schedsim.process import Process, generate_random_processes, load_processes, sample_processes


def test_remaining_time_starts_at_burst():
    p = Process(pid=1, arrival_time=0, burst_time=7, priority=3)
    assert p.remaining_time == 7
    p.remaining_time = 2
    p.reset()
    assert p.remaining_time == 7 and not p.is_completed


def test_sample_set():
    assert [(p.pid, p.arrival_time, p.burst_time, p.priority) for p in sample_processes()] == [
        (1, 0, 5, 2), (2, 1, 3, 1), (3, 2, 8, 3), (4, 3, 6, 2)]


def test_random_processes_are_seeded_and_valid():
    first = generate_random_processes(10, seed=7)
    second = generate_random_processes(10, seed=7)
    assert [(p.arrival_time, p.burst_time, p.priority) for p in first] == \
        [(p.arrival_time, p.burst_time, p.priority) for p in second]
    assert [p.pid for p in first] == list(range(1, 11))
    for p in first:
        p.validate()


def test_load_processes(tmp_path):
    path = tmp_path / "procs.csv"
    path.write_text(
        "# demo workload\n"
        "pid, arrival_time, burst_time, priority\n"
        "1,0,5,2\n"
        "\n"
        "2,1,3,\n"
    )
    procs = load_processes(path)
    assert [(p.pid, p.arrival_time, p.burst_time, p.priority) for p in procs] == [
        (1, 0, 5, 2), (2, 1, 3, 0)]


def test_load_processes_reports_line(tmp_path):
    path = tmp_path / "procs.csv"
    path.write_text("pid,arrival_time,burst_time\n1,0,5\n\n2,1,zero\n")
    with pytest.raises(MalformedProcess, match="line 4: burst_time is not an integer"):
        load_processes(path)


def test_load_processes_validates_rows(tmp_path):
    path = tmp_path / "procs.csv"
    path.write_text("pid,arrival_time,burst_time\n1,0,0\n")
    with pytest.raises(MalformedProcess, match="line 2: .*burst_time"):
        load_processes(path)


def test_load_processes_needs_header_columns(tmp_path):
    path = tmp_path / "procs.csv"
    path.write_text("pid,arrival\n1,0\n")
    with pytest.raises(MalformedProcess, match="missing arrival_time, burst_time"):
        load_processes(path)


def test_load_processes_rejects_non_utf8(tmp_path):
    path = tmp_path / "procs.csv"
    path.write_bytes(b"pid,arrival_time,burst_time\n1,0,\xff\n")
    with pytest.raises(MalformedProcess, match="not valid UTF-8"):
        load_processes(path)
