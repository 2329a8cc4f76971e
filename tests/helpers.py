from collections import defaultdict

from schedsim.events import EventKind


def starts(result):
    return [(e.timestamp, e.pid, e.duration) for e in result.events if e.kind is EventKind.START]


def finishes(result):
    return {e.pid: e.timestamp for e in result.events if e.kind is EventKind.FINISHED}


def slices_by_pid(result):
    slices = defaultdict(list)
    for e in result.events:
        if e.kind is EventKind.START:
            slices[e.pid].append(e.duration)
    return slices
