# exceptions raised by the simulator


class SchedulingError(Exception):
    """Base class for everything the simulator raises on purpose."""


class InvalidConfiguration(SchedulingError, ValueError):
    """A policy parameter (quantum) is not a positive integer."""


class MalformedProcess(SchedulingError, ValueError):
    """A process description violates the data model."""


class InvariantViolation(SchedulingError, RuntimeError):
    """The simulation reached a state that valid input can never produce."""
