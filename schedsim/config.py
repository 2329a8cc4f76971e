from dataclasses import dataclass
from typing import List

from schedsim.errors import InvalidConfiguration
from schedsim.schedulers import (
    DEFAULT_QUANTUM,
    DEFAULT_QUANTUM_HIGH,
    DEFAULT_QUANTUM_LOW,
    POLICIES,
    SchedulerBase,
    check_quantum,
    make_scheduler,
)


@dataclass
class SimulationConfig:
    """Run settings gathered by the command line.

    policy is one of POLICIES or "all"; delay_per_unit only affects
    replay pacing, never the schedule itself.
    """
    policy: str = "all"
    quantum: int = DEFAULT_QUANTUM
    quantum_high: int = DEFAULT_QUANTUM_HIGH
    quantum_low: int = DEFAULT_QUANTUM_LOW
    delay_per_unit: float = 0.0

    def validate(self) -> "SimulationConfig":
        if self.policy != "all" and self.policy not in POLICIES:
            raise InvalidConfiguration(
                f"unknown policy {self.policy!r}, expected one of {', '.join(POLICIES)} or all")
        check_quantum("quantum", self.quantum)
        check_quantum("quantum_high", self.quantum_high)
        check_quantum("quantum_low", self.quantum_low)
        if self.delay_per_unit < 0:
            raise InvalidConfiguration(f"delay must not be negative, got {self.delay_per_unit}")
        return self

    @property
    def policies(self) -> List[str]:
        return list(POLICIES) if self.policy == "all" else [self.policy]

    def build_schedulers(self) -> List[SchedulerBase]:
        self.validate()
        return [make_scheduler(policy, self.quantum, self.quantum_high, self.quantum_low)
                for policy in self.policies]
