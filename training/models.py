from dataclasses import dataclass, field
from datetime import datetime, timedelta
from uuid import UUID, uuid4


@dataclass(frozen=True)
class TrainingSet:
    """Один выполненный подход. После создания не меняется"""

    exercise: str
    weight: int
    reps: int
    start_time: datetime
    end_time: datetime
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self):
        if not self.exercise:
            raise ValueError("exercise cannot be empty")
        if self.weight < 0:
            raise ValueError("weight cannot be negative")
        if self.reps < 1:
            raise ValueError("reps must be at least 1")
        if self.end_time < self.start_time:
            raise ValueError("end_time cannot be earlier than start_time")

    @property
    def duration(self) -> timedelta:
        return self.end_time - self.start_time
