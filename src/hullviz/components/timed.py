from dataclasses import dataclass


@dataclass(slots=True)
class Timed:
    """Frame-counted lifetime tagged with the stage it animates in.

    ``progress`` starts at -1 and only moves forward one frame per eligible
    scheduler step. A zero-duration Timed is done on its first eligible step.
    """

    duration: int
    stage: int
    progress: int = -1

    @property
    def has_started(self) -> bool:
        return self.progress >= 0

    @property
    def is_done(self) -> bool:
        return self.progress >= self.duration

    def advance(self) -> None:
        self.progress += 1
