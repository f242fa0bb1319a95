import time


class StopwatchNotStartedError(RuntimeError):
    pass


def pluralize(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def format_duration(total_seconds: int) -> str:
    minutes, seconds = divmod(int(total_seconds), 60)

    if minutes == 0 and seconds == 0:
        return "less than a second"

    parts = []
    if minutes > 0:
        parts.append(pluralize(minutes, "minute"))
    if seconds > 0:
        parts.append(pluralize(seconds, "second"))
    return " and ".join(parts)


class Stopwatch:
    """
    Measures how long a round took.
    The clock is injectable so tests can move time forward by hand.
    """
    def __init__(self, clock=time.monotonic):
        self._clock = clock
        self._started_at = None

    def start(self) -> None:
        self._started_at = self._clock()

    def elapsed_seconds(self) -> int:
        if self._started_at is None:
            raise StopwatchNotStartedError("Stopwatch has not been started.")
        return int(self._clock() - self._started_at)

    def elapsed_formatted(self) -> str:
        return format_duration(self.elapsed_seconds())
