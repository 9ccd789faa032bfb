"""Progress reporting for batch processing of input lines."""
from typing import Iterable, Iterator, TypeVar

T = TypeVar("T")


class ProgressPrinter:
    """In-place console progress counter.

    Shown while a file is processed without echoing answers, so the console
    is not flooded with one line per input line.

    Attributes:
        task_name: Description of the task being performed
        total: Total number of items to process

    Example:
        >>> progress = ProgressPrinter("Processing notes", 3)
        >>> for line in progress.track(["a", "b", "c"]):
        ...     pass
        Processing notes...Done!
    """

    def __init__(self, task_name: str, total: int):
        self.task_name = task_name
        self.total = total

    def update(self, current: int) -> None:
        """Overwrite the current console line with "Task...current/total"."""
        print(f"{self.task_name}...{current}/{self.total}", end='\r', flush=True)

    def done(self) -> None:
        # Trailing spaces clear leftover counter digits
        print(f"{self.task_name}...Done!    ")

    def track(self, items: Iterable[T]) -> Iterator[T]:
        """Yield items unchanged, updating the counter before each one."""
        for i, item in enumerate(items):
            self.update(i + 1)
            yield item
        self.done()
