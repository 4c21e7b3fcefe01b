from __future__ import annotations

import logging
from typing import Callable

from tracker.application.ports.request_context_port import TaskDispatcherPort


logger = logging.getLogger(__name__)


class DeferredTasks(TaskDispatcherPort):
    """Collects best-effort work to run once the route handler is done.

    A failing task is logged and skipped; it never reaches the caller.
    """

    def __init__(self):
        self._tasks: list[tuple[str, Callable[[], object]]] = []

    def defer(self, task: Callable[[], object], *, name: str) -> None:
        self._tasks.append((name, task))

    def __len__(self) -> int:
        return len(self._tasks)

    def run_all(self) -> list[str]:
        """Runs and clears the queue; returns the names of the tasks that failed."""
        tasks, self._tasks = self._tasks, []
        failed: list[str] = []
        for name, task in tasks:
            try:
                task()
            except Exception:  # noqa: BLE001
                logger.exception("Deferred task failed name=%s", name)
                failed.append(name)
        return failed
