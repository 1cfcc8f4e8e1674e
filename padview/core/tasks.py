from __future__ import annotations

import logging
import threading
from concurrent.futures import Executor, Future
from typing import Any, Callable, Generic, TypeVar

from result import Err, Ok, Result

from padview.models.enums import TaskState

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CancelToken:
    __slots__ = ("_event",)

    def __init__(self) -> None:
        self._event = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    def __call__(self) -> bool:
        return self._event.is_set()


Work = Callable[[CancelToken], Result[T, Any]]


class TaskHandle:
    """One submitted unit of background work."""

    __slots__ = ("generation", "token", "future", "state")

    def __init__(self, generation: int, token: CancelToken) -> None:
        self.generation = generation
        self.token = token
        self.future: Future[None] | None = None
        self.state = TaskState.RUNNING

    @property
    def is_terminal(self) -> bool:
        return self.state.is_terminal


class TaskBinding(Generic[T]):
    """Owns at most one active background task and delivers only its outcome.

    ``submit`` cancels the active task (without waiting for it to unwind) and
    starts the new one. A task's callbacks run only if its generation is still
    current when it finishes; the check and the callback share a lock with
    ``submit``/``cancel`` so a superseded task can never deliver late.
    """

    def __init__(
        self,
        executor: Executor,
        on_success: Callable[[T], None],
        on_failure: Callable[[Any], None],
        name: str = "task",
    ) -> None:
        self._executor = executor
        self._on_success = on_success
        self._on_failure = on_failure
        self._name = name
        self._lock = threading.Lock()
        self._generation = 0
        self._active: TaskHandle | None = None
        self._closed = False

    @property
    def active(self) -> TaskHandle | None:
        return self._active

    @property
    def is_busy(self) -> bool:
        handle = self._active
        return handle is not None and not handle.is_terminal

    def submit(self, work: Work[T]) -> TaskHandle | None:
        with self._lock:
            if self._closed:
                logger.debug("%s: binding closed, dropping submission", self._name)
                return None
            self._cancel_active_locked()
            self._generation += 1
            handle = TaskHandle(self._generation, CancelToken())
            self._active = handle
        handle.future = self._executor.submit(self._run, handle, work)
        return handle

    def cancel(self) -> None:
        with self._lock:
            self._cancel_active_locked()

    def shutdown(self) -> None:
        with self._lock:
            self._cancel_active_locked()
            self._closed = True

    def _cancel_active_locked(self) -> None:
        handle = self._active
        self._generation += 1
        self._active = None
        if handle is None or handle.is_terminal:
            return
        handle.token.cancel()
        handle.state = TaskState.CANCELLED
        if handle.future is not None:
            handle.future.cancel()
        logger.debug("%s: cancelled task %d", self._name, handle.generation)

    def _run(self, handle: TaskHandle, work: Work[T]) -> None:
        if handle.token.cancelled:
            return
        try:
            outcome: Result[T, Any] = work(handle.token)
        except Exception as exc:  # noqa: BLE001
            logger.exception("%s: task %d raised", self._name, handle.generation)
            outcome = Err(exc)

        with self._lock:
            if handle.token.cancelled or handle.generation != self._generation:
                handle.state = TaskState.CANCELLED
                logger.debug("%s: discarding result of stale task %d", self._name, handle.generation)
                return
            try:
                if isinstance(outcome, Ok):
                    self._on_success(outcome.unwrap())
                    handle.state = TaskState.COMPLETED
                else:
                    self._on_failure(outcome.unwrap_err())
                    handle.state = TaskState.FAILED
            except Exception:  # noqa: BLE001
                logger.exception("%s: callback for task %d raised", self._name, handle.generation)
                handle.state = TaskState.FAILED
