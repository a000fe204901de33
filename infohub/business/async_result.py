import logging
from enum import Enum
from typing import Awaitable, Callable, Generic, Optional, TypeVar

from infohub.exceptions import InfoHubError

from .constants import UNKNOWN_ERROR

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Status(str, Enum):
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class AsyncResult(Generic[T]):
    """
    Tri-state holder for the outcome of one asynchronous fetch.

    The state is exactly one of LOADING, SUCCESS (with a value) or ERROR
    (with a message). Only the most recently started run may apply its
    outcome, and nothing is applied after ``dispose()``.

    While a run is LOADING after an earlier success, ``value`` still holds
    the previous value; it is replaced when the new one arrives and cleared
    on error.
    """

    def __init__(self, name: str):
        self.name = name
        self.status: Status = Status.LOADING
        self.value: Optional[T] = None
        self.error: Optional[str] = None
        self._generation = 0
        self._disposed = False

    @property
    def is_loading(self) -> bool:
        return self.status is Status.LOADING

    @property
    def disposed(self) -> bool:
        return self._disposed

    async def run(self, operation: Callable[[], Awaitable[T]]) -> None:
        """Enter LOADING, await ``operation`` and store its outcome."""
        if self._disposed:
            logger.debug(f"[{self.name}] run ignored: disposed")
            return
        await self.resolve(self.begin(), operation)

    def begin(self) -> int:
        """Enter LOADING and clear any error; returns the run's generation."""
        self._generation += 1
        self.status = Status.LOADING
        self.error = None
        return self._generation

    async def resolve(self, generation: int, operation: Callable[[], Awaitable[T]]) -> None:
        """Await ``operation`` for the run started by ``begin()``."""
        try:
            value = await operation()
        except InfoHubError as e:
            self._apply(generation, error=str(e))
        except Exception:
            logger.exception(f"[{self.name}] unexpected error during fetch")
            self._apply(generation, error=UNKNOWN_ERROR)
        else:
            self._apply(generation, value=value)

    def fail(self, message: str) -> None:
        """Go straight to ERROR, e.g. when a prerequisite is missing."""
        if self._disposed:
            return
        self._generation += 1
        self._apply(self._generation, error=message)

    def dispose(self) -> None:
        """Tear down: outcomes resolving from now on are discarded."""
        self._disposed = True

    def _apply(self, generation: int, value: Optional[T] = None, error: Optional[str] = None) -> None:
        if self._disposed:
            logger.info(f"[{self.name}] discarding result that arrived after teardown")
            return
        if generation != self._generation:
            logger.info(f"[{self.name}] discarding stale result of run #{generation}")
            return

        if error is not None:
            self.status = Status.ERROR
            self.error = error
            self.value = None
        else:
            self.status = Status.SUCCESS
            self.error = None
            self.value = value
