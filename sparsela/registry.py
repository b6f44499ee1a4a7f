"""Registry of algorithm implementations and the dispatcher that selects among them."""

from __future__ import annotations

import abc
import inspect
from dataclasses import dataclass
from typing import Any, Optional

from sparsela.logger import Logger
from sparsela.status import SplaError, Status

CPU_SUFFIX = "__cpu"
GPU_SUFFIX = "__gpu"
GPU_CL_SUFFIX = "__cl"


def _op_key(op: Any) -> str:
    return op if isinstance(op, str) else op.key


def make_key(name: str, *args: Any) -> str:
    """Build a registry key from an operation name and its operators' keys."""
    return name + "".join("_" + _op_key(op) for op in args)


class RegistryAlgo(abc.ABC):
    """Algorithm able to process a task identified by its string key."""

    @abc.abstractmethod
    def name(self) -> str:
        """Short name of the algorithm."""

    @abc.abstractmethod
    def description(self) -> str:
        """Human-readable description of the algorithm."""

    @abc.abstractmethod
    def execute(self, ctx: "DispatchContext") -> Any:
        """Run the algorithm for the task in ``ctx``."""


class Registry:
    """Mapping from keys to algorithm implementations."""

    def __init__(self) -> None:
        self._registry: dict[str, RegistryAlgo] = {}

    def add(self, key: str, algo: RegistryAlgo) -> None:
        """Register ``algo`` under ``key``, replacing any previous entry."""
        self._registry[key] = algo

    def has(self, key: str) -> bool:
        """Whether an algorithm is registered under ``key``."""
        return key in self._registry

    def find(self, key: str) -> Optional[RegistryAlgo]:
        """The algorithm registered under ``key``, or ``None``."""
        return self._registry.get(key)


@dataclass
class DispatchContext:
    """Execution context of a single task; the task must expose a ``key``."""

    task: Any
    schedule: Any = None
    thread_id: int = 0
    step_id: int = 0
    task_id: int = 0

    @property
    def key(self) -> str:
        return self.task.key


def _line() -> int:
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    return caller.f_lineno if caller is not None else 0


class Dispatcher:
    """Selects and runs the best registered algorithm for a task."""

    def __init__(
        self,
        registry: Optional[Registry] = None,
        logger: Optional[Logger] = None,
        accelerator_suffix: Optional[str] = None,
        force_no_acceleration: bool = False,
    ) -> None:
        self.registry = registry if registry is not None else Registry()
        self.logger = logger if logger is not None else Logger()
        self.accelerator_suffix = accelerator_suffix
        self.force_no_acceleration = force_no_acceleration

    def dispatch(self, ctx: DispatchContext) -> Any:
        """Run the accelerated algorithm if present and allowed, else the CPU one.

        Raises SplaError with NOT_IMPLEMENTED if no algorithm fits the key, and
        with ERROR if the algorithm fails with an unexpected exception.
        """
        key = ctx.key
        algo: Optional[RegistryAlgo] = None

        if self.accelerator_suffix and not self.force_no_acceleration:
            algo = self.registry.find(key + self.accelerator_suffix)
        if algo is None:
            algo = self.registry.find(key + CPU_SUFFIX)

        if algo is None:
            message = f"failed to find suitable algo for key {key}"
            self.logger.log_msg(Status.NOT_IMPLEMENTED, message, __file__, "dispatch", _line())
            raise SplaError(Status.NOT_IMPLEMENTED, message)

        try:
            return algo.execute(ctx)
        except SplaError:
            raise
        except Exception as ex:
            message = f"not handled exception thrown: {ex}"
            self.logger.log_msg(Status.ERROR, message, __file__, "dispatch", _line())
            raise SplaError(Status.ERROR, message) from ex