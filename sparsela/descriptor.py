"""Parameters that steer the execution of scheduled operations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Descriptor:
    """Execution options for an operation or algorithm.

    ``push_only``, ``pull_only`` and ``push_pull`` select the traversal mode;
    ``front_factor`` and ``discovered_factor`` tune adaptive push-pull;
    ``early_exit`` lets a reduction stop at the first non-zero sum;
    ``struct_only`` asks for structure rather than values.
    """

    push_only: bool = False
    pull_only: bool = False
    push_pull: bool = True
    front_factor: float = 0.1
    discovered_factor: float = 0.7
    early_exit: bool = False
    struct_only: bool = False
    label: str = ""