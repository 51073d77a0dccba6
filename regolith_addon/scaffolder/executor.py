"""Replays a :class:`FileSystemPlan` against the real filesystem.

Operations are applied strictly in plan order, each reported before it runs.
In dry-run mode every operation is reported and nothing is touched.  The
first failure aborts the run; whatever was already created stays on disk.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Callable

from ..utils import log_making_dir, log_writing_file
from .plan import FileSystemPlan, MakeDirectory, Operation, WriteFile


class PlanExecutionError(Exception):
    """Raised when a plan operation fails on disk."""

    def __init__(self, operation: Operation, cause: OSError) -> None:
        self.operation = operation
        self.cause = cause
        action = "make directory" if isinstance(operation, MakeDirectory) else "write file"
        reason = cause.strerror or str(cause)
        super().__init__(f"Could not {action} {operation.path}: {reason}")


class PlanExecutor:
    """Applies plan operations below ``output_dir``."""

    def __init__(self, output_dir: str | Path = ".", *, dry_run: bool = False) -> None:
        self.output_dir = Path(output_dir)
        self.dry_run = dry_run

    async def execute(self, plan: FileSystemPlan) -> Path:
        """Apply every operation of *plan* in order.

        Returns:
            The absolute path of the project root.

        Raises:
            PlanExecutionError: On the first operation that fails.
        """
        for operation in plan:
            await self._apply(operation)
        return (self.output_dir / plan.base_dir).resolve()

    async def _apply(self, operation: Operation) -> None:
        target = self.output_dir / operation.path
        if isinstance(operation, MakeDirectory):
            log_making_dir(operation.path)
            if not self.dry_run:
                await self._run(operation, target.mkdir)
        elif isinstance(operation, WriteFile):
            log_writing_file(operation.path)
            if not self.dry_run:
                await self._run(operation, target.write_bytes, operation.content)
        else:
            raise TypeError(f"Unknown plan operation: {operation!r}")

    @staticmethod
    async def _run(operation: Operation, func: Callable[..., Any], *args: Any) -> None:
        try:
            await asyncio.to_thread(func, *args)
        except OSError as exc:
            raise PlanExecutionError(operation, exc) from exc
