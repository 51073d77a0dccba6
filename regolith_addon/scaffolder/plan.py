"""Filesystem plan data types.

A :class:`FileSystemPlan` is the output of the planner: an ordered list of
directory-creation and file-write operations, with every path relative to the
output directory and every parent created before its children.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Iterator, Union


@dataclass(frozen=True)
class MakeDirectory:
    """Create a single directory.  The parent must already exist."""

    path: PurePosixPath


@dataclass(frozen=True)
class WriteFile:
    """Write *content* to a new file."""

    path: PurePosixPath
    content: bytes

    @property
    def text(self) -> str:
        return self.content.decode("utf-8")


Operation = Union[MakeDirectory, WriteFile]


@dataclass(frozen=True)
class FileSystemPlan:
    """Ordered, immutable sequence of operations rooted at ``base_dir``."""

    base_dir: PurePosixPath
    operations: tuple[Operation, ...]

    def __iter__(self) -> Iterator[Operation]:
        return iter(self.operations)

    def __len__(self) -> int:
        return len(self.operations)

    @property
    def directories(self) -> list[PurePosixPath]:
        return [op.path for op in self.operations if isinstance(op, MakeDirectory)]

    @property
    def files(self) -> dict[PurePosixPath, bytes]:
        """Mapping of file path -> content, in plan order."""
        return {
            op.path: op.content for op in self.operations if isinstance(op, WriteFile)
        }

    def relative_paths(self) -> list[str]:
        """Every operation path relative to ``base_dir`` (``"."`` for the base)."""
        return [str(op.path.relative_to(self.base_dir)) for op in self.operations]

    def read(self, relative_path: str) -> str:
        """Return the text of the file at *relative_path* under ``base_dir``.

        Raises:
            KeyError: If the plan does not write that file.
        """
        return self.files[self.base_dir / relative_path].decode("utf-8")
