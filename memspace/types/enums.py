"""
Enumeration types for the memspace library.
"""

from __future__ import annotations

from enum import IntEnum


class OperationKind(IntEnum):
    """Requests a memory space understands."""
    ALLOCATE = 1
    RELEASE = 2
    DEFRAGMENT = 3
    DUMP = 4

    @classmethod
    def from_command(cls, command: str) -> OperationKind:
        return _COMMANDS[command.lower()]


_COMMANDS = {
    'alloc': OperationKind.ALLOCATE,
    'malloc': OperationKind.ALLOCATE,
    'allocate': OperationKind.ALLOCATE,
    'free': OperationKind.RELEASE,
    'release': OperationKind.RELEASE,
    'defrag': OperationKind.DEFRAGMENT,
    'defragment': OperationKind.DEFRAGMENT,
    'dump': OperationKind.DUMP,
}
