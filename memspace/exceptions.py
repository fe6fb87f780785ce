from __future__ import annotations
from typing import Any, Optional


class MemSpaceError(Exception):
    def __init__(self, message: str, **kwargs):
        super().__init__(message)
        self.message = message
        self.context = kwargs


class SequenceError(MemSpaceError):
    pass


class IndexOutOfRange(SequenceError, IndexError):
    def __init__(self, message: str, index: Optional[int] = None,
                 size: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.index = index
        self.size = size


class BlockNotFound(SequenceError, LookupError):
    def __init__(self, message: str, block: Optional[Any] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.block = block


class InvalidRequest(MemSpaceError, ValueError):
    pass


class SpaceCorruption(MemSpaceError):
    pass
