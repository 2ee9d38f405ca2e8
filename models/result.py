"""
Result type shared by every decode / encode / export entry point.

Readers and writers never raise for I/O or format problems. They return a
CodecResult holding either the decoded value or a CodecError describing
what went wrong:

    result = read_grayscale("in.pgm")
    if not result.ok:
        ...                      # result.error.kind, result.error.message
    raster = result.value
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    FILE_NOT_FOUND = "file_not_found"          # missing or unopenable path
    FORMAT_ERROR = "format_error"              # bad magic / header
    TRUNCATED_DATA = "truncated_data"          # sample count mismatch
    ALLOCATION_FAILURE = "allocation_failure"  # buffer could not be allocated


@dataclass(frozen=True)
class CodecError:
    kind: ErrorKind
    message: str
    path: str = ""

    def __str__(self):
        return f"[{self.kind.name}] {self.message}"


class CodecFailure(Exception):
    """
    Raised by CodecResult.unwrap() for callers that prefer exceptions.
    """

    def __init__(self, error: CodecError):
        super().__init__(str(error))
        self.error = error


@dataclass(frozen=True)
class CodecResult(Generic[T]):
    value: Optional[T] = None
    error: Optional[CodecError] = None

    @classmethod
    def success(cls, value=None):
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str, path: str = ""):
        return cls(error=CodecError(kind, message, str(path)))

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise CodecFailure(self.error)
        return self.value

    def __bool__(self):
        return self.ok
