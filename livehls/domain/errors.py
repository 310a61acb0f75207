# livehls/domain/errors.py
from __future__ import annotations

from typing import Optional


class ResolveError(Exception):
    """Base for every terminal failure of a stream resolution."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidInput(ResolveError):
    """No usable source URL was given."""


class ProbeFailed(ResolveError):
    """The external probe errored or returned unusable output."""

    def __init__(self, message: str, stderr: Optional[str] = None, rc: Optional[int] = None) -> None:
        super().__init__(message)
        self.stderr = stderr
        self.rc = rc


class ProbeTimeout(ProbeFailed):
    """The external probe did not finish in time and was killed."""


class NoStreamingFormat(ResolveError):
    """The probe succeeded but yielded no HLS candidate and no fallback manifest."""
