"""Exceptions raised by the workshop site build pipeline."""

from __future__ import annotations


class SiteBuildError(RuntimeError):
    """Raised when a fatal build precondition fails.

    Attributes
    ----------
    stage : str
        Pipeline stage that failed (``"reset"``, ``"assets"``, ``"render"``, or
        ``"index"``).
    """

    def __init__(self, stage: str, message: str) -> None:
        super().__init__(message)
        self.stage = stage


__all__ = ["SiteBuildError"]
