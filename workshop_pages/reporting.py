"""Console progress reporting for site builds."""

from __future__ import annotations

import sys
import typing as typ


class BuildReporter:
    """Print build progress to stdout and problems to stderr.

    Streams are resolved at call time so pytest's ``capsys`` captures output
    from reporters created before the fixture swaps ``sys.stdout``.
    """

    def __init__(
        self, out: typ.TextIO | None = None, err: typ.TextIO | None = None
    ) -> None:
        self._out = out
        self._err = err

    def step(self, message: str) -> None:
        """Announce a pipeline stage."""
        print(message, file=self._out or sys.stdout)

    def item(self, message: str) -> None:
        """Report one artefact produced by the current stage."""
        print(f"  ✓ {message}", file=self._out or sys.stdout)

    def warn(self, message: str) -> None:
        """Report a non-fatal problem."""
        print(f"Warning: {message}", file=self._err or sys.stderr)

    def error(self, message: str) -> None:
        """Report a fatal problem."""
        print(f"Error: {message}", file=self._err or sys.stderr)


__all__ = ["BuildReporter"]
