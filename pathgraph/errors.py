"""Exceptions raised by the shortest-path engine."""

from __future__ import annotations


class PreconditionError(RuntimeError):
    """An engine operation was called in a lifecycle state that forbids it."""


class NoSourceSelected(PreconditionError):
    """``analyze`` or a path query was issued before ``set_source``."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot {operation}: select a source node first.")


class AnalysisNotReady(PreconditionError):
    """A path query was issued without a completed analysis for the current source."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(
            f"Graph not analyzed for source '{source}'. Call analyze() first."
        )
