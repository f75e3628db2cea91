"""Diagnostic sink implementations."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from sceneref.diagnostics.models import Diagnostic

logger = logging.getLogger(__name__)


class LoggingDiagnostics:
    """Default sink: one warning per failed field on a stdlib logger."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def report(self, diagnostic: Diagnostic) -> None:
        self._log.warning(diagnostic.format(), extra={"diagnostic": diagnostic.to_dict()})


class CollectingDiagnostics:
    """Keeps diagnostics in memory, in report order.

    Useful for tests and for tools that present all failures after a build pass.
    """

    def __init__(self) -> None:
        self.diagnostics: list[Diagnostic] = []

    def report(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def clear(self) -> None:
        """Drop everything collected so far."""
        self.diagnostics.clear()

    def __len__(self) -> int:
        return len(self.diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.diagnostics)
