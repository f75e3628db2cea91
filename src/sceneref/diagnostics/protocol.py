"""Protocols for the diagnostic channel.

The resolver reports failed fields through a sink instead of printing, so hosts
can route them to a console, an editor panel or a build log.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sceneref.diagnostics.models import Diagnostic


@runtime_checkable
class DiagnosticSink(Protocol):
    """Receiver of resolution failures.

    Reporting is non-fatal: a sink must not raise for ordinary diagnostics, the
    resolver keeps going with the next field afterwards.
    """

    def report(self, diagnostic: Diagnostic) -> None:
        """Record one failed field resolution.

        Args:
            diagnostic: Failure details.
        """
        ...
