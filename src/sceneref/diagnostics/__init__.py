"""Diagnostic channel for failed field resolutions.

Usage:
    from sceneref.diagnostics import CollectingDiagnostics

    sink = CollectingDiagnostics()
    resolver = Resolver(graph, diagnostics=sink)
    resolver.apply(behavior, bindings)
    for diagnostic in sink:
        print(diagnostic.format())
"""

from sceneref.diagnostics.models import Diagnostic
from sceneref.diagnostics.protocol import DiagnosticSink
from sceneref.diagnostics.sinks import CollectingDiagnostics, LoggingDiagnostics

__all__ = [
    "Diagnostic",
    "DiagnosticSink",
    "LoggingDiagnostics",
    "CollectingDiagnostics",
]
