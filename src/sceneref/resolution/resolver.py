"""Resolver: applies directives to behavior fields.

Usage:
    graph = LocalSceneGraph()
    resolver = Resolver(graph)

    # One field, no write
    result = resolver.resolve(Directive(SameNode()), node, FieldTarget.scalar(Collider))

    # Every binding of one behavior, in declaration order
    resolver.apply(door_behavior, DOOR_BINDINGS)

    # Build pass over the whole graph
    report = resolver.resolve_graph({Door: DOOR_BINDINGS, Spawner: SPAWNER_BINDINGS})
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Mapping, Sequence, Sized
from typing import Any

from sceneref.config import ResolverSettings
from sceneref.core.directive import Directive, FieldBinding, FieldTarget
from sceneref.core.errors import (
    NotFoundError,
    ResolutionError,
    SubtreeLookupError,
    TypeMismatchError,
)
from sceneref.core.identity import NodeId
from sceneref.core.strategy import has_structural_ancestry
from sceneref.diagnostics import Diagnostic, DiagnosticSink, LoggingDiagnostics
from sceneref.graph.protocol import SceneGraph
from sceneref.resolution.result import BuildReport, ResolutionResult, ResolutionStatus

logger = logging.getLogger(__name__)


def is_populated(value: Any) -> bool:
    """Check whether a field already holds something worth keeping.

    None and empty sized values (an empty list, tuple or string) count as unset.
    """
    if value is None:
        return False
    if isinstance(value, Sized):
        return len(value) > 0
    return True


class Resolver:
    """Runs directives against a scene graph and writes results into fields.

    The graph is only read. Failures the directive policy can absorb are
    reported to the diagnostic sink and the run continues; the rest propagate.

    Args:
        graph: Scene graph to resolve against.
        diagnostics: Sink for failed fields. Logs warnings by default.
        settings: Resolver configuration. Loaded from the environment by default.
    """

    def __init__(
        self,
        graph: SceneGraph,
        diagnostics: DiagnosticSink | None = None,
        settings: ResolverSettings | None = None,
    ):
        self._graph = graph
        self._diagnostics = diagnostics if diagnostics is not None else LoggingDiagnostics()
        self._settings = settings if settings is not None else ResolverSettings()

    @property
    def graph(self) -> SceneGraph:
        return self._graph

    @property
    def settings(self) -> ResolverSettings:
        return self._settings

    def resolve(
        self,
        directive: Directive,
        origin: NodeId,
        target: FieldTarget,
        *,
        field_name: str = "",
        behavior_type: type | None = None,
    ) -> ResolutionResult:
        """Run a directive's strategy and shape the matches for the target field.

        Nothing is written; the caller decides what to do with the value.

        Args:
            directive: Strategy and policy to apply.
            origin: Node owning the behavior.
            target: Declared element type and shape of the field.
            field_name: Field name, used in diagnostics.
            behavior_type: Behavior type, used in diagnostics.

        Returns:
            RESOLVED with the shaped value, or FAILED with the error. An empty
            scalar is FAILED with ``clears_field`` set so None is still written.

        Raises:
            ResolutionError: Non-recoverable failures (a subtree name miss, a
                parent cycle) are not converted into FAILED results.
        """
        requested = target.declared_type
        try:
            matches = tuple(directive.strategy.resolve(self._graph, origin, requested))
            if isinstance(requested, type):
                stray = next((m for m in matches if not isinstance(m, requested)), None)
                if stray is not None:
                    raise TypeMismatchError(
                        f"{directive.strategy!r} returned {type(stray).__name__}, "
                        f"expected {requested.__name__}"
                    )
        except ResolutionError as err:
            if not self._is_recoverable(err):
                raise
            self._report(directive, err, field_name, behavior_type)
            return ResolutionResult(ResolutionStatus.FAILED, error=err, field_name=field_name)

        logger.debug(
            "%s resolved %d match(es) for %s from %s",
            directive.strategy,
            len(matches),
            field_name or getattr(requested, "__name__", requested),
            origin,
        )

        if target.is_collection:
            return ResolutionResult(
                ResolutionStatus.RESOLVED, matches, list(matches), field_name=field_name
            )

        if matches:
            return ResolutionResult(
                ResolutionStatus.RESOLVED, matches, matches[0], field_name=field_name
            )

        if not self._settings.report_empty_scalars:
            return ResolutionResult(ResolutionStatus.RESOLVED, field_name=field_name)

        err = NotFoundError(f"No {getattr(requested, '__name__', requested)} found")
        self._report(directive, err, field_name, behavior_type)
        return ResolutionResult(
            ResolutionStatus.FAILED, error=err, field_name=field_name, clears_field=True
        )

    def apply(
        self,
        behavior: Any,
        bindings: Sequence[FieldBinding],
        origin: NodeId | None = None,
    ) -> list[ResolutionResult]:
        """Resolve and write every binding of one behavior, in declaration order.

        Args:
            behavior: Object whose fields are filled.
            bindings: Field bindings of the behavior's type.
            origin: Node to resolve from. Defaults to the node the behavior is
                attached to.

        Returns:
            One result per binding, in binding order.

        Raises:
            ValueError: If no origin is given and the behavior is not attached.
            ResolutionError: Non-recoverable failures propagate and stop the
                remaining bindings. ``resolve_graph`` contains them per field.
        """
        origin = self._origin_of(behavior, origin)
        return [self._apply_binding(behavior, binding, origin) for binding in bindings]

    def resolve_graph(self, bindings: Mapping[type, Sequence[FieldBinding]]) -> BuildReport:
        """Build pass: apply bindings to every bound behavior in the graph.

        Nodes are visited root by root, depth-first, inactive ones included.
        Structural-only nodes and everything below them are skipped. A behavior
        uses the bindings registered for its exact type.

        A non-recoverable failure stops only the field it came from: it is
        reported regardless of ``suppress_errors``, recorded as failed, and the
        pass moves on to the next binding.

        Args:
            bindings: Behavior type -> field bindings.

        Returns:
            Counts of behaviors visited and fields resolved, skipped and failed.
        """
        report = BuildReport()
        for root in self._graph.roots():
            for node in self._graph.subtree_of(root):
                if has_structural_ancestry(self._graph, node):
                    continue
                for behavior in self._graph.components_on(node, object):
                    type_bindings = bindings.get(type(behavior))
                    if not type_bindings:
                        continue
                    report.behaviors += 1
                    for binding in type_bindings:
                        report.record(self._apply_contained(behavior, binding, node))

        logger.info(
            "Build pass: %d behavior(s), %d resolved, %d skipped, %d failed",
            report.behaviors,
            report.resolved,
            report.skipped,
            report.failed,
        )
        return report

    def _origin_of(self, behavior: Any, origin: NodeId | None) -> NodeId:
        if origin is not None:
            return origin
        owner = self._graph.owner_of(behavior)
        if owner is None:
            raise ValueError(f"{type(behavior).__name__} is not attached to any node")
        return owner

    def _apply_binding(
        self, behavior: Any, binding: FieldBinding, origin: NodeId
    ) -> ResolutionResult:
        if binding.directive.skips_if_present and is_populated(binding.read(behavior)):
            return ResolutionResult(ResolutionStatus.SKIPPED, field_name=binding.field_name)

        result = self.resolve(
            binding.directive,
            origin,
            binding.target,
            field_name=binding.field_name,
            behavior_type=type(behavior),
        )
        if result.writes:
            binding.write(behavior, result.value)
        return result

    def _apply_contained(
        self, behavior: Any, binding: FieldBinding, origin: NodeId
    ) -> ResolutionResult:
        try:
            return self._apply_binding(behavior, binding, origin)
        except ResolutionError as err:
            logger.error("Resolution of %s stopped: %s", binding.field_name, err)
            self._emit(binding.directive, err, binding.field_name, type(behavior))
            return ResolutionResult(
                ResolutionStatus.FAILED, error=err, field_name=binding.field_name
            )

    def _is_recoverable(self, err: ResolutionError) -> bool:
        if isinstance(err, SubtreeLookupError) and not self._settings.subtree_miss_is_fatal:
            return True
        return err.recoverable

    def _report(
        self,
        directive: Directive,
        err: ResolutionError,
        field_name: str,
        behavior_type: type | None,
    ) -> None:
        if directive.suppress_errors:
            logger.debug("Suppressed failure for %s: %s", field_name or "<field>", err)
            return
        self._emit(directive, err, field_name, behavior_type)

    def _emit(
        self,
        directive: Directive,
        err: ResolutionError,
        field_name: str,
        behavior_type: type | None,
    ) -> None:
        diagnostic = Diagnostic(
            field_name=field_name,
            behavior_type=(
                f"{behavior_type.__module__}.{behavior_type.__qualname__}"
                if behavior_type is not None
                else None
            ),
            strategy=repr(directive.strategy),
            message=str(err),
            error_type=type(err).__name__,
        )
        self._diagnostics.report(diagnostic)
        if self._settings.emit_warnings:
            warnings.warn(diagnostic.format(), stacklevel=4)
