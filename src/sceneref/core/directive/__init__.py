"""Directive functionality: resolution requests, field targets and bindings."""

from sceneref.core.directive.models import (
    Directive,
    FieldBinding,
    FieldShape,
    FieldTarget,
    OverwritePolicy,
)

__all__ = [
    "Directive",
    "OverwritePolicy",
    "FieldShape",
    "FieldTarget",
    "FieldBinding",
]
