"""Tests for ResolutionResult and BuildReport."""

import json

import pytest

from sceneref import BuildReport, NotFoundError, ResolutionResult, ResolutionStatus


def _failed(name):
    return ResolutionResult(
        ResolutionStatus.FAILED, error=NotFoundError(f"No {name}"), field_name=name
    )


def test_only_resolved_is_ok():
    assert ResolutionResult(ResolutionStatus.RESOLVED).ok
    assert not ResolutionResult(ResolutionStatus.SKIPPED).ok
    assert not _failed("x").ok


def test_only_resolved_or_cleared_results_write():
    cleared = ResolutionResult(ResolutionStatus.FAILED, clears_field=True)

    assert ResolutionResult(ResolutionStatus.RESOLVED).writes
    assert cleared.writes and not cleared.ok
    assert not _failed("x").writes
    assert not ResolutionResult(ResolutionStatus.SKIPPED).writes


def test_result_is_immutable():
    result = ResolutionResult(ResolutionStatus.RESOLVED, value=1)

    with pytest.raises(AttributeError):
        result.value = 2


def test_report_counts_by_status():
    report = BuildReport()

    report.record(ResolutionResult(ResolutionStatus.RESOLVED))
    report.record(ResolutionResult(ResolutionStatus.RESOLVED))
    report.record(ResolutionResult(ResolutionStatus.SKIPPED))
    report.record(_failed("camera"))

    assert (report.resolved, report.skipped, report.failed) == (2, 1, 1)
    assert [r.field_name for r in report.failures] == ["camera"]
    assert not report.is_clean()


def test_merge_accumulates_in_place():
    first = BuildReport(behaviors=1, resolved=3)
    second = BuildReport(behaviors=2, skipped=1)
    second.record(_failed("door"))

    first.merge(second)

    assert first.behaviors == 3
    assert (first.resolved, first.skipped, first.failed) == (3, 1, 1)
    assert [r.field_name for r in first.failures] == ["door"]


def test_to_dict_is_json_serializable():
    report = BuildReport(behaviors=1)
    report.record(_failed("spawn_points"))

    data = json.loads(json.dumps(report.to_dict()))

    assert data["failed"] == 1
    assert data["failures"] == [{"field_name": "spawn_points", "error": "No spawn_points"}]


def test_empty_report_is_clean():
    assert BuildReport().is_clean()
