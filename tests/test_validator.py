from manifest import DEFAULT_TOOLKIT
from validator import (
    MAX_DESCRIPTION_LENGTH,
    MAX_NAME_LENGTH,
    ErrorCode,
    validate_frontmatter,
)


def test_default_toolkit_is_valid():
    report = validate_frontmatter(DEFAULT_TOOLKIT.frontmatter_entries())

    assert report.is_valid
    assert report.errors == []
    assert report.checked[-1] == "webperf"
    assert len(report.checked) == len(DEFAULT_TOOLKIT.categories) + 1


def test_name_too_long_reports_length_and_limit():
    report = validate_frontmatter([("webperf-x", {"name": "n" * 70, "description": "ok"})])

    assert not report.is_valid
    [error] = report.errors
    assert error.code == ErrorCode.NAME_TOO_LONG
    assert error.manifest == "webperf-x"
    assert error.path == "/name"
    assert "70" in error.message and "64" in error.message
    assert error.details == {"length": 70, "limit": MAX_NAME_LENGTH}


def test_limits_are_inclusive():
    report = validate_frontmatter([
        ("edge", {"name": "n" * MAX_NAME_LENGTH, "description": "d" * MAX_DESCRIPTION_LENGTH}),
    ])
    assert report.is_valid


def test_every_violation_in_batch_is_reported():
    report = validate_frontmatter([
        ("first", {"name": "n" * 65, "description": "d" * 1025}),
        ("fine", {"name": "fine", "description": "ok"}),
        ("second", {"name": "second", "description": "d" * 2000}),
    ])

    assert report.checked == ["first", "fine", "second"]
    assert [(e.manifest, e.code) for e in report.errors] == [
        ("first", ErrorCode.DESCRIPTION_TOO_LONG),
        ("first", ErrorCode.NAME_TOO_LONG),
        ("second", ErrorCode.DESCRIPTION_TOO_LONG),
    ]
    assert report.errors[2].details == {"length": 2000, "limit": MAX_DESCRIPTION_LENGTH}


def test_missing_or_empty_fields_are_schema_violations():
    report = validate_frontmatter([
        ("missing", {"name": "missing"}),
        ("empty", {"name": "", "description": "ok"}),
    ])

    assert [e.code for e in report.errors] == [ErrorCode.SCHEMA_VIOLATION] * 2
    assert report.errors[0].path == "/"
    assert report.errors[1].path == "/name"
