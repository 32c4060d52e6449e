"""Tests for document queries and mutations."""

from __future__ import annotations

import pytest

from usf.data.models import Subject, TimetableEntry, USFDocument, WeekType
from usf.errors import Result, SubjectAlreadyExists, TimetableEntryAlreadyExists
from usf.operations import (
    add_subject,
    add_timetable_entry,
    find_dangling_references,
    get_timetable,
    subject_exists,
    timetable_entry_exists,
)


@pytest.fixture
def document() -> USFDocument:
    """Document with 'Math' and one Monday entry."""
    return USFDocument(
        version=1,
        subjects={"Math": Subject(simplified_name="数学", teacher="张老师", room="101")},
        periods=[["08:00:00", "08:45:00"], ["09:00:00", "09:45:00"]],
        timetable=[
            TimetableEntry(day=1, week_type=WeekType.ALL, subject_name="Math", period=1),
        ],
    )


class TestQueries:
    """Tests for existence checks and timetable retrieval."""

    def test_subject_exists(self, document):
        assert subject_exists(document, "Math")
        assert not subject_exists(document, "Physics")

    def test_timetable_entry_exists(self, document):
        assert timetable_entry_exists(document, 1, WeekType.ALL, "Math", 1)
        assert timetable_entry_exists(document, 1, "all", "Math", 1)
        assert not timetable_entry_exists(document, 1, "odd", "Math", 1)

    def test_get_timetable_order(self, document):
        add_timetable_entry(document, 5, WeekType.ODD, "Math", 2)
        add_timetable_entry(document, 2, WeekType.EVEN, "Math", 1)
        assert [e.day for e in get_timetable(document)] == [1, 5, 2]

    def test_get_timetable_is_snapshot(self, document):
        snapshot = get_timetable(document)
        add_timetable_entry(document, 2, WeekType.EVEN, "Math", 2)
        assert len(snapshot) == 1
        assert len(get_timetable(document)) == 2

    def test_get_timetable_empty(self):
        assert get_timetable(USFDocument.empty()) == []


class TestAddSubject:
    """Tests for add_subject()."""

    def test_add_new_subject(self, document):
        result = add_subject(document, "Physics", "物理", "李老师", "102")
        assert result.ok
        assert result.value is None
        assert document.subjects["Physics"] == Subject(
            simplified_name="物理", teacher="李老师", room="102"
        )

    def test_add_to_empty_document(self):
        doc = USFDocument.empty()
        assert add_subject(doc, "Physics", "物理", "李老师", "102").ok
        assert subject_exists(doc, "Physics")

    def test_duplicate_subject(self, document):
        before = dict(document.subjects)
        result = add_subject(document, "Math", "数学2", "王老师", "201")
        assert not result.ok
        assert isinstance(result.error, SubjectAlreadyExists)
        assert result.error.name == "Math"
        assert document.subjects == before

    def test_duplicate_is_idempotent(self, document):
        first = add_subject(document, "Math", "数学", "张老师", "101")
        second = add_subject(document, "Math", "数学", "张老师", "101")
        assert type(first.error) is type(second.error) is SubjectAlreadyExists
        assert len(document.subjects) == 1

    def test_unwrap_raises(self, document):
        with pytest.raises(SubjectAlreadyExists, match="Math"):
            add_subject(document, "Math", "数学", "张老师", "101").unwrap()


class TestAddTimetableEntry:
    """Tests for add_timetable_entry()."""

    def test_add_entry(self, document):
        result = add_timetable_entry(document, 2, WeekType.EVEN, "Math", 2)
        assert result.ok
        timetable = get_timetable(document)
        assert len(timetable) == 2
        assert timetable[-1] == TimetableEntry(
            day=2, week_type=WeekType.EVEN, subject_name="Math", period=2
        )

    def test_add_entry_with_tag(self, document):
        assert add_timetable_entry(document, 3, "odd", "Math", 1).ok
        assert document.timetable[-1].week_type is WeekType.ODD

    def test_duplicate_entry(self, document):
        result = add_timetable_entry(document, 1, WeekType.ALL, "Math", 1)
        assert isinstance(result.error, TimetableEntryAlreadyExists)
        assert len(document.timetable) == 1

    def test_duplicate_entry_twice(self, document):
        for _ in range(2):
            result = add_timetable_entry(document, 1, "all", "Math", 1)
            assert isinstance(result.error, TimetableEntryAlreadyExists)
        assert len(document.timetable) == 1

    @pytest.mark.parametrize(
        "day,week_type,subject_name,period",
        [
            (2, "all", "Math", 1),
            (1, "even", "Math", 1),
            (1, "all", "Physics", 1),
            (1, "all", "Math", 2),
        ],
    )
    def test_one_field_differs(self, document, day, week_type, subject_name, period):
        assert add_timetable_entry(document, day, week_type, subject_name, period).ok
        assert len(document.timetable) == 2

    def test_unknown_week_type_raises(self, document):
        with pytest.raises(ValueError):
            add_timetable_entry(document, 1, "weekly", "Math", 1)
        assert len(document.timetable) == 1

    def test_references_not_checked(self, document):
        assert add_timetable_entry(document, 1, WeekType.ALL, "History", 99).ok

    def test_error_message(self, document):
        error = add_timetable_entry(document, 1, WeekType.ALL, "Math", 1).error
        assert "day=1" in str(error)
        assert "week_type=all" in str(error)


class TestDanglingReferences:
    """Tests for find_dangling_references()."""

    def test_clean_document(self, document):
        assert find_dangling_references(document) == []

    def test_unknown_subject(self, document):
        add_timetable_entry(document, 2, WeekType.ALL, "History", 1)
        problems = find_dangling_references(document)
        assert problems == ["Entry 1: unknown subject 'History'"]

    def test_period_out_of_range(self, document):
        add_timetable_entry(document, 2, WeekType.ALL, "Math", 3)
        add_timetable_entry(document, 2, WeekType.ALL, "Math", 0)
        problems = find_dangling_references(document)
        assert len(problems) == 2
        assert all("out of range (1-2)" in p for p in problems)


class TestResult:
    """Tests for the Result type."""

    def test_success(self):
        result = Result.success(5)
        assert result.ok
        assert result.unwrap() == 5

    def test_failure(self):
        error = SubjectAlreadyExists("Math")
        result = Result.failure(error)
        assert not result.ok
        assert result.value is None
        assert result.error is error
