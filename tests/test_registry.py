import random

import pytest

from coursereg.models import EnrollmentError, Placement
from coursereg.registry import Registry

COURSE_LINES = [
    "10001\tAlgebra\tAda Lovelace\n",
    "10002\tBiology\tCharles Darwin\n",
    "10003\tChemistry\tMarie Curie\n",
    "10004\tDrama\tWill Shakespeare\n",
    "10005\tEconomics\tAdam Smith\n",
]


def _registry(*student_lines):
    registry = Registry()
    registry.load_courses(COURSE_LINES)
    registry.load_students(list(student_lines))
    return registry


def _student_line(student_id, name="Someone", codes="10001 10002 10003 10004"):
    return f"{student_id}\t{name}\t{codes}\n"


class _ScriptedRng:
    def __init__(self, digits):
        self._digits = iter(digits)

    def randrange(self, stop):
        return next(self._digits)


def test_load_courses_reads_fields():
    registry = _registry()
    course = registry.courses["10002"]
    assert course.title == "Biology"
    assert course.instructor == "Charles Darwin"
    assert registry.log == ["Course created"] * len(COURSE_LINES)


def test_load_courses_skips_blank_lines():
    registry = Registry()
    registry.load_courses(["\n", "10001\tAlgebra\tAda Lovelace\n", ""])
    assert list(registry.courses) == ["10001"]


def test_load_courses_rejects_malformed_line():
    with pytest.raises(ValueError):
        Registry().load_courses(["10001 Algebra\n"])


def test_load_courses_keeps_first_of_duplicate_codes():
    registry = Registry()
    registry.load_courses(["10001\tAlgebra\tAda\n", "10001\tOther\tBob\n"])
    assert registry.courses["10001"].title == "Algebra"


def test_load_students_links_both_sides():
    registry = _registry(_student_line("1000000001", "Jane Doe"))
    student = registry.students["1000000001"]
    assert student.name == "Jane Doe"
    assert student.enrollments == {"10001", "10002", "10003", "10004"}
    for code in student.enrollments:
        assert registry.courses[code].has_student("1000000001")
    assert not registry.courses["10005"].has_student("1000000001")
    assert registry.log.count("Student registered for course") == 4


def test_load_students_unknown_course_is_an_error():
    registry = Registry()
    registry.load_courses(COURSE_LINES)
    with pytest.raises(ValueError):
        registry.load_students([_student_line("1", codes="10001 10002 10003 99999")])
    assert registry.students == {}


def test_load_students_wrong_course_count_is_an_error():
    registry = Registry()
    registry.load_courses(COURSE_LINES)
    with pytest.raises(ValueError):
        registry.load_students([_student_line("1", codes="10001 10002")])


def test_load_students_reports_duplicate_courses():
    registry = Registry()
    registry.load_courses(COURSE_LINES)
    warnings = registry.load_students(
        [_student_line("1", codes="10001 10001 10002 10003")]
    )
    assert len(warnings) == 2
    assert registry.students["1"].enrollments == {"10001", "10002", "10003"}


def test_tenth_student_is_waitlisted():
    lines = [_student_line(f"s{n:02d}") for n in range(10)]
    registry = _registry(*lines)
    course = registry.courses["10001"]
    assert len(course.students) == 9
    assert list(course.waitlist) == ["s09"]


def test_create_student_avoids_taken_ids():
    registry = _registry()
    rng = _ScriptedRng([0] * 10 + [0] * 10 + [1] * 10)
    first = registry.create_student("First", rng)
    second = registry.create_student("Second", rng)
    assert first.id == "0" * 10
    assert second.id == "1" * 10
    assert registry.students[second.id].name == "Second"
    assert registry.log[-1] == "Student created"


def test_create_course_registers_code():
    registry = Registry()
    course = registry.create_course("Poetry", "Emily Dickinson", random.Random(3))
    assert len(course.code) == 5 and course.code.isdigit()
    assert registry.courses[course.code].instructor == "Emily Dickinson"
    assert registry.log == ["Course created"]


def test_rename_student_and_update_course():
    registry = _registry(_student_line("1", "Jane"))
    registry.rename_student("1", "Janet")
    registry.update_course("10001", title="Linear Algebra")
    registry.update_course("10001", instructor="Emmy Noether")
    assert registry.students["1"].name == "Janet"
    assert registry.courses["10001"].title == "Linear Algebra"
    assert registry.courses["10001"].instructor == "Emmy Noether"
    assert registry.log[-3:] == ["Student updated", "Course updated", "Course updated"]


def test_enroll_and_duplicate():
    registry = _registry(_student_line("1"))
    assert registry.enroll("1", "10005") is Placement.ENROLLED
    assert registry.students["1"].has_course("10005")
    assert registry.courses["10005"].has_student("1")
    with pytest.raises(EnrollmentError):
        registry.enroll("1", "10005")


def test_enroll_unknown_student():
    registry = _registry()
    with pytest.raises(KeyError):
        registry.enroll("missing", "10001")


def test_enroll_uses_log_message():
    registry = _registry(_student_line("1"))
    registry.enroll("1", "10005", "Added student to course")
    assert registry.log[-1] == "Added student to course"


def test_unenroll_promotes_from_waitlist():
    lines = [_student_line(f"s{n:02d}") for n in range(10)]
    registry = _registry(*lines)
    promoted = registry.unenroll("s00", "10001")
    assert promoted == "s09"
    course = registry.courses["10001"]
    assert course.has_student("s09") and not course.has_student("s00")
    assert not registry.students["s00"].has_course("10001")
    assert registry.log[-1] == "Removed student from course"


def test_unenroll_from_waitlist():
    lines = [_student_line(f"s{n:02d}") for n in range(10)]
    registry = _registry(*lines)
    assert registry.unenroll("s09", "10001") is None
    assert "s09" not in registry.courses["10001"].waitlist
    assert not registry.students["s09"].has_course("10001")


def test_unenroll_not_enrolled():
    registry = _registry(_student_line("1"))
    with pytest.raises(EnrollmentError):
        registry.unenroll("1", "10005")


def test_remove_student_releases_seats():
    lines = [_student_line(f"s{n:02d}") for n in range(10)]
    registry = _registry(*lines)
    removed = registry.remove_student("s01")
    assert removed.id == "s01"
    assert "s01" not in registry.students
    for course in registry.courses.values():
        assert not course.has_student("s01")
    assert registry.courses["10001"].has_student("s09")
    assert registry.log[-1] == "Removed student"


def test_remove_waitlisted_student_clears_waitlist():
    lines = [_student_line(f"s{n:02d}") for n in range(10)]
    registry = _registry(*lines)
    registry.remove_student("s09")
    assert list(registry.courses["10001"].waitlist) == []


def test_remove_course_drops_enrollments():
    registry = _registry(_student_line("1"))
    registry.remove_course("10001")
    assert "10001" not in registry.courses
    assert not registry.students["1"].has_course("10001")
    assert registry.log[-1] == "Removed course"