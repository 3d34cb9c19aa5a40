"""Students, courses and the enrollment rules between them."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

# A course keeps admitting students while it holds no more than this many,
# so the ninth student still gets a seat and the tenth is waitlisted.
_ADMIT_WHILE_AT_MOST = 8

COURSE_CODE_LENGTH = 5
STUDENT_ID_LENGTH = 10


class EnrollmentError(Exception):
    """Raised when an enrollment change cannot be made."""


class Placement(Enum):
    """Where a student ended up after asking to join a course."""

    ENROLLED = "enrolled"
    WAITLISTED = "waitlisted"


def _digits(rng: random.Random, count: int) -> str:
    return "".join(str(rng.randrange(10)) for _ in range(count))


def generate_course_code(rng: random.Random) -> str:
    """Return a random five-digit course code."""
    return _digits(rng, COURSE_CODE_LENGTH)


def generate_student_id(rng: random.Random) -> str:
    """Return a random ten-digit student id."""
    return _digits(rng, STUDENT_ID_LENGTH)


@dataclass
class Course:
    """A course with its enrolled students and a first-come waitlist."""

    code: str = ""
    title: str = ""
    instructor: str = ""
    max_size: int = 8
    students: set[str] = field(default_factory=set)
    waitlist: deque[str] = field(default_factory=deque)

    def __lt__(self, other: Course) -> bool:
        if not isinstance(other, Course):
            return NotImplemented
        return self.code < other.code

    def add_student(self, student_id: str) -> Placement:
        """Enroll a student, or waitlist them once the course is full."""
        if student_id in self.students:
            raise EnrollmentError(
                f"{student_id} Error: This student is already enrolled in {self.title}"
            )
        if len(self.students) <= _ADMIT_WHILE_AT_MOST:
            self.students.add(student_id)
            return Placement.ENROLLED
        self.waitlist.append(student_id)
        return Placement.WAITLISTED

    def drop_student(self, student_id: str) -> str | None:
        """Remove a student from the waitlist or from the course.

        When an enrolled student leaves, the first waitlisted student takes
        the seat; that student's id is returned, otherwise None.
        """
        if student_id in self.waitlist:
            self.waitlist = deque(s for s in self.waitlist if s != student_id)
            return None
        if student_id not in self.students:
            raise EnrollmentError(
                f"{student_id} is not currently enrolled in this course."
            )
        self.students.discard(student_id)
        if self.waitlist:
            promoted = self.waitlist.popleft()
            self.students.add(promoted)
            return promoted
        return None

    def has_student(self, student_id: str) -> bool:
        """Whether the student holds a seat in this course."""
        return student_id in self.students

    def summary(self) -> str:
        """One line naming the course, its instructor and its code."""
        return (
            f"Course Title: {self.title}, "
            f"Course Instructor: {self.instructor}, "
            f"Course Code: {self.code}"
        )

    def info(self, students: Mapping[str, Student]) -> str:
        """Full description including enrolled and waitlisted students."""
        lines = [
            f"Course Title: {self.title}",
            f"Course Instructor: {self.instructor}",
            f"Course Code: {self.code}",
            "Students Registered:",
        ]
        lines.extend(students[sid].summary() for sid in sorted(self.students))
        lines.append("Waitlist: ")
        lines.extend(students[sid].summary() for sid in self.waitlist)
        return "\n".join(lines)


@dataclass
class Student:
    """A student and the codes of the courses they are enrolled in."""

    id: str = ""
    name: str = ""
    enrollments: set[str] = field(default_factory=set)

    def __lt__(self, other: Student) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.id < other.id

    def add_course(self, course_code: str) -> None:
        """Record an enrollment in the given course."""
        if course_code in self.enrollments:
            raise EnrollmentError(
                f"Error: This student is already enrolled in {course_code}"
            )
        self.enrollments.add(course_code)

    def drop_course(self, course_code: str) -> None:
        """Remove an enrollment in the given course."""
        if course_code not in self.enrollments:
            raise EnrollmentError(
                f"{self.name} is not currently enrolled in this course."
            )
        self.enrollments.discard(course_code)

    def has_course(self, course_code: str) -> bool:
        """Whether the student is enrolled in the course."""
        return course_code in self.enrollments

    def summary(self) -> str:
        """One line with the student's id and name."""
        return f"Student ID: {self.id}, Name: {self.name}"

    def info(self, courses: Mapping[str, Course]) -> str:
        """Full description including a summary of each enrolled course."""
        lines = [
            f"Student ID: {self.id}",
            f"Name: {self.name}",
            "Registered Courses: ",
        ]
        lines.extend(courses[code].summary() for code in sorted(self.enrollments))
        return "\n".join(lines)