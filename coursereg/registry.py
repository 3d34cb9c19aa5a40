"""The registry of students and courses, and the operations that keep both sides in step."""

from __future__ import annotations

import random
from collections.abc import Iterable
from contextlib import suppress
from dataclasses import dataclass, field

from coursereg.models import (
    Course,
    EnrollmentError,
    Placement,
    Student,
    generate_course_code,
    generate_student_id,
)

COURSES_PER_STUDENT = 4


@dataclass
class Registry:
    """All known students and courses, keyed by id and code, with an activity log."""

    students: dict[str, Student] = field(default_factory=dict)
    courses: dict[str, Course] = field(default_factory=dict)
    log: list[str] = field(default_factory=list)

    def load_courses(self, lines: Iterable[str]) -> None:
        """Load tab-separated ``code, title, instructor`` lines.

        A code that is already registered keeps its existing course.
        """
        for number, raw in enumerate(lines, start=1):
            line = raw.rstrip("\r\n")
            if not line.strip():
                continue
            fields = line.split("\t", 2)
            if len(fields) != 3:
                raise ValueError(f"line {number}: expected code, title and instructor")
            code, title, instructor = fields
            self.courses.setdefault(
                code, Course(code=code, title=title, instructor=instructor)
            )
            self.log.append("Course created")

    def load_students(self, lines: Iterable[str]) -> list[str]:
        """Load ``id, name, four course codes`` lines and enroll each student.

        The id and name are tab separated; the course codes follow separated
        by whitespace. Returns the messages of enrollments that were refused.
        """
        warnings: list[str] = []
        for number, raw in enumerate(lines, start=1):
            line = raw.rstrip("\r\n")
            if not line.strip():
                continue
            fields = line.split("\t", 2)
            if len(fields) != 3:
                raise ValueError(f"line {number}: expected id, name and courses")
            student_id, name, rest = fields
            codes = rest.split()
            if len(codes) != COURSES_PER_STUDENT:
                raise ValueError(
                    f"line {number}: expected {COURSES_PER_STUDENT} course codes"
                )
            unknown = [code for code in codes if code not in self.courses]
            if unknown:
                raise ValueError(f"line {number}: unknown course {unknown[0]}")

            student = Student(id=student_id, name=name)
            self.log.append("Student created")
            for code in codes:
                try:
                    student.add_course(code)
                except EnrollmentError as error:
                    warnings.append(str(error))
                try:
                    self.courses[code].add_student(student_id)
                except EnrollmentError as error:
                    warnings.append(str(error))
                self.log.append("Student registered for course")
            self.students.setdefault(student_id, student)
        return warnings

    def create_student(self, name: str, rng: random.Random) -> Student:
        """Register a new student under a freshly generated, unused id."""
        student_id = generate_student_id(rng)
        while student_id in self.students:
            student_id = generate_student_id(rng)
        student = Student(id=student_id, name=name)
        self.students[student_id] = student
        self.log.append("Student created")
        return student

    def create_course(self, title: str, instructor: str, rng: random.Random) -> Course:
        """Register a new course under a freshly generated, unused code."""
        code = generate_course_code(rng)
        while code in self.courses:
            code = generate_course_code(rng)
        course = Course(code=code, title=title, instructor=instructor)
        self.courses[code] = course
        self.log.append("Course created")
        return course

    def rename_student(self, student_id: str, name: str) -> None:
        """Change a student's name."""
        self.students[student_id].name = name
        self.log.append("Student updated")

    def update_course(
        self, code: str, title: str | None = None, instructor: str | None = None
    ) -> None:
        """Change a course's title and/or instructor."""
        course = self.courses[code]
        if title is not None:
            course.title = title
        if instructor is not None:
            course.instructor = instructor
        self.log.append("Course updated")

    def enroll(
        self,
        student_id: str,
        code: str,
        log_message: str = "Student registered for course",
    ) -> Placement:
        """Put a student in a course, or on its waitlist when it is full."""
        student = self.students[student_id]
        course = self.courses[code]
        if (
            student.has_course(code)
            or course.has_student(student_id)
            or student_id in course.waitlist
        ):
            raise EnrollmentError(
                f"{student_id} Error: This student is already enrolled in {course.title}"
            )
        placement = course.add_student(student_id)
        student.add_course(code)
        self.log.append(log_message)
        return placement

    def unenroll(self, student_id: str, code: str) -> str | None:
        """Take a student out of a course or its waitlist.

        Returns the id of the waitlisted student promoted into the freed
        seat, if any.
        """
        student = self.students[student_id]
        course = self.courses[code]
        waitlisted = student_id in course.waitlist
        seated = course.has_student(student_id)
        if not (student.has_course(code) or seated or waitlisted):
            raise EnrollmentError(
                f"{student_id} is not currently enrolled in this course."
            )
        with suppress(EnrollmentError):
            student.drop_course(code)
        promoted = None
        if seated or waitlisted:
            promoted = course.drop_student(student_id)
        self.log.append("Removed student from course")
        return promoted

    def remove_student(self, student_id: str) -> Student:
        """Delete a student and release every seat or waitlist place they held."""
        student = self.students.pop(student_id)
        for course in self.courses.values():
            if course.has_student(student_id) or student_id in course.waitlist:
                course.drop_student(student_id)
        self.log.append("Removed student")
        return student

    def remove_course(self, code: str) -> Course:
        """Delete a course and drop it from every student's enrollments."""
        course = self.courses.pop(code)
        for student in self.students.values():
            if student.has_course(code):
                student.drop_course(code)
        self.log.append("Removed course")
        return course