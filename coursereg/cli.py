"""Interactive console for browsing and editing the course registry."""

from __future__ import annotations

import argparse
import random
import sys
from contextlib import suppress
from typing import TextIO

from coursereg.models import EnrollmentError, Placement
from coursereg.registry import Registry

_MAIN_PROMPT = 'What would you like to do? ("view" or "modify"): '


class _EndOfInput(Exception):
    """The input stream ran out."""


class _Reader:
    """Reads whitespace-separated words and whole lines from one stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def _fill(self) -> bool:
        if not self._pending:
            self._pending = self._stream.readline()
        return bool(self._pending)

    def token(self) -> str:
        while self._fill():
            stripped = self._pending.lstrip()
            if stripped:
                word = stripped.split(maxsplit=1)[0]
                self._pending = stripped[len(word):]
                return word
            self._pending = ""
        raise _EndOfInput

    def ignore(self) -> None:
        """Discard a single character, normally the newline after a word."""
        if self._fill():
            self._pending = self._pending[1:]

    def line(self) -> str:
        if not self._fill():
            raise _EndOfInput
        text, self._pending = self._pending, ""
        return text.rstrip("\r\n")


class _Session:
    def __init__(
        self, registry: Registry, reader: _Reader, out: TextIO, rng: random.Random
    ) -> None:
        self.registry = registry
        self.reader = reader
        self.out = out
        self.rng = rng

    def say(self, text: str = "") -> None:
        self.out.write(text + "\n")

    def ask(self, prompt: str) -> str:
        self.out.write(prompt)
        return self.reader.token()

    def ask_line(self, prompt: str) -> str:
        self.out.write(prompt)
        return self.reader.line()

    def student_id(self) -> str:
        self.out.write("Please enter the ID of the student: ")
        while True:
            student_id = self.reader.token()
            if student_id in self.registry.students:
                return student_id
            self.out.write("This student does not exist. Please try again: ")

    def course_code(self) -> str:
        self.out.write("Please enter the course code: ")
        while True:
            code = self.reader.token()
            if code in self.registry.courses:
                return code
            self.out.write("This course does not exist. Please try again: ")

    def student_info(self, student_id: str) -> None:
        self.say(self.registry.students[student_id].info(self.registry.courses))

    def course_info(self, code: str) -> None:
        self.say(self.registry.courses[code].info(self.registry.students))

    def loop(self) -> None:
        action = self.ask(_MAIN_PROMPT)
        while action != "-1":
            if action == "view":
                self.view()
            elif action == "modify":
                self.modify()
            action = self.ask(_MAIN_PROMPT)

    def view(self) -> None:
        what = self.ask(
            'Type what you would like to view ("student", "course", "log", or "back"): '
        )
        if what == "student":
            kind = self.ask(
                'Type which type of student view you would like '
                '("specific", "overall", or "back"): '
            )
            if kind == "specific":
                self.student_info(self.student_id())
            elif kind == "overall":
                for student_id in sorted(self.registry.students):
                    self.say(self.registry.students[student_id].summary())
        elif what == "course":
            kind = self.ask(
                'Type which type of course view you would like '
                '("specific", "overall", or "back"): '
            )
            if kind == "specific":
                self.course_info(self.course_code())
            elif kind == "overall":
                for code in sorted(self.registry.courses):
                    self.say(self.registry.courses[code].summary())
        elif what == "log":
            for entry in self.registry.log:
                self.say(entry)

    def modify(self) -> None:
        what = self.ask(
            'Type what you would like to do ("add", "update", "remove", or "back"): '
        )
        if what == "add":
            self.add()
        elif what == "update":
            self.update()
        elif what == "remove":
            self.remove()

    def add(self) -> None:
        what = self.ask('What would you like to add? ("student", "course", or "back"): ')
        self.reader.ignore()
        if what == "student":
            self.say("Generating a randomly generated student id...")
            name = self.ask_line("Please type the full name of this student: ")
            self.say("Successfully set name of this student")
            student = self.registry.create_student(name, self.rng)
            self.say(f"ID Generated: {student.id}")
            self.say("Student successfully added to registry.")
        elif what == "course":
            self.say("Generating a randomly generated course code...")
            title = self.ask_line("Please type the title of this course: ")
            self.say("Successfully set title of this course")
            instructor = self.ask_line(
                "Please type the full name of this course's instructor: "
            )
            self.say("Successfully set name of this course's instructor")
            course = self.registry.create_course(title, instructor, self.rng)
            self.say(f"Code Generated: {course.code}")
            self.say("Course successfully added to registry.")

    def update(self) -> None:
        what = self.ask(
            'What would you like to update? ("student", "course", or "back"): '
        )
        self.reader.ignore()
        if what == "student":
            self.update_student()
        elif what == "course":
            self.update_course()

    def update_student(self) -> None:
        student_id = self.student_id()
        self.student_info(student_id)
        what = self.ask(
            'What would you like to update for this student? '
            '("name", "courses", or "back"): '
        )
        self.reader.ignore()
        if what == "name":
            name = self.ask_line("Please type the full name of this student: ")
            self.registry.rename_student(student_id, name)
            self.say("Successfully set name of this student")
        elif what == "courses":
            code = self.course_code()
            self.say(self.registry.courses[code].summary())
            try:
                self.registry.enroll(student_id, code)
            except EnrollmentError as error:
                self.say(str(error))
            else:
                name = self.registry.students[student_id].name
                self.say(f"Successfully enrolled {name} in course {code}")

    def update_course(self) -> None:
        code = self.course_code()
        self.course_info(code)
        what = self.ask(
            'What would you like to update for this course? '
            '("title", "instructor", "students", or "back"): '
        )
        self.reader.ignore()
        if what == "title":
            title = self.ask_line("Please type the title of this course: ")
            self.registry.update_course(code, title=title)
            self.say("Successfully set title of this course")
        elif what == "instructor":
            instructor = self.ask_line(
                "Please type the full name of this course's instructor: "
            )
            self.registry.update_course(code, instructor=instructor)
            self.say("Successfully set name of this course's instructor")
        elif what == "students":
            student_id = self.student_id()
            self.say(self.registry.students[student_id].summary())
            try:
                placement = self.registry.enroll(
                    student_id, code, "Added student to course"
                )
            except EnrollmentError as error:
                self.say(str(error))
            else:
                if placement is Placement.ENROLLED:
                    title = self.registry.courses[code].title
                    self.say(f"Successfully enrolled student in {title}")

    def remove(self) -> None:
        what = self.ask(
            'What would you like to remove? ("student", "course", or "back"): '
        )
        if what == "student":
            how = self.ask(
                "Would you like to remove the student entirely or remove them "
                'from a course? ("student", "course", or "back"): '
            )
            self.reader.ignore()
            student_id = self.student_id()
            self.student_info(student_id)
            if how == "student":
                self.registry.remove_student(student_id)
                self.say("Successfully removed student from the registry.")
            elif how == "course":
                self.remove_from_course(student_id)
        elif what == "course":
            code = self.course_code()
            self.course_info(code)
            self.registry.remove_course(code)
            self.say("Successfully removed course from the registry.")

    def remove_from_course(self, student_id: str) -> None:
        code = self.course_code()
        course = self.registry.courses[code]
        waitlisted = student_id in course.waitlist
        try:
            self.registry.unenroll(student_id, code)
        except EnrollmentError as error:
            self.say(str(error))
        else:
            if waitlisted:
                self.say(f"Successfully removed {student_id} from the waitlist.")
            else:
                self.say(f"Successfully dropped {student_id} from {course.title}")
        self.course_info(code)


def run(
    registry: Registry, stdin: TextIO, stdout: TextIO, rng: random.Random
) -> None:
    """Serve the interactive menu until "-1" is entered or input ends."""
    session = _Session(registry, _Reader(stdin), stdout, rng)
    with suppress(_EndOfInput):
        session.loop()


def main(argv: list[str] | None = None) -> int:
    """Load the course and student files, then start the interactive menu."""
    parser = argparse.ArgumentParser(
        prog="coursereg", description="Manage university courses and students."
    )
    parser.add_argument("--courses", default="courses.txt", help="course list file")
    parser.add_argument("--students", default="students.txt", help="student list file")
    args = parser.parse_args(argv)

    registry = Registry()
    try:
        with open(args.courses, encoding="utf-8") as stream:
            registry.load_courses(stream)
    except OSError:
        print(f"Could not open file {args.courses}.")
        return 1
    except ValueError as error:
        print(f"{args.courses}: {error}")
        return 1
    print(f"Successfully loaded {len(registry.courses)} courses.")

    try:
        with open(args.students, encoding="utf-8") as stream:
            warnings = registry.load_students(stream)
    except OSError:
        print(f"Could not open file {args.students}.")
        return 1
    except ValueError as error:
        print(f"{args.students}: {error}")
        return 1
    for warning in warnings:
        print(warning)
    print(f"Successfully loaded {len(registry.students)} students.")
    print("Starting program...")

    run(registry, sys.stdin, sys.stdout, random.Random())
    return 0