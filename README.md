# coursereg

A small console program for keeping a registry of university courses and
the students enrolled in them. A course keeps taking students until it
holds nine. Anyone who enrols after that goes onto the course's waitlist.
When an enrolled student drops, the first student on the waitlist takes the
freed place.

## Installing

```
pip install .
```

## Data files

On start-up the program reads two tab-separated files. By default it looks
for `courses.txt` and `students.txt` in the current directory.

`courses.txt`, one course per line:

```
<code>\t<title>\t<instructor>
```

`students.txt`, one student per line. Each line ends with exactly four
course codes, separated by whitespace:

```
<id>\t<name>\t<code1> <code2> <code3> <code4>
```

The program skips blank lines. Each course code a student lists has to
appear in `courses.txt`.

If a file cannot be opened or a line is malformed, the program prints a
message and exits with status 1. If a student lists the same course twice,
that enrolment is refused. The refusal is printed as a warning and loading
carries on.

## Running

```
coursereg
coursereg --courses my_courses.txt --students my_students.txt
```

The program then asks what you want to do. Answer with one word at each
prompt:

- `view`: pick `student` or `course`, then `specific` or `overall`.
  - `specific` asks for an ID or a code and prints the full details.
  - `overall` lists every student or course, sorted by ID or code.
  - `log` prints every change made so far.
- `modify`:
  - `add`: make a new `student` or `course`. The program generates a
    random, unused ten-digit student ID or five-digit course code. You type
    the name, or the title and instructor.
  - `update`:
    - For a student, change their `name` or enrol them in a course with
      `courses`.
    - For a course, change its `title` or `instructor`, or enrol
      `students`.
  - `remove`:
    - `student`: drop a student, either from the registry entirely or from
      a single course.
    - `course`: remove a course, which takes it away from every student who
      had it.

Type `-1` at the top-level prompt to quit. The program also stops when its
input ends.

## Using it as a library

`coursereg.models`:

- `Course` and `Student` are dataclasses. Each has `summary()` and `info()`
  methods that return text. `Course` keeps its enrolled students in
  `students` and its queue of waiting students in `waitlist`.
- `Course.add_student` returns a `Placement`, either `ENROLLED` or
  `WAITLISTED`.
- Refused changes raise `EnrollmentError`.
- `generate_course_code(rng)` and `generate_student_id(rng)` produce random
  codes and IDs from a `random.Random`.

`coursereg.registry.Registry` holds the courses, the students and the
change log:

- `load_courses` and `load_students` read the file formats above from any
  iterable of lines.
- `create_student`, `create_course`, `rename_student` and `update_course`
  add and edit entries.
- `enroll`, `unenroll`, `remove_student` and `remove_course` change the
  course and the student together, so the two stay in step.

`coursereg.cli.run(registry, stdin, stdout, rng)` drives the same dialogue
over any pair of text streams.

## What it does not do

Every change lives in memory only. When you quit, the program does not
write anything back to `courses.txt`, `students.txt` or any other file.