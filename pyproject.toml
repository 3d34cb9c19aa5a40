[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursereg"
version = "0.1.0"
description = "Interactive registry of university courses, students, enrolments and waitlists"
requires-python = ">=3.10"
dependencies = []
keywords = ["university", "courses", "students", "enrolment", "waitlist", "registry"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coursereg = "coursereg.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["coursereg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
